DASHBOARD_HTML = r"""
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Neurograph - Neural Knowledge Graph</title>
    <link rel="icon" href="/favicon.ico">
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { background: #05060d; font-family: -apple-system, sans-serif; color: #e0e0ff; min-height: 100vh; }
        #app { max-width: 1280px; margin: 0 auto; padding: 24px; }

        #header { display: flex; align-items: center; justify-content: space-between; margin-bottom: 24px; }
        #header h1 { font-size: 28px; font-weight: 700; color: #e0e0ff; }
        #header p { color: #8b949e; font-size: 13px; margin-top: 4px; }
        .badge { padding: 4px 12px; border: 1px solid #1a1a2e; border-radius: 999px; font-size: 12px; color: #8b949e; }

        #layout { display: grid; grid-template-columns: 1fr 2fr; gap: 24px; }
        @media (max-width: 960px) { #layout { grid-template-columns: 1fr; } }

        .card { background: rgba(10,10,18,0.95); border: 1px solid #1a1a2e; border-radius: 8px; padding: 20px; }
        .card label { display: block; font-size: 12px; font-weight: 500; margin-bottom: 6px; color: #c0c0d8; }
        textarea {
            width: 100%; resize: none; background: #0f0f1a; border: 1px solid #1a1a2e;
            border-radius: 6px; color: #e0e0ff; font-size: 13px; font-family: inherit; padding: 10px 12px;
        }
        textarea:focus { outline: none; border-color: #5eead4; }
        textarea::placeholder { color: #4a4a6a; }
        #question { min-height: 120px; }
        #answer { min-height: 200px; }

        .btn {
            width: 100%; padding: 10px 12px; margin: 12px 0; border-radius: 6px; cursor: pointer;
            font-size: 13px; font-weight: 500; border: 1px solid #5eead4;
        }
        .btn-primary { background: #5eead4; color: #05060d; }
        .btn-outline { background: transparent; color: #5eead4; }
        .btn:disabled { opacity: 0.4; cursor: not-allowed; }

        .section { padding-top: 16px; margin-top: 16px; border-top: 1px solid #1a1a2e; }
        .section-title { font-size: 11px; color: #8b949e; margin-bottom: 8px; }
        .stats { display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }
        .stat { background: #0f0f1a; border-radius: 6px; padding: 12px; }
        .stat-label { font-size: 11px; color: #8b949e; }
        .stat-value { font-size: 24px; font-weight: 700; color: #5eead4; }
        .stat-value.secondary { color: #a78bfa; }

        #legend { display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }
        .legend-item { display: flex; align-items: center; gap: 8px; background: #0f0f1a; border: 1px solid #1a1a2e; border-radius: 6px; padding: 6px 8px; }
        .legend-dot { width: 12px; height: 12px; border-radius: 50%; flex-shrink: 0; }
        .legend-type { font-size: 12px; font-weight: 500; text-transform: capitalize; }
        .legend-count { font-size: 10px; color: #8b949e; }

        #viewport { position: relative; height: 600px; overflow: hidden; padding: 0; }
        #canvas-host { width: 100%; height: 100%; }
        #empty-state {
            position: absolute; inset: 0; display: flex; align-items: center; justify-content: center;
            color: #8b949e; font-size: 13px; pointer-events: none;
        }

        .node-label {
            background: rgba(10,10,18,0.95); border: 1px solid #2a2a4e; border-radius: 6px;
            padding: 6px 10px; font-size: 12px; color: #e0e0ff; white-space: nowrap; max-width: 140px;
            pointer-events: none;
        }
        .node-label.selected { border-color: #5eead4; box-shadow: 0 0 0 2px rgba(94,234,212,0.5); }
        .node-label .name { font-weight: 600; overflow: hidden; text-overflow: ellipsis; }
        .node-label .type { display: flex; align-items: center; gap: 6px; margin-top: 4px; font-size: 10px; color: #8b949e; text-transform: capitalize; }
        .node-label .type span.dot { width: 8px; height: 8px; border-radius: 50%; }
        .node-label .desc { font-size: 10px; color: #8b949e; margin-top: 2px; max-width: 130px; overflow: hidden; text-overflow: ellipsis; }
        .edge-label {
            background: rgba(26,26,46,0.9); border: 1px solid #2a2a4e; border-radius: 4px;
            padding: 2px 6px; font-size: 9px; color: #c0c0d8; white-space: nowrap; pointer-events: none;
        }

        #node-info { margin-top: 24px; display: none; }
        #node-info.visible { display: block; }
        #node-info .head { display: flex; justify-content: space-between; align-items: flex-start; }
        #node-info h3 { font-size: 20px; display: flex; align-items: center; gap: 8px; }
        #node-info .type-badge { display: inline-block; margin-top: 8px; padding: 2px 8px; border-radius: 12px; font-size: 10px; background: #1a1a2e; text-transform: capitalize; }
        #node-info .description { color: #8b949e; font-size: 13px; margin-top: 12px; }
        #node-info .close-btn { background: none; border: none; color: #6b6b8a; cursor: pointer; font-size: 20px; }
        #node-info .close-btn:hover { color: #5eead4; }
        .relations { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; margin-top: 16px; }
        .relations h4 { font-size: 13px; margin-bottom: 8px; }
        .relation { font-size: 12px; background: #0f0f1a; border: 1px solid #1a1a2e; border-radius: 4px; padding: 8px; margin: 4px 0; }
        .relation .rel-label { color: #5eead4; font-weight: 500; }
        .relation .arrow { color: #8b949e; }
        .relations .none { font-size: 12px; color: #8b949e; }

        #toasts { position: fixed; bottom: 16px; right: 16px; display: flex; flex-direction: column; gap: 8px; z-index: 1000; }
        .toast { min-width: 280px; max-width: 380px; padding: 12px 16px; border-radius: 8px; border: 1px solid #1a1a2e; background: rgba(10,10,18,0.98); }
        .toast.destructive { border-color: #f87171; background: rgba(127,29,29,0.95); }
        .toast.warning { border-color: #fbbf24; }
        .toast .title { font-size: 13px; font-weight: 600; }
        .toast .description { font-size: 12px; color: #c0c0d8; margin-top: 4px; }
    </style>
    <script type="importmap">
    {
        "imports": {
            "three": "https://unpkg.com/three@0.160.0/build/three.module.js",
            "three/addons/": "https://unpkg.com/three@0.160.0/examples/jsm/"
        }
    }
    </script>
</head>
<body>
    <div id="app">
        <div id="header">
            <div>
                <h1>Neural Knowledge Graph</h1>
                <p>Transform AI conversations into 3D knowledge networks</p>
            </div>
            <span class="badge" id="entity-badge">0 Entities</span>
        </div>

        <div id="layout">
            <div class="card">
                <label for="question">Question</label>
                <textarea id="question" placeholder="What is the relationship between Einstein and quantum mechanics?"></textarea>
                <button class="btn btn-primary" id="generate-btn" disabled>Generate Knowledge Graph</button>

                <label for="answer">AI Response</label>
                <textarea id="answer" readonly placeholder="AI response and extracted knowledge will appear here..."></textarea>

                <button class="btn btn-outline" id="reset-btn">Reset Graph</button>

                <div class="section">
                    <div class="section-title">Graph Statistics</div>
                    <div class="stats">
                        <div class="stat"><div class="stat-label">Entities</div><div class="stat-value" id="entity-count">0</div></div>
                        <div class="stat"><div class="stat-label">Relations</div><div class="stat-value secondary" id="relation-count">0</div></div>
                    </div>
                </div>

                <div class="section" id="legend-section" style="display:none">
                    <div class="section-title">Entity Categories</div>
                    <div id="legend"></div>
                </div>
            </div>

            <div class="card" id="viewport">
                <div id="canvas-host"></div>
                <div id="empty-state">Enter a question to generate an AI-powered knowledge graph</div>
            </div>
        </div>

        <div class="card" id="node-info">
            <div class="head">
                <div>
                    <h3><span class="legend-dot" id="info-dot"></span><span id="info-name"></span></h3>
                    <span class="type-badge" id="info-type"></span>
                </div>
                <button class="close-btn" id="info-close">&times;</button>
            </div>
            <p class="description" id="info-description"></p>
            <div class="relations">
                <div><h4 id="outgoing-title"></h4><div id="outgoing-list"></div></div>
                <div><h4 id="incoming-title"></h4><div id="incoming-list"></div></div>
            </div>
        </div>
    </div>
    <div id="toasts"></div>

    <script type="module">
        import * as THREE from 'three';
        import { OrbitControls } from 'three/addons/controls/OrbitControls.js';
        import { CSS2DRenderer, CSS2DObject } from 'three/addons/renderers/CSS2DRenderer.js';

        const questionEl = document.getElementById('question');
        const answerEl = document.getElementById('answer');
        const generateBtn = document.getElementById('generate-btn');
        const resetBtn = document.getElementById('reset-btn');
        const host = document.getElementById('canvas-host');

        let state = null;
        let loading = false;
        let view = null;  // three.js objects for the mounted scene
        let hoveredId = null;

        // ------------------------------------------------------------------
        // HTTP
        // ------------------------------------------------------------------
        async function api(method, path, body) {
            const options = { method, headers: { 'Content-Type': 'application/json' } };
            if (body !== undefined) options.body = JSON.stringify(body);
            const res = await fetch(path, options);
            if (!res.ok) throw new Error(`${res.status} ${res.statusText}`);
            return res.json();
        }

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text == null ? '' : String(text);
            return div.innerHTML;
        }

        function toast(notification) {
            const el = document.createElement('div');
            el.className = 'toast ' + (notification.variant || 'default');
            el.innerHTML = `<div class="title">${escapeHtml(notification.title)}</div>` +
                `<div class="description">${escapeHtml(notification.description)}</div>`;
            document.getElementById('toasts').appendChild(el);
            setTimeout(() => el.remove(), 5000);
        }

        // ------------------------------------------------------------------
        // Scene
        // ------------------------------------------------------------------
        function mountScene(scene) {
            unmountScene();

            const width = host.clientWidth;
            const height = host.clientHeight;

            const renderer = new THREE.WebGLRenderer({ antialias: true });
            renderer.setPixelRatio(window.devicePixelRatio);
            renderer.setSize(width, height);
            host.appendChild(renderer.domElement);

            const labelRenderer = new CSS2DRenderer();
            labelRenderer.setSize(width, height);
            labelRenderer.domElement.style.position = 'absolute';
            labelRenderer.domElement.style.top = '0';
            labelRenderer.domElement.style.pointerEvents = 'none';
            host.appendChild(labelRenderer.domElement);

            const world = new THREE.Scene();
            world.background = new THREE.Color(scene.background);

            const camera = new THREE.PerspectiveCamera(scene.camera.fov, width / height, 0.1, 1000);
            camera.position.set(...scene.camera.position);

            for (const light of scene.lights) {
                if (light.kind === 'ambient') {
                    world.add(new THREE.AmbientLight(light.color, light.intensity));
                } else {
                    const point = new THREE.PointLight(light.color, light.intensity, 0, 0);
                    point.position.set(...light.position);
                    world.add(point);
                }
            }

            const grid = scene.grid;
            world.add(new THREE.GridHelper(grid.size, grid.divisions, grid.center_color, grid.line_color));

            const controls = new OrbitControls(camera, renderer.domElement);
            controls.enableDamping = scene.controls.enable_damping;
            controls.dampingFactor = scene.controls.damping_factor;
            controls.enableZoom = scene.controls.enable_zoom;
            controls.enablePan = scene.controls.enable_pan;
            controls.minDistance = scene.controls.min_distance;
            controls.maxDistance = scene.controls.max_distance;

            const group = new THREE.Group();
            world.add(group);

            view = {
                key: scene.key,
                renderer, labelRenderer, world, camera, controls, group,
                clock: new THREE.Clock(),
                raycaster: new THREE.Raycaster(),
                pointer: new THREE.Vector2(),
                meshes: new Map(),
                labels: new Map(),
                signature: null,
                frame: null,
                scene,
            };

            renderer.domElement.addEventListener('pointerdown', onPointerDown);
            renderer.domElement.addEventListener('pointerup', onPointerUp);
            renderer.domElement.addEventListener('pointermove', onPointerMove);
            animate();
        }

        function unmountScene() {
            if (!view) return;
            cancelAnimationFrame(view.frame);
            view.controls.dispose();
            clearGroup();
            view.renderer.dispose();
            host.innerHTML = '';
            document.body.style.cursor = 'default';
            view = null;
            hoveredId = null;
        }

        function clearGroup() {
            for (const child of [...view.group.children]) {
                child.traverse(obj => {
                    if (obj.geometry) obj.geometry.dispose();
                    if (obj.material) obj.material.dispose();
                    if (obj.isCSS2DObject) obj.element.remove();
                });
                view.group.remove(child);
            }
            view.meshes.clear();
            view.labels.clear();
        }

        function graphSignature(scene) {
            return JSON.stringify([scene.nodes.map(n => [n.id, n.position]), scene.edges.map(e => e.key)]);
        }

        function buildGraph(scene) {
            clearGroup();
            const material = scene.material;

            for (const edge of scene.edges) {
                const geometry = new THREE.BufferGeometry().setFromPoints([
                    new THREE.Vector3(...edge.start),
                    new THREE.Vector3(...edge.end),
                ]);
                const line = new THREE.Line(geometry, new THREE.LineBasicMaterial({
                    color: scene.edge_style.color, transparent: true, opacity: scene.edge_style.opacity,
                }));
                view.group.add(line);

                const el = document.createElement('div');
                el.className = 'edge-label';
                el.textContent = edge.label;
                const label = new CSS2DObject(el);
                label.position.set(...edge.midpoint);
                view.group.add(label);
            }

            for (const node of scene.nodes) {
                const holder = new THREE.Group();
                holder.position.set(...node.position);

                const base = scene.appearance.idle.radius;
                const mesh = new THREE.Mesh(
                    new THREE.SphereGeometry(base, material.segments, material.segments),
                    new THREE.MeshStandardMaterial({
                        color: node.color, emissive: node.color,
                        emissiveIntensity: node.emissive_intensity,
                        metalness: material.metalness, roughness: material.roughness,
                    }),
                );
                mesh.userData = { id: node.id, phase: node.position[0], baseRadius: base };
                holder.add(mesh);

                const el = document.createElement('div');
                el.className = 'node-label';
                el.innerHTML = `<div class="name">${escapeHtml(node.label)}</div>` +
                    `<div class="type"><span class="dot" style="background:${node.color}"></span>${escapeHtml(node.type)}</div>` +
                    (node.description ? `<div class="desc">${escapeHtml(node.description)}</div>` : '');
                const label = new CSS2DObject(el);
                holder.add(label);

                view.group.add(holder);
                view.meshes.set(node.id, mesh);
                view.labels.set(node.id, label);
            }
        }

        function applyAppearance() {
            const scene = view.scene;
            for (const node of scene.nodes) {
                const mesh = view.meshes.get(node.id);
                const label = view.labels.get(node.id);
                if (!mesh) continue;
                let look = node.selected ? scene.appearance.selected : scene.appearance.idle;
                if (!node.selected && hoveredId === node.id) look = scene.appearance.hovered;
                mesh.scale.setScalar(look.radius / mesh.userData.baseRadius);
                mesh.material.emissiveIntensity = look.emissive_intensity;
                label.position.set(0, look.radius + scene.appearance.label_offset, 0);
                label.element.classList.toggle('selected', node.selected);
            }
        }

        function renderScene(scene) {
            if (!view || view.key !== scene.key) mountScene(scene);
            view.scene = scene;
            const signature = graphSignature(scene);
            if (signature !== view.signature) {
                buildGraph(scene);
                view.signature = signature;
            }
            applyAppearance();
        }

        function animate() {
            view.frame = requestAnimationFrame(animate);
            const anim = view.scene.animation;
            const t = view.clock.getElapsedTime();
            for (const mesh of view.meshes.values()) {
                mesh.rotation.y += anim.node_spin;
                mesh.position.y += Math.sin(t * anim.bob_frequency + mesh.userData.phase) * anim.bob_amplitude;
            }
            view.group.rotation.y += anim.group_spin;
            view.controls.update();
            view.renderer.render(view.world, view.camera);
            view.labelRenderer.render(view.world, view.camera);
        }

        // ------------------------------------------------------------------
        // Picking
        // ------------------------------------------------------------------
        let downAt = null;

        function pick(event) {
            const rect = view.renderer.domElement.getBoundingClientRect();
            view.pointer.x = ((event.clientX - rect.left) / rect.width) * 2 - 1;
            view.pointer.y = -((event.clientY - rect.top) / rect.height) * 2 + 1;
            view.raycaster.setFromCamera(view.pointer, view.camera);
            const hits = view.raycaster.intersectObjects([...view.meshes.values()], false);
            return hits.length ? hits[0].object.userData.id : null;
        }

        function onPointerDown(event) {
            downAt = { x: event.clientX, y: event.clientY };
        }

        async function onPointerUp(event) {
            if (!downAt) return;
            const moved = Math.hypot(event.clientX - downAt.x, event.clientY - downAt.y);
            downAt = null;
            if (moved > 4) return;  // orbit drag
            const id = pick(event);
            if (id === null) return;
            try {
                render(await api('POST', '/api/selection/toggle', { node_id: id }));
            } catch (e) {
                toast({ title: 'Error', description: e.message, variant: 'destructive' });
            }
        }

        function onPointerMove(event) {
            const id = pick(event);
            if (id !== hoveredId) {
                hoveredId = id;
                document.body.style.cursor = id ? 'pointer' : 'default';
                applyAppearance();
            }
        }

        // ------------------------------------------------------------------
        // Panels
        // ------------------------------------------------------------------
        function relationRows(relations, outgoing) {
            if (!relations.length) {
                return `<p class="none">No ${outgoing ? 'outgoing' : 'incoming'} relations</p>`;
            }
            return relations.map(r => {
                const label = `<span class="rel-label">${escapeHtml(r.label)}</span>`;
                const other = `<span>${escapeHtml(r.other_label)}</span>`;
                const arrow = '<span class="arrow"> &rarr; </span>';
                return `<div class="relation">${outgoing ? label + arrow + other : other + arrow + label}</div>`;
            }).join('');
        }

        function renderDetail(detail) {
            const panel = document.getElementById('node-info');
            if (!detail) {
                panel.classList.remove('visible');
                return;
            }
            const node = detail.node;
            const sceneNode = state.scene.nodes.find(n => n.id === node.id);
            document.getElementById('info-dot').style.background = sceneNode ? sceneNode.color : '#64748b';
            document.getElementById('info-name').textContent = node.label;
            document.getElementById('info-type').textContent = node.type;
            document.getElementById('info-description').textContent = node.description || '';
            document.getElementById('outgoing-title').textContent = `Outgoing Relations (${detail.outgoing.length})`;
            document.getElementById('incoming-title').textContent = `Incoming Relations (${detail.incoming.length})`;
            document.getElementById('outgoing-list').innerHTML = relationRows(detail.outgoing, true);
            document.getElementById('incoming-list').innerHTML = relationRows(detail.incoming, false);
            panel.classList.add('visible');
        }

        function renderLegend(legend) {
            document.getElementById('legend-section').style.display = legend.length ? 'block' : 'none';
            document.getElementById('legend').innerHTML = legend.map(item =>
                `<div class="legend-item"><span class="legend-dot" style="background:${item.color}"></span>` +
                `<div><div class="legend-type">${escapeHtml(item.type)}</div>` +
                `<div class="legend-count">${item.count} nodes</div></div></div>`
            ).join('');
        }

        function updateButtons() {
            generateBtn.disabled = loading || !questionEl.value.trim();
            generateBtn.textContent = loading ? 'Analyzing...' : 'Generate Knowledge Graph';
            resetBtn.disabled = loading;
            questionEl.disabled = loading;
        }

        function render(next) {
            state = next;
            answerEl.value = state.answer;
            document.getElementById('entity-badge').textContent = `${state.entity_count} Entities`;
            document.getElementById('entity-count').textContent = state.entity_count;
            document.getElementById('relation-count').textContent = state.relationship_count;
            document.getElementById('empty-state').style.display = state.entity_count ? 'none' : 'flex';
            renderLegend(state.legend);
            renderDetail(state.detail);
            renderScene(state.scene);
            updateButtons();
        }

        // ------------------------------------------------------------------
        // Actions
        // ------------------------------------------------------------------
        generateBtn.addEventListener('click', async () => {
            loading = true;
            updateButtons();
            try {
                const result = await api('POST', '/api/generate', { question: questionEl.value });
                toast(result.notification);
                render(result.state);
            } catch (e) {
                toast({ title: 'Error', description: e.message, variant: 'destructive' });
            } finally {
                loading = false;
                updateButtons();
            }
        });

        resetBtn.addEventListener('click', async () => {
            render(await api('POST', '/api/reset'));
            questionEl.value = '';
            updateButtons();
        });

        document.getElementById('info-close').addEventListener('click', async () => {
            render(await api('POST', '/api/selection/clear'));
        });

        questionEl.addEventListener('input', updateButtons);

        window.addEventListener('resize', () => {
            if (!view) return;
            const width = host.clientWidth;
            const height = host.clientHeight;
            view.camera.aspect = width / height;
            view.camera.updateProjectionMatrix();
            view.renderer.setSize(width, height);
            view.labelRenderer.setSize(width, height);
        });

        async function init() {
            try {
                const initial = await api('GET', '/api/state');
                questionEl.value = initial.question;
                render(initial);
            } catch (e) {
                console.error('Failed to initialize dashboard:', e);
                toast({ title: 'Error', description: 'Failed to load dashboard: ' + e.message, variant: 'destructive' });
            }
        }

        init();
    </script>
</body>
</html>
"""
