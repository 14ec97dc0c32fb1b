"""3D knowledge graph dashboard page."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from neurograph.api.graph_template import DASHBOARD_HTML

router = APIRouter()

# SVG favicon matching the graph theme
FAVICON_SVG = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>
<circle cx='50' cy='50' r='40' fill='#0a0a12' stroke='#5eead4' stroke-width='6'/>
<circle cx='50' cy='50' r='15' fill='#8b5cf6'/>
<circle cx='30' cy='35' r='8' fill='#f59e0b'/>
<circle cx='70' cy='35' r='8' fill='#10b981'/>
<line x1='50' y1='50' x2='30' y2='35' stroke='#60a5fa' stroke-width='2'/>
<line x1='50' y1='50' x2='70' y2='35' stroke='#60a5fa' stroke-width='2'/>
</svg>"""


@router.get("/favicon.ico")
async def favicon() -> Response:
    """Return SVG favicon."""
    return Response(content=FAVICON_SVG, media_type="image/svg+xml")


@router.get("/", response_class=HTMLResponse)
async def dashboard_view() -> str:
    """Serve the 3D knowledge graph dashboard."""
    return DASHBOARD_HTML
