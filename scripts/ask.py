#!/usr/bin/env python3
"""Ask one question and print the extracted knowledge graph.

Usage:
    python scripts/ask.py "How did the printing press change Europe?"
    python scripts/ask.py --json "What is CRISPR?"
    python scripts/ask.py --direct "What is CRISPR?"

Options:
    --api URL   Neurograph API base URL (default: http://localhost:8000)
    --json      Print the raw JSON response
    --direct    Call the chat completion API directly instead of the server
"""

import argparse
import asyncio
import json
import logging
import sys

import httpx

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

API_BASE = "http://localhost:8000"


async def ask_server(question: str, api_base: str) -> dict:
    async with httpx.AsyncClient(base_url=api_base, timeout=None) as client:
        response = await client.post("/v1/graph", json={"question": question})
        if response.status_code >= 400:
            detail = response.json().get("detail", response.text)
            raise RuntimeError(f"{response.status_code}: {detail}")
        return response.json()


async def ask_direct(question: str) -> dict:
    from neurograph.generation import GraphPipeline, LLMClient

    client = LLMClient()
    try:
        graph = await GraphPipeline(llm_client=client).generate(question)
    finally:
        await client.close()
    return graph.to_dict()


def format_graph(data: dict) -> str:
    names = {e["id"]: e["name"] for e in data["entities"]}

    lines = [data["answer"], "", f"Entities ({len(data['entities'])}):"]
    for e in data["entities"]:
        lines.append(f"  {e['name']:30} [{e['type']:12}] {e.get('description') or ''}")

    lines.append("")
    lines.append(f"Relationships ({len(data['relationships'])}):")
    for r in data["relationships"]:
        source = names.get(r["source"], r["source"])
        target = names.get(r["target"], r["target"])
        lines.append(f"  {source} --{r['label']}--> {target}  ({r['strength']:.2f})")

    return "\n".join(lines)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a knowledge graph for a question")
    parser.add_argument("question", help="Question to ask")
    parser.add_argument("--api", default=API_BASE, help="Neurograph API base URL")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    parser.add_argument("--direct", action="store_true", help="Skip the server")
    args = parser.parse_args()

    if not args.question.strip():
        print("Please enter a question first", file=sys.stderr)
        return 1

    try:
        if args.direct:
            data = await ask_direct(args.question)
        else:
            data = await ask_server(args.question, args.api)
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        return 1

    if args.json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(format_graph(data))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
