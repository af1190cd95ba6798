from __future__ import annotations

"""Simple smoke-test script for a local server run.

Starts `main.py` as a subprocess over stdio, lists tools and optionally
calls one. Needs WEATHER_API_KEY in the environment (or .env).

Usage examples:
    python scripts/smoke_test.py
    python scripts/smoke_test.py --skip-call
    python scripts/smoke_test.py --tool get_weather_forecast --location "Tokyo" --days 2
"""

import argparse
import json
import os
import sys
from pathlib import Path

import anyio
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

ROOT = Path(__file__).resolve().parent.parent


def _build_arguments(args: argparse.Namespace) -> dict[str, object]:
    arguments: dict[str, object] = {"location": args.location}
    if args.tool == "get_weather_forecast":
        arguments["days"] = args.days
    if args.tool == "get_weather_history":
        arguments["date"] = args.date
    return arguments


async def _run(args: argparse.Namespace) -> int:
    params = StdioServerParameters(
        command=sys.executable,
        args=[str(ROOT / "main.py")],
        env=dict(os.environ),
        cwd=str(ROOT),
    )
    print(f"[INFO] Smoke test started: {params.command} {' '.join(params.args)}")

    async with stdio_client(params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            # Step 1: tool discovery must return the three weather tools.
            tools = await session.list_tools()
            print(f"[OK] tools/list -> {len(tools.tools)} tools")
            for tool in tools.tools:
                print(json.dumps({"name": tool.name, "inputSchema": tool.inputSchema}, ensure_ascii=False, indent=2))

            if args.skip_call:
                print("[INFO] Call step skipped by --skip-call")
                return 0

            # Step 2: one real upstream call.
            arguments = _build_arguments(args)
            result = await session.call_tool(args.tool, arguments)
            text = "\n".join(block.text for block in result.content if block.type == "text")
            if result.isError:
                print(f"[FAIL] tools/call {args.tool}: {text}")
                return 1

            print(f"[OK] tools/call {args.tool}")
            print(text)
            return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Quick smoke test for the MCP weather server.")
    parser.add_argument(
        "--tool",
        default="get_current_weather",
        choices=["get_current_weather", "get_weather_forecast", "get_weather_history"],
        help="Tool to call",
    )
    parser.add_argument("--location", default="London", help="Location argument")
    parser.add_argument("--days", type=int, default=3, help="Forecast days")
    parser.add_argument("--date", default="2024-01-01", help="History date (YYYY-MM-DD)")
    parser.add_argument(
        "--skip-call",
        action="store_true",
        help="Run only tools/list",
    )
    args = parser.parse_args()
    return anyio.run(_run, args)


if __name__ == "__main__":
    raise SystemExit(main())
