"""Interactive terminal chat against a running AquaQual server.

Usage:
    python -m aquaqual.client --base-url http://localhost:8080
"""

import argparse
import asyncio

from aquaqual.client.session import ChatSession


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Ask about climate risk in South Florida neighborhoods"
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8080",
        help="AquaQual server base URL (default: http://localhost:8080)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=120.0,
        help="Request timeout in seconds (default: 120)",
    )
    return parser.parse_args()


async def run(base_url: str, timeout: float) -> None:
    async with ChatSession(base_url=base_url, timeout=timeout) as session:
        session.map_view.subscribe(
            lambda view: print(f"📍 Map centred on {view.center[0]:.4f}, {view.center[1]:.4f}")
        )
        print("e.g., What's the flood risk in Brickell?  (Ctrl-D to quit)")
        while True:
            try:
                message = await asyncio.to_thread(input, "\n> ")
            except EOFError:
                break

            print("Analyzing...")
            reply = await session.submit(message)
            if reply is not None:
                print(f"\n{reply.content}")


def main() -> None:
    args = parse_args()
    asyncio.run(run(args.base_url, args.timeout))


if __name__ == "__main__":
    main()
