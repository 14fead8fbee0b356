#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from webapi import PaginationOptions, WebClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every conversation with auto-pagination")
    p.add_argument("--types", default="public_channel")
    p.add_argument("--limit", type=int, default=200, help="Page size (max 1000)")
    p.add_argument("--max-pages", type=int, default=None)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    token = os.environ["WEBAPI_TOKEN"]
    async with WebClient(headers={"Authorization": f"Bearer {token}"}) as client:
        session = client.paginate(
            "conversations.list",
            {"types": args.types, "limit": args.limit},
            options=PaginationOptions(max_pages=args.max_pages),
        )
        async for page in session:
            for channel in page.items:
                print(f"{page.index:>3} | {channel['id']} | {channel.get('name', '')}")


if __name__ == "__main__":
    asyncio.run(main())
