#!/usr/bin/env python3
"""Example Serper usage: a web search and an image search.

Run from the repository root with SERPER_API_KEY set (or in .env):
    PYTHONPATH=src python src/scripts/example.py
"""

import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from common.config import config  # noqa: E402
from services.serper.client import SerperClient, with_timeout  # noqa: E402
from services.serper.constants import GL_UNITED_STATES, HL_ENGLISH  # noqa: E402
from services.serper.errors import APIError  # noqa: E402
from services.serper.schemas import Request  # noqa: E402


def handle_error(e: Exception) -> None:
    if isinstance(e, APIError):
        print(f"Serper API Error: {e.message} (Status: {e.status_code})")
        return
    print(f"Unexpected Error: {e!r}")


async def main() -> int:
    if not config.serper_api_key.get_secret_value():
        print("Error: SERPER_API_KEY is not set")
        return 1

    async with SerperClient.from_config(with_timeout(10)) as client:
        print("Searching for 'Python programming' in the US...")
        request = Request(q="Python programming", gl=GL_UNITED_STATES, hl=HL_ENGLISH)
        try:
            search = await client.search(request)
        except Exception as e:
            handle_error(e)
        else:
            print(f"Results (Credits: {search.credits}):")
            for result in search.organic:
                print(f"- {result}")

        print("\nSearching for images...")
        try:
            images = await client.images(Request(q="Python logo"))
        except Exception as e:
            handle_error(e)
        else:
            for result in images.images[:3]:
                print(f"- {result.image_url}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
