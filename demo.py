"""
Fetch Demo Script

This script demonstrates the client against the live service by:
1. Fetching all artwork for a movie (plain URL form)
2. Fetching only the newest movie art (full URL form)

Usage: python demo.py API_KEY [MOVIE_ID]
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from fanart_client import (
    FanartClient,
    ImageCategory,
    ResponseFormat,
    ResultLimit,
    SortOrder,
    TransportError,
)
from fanart_client.main import setup_logging


def demonstrate_fetch(api_key: str, movie_id: str):
    """Run both request shapes and print a preview of each body."""
    print("=" * 60)
    print("Fanart.tv Fetch Demo")
    print("=" * 60)

    client = FanartClient(api_key, ResponseFormat.JSON)

    requests = [
        ("All artwork", (ImageCategory.ALL, SortOrder.MOST_POPULAR_THEN_NEWEST, ResultLimit.ALL)),
        ("Newest movie art", (ImageCategory.MOVIE_ART, SortOrder.NEWEST, ResultLimit.FIRST)),
    ]

    for i, (label, selectors) in enumerate(requests, start=1):
        print(f"\n[{i}/{len(requests)}] {label}")
        print(f"      URL: {client.build_url(movie_id, *selectors)}")

        try:
            body = client.fetch_by_movie_id(movie_id, *selectors)
        except TransportError as e:
            print(f"      [X] Failed: {e}")
            continue

        print(f"      [OK] {len(body)} chars")
        print(f"      {body[:200]}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python demo.py API_KEY [MOVIE_ID]")
        sys.exit(2)

    setup_logging("INFO")
    demonstrate_fetch(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else "tt0133093")
