#!/usr/bin/env python3
"""
Load sheets from the spreadsheet into the cache.

Usage:
    python warm_cache.py                  # Load every sheet (paced, stops on rate limit)
    python warm_cache.py "Home" "Pricing"  # Load specific sheets
    python warm_cache.py --list           # List sheets only
"""

import asyncio
import sys

from app.container import container
from app.errors import MetricsError, SheetsError
from settings import LOG_LEVEL
from settings.logging import setup_logging

logger = setup_logging(level=LOG_LEVEL, to_file=True)


def print_report(results: dict[str, str]) -> bool:
    """Print per-sheet outcome, return True when all sheets loaded."""
    print("\n" + "=" * 60)
    print("CACHE WARM-UP REPORT")
    print("=" * 60)

    all_ok = True
    for title, outcome in results.items():
        ok = outcome.startswith("ok")
        all_ok = all_ok and ok
        print(f"  {'✅' if ok else '❌'} {title}: {outcome}")

    print("=" * 60 + "\n")
    return all_ok


async def list_sheets() -> None:
    sheets = await container.metrics.list_sheets()
    for sheet in sheets:
        print(f"  {sheet.title} ({sheet.row_count} rows)")


async def warm_sheets(titles: list[str]) -> dict[str, str]:
    """Load the named sheets one by one."""
    results = {}
    for title in titles:
        try:
            data = await container.metrics.get_metrics_for_sheet(title)
            results[title] = f"ok, {len(data.data)} points"
        except (MetricsError, SheetsError) as e:
            results[title] = e.message
    return results


async def warm_all() -> dict[str, str]:
    """Bulk path: partial results on rate limit."""
    sheets = await container.metrics.list_sheets()
    loaded = {m.name: m for m in await container.metrics.get_all_metrics()}
    return {s.title: f"ok, {len(loaded[s.title].data)} points" if s.title in loaded else "not loaded" for s in sheets}


async def _main(args: list[str]) -> bool:
    container.init()
    await container.start()
    try:
        if "--list" in args:
            await list_sheets()
            return True

        titles = [a for a in args if not a.startswith("-")]
        if titles:
            logger.info("Warming sheets: {}", titles)
            results = await warm_sheets(titles)
        else:
            logger.info("Warming ALL sheets")
            results = await warm_all()
        return print_report(results)
    finally:
        await container.close()


def main():
    args = sys.argv[1:]
    if "-h" in args or "--help" in args:
        print(__doc__)
        return

    ok = asyncio.run(_main(args))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
