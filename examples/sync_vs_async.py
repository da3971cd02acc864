#!/usr/bin/env python3
"""
Comparison between sync and async query execution.

This example demonstrates:
- Running the same query with execute_sync() and execute()
- Checking that both return the same paths in the same order
- Streaming matches through an observer
"""

import asyncio
import sys
import time
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from houndtree import CallbackObserver, Query


def build_query(roots: List[Path]) -> Query:
    return Query().paths(roots).ext('py').ignore_hidden_directories().depth(3)


def sync_search(roots: List[Path]) -> Tuple[List[str], float]:
    """Run the query synchronously."""
    start_time = time.perf_counter()
    results = build_query(roots).execute_sync()
    return results, time.perf_counter() - start_time


async def async_search(roots: List[Path]) -> Tuple[List[str], float]:
    """Run the query with one concurrent walker per root."""
    start_time = time.perf_counter()
    observer = CallbackObserver(on_end=lambda: print("  async search finished"))
    results = await build_query(roots).execute(observer)
    return results, time.perf_counter() - start_time


def main():
    roots = [Path(arg) for arg in sys.argv[1:]] or [Path.cwd()]
    print(f"Searching {', '.join(str(root) for root in roots)} for *.py (depth 3)")

    sync_results, sync_elapsed = sync_search(roots)
    print(f"Sync:  {len(sync_results)} files in {sync_elapsed:.3f}s")

    async_results, async_elapsed = asyncio.run(async_search(roots))
    print(f"Async: {len(async_results)} files in {async_elapsed:.3f}s")

    if async_results != sync_results:
        print("Results differ!")
        return 1

    print("Both execution models returned identical, identically ordered results.")
    for path in sync_results[:10]:
        print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
