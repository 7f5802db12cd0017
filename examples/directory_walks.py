#!/usr/bin/env python3
"""
Walk a directory tree lazily with walkerlib.

This example demonstrates:
- A tree walker over the filesystem (successors = directory entries)
- Stopping early without listing the rest of the tree
- Post-order walks for bottom-up work such as size totals
- A graph walker that follows symlinks without looping forever
"""

import asyncio
import sys
from itertools import islice
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkerlib.sync import Walker
from walkerlib.aio import AsyncWalker


def entries(path: Path):
    """Directory entries, or None for files (leaves)."""
    if path.is_dir() and not path.is_symlink():
        return sorted(path.iterdir())
    return None


def resolved_entries(path: Path):
    if path.is_dir():
        return sorted(p.resolve() for p in path.iterdir())
    return None


async def async_entries(path: Path):
    # Directory listing off the event loop
    return await asyncio.get_running_loop().run_in_executor(None, entries, path)


def main():
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print(f"First 10 paths under {root} (pre-order):")
    print("-" * 50)
    for path in islice(Walker.tree(entries).pre_order(root), 10):
        print(f"  {path}")

    print("\nDirectory sizes (post-order, children first):")
    print("-" * 50)
    sizes = {}
    for path in Walker.tree(entries).post_order(root):
        if path.is_dir() and not path.is_symlink():
            sizes[path] = sum(sizes.pop(child, 0) for child in path.iterdir())
        else:
            sizes[path] = path.lstat().st_size
    print(f"  {root}: {sizes[root]:,} bytes")

    graph = Walker.graph(resolved_entries)
    count = sum(1 for _ in graph.breadth_first(root.resolve()))
    print(f"\nDistinct paths following symlinks: {count:,}")

    async def count_async():
        return sum([1 async for _ in AsyncWalker.tree(async_entries).breadth_first(root)])

    print(f"Paths found by the async walker: {asyncio.run(count_async()):,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
