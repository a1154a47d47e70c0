#!/usr/bin/env python3
"""
Worked example for OrderTreeLib.

This example demonstrates:
- Building an ordered tree and visiting it in sorted order
- Ties going to the right subtree
- Borrowing versus taking a payload
- Collecting a lazy floating-point range
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import (
    OrderedTree,
    LazyRange,
    ListCollector,
    TreeConfig,
    print_tree,
)


def tree_demo():
    """Insert a few words and print them in order."""
    print("1. Ordered tree")
    tree = OrderedTree("root")
    for word in ("one", "two", "four"):
        tree.insert(word)
    print_tree(tree, render=lambda word: f"   {word}")

    print("\n2. Ties go right")
    tree.insert("root")
    print(f"   {list(tree)}")

    print("\n3. Borrow vs take")
    view = tree.borrow()
    print(f"   borrowed root: {view.value}")
    drained = tree.drain()
    print(f"   drained: {drained}")
    print(f"   view still valid? {view.is_valid}")


def deep_tree_demo():
    """Sorted input builds a chain; iterative mode walks it safely."""
    print("\n4. Skewed input")
    depth = sys.getrecursionlimit() * 2
    tree = OrderedTree(0, config=TreeConfig.deep_safe())
    tree.extend(range(1, depth))
    print(f"   {len(tree)} nodes, height {tree.height()}")


def range_demo():
    """Collect a lazy range of tenths."""
    print("\n5. Lazy range")
    values = ListCollector().collect(LazyRange(0.0, 1.0, 0.1))
    print(f"   {len(values)} values: {', '.join(f'{v:.1f}' for v in values)}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("OrderTreeLib worked example")
    print("=" * 60)
    tree_demo()
    deep_tree_demo()
    range_demo()


if __name__ == "__main__":
    main()
