#!/usr/bin/env python3
"""
Basic BinTreeLib usage.

This example demonstrates:
- Linking nodes into a tree with add()
- Splicing a node between a parent and its existing subtree
- Every traversal order, iterative and recursive
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    BinaryTree,
    BinaryTreeNode,
    ChildDirection,
    TraversalMethod,
    get_tree_stats,
)


def build_tree() -> BinaryTree:
    """Build the tree A(B(D), C)."""
    a, b, c, d = (BinaryTreeNode(v) for v in "ABCD")
    tree = BinaryTree(a)
    tree.add(a, b, ChildDirection.LEFT)
    tree.add(a, c, ChildDirection.RIGHT)
    tree.add(b, d, ChildDirection.LEFT)
    return tree


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    tree = build_tree()

    print("Traversals")
    print("=" * 40)
    for method in TraversalMethod:
        print(f"  {method.value:<10} {' '.join(tree.traverse(method))}")
    for method in ("inorder", "preorder", "postorder"):
        values = tree.traverse(method, recursive=True)
        print(f"  {method + '*':<10} {' '.join(values)}")
    print("  (* recursive form)")

    # Splice E between A and B; B's subtree moves to E's right slot
    e = BinaryTreeNode("E")
    tree.add(tree.root, e, ChildDirection.LEFT, ChildDirection.RIGHT)

    print("\nAfter splicing E above B")
    print("=" * 40)
    print(f"  preorder   {' '.join(tree.traverse())}")
    print(f"  inorder    {' '.join(tree.traverse('inorder'))}")

    stats = get_tree_stats(tree)
    print(f"\nNodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, "
          f"height: {stats['height']}")


if __name__ == "__main__":
    main()
