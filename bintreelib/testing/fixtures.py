"""Test fixtures for BinTreeLib consumers.

These helpers build binary trees of known shape so test suites can check
traversal results without wiring nodes by hand.
"""

from typing import Any, Dict, Optional, Sequence

from ..config import ChildDirection
from ..core.node import BinaryTreeNode
from ..core.tree import BinaryTree


def build_tree_from_levels(values: Sequence[Any]) -> BinaryTree:
    """Build a tree from values listed in level order.

    None marks an empty position, as in the usual array layout of a binary
    tree: the children of position i sit at 2*i + 1 and 2*i + 2. Positions
    under an empty slot must also be None.

    Example:
        >>> tree = build_tree_from_levels([1, 2, 3, None, 4])
        >>> tree.traverse()
        [1, 2, 4, 3]

    Args:
        values: Node values in level order

    Returns:
        BinaryTree whose root holds values[0] (empty if there is none)

    Raises:
        ValueError: If a value sits under an empty position
    """
    if not values or values[0] is None:
        return BinaryTree()

    nodes = [BinaryTreeNode(value) if value is not None else None for value in values]
    tree = BinaryTree(nodes[0])

    for index, node in enumerate(nodes[1:], start=1):
        if node is None:
            continue
        parent = nodes[(index - 1) // 2]
        if parent is None:
            raise ValueError(
                f"value {values[index]!r} at position {index} has no parent"
            )
        direction = ChildDirection.LEFT if index % 2 == 1 else ChildDirection.RIGHT
        tree.add(parent, node, direction)

    return tree


def sample_tree() -> BinaryTree:
    """Build the four-node reference tree.

    Shape:
            A
           / \\
          B   C
         /
        D

    Expected orders:
        preorder  A B D C
        inorder   D B A C
        postorder D B C A
        bfs       A B C D
    """
    a, b, c, d = (BinaryTreeNode(v) for v in "ABCD")
    tree = BinaryTree(a)
    tree.add(a, b, ChildDirection.LEFT)
    tree.add(a, c, ChildDirection.RIGHT)
    tree.add(b, d, ChildDirection.LEFT)
    return tree


def describe_shape(node: Optional[BinaryTreeNode]) -> Optional[Dict[str, Any]]:
    """Return a nested dict describing a subtree, for readable assertions.

    Example:
        >>> describe_shape(BinaryTreeNode(1, BinaryTreeNode(2)))
        {'value': 1, 'left': {'value': 2, 'left': None, 'right': None}, 'right': None}
    """
    if node is None:
        return None
    return {
        'value': node.value,
        'left': describe_shape(node.left),
        'right': describe_shape(node.right),
    }
