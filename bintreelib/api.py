"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common operations on
binary trees. They accept either a BinaryTree or a bare root node and wrap
the object-oriented API for ease of use in simple cases.
"""

from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalMethod, parse_method
from .core.node import BinaryTreeNode
from .core.tree import BinaryTree
from .planning import TraversalPlan


TreeOrNode = Union[BinaryTree, BinaryTreeNode, None]


def traverse_tree(
    root: TreeOrNode,
    method: Union[TraversalMethod, str] = TraversalMethod.PREORDER,
    recursive: bool = False,
) -> List[Any]:
    """Simple interface for binary tree traversal.

    Args:
        root: Tree or starting node
        method: Traversal method (bfs, dfs, inorder, preorder, postorder)
        recursive: Use the recursive form of inorder/preorder/postorder

    Returns:
        Values of the visited nodes, in visiting order

    Example:
        >>> root = BinaryTreeNode(2, BinaryTreeNode(1), BinaryTreeNode(3))
        >>> traverse_tree(root, "inorder")
        [1, 2, 3]
    """
    config = TraversalConfig(method=parse_method(method), recursive=recursive)
    return TraversalPlan(config).execute(_resolve_root(root))


def count_nodes(root: TreeOrNode) -> int:
    """Count the nodes reachable from a tree's root or a node.

    Example:
        >>> count_nodes(BinaryTreeNode(1, BinaryTreeNode(2)))
        2
    """
    return len(traverse_tree(root, TraversalMethod.BFS))


def find_values(
    root: TreeOrNode,
    predicate: Callable[[Any], bool],
    method: Union[TraversalMethod, str] = TraversalMethod.PREORDER,
) -> List[Any]:
    """Find values that match a predicate.

    Args:
        root: Tree or starting node
        predicate: Function that returns True for matching values
        method: Traversal method deciding the order of the result

    Returns:
        Matching values, in visiting order

    Example:
        >>> root = BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3))
        >>> find_values(root, lambda v: v % 2 == 1)
        [1, 3]
    """
    return [value for value in traverse_tree(root, method) if predicate(value)]


def get_leaf_values(root: TreeOrNode) -> List[Any]:
    """Get the values of all leaf nodes, left to right.

    Example:
        >>> root = BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3))
        >>> get_leaf_values(root)
        [2, 3]
    """
    start = _resolve_root(root)
    leaves: List[Any] = []
    stack: List[BinaryTreeNode] = [start] if start is not None else []

    while stack:
        node = stack.pop()
        if node.is_leaf():
            leaves.append(node.value)
        else:
            # Push right first so the left subtree is visited first
            stack.extend(reversed(node.children))
    return leaves


def get_tree_height(root: TreeOrNode) -> int:
    """Number of levels in the tree (0 for an empty tree, 1 for a single node)."""
    height = 0
    for _, depth in _walk_with_depth(_resolve_root(root)):
        height = max(height, depth + 1)
    return height


def get_tree_stats(root: TreeOrNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Tree or starting node

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(BinaryTreeNode(1, BinaryTreeNode(2)))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['height']
        (2, 1, 2)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {}
    }

    for node, depth in _walk_with_depth(_resolve_root(root)):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _resolve_root(root: TreeOrNode) -> Optional[BinaryTreeNode]:
    """Return the starting node for a tree or node argument."""
    if isinstance(root, BinaryTree):
        return root.root
    return root


def _walk_with_depth(start: Optional[BinaryTreeNode]) -> List[Tuple[BinaryTreeNode, int]]:
    """Level-order walk returning (node, depth) pairs, depth relative to start."""
    walked: List[Tuple[BinaryTreeNode, int]] = []
    if start is None:
        return walked

    queue: Deque[Tuple[BinaryTreeNode, int]] = deque([(start, 0)])
    while queue:
        node, depth = queue.popleft()
        walked.append((node, depth))
        for child in node.children:
            queue.append((child, depth + 1))
    return walked
