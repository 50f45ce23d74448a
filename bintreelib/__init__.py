"""BinTreeLib - Generic Binary Tree Container.

BinTreeLib stores values of any type in a node-linked binary tree. Nodes are
linked explicitly by the caller, and the tree can be walked in five orders:
breadth-first, depth-first, inorder, preorder and postorder. Inorder,
preorder and postorder also come in a recursive form.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import BinaryTree, BinaryTreeNode, ChildDirection

    a = BinaryTreeNode("A")
    tree = BinaryTree(a)
    tree.add(a, BinaryTreeNode("B"), ChildDirection.LEFT)
    tree.traverse("inorder")
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node, NodeList, BinaryTreeNode
from .core.traverser import (
    BinaryTreeTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    RecursiveInorderTraverser,
    RecursivePreorderTraverser,
    RecursivePostorderTraverser,
    create_traverser,
)
from .core.tree import BinaryTree

# Configuration and planning
from .config import ChildDirection, TraversalMethod, TraversalConfig
from .planning import TraversalPlan
from .exceptions import BinaryTreeError, InvalidArgumentError, TraversalConfigError

# High-level API
from .api import (
    traverse_tree,
    count_nodes,
    find_values,
    get_leaf_values,
    get_tree_height,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Core
    'Node',
    'NodeList',
    'BinaryTreeNode',
    'BinaryTreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstTraverser',
    'InorderTraverser',
    'PreorderTraverser',
    'PostorderTraverser',
    'RecursiveInorderTraverser',
    'RecursivePreorderTraverser',
    'RecursivePostorderTraverser',
    'create_traverser',
    'BinaryTree',
    # Config
    'ChildDirection',
    'TraversalMethod',
    'TraversalConfig',
    'TraversalPlan',
    # Errors
    'BinaryTreeError',
    'InvalidArgumentError',
    'TraversalConfigError',
    # API
    'traverse_tree',
    'count_nodes',
    'find_values',
    'get_leaf_values',
    'get_tree_height',
    'get_tree_stats',
]
