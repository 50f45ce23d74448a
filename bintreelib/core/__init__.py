"""Core abstractions for BinTreeLib.

This package contains the node types, the traversal algorithms and the
BinaryTree container that links them together.
"""

from .node import Node, NodeList, BinaryTreeNode
from .traverser import BinaryTreeTraverser, create_traverser
from .tree import BinaryTree

__all__ = [
    "Node",
    "NodeList",
    "BinaryTreeNode",
    "BinaryTreeTraverser",
    "create_traverser",
    "BinaryTree",
]
