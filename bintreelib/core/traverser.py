"""Tree traversal strategies for BinTreeLib.

Traversers implement the different algorithms for walking a binary tree.
Each one reads the tree starting at a given node and returns a new list of
the values it visited. None of them modify the tree.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, List, Optional, Type, TypeVar

from ..config import TraversalMethod
from ..exceptions import TraversalConfigError
from .node import BinaryTreeNode

T = TypeVar('T')


class BinaryTreeTraverser(ABC, Generic[T]):
    """Abstract base class for binary tree traversal strategies.

    Subclasses implement a single visiting order. The `method` and
    `recursive` class attributes describe which one, and are what the
    factory and the traversal plan use to pick a traverser.
    """

    method: TraversalMethod
    recursive: bool = False

    @abstractmethod
    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        """Traverse the tree starting from a node.

        Args:
            start: Starting node for traversal (None yields an empty list)

        Returns:
            Values of the visited nodes, in visiting order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BreadthFirstTraverser(BinaryTreeTraverser[T]):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N, left to right, before any node at depth N+1.
    """

    method = TraversalMethod.BFS

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        """Traverse tree breadth-first using a FIFO queue."""
        visited: List[T] = []
        if start is None:
            return visited

        queue: Deque[BinaryTreeNode[T]] = deque([start])
        while queue:
            node = queue.popleft()
            visited.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return visited


class DepthFirstTraverser(BinaryTreeTraverser[T]):
    """Depth-first traversal driven by a plain LIFO stack.

    Every popped node is emitted and its children are pushed right first,
    so the left child is popped next. On a binary tree this emits the same
    order as preorder, but it is a general stack scan rather than the
    descend-and-backtrack walk PreorderTraverser performs.
    """

    method = TraversalMethod.DFS

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        """Traverse tree depth-first using an explicit stack."""
        visited: List[T] = []
        if start is None:
            return visited

        stack: List[BinaryTreeNode[T]] = [start]
        while stack:
            node = stack.pop()
            visited.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return visited


class InorderTraverser(BinaryTreeTraverser[T]):
    """Inorder traversal: left subtree, node, right subtree.

    The stack holds the ancestors whose left subtree is still being walked.
    """

    method = TraversalMethod.INORDER

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []
        stack: List[BinaryTreeNode[T]] = []
        node = start

        while stack or node is not None:
            if node is not None:
                # Descend left, remembering the way back
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                visited.append(node.value)
                node = node.right
        return visited


class PreorderTraverser(BinaryTreeTraverser[T]):
    """Preorder traversal: node, left subtree, right subtree.

    Nodes are emitted on the way down the left spine; the stack is used to
    come back up and take each pending right branch.
    """

    method = TraversalMethod.PREORDER

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []
        stack: List[BinaryTreeNode[T]] = []
        node = start

        while stack or node is not None:
            if node is not None:
                visited.append(node.value)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return visited


class PostorderTraverser(BinaryTreeTraverser[T]):
    """Postorder traversal: left subtree, right subtree, node.

    A node on top of the stack is emitted only once its right subtree is
    empty or was the last thing emitted.
    """

    method = TraversalMethod.POSTORDER

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []
        stack: List[BinaryTreeNode[T]] = []
        last_emitted: Optional[BinaryTreeNode[T]] = None
        node = start

        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue

            top = stack[-1]
            if top.right is not None and top.right is not last_emitted:
                node = top.right
            else:
                visited.append(top.value)
                last_emitted = stack.pop()
        return visited


class RecursiveInorderTraverser(BinaryTreeTraverser[T]):
    """Recursive form of InorderTraverser."""

    method = TraversalMethod.INORDER
    recursive = True

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []

        def _traverse_recursive(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is None:
                return
            _traverse_recursive(node.left)
            visited.append(node.value)
            _traverse_recursive(node.right)

        _traverse_recursive(start)
        return visited


class RecursivePreorderTraverser(BinaryTreeTraverser[T]):
    """Recursive form of PreorderTraverser."""

    method = TraversalMethod.PREORDER
    recursive = True

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []

        def _traverse_recursive(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is None:
                return
            # Parent first
            visited.append(node.value)
            _traverse_recursive(node.left)
            _traverse_recursive(node.right)

        _traverse_recursive(start)
        return visited


class RecursivePostorderTraverser(BinaryTreeTraverser[T]):
    """Recursive form of PostorderTraverser."""

    method = TraversalMethod.POSTORDER
    recursive = True

    def traverse(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        visited: List[T] = []

        def _traverse_recursive(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is None:
                return
            _traverse_recursive(node.left)
            _traverse_recursive(node.right)
            # Parent last
            visited.append(node.value)

        _traverse_recursive(start)
        return visited


_ITERATIVE = {
    TraversalMethod.BFS: BreadthFirstTraverser,
    TraversalMethod.DFS: DepthFirstTraverser,
    TraversalMethod.INORDER: InorderTraverser,
    TraversalMethod.PREORDER: PreorderTraverser,
    TraversalMethod.POSTORDER: PostorderTraverser,
}

_RECURSIVE = {
    TraversalMethod.INORDER: RecursiveInorderTraverser,
    TraversalMethod.PREORDER: RecursivePreorderTraverser,
    TraversalMethod.POSTORDER: RecursivePostorderTraverser,
}


# Factory function for creating traversers by method
def create_traverser(method: TraversalMethod, recursive: bool = False) -> BinaryTreeTraverser:
    """Create a traverser instance for a traversal method.

    Args:
        method: Traversal method
        recursive: Use the recursive form (inorder, preorder, postorder only)

    Returns:
        BinaryTreeTraverser instance

    Raises:
        TraversalConfigError: If no traverser matches the request
    """
    if not isinstance(method, TraversalMethod):
        raise TraversalConfigError(
            f"Unknown traversal method: {method!r}. "
            f"Choose from: {', '.join(m.value for m in TraversalMethod)}"
        )

    registry = _RECURSIVE if recursive else _ITERATIVE
    if method not in registry:
        raise TraversalConfigError(
            f"{method.name} traversal has no recursive form"
        )

    traverser_class: Type[BinaryTreeTraverser] = registry[method]
    return traverser_class()
