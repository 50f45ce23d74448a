"""BinaryTree container for BinTreeLib.

The tree owns nothing but a reference to its root node. Nodes are created by
the caller and linked explicitly with add(); the tree never searches for an
insertion point, rebalances, or enforces an ordering on values.
"""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar, Union

from ..config import (
    ChildDirection,
    TraversalConfig,
    TraversalMethod,
    parse_direction,
    parse_method,
)
from ..exceptions import InvalidArgumentError
from ..planning import TraversalPlan
from .node import BinaryTreeNode
from .traverser import (
    BreadthFirstTraverser,
    DepthFirstTraverser,
    InorderTraverser,
    PostorderTraverser,
    PreorderTraverser,
    RecursiveInorderTraverser,
    RecursivePostorderTraverser,
    RecursivePreorderTraverser,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

Direction = Union[ChildDirection, str]
Method = Union[TraversalMethod, str]


class BinaryTree(Generic[T]):
    """A binary tree of BinaryTreeNode objects.

    The structure reachable from `root` is expected to be a tree: no node
    reachable from two parents and no cycles. This is not verified.

    Example:
        >>> tree = BinaryTree()
        >>> a = BinaryTreeNode("A")
        >>> tree.set_root(a)
        >>> tree.add(a, BinaryTreeNode("B"), ChildDirection.LEFT)
        >>> tree.add(a, BinaryTreeNode("C"), ChildDirection.RIGHT)
        >>> tree.traverse()
        ['A', 'B', 'C']
    """

    def __init__(self, root: Optional[BinaryTreeNode[T]] = None):
        """Create a tree.

        Args:
            root: Root node (the tree starts empty if omitted)
        """
        self.root = root

    def set_root(self, node: Optional[BinaryTreeNode[T]]) -> None:
        """Replace the root node."""
        self.root = node

    def is_empty(self) -> bool:
        """Check if the tree has no root."""
        return self.root is None

    def clear(self) -> None:
        """Detach the root, emptying the tree.

        Child nodes are not unlinked from each other; they are reclaimed once
        nothing references them.
        """
        logger.debug("Clearing tree rooted at %r", self.root)
        self.root = None

    def add(self,
            parent: Optional[BinaryTreeNode[T]],
            child: Optional[BinaryTreeNode[T]],
            direction: Optional[Direction],
            intermediate_direction: Optional[Direction] = None) -> None:
        """Link a node under a parent.

        If the parent's slot in `direction` is empty, `child` is placed there.
        If it already holds a subtree, `child` takes the slot and the previous
        subtree is re-attached to `child` at `intermediate_direction`
        (LEFT when None). Any subtree `child` already held in that slot is
        overwritten.

        Args:
            parent: Node to link under
            child: Node to insert
            direction: Slot of `parent` to insert into
            intermediate_direction: Slot of `child` that receives a displaced subtree

        Raises:
            InvalidArgumentError: If parent, child or direction is missing or invalid
        """
        # Validate everything before touching any node
        if parent is None:
            raise InvalidArgumentError(
                "Parent element must be specified while adding a node in Binary Tree"
            )
        if child is None:
            raise InvalidArgumentError(
                "The element to be added can not be None while adding a node in Binary Tree"
            )
        if direction is None:
            raise InvalidArgumentError(
                "The direction of child element to be inserted must be specified"
            )
        slot = parse_direction(direction, "direction")
        displaced_slot = parse_direction(intermediate_direction, "intermediate_direction")
        if displaced_slot is None:
            displaced_slot = ChildDirection.LEFT

        existing = parent.get_child(slot.value)
        parent.set_child(slot.value, child)

        if existing is not None:
            logger.debug(
                "Displaced %r from %s of %r to %s of %r",
                existing, slot.name, parent, displaced_slot.name, child,
            )
            child.set_child(displaced_slot.value, existing)

    def traverse(self,
                 start: Optional[Union[BinaryTreeNode[T], Method]] = None,
                 method: Optional[Method] = None,
                 recursive: bool = False) -> List[T]:
        """Traverse the tree and return the visited values.

        Supported call forms:
            traverse()                  preorder from the root
            traverse(start)             preorder from start
            traverse(method)            named method from the root
            traverse(start, method)     named method from start

        Args:
            start: Node to start from, or a traversal method
            method: TraversalMethod or its string name (default preorder)
            recursive: Use the recursive form (inorder, preorder, postorder only)

        Returns:
            Values in visiting order; empty if there is nothing to visit

        Raises:
            TraversalConfigError: If the method is unknown, or recursion is
                requested for a method without a recursive form
        """
        if isinstance(start, (TraversalMethod, str)):
            if method is not None:
                raise InvalidArgumentError(
                    "traversal method given twice"
                )
            start, method = None, start

        if start is None:
            start = self.root

        config = TraversalConfig(
            method=parse_method(method) if method is not None else TraversalMethod.PREORDER,
            recursive=recursive,
        )
        return TraversalPlan(config).execute(start)

    # Individual algorithms, each starting from `start` or the root

    def _start(self, start: Optional[BinaryTreeNode[T]]) -> Optional[BinaryTreeNode[T]]:
        return start if start is not None else self.root

    def bfs_traversal(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        """Breadth-first (level order) traversal."""
        return BreadthFirstTraverser().traverse(self._start(start))

    def dfs_traversal(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        """Depth-first traversal using a stack, right child pushed first."""
        return DepthFirstTraverser().traverse(self._start(start))

    def inorder_traversal(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return InorderTraverser().traverse(self._start(start))

    def inorder_traversal_recursive(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return RecursiveInorderTraverser().traverse(self._start(start))

    def preorder_traversal(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return PreorderTraverser().traverse(self._start(start))

    def preorder_traversal_recursive(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return RecursivePreorderTraverser().traverse(self._start(start))

    def postorder_traversal(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return PostorderTraverser().traverse(self._start(start))

    def postorder_traversal_recursive(self, start: Optional[BinaryTreeNode[T]] = None) -> List[T]:
        return RecursivePostorderTraverser().traverse(self._start(start))

    def __len__(self) -> int:
        """Number of nodes reachable from the root."""
        return len(self.bfs_traversal())

    def __iter__(self) -> Iterator[T]:
        """Iterate over values in the default (preorder) order."""
        return iter(self.traverse())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"
