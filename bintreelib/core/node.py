"""Node abstractions for BinTreeLib.

Nodes are intentionally kept simple - they are data containers holding a
value and references to their children. Linking nodes into a tree and
walking them is the job of BinaryTree and the traversers.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar('T')


class NodeList(list):
    """Ordered child storage for a node.

    A plain list of child references where any position may be empty (None).
    """

    def __init__(self, initial: Optional[Iterable[Optional['Node[T]']]] = None,
                 size: int = 0):
        """Create a child list.

        Args:
            initial: Child references to start with
            size: Number of empty slots to pre-allocate when initial is None
        """
        if initial is not None:
            super().__init__(initial)
        else:
            super().__init__([None] * size)

    def find_by_value(self, value: T) -> Optional['Node[T]']:
        """Find the first child holding a given value.

        Args:
            value: Value to look for

        Returns:
            Matching child node, or None if no child holds the value
        """
        for node in self:
            if node is not None and node.value == value:
                return node
        return None


class Node(Generic[T]):
    """General tree node with a value and an ordered list of children."""

    def __init__(self, value: T, children: Optional[Iterable[Optional['Node[T]']]] = None):
        """Create a node.

        Args:
            value: Value held by the node
            children: Initial children (none if omitted)
        """
        self.value = value
        self.children = NodeList(children)

    @classmethod
    def with_children(cls, value: T, children: Iterable[Optional['Node[T]']]) -> 'Node[T]':
        """Create a node with an explicit child list."""
        return cls(value, children)

    def get_child(self, index: int) -> Optional['Node[T]']:
        """Return the child at a position.

        Raises:
            IndexError: If index is outside the child list
        """
        _check_index(index, len(self.children))
        return self.children[index]

    def set_child(self, index: int, node: Optional['Node[T]']) -> None:
        """Replace the child at a position.

        Raises:
            IndexError: If index is outside the child list
        """
        _check_index(index, len(self.children))
        self.children[index] = node

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return all(child is None for child in self.children)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"


class BinaryTreeNode(Generic[T]):
    """Node of a binary tree.

    Holds a value and exactly two child slots: index 0 is the left child and
    index 1 the right child. Either slot may be empty. The slots live in a
    two-element NodeList that is allocated once and never resized.
    """

    SLOT_COUNT = 2

    def __init__(self, value: T,
                 left: Optional['BinaryTreeNode[T]'] = None,
                 right: Optional['BinaryTreeNode[T]'] = None):
        """Create a binary tree node.

        Args:
            value: Value held by the node
            left: Left child
            right: Right child
        """
        self.value = value
        self._slots = NodeList([left, right])

    @property
    def left(self) -> Optional['BinaryTreeNode[T]']:
        """Left child of the node."""
        return self._slots[0]

    @left.setter
    def left(self, node: Optional['BinaryTreeNode[T]']) -> None:
        self._slots[0] = node

    @property
    def right(self) -> Optional['BinaryTreeNode[T]']:
        """Right child of the node."""
        return self._slots[1]

    @right.setter
    def right(self, node: Optional['BinaryTreeNode[T]']) -> None:
        self._slots[1] = node

    @property
    def children(self) -> List['BinaryTreeNode[T]']:
        """Non-empty children, left first."""
        return [child for child in self._slots if child is not None]

    def get_child(self, index: int) -> Optional['BinaryTreeNode[T]']:
        """Return the child in slot 0 (left) or 1 (right).

        Raises:
            IndexError: If index is not 0 or 1
        """
        _check_index(index, self.SLOT_COUNT)
        return self._slots[index]

    def set_child(self, index: int, node: Optional['BinaryTreeNode[T]']) -> None:
        """Replace the child in slot 0 (left) or 1 (right).

        Raises:
            IndexError: If index is not 0 or 1
        """
        _check_index(index, self.SLOT_COUNT)
        self._slots[index] = node

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._slots[0] is None and self._slots[1] is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"


def _check_index(index: int, size: int) -> None:
    # Negative indices would silently wrap around on a list
    if not 0 <= index < size:
        raise IndexError(
            f"child index {index} out of range for node with {size} slot(s)"
        )
