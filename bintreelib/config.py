"""Configuration system for BinTreeLib.

This module defines how users name child slots and how they specify the
traversal they want: which algorithm, and whether to use its recursive form.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .exceptions import InvalidArgumentError, TraversalConfigError


class ChildDirection(Enum):
    """Child slot of a binary tree node.

    The value is the slot's position in the node's child list.
    """
    LEFT = 0
    RIGHT = 1


class TraversalMethod(Enum):
    """Order in which a traversal visits the nodes of a binary tree."""
    BFS = "bfs"                 # Level by level, left to right
    DFS = "dfs"                 # Stack scan, right pushed before left
    INORDER = "inorder"         # Left, node, right
    PREORDER = "preorder"       # Node, left, right
    POSTORDER = "postorder"     # Left, right, node

    @property
    def supports_recursion(self) -> bool:
        """Whether a recursive form of this traversal exists."""
        return self in (
            TraversalMethod.INORDER,
            TraversalMethod.PREORDER,
            TraversalMethod.POSTORDER,
        )


@dataclass
class TraversalConfig:
    """Complete configuration for a binary tree traversal.

    The TraversalPlan validates this configuration before any node is visited.
    """

    method: TraversalMethod = TraversalMethod.PREORDER
    recursive: bool = False

    @classmethod
    def level_order(cls) -> 'TraversalConfig':
        """Create config for breadth-first, level-by-level traversal."""
        return cls(method=TraversalMethod.BFS)

    @classmethod
    def sorted_order(cls) -> 'TraversalConfig':
        """Create config for inorder traversal.

        On a tree whose values were arranged as a search tree this yields
        them in sorted order; the library itself enforces no ordering.
        """
        return cls(method=TraversalMethod.INORDER)

    @classmethod
    def recursive_mirror(cls, method: Union[TraversalMethod, str]) -> 'TraversalConfig':
        """Create config for the recursive form of a traversal.

        Args:
            method: Traversal to run recursively

        Returns:
            TraversalConfig with recursion enabled
        """
        return cls(method=parse_method(method), recursive=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.method, TraversalMethod):
            errors.append(f"unknown traversal method: {self.method!r}")
        elif self.recursive and not self.method.supports_recursion:
            errors.append(
                f"{self.method.name} traversal has no recursive form"
            )

        if not isinstance(self.recursive, bool):
            errors.append("recursive must be a bool")

        return errors


# Helper functions

_METHOD_ALIASES = {
    'bfs': TraversalMethod.BFS,
    'breadth_first': TraversalMethod.BFS,
    'level_order': TraversalMethod.BFS,
    'dfs': TraversalMethod.DFS,
    'depth_first': TraversalMethod.DFS,
    'inorder': TraversalMethod.INORDER,
    'in_order': TraversalMethod.INORDER,
    'preorder': TraversalMethod.PREORDER,
    'pre_order': TraversalMethod.PREORDER,
    'postorder': TraversalMethod.POSTORDER,
    'post_order': TraversalMethod.POSTORDER,
}


def parse_method(method: Union[TraversalMethod, str]) -> TraversalMethod:
    """Parse a traversal method from string or enum.

    Args:
        method: Method as enum or string name

    Returns:
        TraversalMethod enum value

    Raises:
        TraversalConfigError: If the method is not recognized
    """
    if isinstance(method, TraversalMethod):
        return method

    if isinstance(method, str):
        method_lower = method.strip().lower()
        if method_lower in _METHOD_ALIASES:
            return _METHOD_ALIASES[method_lower]

    raise TraversalConfigError(
        f"Unknown traversal method: {method!r}. "
        f"Choose from: {', '.join(_METHOD_ALIASES.keys())}"
    )


def parse_direction(direction: Optional[Union[ChildDirection, str]],
                    argument: str = "direction") -> Optional[ChildDirection]:
    """Parse a child direction from string or enum.

    Args:
        direction: Direction as enum, string ("left"/"right") or None
        argument: Argument name used in the error message

    Returns:
        ChildDirection enum value, or None if direction is None

    Raises:
        InvalidArgumentError: If the direction is not recognized
    """
    if direction is None or isinstance(direction, ChildDirection):
        return direction

    if isinstance(direction, str):
        try:
            return ChildDirection[direction.strip().upper()]
        except KeyError:
            pass

    raise InvalidArgumentError(
        f"{argument} must be ChildDirection.LEFT or ChildDirection.RIGHT, "
        f"got {direction!r}"
    )
