"""Exceptions raised by BinTreeLib."""


class BinaryTreeError(Exception):
    """Base class for all binary tree errors."""
    pass


class InvalidArgumentError(BinaryTreeError, ValueError):
    """Raised when a tree operation is called with a missing or invalid argument."""
    pass


class TraversalConfigError(BinaryTreeError, ValueError):
    """Raised when a traversal cannot be planned from the given configuration."""
    pass
