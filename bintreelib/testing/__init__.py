"""Testing utilities for BinTreeLib consumers."""

from .fixtures import build_tree_from_levels, sample_tree, describe_shape

__all__ = ['build_tree_from_levels', 'sample_tree', 'describe_shape']
