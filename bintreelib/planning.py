"""Traversal planning for BinTreeLib.

The TraversalPlan validates a TraversalConfig and selects the traverser
that will run it, so an invalid request fails before any node is visited.
"""

import logging
from typing import Any, Dict, List, Optional, TypeVar

from .config import TraversalConfig
from .core.node import BinaryTreeNode
from .core.traverser import BinaryTreeTraverser, create_traverser
from .exceptions import TraversalConfigError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class TraversalPlan:
    """Validated plan for a binary tree traversal.

    The plan is the bridge between what the caller asked for
    (TraversalConfig) and the algorithm that runs it (a traverser).
    """

    def __init__(self, config: Optional[TraversalConfig] = None):
        """Create and validate a traversal plan.

        Args:
            config: Traversal configuration (defaults to iterative preorder)

        Raises:
            TraversalConfigError: If the configuration is invalid
        """
        self.config = config if config is not None else TraversalConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise TraversalConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.nodes_visited = 0

    def _select_traverser(self) -> BinaryTreeTraverser:
        """Select the traverser matching the configuration."""
        traverser = create_traverser(self.config.method, self.config.recursive)
        logger.debug(
            "Selected %s for %s traversal",
            traverser.__class__.__name__, self.config.method.value,
        )
        return traverser

    def execute(self, start: Optional[BinaryTreeNode[T]]) -> List[T]:
        """Execute the traversal plan.

        Args:
            start: Node to start from (None yields an empty list)

        Returns:
            Values of the visited nodes, in visiting order
        """
        visited = self.traverser.traverse(start)
        self.nodes_visited = len(visited)
        return visited

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the traversal plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'method': self.config.method.value,
            'recursive': self.config.recursive,
            'traverser': self.traverser.__class__.__name__,
            'nodes_visited': self.nodes_visited,
        }
