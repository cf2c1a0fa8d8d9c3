"""Base class for graph algorithms with a single explicit compute step."""

from __future__ import annotations

import time

from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from ..structures.graph import Graph

logger = get_logger(__name__)


class GraphAlgorithm:
    """
    Base class for algorithms that run once over a finished Graph.

    Construction only stores the inputs. ``compute()`` runs the algorithm to
    completion exactly once and returns ``self``; later calls are no-ops.
    Query methods raise RuntimeError until ``compute()`` has run. The graph
    must not be mutated while ``compute()`` runs.

    Subclasses implement ``_run()`` and may override ``_verify()``, which is
    called after ``_run()`` when debug mode is enabled.
    """

    def __init__(self, graph: Graph) -> None:
        """
        Initialize the algorithm.

        Args:
            graph: Graph to run on.

        Raises:
            TypeError: If graph is not a Graph.
        """
        if not isinstance(graph, Graph):
            raise TypeError(f"graph must be a Graph, got {type(graph).__name__}")
        self.graph = graph
        self._computed = False

    @property
    def computed(self) -> bool:
        return self._computed

    def compute(self) -> "GraphAlgorithm":
        """
        Run the algorithm if it has not run yet.

        Returns:
            self, so construction and computation can be chained.
        """
        if self._computed:
            return self

        name = type(self).__name__
        logger.debug("%s: running on %r", name, self.graph)
        started = time.perf_counter()
        self._run()
        self._computed = True
        logger.debug("%s: finished in %.6fs", name, time.perf_counter() - started)

        if is_debug_enabled():
            self._verify()
        return self

    def _require_computed(self) -> None:
        if not self._computed:
            raise RuntimeError(
                f"{type(self).__name__} has not been computed; call compute() first"
            )

    def _run(self) -> None:
        raise NotImplementedError

    def _verify(self) -> None:
        pass
