###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""
Module defining graph algorithms.

A graph algorithm is any sub-class of `GraphAlgorithm`, it is given a
read-only view of a graph and returns some result computed from it. Graphs
run algorithms through `AbstractGraph.run_algorithm()`, and never depend on
any concrete algorithm type, so new algorithms can be added here (or
anywhere else) without modifying the graph classes.

Example Usage
-------------
```
>>> from adjgraph.datastructures.graph import UndirectedGraph
>>> graph = UndirectedGraph[str, int]()
>>> graph.add_vertices("ABCD", range(4))
>>> graph.add_edges([("A", "B"), ("B", "C"), ("C", "D")])
>>> graph.run_algorithm(ShortestDistanceFromSource("A"))
{'A': 0, 'B': 1, 'C': 2, 'D': 3}
>>> graph.run_algorithm(ConnectivityCheck())
True
```
"""

from abc import ABCMeta, abstractmethod
from collections import deque
import logging
import sys
from typing import Any, Final, Generic, Hashable, TypeVar

import numpy as np
import numpy.typing as npt
from tqdm import tqdm
from typing_extensions import override

from adjgraph.datastructures._graph_errors import NoSuchVertexError
from adjgraph.datastructures.views import GraphView

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "INFINITE_DISTANCE",
    "GraphAlgorithm",
    "ConnectivityCheck",
    "ShortestDistanceFromSource",
    "ShortestPath",
    "ConnectedComponents",
    "AdjacencyMatrix"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


# Distance given to vertices that cannot be reached from the source.
INFINITE_DISTANCE: int = sys.maxsize

# Marks that no start vertex was given, or that a vertex has no parent;
# None cannot be used since it is a valid vertex identifier.
_NO_VERTEX: Final = object()

VT = TypeVar("VT", bound=Hashable)
RT = TypeVar("RT")


def _progress_bar(
    graph: GraphView,
    desc: str,
    enable: bool
) -> tqdm:
    """Create a progress bar counting vertices expanded by a search."""
    return tqdm(
        total=len(graph),
        desc=desc,
        unit="vertex",
        leave=False,
        colour="cyan",
        disable=not enable
    )


class GraphAlgorithm(Generic[RT], metaclass=ABCMeta):
    """
    Base class for graph algorithms.

    Sub-classes take their configuration in their constructor, and implement
    `run()`, which must only read the graph it is given.
    """

    _ALGORITHM_LOGGER = logging.getLogger("GraphAlgorithm")

    __slots__ = ()

    def __repr__(self) -> str:
        """Get a string representation of the algorithm."""
        return f"{type(self).__name__}()"

    @abstractmethod
    def run(self, graph: GraphView, /) -> RT:
        """
        Run the algorithm on a graph.

        Parameters
        ----------
        `graph: GraphView` - A read-only view of the graph to run on.

        Returns
        -------
        `RT` - The result of the algorithm.
        """
        raise NotImplementedError


class ConnectivityCheck(GraphAlgorithm[bool]):
    """
    Determine if a graph is connected.

    A graph is connected if every vertex can be reached from every other
    vertex by some sequence of edges. The empty graph, and any graph with a
    single vertex, are trivially connected. For directed graphs, edge
    directions are ignored, i.e. this checks weak connectivity.
    """

    __slots__ = {
        "__start_vertex": "The vertex to start searching from.",
        "__enable_progress_bar": "Whether to display a progress bar."
    }

    def __init__(
        self,
        start_vertex: Any = _NO_VERTEX, /,
        enable_progress_bar: bool = False
    ) -> None:
        """
        Create a new connectivity check.

        Parameters
        ----------
        `start_vertex: Hashable` - The vertex to start the search from. If
        not given, the first vertex of the graph is used. Since
        connectivity is symmetric, this does not affect the result.

        `enable_progress_bar: bool = False` - Whether to display a progress
        bar of vertices reached.
        """
        self.__start_vertex: Any = start_vertex
        self.__enable_progress_bar: bool = enable_progress_bar

    def __repr__(self) -> str:
        if self.__start_vertex is _NO_VERTEX:
            return "ConnectivityCheck()"
        return f"ConnectivityCheck({self.__start_vertex!r})"

    @override
    def run(self, graph: GraphView, /) -> bool:
        start_vertex = self.__start_vertex
        if start_vertex is not _NO_VERTEX and start_vertex not in graph:
            raise NoSuchVertexError(
                f"There is no such vertex {start_vertex!r}.")
        total_vertices: int = len(graph)
        if total_vertices == 0:
            return True
        if start_vertex is _NO_VERTEX:
            start_vertex = next(iter(graph))

        visited: set[Hashable] = {start_vertex}
        frontier: deque[Hashable] = deque([start_vertex])

        with _progress_bar(graph, "Connectivity",
                           self.__enable_progress_bar) as progress_bar:
            progress_bar.update(1)
            # Stop early once every vertex has been reached.
            while frontier and len(visited) != total_vertices:
                vertex = frontier.popleft()
                for adjacent in graph.get_neighbours(vertex):
                    if adjacent not in visited:
                        visited.add(adjacent)
                        frontier.append(adjacent)
                        progress_bar.update(1)

        self._ALGORITHM_LOGGER.debug(
            "Reached %s of %s vertices from %r.",
            len(visited), total_vertices, start_vertex
        )
        return len(visited) == total_vertices


class ShortestDistanceFromSource(GraphAlgorithm[dict[VT, int]]):
    """
    Calculate the length (in edges) of the shortest path from a source vertex
    to every vertex of a graph, by breadth-first search.

    Vertices that cannot be reached from the source are given a distance of
    `INFINITE_DISTANCE`. Edges are followed in their direction.
    """

    __slots__ = {
        "__source": "The vertex to measure distances from.",
        "__enable_progress_bar": "Whether to display a progress bar."
    }

    def __init__(
        self,
        source: VT, /,
        enable_progress_bar: bool = False
    ) -> None:
        """Create a new shortest distance search from the given source."""
        self.__source: VT = source
        self.__enable_progress_bar: bool = enable_progress_bar

    def __repr__(self) -> str:
        return f"ShortestDistanceFromSource({self.__source!r})"

    @property
    def source(self) -> VT:
        """The vertex distances are measured from."""
        return self.__source

    @override
    def run(self, graph: GraphView, /) -> dict[VT, int]:
        source = self.__source
        if source not in graph:
            raise NoSuchVertexError(f"There is no such vertex {source!r}.")

        distances: dict[VT, int] = dict.fromkeys(
            graph.get_all_vertex_ids(), INFINITE_DISTANCE)
        distances[source] = 0

        # The frontier must be FIFO, so that vertices are expanded in order
        # of distance, and the first time a vertex is found is along one of
        # the shortest paths to it.
        visited: set[VT] = {source}
        frontier: deque[VT] = deque([source])

        with _progress_bar(graph, "Distances",
                           self.__enable_progress_bar) as progress_bar:
            while frontier:
                vertex = frontier.popleft()
                distance = distances[vertex] + 1
                for adjacent in graph.get_directly_connected(vertex):
                    if adjacent not in visited:
                        visited.add(adjacent)
                        distances[adjacent] = distance
                        frontier.append(adjacent)
                progress_bar.update(1)

        self._ALGORITHM_LOGGER.debug(
            "Reached %s of %s vertices from %r.",
            len(visited), len(distances), source
        )
        return distances


class ShortestPath(GraphAlgorithm[list[VT] | None]):
    """
    Find a path with the fewest edges between two vertices, by breadth-first
    search.

    The result is the list of vertices along the path including both ends,
    `[start]` if the ends are the same vertex, or None if no path exists.
    """

    __slots__ = {
        "__start": "The vertex the path starts at.",
        "__end": "The vertex the path ends at."
    }

    def __init__(self, start: VT, end: VT, /) -> None:
        """Create a new shortest path search between the given vertices."""
        self.__start: VT = start
        self.__end: VT = end

    def __repr__(self) -> str:
        return f"ShortestPath({self.__start!r}, {self.__end!r})"

    @override
    def run(self, graph: GraphView, /) -> list[VT] | None:
        start, end = self.__start, self.__end
        for vertex in (start, end):
            if vertex not in graph:
                raise NoSuchVertexError(
                    f"There is no such vertex {vertex!r}.")
        if start == end:
            return [start]

        # Maps each found vertex to the vertex it was found from.
        parents: dict[VT, Any] = {start: _NO_VERTEX}
        frontier: deque[VT] = deque([start])

        while frontier:
            vertex = frontier.popleft()
            for adjacent in graph.get_directly_connected(vertex):
                if adjacent in parents:
                    continue
                parents[adjacent] = vertex
                if adjacent == end:
                    path: list[VT] = [adjacent]
                    parent: Any = vertex
                    while parent is not _NO_VERTEX:
                        path.append(parent)
                        parent = parents[parent]
                    path.reverse()
                    return path
                frontier.append(adjacent)

        return None


class ConnectedComponents(GraphAlgorithm[list[set[VT]]]):
    """
    Partition the vertices of a graph into its connected components.

    Components are listed in the order their first vertex was added to the
    graph. For directed graphs these are the weakly connected components.
    """

    __slots__ = ()

    @override
    def run(self, graph: GraphView, /) -> list[set[VT]]:
        components: list[set[VT]] = []
        visited: set[VT] = set()

        for root in graph:
            if root in visited:
                continue
            component: set[VT] = {root}
            frontier: deque[VT] = deque([root])
            while frontier:
                vertex = frontier.popleft()
                for adjacent in graph.get_neighbours(vertex):
                    if adjacent not in component:
                        component.add(adjacent)
                        frontier.append(adjacent)
            visited |= component
            components.append(component)

        return components


class AdjacencyMatrix(GraphAlgorithm[tuple[list[VT], npt.NDArray]]):
    """
    Build the adjacency matrix of a graph.

    The result is a tuple of the vertex identifiers, in graph order, and a
    square matrix where the element at `[i, j]` is the number of entries of
    the `j`th vertex in the adjacency list of the `i`th vertex. Undirected
    graphs give a symmetric matrix.
    """

    __slots__ = {
        "__dtype": "The data type of the matrix."
    }

    def __init__(self, dtype: npt.DTypeLike = np.int64) -> None:
        """Create a new adjacency matrix builder."""
        self.__dtype: npt.DTypeLike = dtype

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(dtype={self.__dtype!r})"

    @override
    def run(self, graph: GraphView, /) -> tuple[list[VT], npt.NDArray]:
        vertices: list[VT] = graph.get_all_vertex_ids()
        index_of: dict[VT, int] = {
            vertex: index
            for index, vertex in enumerate(vertices)
        }
        matrix = np.zeros((len(vertices), len(vertices)), dtype=self.__dtype)
        for vertex in vertices:
            row = index_of[vertex]
            for adjacent in graph.get_directly_connected(vertex):
                matrix[row, index_of[adjacent]] += 1
        return vertices, matrix
