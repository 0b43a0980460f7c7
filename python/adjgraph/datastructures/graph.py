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
Module containing graph data structures.

Graphs are stored as a vertex value mapping and an adjacency mapping, whose
key sets are always the vertex set of the graph. What an edge means is
defined by the concrete graph type; `UndirectedGraph` or `DirectedGraph`.

These data structures are not thread-safe.
"""

from abc import ABCMeta, abstractmethod
import logging
from typing import (Generic, Hashable, Iterable, Iterator, TypeVar)

import numpy.typing as npt
from typing_extensions import override

from adjgraph.algorithms.graphsearch import (AdjacencyMatrix,
                                             ConnectedComponents,
                                             ConnectivityCheck,
                                             GraphAlgorithm,
                                             ShortestDistanceFromSource,
                                             ShortestPath)
from adjgraph.datastructures._graph_errors import (EdgeAlreadyExistsError,
                                                   LoopNotAllowedError,
                                                   NoSuchEdgeError,
                                                   NoSuchVertexError,
                                                   VertexAlreadyExistsError)
from adjgraph.datastructures.views import GraphView, ListView

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "AbstractGraph",
    "UndirectedGraph",
    "DirectedGraph"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


VT = TypeVar("VT", bound=Hashable)
WT = TypeVar("WT")
RT = TypeVar("RT")


class AbstractGraph(Generic[VT, WT], metaclass=ABCMeta):
    """
    Base class for graphs.

    Holds the vertex set, with one value per vertex, and one adjacency list
    per vertex, and provides every operation that does not depend on what
    an edge means. Sub-classes define edge addition and removal.

    Vertex identifiers can be any hashable type, and vertex values can be
    any type at all. Each vertex is given its value when it is added, and
    the value never changes.
    """

    __GRAPH_LOGGER = logging.getLogger("Graph")

    __slots__ = {
        "_vertex_values": "Dictionary mapping vertices to their values.",
        "_adjacency": "Dictionary mapping vertices to adjacency lists.",
        "__allow_loops": "Whether the graph allows loops or not."
    }

    def __init__(self, *, allow_loops: bool = True) -> None:
        """
        Create a new empty graph.

        Parameters
        ----------
        `allow_loops: bool = True` - Whether the graph allows loops, i.e. an
        edge from a vertex to itself. If False, adding a loop raises a
        `LoopNotAllowedError`.
        """
        self.__allow_loops: bool = allow_loops
        self._vertex_values: dict[VT, WT] = {}
        self._adjacency: dict[VT, list[VT]] = {}

    def __str__(self) -> str:
        return str(self._adjacency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(" \
               f"vertex_values={self._vertex_values!r}, " \
               f"adjacency={self._adjacency!r}, " \
               f"allow_loops={self.__allow_loops})"

    def __contains__(self, vertex: object) -> bool:
        """Check if the given vertex is in the graph."""
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[VT]:
        """Iterate over the vertex set of this graph."""
        yield from self._adjacency

    def __len__(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    @property
    @abstractmethod
    def directed(self) -> bool:
        """Whether the graph is directed."""
        raise NotImplementedError

    @property
    def allow_loops(self) -> bool:
        """Whether the graph allows loops."""
        return self.__allow_loops

    @property
    def vertex_count(self) -> int:
        """The number of vertices in the graph."""
        return len(self._vertex_values)

    @property
    def edge_count(self) -> int:
        """
        The number of adjacency entries in the graph.

        This is the sum of the lengths of all adjacency lists, so each edge of
        an undirected graph is counted twice, once from each end.
        """
        return sum(len(adjacent) for adjacent in self._adjacency.values())

    def _require_vertex(self, vertex: VT, /) -> None:
        """Raise a `NoSuchVertexError` if the vertex is not in the graph."""
        if vertex not in self._adjacency:
            raise NoSuchVertexError(f"There is no such vertex {vertex!r}.")

    def _check_loop(self, start: VT, end: VT, /) -> None:
        """Raise a `LoopNotAllowedError` if the edge is a forbidden loop."""
        if not self.__allow_loops and start == end:
            raise LoopNotAllowedError(
                f"Loop on vertex {start!r} not allowed.")

    def has_vertex(self, vertex: VT, /) -> bool:
        """Check if the given vertex is in the graph."""
        return vertex in self._adjacency

    def add_vertex(self, vertex: VT, value: WT, /) -> None:
        """
        Add a vertex to the graph.

        Parameters
        ----------
        `vertex: VT` - The vertex identifier.

        `value: WT` - The value of the vertex.

        Raises
        ------
        `VertexAlreadyExistsError` - If the vertex is already in the graph.
        """
        if vertex in self._vertex_values:
            raise VertexAlreadyExistsError(
                f"Vertex {vertex!r} already exists.")
        self._vertex_values[vertex] = value
        self._adjacency[vertex] = []
        self.__GRAPH_LOGGER.debug("Added vertex %r.", vertex)

    def add_vertices(
        self,
        vertices: Iterable[VT],
        values: Iterable[WT], /
    ) -> None:
        """
        Add multiple vertices to the graph, pairing each with a value.

        Either all vertices are added, or none are.

        Raises
        ------
        `VertexAlreadyExistsError` - If any vertex is already in the graph,
        or is given more than once.

        `ValueError` - If the numbers of vertices and values differ.
        """
        vertices_and_values: list[tuple[VT, WT]] = list(
            zip(vertices, values, strict=True))
        seen: set[VT] = set()
        for vertex, _ in vertices_and_values:
            if vertex in self._vertex_values or vertex in seen:
                raise VertexAlreadyExistsError(
                    f"Vertex {vertex!r} already exists.")
            seen.add(vertex)
        for vertex, value in vertices_and_values:
            self.add_vertex(vertex, value)

    def remove_vertex(self, vertex: VT, /) -> None:
        """
        Remove a vertex from the graph, along with all edges to and from it.

        Raises
        ------
        `NoSuchVertexError` - If the vertex is not in the graph.
        """
        self._require_vertex(vertex)
        del self._vertex_values[vertex]
        del self._adjacency[vertex]
        # Lists are filtered in place, so views of them stay valid.
        for adjacent in self._adjacency.values():
            if vertex in adjacent:
                adjacent[:] = [other for other in adjacent if other != vertex]
        self.__GRAPH_LOGGER.debug("Removed vertex %r.", vertex)

    def get_vertex_value(self, vertex: VT, /) -> WT:
        """
        Get the value of the given vertex.

        Raises
        ------
        `NoSuchVertexError` - If the vertex is not in the graph.
        """
        self._require_vertex(vertex)
        return self._vertex_values[vertex]

    def get_all_vertex_ids(self) -> list[VT]:
        """Get a new list of all the vertex identifiers in the graph."""
        return list(self._vertex_values)

    def get_directly_connected(self, vertex: VT, /) -> ListView[VT]:
        """
        Get the vertices the given vertex has edges to, in the order the edges
        were added.

        The view is read-only, and reflects later changes to the graph.

        Raises
        ------
        `NoSuchVertexError` - If the vertex is not in the graph.
        """
        self._require_vertex(vertex)
        return ListView(self._adjacency[vertex])

    def has_edge(self, start: VT, end: VT, /) -> bool:
        """
        Check if there is an edge from `start` to `end`.

        Returns False if either vertex is not in the graph.
        """
        adjacent = self._adjacency.get(start)
        return (adjacent is not None
                and end in self._adjacency
                and end in adjacent)

    @abstractmethod
    def get_neighbours(self, vertex: VT, /) -> list[VT]:
        """
        Get a new list of every vertex sharing an edge with the given vertex,
        in either direction.

        Raises
        ------
        `NoSuchVertexError` - If the vertex is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, start: VT, end: VT, /) -> None:
        """
        Add an edge between two vertices.

        Raises
        ------
        `NoSuchVertexError` - If either vertex is not in the graph.

        `EdgeAlreadyExistsError` - If the edge already exists.

        `LoopNotAllowedError` - If the vertices are the same, and the graph
        does not allow loops.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, start: VT, end: VT, /) -> None:
        """
        Remove an edge between two vertices.

        Raises
        ------
        `NoSuchVertexError` - If either vertex is not in the graph.

        `NoSuchEdgeError` - If the edge does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def _edge_key(self, start: VT, end: VT, /) -> Hashable:
        """Get a key identifying the edge between the given vertices."""
        raise NotImplementedError

    @abstractmethod
    def _delete_all_edges_for_vertex(self, vertex: VT, /) -> None:
        """Remove every edge to or from the given vertex."""
        raise NotImplementedError

    def add_edges(self, edges: Iterable[tuple[VT, VT]], /) -> None:
        """
        Add multiple edges to the graph.

        Either all edges are added, or none are. Raises the same errors as
        `add_edge()`, and an `EdgeAlreadyExistsError` if an edge is given
        more than once.
        """
        edges = list(edges)
        seen: set[Hashable] = set()
        for start, end in edges:
            self._require_vertex(start)
            self._require_vertex(end)
            self._check_loop(start, end)
            key = self._edge_key(start, end)
            if self.has_edge(start, end) or key in seen:
                raise EdgeAlreadyExistsError(
                    f"Edge between {start!r} and {end!r} already exists.")
            seen.add(key)
        for start, end in edges:
            self.add_edge(start, end)

    def connect_vertex_with_all_not_directly_connected(
        self,
        vertex: VT, /
    ) -> None:
        """
        Add an edge from the given vertex to every other vertex in the graph
        that it does not already have an edge to.

        Raises
        ------
        `NoSuchVertexError` - If the vertex is not in the graph.
        """
        self._require_vertex(vertex)
        adjacent = self._adjacency[vertex]
        for other in list(self._adjacency):
            if other == vertex or other in adjacent:
                continue
            self.add_edge(vertex, other)

    def run_algorithm(self, algorithm: GraphAlgorithm[RT], /) -> RT:
        """
        Run an algorithm on this graph.

        The algorithm is given a read-only view of the graph, and its result
        is returned unchanged.
        """
        self.__GRAPH_LOGGER.debug("Running %r on %s.", algorithm, self)
        return algorithm.run(GraphView(self))

    def is_connected(self) -> bool:
        """
        Determine if this graph is connected.

        A graph is connected, if there is a path from all vertices to all
        other vertices. Graphs with zero or one vertices are connected.
        """
        return self.run_algorithm(ConnectivityCheck())

    def shortest_distance(self, start: VT, end: VT, /) -> int:
        """
        Get the number of edges on the shortest path between two vertices.

        Returns `INFINITE_DISTANCE` if there is no path between them.

        Raises
        ------
        `NoSuchVertexError` - If either vertex is not in the graph.
        """
        self._require_vertex(start)
        self._require_vertex(end)
        return self.run_algorithm(ShortestDistanceFromSource(start))[end]

    def shortest_path(self, start: VT, end: VT, /) -> list[VT] | None:
        """
        Get a path with the fewest edges between two vertices, including
        both ends, or None if there is no path between them.

        Raises
        ------
        `NoSuchVertexError` - If either vertex is not in the graph.
        """
        return self.run_algorithm(ShortestPath(start, end))

    def connected_components(self) -> list[set[VT]]:
        """Get the vertex sets of the connected components of this graph."""
        return self.run_algorithm(ConnectedComponents())

    def adjacency_matrix(self) -> tuple[list[VT], npt.NDArray]:
        """Get the vertex identifiers and adjacency matrix of this graph."""
        return self.run_algorithm(AdjacencyMatrix())


class UndirectedGraph(AbstractGraph[VT, WT]):
    """
    Represents an undirected graph.

    Every edge is stored once in the adjacency list of each of its ends.

    Example Usage
    -------------
    ```
    >>> graph = UndirectedGraph[int, str]()
    >>> graph.add_vertices([1, 2, 3, 4], "abcd")
    >>> graph.add_edges([(1, 2), (1, 3), (2, 4)])
    >>> print(graph)
    {1: [2, 3], 2: [1, 4], 3: [1], 4: [2]}

    ## All the vertices are connected to one graph.
    >>> graph.is_connected()
    True

    ## Remove vertex 1 from the graph.
    >>> graph.remove_vertex(1)
    >>> print(graph)
    {2: [4], 3: [], 4: [2]}

    ## Vertex 3 is now disconnected.
    >>> graph.is_connected()
    False
    ```
    """

    __GRAPH_LOGGER = logging.getLogger("Graph")

    __slots__ = ()

    @property
    @override
    def directed(self) -> bool:
        return False

    @override
    def get_neighbours(self, vertex: VT, /) -> list[VT]:
        self._require_vertex(vertex)
        return list(self._adjacency[vertex])

    @override
    def add_edge(self, start: VT, end: VT, /) -> None:
        self._require_vertex(start)
        self._require_vertex(end)
        self._check_loop(start, end)
        if end in self._adjacency[start]:
            raise EdgeAlreadyExistsError(
                f"Edge between {start!r} and {end!r} already exists.")
        # A loop is entered in the vertex's adjacency list twice.
        self._adjacency[start].append(end)
        self._adjacency[end].append(start)
        self.__GRAPH_LOGGER.debug("Added edge %r -- %r.", start, end)

    @override
    def remove_edge(self, start: VT, end: VT, /) -> None:
        self._require_vertex(start)
        self._require_vertex(end)
        if end not in self._adjacency[start]:
            raise NoSuchEdgeError(
                f"There is no such edge between {start!r} and {end!r}.")
        self._adjacency[start].remove(end)
        self._adjacency[end].remove(start)
        self.__GRAPH_LOGGER.debug("Removed edge %r -- %r.", start, end)

    @override
    def _edge_key(self, start: VT, end: VT, /) -> frozenset[VT]:
        return frozenset((start, end))

    @override
    def _delete_all_edges_for_vertex(self, vertex: VT, /) -> None:
        self._require_vertex(vertex)
        # Removing an edge changes the list being iterated, so take a copy.
        for adjacent in list(self._adjacency[vertex]):
            try:
                self.remove_edge(adjacent, vertex)
            except NoSuchEdgeError:
                # Second entry of a loop, already removed with the first.
                pass


class DirectedGraph(AbstractGraph[VT, WT]):
    """
    Represents a directed graph.

    Every edge is stored once, in the adjacency list of the vertex it starts
    at. The edge count is therefore the number of edges.
    """

    __GRAPH_LOGGER = logging.getLogger("Graph")

    __slots__ = ()

    @property
    @override
    def directed(self) -> bool:
        return True

    @override
    def get_neighbours(self, vertex: VT, /) -> list[VT]:
        """
        Get a new list of the vertices this vertex has edges to, followed by
        those with edges to it.

        Incoming edges are found by scanning every adjacency list, so this is
        O(V+E), and searches using it on directed graphs are O(V(V+E)).
        """
        self._require_vertex(vertex)
        neighbours: dict[VT, None] = dict.fromkeys(self._adjacency[vertex])
        for other, adjacent in self._adjacency.items():
            if vertex in adjacent:
                neighbours[other] = None
        return list(neighbours)

    @override
    def add_edge(self, start: VT, end: VT, /) -> None:
        self._require_vertex(start)
        self._require_vertex(end)
        self._check_loop(start, end)
        if end in self._adjacency[start]:
            raise EdgeAlreadyExistsError(
                f"Edge from {start!r} to {end!r} already exists.")
        self._adjacency[start].append(end)
        self.__GRAPH_LOGGER.debug("Added edge %r -> %r.", start, end)

    @override
    def remove_edge(self, start: VT, end: VT, /) -> None:
        self._require_vertex(start)
        self._require_vertex(end)
        if end not in self._adjacency[start]:
            raise NoSuchEdgeError(
                f"There is no such edge from {start!r} to {end!r}.")
        self._adjacency[start].remove(end)
        self.__GRAPH_LOGGER.debug("Removed edge %r -> %r.", start, end)

    @override
    def _edge_key(self, start: VT, end: VT, /) -> tuple[VT, VT]:
        return (start, end)

    @override
    def _delete_all_edges_for_vertex(self, vertex: VT, /) -> None:
        self._require_vertex(vertex)
        for adjacent in list(self._adjacency[vertex]):
            self.remove_edge(vertex, adjacent)
        for other, adjacent in self._adjacency.items():
            if vertex in adjacent:
                self.remove_edge(other, vertex)
