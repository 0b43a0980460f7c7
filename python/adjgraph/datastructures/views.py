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
Module containing read-only view types over graphs.

Views do not copy the data they expose, they reflect changes made by the
owner of the data, but offer no way to change it.
"""

import collections.abc
from typing import (TYPE_CHECKING, Generic, Hashable, Iterator, TypeVar,
                    final, overload)

if TYPE_CHECKING:
    from adjgraph.datastructures.graph import AbstractGraph

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "ListView",
    "GraphView"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT")


@final
class ListView(collections.abc.Sequence, Generic[LT]):
    """
    Class defining a view of a list.

    Used to expose the adjacency lists of a graph. The list cannot be
    modified through the view, but the view will reflect edges added or
    removed by the graph afterwards.
    """

    __slots__ = {
        "__list": "The list being viewed."
    }

    def __init__(self, list_: list[LT], /) -> None:
        """Create a new list view."""
        self.__list: list[LT] = list_

    def __repr__(self) -> str:
        """Get an instantiable string representation of the list view."""
        return f"ListView({self.__list!r})"

    def __contains__(self, item: object, /) -> bool:
        """Check if an item is in the list view."""
        return item in self.__list

    @overload
    def __getitem__(self, index: int, /) -> LT:
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[LT]:
        ...

    def __getitem__(self, index: int | slice, /) -> LT | list[LT]:
        """Get the item (or a copy of the slice) at the given index."""
        return self.__list[index]

    def __iter__(self) -> Iterator[LT]:
        """Iterate over the items in the list."""
        return iter(self.__list)

    def __len__(self) -> int:
        """Get the number of items in the list."""
        return len(self.__list)


VT = TypeVar("VT", bound=Hashable)
WT = TypeVar("WT")


@final
class GraphView(Generic[VT, WT]):
    """
    Class defining a read-only view of a graph.

    This is what graph algorithms receive when run on a graph. It exposes
    the query operations of the graph, and none of the mutating ones.
    """

    __slots__ = {
        "__graph": "The graph being viewed."
    }

    def __init__(self, graph: "AbstractGraph[VT, WT]", /) -> None:
        """Create a new view of the given graph."""
        self.__graph: "AbstractGraph[VT, WT]" = graph

    def __repr__(self) -> str:
        """Get an instantiable string representation of the graph view."""
        return f"GraphView({self.__graph!r})"

    def __contains__(self, vertex: object, /) -> bool:
        """Check if the given vertex is in the viewed graph."""
        return vertex in self.__graph

    def __iter__(self) -> Iterator[VT]:
        """Iterate over the vertex identifiers of the viewed graph."""
        return iter(self.__graph)

    def __len__(self) -> int:
        """Get the number of vertices in the viewed graph."""
        return len(self.__graph)

    @property
    def directed(self) -> bool:
        """Whether the viewed graph is directed."""
        return self.__graph.directed

    @property
    def vertex_count(self) -> int:
        """The number of vertices in the viewed graph."""
        return self.__graph.vertex_count

    @property
    def edge_count(self) -> int:
        """The number of adjacency entries in the viewed graph."""
        return self.__graph.edge_count

    def has_vertex(self, vertex: VT, /) -> bool:
        """Check if the given vertex is in the viewed graph."""
        return self.__graph.has_vertex(vertex)

    def has_edge(self, start: VT, end: VT, /) -> bool:
        """Check if there is an edge from `start` to `end`."""
        return self.__graph.has_edge(start, end)

    def get_vertex_value(self, vertex: VT, /) -> WT:
        """Get the value of the given vertex."""
        return self.__graph.get_vertex_value(vertex)

    def get_all_vertex_ids(self) -> list[VT]:
        """Get a new list of all vertex identifiers."""
        return self.__graph.get_all_vertex_ids()

    def get_directly_connected(self, vertex: VT, /) -> ListView[VT]:
        """Get a view of the vertices the given vertex has edges to."""
        return self.__graph.get_directly_connected(vertex)

    def get_neighbours(self, vertex: VT, /) -> list[VT]:
        """Get the vertices sharing an edge with the given vertex."""
        return self.__graph.get_neighbours(vertex)
