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

"""Module for all graph related errors."""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "GraphError",
    "VertexAlreadyExistsError",
    "NoSuchVertexError",
    "EdgeAlreadyExistsError",
    "NoSuchEdgeError",
    "LoopNotAllowedError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class GraphError(Exception):
    """Base class for all errors raised by graphs and graph algorithms."""
    pass


class VertexAlreadyExistsError(GraphError, ValueError):
    """Raised when adding a vertex whose identifier is already in use."""
    pass


class NoSuchVertexError(GraphError, LookupError):
    """Raised when referencing a vertex that is not in the graph."""
    pass


class EdgeAlreadyExistsError(GraphError, ValueError):
    """Raised when adding an edge between already adjacent vertices."""
    pass


class NoSuchEdgeError(GraphError, LookupError):
    """Raised when removing an edge between non-adjacent vertices."""
    pass


class LoopNotAllowedError(GraphError, ValueError):
    """Raised when adding a loop to a graph that does not allow them."""
    pass
