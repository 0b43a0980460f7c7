import unittest

from adjgraph.algorithms.graphsearch import INFINITE_DISTANCE
from adjgraph.datastructures._graph_errors import (EdgeAlreadyExistsError,
                                                   GraphError,
                                                   LoopNotAllowedError,
                                                   NoSuchEdgeError,
                                                   NoSuchVertexError,
                                                   VertexAlreadyExistsError)
from adjgraph.datastructures.graph import UndirectedGraph
from adjgraph.datastructures.views import ListView


def path_graph() -> UndirectedGraph[str, int]:
    graph: UndirectedGraph[str, int] = UndirectedGraph()
    graph.add_vertices("ABCD", range(4))
    graph.add_edges([("A", "B"), ("B", "C"), ("C", "D")])
    return graph


def two_component_graph() -> UndirectedGraph[str, int]:
    graph: UndirectedGraph[str, int] = UndirectedGraph()
    graph.add_vertices("ABCD", range(4))
    graph.add_edges([("A", "B"), ("C", "D")])
    return graph


class TestVertices(unittest.TestCase):
    def test_add_vertex(self):
        graph: UndirectedGraph[int, str] = UndirectedGraph()
        graph.add_vertex(1, "one")
        self.assertTrue(1 in graph)
        self.assertEqual(graph.vertex_count, 1)
        self.assertEqual(list(graph.get_directly_connected(1)), [])

    def test_add_existing_vertex(self):
        graph: UndirectedGraph[int, str] = UndirectedGraph()
        graph.add_vertex(1, "one")
        with self.assertRaises(VertexAlreadyExistsError):
            graph.add_vertex(1, "uno")
        self.assertEqual(graph.get_vertex_value(1), "one")

    def test_vertex_value_identity(self):
        graph: UndirectedGraph[str, object] = UndirectedGraph()
        for value in (None, 0, [1, 2], {"x": 1}, object()):
            graph.add_vertex(repr(value), value)
            self.assertIs(graph.get_vertex_value(repr(value)), value)

    def test_missing_vertex(self):
        graph = path_graph()
        with self.assertRaises(NoSuchVertexError):
            graph.get_vertex_value("Z")
        with self.assertRaises(NoSuchVertexError):
            graph.remove_vertex("Z")
        with self.assertRaises(NoSuchVertexError):
            graph.get_directly_connected("Z")
        self.assertEqual(graph.vertex_count, 4)

    def test_errors_share_base(self):
        graph = path_graph()
        with self.assertRaises(GraphError):
            graph.get_vertex_value("Z")
        with self.assertRaises(LookupError):
            graph.get_vertex_value("Z")

    def test_get_all_vertex_ids(self):
        graph = path_graph()
        vertex_ids = graph.get_all_vertex_ids()
        self.assertEqual(vertex_ids, ["A", "B", "C", "D"])
        vertex_ids.append("E")
        self.assertEqual(graph.get_all_vertex_ids(), ["A", "B", "C", "D"])

    def test_add_vertices_all_or_nothing(self):
        graph = path_graph()
        with self.assertRaises(VertexAlreadyExistsError):
            graph.add_vertices(["E", "F", "A"], [4, 5, 0])
        with self.assertRaises(VertexAlreadyExistsError):
            graph.add_vertices(["E", "E"], [4, 5])
        self.assertEqual(graph.vertex_count, 4)
        self.assertFalse(graph.has_vertex("E"))

    def test_add_vertices_length_mismatch(self):
        graph: UndirectedGraph[str, int] = UndirectedGraph()
        with self.assertRaises(ValueError):
            graph.add_vertices("ABCD", range(3))
        with self.assertRaises(ValueError):
            graph.add_vertices("AB", range(3))
        self.assertEqual(graph.vertex_count, 0)
        self.assertEqual(graph.get_all_vertex_ids(), [])

    def test_remove_vertex_cascades(self):
        graph = path_graph()
        graph.remove_vertex("B")
        self.assertTrue("B" not in graph)
        for vertex in graph:
            self.assertNotIn("B", graph.get_directly_connected(vertex))
        self.assertEqual(list(graph.get_directly_connected("A")), [])
        self.assertEqual(list(graph.get_directly_connected("C")), ["D"])
        self.assertEqual(graph.edge_count, 2)

    def test_remove_isolated_vertex(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertex(1, 1)
        graph.remove_vertex(1)
        self.assertEqual(len(graph), 0)

    def test_remove_then_add_again(self):
        graph = path_graph()
        graph.remove_vertex("A")
        graph.add_vertex("A", 10)
        self.assertEqual(graph.get_vertex_value("A"), 10)
        self.assertEqual(list(graph.get_directly_connected("A")), [])


class TestUndirectedEdges(unittest.TestCase):
    def test_add_edge_symmetric(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertices([1, 2], [1, 2])
        graph.add_edge(1, 2)
        self.assertIn(2, graph.get_directly_connected(1))
        self.assertIn(1, graph.get_directly_connected(2))
        self.assertTrue(graph.has_edge(1, 2))
        self.assertTrue(graph.has_edge(2, 1))
        self.assertFalse(graph.directed)

    def test_add_edge_twice(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertices([1, 2], [1, 2])
        graph.add_edge(1, 2)
        with self.assertRaises(EdgeAlreadyExistsError):
            graph.add_edge(1, 2)
        with self.assertRaises(EdgeAlreadyExistsError):
            graph.add_edge(2, 1)
        self.assertEqual(list(graph.get_directly_connected(1)), [2])
        self.assertEqual(list(graph.get_directly_connected(2)), [1])

    def test_add_edge_missing_vertex(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertex(1, 1)
        with self.assertRaises(NoSuchVertexError):
            graph.add_edge(1, 2)
        with self.assertRaises(NoSuchVertexError):
            graph.add_edge(2, 1)
        self.assertEqual(list(graph.get_directly_connected(1)), [])

    def test_edge_order(self):
        graph: UndirectedGraph[int, None] = UndirectedGraph()
        graph.add_vertices(range(4), [None] * 4)
        graph.add_edge(0, 3)
        graph.add_edge(0, 1)
        graph.add_edge(2, 0)
        self.assertEqual(list(graph.get_directly_connected(0)), [3, 1, 2])

    def test_remove_edge(self):
        graph = path_graph()
        graph.remove_edge("C", "B")
        self.assertFalse(graph.has_edge("B", "C"))
        self.assertFalse(graph.has_edge("C", "B"))
        self.assertEqual(list(graph.get_directly_connected("B")), ["A"])
        self.assertEqual(list(graph.get_directly_connected("C")), ["D"])

    def test_remove_missing_edge(self):
        graph = path_graph()
        with self.assertRaises(NoSuchEdgeError):
            graph.remove_edge("A", "C")
        with self.assertRaises(NoSuchVertexError):
            graph.remove_edge("A", "Z")
        self.assertEqual(graph.edge_count, 6)

    def test_edge_count(self):
        graph: UndirectedGraph[str, int] = UndirectedGraph()
        graph.add_vertices("ABC", range(3))
        graph.add_edge("A", "B")
        graph.add_edge("B", "C")
        self.assertEqual(graph.edge_count, 4)
        self.assertEqual(graph.vertex_count, 3)
        graph.remove_edge("A", "B")
        self.assertEqual(graph.edge_count, 2)
        self.assertEqual(graph.vertex_count, 3)

    def test_loop(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertex(1, 1)
        graph.add_edge(1, 1)
        self.assertEqual(list(graph.get_directly_connected(1)), [1, 1])
        self.assertEqual(graph.edge_count, 2)
        graph.remove_edge(1, 1)
        self.assertEqual(list(graph.get_directly_connected(1)), [])

    def test_loop_not_allowed(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph(allow_loops=False)
        graph.add_vertex(1, 1)
        with self.assertRaises(LoopNotAllowedError) as context:
            graph.add_edge(1, 1)
        self.assertEqual(str(context.exception),
                         "Loop on vertex 1 not allowed.")
        self.assertEqual(graph.edge_count, 0)
        self.assertFalse(graph.allow_loops)

    def test_directly_connected_is_read_only_view(self):
        graph = path_graph()
        view = graph.get_directly_connected("B")
        self.assertIsInstance(view, ListView)
        self.assertFalse(hasattr(view, "append"))
        self.assertFalse(hasattr(view, "remove"))
        graph.add_edge("B", "D")
        self.assertEqual(list(view), ["A", "C", "D"])
        graph.remove_vertex("A")
        self.assertEqual(list(view), ["C", "D"])

    def test_add_edges_all_or_nothing(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertices(range(3), range(3))
        with self.assertRaises(EdgeAlreadyExistsError):
            graph.add_edges([(0, 1), (1, 2), (1, 0)])
        with self.assertRaises(NoSuchVertexError):
            graph.add_edges([(0, 1), (2, 3)])
        self.assertEqual(graph.edge_count, 0)

    def test_delete_all_edges_for_vertex(self):
        graph = path_graph()
        graph.add_edge("B", "B")
        graph.add_edge("B", "D")
        graph._delete_all_edges_for_vertex("B")
        self.assertEqual(list(graph.get_directly_connected("B")), [])
        self.assertEqual(list(graph.get_directly_connected("A")), [])
        self.assertEqual(list(graph.get_directly_connected("C")), ["D"])
        self.assertEqual(list(graph.get_directly_connected("D")), ["C"])
        self.assertTrue("B" in graph)
        with self.assertRaises(NoSuchVertexError):
            graph._delete_all_edges_for_vertex("Z")


class TestUndirectedGraph(unittest.TestCase):
    def test_connect_vertex_with_all(self):
        graph = path_graph()
        graph.connect_vertex_with_all_not_directly_connected("A")
        self.assertEqual(list(graph.get_directly_connected("A")),
                         ["B", "C", "D"])
        self.assertIn("A", graph.get_directly_connected("D"))
        self.assertNotIn("A", graph.get_directly_connected("A"))
        self.assertEqual(graph.edge_count, 10)

    def test_connect_vertex_with_all_missing(self):
        graph = path_graph()
        with self.assertRaises(NoSuchVertexError):
            graph.connect_vertex_with_all_not_directly_connected("Z")

    def test_connect_single_vertex(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        graph.add_vertex(1, 1)
        graph.connect_vertex_with_all_not_directly_connected(1)
        self.assertEqual(graph.edge_count, 0)

    def test_is_connected(self):
        self.assertTrue(path_graph().is_connected())
        self.assertFalse(two_component_graph().is_connected())

    def test_is_connected_trivial(self):
        graph: UndirectedGraph[int, int] = UndirectedGraph()
        self.assertTrue(graph.is_connected())
        graph.add_vertex(1, 1)
        self.assertTrue(graph.is_connected())
        graph.add_vertex(2, 2)
        self.assertFalse(graph.is_connected())

    def test_shortest_distance(self):
        graph = path_graph()
        self.assertEqual(graph.shortest_distance("A", "D"), 3)
        self.assertEqual(graph.shortest_distance("D", "A"), 3)
        self.assertEqual(graph.shortest_distance("A", "A"), 0)
        graph.add_edge("A", "D")
        self.assertEqual(graph.shortest_distance("A", "D"), 1)
        self.assertEqual(graph.shortest_distance("B", "D"), 2)

    def test_shortest_distance_unreachable(self):
        graph = two_component_graph()
        self.assertEqual(graph.shortest_distance("A", "C"), INFINITE_DISTANCE)
        self.assertEqual(graph.shortest_distance("A", "B"), 1)

    def test_shortest_distance_missing_vertex(self):
        graph = path_graph()
        with self.assertRaises(NoSuchVertexError):
            graph.shortest_distance("A", "Z")
        with self.assertRaises(NoSuchVertexError):
            graph.shortest_distance("Z", "A")

    def test_shortest_path(self):
        graph = path_graph()
        self.assertEqual(graph.shortest_path("A", "D"), ["A", "B", "C", "D"])
        self.assertEqual(graph.shortest_path("B", "B"), ["B"])
        self.assertIsNone(two_component_graph().shortest_path("A", "D"))

    def test_connected_components(self):
        self.assertEqual(two_component_graph().connected_components(),
                         [{"A", "B"}, {"C", "D"}])
        self.assertEqual(path_graph().connected_components(),
                         [{"A", "B", "C", "D"}])

    def test_str(self):
        graph: UndirectedGraph[int, str] = UndirectedGraph()
        graph.add_vertices([1, 2, 3], "abc")
        graph.add_edge(1, 2)
        self.assertEqual(str(graph), "{1: [2], 2: [1], 3: []}")
        self.assertTrue(repr(graph).startswith("UndirectedGraph("))
