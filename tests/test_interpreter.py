"""Tests for the IR interpreter and IR indexing."""

import pytest

from docquery.adapter import TreeAdapter
from docquery.compiler import QueryCompiler
from docquery.errors import CompilationError, EngineError
from docquery.interpreter import Adapter, DataContext, interpret_ir
from docquery.ir import (
    IndexedQuery,
    IRQuery,
    NamedEdge,
    OutputBinding,
    QueryEdge,
    QueryVertex,
    WildcardFanOut,
)
from docquery.values import from_python


def make_ir(vertices, edges, outputs=()):
    return IRQuery(
        root_vid=1,
        root_name="Document",
        vertices={v.vid: v for v in vertices},
        edges={e.eid: e for e in edges},
        outputs={o.label: o for o in outputs},
    )


def vertex(vid, **kwargs):
    return QueryVertex(vid=vid, type_name="node", **kwargs)


def run_query(text, data):
    query = IndexedQuery.from_ir(QueryCompiler().compile(text))
    return list(interpret_ir(TreeAdapter(from_python(data)), query))


class RecordingAdapter(TreeAdapter):
    """TreeAdapter that records which capabilities were called."""

    def __init__(self, root):
        super().__init__(root)
        self.calls = []

    def resolve_neighbors(self, contexts, type_name, edge, parameters):
        self.calls.append(("neighbors", edge))
        return super().resolve_neighbors(contexts, type_name, edge, parameters)

    def resolve_property(self, contexts, type_name, property_name):
        self.calls.append(("property", property_name))
        return super().resolve_property(contexts, type_name, property_name)


class TestDataContext:
    def test_bind_does_not_mutate(self):
        root = DataContext.at_root(1, "root")
        child = root.bind(2, "child")
        assert child.active_vertex == "child"
        assert dict(root.vertices) == {1: "root"}
        assert dict(child.vertices) == {1: "root", 2: "child"}

    def test_activate(self):
        c = DataContext.at_root(1, "root").bind(2, "child").activate(1)
        assert c.active_vertex == "root"

    def test_activate_unbound(self):
        assert DataContext.at_root(1, "root").activate(7).active_vertex is None

    def test_with_value(self):
        c = DataContext.at_root(1, "root")
        assert dict(c.with_value("a", "x").values) == {"a": "x"}
        assert dict(c.values) == {}


class TestInterpret:
    def test_single_output(self):
        assert run_query('metadata { name "@name" }', {"metadata": {"name": "web"}}) == [{"name": "web"}]

    def test_no_outputs_yields_empty_row(self):
        assert run_query("metadata", {"metadata": {}}) == [{}]

    def test_missing_hop_prunes(self):
        assert run_query('kind "Deployment"\nmetadata { name "@name" }', {"metadata": {"name": "web"}}) == []

    def test_non_string_output_prunes(self):
        assert run_query('metadata { name "@name" }', {"metadata": {"name": 5}}) == []

    def test_fan_out_order(self):
        data = {"items": [{"x": "1"}, {"x": "2"}, {"x": "3"}]}
        assert run_query('items { * { x "@x" } }', data) == [{"x": "1"}, {"x": "2"}, {"x": "3"}]

    def test_fan_out_skips_elements_without_field(self):
        data = {"items": [{"x": "1"}, {"y": "2"}, {"x": 3}, {"x": "4"}]}
        assert run_query('items { * { x "@x" } }', data) == [{"x": "1"}, {"x": "4"}]

    def test_empty_sequence(self):
        assert run_query('items { * { x "@x" } }', {"items": []}) == []

    def test_two_fan_outs_cross_product(self):
        data = {"a": [{"x": "a1"}, {"x": "a2"}], "b": [{"y": "b1"}, {"y": "b2"}]}
        rows = run_query('a { * { x "@x" } }\nb { * { y "@y" } }', data)
        assert rows == [
            {"x": "a1", "y": "b1"},
            {"x": "a1", "y": "b2"},
            {"x": "a2", "y": "b1"},
            {"x": "a2", "y": "b2"},
        ]

    def test_nested_fan_out(self):
        data = {"groups": [{"members": [{"n": "a"}, {"n": "b"}]}, {"members": [{"n": "c"}]}]}
        rows = run_query('groups { * { members { * { n "@n" } } } }', data)
        assert rows == [{"n": "a"}, {"n": "b"}, {"n": "c"}]

    def test_row_keys_in_label_order(self):
        rows = run_query('z "@z"\na "@a"', {"z": "1", "a": "2"})
        assert list(rows[0]) == ["a", "z"]

    def test_lazy(self):
        query = IndexedQuery.from_ir(QueryCompiler().compile('items { * { x "@x" } }'))
        adapter = TreeAdapter(from_python({"items": [{"x": "1"}, {"x": "2"}]}))
        rows = interpret_ir(adapter, query)
        assert next(rows) == {"x": "1"}

    def test_calls_follow_edge_then_output_order(self):
        query = IndexedQuery.from_ir(QueryCompiler().compile('m { a "@a" }'))
        adapter = RecordingAdapter(from_python({"m": {"a": "1"}}))
        list(interpret_ir(adapter, query))
        assert adapter.calls == [
            ("neighbors", NamedEdge("m")),
            ("neighbors", NamedEdge("a")),
            ("property", "a"),
        ]


class TestInterpretHandBuiltIR:
    def test_coercion_filters_rows(self):
        ir = make_ir(
            [vertex(1), vertex(2, coerced_from_type="node")],
            [QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a"))],
            [OutputBinding(label="a", vid=1, field_name="a", value_type="String")],
        )
        adapter = TreeAdapter(from_python({"a": "x"}))
        assert list(interpret_ir(adapter, IndexedQuery.from_ir(ir))) == []

    def test_filters_rejected(self):
        ir = make_ir(
            [vertex(1), vertex(2, filters=("a == 1",))],
            [QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a"))],
        )
        adapter = TreeAdapter(from_python({"a": "x"}))
        with pytest.raises(EngineError):
            list(interpret_ir(adapter, IndexedQuery.from_ir(ir)))

    def test_custom_adapter(self):
        class ListAdapter(Adapter):
            def resolve_starting_vertices(self, edge_name, parameters):
                yield ["p", "q"]

            def resolve_property(self, contexts, type_name, property_name):
                for c in contexts:
                    yield c, c.active_vertex[0]

            def resolve_neighbors(self, contexts, type_name, edge, parameters):
                for c in contexts:
                    yield c, c.active_vertex

            def resolve_coercion(self, contexts, type_name, coerce_to_type):
                for c in contexts:
                    yield c, True

        ir = make_ir(
            [vertex(1), vertex(2)],
            [QueryEdge(eid=1, from_vid=1, to_vid=2, kind=WildcardFanOut())],
            [OutputBinding(label="first", vid=2, field_name="ignored", value_type="String")],
        )
        rows = list(interpret_ir(ListAdapter(), IndexedQuery.from_ir(ir)))
        assert rows == [{"first": "p"}, {"first": "q"}]

    def test_edges_expand_depth_first(self):
        ir = make_ir(
            [vertex(1), vertex(2), vertex(3), vertex(4)],
            [
                QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a")),
                QueryEdge(eid=2, from_vid=1, to_vid=3, kind=NamedEdge("b")),
                QueryEdge(eid=3, from_vid=2, to_vid=4, kind=NamedEdge("c")),
            ],
        )
        adapter = RecordingAdapter(from_python({"a": {"c": "x"}, "b": "y"}))
        assert list(interpret_ir(adapter, IndexedQuery.from_ir(ir))) == [{}]
        assert adapter.calls == [
            ("neighbors", NamedEdge("a")),
            ("neighbors", NamedEdge("c")),
            ("neighbors", NamedEdge("b")),
        ]


class TestIndexedQuery:
    def test_missing_root(self):
        ir = IRQuery(root_vid=1, root_name="Document", vertices={}, edges={}, outputs={})
        with pytest.raises(CompilationError):
            IndexedQuery.from_ir(ir)

    def test_undefined_vertex(self):
        ir = make_ir([vertex(1)], [QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a"))])
        with pytest.raises(CompilationError, match="undefined vertex 2"):
            IndexedQuery.from_ir(ir)

    def test_two_incoming_edges(self):
        ir = make_ir(
            [vertex(1), vertex(2)],
            [
                QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a")),
                QueryEdge(eid=2, from_vid=1, to_vid=2, kind=NamedEdge("b")),
            ],
        )
        with pytest.raises(CompilationError, match="more than one incoming edge"):
            IndexedQuery.from_ir(ir)

    def test_unreachable_vertex(self):
        ir = make_ir([vertex(1), vertex(2)], [])
        with pytest.raises(CompilationError, match="not reachable"):
            IndexedQuery.from_ir(ir)

    def test_edge_before_source_reached(self):
        ir = make_ir(
            [vertex(1), vertex(2), vertex(3)],
            [
                QueryEdge(eid=1, from_vid=2, to_vid=3, kind=NamedEdge("b")),
                QueryEdge(eid=2, from_vid=1, to_vid=2, kind=NamedEdge("a")),
            ],
        )
        with pytest.raises(CompilationError, match="before any edge reaches it"):
            IndexedQuery.from_ir(ir)

    def test_edge_into_root(self):
        ir = make_ir(
            [vertex(1), vertex(2)],
            [
                QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a")),
                QueryEdge(eid=2, from_vid=2, to_vid=1, kind=NamedEdge("up")),
            ],
        )
        with pytest.raises(CompilationError, match="root"):
            IndexedQuery.from_ir(ir)

    def test_output_on_undefined_vertex(self):
        ir = make_ir([vertex(1)], [], [OutputBinding(label="x", vid=9, field_name="x", value_type="String")])
        with pytest.raises(CompilationError, match="Output 'x'"):
            IndexedQuery.from_ir(ir)
