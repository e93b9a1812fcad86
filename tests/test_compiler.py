"""Tests for compiling node queries into the graph IR."""

import pytest

from docquery.compiler import IdAllocator, QueryCompiler, compile_nodes, compile_query, extract_label
from docquery.config import QueryConfig
from docquery.errors import CompilationError
from docquery.ir import IndexedQuery, NamedEdge, OutputBinding, QueryEdge, QueryVertex, WildcardFanOut
from docquery.parsing import NodeParser, walk_nodes


@pytest.fixture
def parser():
    p = NodeParser()
    p.build(debug=False, write_tables=False)
    return p


@pytest.fixture
def compile_text(parser):
    def compile_(text, config=QueryConfig()):
        return compile_query(parser.parse(text), config)
    return compile_


DEPLOYMENT_QUERY = """
kind "Deployment"
metadata {
    name "@name"
}
spec {
    template {
        metadata {
            annotations {
                "kube2iam/role" "@role"
            }
        }
        spec {
            containers {
                * {
                    image "@image"
                }
            }
        }
    }
}
"""


class TestIdAllocator:
    def test_starts_at_one(self):
        ids = IdAllocator()
        assert [ids.allocate() for _ in range(3)] == [1, 2, 3]

    def test_independent_instances(self):
        a, b = IdAllocator(), IdAllocator()
        a.allocate()
        a.allocate()
        assert b.allocate() == 1


class TestExtractLabel:
    def test_sigil_string(self):
        assert extract_label('"@name"') == "name"

    def test_label_with_punctuation(self):
        assert extract_label('"@kube2iam/role"') == "kube2iam/role"

    def test_plain_string(self):
        assert extract_label('"Deployment"') is None

    def test_number(self):
        assert extract_label("42") is None

    def test_unquoted_sigil_is_not_a_label(self):
        assert extract_label("@name") is None

    def test_sigil_not_first(self):
        assert extract_label('"name@"') is None

    def test_custom_sigil(self):
        assert extract_label('"$name"', sigil="$") == "name"
        assert extract_label('"@name"', sigil="$") is None

    def test_unterminated_literal_fails(self):
        with pytest.raises(CompilationError):
            extract_label('"@name')

    def test_sigil_only_fails(self):
        with pytest.raises(CompilationError):
            extract_label('"@')

    def test_empty_label(self):
        assert extract_label('"@"') == ""


class TestCompileStructure:
    def test_empty_query_has_only_root(self, compile_text):
        ir = compile_text("")
        assert ir.root_vid == 1
        assert list(ir.vertices) == [1]
        assert dict(ir.edges) == {}
        assert dict(ir.outputs) == {}

    def test_vertex_and_edge_counts(self, parser, compile_text):
        nodes = parser.parse(DEPLOYMENT_QUERY)
        n = len(list(walk_nodes(nodes)))
        ir = compile_text(DEPLOYMENT_QUERY)
        assert n == 12
        assert list(ir.vertices) == list(range(1, n + 2))
        assert list(ir.edges) == list(range(1, n + 1))

    def test_every_vertex_has_one_parent_edge(self, compile_text):
        ir = compile_text(DEPLOYMENT_QUERY)
        targets = [e.to_vid for e in ir.edges.values()]
        assert sorted(targets) == list(range(2, len(ir.vertices) + 1))

    def test_depth_first_order(self, compile_text):
        ir = compile_text("a { b { c } }\nd")
        assert [(e.eid, e.from_vid, e.to_vid, e.edge_name) for e in ir.edges.values()] == [
            (1, 1, 2, "a"),
            (2, 2, 3, "b"),
            (3, 3, 4, "c"),
            (4, 1, 5, "d"),
        ]

    def test_vertex_records(self, compile_text):
        ir = compile_text("a")
        assert ir.vertices[2] == QueryVertex(vid=2, type_name="node")
        assert ir.vertices[2].coerced_from_type is None
        assert ir.vertices[2].filters == ()

    def test_edge_records(self, compile_text):
        ir = compile_text("a")
        edge = ir.edges[1]
        assert edge == QueryEdge(eid=1, from_vid=1, to_vid=2, kind=NamedEdge("a"))
        assert edge.parameters == {}
        assert edge.optional is False
        assert edge.recursive is None

    def test_root_name(self, compile_text):
        assert compile_text("a").root_name == "Document"
        assert compile_text("a", QueryConfig(root_name="Doc")).root_name == "Doc"

    def test_pass_through_node(self, compile_text):
        ir = compile_text('kind "Deployment"')
        assert len(ir.vertices) == 2
        assert len(ir.edges) == 1
        assert dict(ir.outputs) == {}


class TestWildcard:
    def test_bare_star_fans_out(self, compile_text):
        ir = compile_text("items { * }")
        assert ir.edges[2].kind == WildcardFanOut()
        assert ir.edges[2].edge_name == "*"

    def test_quoted_star_fans_out(self, compile_text):
        ir = compile_text('items { "*" }')
        assert ir.edges[2].kind == WildcardFanOut()

    def test_custom_wildcard(self, compile_text):
        ir = compile_text("items { each }", QueryConfig(wildcard="each"))
        assert isinstance(ir.edges[2].kind, WildcardFanOut)
        assert ir.edges[2].edge_name == "each"


class TestOutputs:
    def test_output_anchored_on_parent(self, compile_text):
        ir = compile_text('metadata {\n    name "@name"\n}')
        # metadata is vertex 2, name is vertex 3
        assert ir.outputs["name"] == OutputBinding(
            label="name", vid=2, field_name="name", value_type="String"
        )

    def test_top_level_output_on_root(self, compile_text):
        ir = compile_text('kind "@kind"')
        assert ir.outputs["kind"].vid == 1

    def test_label_differs_from_field(self, compile_text):
        ir = compile_text('annotations { "kube2iam/role" "@role" }')
        assert ir.outputs["role"].field_name == "kube2iam/role"
        assert ir.outputs["role"].vid == 2

    def test_deployment_outputs(self, compile_text):
        ir = compile_text(DEPLOYMENT_QUERY)
        assert list(ir.outputs) == ["image", "name", "role"]
        assert ir.outputs["name"].vid == 3
        assert ir.outputs["role"].vid == 8
        assert ir.outputs["image"].vid == 12
        assert ir.edges[11].kind == WildcardFanOut()
        assert (ir.edges[11].from_vid, ir.edges[11].to_vid) == (11, 12)

    def test_bare_sigil_value(self, compile_text):
        ir = compile_text("metadata { name @name }")
        assert ir.outputs["name"].vid == 2

    def test_only_first_argument_counts(self, compile_text):
        ir = compile_text('a "x" "@late"')
        assert dict(ir.outputs) == {}

    def test_property_value_binds(self, compile_text):
        ir = compile_text('meta { a key="@label" }')
        assert ir.outputs["label"] == OutputBinding(
            label="label", vid=2, field_name="a", value_type="String"
        )

    def test_binding_property_must_come_first(self, compile_text):
        ir = compile_text('a key="x" other="@label"')
        assert dict(ir.outputs) == {}

    def test_node_with_output_still_gets_vertex(self, compile_text):
        ir = compile_text('name "@name"')
        assert len(ir.vertices) == 2
        assert ir.edges[1].kind == NamedEdge("name")

    def test_custom_sigil(self, compile_text):
        ir = compile_text('name "$n"', QueryConfig(sigil="$"))
        assert list(ir.outputs) == ["n"]

    def test_output_type(self, compile_text):
        ir = compile_text('name "@n"', QueryConfig(output_type="Str"))
        assert ir.outputs["n"].value_type == "Str"

    def test_duplicate_label_last_wins(self, compile_text):
        ir = compile_text('a "@x"\nb { c "@x" }')
        # b is vertex 3, c is vertex 4
        assert ir.outputs["x"].vid == 3
        assert ir.outputs["x"].field_name == "c"

    def test_duplicate_label_among_siblings(self, compile_text):
        ir = compile_text('a "@x"\nb "@x"')
        assert ir.outputs["x"].field_name == "b"

    def test_empty_label_binds(self, compile_text):
        ir = compile_text('a "@"')
        assert list(ir.outputs) == [""]


class TestDeterminism:
    def test_same_text_same_ir(self, compile_text):
        assert compile_text(DEPLOYMENT_QUERY) == compile_text(DEPLOYMENT_QUERY)

    def test_compiler_reuse(self):
        compiler = QueryCompiler()
        first = compiler.compile(DEPLOYMENT_QUERY)
        second = compiler.compile(DEPLOYMENT_QUERY)
        assert first == second

    def test_compiled_ir_indexes(self, compile_text):
        indexed = IndexedQuery.from_ir(compile_text(DEPLOYMENT_QUERY))
        assert [e.to_vid for e in indexed.outgoing[1]] == [2, 3, 5]


class TestCompileNodes:
    def test_threads_allocators(self, parser):
        vids, eids = IdAllocator(start=10), IdAllocator(start=20)
        vertices, edges, outputs = compile_nodes(parser.parse('a { b "@b" }'), 5, vids, eids)
        assert list(vertices) == [10, 11]
        assert list(edges) == [20, 21]
        assert edges[20].from_vid == 5
        assert outputs["b"].vid == 10

    def test_ir_maps_are_read_only(self, compile_text):
        ir = compile_text("a")
        with pytest.raises(TypeError):
            ir.vertices[99] = None
