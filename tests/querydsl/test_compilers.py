"""
Tests for the GROQ filter and projection compilers over typed nodes.
"""

import pydantic
import pytest

from groqbuilder.exceptions import CompilerError
from groqbuilder.querydsl.compilers import (
    BaseCompiler,
    GroqFilterCompiler,
    GroqProjectionCompiler,
    groq_filter_compiler,
    groq_projection_compiler,
)
from groqbuilder.querydsl.compilers.utils import format_value, is_literal
from groqbuilder.querydsl.nodes import (
    FieldName,
    FilterPair,
    FollowPair,
    Group,
    Nest,
    NestedGroup,
    PairWithOperator,
    ProjectionPair,
    Raw,
)


class TestFilterCompiler:
    def test_empty_compiles_to_empty_string(self):
        assert groq_filter_compiler.compile([]) == ""

    def test_pair(self):
        assert groq_filter_compiler.to_expr(FilterPair(key="_type", value="'post'")) == "_type == 'post'"

    def test_operator(self):
        node = PairWithOperator(key="score", operator=">=", value="90")
        assert groq_filter_compiler.to_expr(node) == "score >= 90"

    def test_negated_operator(self):
        node = PairWithOperator(key="_id", operator="in", value="path('drafts.**')", negate=True)
        assert groq_filter_compiler.to_expr(node) == "!(_id in path('drafts.**'))"

    def test_nested_groups(self):
        inner = Group(children=(FilterPair(key="b", value="2"), FilterPair(key="c", value="3")), join="&&")
        outer = Group(children=(FilterPair(key="a", value="1"), inner), negate=True)
        assert groq_filter_compiler.to_expr(outer) == "!(a == 1 || (b == 2 && c == 3))"

    def test_raw_and_nest(self):
        assert groq_filter_compiler.to_expr(Raw(text="count(tags) > 2")) == "count(tags) > 2"
        assert groq_filter_compiler.to_expr(Nest(key="defined", value="slug")) == "defined(slug)"

    def test_top_level_join(self):
        nodes = [FilterPair(key="a", value="1"), Raw(text="b > 2")]
        assert groq_filter_compiler.compile(nodes) == "a == 1 && b > 2"

    @pytest.mark.parametrize("node", [object(), "a == 1", FieldName(name="title")])
    def test_unknown_node_is_fatal(self, node):
        with pytest.raises(CompilerError):
            groq_filter_compiler.to_expr(node)


class TestProjectionCompiler:
    def test_fields(self):
        nodes = [FieldName(name="title"), FieldName(name="body")]
        assert groq_projection_compiler.compile(nodes) == "title, body"

    def test_pair_with_string_value(self):
        assert groq_projection_compiler.to_expr(ProjectionPair(key="'objectID'", value="_id")) == "'objectID':_id"

    def test_pair_with_node_value(self):
        node = ProjectionPair(key="'name'", value=FollowPair(key="author", value="name"))
        assert groq_projection_compiler.to_expr(node) == "'name':author->name"

    def test_follow_pair_variants(self):
        assert groq_projection_compiler.to_expr(FollowPair(key="a", value="b", follow=False)) == "a:b"
        node = FollowPair(key="author", value=(FieldName(name="name"), FieldName(name="slug")))
        assert groq_projection_compiler.to_expr(node) == "author->{name, slug}"

    def test_nested_group(self):
        node = NestedGroup(alias="'author'", children=(FieldName(name="name"),))
        assert groq_projection_compiler.to_expr(node) == "'author':{name}"
        joined = NestedGroup(alias="author", children=(FieldName(name="name"),), joiner="->")
        assert groq_projection_compiler.to_expr(joined) == "author->{name}"

    def test_empty_nested_group(self):
        assert groq_projection_compiler.to_expr(NestedGroup(alias="'meta'", children=())) == "'meta':{}"

    @pytest.mark.parametrize("node", [object(), 3, FilterPair(key="a", value="1")])
    def test_unknown_node_is_fatal(self, node):
        with pytest.raises(CompilerError):
            groq_projection_compiler.to_expr(node)


class TestCompilerContract:
    def test_compilers_implement_base(self):
        assert isinstance(GroqFilterCompiler(), BaseCompiler)
        assert isinstance(GroqProjectionCompiler(), BaseCompiler)

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseCompiler()


class TestNodes:
    def test_group_requires_children(self):
        with pytest.raises(pydantic.ValidationError):
            Group(children=())

    def test_group_join_is_restricted(self):
        with pytest.raises(pydantic.ValidationError):
            Group(children=(FilterPair(key="a", value="1"),), join="and")

    def test_nodes_are_frozen(self):
        node = FilterPair(key="a", value="1")
        with pytest.raises(pydantic.ValidationError):
            node.key = "b"

    def test_nodes_compare_by_value(self):
        assert FieldName(name="title") == FieldName(name="title")


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,expected",
        [(None, "null"), (True, "true"), (False, "false"), (3, "3"), (2.5, "2.5"), ("'post'", "'post'")],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected

    def test_is_literal(self):
        assert is_literal("x")
        assert is_literal(None)
        assert not is_literal(["x"])
        assert not is_literal({"x": 1})
