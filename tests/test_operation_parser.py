"""Tests for the operation_parser module."""

import pytest

from action_codegen.errors import MissingRootFieldError, UnsupportedOperationError
from action_codegen.loader import parse_document
from action_codegen.operation_parser import parse_operation


def _parse(source: str) -> dict:
    return parse_operation(parse_document(source, "derive operation"))


class TestRootField:
    """The root field is the first non-introspection top-level field."""

    def test_plain_field(self, insert_user_operation):
        assert _parse(insert_user_operation)["root_field"] == "insert_users_one"

    def test_alias_wins_over_name(self):
        op = _parse("mutation { created: insert_users_one(object: {}) { id } }")
        assert op["root_field"] == "created"

    def test_skips_introspection_fields(self):
        op = _parse("query { __typename users { id } }")
        assert op["root_field"] == "users"

    def test_first_of_several_fields(self):
        op = _parse("query { users { id } posts { id } }")
        assert op["root_field"] == "users"

    def test_skips_fragment_spreads(self):
        op = _parse("query { ... on query_root { users { id } } posts { id } }")
        assert op["root_field"] == "posts"

    def test_only_introspection_fields(self):
        with pytest.raises(MissingRootFieldError, match="no top-level field selection"):
            _parse("query { __typename }")

    def test_only_inline_fragments(self):
        with pytest.raises(MissingRootFieldError, match="no top-level field selection"):
            _parse("query { ... on query_root { users { id } } }")

    def test_only_fragment_spread_and_introspection(self):
        with pytest.raises(MissingRootFieldError, match="no top-level field selection"):
            _parse("query { __typename ...UserFields }")


class TestVariables:
    """Variable names follow the operation's own declaration order."""

    def test_declared_order(self, insert_user_operation):
        assert _parse(insert_user_operation)["variables"] == ["name", "age"]

    def test_order_independent_of_usage(self):
        op = _parse("mutation($b: Int, $a: Int) { act(a: $a, b: $b) { id } }")
        assert op["variables"] == ["b", "a"]

    def test_no_variables(self):
        assert _parse("query { users { id } }")["variables"] == []


class TestUnsupportedDocuments:

    def test_multiple_operations(self):
        with pytest.raises(UnsupportedOperationError, match="single operation"):
            _parse("query A { a } query B { b }")

    def test_fragment_only_document(self):
        with pytest.raises(UnsupportedOperationError, match="not an operation"):
            _parse("fragment F on users { id }")
