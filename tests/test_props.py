"""
Tests for attribute partitioning into generic props and reserved slots.
"""

import pytest
from builders import attr, el, ident, spread
from jsxlower.jsx import JSXAttribute, JSXIdentifier
from jsxlower.nodes import Identifier, Literal, Object, emit
from jsxlower.props import get_props


def props_code(*attributes) -> str | None:
	result = get_props(list(attributes))
	return emit(result.props) if result.props is not None else None


# =============================================================================
# Generic properties
# =============================================================================


class TestGenericProps:
	def test_string_value(self):
		assert props_code(attr("id", "main")) == '{"id": "main"}'

	def test_expression_value_unwrapped(self):
		assert props_code(attr("onClick", ident("handle"))) == '{"onClick": handle}'

	def test_value_less_is_true(self):
		assert props_code(attr("disabled")) == '{"disabled": true}'

	def test_other_values_pass_through(self):
		child = el("Icon")
		result = get_props([JSXAttribute(JSXIdentifier("icon"), child)])
		assert isinstance(result.props, Object)
		assert result.props.props[0].value is child  # pyright: ignore[reportAttributeAccessIssue]

	def test_namespaced_name(self):
		assert props_code(attr("xlink:href", "#a")) == '{"xlink:href": "#a"}'

	def test_custom_property_key_is_bare(self):
		result = get_props([attr("--gap", Literal(4))])
		assert result.props is not None
		assert result.props.props[0].key == Identifier("--gap")  # pyright: ignore[reportAttributeAccessIssue]
		assert emit(result.props) == "{--gap: 4}"

	def test_order_with_spreads(self):
		code = props_code(
			attr("a", Literal(1)), spread("rest"), attr("b", Literal(2)), spread("more")
		)
		assert code == '{"a": 1, ...rest, "b": 2, ...more}'

	def test_spread_only(self):
		assert props_code(spread("p")) == "{...p}"

	def test_no_attributes(self):
		result = get_props([])
		assert result.props is None
		assert result.key is None
		assert result.ref is None
		assert result.class_name is None
		assert not result.keyed_children
		assert not result.unkeyed_children


# =============================================================================
# Reserved slots
# =============================================================================


class TestReservedProps:
	def test_class_name(self):
		result = get_props([attr("className", "box")])
		assert result.class_name == Literal("box")
		assert result.props is None

	def test_class_alias(self):
		assert get_props([attr("class", "box")]).class_name == Literal("box")

	@pytest.mark.parametrize(
		"first,second",
		[("class", "className"), ("className", "class"), ("class", "class")],
	)
	def test_class_last_wins(self, first: str, second: str):
		result = get_props([attr(first, "a"), attr(second, "b")])
		assert result.class_name == Literal("b")
		assert result.props is None

	def test_key_and_ref(self):
		result = get_props([attr("key", Literal(1)), attr("ref", ident("r"))])
		assert result.key == Literal(1)
		assert result.ref == Identifier("r")
		assert result.props is None

	def test_repeated_key_last_wins(self):
		result = get_props([attr("key", "a"), attr("key", "b")])
		assert result.key == Literal("b")

	def test_value_less_reserved(self):
		result = get_props([attr("key"), attr("className")])
		assert result.key == Literal(True)
		assert result.class_name == Literal(True)

	def test_children_markers(self):
		result = get_props([attr("keyedChildren"), attr("unkeyedChildren")])
		assert result.keyed_children
		assert result.unkeyed_children
		assert result.props is None

	def test_marker_value_ignored(self):
		result = get_props([attr("keyedChildren", Literal(False))])
		assert result.keyed_children

	def test_reserved_names_are_case_sensitive(self):
		code = props_code(attr("Key", "a"), attr("classname", "b"), attr("REF", "c"))
		assert code == '{"Key": "a", "classname": "b", "REF": "c"}'

	def test_namespaced_key_is_not_reserved(self):
		result = get_props([attr("x:key", "a")])
		assert result.key is None
		assert result.props is not None
		assert emit(result.props) == '{"x:key": "a"}'

	def test_reserved_never_in_props(self):
		attributes = [
			spread("a"),
			attr("class", "c1"),
			attr("key", "k1"),
			attr("title", "t"),
			attr("className", "c2"),
			attr("ref", ident("r")),
			spread("b"),
			attr("key", "k2"),
			attr("keyedChildren"),
			attr("unkeyedChildren"),
		]
		result = get_props(attributes)
		assert result.props is not None
		assert emit(result.props) == '{...a, "title": "t", ...b}'
		assert result.class_name == Literal("c2")
		assert result.key == Literal("k2")
