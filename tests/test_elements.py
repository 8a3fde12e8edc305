"""
Tests for call assembly: call shapes, flags and argument trimming.
"""

import pytest
from builders import attr, el, expr, ident, spread
from jsxlower.elements import NULL, Placeholder, create_element, trim_args
from jsxlower.flags import NodeFlag
from jsxlower.jsx import JSXElement
from jsxlower.nodes import Call, Identifier, Literal, emit
from jsxlower.options import TransformOptions
from jsxlower.session import TransformSession


def lower(element: JSXElement, **options) -> str:
	session = TransformSession(TransformOptions(**options))
	return emit(create_element(element, session))


# =============================================================================
# Generic host builder: newHtml(tag, children, className, flags, props, key, ref)
# =============================================================================


class TestHostCalls:
	def test_bare(self):
		assert lower(el("div")) == 'newHtml("div")'

	def test_text_child(self):
		assert lower(el("div", "hi")) == 'newHtml("div", "hi")'

	def test_class_name(self):
		assert lower(el("div", attrs=[attr("className", "a")])) == 'newHtml("div", null, "a")'

	def test_props_materialize_flags(self):
		assert (
			lower(el("div", attrs=[attr("id", "x")]))
			== 'newHtml("div", null, null, 2, {"id": "x"})'
		)

	def test_spread_props(self):
		assert lower(el("div", attrs=[spread("p")])) == 'newHtml("div", null, null, 2, {...p})'

	def test_key(self):
		assert (
			lower(el("div", attrs=[attr("key", "k")]))
			== 'newHtml("div", null, null, 2, null, "k")'
		)

	def test_ref(self):
		assert (
			lower(el("div", attrs=[attr("ref", ident("r"))]))
			== 'newHtml("div", null, null, 2, null, null, r)'
		)

	def test_class_name_key_and_children(self):
		element = el(
			"div",
			el("span"),
			"text  ",
			attrs=[attr("className", "a"), attr("key", Literal(1))],
		)
		assert lower(element) == 'newHtml("div", [newHtml("span"), "text  "], "a", 2, null, 1)'

	def test_keyed_children_on_input(self):
		element = el(
			"input",
			el("li", attrs=[attr("key", "a")]),
			el("li", attrs=[attr("key", "b")]),
			attrs=[attr("value", ident("v")), attr("keyedChildren")],
		)
		flags = NodeFlag.HTML | NodeFlag.INPUT | NodeFlag.KEYED_CHILDREN
		assert flags == 290
		assert lower(element) == (
			'newHtml("input", [newHtml("li", null, null, 2, null, "a"), '
			'newHtml("li", null, null, 2, null, "b")], null, 290, {"value": v})'
		)

	def test_inferred_keyed_children(self):
		element = el("ul", el("li", attrs=[attr("key", "a")]), el("li"))
		assert lower(element).startswith('newHtml("ul", [') and lower(element).endswith(
			"], null, 34)"
		)

	def test_unkeyed_children(self):
		element = el("ul", el("li"), el("li"), attrs=[attr("unkeyedChildren")])
		assert lower(element) == 'newHtml("ul", [newHtml("li"), newHtml("li")], null, 66)'

	def test_both_markers(self):
		element = el("ul", attrs=[attr("keyedChildren"), attr("unkeyedChildren")])
		assert lower(element) == 'newHtml("ul", null, null, 98)'

	def test_svg_flags(self):
		assert lower(el("svg")) == 'newHtml("svg", null, null, 130)'

	def test_template_flag(self):
		assert (
			lower(el("div"), templates=frozenset({"div"}))
			== 'newHtml("div", null, null, 18)'
		)

	def test_user_null_is_not_trimmed(self):
		element = el("div", attrs=[attr("ref", Literal(None))])
		assert lower(element) == 'newHtml("div", null, null, 2, null, null, null)'

	def test_pragma(self):
		assert lower(el("div"), pragma={"newHtml": "h"}) == 'h("div")'


# =============================================================================
# Component builder: newComponent(type, props, children, flags, className, key, ref)
# =============================================================================


class TestComponentCalls:
	def test_bare(self):
		assert lower(el("Foo")) == "newComponent(Foo)"

	def test_props(self):
		assert lower(el("Foo", attrs=[attr("bar", Literal(1))])) == 'newComponent(Foo, {"bar": 1})'

	def test_children(self):
		assert lower(el("Foo", "x")) == 'newComponent(Foo, null, "x")'

	def test_zero_flags_materialized_for_class_name(self):
		assert (
			lower(el("Foo", attrs=[attr("className", "c")]))
			== 'newComponent(Foo, null, null, 0, "c")'
		)

	def test_key(self):
		assert (
			lower(el("Item", attrs=[attr("key", "1")]))
			== 'newComponent(Item, null, null, 0, null, "1")'
		)

	def test_keyed_children(self):
		element = el(
			"List",
			el("Item", attrs=[attr("key", "1")]),
			el("Item", attrs=[attr("key", "2")]),
		)
		assert lower(element) == (
			'newComponent(List, null, [newComponent(Item, null, null, 0, null, "1"), '
			'newComponent(Item, null, null, 0, null, "2")], 32)'
		)

	def test_member_expression_tag(self):
		assert lower(el("Foo.Bar", attrs=[attr("x", "y")])) == 'newComponent(Foo.Bar, {"x": "y"})'

	def test_namespaced_tag(self):
		assert lower(el("svg:rect")) == "newComponent(svg:rect)"

	def test_pragma(self):
		assert lower(el("Foo"), pragma={"newComponent": "c"}) == "c(Foo)"

	def test_factories_do_not_apply(self):
		assert lower(el("Foo"), factories={"Foo": "newFoo"}) == "newComponent(Foo)"


# =============================================================================
# Tag factories: factory(className, children, flags, props, key, ref)
# =============================================================================


class TestFactoryCalls:
	FACTORIES = {"div": "newDiv", "input": "newInput"}

	def test_bare(self):
		assert lower(el("div"), factories=self.FACTORIES) == "newDiv()"

	def test_class_name_and_children(self):
		element = el("div", "x", attrs=[attr("className", "a")])
		assert lower(element, factories=self.FACTORIES) == 'newDiv("a", "x")'

	def test_html_flag_cleared(self):
		element = el("div", attrs=[attr("id", "x")])
		assert lower(element, factories=self.FACTORIES) == 'newDiv(null, null, 0, {"id": "x"})'

	def test_special_flags_kept(self):
		element = el("input", attrs=[attr("keyedChildren")])
		assert lower(element, factories=self.FACTORIES) == "newInput(null, null, 288)"

	def test_key_and_ref(self):
		element = el("div", attrs=[attr("key", "k"), attr("ref", ident("r"))])
		assert lower(element, factories=self.FACTORIES) == 'newDiv(null, null, 0, null, "k", r)'

	def test_pragma_renames_factory(self):
		assert lower(el("div"), factories=self.FACTORIES, pragma={"newDiv": "d"}) == "d()"

	def test_nested(self):
		element = el("div", el("span"), el("div"))
		assert lower(element, factories=self.FACTORIES) == 'newDiv(null, [newHtml("span"), newDiv()])'


# =============================================================================
# Trimming
# =============================================================================


class TestTrimArgs:
	def test_all_placeholders(self):
		assert trim_args([NULL, NULL]) == []

	def test_inner_placeholders_kept(self):
		a = Identifier("a")
		assert trim_args([a, NULL, a, NULL, NULL]) == [a, NULL, a]

	def test_only_shared_placeholder_trimmed(self):
		other_null = Identifier("null")
		assert trim_args([other_null]) == [other_null]

	@pytest.mark.parametrize(
		"element",
		[
			el("div"),
			el("div", attrs=[attr("key", "k")]),
			el("Foo", attrs=[attr("className", "c")]),
			el("Foo", "x", attrs=[spread("p")]),
			el("p", expr(ident("x")), attrs=[attr("ref", ident("r"))]),
		],
	)
	def test_no_trailing_placeholder(self, element: JSXElement):
		call = create_element(element, TransformSession())
		assert isinstance(call, Call)
		assert not call.args or call.args[-1] is not NULL


class TestPlaceholder:
	def test_emits_null(self):
		assert emit(NULL) == "null"

	def test_is_not_an_identifier(self):
		assert isinstance(NULL, Placeholder)
		assert not isinstance(NULL, Identifier)

	def test_frozen(self):
		with pytest.raises(AttributeError):
			NULL.name = "x"  # pyright: ignore[reportAttributeAccessIssue]
		assert emit(NULL) == "null"

	def test_shared_between_calls(self):
		session = TransformSession()
		first = create_element(el("div", attrs=[attr("key", "a")]), session)
		second = create_element(el("p", attrs=[attr("key", "b")]), session)
		assert first.args[1] is NULL
		assert second.args[1] is NULL
		assert emit(first) == 'newHtml("div", null, null, 2, null, "a")'
		assert emit(second) == 'newHtml("p", null, null, 2, null, "b")'
