"""Call assembly: one JSX element becomes one builder call.

Three call shapes, each a fixed positional schema:

	factory(className, children, flags, props, key, ref)
	newHtml(tag, children, className, flags, props, key, ref)
	newComponent(type, props, children, flags, className, key, ref)

Omitted positions hold the NULL placeholder; trailing placeholders are
trimmed so most calls only spell out a short prefix.

The flags argument only appears when some flag is set or a later argument
follows. For newHtml the HTML bit does not count on its own, since the
builder implies it: `<div/>` is `newHtml("div")`, `<svg/>` is
`newHtml("svg", null, null, 130)`. Once written out, flags always carry the
full bitmask.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, override

from jsxlower.children import get_children
from jsxlower.classify import get_type
from jsxlower.flags import NO_FLAGS, NodeFlag
from jsxlower.jsx import JSXElement, JSXIdentifier
from jsxlower.nodes import Array, Call, Expr, Literal
from jsxlower.props import get_props

if TYPE_CHECKING:
	from jsxlower.session import TransformSession

HOST_BUILDER = "newHtml"
COMPONENT_BUILDER = "newComponent"


@dataclass(slots=True, frozen=True)
class Placeholder(Expr):
	"""`null` standing in for an omitted argument.

	Stateless and frozen, so the one shared instance can sit in every
	generated tree.
	"""

	@override
	def emit(self, out: list[str]) -> None:
		out.append("null")


# Compared by identity: a user-written `null` is a Literal and never trimmed.
NULL = Placeholder()


def trim_args(args: Sequence[Expr]) -> list[Expr]:
	"""Drop trailing placeholders."""
	end = len(args)
	while end > 0 and args[end - 1] is NULL:
		end -= 1
	return list(args[:end])


def _or_null(expr: Expr | None) -> Expr:
	return NULL if expr is None else expr


def _flags_arg(
	flags: NodeFlag, later: Sequence[Expr], implied: NodeFlag = NO_FLAGS
) -> Expr:
	"""Numeric flags, or the placeholder when no flag beyond `implied` is set
	and nothing follows."""
	if flags & ~implied or any(arg is not NULL for arg in later):
		return Literal(int(flags))
	return NULL


def _children_arg(children: Expr | list[Expr] | None) -> Expr:
	if children is None:
		return NULL
	if isinstance(children, list):
		return Array(children)
	return children


def create_element(element: JSXElement, session: TransformSession) -> Call:
	"""Build the call expression replacing `element`.

	Children are transformed first, so helpers used by nested elements are
	imported before the ones used by their parent.
	"""
	normalized = get_children(element.children, session)
	element_type = get_type(element.name, session.options)
	props = get_props(element.attributes)

	flags = element_type.flags
	if normalized.possibly_keyed or props.keyed_children:
		flags |= NodeFlag.KEYED_CHILDREN
	if props.unkeyed_children:
		flags |= NodeFlag.UNKEYED_CHILDREN

	children = _children_arg(normalized.children)
	class_name = _or_null(props.class_name)
	obj = _or_null(props.props)
	key = _or_null(props.key)
	ref = _or_null(props.ref)

	factory: str | None = None
	if element_type.is_host and isinstance(element.name, JSXIdentifier):
		factory = session.options.factories.get(element.name.name)

	args: list[Expr]
	if factory is not None:
		flags &= ~NodeFlag.HTML
		args = [class_name, children, _flags_arg(flags, [obj, key, ref]), obj, key, ref]
		helper = factory
	elif element_type.is_host:
		args = [
			element_type.type,
			children,
			class_name,
			# newHtml implies HTML
			_flags_arg(flags, [obj, key, ref], implied=NodeFlag.HTML),
			obj,
			key,
			ref,
		]
		helper = HOST_BUILDER
	else:
		args = [
			element_type.type,
			obj,
			children,
			_flags_arg(flags, [class_name, key, ref]),
			class_name,
			key,
			ref,
		]
		helper = COMPONENT_BUILDER

	callee = session.imports.ensure(helper, is_factory=factory is not None)
	session.elements += 1
	return Call(callee, trim_args(args))

