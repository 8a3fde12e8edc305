"""Attribute partitioning.

Splits an element's attributes into the generic properties object and the
reserved slots the run-time builders take as separate arguments.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from jsxlower.jsx import (
	Attribute,
	JSXAttribute,
	JSXExpressionContainer,
	JSXIdentifier,
	JSXNamespacedName,
	JSXSpreadAttribute,
)
from jsxlower.nodes import Expr, Identifier, Literal, Object, Property, Spread

CLASS_NAME_ATTRS = frozenset({"className", "class"})
KEY_ATTR = "key"
REF_ATTR = "ref"
KEYED_CHILDREN_ATTR = "keyedChildren"
UNKEYED_CHILDREN_ATTR = "unkeyedChildren"


@dataclass(slots=True)
class PartitionedProps:
	props: Object | None = None
	key: Expr | None = None
	ref: Expr | None = None
	class_name: Expr | None = None
	keyed_children: bool = False
	unkeyed_children: bool = False


def attribute_name(name: JSXIdentifier | JSXNamespacedName) -> str:
	"""`foo` for plain names, `ns:local` for namespaced ones."""
	if isinstance(name, JSXNamespacedName):
		return f"{name.namespace.name}:{name.name.name}"
	return name.name


def attribute_value(value: Expr | JSXExpressionContainer | None) -> Expr:
	"""Value-less attributes are `true`; containers are unwrapped; anything else is kept."""
	if value is None:
		return Literal(True)
	if isinstance(value, JSXExpressionContainer):
		return value.expression
	return value


def property_key(name: str) -> Expr:
	"""Object key for a generic property.

	Custom-property style names (leading `-`) are emitted bare.
	"""
	if name.startswith("-"):
		return Identifier(name)
	return Literal(name)


def get_props(attributes: Sequence[Attribute]) -> PartitionedProps:
	"""Partition attributes in document order.

	Later reserved attributes overwrite earlier ones (`class` and `className`
	share a slot). Spreads keep their position among the generic properties.
	"""
	result = PartitionedProps()
	entries: list[Property | Spread] = []

	for attr in attributes:
		if isinstance(attr, JSXSpreadAttribute):
			entries.append(Spread(attr.argument))
			continue
		if not isinstance(attr, JSXAttribute):
			continue

		name = attribute_name(attr.name)
		if name in CLASS_NAME_ATTRS:
			result.class_name = attribute_value(attr.value)
		elif name == KEYED_CHILDREN_ATTR:
			result.keyed_children = True
		elif name == UNKEYED_CHILDREN_ATTR:
			result.unkeyed_children = True
		elif name == REF_ATTR:
			result.ref = attribute_value(attr.value)
		elif name == KEY_ATTR:
			result.key = attribute_value(attr.value)
		else:
			entries.append(Property(property_key(name), attribute_value(attr.value)))

	if entries:
		result.props = Object(entries)
	return result
