"""JSX input nodes.

These are the node kinds an upstream parser hands to the transform. They are
ordinary expression nodes, so a tree that still contains JSX can be emitted
(back as JSX source) and a component tag can be passed through unchanged as
a call argument.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, override

from jsxlower.nodes import Expr, Literal, Node, escape_string


# =============================================================================
# Names
# =============================================================================


@dataclass(slots=True)
class JSXIdentifier(Expr):
	"""Plain tag or attribute name: div, Button, onClick"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class JSXNamespacedName(Expr):
	"""Namespaced name: xlink:href, svg:rect"""

	namespace: JSXIdentifier
	name: JSXIdentifier

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.namespace.name)
		out.append(":")
		out.append(self.name.name)


@dataclass(slots=True)
class JSXMemberExpression(Expr):
	"""Dotted tag name: Foo.Bar, ui.Menu.Item"""

	object: JSXIdentifier | JSXMemberExpression
	property: JSXIdentifier

	@override
	def emit(self, out: list[str]) -> None:
		self.object.emit(out)
		out.append(".")
		out.append(self.property.name)


TagName: TypeAlias = JSXIdentifier | JSXNamespacedName | JSXMemberExpression


# =============================================================================
# Attributes
# =============================================================================


@dataclass(slots=True)
class JSXEmptyExpression(Expr):
	"""Contents of `{}` or `{/* comment */}`."""

	@override
	def emit(self, out: list[str]) -> None:
		pass


@dataclass(slots=True)
class JSXExpressionContainer(Node):
	"""`{expr}` in attribute value or child position."""

	expression: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		self.expression.emit(out)
		out.append("}")


@dataclass(slots=True)
class JSXAttribute(Node):
	"""Named attribute. A missing value means `true`."""

	name: JSXIdentifier | JSXNamespacedName
	value: Expr | JSXExpressionContainer | None = None

	@override
	def emit(self, out: list[str]) -> None:
		self.name.emit(out)
		if self.value is None:
			return
		out.append("=")
		if isinstance(self.value, Literal) and isinstance(self.value.value, str):
			out.append('"')
			out.append(escape_string(self.value.value))
			out.append('"')
		elif isinstance(self.value, (JSXExpressionContainer, JSXElement)):
			self.value.emit(out)
		else:
			out.append("{")
			self.value.emit(out)
			out.append("}")


@dataclass(slots=True)
class JSXSpreadAttribute(Node):
	"""Spread attribute: {...props}"""

	argument: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{...")
		self.argument.emit(out)
		out.append("}")


Attribute: TypeAlias = JSXAttribute | JSXSpreadAttribute


# =============================================================================
# Children
# =============================================================================


@dataclass(slots=True)
class JSXText(Node):
	"""Raw text run between tags, including its whitespace."""

	value: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.value)


@dataclass(slots=True)
class JSXElement(Expr):
	"""A JSX element: <name attributes...>children</name>"""

	name: TagName
	attributes: list[Attribute] = field(default_factory=list)
	children: list[Child] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("<")
		self.name.emit(out)
		for attr in self.attributes:
			out.append(" ")
			attr.emit(out)
		if not self.children:
			out.append(" />")
			return
		out.append(">")
		for child in self.children:
			child.emit(out)
		out.append("</")
		self.name.emit(out)
		out.append(">")


Child: TypeAlias = JSXText | JSXExpressionContainer | JSXElement


def has_attribute(element: JSXElement, name: str) -> bool:
	"""Whether the element carries a plain attribute called `name`, whatever its value."""
	for attr in element.attributes:
		if (
			isinstance(attr, JSXAttribute)
			and isinstance(attr.name, JSXIdentifier)
			and attr.name.name == name
		):
			return True
	return False
