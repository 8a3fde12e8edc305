"""Host element vs. component classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jsxlower.flags import NO_FLAGS, NodeFlag
from jsxlower.jsx import JSXIdentifier, TagName
from jsxlower.nodes import Expr, Literal
from jsxlower.options import TransformOptions

logger = logging.getLogger(__name__)

SPECIAL_TAGS: dict[str, NodeFlag] = {
	"svg": NodeFlag.SVG,
	"input": NodeFlag.INPUT,
	"textarea": NodeFlag.TEXT_AREA,
}


@dataclass(slots=True)
class ElementType:
	"""Resolved element type and its kind flags.

	`type` is a string Literal for host elements and the untouched tag node
	for components.
	"""

	type: Expr
	flags: NodeFlag

	@property
	def is_host(self) -> bool:
		return bool(self.flags & NodeFlag.HTML)


def is_host_name(name: str) -> bool:
	"""Names starting with a lowercase letter are host elements.

	Anything whose first character has no distinct uppercase form (uppercase
	letters, `_`, `$`, digits) names a component.
	"""
	first = name[:1]
	return first.upper() != first


def get_type(tag: TagName, options: TransformOptions) -> ElementType:
	"""Classify a tag.

	Only plain identifiers can be host elements. Namespaced names and member
	expressions are always components; their identity is resolved at run time.
	"""
	if not isinstance(tag, JSXIdentifier) or not is_host_name(tag.name):
		return ElementType(type=tag, flags=NO_FLAGS)

	name = tag.name
	flags = NodeFlag.HTML | SPECIAL_TAGS.get(name, NO_FLAGS)
	if name in options.templates:
		flags |= NodeFlag.TEMPLATE
	logger.debug("Classified <%s> as host element (flags=%d)", name, flags)
	return ElementType(type=Literal(name), flags=flags)
