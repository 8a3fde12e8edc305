"""Child normalization."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from jsxlower.jsx import (
	Child,
	JSXElement,
	JSXEmptyExpression,
	JSXExpressionContainer,
	JSXText,
	has_attribute,
)
from jsxlower.nodes import Expr
from jsxlower.props import KEY_ATTR
from jsxlower.text import create_text

if TYPE_CHECKING:
	from jsxlower.session import TransformSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NormalizedChildren:
	"""Transformed children.

	`children` is None (no children), a single expression, or a list of two
	or more. `possibly_keyed` is only ever set for lists.
	"""

	children: Expr | list[Expr] | None = None
	possibly_keyed: bool = False


def create_node(child: Child, session: TransformSession) -> Expr | None:
	"""Transform one child. None means it contributes nothing."""
	if isinstance(child, JSXElement):
		from jsxlower.elements import create_element

		return create_element(child, session)
	if isinstance(child, JSXText):
		return create_text(child.value)
	if isinstance(child, JSXExpressionContainer):
		expr = child.expression
		return None if isinstance(expr, JSXEmptyExpression) else expr
	logger.debug("Dropping unsupported child %s", type(child).__name__)
	return None


def get_children(
	children: Sequence[Child], session: TransformSession
) -> NormalizedChildren:
	items: list[Expr] = []
	possibly_keyed = False

	for child in children:
		node = create_node(child, session)
		if node is None:
			continue
		items.append(node)
		if not possibly_keyed and isinstance(child, JSXElement):
			possibly_keyed = has_attribute(child, KEY_ATTR)

	if not items:
		return NormalizedChildren()
	if len(items) == 1:
		# A lone child has nothing to be keyed against
		return NormalizedChildren(items[0], False)
	return NormalizedChildren(items, possibly_keyed)
