"""Parent-linked paths over node trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, fields
from typing import Any

from jsxlower.nodes import Node


def index_of(container: Sequence[Any], node: Node) -> int:
	"""Position of `node` in `container`, compared by identity.

	Dataclass equality would match structurally equal siblings.
	"""
	for i, item in enumerate(container):
		if item is node:
			return i
	raise ValueError(f"{type(node).__name__} is not in its parent container")


@dataclass(slots=True, eq=False)
class NodePath:
	"""A node together with where it hangs in the tree.

	`field` names the attribute of the parent node holding it; `in_list` is
	set when that attribute is a list. List positions are looked up when
	needed rather than stored, so insertions into a parent list (e.g. an
	injected import) never leave a path pointing at the wrong slot.
	"""

	node: Node
	parent: NodePath | None = None
	field: str | None = None
	in_list: bool = False

	def replace_with(self, node: Node) -> None:
		if self.parent is None or self.field is None:
			raise ValueError("Cannot replace the root node")
		holder = self.parent.node
		if self.in_list:
			container = getattr(holder, self.field)
			container[index_of(container, self.node)] = node
		else:
			setattr(holder, self.field, node)
		self.node = node

	def root(self) -> tuple[Node, Node | None]:
		"""Walk up to the root node.

		Returns the root and the child of the root this path descends from
		(None when this path is the root itself).
		"""
		path = self
		anchor: Node | None = None
		while path.parent is not None:
			anchor = path.node
			path = path.parent
		return path.node, anchor

	def children(self) -> Iterator[NodePath]:
		"""Paths of the direct child nodes, in field order.

		Lists are snapshotted, so nodes inserted while iterating are not visited.
		"""
		for f in fields(self.node):  # pyright: ignore[reportArgumentType]
			value = getattr(self.node, f.name)
			if isinstance(value, Node):
				yield NodePath(value, self, f.name)
			elif isinstance(value, list):
				for item in list(value):  # pyright: ignore[reportUnknownArgumentType, reportUnknownVariableType]
					if isinstance(item, Node):
						yield NodePath(item, self, f.name, in_list=True)
