from __future__ import annotations

from typing import Any


class JsxLowerError(Exception):
	"""Base class for errors raised by jsxlower."""


class OptionsError(JsxLowerError):
	"""Malformed transform configuration."""


class LoadError(JsxLowerError):
	"""A Babel JSON AST node that cannot be loaded."""

	node_type: str | None
	line: int | None
	column: int | None

	def __init__(self, message: str, node: Any = None) -> None:
		self.node_type = None
		self.line = None
		self.column = None
		if isinstance(node, dict):
			node_type = node.get("type")
			self.node_type = node_type if isinstance(node_type, str) else None
			loc = node.get("loc")
			if isinstance(loc, dict) and isinstance(loc.get("start"), dict):
				self.line = loc["start"].get("line")
				self.column = loc["start"].get("column")
		if self.line is not None:
			message = f"{message} (line {self.line}, column {self.column})"
		super().__init__(message)
