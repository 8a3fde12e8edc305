from __future__ import annotations

import re

from jsxlower.nodes import Literal

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def normalize_text(text: str) -> str | None:
	"""Collapse a JSX text run the way it renders.

	Indentation at the start of continuation lines and trailing spaces before
	a line break are dropped, as are lines left empty. Spaces inside a line,
	before the first break and after the last one are kept.
	"""
	lines = _LINE_BREAK.split(text)
	last = len(lines) - 1
	kept: list[str] = []
	for i, line in enumerate(lines):
		line = line.replace("\t", " ")
		if i != 0:
			line = line.lstrip(" ")
		if i != last:
			line = line.rstrip(" ")
		if line:
			kept.append(line)
	return "".join(kept) or None


def create_text(text: str) -> Literal | None:
	normalized = normalize_text(text)
	return Literal(normalized) if normalized is not None else None
