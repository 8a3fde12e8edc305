"""Per-file transform state."""

from __future__ import annotations

from jsxlower.imports import ImportInjector
from jsxlower.options import TransformOptions
from jsxlower.paths import NodePath


class TransformSession:
	"""State for transforming one file.

	Passed explicitly through every transform call; nothing here outlives the
	file, so independent files can be transformed with separate sessions.

	`path` is the path of the element the driver is currently replacing. The
	import injector uses it to find the top-level statement to insert before.
	"""

	__slots__: tuple[str, ...] = ("options", "path", "imports", "elements")
	options: TransformOptions
	path: NodePath | None
	imports: ImportInjector
	elements: int

	def __init__(self, options: TransformOptions | None = None) -> None:
		self.options = options or TransformOptions()
		self.path = None
		self.imports = ImportInjector(self)
		self.elements = 0
