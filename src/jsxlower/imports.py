"""Injection of run-time helper imports.

Each module path gets at most one import statement per file; each helper
name at most one specifier in it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jsxlower.nodes import Identifier, ImportDeclaration, ImportSpecifier, Program
from jsxlower.paths import index_of

if TYPE_CHECKING:
	from jsxlower.session import TransformSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PendingImport:
	"""Import statement for one module path, and the names it already binds."""

	declaration: ImportDeclaration
	names: set[str] = field(default_factory=set)
	inserted: bool = False

	def add(self, name: str) -> bool:
		"""Append a `{ name }` specifier unless present. Returns True if added."""
		if name in self.names:
			return False
		self.names.add(name)
		self.declaration.specifiers.append(ImportSpecifier(name, name))
		return True


class ImportInjector:
	"""Resolves helper names to identifiers, importing them on first use."""

	_session: TransformSession
	_by_src: dict[str, PendingImport]

	def __init__(self, session: TransformSession) -> None:
		self._session = session
		self._by_src = {}

	def ensure(self, name: str, is_factory: bool = False) -> Identifier:
		"""Identifier to call for helper `name`.

		Without a configured module the bare (pragma-mapped) name is returned
		and nothing is imported.
		"""
		options = self._session.options
		ident = options.display_name(name)
		src = options.module_for(is_factory)
		if src is None:
			return Identifier(ident)

		pending = self._by_src.get(src)
		if pending is None:
			pending = PendingImport(ImportDeclaration(src))
			self._by_src[src] = pending
			pending.inserted = self._insert(pending.declaration)

		if pending.add(ident):
			logger.debug("Added '%s' to import from '%s'", ident, src)
		return Identifier(ident)

	def declarations(self) -> list[ImportDeclaration]:
		"""All import statements created in this session, in creation order."""
		return [p.declaration for p in self._by_src.values()]

	def pending(self, src: str) -> PendingImport | None:
		return self._by_src.get(src)

	def _insert(self, declaration: ImportDeclaration) -> bool:
		"""Insert before the top-level statement holding the current element.

		The anchor's index is looked up at insertion time so statements
		inserted earlier in the pass are accounted for.
		"""
		path = self._session.path
		if path is None:
			return False
		root, anchor = path.root()
		if not isinstance(root, Program) or anchor is None:
			return False
		index = index_of(root.body, anchor)
		root.body.insert(index, declaration)
		logger.debug(
			"Inserted import from '%s' at top-level index %d", declaration.source, index
		)
		return True
