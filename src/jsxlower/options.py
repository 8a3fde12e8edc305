"""Transform configuration."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from jsxlower.errors import OptionsError


@dataclass(frozen=True, slots=True)
class TransformOptions:
	"""Options for one transform pass.

	- pragma: helper name -> identifier to call instead (applies to the
	  generic builders and to factory helpers alike)
	- import_: module the generic builders are imported from. None means the
	  builders are globals and no import is injected.
	- factory_import: module the per-tag factories are imported from.
	- templates: host tag names that get the TEMPLATE flag.
	- factories: host tag name -> factory helper name.
	"""

	pragma: Mapping[str, str] = field(default_factory=dict)
	import_: str | None = None
	factory_import: str | None = None
	templates: frozenset[str] = frozenset()
	factories: Mapping[str, str] = field(default_factory=dict)

	def display_name(self, helper: str) -> str:
		"""Identifier emitted for `helper`, after pragma remapping."""
		return self.pragma.get(helper, helper)

	def module_for(self, is_factory: bool) -> str | None:
		return self.factory_import if is_factory else self.import_

	def merged(self, **changes: Any) -> TransformOptions:
		"""Copy with mapping fields merged and scalar fields replaced.

		None values are ignored so unset CLI flags never clobber a config file.
		"""
		updates: dict[str, Any] = {}
		for name, value in changes.items():
			if value is None:
				continue
			if name in ("pragma", "factories"):
				updates[name] = {**getattr(self, name), **value}
			elif name == "templates":
				updates[name] = self.templates | frozenset(value)
			else:
				updates[name] = value
		return replace(self, **updates)

	@classmethod
	def from_mapping(cls, data: Mapping[str, Any]) -> TransformOptions:
		"""Build options from plugin-style keys.

		Accepts `pragma`, `import`, `factoryImport`, `templates` (mapping
		keyed by tag, or a list of tags) and `factories` (alias `factory`).
		Unknown keys are ignored.
		"""
		if not isinstance(data, Mapping):
			raise OptionsError(
				f"Options must be a mapping, got {type(data).__name__}"
			)
		factories = data.get("factories", data.get("factory"))
		return cls(
			pragma=_string_map(data.get("pragma"), "pragma"),
			import_=_optional_str(data.get("import"), "import"),
			factory_import=_optional_str(data.get("factoryImport"), "factoryImport"),
			templates=_tag_set(data.get("templates")),
			factories=_string_map(factories, "factories"),
		)

	@classmethod
	def load(cls, path: Path) -> TransformOptions:
		"""Read options from a JSON file."""
		try:
			data = json.loads(path.read_text("utf-8"))
		except json.JSONDecodeError as exc:
			raise OptionsError(f"Invalid JSON in {path}: {exc}") from exc
		return cls.from_mapping(data)


def parse_assignments(values: Iterable[str], what: str) -> dict[str, str]:
	"""Parse `name=value` pairs given on the command line."""
	result: dict[str, str] = {}
	for item in values:
		name, sep, value = item.partition("=")
		if not sep or not name or not value:
			raise OptionsError(f"Expected NAME=VALUE for {what}, got {item!r}")
		result[name] = value
	return result


def _optional_str(value: Any, key: str) -> str | None:
	if value is None or value is False:
		return None
	if not isinstance(value, str):
		raise OptionsError(f"'{key}' must be a string")
	return value


def _string_map(value: Any, key: str) -> dict[str, str]:
	if value is None:
		return {}
	if not isinstance(value, Mapping):
		raise OptionsError(f"'{key}' must be a mapping of names")
	result: dict[str, str] = {}
	for name, target in value.items():
		if not isinstance(name, str) or not isinstance(target, str):
			raise OptionsError(f"'{key}' entries must map strings to strings")
		result[name] = target
	return result


def _tag_set(value: Any) -> frozenset[str]:
	if value is None:
		return frozenset()
	# Membership is by key; mapping values are not inspected
	if isinstance(value, (Mapping, list, tuple)):
		return frozenset(str(name) for name in value)
	raise OptionsError("'templates' must be a mapping or a list of tag names")
