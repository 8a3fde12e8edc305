"""Installed jsxlower version, or the checkout's when running from source."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

# src/jsxlower/version.py -> repository root
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def source_version(pyproject: Path = PYPROJECT) -> str:
	"""`[project].version` of a source checkout, "0.0.0" when unreadable."""
	try:
		with pyproject.open("rb") as f:
			return str(tomllib.load(f)["project"]["version"])
	except (OSError, tomllib.TOMLDecodeError, KeyError):
		return "0.0.0"


try:
	__version__: str = version("jsxlower")
except PackageNotFoundError:
	__version__ = source_version()
