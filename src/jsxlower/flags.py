from __future__ import annotations

from enum import IntFlag


class NodeFlag(IntFlag):
	"""Bitmask passed to the run-time node builders.

	The values are shared with the run-time library and must not change.
	TEXT, FUN and CLASS are reserved for the run-time; the transform never sets them.
	"""

	TEXT = 1
	HTML = 2
	FUN = 4
	CLASS = 8
	TEMPLATE = 16

	KEYED_CHILDREN = 32
	UNKEYED_CHILDREN = 64

	SVG = 128
	INPUT = 256
	TEXT_AREA = 512


NO_FLAGS = NodeFlag(0)
