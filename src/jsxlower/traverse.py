"""Driver: find JSX elements in a program and replace them with calls."""

from __future__ import annotations

import logging

from jsxlower.elements import create_element
from jsxlower.jsx import JSXElement
from jsxlower.nodes import Call, Program
from jsxlower.options import TransformOptions
from jsxlower.paths import NodePath
from jsxlower.session import TransformSession

logger = logging.getLogger(__name__)


def transform(
	program: Program,
	options: TransformOptions | None = None,
	*,
	session: TransformSession | None = None,
) -> Program:
	"""Replace every JSX element in `program`, in place.

	Elements are visited in document order. After an element is replaced the
	traversal continues into the generated call, so elements nested inside
	passed-through expressions (`{items.map((i) => <li />)}`) are reached too.
	"""
	session = session or TransformSession(options)
	logger.debug("Transforming program with %d statements", len(program.body))
	_visit(NodePath(program), session)
	logger.debug(
		"Transformed %d elements, %d import statements",
		session.elements,
		len(session.imports.declarations()),
	)
	return program


def transform_element(
	element: JSXElement,
	options: TransformOptions | None = None,
	*,
	session: TransformSession | None = None,
) -> Call:
	"""Transform a single element outside of any program.

	Nothing is inserted anywhere; the import statements the call needs are
	available from `session.imports.declarations()`.
	"""
	session = session or TransformSession(options)
	session.path = NodePath(element)
	call = create_element(element, session)
	_visit(NodePath(call), session)
	return call


def _visit(path: NodePath, session: TransformSession) -> None:
	if isinstance(path.node, JSXElement):
		session.path = path
		path.replace_with(create_element(path.node, session))
	for child in path.children():
		_visit(child, session)
