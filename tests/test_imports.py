"""
Tests for helper import injection and deduplication.
"""

from builders import el, ident
from jsxlower.imports import ImportInjector
from jsxlower.jsx import JSXElement
from jsxlower.nodes import (
	ExprStmt,
	Identifier,
	ImportDeclaration,
	Literal,
	Program,
	VarDecl,
	VarDeclarator,
	emit,
)
from jsxlower.options import TransformOptions
from jsxlower.session import TransformSession
from jsxlower.traverse import transform


def module(*elements: JSXElement) -> Program:
	"""`const a = 1;` followed by one expression statement per element."""
	body = [VarDecl("const", [VarDeclarator("a", Literal(1))])]
	body.extend(ExprStmt(e) for e in elements)
	return Program(body)  # pyright: ignore[reportArgumentType]


# =============================================================================
# ensure()
# =============================================================================


class TestEnsure:
	def test_no_module_configured(self):
		session = TransformSession(TransformOptions(pragma={"newHtml": "h"}))
		assert session.imports.ensure("newHtml") == Identifier("h")
		assert session.imports.declarations() == []

	def test_same_name_once(self):
		session = TransformSession(TransformOptions(import_="vdom"))
		for _ in range(3):
			assert session.imports.ensure("newHtml") == Identifier("newHtml")
		decls = session.imports.declarations()
		assert len(decls) == 1
		assert emit(decls[0]) == 'import { newHtml } from "vdom";'

	def test_names_share_statement(self):
		session = TransformSession(TransformOptions(import_="vdom"))
		session.imports.ensure("newHtml")
		session.imports.ensure("newComponent")
		session.imports.ensure("newHtml")
		decls = session.imports.declarations()
		assert [emit(d) for d in decls] == ['import { newHtml, newComponent } from "vdom";']

	def test_pragma_name_imported(self):
		session = TransformSession(TransformOptions(import_="vdom", pragma={"newHtml": "h"}))
		assert session.imports.ensure("newHtml") == Identifier("h")
		assert emit(session.imports.declarations()[0]) == 'import { h } from "vdom";'

	def test_factory_module(self):
		session = TransformSession(TransformOptions(import_="vdom", factory_import="vdom/tags"))
		session.imports.ensure("newDiv", is_factory=True)
		session.imports.ensure("newHtml")
		assert [emit(d) for d in session.imports.declarations()] == [
			'import { newDiv } from "vdom/tags";',
			'import { newHtml } from "vdom";',
		]

	def test_factory_without_factory_module(self):
		session = TransformSession(TransformOptions(import_="vdom"))
		assert session.imports.ensure("newDiv", is_factory=True) == Identifier("newDiv")
		assert session.imports.declarations() == []

	def test_shared_module_for_factories(self):
		session = TransformSession(TransformOptions(import_="vdom", factory_import="vdom"))
		session.imports.ensure("newDiv", is_factory=True)
		session.imports.ensure("newHtml")
		pending = session.imports.pending("vdom")
		assert pending is not None
		assert pending.names == {"newDiv", "newHtml"}
		assert len(session.imports.declarations()) == 1

	def test_standalone_not_inserted(self):
		session = TransformSession(TransformOptions(import_="vdom"))
		session.imports.ensure("newHtml")
		pending = session.imports.pending("vdom")
		assert pending is not None
		assert not pending.inserted

	def test_injector_is_per_session(self):
		options = TransformOptions(import_="vdom")
		first = TransformSession(options)
		second = TransformSession(options)
		first.imports.ensure("newHtml")
		assert isinstance(second.imports, ImportInjector)
		assert second.imports.declarations() == []


# =============================================================================
# Insertion into a program
# =============================================================================


class TestInsertion:
	def test_inserted_before_anchor_statement(self):
		program = transform(module(el("div")), TransformOptions(import_="vdom"))
		assert emit(program) == (
			"const a = 1;\n"
			'import { newHtml } from "vdom";\n'
			'newHtml("div");'
		)

	def test_one_statement_many_elements(self):
		program = transform(
			module(el("div", el("span")), el("p"), el("Foo")),
			TransformOptions(import_="vdom"),
		)
		imports = [s for s in program.body if isinstance(s, ImportDeclaration)]
		assert len(imports) == 1
		assert [s.local for s in imports[0].specifiers] == ["newHtml", "newComponent"]  # pyright: ignore[reportAttributeAccessIssue]
		assert emit(program) == (
			"const a = 1;\n"
			'import { newHtml, newComponent } from "vdom";\n'
			'newHtml("div", newHtml("span"));\n'
			'newHtml("p");\n'
			"newComponent(Foo);"
		)

	def test_later_statement_reuses_import(self):
		program = transform(module(el("Foo"), el("div")), TransformOptions(import_="vdom"))
		assert emit(program).splitlines()[1] == 'import { newComponent, newHtml } from "vdom";'

	def test_multiple_statements_use_live_index(self):
		options = TransformOptions(
			import_="vdom",
			factory_import="vdom/tags",
			factories={"div": "newDiv"},
		)
		program = transform(module(el("Foo", el("div"))), options)
		assert emit(program) == (
			"const a = 1;\n"
			'import { newDiv } from "vdom/tags";\n'
			'import { newComponent } from "vdom";\n'
			"newComponent(Foo, null, newDiv());"
		)

	def test_second_module_inserted_at_later_anchor(self):
		options = TransformOptions(
			import_="vdom",
			factory_import="vdom/tags",
			factories={"div": "newDiv"},
		)
		program = transform(module(el("Foo"), el("div")), options)
		assert emit(program) == (
			"const a = 1;\n"
			'import { newComponent } from "vdom";\n'
			"newComponent(Foo);\n"
			'import { newDiv } from "vdom/tags";\n'
			"newDiv();"
		)

	def test_no_import_without_module(self):
		program = transform(module(el("div")), TransformOptions())
		assert emit(program) == 'const a = 1;\nnewHtml("div");'

	def test_unrelated_statements_untouched(self):
		program = module(el("div"))
		program.body.append(ExprStmt(ident("done")))
		transform(program, TransformOptions(import_="vdom"))
		assert isinstance(program.body[0], VarDecl)
		assert program.body[-1] == ExprStmt(Identifier("done"))
		assert len(program.body) == 4

	def test_files_do_not_share_imports(self):
		options = TransformOptions(import_="vdom")
		first = transform(module(el("div")), options)
		second = transform(module(el("div")), options)
		for program in (first, second):
			assert emit(program).count("import ") == 1
