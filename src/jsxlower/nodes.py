"""JavaScript output AST and code emission.

Nodes are plain dataclasses. Every node knows how to emit itself into a list
of string fragments; `emit()` joins the fragments for a whole tree.
Lists held by nodes are mutable so the driver can substitute children in place.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal as Lit
from typing import TypeAlias, override


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for all AST nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript code into the output buffer."""


class Expr(Node, ABC):
	"""Base class for expression nodes."""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> int:
		"""Operator precedence (higher = binds tighter). Default: primary (20)."""
		return 20


class Stmt(Node, ABC):
	"""Base class for statement nodes."""

	__slots__: tuple[str, ...] = ()


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(slots=True)
class Identifier(Expr):
	"""JS identifier: x, foo, newHtml"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(Expr):
	"""JS literal: 42, "hello", true, null"""

	value: int | float | str | bool | None

	@override
	def emit(self, out: list[str]) -> None:
		if self.value is None:
			out.append("null")
		elif isinstance(self.value, bool):
			out.append("true" if self.value else "false")
		elif isinstance(self.value, str):
			out.append('"')
			out.append(escape_string(self.value))
			out.append('"')
		elif isinstance(self.value, float) and self.value.is_integer():
			out.append(str(int(self.value)))
		else:
			out.append(str(self.value))


@dataclass(slots=True)
class RegExp(Expr):
	"""JS regular expression literal: /pattern/flags"""

	pattern: str
	flags: str = ""

	@override
	def emit(self, out: list[str]) -> None:
		out.append("/")
		out.append(self.pattern)
		out.append("/")
		out.append(self.flags)


@dataclass(slots=True)
class BigInt(Expr):
	"""JS BigInt literal: 123n (value holds the digits)"""

	value: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.value)
		out.append("n")


@dataclass(slots=True)
class This(Expr):
	"""JS this"""

	@override
	def emit(self, out: list[str]) -> None:
		out.append("this")


@dataclass(slots=True)
class Elision(Expr):
	"""Hole in an array literal or array pattern: [a, , b]"""

	@override
	def emit(self, out: list[str]) -> None:
		pass


@dataclass(slots=True)
class Array(Expr):
	"""JS array or array pattern: [a, b, c]"""

	elements: list[Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		_emit_list(self.elements, out)
		if self.elements and isinstance(self.elements[-1], Elision):
			# A trailing hole needs its own comma
			out.append(",")
		out.append("]")


@dataclass(slots=True)
class Property(Node):
	"""Object entry: "key": value

	The key is usually a string Literal. An Identifier key is emitted bare,
	a computed key in brackets.
	"""

	key: Expr
	value: Expr
	computed: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		_emit_key(self.key, self.computed, out)
		out.append(": ")
		_emit_assignable(self.value, out)


@dataclass(slots=True)
class Spread(Expr):
	"""JS spread or rest element: ...expr"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("...")
		_emit_assignable(self.expr, out)


@dataclass(slots=True)
class Method(Node):
	"""Object or class method: static async *get key(params) { ... }

	kind: "method", "get", "set" or "constructor"
	"""

	key: Expr
	params: list[str | Expr]
	body: Block
	kind: Lit["method", "get", "set", "constructor"] = "method"
	computed: bool = False
	is_static: bool = False
	is_async: bool = False
	is_generator: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		if self.is_static:
			out.append("static ")
		if self.is_async:
			out.append("async ")
		if self.is_generator:
			out.append("*")
		if self.kind in ("get", "set"):
			out.append(self.kind)
			out.append(" ")
		_emit_key(self.key, self.computed, out)
		out.append("(")
		_emit_params(self.params, out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class Object(Expr):
	"""JS object or object pattern: { "key": value, method() {}, ...spread }"""

	props: list[Property | Spread | Method] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		if not self.props:
			out.append("{}")
			return
		out.append("{")
		_emit_list(self.props, out)
		out.append("}")


@dataclass(slots=True)
class Member(Expr):
	"""JS member access: obj.prop or obj?.prop"""

	obj: Expr
	prop: str
	optional: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("?." if self.optional else ".")
		out.append(self.prop)


@dataclass(slots=True)
class Subscript(Expr):
	"""JS subscript access: obj[key] or obj?.[key]"""

	obj: Expr
	key: Expr
	optional: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("?.[" if self.optional else "[")
		self.key.emit(out)
		out.append("]")


@dataclass(slots=True)
class Call(Expr):
	"""JS function call: fn(args) or fn?.(args)"""

	callee: Expr
	args: list[Expr] = field(default_factory=list)
	optional: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.callee, out)
		out.append("?.(" if self.optional else "(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class New(Expr):
	"""JS new expression: new Ctor(args)"""

	ctor: Expr
	args: list[Expr] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("new ")
		_emit_primary(self.ctor, out)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class Unary(Expr):
	"""JS unary expression: -x, !x, typeof x"""

	op: str
	operand: Expr

	@override
	def precedence(self) -> int:
		return 17

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.op)
		operand = self.operand
		if self.op.isalpha() or (
			# `- -x` and `+ ++x` must not fuse into `--x` and `+++x`
			isinstance(operand, (Unary, Update))
			and operand.op[:1] == self.op
			and (isinstance(operand, Unary) or operand.prefix)
		):
			out.append(" ")
		_emit_paren(operand, self.precedence(), "unary", out)


@dataclass(slots=True)
class Binary(Expr):
	"""JS binary or logical expression: x + y, a && b"""

	left: Expr
	op: str
	right: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE.get(self.op, 0)

	@override
	def emit(self, out: list[str]) -> None:
		prec = self.precedence()
		_emit_paren(self.left, prec, "left" if self.op != "**" else "right", out)
		out.append(" ")
		out.append(self.op)
		out.append(" ")
		_emit_paren(self.right, prec, "right" if self.op != "**" else "left", out)


@dataclass(slots=True)
class Ternary(Expr):
	"""JS conditional expression: cond ? a : b"""

	cond: Expr
	then: Expr
	else_: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["?:"]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_paren(self.cond, self.precedence() + 1, "left", out)
		out.append(" ? ")
		_emit_assignable(self.then, out)
		out.append(" : ")
		_emit_assignable(self.else_, out)


@dataclass(slots=True)
class Assign(Expr):
	"""JS assignment expression: target = value, target += value

	target may be an identifier, a member access or a pattern.
	"""

	target: Expr
	value: Expr
	op: str = "="

	@override
	def precedence(self) -> int:
		return 3

	@override
	def emit(self, out: list[str]) -> None:
		self.target.emit(out)
		out.append(" ")
		out.append(self.op)
		out.append(" ")
		_emit_assignable(self.value, out)


@dataclass(slots=True)
class Update(Expr):
	"""JS increment/decrement: ++x, x--"""

	op: Lit["++", "--"]
	operand: Expr
	prefix: bool = False

	@override
	def precedence(self) -> int:
		return 17 if self.prefix else 18

	@override
	def emit(self, out: list[str]) -> None:
		if self.prefix:
			out.append(self.op)
		_emit_paren(self.operand, 18, "unary", out)
		if not self.prefix:
			out.append(self.op)


@dataclass(slots=True)
class Sequence(Expr):
	"""JS comma expression: a, b, c"""

	exprs: list[Expr]

	@override
	def precedence(self) -> int:
		return 1

	@override
	def emit(self, out: list[str]) -> None:
		_emit_list(self.exprs, out)


@dataclass(slots=True)
class Await(Expr):
	"""JS await expression: await x"""

	operand: Expr

	@override
	def precedence(self) -> int:
		return 17

	@override
	def emit(self, out: list[str]) -> None:
		out.append("await ")
		_emit_paren(self.operand, 17, "unary", out)


@dataclass(slots=True)
class Yield(Expr):
	"""JS yield expression: yield x, yield* x"""

	operand: Expr | None = None
	delegate: bool = False

	@override
	def precedence(self) -> int:
		return 2

	@override
	def emit(self, out: list[str]) -> None:
		out.append("yield*" if self.delegate else "yield")
		if self.operand is not None:
			out.append(" ")
			_emit_assignable(self.operand, out)


@dataclass(slots=True)
class Template(Expr):
	"""JS template literal: `hello ${name}`

	Parts alternate: [str, Expr, str, Expr, str, ...]
	Always starts and ends with a string (may be empty).
	"""

	parts: list[str | Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("`")
		for p in self.parts:
			if isinstance(p, str):
				out.append(escape_template(p))
			else:
				out.append("${")
				p.emit(out)
				out.append("}")
		out.append("`")


@dataclass(slots=True)
class TaggedTemplate(Expr):
	"""JS tagged template: tag`text ${x}`"""

	tag: Expr
	quasi: Template

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.tag, out)
		self.quasi.emit(out)


@dataclass(slots=True)
class Arrow(Expr):
	"""JS arrow function: (x) => expr or (x) => { ... }"""

	params: list[str | Expr]
	body: Expr | Block
	is_async: bool = False

	@override
	def precedence(self) -> int:
		return 3

	@override
	def emit(self, out: list[str]) -> None:
		if self.is_async:
			out.append("async ")
		out.append("(")
		_emit_params(self.params, out)
		out.append(") => ")
		if isinstance(self.body, Object) or (
			isinstance(self.body, Expr) and self.body.precedence() < 3
		):
			out.append("(")
			self.body.emit(out)
			out.append(")")
		else:
			self.body.emit(out)


@dataclass(slots=True)
class Function(Expr):
	"""JS function expression: function name(params) { ... }

	Declarations wrap it in FunctionDecl.
	"""

	params: list[str | Expr]
	body: Block
	name: str | None = None
	is_async: bool = False
	is_generator: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		if self.is_async:
			out.append("async ")
		out.append("function*" if self.is_generator else "function")
		if self.name:
			out.append(" ")
			out.append(self.name)
		out.append("(")
		_emit_params(self.params, out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class ClassProperty(Node):
	"""Class field: static key = value;"""

	key: Expr
	value: Expr | None = None
	computed: bool = False
	is_static: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		if self.is_static:
			out.append("static ")
		_emit_key(self.key, self.computed, out)
		if self.value is not None:
			out.append(" = ")
			_emit_assignable(self.value, out)
		out.append(";")


@dataclass(slots=True)
class Class(Expr):
	"""JS class expression: class Name extends Base { ... }

	Declarations wrap it in ClassDecl.
	"""

	body: list[Method | ClassProperty] = field(default_factory=list)
	name: str | None = None
	superclass: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("class")
		if self.name:
			out.append(" ")
			out.append(self.name)
		if self.superclass is not None:
			out.append(" extends ")
			_emit_primary(self.superclass, out)
		out.append(" {\n")
		for member in self.body:
			member.emit(out)
			out.append("\n")
		out.append("}")


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass(slots=True)
class ExprStmt(Stmt):
	"""JS expression statement: expr;"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		# Leading `{`, `function` or `class` would parse as a block or declaration
		if isinstance(_leftmost(self.expr), (Object, Function, Class)):
			out.append("(")
			self.expr.emit(out)
			out.append(")")
		else:
			self.expr.emit(out)
		out.append(";")


@dataclass(slots=True)
class Block(Stmt):
	"""JS block: { ... } - a sequence of statements."""

	body: list[Stmt] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{\n")
		for stmt in self.body:
			stmt.emit(out)
			out.append("\n")
		out.append("}")


@dataclass(slots=True)
class Return(Stmt):
	"""JS return statement: return expr;"""

	value: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("return")
		if self.value is not None:
			out.append(" ")
			self.value.emit(out)
		out.append(";")


@dataclass(slots=True)
class If(Stmt):
	"""JS if statement: if (cond) stmt else stmt"""

	cond: Expr
	then: Stmt
	else_: Stmt | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("if (")
		self.cond.emit(out)
		out.append(") ")
		self.then.emit(out)
		if self.else_ is not None:
			out.append(" else ")
			self.else_.emit(out)


@dataclass(slots=True)
class VarDeclarator(Node):
	"""Single binding of a variable declaration: name = init

	name is an identifier or a destructuring pattern.
	"""

	name: str | Expr
	init: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		_emit_params([self.name], out)
		if self.init is not None:
			out.append(" = ")
			_emit_assignable(self.init, out)


@dataclass(slots=True)
class VarDecl(Stmt):
	"""JS variable declaration: const a = 1, b = 2;"""

	kind: Lit["var", "let", "const"]
	declarations: list[VarDeclarator]

	@override
	def emit(self, out: list[str]) -> None:
		self.emit_head(out)
		out.append(";")

	def emit_head(self, out: list[str]) -> None:
		"""The declaration without its semicolon, as in a `for` header."""
		out.append(self.kind)
		out.append(" ")
		_emit_list(self.declarations, out)


@dataclass(slots=True)
class FunctionDecl(Stmt):
	"""JS function declaration: function name(params) { ... }"""

	function: Function

	@override
	def emit(self, out: list[str]) -> None:
		self.function.emit(out)


@dataclass(slots=True)
class ClassDecl(Stmt):
	"""JS class declaration: class Name { ... }"""

	cls: Class

	@override
	def emit(self, out: list[str]) -> None:
		self.cls.emit(out)


@dataclass(slots=True)
class For(Stmt):
	"""JS for loop: for (init; test; update) stmt"""

	init: VarDecl | Expr | None = None
	test: Expr | None = None
	update: Expr | None = None
	body: Stmt = field(default_factory=Block)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("for (")
		_emit_for_left(self.init, out)
		out.append(";")
		if self.test is not None:
			out.append(" ")
			self.test.emit(out)
		out.append(";")
		if self.update is not None:
			out.append(" ")
			self.update.emit(out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class ForOf(Stmt):
	"""JS for-of loop: for (const x of iter) stmt, or for await (...)"""

	target: VarDecl | Expr
	iter: Expr
	body: Stmt
	is_await: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		out.append("for await (" if self.is_await else "for (")
		_emit_for_left(self.target, out)
		out.append(" of ")
		_emit_assignable(self.iter, out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class ForIn(Stmt):
	"""JS for-in loop: for (const key in obj) stmt"""

	target: VarDecl | Expr
	obj: Expr
	body: Stmt

	@override
	def emit(self, out: list[str]) -> None:
		out.append("for (")
		_emit_for_left(self.target, out)
		out.append(" in ")
		self.obj.emit(out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class While(Stmt):
	"""JS while loop: while (cond) stmt"""

	cond: Expr
	body: Stmt

	@override
	def emit(self, out: list[str]) -> None:
		out.append("while (")
		self.cond.emit(out)
		out.append(") ")
		self.body.emit(out)


@dataclass(slots=True)
class DoWhile(Stmt):
	"""JS do-while loop: do stmt while (cond);"""

	body: Stmt
	cond: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("do ")
		self.body.emit(out)
		out.append(" while (")
		self.cond.emit(out)
		out.append(");")


@dataclass(slots=True)
class Break(Stmt):
	"""JS break statement."""

	label: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("break")
		if self.label:
			out.append(" ")
			out.append(self.label)
		out.append(";")


@dataclass(slots=True)
class Continue(Stmt):
	"""JS continue statement."""

	label: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("continue")
		if self.label:
			out.append(" ")
			out.append(self.label)
		out.append(";")


@dataclass(slots=True)
class Labeled(Stmt):
	"""JS labeled statement: outer: stmt"""

	label: str
	body: Stmt

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.label)
		out.append(": ")
		self.body.emit(out)


@dataclass(slots=True)
class Throw(Stmt):
	"""JS throw statement: throw expr;"""

	value: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("throw ")
		self.value.emit(out)
		out.append(";")


@dataclass(slots=True)
class Try(Stmt):
	"""JS try statement: try { ... } catch (e) { ... } finally { ... }

	A handler without a param emits as an optional catch binding.
	"""

	block: Block
	handler: Block | None = None
	param: str | Expr | None = None
	finalizer: Block | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("try ")
		self.block.emit(out)
		if self.handler is not None:
			out.append(" catch ")
			if self.param is not None:
				out.append("(")
				_emit_params([self.param], out)
				out.append(") ")
			self.handler.emit(out)
		if self.finalizer is not None:
			out.append(" finally ")
			self.finalizer.emit(out)


@dataclass(slots=True)
class SwitchCase(Node):
	"""One clause of a switch: case test: ... or default: ..."""

	test: Expr | None
	body: list[Stmt] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		if self.test is None:
			out.append("default:")
		else:
			out.append("case ")
			self.test.emit(out)
			out.append(":")
		for stmt in self.body:
			out.append("\n")
			stmt.emit(out)


@dataclass(slots=True)
class Switch(Stmt):
	"""JS switch statement: switch (x) { case 1: ... }"""

	discriminant: Expr
	cases: list[SwitchCase] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("switch (")
		self.discriminant.emit(out)
		out.append(") {\n")
		for case in self.cases:
			case.emit(out)
			out.append("\n")
		out.append("}")


@dataclass(slots=True)
class ImportSpecifier(Node):
	"""Named import binding: imported as local"""

	imported: str
	local: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_module_name(self.imported, out)
		if self.local != self.imported:
			out.append(" as ")
			out.append(self.local)


@dataclass(slots=True)
class ImportDefaultSpecifier(Node):
	"""Default import binding: import local from "src" """

	local: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.local)


@dataclass(slots=True)
class ImportNamespaceSpecifier(Node):
	"""Namespace import binding: import * as local from "src" """

	local: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append("* as ")
		out.append(self.local)


Specifier: TypeAlias = ImportSpecifier | ImportDefaultSpecifier | ImportNamespaceSpecifier


@dataclass(slots=True)
class ImportDeclaration(Stmt):
	"""JS import: import def, { a, b as c } from "src";

	A declaration without specifiers emits as a side-effect import.
	"""

	source: str
	specifiers: list[Specifier] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("import ")
		if self.specifiers:
			named = [s for s in self.specifiers if isinstance(s, ImportSpecifier)]
			others = [s for s in self.specifiers if not isinstance(s, ImportSpecifier)]
			_emit_list(others, out)
			if named:
				if others:
					out.append(", ")
				out.append("{ ")
				_emit_list(named, out)
				out.append(" }")
			out.append(" from ")
		out.append('"')
		out.append(escape_string(self.source))
		out.append('";')


@dataclass(slots=True)
class ExportDefault(Stmt):
	"""JS default export: export default decl"""

	declaration: Expr | Stmt

	@override
	def emit(self, out: list[str]) -> None:
		out.append("export default ")
		self.declaration.emit(out)
		if isinstance(self.declaration, Expr) and not isinstance(
			self.declaration, Function
		):
			out.append(";")


@dataclass(slots=True)
class ExportSpecifier(Node):
	"""Export list entry: local as exported"""

	local: str
	exported: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_module_name(self.local, out)
		if self.exported != self.local:
			out.append(" as ")
			_emit_module_name(self.exported, out)


@dataclass(slots=True)
class ExportNamed(Stmt):
	"""JS named export: export const x = 1; or export { a, b as c } from "src";

	With a declaration the specifiers and source are unused.
	"""

	declaration: Stmt | None = None
	specifiers: list[ExportSpecifier] = field(default_factory=list)
	source: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("export ")
		if self.declaration is not None:
			self.declaration.emit(out)
			return
		if self.specifiers:
			out.append("{ ")
			_emit_list(self.specifiers, out)
			out.append(" }")
		else:
			out.append("{}")
		if self.source is not None:
			out.append(' from "')
			out.append(escape_string(self.source))
			out.append('"')
		out.append(";")


@dataclass(slots=True)
class ExportAll(Stmt):
	"""JS re-export: export * from "src"; or export * as ns from "src";"""

	source: str
	exported: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("export *")
		if self.exported:
			out.append(" as ")
			_emit_module_name(self.exported, out)
		out.append(' from "')
		out.append(escape_string(self.source))
		out.append('";')


@dataclass(slots=True)
class Program(Node):
	"""Top-level statement list of one module."""

	body: list[Stmt] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		for i, stmt in enumerate(self.body):
			if i > 0:
				out.append("\n")
			stmt.emit(out)


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


# Operator precedence table (higher = binds tighter)
_PRECEDENCE: dict[str, int] = {
	# Exponentiation (right-assoc)
	"**": 16,
	# Multiplicative
	"*": 15,
	"/": 15,
	"%": 15,
	# Additive
	"+": 14,
	"-": 14,
	# Shift
	"<<": 13,
	">>": 13,
	">>>": 13,
	# Relational
	"<": 12,
	"<=": 12,
	">": 12,
	">=": 12,
	"instanceof": 12,
	"in": 12,
	# Equality
	"==": 11,
	"!=": 11,
	"===": 11,
	"!==": 11,
	# Bitwise
	"&": 10,
	"^": 9,
	"|": 8,
	# Logical
	"&&": 7,
	"||": 6,
	"??": 6,
	# Ternary
	"?:": 4,
}


def escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals."""
	return (
		s.replace("\\", "\\\\")
		.replace('"', '\\"')
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\b", "\\b")
		.replace("\f", "\\f")
		.replace("\v", "\\v")
		.replace("\x00", "\\x00")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)


def escape_template(s: str) -> str:
	"""Escape for template literal strings."""
	return (
		s.replace("\\", "\\\\")
		.replace("`", "\\`")
		.replace("${", "\\${")
		.replace("\r", "\\r")
		.replace("\x00", "\\x00")
	)


def _emit_list(nodes: Sequence[Node], out: list[str]) -> None:
	for i, n in enumerate(nodes):
		if i > 0:
			out.append(", ")
		if isinstance(n, Expr):
			_emit_assignable(n, out)
		else:
			n.emit(out)


def _emit_assignable(node: Expr, out: list[str]) -> None:
	"""Emit where a single assignment expression is expected (no bare commas)."""
	_emit_paren(node, 2, "left", out)


def _emit_params(params: Sequence[str | Expr], out: list[str]) -> None:
	"""Parameters or binding targets: plain names or patterns."""
	for i, param in enumerate(params):
		if i > 0:
			out.append(", ")
		if isinstance(param, str):
			out.append(param)
		else:
			param.emit(out)


_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")


def _emit_module_name(name: str, out: list[str]) -> None:
	"""Import/export name, quoted when it is not an identifier: export { a as "b c" }"""
	if _IDENTIFIER.fullmatch(name):
		out.append(name)
	else:
		out.append('"')
		out.append(escape_string(name))
		out.append('"')


def _emit_key(key: Expr, computed: bool, out: list[str]) -> None:
	if computed:
		out.append("[")
		key.emit(out)
		out.append("]")
	else:
		key.emit(out)


def _emit_for_left(left: VarDecl | Expr | None, out: list[str]) -> None:
	if isinstance(left, VarDecl):
		left.emit_head(out)
	elif left is not None:
		left.emit(out)


def _leftmost(node: Expr) -> Expr:
	"""The expression whose first token starts `node`."""
	while True:
		if isinstance(node, (Member, Subscript)):
			node = node.obj
		elif isinstance(node, (Call, TaggedTemplate)):
			inner = node.callee if isinstance(node, Call) else node.tag
			if inner.precedence() < 20:
				return node
			node = inner
		elif isinstance(node, Binary) and node.left.precedence() >= node.precedence():
			node = node.left
		elif isinstance(node, Ternary) and node.cond.precedence() > node.precedence():
			node = node.cond
		elif isinstance(node, Assign):
			node = node.target
		elif isinstance(node, Sequence) and node.exprs:
			node = node.exprs[0]
		elif isinstance(node, Update) and not node.prefix:
			node = node.operand
		else:
			return node


def _emit_paren(node: Expr, parent_prec: int, side: str, out: list[str]) -> None:
	"""Emit child with parens if needed for precedence."""
	child_prec = node.precedence()
	needs_parens = child_prec < parent_prec or (
		child_prec == parent_prec and side == "right" and isinstance(node, Binary)
	)
	if needs_parens:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


def _emit_primary(node: Expr, out: list[str]) -> None:
	"""Emit with parens if not primary precedence."""
	if node.precedence() < 20:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)
