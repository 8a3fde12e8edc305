"""Load Babel/ESTree JSON ASTs into jsxlower nodes.

Input is the JSON produced by `@babel/parser` with the `jsx` plugin. Plain
ESTree shapes (`Literal`, `Property`, `MethodDefinition`, `ChainExpression`
and friends) are accepted too. Anything the emitter cannot reproduce raises
LoadError naming the node type and its source location.

Destructuring patterns load as the matching expression nodes: an object
pattern is an Object, an array pattern an Array (holes become Elision), a
default value an Assign and a rest element a Spread.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

from jsxlower.errors import LoadError
from jsxlower.jsx import (
	Attribute,
	Child,
	JSXAttribute,
	JSXElement,
	JSXEmptyExpression,
	JSXExpressionContainer,
	JSXIdentifier,
	JSXMemberExpression,
	JSXNamespacedName,
	JSXSpreadAttribute,
	JSXText,
	TagName,
)
from jsxlower.nodes import (
	Array,
	Arrow,
	Assign,
	Await,
	BigInt,
	Binary,
	Block,
	Break,
	Call,
	Class,
	ClassDecl,
	ClassProperty,
	Continue,
	DoWhile,
	Elision,
	ExportAll,
	ExportDefault,
	ExportNamed,
	ExportSpecifier,
	Expr,
	ExprStmt,
	For,
	ForIn,
	ForOf,
	Function,
	FunctionDecl,
	Identifier,
	If,
	ImportDeclaration,
	ImportDefaultSpecifier,
	ImportNamespaceSpecifier,
	ImportSpecifier,
	Labeled,
	Literal,
	Member,
	Method,
	New,
	Node,
	Object,
	Program,
	Property,
	RegExp,
	Return,
	Sequence,
	Specifier,
	Spread,
	Stmt,
	Subscript,
	Switch,
	SwitchCase,
	TaggedTemplate,
	Template,
	Ternary,
	This,
	Throw,
	Try,
	Unary,
	Update,
	VarDecl,
	VarDeclarator,
	While,
	Yield,
)

logger = logging.getLogger(__name__)

JsonNode = dict[str, Any]
_N = TypeVar("_N", bound=Node)
_LOADERS: dict[str, Callable[[JsonNode], Node]] = {}
_JSX_CHILDREN = ("JSXText", "JSXExpressionContainer", "JSXElement")


def _loads(*types: str) -> Callable[[Callable[[JsonNode], _N]], Callable[[JsonNode], _N]]:
	def decorator(fn: Callable[[JsonNode], _N]) -> Callable[[JsonNode], _N]:
		for t in types:
			_LOADERS[t] = fn
		return fn

	return decorator


# =============================================================================
# Entry points
# =============================================================================


def load_program(data: JsonNode) -> Program:
	"""Load a `File` or `Program` node."""
	if not isinstance(data, dict):
		raise LoadError("Expected a JSON object at the top level")
	if data.get("type") == "File":
		data = data.get("program")  # pyright: ignore[reportAssignmentType]
	if not isinstance(data, dict) or data.get("type") != "Program":
		raise LoadError("Expected a File or Program node", data)
	return cast(Program, load_node(data))


def load_file(path: Path) -> Program:
	"""Read and load a Babel JSON AST file."""
	try:
		data = json.loads(path.read_text("utf-8"))
	except json.JSONDecodeError as exc:
		raise LoadError(f"Invalid JSON in {path}: {exc}") from exc
	return load_program(data)


def load_node(data: Any) -> Node:
	if not isinstance(data, dict):
		raise LoadError(f"Expected an AST node, got {type(data).__name__}")
	node_type = data.get("type")
	loader = _LOADERS.get(node_type) if isinstance(node_type, str) else None
	if loader is None:
		raise LoadError(f"Unsupported node type '{node_type}'", data)
	try:
		return loader(data)
	except (KeyError, TypeError, AttributeError) as exc:
		raise LoadError(f"Malformed '{node_type}' node: {exc!r}", data) from exc


def load_expr(data: Any) -> Expr:
	node = load_node(data)
	if not isinstance(node, Expr):
		raise LoadError(f"Expected an expression, got '{data.get('type')}'", data)
	return node


def load_stmt(data: Any) -> Stmt:
	node = load_node(data)
	if not isinstance(node, Stmt):
		raise LoadError(f"Expected a statement, got '{data.get('type')}'", data)
	return node


def _optional_expr(data: JsonNode | None) -> Expr | None:
	return load_expr(data) if data is not None else None


def _body(items: list[JsonNode], directives: list[JsonNode] | None) -> list[Stmt]:
	stmts: list[Stmt] = [
		ExprStmt(Literal(d["value"]["value"])) for d in directives or ()
	]
	stmts.extend(load_stmt(item) for item in items if item.get("type") != "EmptyStatement")
	return stmts


def _target(data: JsonNode) -> str | Expr:
	"""Binding target: a bare name stays a string, patterns load as expressions."""
	if data.get("type") == "Identifier":
		return data["name"]
	return load_expr(data)


def _params(data: JsonNode) -> list[str | Expr]:
	return [_target(param) for param in data.get("params", ())]


def _module_name(data: JsonNode) -> str:
	"""Import/export name, which may be a string literal: export { a as "b c" }."""
	return data.get("name", data.get("value"))


def _property_name(data: JsonNode) -> str:
	if data.get("type") == "PrivateName":
		return "#" + data["id"]["name"]
	if data.get("type") == "PrivateIdentifier":
		return "#" + data["name"]
	return data["name"]


# =============================================================================
# Statements
# =============================================================================


@_loads("Program")
def _program(data: JsonNode) -> Program:
	return Program(_body(data["body"], data.get("directives")))


@_loads("ExpressionStatement")
def _expression_statement(data: JsonNode) -> ExprStmt:
	return ExprStmt(load_expr(data["expression"]))


@_loads("BlockStatement")
def _block(data: JsonNode) -> Block:
	return Block(_body(data["body"], data.get("directives")))


@_loads("EmptyStatement")
def _empty(data: JsonNode) -> Block:
	return Block()


@_loads("ReturnStatement")
def _return(data: JsonNode) -> Return:
	return Return(_optional_expr(data.get("argument")))


@_loads("IfStatement")
def _if(data: JsonNode) -> If:
	alternate = data.get("alternate")
	return If(
		load_expr(data["test"]),
		load_stmt(data["consequent"]),
		load_stmt(alternate) if alternate is not None else None,
	)


@_loads("VariableDeclaration")
def _variable_declaration(data: JsonNode) -> VarDecl:
	declarators = [
		VarDeclarator(_target(decl["id"]), _optional_expr(decl.get("init")))
		for decl in data["declarations"]
	]
	return VarDecl(data["kind"], declarators)


@_loads("FunctionDeclaration")
def _function_declaration(data: JsonNode) -> FunctionDecl:
	return FunctionDecl(_function(data))


@_loads("ClassDeclaration")
def _class_declaration(data: JsonNode) -> ClassDecl:
	return ClassDecl(_class(data))


def _for_left(data: JsonNode) -> VarDecl | Expr:
	if data.get("type") == "VariableDeclaration":
		return _variable_declaration(data)
	return load_expr(data)


@_loads("ForStatement")
def _for(data: JsonNode) -> For:
	init = data.get("init")
	return For(
		init=_for_left(init) if init is not None else None,
		test=_optional_expr(data.get("test")),
		update=_optional_expr(data.get("update")),
		body=load_stmt(data["body"]),
	)


@_loads("ForOfStatement")
def _for_of(data: JsonNode) -> ForOf:
	return ForOf(
		_for_left(data["left"]),
		load_expr(data["right"]),
		load_stmt(data["body"]),
		is_await=bool(data.get("await")),
	)


@_loads("ForInStatement")
def _for_in(data: JsonNode) -> ForIn:
	return ForIn(_for_left(data["left"]), load_expr(data["right"]), load_stmt(data["body"]))


@_loads("WhileStatement")
def _while(data: JsonNode) -> While:
	return While(load_expr(data["test"]), load_stmt(data["body"]))


@_loads("DoWhileStatement")
def _do_while(data: JsonNode) -> DoWhile:
	return DoWhile(load_stmt(data["body"]), load_expr(data["test"]))


@_loads("BreakStatement")
def _break(data: JsonNode) -> Break:
	label = data.get("label")
	return Break(label["name"] if label else None)


@_loads("ContinueStatement")
def _continue(data: JsonNode) -> Continue:
	label = data.get("label")
	return Continue(label["name"] if label else None)


@_loads("LabeledStatement")
def _labeled(data: JsonNode) -> Labeled:
	return Labeled(data["label"]["name"], load_stmt(data["body"]))


@_loads("ThrowStatement")
def _throw(data: JsonNode) -> Throw:
	return Throw(load_expr(data["argument"]))


@_loads("TryStatement")
def _try(data: JsonNode) -> Try:
	handler = data.get("handler")
	finalizer = data.get("finalizer")
	param = handler.get("param") if handler else None
	return Try(
		_block(data["block"]),
		handler=_block(handler["body"]) if handler else None,
		param=_target(param) if param is not None else None,
		finalizer=_block(finalizer) if finalizer else None,
	)


@_loads("SwitchStatement")
def _switch(data: JsonNode) -> Switch:
	cases = [
		SwitchCase(
			_optional_expr(case.get("test")),
			[load_stmt(s) for s in case["consequent"]],
		)
		for case in data["cases"]
	]
	return Switch(load_expr(data["discriminant"]), cases)


@_loads("ImportDeclaration")
def _import_declaration(data: JsonNode) -> ImportDeclaration:
	specifiers: list[Specifier] = []
	for spec in data.get("specifiers", ()):
		kind = spec.get("type")
		local = spec["local"]["name"]
		if kind == "ImportSpecifier":
			specifiers.append(ImportSpecifier(_module_name(spec["imported"]), local))
		elif kind == "ImportDefaultSpecifier":
			specifiers.append(ImportDefaultSpecifier(local))
		elif kind == "ImportNamespaceSpecifier":
			specifiers.append(ImportNamespaceSpecifier(local))
		else:
			raise LoadError(f"Unsupported import specifier '{kind}'", spec)
	return ImportDeclaration(data["source"]["value"], specifiers)


@_loads("ExportDefaultDeclaration")
def _export_default(data: JsonNode) -> ExportDefault:
	return ExportDefault(load_node(data["declaration"]))  # pyright: ignore[reportArgumentType]


@_loads("ExportNamedDeclaration")
def _export_named(data: JsonNode) -> ExportNamed | ExportAll:
	declaration = data.get("declaration")
	if declaration is not None:
		return ExportNamed(load_stmt(declaration))
	source = data.get("source")
	source_value = source["value"] if source else None
	specifiers: list[ExportSpecifier] = []
	for spec in data.get("specifiers", ()):
		kind = spec.get("type")
		if kind == "ExportSpecifier":
			local = _module_name(spec["local"])
			specifiers.append(ExportSpecifier(local, _module_name(spec["exported"])))
		elif kind == "ExportNamespaceSpecifier" and source_value is not None:
			# Babel's shape for `export * as ns from "src"`
			return ExportAll(source_value, _module_name(spec["exported"]))
		else:
			raise LoadError(f"Unsupported export specifier '{kind}'", spec)
	return ExportNamed(specifiers=specifiers, source=source_value)


@_loads("ExportAllDeclaration")
def _export_all(data: JsonNode) -> ExportAll:
	exported = data.get("exported")
	return ExportAll(
		data["source"]["value"], _module_name(exported) if exported else None
	)


# =============================================================================
# Expressions
# =============================================================================


@_loads("Identifier")
def _identifier(data: JsonNode) -> Identifier:
	return Identifier(data["name"])


@_loads("PrivateName", "PrivateIdentifier")
def _private_name(data: JsonNode) -> Identifier:
	return Identifier(_property_name(data))


@_loads("ThisExpression")
def _this(data: JsonNode) -> This:
	return This()


@_loads("Super", "Import")
def _keyword(data: JsonNode) -> Identifier:
	return Identifier(data["type"].lower())


@_loads("MetaProperty")
def _meta_property(data: JsonNode) -> Member:
	return Member(Identifier(data["meta"]["name"]), data["property"]["name"])


@_loads("StringLiteral", "NumericLiteral", "BooleanLiteral")
def _literal(data: JsonNode) -> Literal:
	return Literal(data["value"])


@_loads("NullLiteral")
def _null(data: JsonNode) -> Literal:
	return Literal(None)


@_loads("RegExpLiteral")
def _regexp(data: JsonNode) -> RegExp:
	return RegExp(data["pattern"], data.get("flags", ""))


@_loads("BigIntLiteral")
def _bigint(data: JsonNode) -> BigInt:
	return BigInt(data["value"])


@_loads("Literal")
def _estree_literal(data: JsonNode) -> Literal | RegExp | BigInt:
	if "regex" in data:
		return RegExp(data["regex"]["pattern"], data["regex"].get("flags", ""))
	if "bigint" in data:
		return BigInt(data["bigint"])
	return Literal(data["value"])


@_loads("TemplateLiteral")
def _template(data: JsonNode) -> Template:
	parts: list[str | Expr] = []
	expressions = data["expressions"]
	for i, quasi in enumerate(data["quasis"]):
		parts.append(quasi["value"]["cooked"])
		if i < len(expressions):
			parts.append(load_expr(expressions[i]))
	return Template(parts)


@_loads("TaggedTemplateExpression")
def _tagged_template(data: JsonNode) -> TaggedTemplate:
	return TaggedTemplate(load_expr(data["tag"]), _template(data["quasi"]))


@_loads("ArrayExpression", "ArrayPattern")
def _array(data: JsonNode) -> Array:
	return Array(
		[Elision() if element is None else load_expr(element) for element in data["elements"]]
	)


def _method(data: JsonNode, fn: JsonNode, kind: str) -> Method:
	"""Method from its key node and the function node holding params and body.

	Babel puts both on one node (ObjectMethod, ClassMethod); ESTree nests a
	FunctionExpression under `value`.
	"""
	return Method(
		load_expr(data["key"]),
		_params(fn),
		_block(fn["body"]),
		kind=cast(Any, kind),
		computed=bool(data.get("computed")),
		is_static=bool(data.get("static")),
		is_async=bool(fn.get("async")),
		is_generator=bool(fn.get("generator")),
	)


def _object_member(prop: JsonNode) -> Property | Spread | Method:
	kind = prop.get("type")
	if kind in ("SpreadElement", "RestElement"):
		return Spread(load_expr(prop["argument"]))
	if kind == "ObjectMethod":
		return _method(prop, prop, prop.get("kind", "method"))
	if kind == "Property" and (prop.get("method") or prop.get("kind", "init") != "init"):
		method_kind = prop.get("kind", "init")
		return _method(prop, prop["value"], "method" if method_kind == "init" else method_kind)
	if kind in ("ObjectProperty", "Property"):
		return Property(
			load_expr(prop["key"]), load_expr(prop["value"]), computed=bool(prop.get("computed"))
		)
	raise LoadError(f"Unsupported object member '{kind}'", prop)


@_loads("ObjectExpression", "ObjectPattern")
def _object(data: JsonNode) -> Object:
	return Object([_object_member(prop) for prop in data["properties"]])


@_loads("SpreadElement", "RestElement")
def _spread(data: JsonNode) -> Spread:
	return Spread(load_expr(data["argument"]))


@_loads("AssignmentPattern")
def _assignment_pattern(data: JsonNode) -> Assign:
	return Assign(load_expr(data["left"]), load_expr(data["right"]))


@_loads("AssignmentExpression")
def _assignment(data: JsonNode) -> Assign:
	return Assign(load_expr(data["left"]), load_expr(data["right"]), data["operator"])


@_loads("UpdateExpression")
def _update(data: JsonNode) -> Update:
	return Update(data["operator"], load_expr(data["argument"]), bool(data.get("prefix")))


@_loads("SequenceExpression")
def _sequence(data: JsonNode) -> Sequence:
	return Sequence([load_expr(e) for e in data["expressions"]])


@_loads("AwaitExpression")
def _await(data: JsonNode) -> Await:
	return Await(load_expr(data["argument"]))


@_loads("YieldExpression")
def _yield(data: JsonNode) -> Yield:
	return Yield(_optional_expr(data.get("argument")), bool(data.get("delegate")))


@_loads("ParenthesizedExpression", "ChainExpression")
def _unwrap(data: JsonNode) -> Expr:
	# Parens are re-derived from precedence; `?.` lives on the members
	return load_expr(data["expression"])


@_loads("MemberExpression", "OptionalMemberExpression")
def _member(data: JsonNode) -> Member | Subscript:
	obj = load_expr(data["object"])
	optional = bool(data.get("optional"))
	if data.get("computed"):
		return Subscript(obj, load_expr(data["property"]), optional)
	return Member(obj, _property_name(data["property"]), optional)


@_loads("CallExpression", "OptionalCallExpression")
def _call(data: JsonNode) -> Call:
	return Call(
		load_expr(data["callee"]),
		[load_expr(a) for a in data["arguments"]],
		bool(data.get("optional")),
	)


@_loads("ImportExpression")
def _import_expression(data: JsonNode) -> Call:
	args = [load_expr(data["source"])]
	options = data.get("options")
	if options is not None:
		args.append(load_expr(options))
	return Call(Identifier("import"), args)


@_loads("NewExpression")
def _new(data: JsonNode) -> New:
	return New(load_expr(data["callee"]), [load_expr(a) for a in data["arguments"]])


@_loads("UnaryExpression")
def _unary(data: JsonNode) -> Unary:
	return Unary(data["operator"], load_expr(data["argument"]))


@_loads("BinaryExpression", "LogicalExpression")
def _binary(data: JsonNode) -> Binary:
	return Binary(load_expr(data["left"]), data["operator"], load_expr(data["right"]))


@_loads("ConditionalExpression")
def _conditional(data: JsonNode) -> Ternary:
	return Ternary(
		load_expr(data["test"]),
		load_expr(data["consequent"]),
		load_expr(data["alternate"]),
	)


@_loads("ArrowFunctionExpression")
def _arrow(data: JsonNode) -> Arrow:
	body = data["body"]
	is_async = bool(data.get("async"))
	if body.get("type") == "BlockStatement":
		return Arrow(_params(data), _block(body), is_async)
	return Arrow(_params(data), load_expr(body), is_async)


@_loads("FunctionExpression")
def _function(data: JsonNode) -> Function:
	ident = data.get("id")
	return Function(
		_params(data),
		_block(data["body"]),
		name=ident["name"] if ident else None,
		is_async=bool(data.get("async")),
		is_generator=bool(data.get("generator")),
	)


def _class_member(member: JsonNode) -> Method | ClassProperty:
	kind = member.get("type")
	if kind in ("ClassMethod", "ClassPrivateMethod"):
		return _method(member, member, member.get("kind", "method"))
	if kind == "MethodDefinition":
		return _method(member, member["value"], member.get("kind", "method"))
	if kind in ("ClassProperty", "ClassPrivateProperty", "PropertyDefinition"):
		return ClassProperty(
			load_expr(member["key"]),
			_optional_expr(member.get("value")),
			computed=bool(member.get("computed")),
			is_static=bool(member.get("static")),
		)
	raise LoadError(f"Unsupported class member '{kind}'", member)


@_loads("ClassExpression")
def _class(data: JsonNode) -> Class:
	ident = data.get("id")
	return Class(
		[_class_member(m) for m in data["body"]["body"]],
		name=ident["name"] if ident else None,
		superclass=_optional_expr(data.get("superClass")),
	)


# =============================================================================
# JSX
# =============================================================================


@_loads("JSXElement")
def _jsx_element(data: JsonNode) -> JSXElement:
	opening = data["openingElement"]
	attributes = [cast(Attribute, load_node(a)) for a in opening["attributes"]]
	children: list[Child] = []
	for child in data["children"]:
		kind = child.get("type")
		if kind not in _JSX_CHILDREN:
			# Fragments and spread children have no builder-call form
			logger.debug("Dropping unsupported JSX child %s", kind)
			continue
		children.append(cast(Child, load_node(child)))
	return JSXElement(cast(TagName, load_node(opening["name"])), attributes, children)


@_loads("JSXFragment")
def _jsx_fragment(data: JsonNode) -> Node:
	raise LoadError("JSX fragments are not supported", data)


@_loads("JSXText")
def _jsx_text(data: JsonNode) -> JSXText:
	return JSXText(data["value"])


@_loads("JSXExpressionContainer")
def _jsx_container(data: JsonNode) -> JSXExpressionContainer:
	return JSXExpressionContainer(load_expr(data["expression"]))


@_loads("JSXEmptyExpression")
def _jsx_empty(data: JsonNode) -> JSXEmptyExpression:
	return JSXEmptyExpression()


@_loads("JSXAttribute")
def _jsx_attribute(data: JsonNode) -> JSXAttribute:
	value = data.get("value")
	loaded: Expr | JSXExpressionContainer | None = None
	if value is not None:
		loaded = cast(Expr | JSXExpressionContainer, load_node(value))
	name = cast(JSXIdentifier | JSXNamespacedName, load_node(data["name"]))
	return JSXAttribute(name, loaded)


@_loads("JSXSpreadAttribute")
def _jsx_spread_attribute(data: JsonNode) -> JSXSpreadAttribute:
	return JSXSpreadAttribute(load_expr(data["argument"]))


@_loads("JSXIdentifier")
def _jsx_identifier(data: JsonNode) -> JSXIdentifier:
	return JSXIdentifier(data["name"])


@_loads("JSXNamespacedName")
def _jsx_namespaced_name(data: JsonNode) -> JSXNamespacedName:
	return JSXNamespacedName(
		_jsx_identifier(data["namespace"]), _jsx_identifier(data["name"])
	)


@_loads("JSXMemberExpression")
def _jsx_member(data: JsonNode) -> JSXMemberExpression:
	return JSXMemberExpression(
		cast(JSXIdentifier | JSXMemberExpression, load_node(data["object"])),
		_jsx_identifier(data["property"]),
	)
