"""Lower JSX element trees into virtual DOM builder calls."""

# Errors
from jsxlower.errors import JsxLowerError as JsxLowerError
from jsxlower.errors import LoadError as LoadError
from jsxlower.errors import OptionsError as OptionsError

# Transform stages
from jsxlower.children import NormalizedChildren as NormalizedChildren
from jsxlower.children import get_children as get_children
from jsxlower.classify import ElementType as ElementType
from jsxlower.classify import get_type as get_type
from jsxlower.elements import COMPONENT_BUILDER as COMPONENT_BUILDER
from jsxlower.elements import HOST_BUILDER as HOST_BUILDER
from jsxlower.elements import create_element as create_element
from jsxlower.flags import NodeFlag as NodeFlag
from jsxlower.imports import ImportInjector as ImportInjector
from jsxlower.imports import PendingImport as PendingImport
from jsxlower.props import PartitionedProps as PartitionedProps
from jsxlower.props import get_props as get_props
from jsxlower.text import create_text as create_text
from jsxlower.text import normalize_text as normalize_text

# Loading
from jsxlower.estree import load_file as load_file
from jsxlower.estree import load_program as load_program

# JSX input nodes
from jsxlower.jsx import JSXAttribute as JSXAttribute
from jsxlower.jsx import JSXElement as JSXElement
from jsxlower.jsx import JSXEmptyExpression as JSXEmptyExpression
from jsxlower.jsx import JSXExpressionContainer as JSXExpressionContainer
from jsxlower.jsx import JSXIdentifier as JSXIdentifier
from jsxlower.jsx import JSXMemberExpression as JSXMemberExpression
from jsxlower.jsx import JSXNamespacedName as JSXNamespacedName
from jsxlower.jsx import JSXSpreadAttribute as JSXSpreadAttribute
from jsxlower.jsx import JSXText as JSXText

# Output nodes
from jsxlower.nodes import Array as Array
from jsxlower.nodes import Call as Call
from jsxlower.nodes import Expr as Expr
from jsxlower.nodes import ExprStmt as ExprStmt
from jsxlower.nodes import Identifier as Identifier
from jsxlower.nodes import ImportDeclaration as ImportDeclaration
from jsxlower.nodes import ImportSpecifier as ImportSpecifier
from jsxlower.nodes import Literal as Literal
from jsxlower.nodes import Node as Node
from jsxlower.nodes import Object as Object
from jsxlower.nodes import Program as Program
from jsxlower.nodes import Property as Property
from jsxlower.nodes import Spread as Spread
from jsxlower.nodes import Stmt as Stmt

# Emit
from jsxlower.nodes import emit as emit

# Options and session
from jsxlower.options import TransformOptions as TransformOptions
from jsxlower.session import TransformSession as TransformSession

# Driver
from jsxlower.traverse import transform as transform
from jsxlower.traverse import transform_element as transform_element
from jsxlower.version import __version__ as __version__
