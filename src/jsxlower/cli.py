"""
Command-line interface for jsxlower.
Loads a Babel JSON AST, lowers its JSX to builder calls and prints the JavaScript.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from jsxlower.errors import JsxLowerError
from jsxlower.estree import load_file
from jsxlower.nodes import emit
from jsxlower.options import TransformOptions, parse_assignments
from jsxlower.session import TransformSession
from jsxlower.traverse import transform
from jsxlower.version import __version__ as JSXLOWER_VERSION

cli = typer.Typer(
	name="jsxlower",
	help="jsxlower - compile JSX into virtual DOM builder calls",
	no_args_is_help=True,
)


@cli.command("compile")
def compile_(
	input_file: Path = typer.Argument(
		...,
		exists=True,
		dir_okay=False,
		help="Babel JSON AST of the module (parser output with the jsx plugin)",
	),
	config: Path | None = typer.Option(
		None,
		"--config",
		"-c",
		exists=True,
		dir_okay=False,
		help="JSON file with plugin options (pragma, import, factoryImport, templates, factories)",
	),
	import_: str | None = typer.Option(
		None, "--import", help="Module to import newHtml/newComponent from"
	),
	factory_import: str | None = typer.Option(
		None, "--factory-import", help="Module to import tag factories from"
	),
	pragma: list[str] = typer.Option(
		[], "--pragma", help="Rename a helper: HELPER=IDENTIFIER (repeatable)"
	),
	factory: list[str] = typer.Option(
		[], "--factory", help="Use a tag factory: TAG=HELPER (repeatable)"
	),
	template: list[str] = typer.Option(
		[], "--template", help="Mark a host tag as a template (repeatable)"
	),
	output: Path | None = typer.Option(
		None, "--output", "-o", help="Write the result here instead of stdout"
	),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log transform details"),
):
	"""Compile the JSX in a module to builder calls."""
	console = Console(stderr=True)
	if verbose:
		logging.basicConfig(
			level=logging.DEBUG,
			format="%(message)s",
			handlers=[RichHandler(console=console, show_path=False)],
		)

	try:
		options = TransformOptions.load(config) if config else TransformOptions()
		options = options.merged(
			import_=import_,
			factory_import=factory_import,
			pragma=parse_assignments(pragma, "--pragma"),
			factories=parse_assignments(factory, "--factory"),
			templates=template,
		)
		program = load_file(input_file)
	except (JsxLowerError, OSError, json.JSONDecodeError) as exc:
		console.print(f"❌ {exc}", markup=False, highlight=False)
		raise typer.Exit(1) from None

	session = TransformSession(options)
	transform(program, session=session)
	code = emit(program) + "\n"

	if output is None:
		typer.echo(code, nl=False)
		return
	try:
		output.write_text(code, "utf-8")
	except OSError as exc:
		console.print(f"❌ {exc}", markup=False, highlight=False)
		raise typer.Exit(1) from None
	console.log(
		f"✅ Compiled {session.elements} elements from {input_file} into {output}"
	)


@cli.command("version")
def version():
	"""Print the jsxlower version."""
	typer.echo(JSXLOWER_VERSION)


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		console = Console()
		console.print_exception()
		raise typer.Exit(1) from None


if __name__ == "__main__":
	main()
