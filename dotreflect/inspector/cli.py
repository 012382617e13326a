"""Command-line interface for inspecting classes and objects."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dotreflect import __version__
from dotreflect.inspector.summary import FieldSummary, MethodSummary
from dotreflect.reflection import (
    ReflectionError,
    declared_fields,
    field_exists,
    get_field,
    load_class,
    locate_method,
    resolve,
)
from dotreflect.reflection.fields import all_of, is_instance_field, of_type, with_marker
from dotreflect.reflection.locator import import_object

if TYPE_CHECKING:
    from dotreflect.reflection.types import MemberInfo


@click.group()
@click.version_option(__version__, prog_name="dotreflect")
@click.option("--verbose", "-v", is_flag=True, help="Log how each path token is resolved")
def cli(verbose: bool) -> None:
    """Dotted-path reflection over Python classes and objects."""
    if verbose:
        _enable_debug_logging()


def _enable_debug_logging() -> None:
    """Send dotreflect debug logging to stderr through rich."""
    log = logging.getLogger("dotreflect")
    log.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _fail(error: Exception) -> NoReturn:
    print(f"Error: {error}")
    sys.exit(1)


@cli.command("fields")
@click.argument("class_name")
@click.option("--type", "-t", "type_name", default=None, help="Only fields declared with exactly this type")
@click.option("--marker", "-m", "marker_name", default=None, help="Only fields tagged with this marker")
@click.option("--no-statics", is_flag=True, help="Leave out class-level fields")
@click.option("--declared-only", is_flag=True, help="Leave out fields declared on base classes")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def fields_command(
    class_name: str,
    type_name: str | None,
    marker_name: str | None,
    no_statics: bool,
    declared_only: bool,
    output_json: bool,
) -> None:
    """List the fields of a class, most-derived first."""
    try:
        cls = load_class(class_name)
        predicates = []
        if type_name is not None:
            predicates.append(of_type(type_name))
        if marker_name is not None:
            predicates.append(with_marker(import_object(marker_name)))
        if no_statics:
            predicates.append(is_instance_field)

        members = declared_fields(cls, include_ancestors=not declared_only, predicate=all_of(*predicates))
    except ReflectionError as e:
        _fail(e)

    if output_json:
        print(json.dumps([FieldSummary.from_member(m).to_dict() for m in members], indent=2))
    else:
        _output_fields(cls.__qualname__, members)


@cli.command("field")
@click.argument("class_name")
@click.argument("path")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def field_command(class_name: str, path: str, output_json: bool) -> None:
    """Show the field a dotted path names, following declared types."""
    try:
        member = get_field(class_name, path)
    except ReflectionError as e:
        _fail(e)

    if output_json:
        print(json.dumps(FieldSummary.from_member(member).to_dict(), indent=2))
    else:
        _output_fields(path, [member])


@cli.command("exists")
@click.argument("class_name")
@click.argument("path")
def exists_command(class_name: str, path: str) -> None:
    """Check whether a dotted path names declared fields. Exits 1 when not."""
    try:
        found = field_exists(class_name, path)
    except ReflectionError as e:
        _fail(e)

    print("true" if found else "false")
    if not found:
        sys.exit(1)


@cli.command("method")
@click.argument("class_name")
@click.argument("name")
def method_command(class_name: str, name: str) -> None:
    """Find a zero-argument method on a class or its ancestors."""
    try:
        method = MethodSummary.from_method(locate_method(class_name, name))
    except ReflectionError as e:
        _fail(e)

    kind = "static " if method.static else ""
    print(f"{method.owner}.{method.name}{method.signature} {kind}".rstrip())


@cli.command("get")
@click.argument("object_name")
@click.argument("path")
@click.option("--expect", "expect_name", default=None, help="Class the value must be an instance of")
def get_command(object_name: str, path: str, expect_name: str | None) -> None:
    """Read a dotted path from an importable object (module:attr)."""
    try:
        target = import_object(object_name)
        value = resolve(target, path, expect_name)
    except ReflectionError as e:
        _fail(e)

    print(repr(value))


def _output_fields(title: str, members: list[MemberInfo]) -> None:
    """Output fields using rich text formatting."""
    console = Console()
    console.print(f"[bold cyan]{title}[/bold cyan]")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Name", style="white")
    table.add_column("Type", style="yellow")
    table.add_column("Declared in", style="dim")
    table.add_column("Static", style="green")
    table.add_column("Markers", style="magenta")

    for member in members:
        summary = FieldSummary.from_member(member)
        table.add_row(
            summary.name,
            summary.type + (" | None" if summary.nullable else ""),
            summary.owner,
            "yes" if summary.static else "",
            ", ".join(summary.markers),
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
