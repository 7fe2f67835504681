"""
Mirror Paths CLI

Inspect how object names map onto mirror and tombstone document paths.

Usage:
    mirror-paths paths "photos/2024/img.jpg"   - Show derived document paths
    mirror-paths tombstone "<document path>"   - Show the tombstone path
    mirror-paths hash "<document path>"        - Show the path hash
    mirror-paths event <event type> "<name>"   - Show which documents an event touches
"""

from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mirror import __version__
from mirror.config import NamingConfig, get_settings
from mirror.errors import InvalidMirrorDocumentPathError
from mirror.events import is_deletion_event_type
from mirror.naming import (
    mirror_document_path_to_tombstone_path,
    object_name_to_firestore_paths,
    path_hash,
    should_mirror_object,
)
from mirror.validation import invalid_path_reasons

console = Console()
logger = logging.getLogger(__name__)


def _derive(name: str, config: NamingConfig):
    try:
        return object_name_to_firestore_paths(name, config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="NAME") from e


@click.group()
@click.version_option(version=__version__, prog_name="mirror-paths")
@click.option("--root", default=None, help="Root document path")
@click.option("--items", "items_collection", default=None, help="Items subcollection")
@click.option("--prefixes", "prefixes_collection", default=None, help="Prefixes subcollection")
@click.option("--item-tombstones", "item_tombstones_collection", default=None,
              help="Item tombstones subcollection")
@click.option("--prefix-tombstones", "prefix_tombstones_collection", default=None,
              help="Prefix tombstones subcollection")
@click.option("--filter", "object_name_filter", default=None,
              help="Regex selecting which objects are mirrored")
@click.pass_context
def main(ctx: click.Context, **overrides: str | None):
    """Map object-storage names onto mirror document paths.

    Defaults come from MIRROR_* environment variables or .env.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid MIRROR_* settings:\n{e}") from e
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    values = {
        "root": settings.ROOT,
        "items_collection": settings.ITEMS_COLLECTION,
        "item_tombstones_collection": settings.ITEM_TOMBSTONES_COLLECTION,
        "prefixes_collection": settings.PREFIXES_COLLECTION,
        "prefix_tombstones_collection": settings.PREFIX_TOMBSTONES_COLLECTION,
        "object_name_filter": settings.OBJECT_NAME_FILTER,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        ctx.obj = NamingConfig(**values)
    except ValidationError as e:
        raise click.UsageError(f"Invalid naming configuration:\n{e}") from e
    logger.debug(f"Naming configuration: {ctx.obj!r}")


@main.command()
@click.argument("name")
@click.pass_obj
def paths(config: NamingConfig, name: str):
    """
    Show the prefix and item documents for an object NAME.

    Example:
        mirror-paths paths "photos/2024/img.jpg"
    """
    document_paths = _derive(name, config)

    table = Table(title=escape(name))
    table.add_column("Kind", style="cyan")
    table.add_column("Path")
    table.add_column("Tombstone", style="dim")
    table.add_column("Hash", style="magenta")
    for path in document_paths.prefix_paths:
        table.add_row(
            "prefix",
            escape(path),
            escape(mirror_document_path_to_tombstone_path(path, config)),
            path_hash(path),
        )
    table.add_row(
        "item",
        escape(document_paths.item_path),
        escape(mirror_document_path_to_tombstone_path(document_paths.item_path, config)),
        path_hash(document_paths.item_path),
    )
    console.print(table)

    reasons = invalid_path_reasons(document_paths.all_paths)
    if reasons:
        for reason in reasons:
            console.print(f"[red]✗[/red] {escape(reason)}")
        sys.exit(1)
    console.print("[green]✓[/green] All paths valid")


@main.command()
@click.argument("path")
@click.pass_obj
def tombstone(config: NamingConfig, path: str):
    """Print the tombstone path for a mirror document PATH."""
    try:
        click.echo(mirror_document_path_to_tombstone_path(path, config))
    except InvalidMirrorDocumentPathError as e:
        raise click.BadParameter(str(e), param_hint="PATH") from e


@main.command("hash")
@click.argument("path")
def hash_command(path: str):
    """Print the hash of a document PATH."""
    click.echo(path_hash(path))


@main.command()
@click.argument("event_type")
@click.argument("name")
@click.pass_obj
def event(config: NamingConfig, event_type: str, name: str):
    """
    Show which documents an EVENT_TYPE for object NAME would touch.

    Example:
        mirror-paths event google.storage.object.delete "photos/img.jpg"
    """
    if not should_mirror_object(name, config):
        console.print(f"[yellow]⚠ Not mirrored:[/yellow] {escape(name)}")
        return

    document_paths = _derive(name, config)
    if is_deletion_event_type(event_type):
        console.print(f"[red]Deletion[/red] of {escape(name)}; tombstone:")
        targets = [mirror_document_path_to_tombstone_path(document_paths.item_path, config)]
    else:
        console.print(f"[green]Update[/green] of {escape(name)}; documents:")
        targets = list(document_paths.all_paths)
    for target in targets:
        click.echo(target)


if __name__ == "__main__":
    main()
