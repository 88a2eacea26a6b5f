"""Command-line access to parameter files."""

from __future__ import annotations

import logging
import sys

import click

from ..store import ConfigError, FatalConfigError, ParameterStore
from ..store._casters import cast_bool, cast_number, split_list

VALUE_TYPES = ("str", "int", "float", "bool", "list", "path")


def open_store(file: str, local_root: str | None = None) -> ParameterStore:
    """Load *file*, turning load failures into CLI errors."""
    try:
        return ParameterStore(file, local_root=local_root)
    except FatalConfigError as e:
        raise click.ClickException(e.message) from e
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def cast_default(key: str, value_type: str, default: str) -> object:
    """Give a command-line default the type the accessor would have returned."""
    if value_type == "bool":
        return cast_bool(default)
    if value_type == "int":
        return cast_number(key, default, int)
    if value_type == "float":
        return cast_number(key, default, float)
    if value_type == "list":
        return split_list(default)
    return default


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "\n".join(value)
    return str(value)


def read_value(store: ParameterStore, key: str, value_type: str, default: str | None) -> str:
    """Look *key* up with the accessor for *value_type* and format the result.

    A *default* used for an undefined key is cast and formatted the same way
    as a stored value.
    """
    if default is not None and not store.is_defined(key):
        return format_value(cast_default(key, value_type, default))

    if value_type == "list":
        items = store.get_list(key)
        if items is None:
            raise click.ClickException(f"The parameter {key} is undefined in {store.root_file}")
        return format_value(items)

    getters = {
        "str": store.get,
        "int": store.get_int,
        "float": store.get_float,
        "bool": store.get_boolean,
        "path": store.get_path,
    }
    return format_value(getters[value_type](key))


@click.group("paramfile")
@click.option("-v", "--verbose", is_flag=True, help="Log loading details to stderr.")
def paramfile_group(verbose: bool) -> None:
    """Inspect and edit key = value parameter files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@paramfile_group.command("show")
@click.argument("file", type=click.Path(dir_okay=False))
def show_cli(file: str) -> None:
    """Print every parameter of FILE, includes resolved."""
    store = open_store(file)
    for key, value in sorted(store.as_dict().items()):
        click.echo(f"{key} = {value}")


@paramfile_group.command("get")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("key")
@click.option(
    "--type",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="str",
    show_default=True,
    help="Accessor used to read the value.",
)
@click.option("--default", default=None, help="Value printed when KEY is undefined.")
@click.option("--local-root", default=None, help="Folder that ./ and ../ paths are rewritten against.")
def get_cli(file: str, key: str, value_type: str, default: str | None, local_root: str | None) -> None:
    """Print the value of KEY in FILE.

    Examples:\n
        paramfile get run.ini databaseUser\n
        paramfile get run.ini threads --type int --default 4\n
    """
    store = open_store(file, local_root=local_root)
    try:
        click.echo(read_value(store, key, value_type, default))
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@paramfile_group.command("check")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("specs", nargs=-1, required=True)
def check_cli(file: str, specs: tuple[str, ...]) -> None:
    """Fail unless FILE defines every parameter in SPECS.

    Each spec is a parameter name, optionally followed by a space and an
    explanation that is shown when the parameter is missing.
    """
    store = open_store(file)
    try:
        store.ensure_required(*specs)
    except FatalConfigError as e:
        raise click.ClickException(e.message) from e
    click.echo(f"All {len(specs)} parameters are defined in {file}")


@paramfile_group.command("add")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("key")
@click.argument("value")
def add_cli(file: str, key: str, value: str) -> None:
    """Append KEY = VALUE to FILE unless KEY is already defined."""
    store = open_store(file)
    if store.is_defined(key):
        click.echo(f"{key} is already defined as {store.get(key)}")
        return
    store.add(key, value)
    click.echo(f"Added {key} = {value}")


def main() -> None:
    paramfile_group()
