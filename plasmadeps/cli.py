"""CLI entrypoint for plasmadeps."""

import sys
from pathlib import Path

import click

from . import __version__
from .config import load_config
from .errors import ConfigError
from .logs import configure_logging


@click.group()
@click.version_option(__version__, prog_name="plasmadeps")
@click.option(
    "--source",
    "-s",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Resources source dir",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, source: Path, verbose: bool) -> None:
    """plasmadeps - inspect dependencies between platform resources."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["source"] = source

    # A missing source falls back to the current dir; read its config then.
    base = source if source.is_dir() else Path(".")
    ctx.obj["base"] = base
    try:
        ctx.obj["config"] = load_config(base)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("target")
@click.option(
    "--depth",
    "-d",
    type=int,
    default=None,
    help="Limit recursion lookup depth (default: from config, else 99)",
)
@click.option(
    "--mrn/--path",
    "show_mrn",
    default=None,
    help="Show resources as MRN instead of role paths",
)
@click.option(
    "--tree/--list",
    "show_tree",
    default=None,
    help="Show dependencies as a tree instead of a sorted list",
)
@click.option(
    "--inventory",
    "-i",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Inventory snapshot file (default: <source>/inventory.yaml)",
)
@click.pass_context
def dependencies(
    ctx: click.Context,
    target: str,
    depth: int | None,
    show_mrn: bool | None,
    show_tree: bool | None,
    inventory: Path | None,
) -> None:
    """Show resources TARGET depends on and resources depending on it.

    TARGET is a machine resource name or a role path.

    Examples:

        plasmadeps dependencies platform__foundation__cluster

        plasmadeps -s src dependencies platform/foundation/roles/cluster --tree --depth 2
    """
    from .commands.dependencies import run_dependencies

    config = ctx.obj["config"]
    source: Path = ctx.obj["source"]

    exit_code = run_dependencies(
        source,
        target,
        depth=config.depth if depth is None else depth,
        path_form=not (config.mrn if show_mrn is None else show_mrn),
        tree_form=config.tree if show_tree is None else show_tree,
        inventory=inventory or config.inventory_path(ctx.obj["base"]),
    )
    sys.exit(exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
