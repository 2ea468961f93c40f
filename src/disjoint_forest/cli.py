"""CLI entry point for disjoint-forest tool."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from disjoint_forest import __version__
from disjoint_forest.commands import components, demo, mst, run
from disjoint_forest.core.config import load_config
from disjoint_forest.error.cmd import handle_command_errors

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="disjoint-forest")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Path to JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
@handle_command_errors
def main(ctx, config_path: Path | None, verbose: bool):
    """Disjoint-Set Forest Toolkit.

    Union-find with path compression and union-by-rank, plus connected
    components and minimum spanning forests over CSV edge lists.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    _configure_logging(verbose or config.analysis.verbose)
    ctx.obj["config"] = config


# Register commands
main.add_command(components.components)
main.add_command(demo.demo)
main.add_command(mst.mst)
main.add_command(run.run)


if __name__ == "__main__":
    main()
