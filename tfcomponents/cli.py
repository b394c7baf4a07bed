"""
Command line interface for tfcomponents.

``main`` is the only place that turns errors into exit codes:
0 on success (or terraform's own exit code), 1 for user errors,
2 for internal errors.
"""

import logging
import os
from typing import Iterable, List, Optional, Tuple

import click

from . import __version__
from .config import Settings
from .core import ComponentStatus, TerraformRunner, find_components, get_status
from .errors import InternalError, UserError
from .utils import setup_logging

logger = logging.getLogger(__name__)

TAB_WIDTH = 8

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# -yes / --yes, shared by apply and destroy
auto_approve_option = click.option(
    "-yes",
    "--yes",
    "auto_approve",
    is_flag=True,
    help="Same as terraform's -auto-approve.",
)


def format_status_table(rows: Iterable[Tuple[str, ComponentStatus]]) -> str:
    """
    Render ``name<TAB...>status`` lines.

    Names are padded with tabs so every status starts on the same tab
    stop, with at least one column of padding after the longest name.
    """
    rows = list(rows)
    if not rows:
        return ""

    width = max(len(name) for name, _ in rows) + 1
    width = -(-width // TAB_WIDTH) * TAB_WIDTH

    lines = []
    for name, status in rows:
        tabs = -(-(width - len(name)) // TAB_WIDTH)
        lines.append(name + "\t" * tabs + str(status) + "\n")
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr.")
@click.version_option(__version__, prog_name="tf")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """
    Run Terraform per component.

    A component is any directory containing a main.tf.
    """
    settings = Settings()
    setup_logging(
        log_level="DEBUG" if verbose else settings.get("logging.level", "WARNING"),
        log_file=bool(settings.get("logging.file", False)),
    )
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        raise click.UsageError("Missing command.", ctx)


@cli.command()
@click.pass_obj
def status(settings: Settings) -> int:
    """Get the status of all the components."""
    try:
        root = os.getcwd()
    except OSError as e:
        raise InternalError("Could not find the current working directory", e) from e

    components = find_components(root, max_files=settings.max_files)
    rows: List[Tuple[str, ComponentStatus]] = [
        (component.name, get_status(component.path)) for component in components
    ]

    click.echo(format_status_table(rows), nl=False)
    return 0


@cli.command()
@click.argument("component")
@click.pass_obj
def output(settings: Settings, component: str) -> int:
    """Run the 'output' of the component."""
    return TerraformRunner(component, settings.terraform_binary).output()


@cli.command()
@click.argument("component")
@click.pass_obj
def plan(settings: Settings, component: str) -> int:
    """Run the 'plan' of the component."""
    return TerraformRunner(component, settings.terraform_binary).plan()


@cli.command()
@click.argument("component")
@auto_approve_option
@click.pass_obj
def apply(settings: Settings, component: str, auto_approve: bool) -> int:
    """Run the 'apply' of the component."""
    return TerraformRunner(component, settings.terraform_binary).apply(auto_approve=auto_approve)


@cli.command()
@click.argument("component")
@auto_approve_option
@click.pass_obj
def destroy(settings: Settings, component: str, auto_approve: bool) -> int:
    """Run the 'destroy' of the component."""
    return TerraformRunner(component, settings.terraform_binary).destroy(auto_approve=auto_approve)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``tf`` console script."""
    try:
        result = cli.main(args=argv, prog_name="tf", standalone_mode=False)
    except click.UsageError as e:
        click.echo(f"Error: {e.format_message()}")
        if e.ctx is not None:
            click.echo()
            click.echo(e.ctx.get_help())
        return 1
    except click.Abort:
        click.echo("Aborted!")
        return 1
    except UserError as e:
        logger.debug(f"User error: {e!r}")
        click.echo(f"Error: {e}")
        return e.exit_code
    except InternalError as e:
        logger.debug(f"Internal error: {e}", exc_info=e.cause)
        click.echo(f"Internal error: {e}")
        return e.exit_code
    except OSError as e:
        logger.debug("Unexpected filesystem error", exc_info=True)
        click.echo(f"Internal error: {e}")
        return InternalError.exit_code

    return result or 0
