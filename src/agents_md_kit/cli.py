import logging
import os

import click

from agents_md_kit.context import InstallContext, create_context
from agents_md_kit.error_boundary import cli_error_boundary
from agents_md_kit.models import DEFAULT_TARGET, UnknownTargetError, validate_target
from agents_md_kit.operations import install
from agents_md_kit.output import user_output
from agents_md_kit.version import __version__

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "AGENTS_MD_KIT_DEBUG"

USAGE = """Usage: agents-md-install [opencode|claude|both]

  opencode  Install to ~/.config/opencode (default)
  claude    Install to ~/.claude
  both      Install to both locations"""


def _configure_logging(debug: bool) -> None:
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("target", required=False, default=DEFAULT_TARGET)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging and full stack traces for errors")
@click.pass_context
def cli(ctx: click.Context, target: str, debug: bool) -> None:
    """Install the agents.md package for OpenCode and/or Claude Code.

    TARGET is one of opencode (default), claude or both.

    Examples:

        # Install to ~/.config/opencode
        agents-md-install

        # Install to ~/.claude
        agents-md-install claude
    """
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
    install_ctx: InstallContext = ctx.obj

    try:
        validated = validate_target(target)
    except UnknownTargetError as e:
        logger.debug("Rejected target: %s", e.value)
        user_output(USAGE)
        raise SystemExit(1) from None

    if install_ctx.debug or debug:
        install(install_ctx, validated, user_output)
    else:
        cli_error_boundary(install)(install_ctx, validated, user_output)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
