"""Click entry point for the nerd CLI."""

import sys

import click

from nerd.console import Console
from nerd.dispatcher import execute
from nerd.process_launcher import ProcessLauncher
from nerd.scaffold.project_scaffolder import DEFAULT_BUILD_TOOL, ProjectScaffolder


@click.command("nerd", context_settings={"ignore_unknown_options": True})
@click.option(
    "--build-tool",
    envvar="NERD_BUILD_TOOL",
    default=DEFAULT_BUILD_TOOL,
    show_default=True,
    help="Build configuration tool used to generate build files.",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(build_tool, args):
    """nerd - scaffold a C++ project and generate its CMake build files.

    Usage: nerd start <project_name>
    """
    console = Console()
    scaffolder = ProjectScaffolder(ProcessLauncher(), build_tool=build_tool, console=console)
    outcome = execute(args, scaffolder)
    if outcome.ok:
        console.success(outcome.message)
    else:
        console.error(outcome.error.message)
    sys.exit(outcome.exit_code)
