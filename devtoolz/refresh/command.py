"""Refresh command implementation."""

import os
from typing import Optional

import click
from click.core import ParameterSource
from dotenv import load_dotenv

from .. import __version__
from ..core import RefreshContext, RefreshOptions, Reporter, SubprocessRunner, run_pipeline
from ..core.actions import refresh_actions
from ..log import setup_logging
from ..utils import handle_errors

load_dotenv()


@click.command("refresh", context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--project", "-p", metavar="PROJECT", help="refresh a local svn project")
@click.option("--workspace", "-w", metavar="WORKSPACE",
              help="refresh a local svn workspace comprised of multiple projects")
@click.option("--config", "-c", "config_path", metavar="FILE", envvar="DEVTOOLZ_CONFIG",
              help="path to configuration file - default path is current directory")
@click.option("--build", "-b", is_flag=True, help="perform build for target project or workspace")
@click.option("--verbose", "-v", is_flag=True, help="log external commands and pipeline stages")
@click.version_option(__version__, "-V", "--version", prog_name="DevToolz refresh")
@handle_errors
def refresh_command(project: Optional[str], workspace: Optional[str], config_path: Optional[str],
                    build: bool, verbose: bool):
    """\b
    Refresh local svn working copies and optionally rebuild them.
    \b
    Examples:
      refresh -p api                  # Update the "api" project
      refresh -w backend -b           # Update and build every project in "backend"
      refresh -p api -c ~/dev/config.json
    """
    setup_logging("DEBUG" if verbose else "WARNING")

    # DEVTOOLZ_CONFIG alone does not count as an argument
    source = click.get_current_context().get_parameter_source("config_path")
    config_given = source == ParameterSource.COMMANDLINE

    opts = RefreshOptions(
        project=project,
        workspace=workspace,
        config_path=config_path,
        build=build,
        no_arguments=not any([project, workspace, config_given, build, verbose]),
        svn=os.environ.get("DEVTOOLZ_SVN", "svn"),
    )
    ctx = RefreshContext(opts, Reporter(), runner=SubprocessRunner())

    run_pipeline(ctx, refresh_actions())
