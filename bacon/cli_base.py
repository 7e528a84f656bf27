"""
Shared behaviour for every bacon command.

Each command and group accepts:
- -h/--help: help text, followed by usage examples when the command has any
- -V/--version: print the version and revision
- -v/--verbose: switch logging to DEBUG
- -p/--config-path: folder holding config.yaml

Leaf commands wrap their body in @execute_helper, which resolves the
configuration location, runs the body and maps failures to exit codes.
"""

import logging
import subprocess
from functools import wraps
from pathlib import Path
from typing import Dict, Optional

import click

from . import __version__
from .config import configure, get_config_file_path, resolve_config_location
from .exit_codes import FAILURE, SUCCESS, FatalError

logger = logging.getLogger(__name__)

# ctx.meta key; meta is shared by every context of one invocation
CONFIG_PATH_KEY = 'bacon.config_path'

# Loggers switched to DEBUG by -v besides the root logger
VERBOSE_LOGGERS = ('bacon', 'urllib3')


def format_examples(examples: Dict[str, str], formatter: click.HelpFormatter) -> None:
    """
    Append usage examples after the help text.

    Layout:
        Examples:

        	<description>
        		$ bacon <example text>
    """
    if not examples:
        return
    formatter.write("\nExamples:\n\n")
    for description, example in examples.items():
        formatter.write(f"\t{description}\n")
        formatter.write("\t\t$ bacon " + example.replace("\n", "\n\t\t") + "\n\n")


class BaconCommand(click.Command):
    """Command whose help ends with an Examples section."""

    def __init__(self, *args, examples: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.examples = examples or {}

    def format_epilog(self, ctx, formatter):
        super().format_epilog(ctx, formatter)
        format_examples(self.examples, formatter)


class BaconGroup(click.Group):
    """
    Group of bacon commands.

    Runs its callback even without a subcommand so that the callback can
    print the help text and succeed.
    """
    command_class = BaconCommand
    group_class = type

    def __init__(self, *args, examples: Optional[Dict[str, str]] = None, **kwargs):
        kwargs.setdefault('invoke_without_command', True)
        super().__init__(*args, **kwargs)
        self.examples = examples or {}

    def format_epilog(self, ctx, formatter):
        super().format_epilog(ctx, formatter)
        format_examples(self.examples, formatter)


def print_help_if_no_command(ctx: click.Context) -> bool:
    """Print the group's help when no subcommand was given."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return True
    return False


def get_revision() -> str:
    """Short git revision of the bacon source checkout, or 'unknown'.

    Only a checkout whose toplevel is the directory holding the bacon
    package counts; an install inside some other repository (a venv in a
    project directory) reports 'unknown'.
    """
    source_root = Path(__file__).resolve().parent.parent
    try:
        result = subprocess.run(
            ['git', 'rev-parse', '--show-toplevel', '--short', 'HEAD'],
            cwd=source_root,
            capture_output=True,
            text=True,
            timeout=5
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return 'unknown'
    if result.returncode != 0:
        return 'unknown'

    lines = result.stdout.strip().splitlines()
    if len(lines) != 2 or Path(lines[0]).resolve() != source_root:
        return 'unknown'
    return lines[1]


def set_verbosity() -> None:
    """Set the root logger and the client loggers to DEBUG."""
    logging.getLogger().setLevel(logging.DEBUG)
    for name in VERBOSE_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)
    logger.debug("Log level set to DEBUG")


def set_configuration_file_location(config_path: Optional[str] = None) -> Path:
    """Configure the config file from the flag, environment or default folder."""
    location, source = resolve_config_location(config_path)
    configure(location)
    logger.debug(f"Config file set from {source} to {get_config_file_path()}")
    return get_config_file_path()


def _version_callback(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"{__version__} ({get_revision()})")
    ctx.exit(SUCCESS)


def _verbose_callback(ctx, param, value):
    if value:
        set_verbosity()


def _config_path_callback(ctx, param, value):
    if value is not None:
        ctx.meta[CONFIG_PATH_KEY] = value


def common_options(func):
    """Add -V, -v and -p to a command or group."""
    func = click.option('-p', '--config-path', default=None, expose_value=False,
                        callback=_config_path_callback,
                        help='Path to configuration folder')(func)
    func = click.option('-v', '--verbose', is_flag=True, expose_value=False,
                        callback=_verbose_callback,
                        help='Verbose output')(func)
    func = click.option('-V', '--version', is_flag=True, expose_value=False, is_eager=True,
                        callback=_version_callback,
                        help='print version')(func)
    return func


json_output_option = click.option(
    '-o', 'json_output', is_flag=True, help='use json for output (default to yaml)'
)


def list_options(func):
    """Options shared by commands listing a remote collection."""
    func = json_output_option(func)
    func = click.option('--query', default=None, help='RSQL query')(func)
    func = click.option('--sort', default=None, help='Sorting RSQL')(func)
    return func


def execute_helper(func):
    """
    Run a command body with standard configuration and error handling.

    FatalError propagates unchanged. Any other error is logged and the
    command exits with FAILURE.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        set_configuration_file_location(ctx.meta.get(CONFIG_PATH_KEY))

        try:
            func(*args, **kwargs)
        except FatalError:
            raise
        except click.ClickException:
            raise
        except Exception as e:
            logger.error(f"Something wrong happened: {e}")
            ctx.exit(FAILURE)

    return wrapper
