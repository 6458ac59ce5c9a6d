"""CLI interface for toprompt"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
import pyperclip

from toprompt.application.prompt_collector import PromptCollector
from toprompt.application.visibility import is_action_available
from toprompt.domain.ignore.rules import InvalidIgnorePatternError
from toprompt.infrastructure.config.config_manager import ConfigManager, ConfigurationError
from toprompt.infrastructure.ignore_loader import ConfigReadError, load_ignore_rules
from toprompt.infrastructure.local_fs import LocalFileEntry

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _load_config(ctx: click.Context) -> ConfigManager:
    try:
        return ConfigManager(config_path=ctx.obj.get("config_path"))
    except ConfigurationError as e:
        _die(str(e), verbose=ctx.obj.get("verbose", False), exc=e)


def _write_output(prompt: str, output: Optional[Path], copy: bool) -> None:
    """Hand the prompt to its destination

    Args:
        prompt: Collected prompt
        output: File to write, takes precedence over the clipboard
        copy: Copy to the clipboard instead of printing
    """
    if output is not None:
        output.write_text(prompt, encoding="utf-8")
        logger.info(f"Prompt written to {output}")
    elif copy:
        pyperclip.copy(prompt)
        click.echo("Files data copied to clipboard.", err=True)
    else:
        click.echo(prompt, nl=False)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .toprompt.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """toprompt - Concatenate files into a prompt for LLM chats"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--base",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project base directory holding .topromptignore",
)
@click.option("--max-file-size", type=click.IntRange(min=0), help="Skip files larger than this many bytes. Overrides config.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the prompt to this file",
)
@click.option("--copy/--no-copy", default=None, help="Copy the prompt to the clipboard. Overrides config.")
@click.option("--summary/--no-summary", default=None, help="Report skipped files on stderr. Overrides config.")
@click.pass_context
def collect(
    ctx,
    paths: Tuple[Path, ...],
    base: Path,
    max_file_size: Optional[int],
    output: Optional[Path],
    copy: Optional[bool],
    summary: Optional[bool],
):
    """Collect files and folders into a single prompt.

    PATHS: Files and directories to include, in order
    """
    verbose = ctx.obj.get("verbose", False)
    config_manager = _load_config(ctx)
    limits_config = config_manager.get_limits_config()
    output_config = config_manager.get_output_config()

    base = base.resolve()
    if not is_action_available(base, paths):
        logger.info("No files selected, nothing to collect")
        return

    try:
        rules = load_ignore_rules(base)
    except (ConfigReadError, InvalidIgnorePatternError) as e:
        _die(str(e), verbose=verbose, exc=e)

    limit = max_file_size if max_file_size is not None else limits_config.max_file_size
    roots = [LocalFileEntry(path) for path in paths]
    result = PromptCollector().collect_result(roots, rules, max_file_size=limit)

    copy_to_clipboard = copy if copy is not None else output_config.copy_to_clipboard
    try:
        _write_output(result.render(), output, copy_to_clipboard)
    except (OSError, pyperclip.PyperclipException) as e:
        _die(f"Could not deliver prompt: {e}", verbose=verbose, exc=e)

    show_summary = summary if summary is not None else output_config.summary
    if show_summary:
        click.echo(result.summary(), err=True)


@cli.command(name="check-ignore")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--base",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project base directory holding .topromptignore",
)
@click.pass_context
def check_ignore(ctx, paths: Tuple[Path, ...], base: Path):
    """Show which ignore pattern, if any, excludes each path.

    PATHS: Paths to test (made absolute, as during collection)
    """
    verbose = ctx.obj.get("verbose", False)
    try:
        rules = load_ignore_rules(base.resolve())
    except (ConfigReadError, InvalidIgnorePatternError) as e:
        _die(str(e), verbose=verbose, exc=e)

    for path in paths:
        entry_path = LocalFileEntry(path).path
        pattern = rules.first_match(entry_path)
        if pattern is not None:
            click.echo(f"{entry_path}: {pattern.source}")
        else:
            click.echo(f"{entry_path}: not ignored")


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
