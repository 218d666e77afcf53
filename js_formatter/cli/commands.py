"""
Command-line interface for js-formatter.

This module provides CLI commands for fixing, formatting, checking and
restoring JavaScript files.
"""

import copy
import os
import sys
import click
import logging
from pathlib import Path
from typing import List, Set
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.panel import Panel

from .. import __version__
from ..core.collector import collect_files
from ..core.config import RcLoader
from ..core.defaults import DEFAULT_LINT_CONFIG, LINT_RC_NAME
from ..core.errors import JsFormatterError
from ..core.formatter import JsFormatter, FormatOptions, can_handle
from ..core.hooks import HookRegistry
from ..core.linter import EslintRunner, LintReport
from ..core.source_file import SourceFile
from ..core.writer import FileWriter

# Initialize Rich console for beautiful output
console = Console()

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

eslint_option = click.option(
    '--eslint', 'eslint_path', default='eslint', envvar='JS_FORMATTER_ESLINT',
    show_default=True, help='ESLint executable to use'
)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose):
    """js-formatter - fix and format JavaScript with ESLint and jsbeautifier."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--safe', is_flag=True, help='Single-pass fix only, no formatting')
@click.option('--lookup/--no-lookup', default=False, help='Use .jsfixrc/.jsbeautifyrc files near each source file')
@click.option('--debug', is_flag=True, help='Stop at the first error and show the traceback')
@click.option('--backup/--no-backup', default=True, help='Create backups before overwriting files')
@click.option('--dry-run', is_flag=True, help='Show what would change without writing anything')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False), help='Write results here instead of in place')
@click.option('--recursive/--no-recursive', default=True, help='Process directories recursively')
@eslint_option
def format(paths, safe, lookup, debug, backup, dry_run, output_dir, recursive, eslint_path):
    """Fix and format JavaScript files."""
    console.print(f"[bold yellow]Formatting:[/bold yellow] {', '.join(paths)}")

    if dry_run:
        console.print("[dim]Running in dry-run mode - no changes will be made[/dim]")

    runner = EslintRunner(eslint_path)
    ensure_eslint(runner)

    options = FormatOptions(safe=safe, lookup=lookup, debug=debug)
    writer = FileWriter(backup_enabled=backup)
    formatter = JsFormatter(options, runner=runner)
    formatter.on_error(lambda err: console.print(f"[red]✗[/red] {err.filepath}: {err.message}"))

    written: List[str] = []
    handled: Set[str] = set()

    try:
        with formatter, Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console
        ) as progress:
            task = progress.add_task("Formatting files...", total=None)

            for path in paths:
                base_dir = path if os.path.isdir(path) else os.path.dirname(path)
                for file in formatter.process(collect_files([path], recursive=recursive)):
                    progress.update(task, description=f"Formatting {Path(file.path).name}...")
                    # a path reached again through another argument was already written
                    if file.path in handled:
                        continue
                    handled.add(file.path)
                    result = formatter.results.get(file.path)
                    if result is None or not result.changed or dry_run:
                        continue
                    written.append(writer.write(file, output_dir=output_dir, base_dir=base_dir))

    except (JsFormatterError, UnicodeDecodeError, OSError) as e:
        if debug:
            raise
        console.print(f"[red]Error during formatting: {e}[/red]")
        sys.exit(1)

    display_format_results(formatter, dry_run)

    if written:
        console.print(f"[green]Wrote {len(written)} files[/green]")

    if formatter.errors:
        sys.exit(1)


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--lookup/--no-lookup', default=False, help='Use .jsfixrc files near each source file')
@click.option('--recursive/--no-recursive', default=True, help='Check directories recursively')
@eslint_option
def check(paths, lookup, recursive, eslint_path):
    """Lint JavaScript files without changing them."""
    console.print(f"[bold blue]Checking:[/bold blue] {', '.join(paths)}")

    runner = EslintRunner(eslint_path)
    ensure_eslint(runner)

    loader = RcLoader(LINT_RC_NAME, DEFAULT_LINT_CONFIG)
    hooks = HookRegistry.with_defaults()
    reports: List[LintReport] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        task = progress.add_task("Linting files...", total=None)

        try:
            for file in collect_files(paths, recursive=recursive):
                if not can_handle(file.path) or file.is_null():
                    continue
                progress.update(task, description=f"Linting {Path(file.path).name}...")
                contents = file.text()
                config = loader.for_path(file.path) if lookup else copy.deepcopy(DEFAULT_LINT_CONFIG)
                config = hooks.run(contents, config, file.path)
                reports.append(runner.lint(contents, file.path, config))
        except (JsFormatterError, UnicodeDecodeError, OSError) as e:
            console.print(f"[red]Error during check: {e}[/red]")
            sys.exit(1)

    display_lint_reports(reports)

    if any(r.error_count for r in reports):
        sys.exit(1)


@main.command()
@click.argument('filepath', type=click.Path(exists=True, dir_okay=False))
@click.option('--safe', is_flag=True, help='Single-pass fix only, no formatting')
@click.option('--lookup/--no-lookup', default=False, help='Use rc files near the source file')
@eslint_option
def preview(filepath, safe, lookup, eslint_path):
    """Preview the fixed and formatted content of a file."""
    console.print(f"[bold magenta]Preview for:[/bold magenta] {filepath}")

    if not can_handle(filepath):
        console.print("[yellow]Not a JavaScript file, nothing to do[/yellow]")
        return

    options = FormatOptions(safe=safe, lookup=lookup, debug=True)

    try:
        with JsFormatter(options, runner=EslintRunner(eslint_path)) as formatter:
            file = SourceFile.read(filepath)
            original = file.text()
            formatted = formatter.transform(file).text()
    except (JsFormatterError, UnicodeDecodeError, OSError) as e:
        console.print(f"[red]Error generating preview: {e}[/red]")
        sys.exit(1)

    if formatted == original:
        console.print("[green]File is already clean![/green]")
        return

    console.print(Panel(formatted, title="Formatted Code", border_style="green"))


@main.command()
@click.argument('filepath', type=click.Path(exists=True, dir_okay=False))
def restore(filepath):
    """Restore a file from backup."""
    console.print(f"[bold orange1]Restoring:[/bold orange1] {filepath}")

    writer = FileWriter()

    if writer.restore_from_backup(filepath):
        console.print(f"[green]Successfully restored {filepath} from backup[/green]")
    else:
        console.print(f"[red]Failed to restore {filepath} - no backup found[/red]")
        sys.exit(1)


def ensure_eslint(runner: EslintRunner):
    """Exit with an error when the ESLint executable cannot be run."""
    if not runner.is_available():
        console.print(f"[red]ESLint is not available: {runner.eslint_path}[/red]")
        console.print("[dim]Install it with: npm install -g eslint[/dim]")
        sys.exit(1)


def display_format_results(formatter: JsFormatter, dry_run: bool):
    """Display formatting results in a table."""
    results = list(formatter.results.values())

    if not results:
        console.print("[yellow]No JavaScript files were processed[/yellow]")
        return

    title = "Would Format" if dry_run else "Formatted Files"
    table = Table(title=title)
    table.add_column("File", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Message", style="dim")

    for result in results:
        if not result.success:
            status = "[bold red]error[/bold red]"
        elif result.changed:
            status = "[yellow]changed[/yellow]"
        else:
            status = "[green]clean[/green]"
        table.add_row(result.filepath, status, result.message)

    console.print(table)

    changed = sum(1 for r in results if r.changed)
    console.print(f"\n[bold]Done.[/bold] {changed}/{len(results)} files changed, {len(formatter.errors)} errors")


def display_lint_reports(reports: List[LintReport]):
    """Display lint messages grouped by file."""
    total_errors = sum(r.error_count for r in reports)
    total_warnings = sum(r.warning_count for r in reports)
    fixable = sum(len(r.fixable) for r in reports)

    summary_text = f"""
Files Checked: {len(reports)}
Errors: {total_errors}
Warnings: {total_warnings}
Fixable: {fixable}
    """.strip()

    console.print(Panel(summary_text, title="Check Summary", border_style="blue"))

    rows = [(r, m) for r in reports for m in r.messages]
    if not rows:
        console.print("[green]No problems found[/green]")
        return

    table = Table(title="Problems")
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Severity", justify="center")
    table.add_column("Rule", style="dim")
    table.add_column("Message")

    for report, message in rows:
        severity = "[red]error[/red]" if message.severity == 2 else "[yellow]warning[/yellow]"
        table.add_row(
            Path(report.filepath).name,
            f"{message.line}:{message.column}",
            severity,
            message.rule or "-",
            message.message
        )

    console.print(table)


if __name__ == '__main__':
    main()
