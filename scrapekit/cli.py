"""
scrapekit CLI

Pull attribute-scoped HTML fragments or delimited substrings out of a file,
stdin, or a fetched URL.
"""

import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Tuple

import click
import httpx
import structlog
from rich.console import Console
from rich.table import Table

from . import __version__
from .client import WebClient
from .comparison import Comparison
from .config import load_config
from .errors import InvalidArgumentError, SubstringNotFoundError
from .fragments import (
    inner_html_by_attribute,
    inner_html_by_attribute_all,
    inner_html_by_attribute_all_or_fail,
    inner_html_by_attribute_or_fail,
)
from .logging_config import setup_logging
from .models import ExtractionReport
from .params import RequestParams
from .substrings import between_last, between_last_or_fail, betweens, betweens_or_fail
from .text import is_web_link

logger = structlog.get_logger(__name__)

err_console = Console(stderr=True)


def _read_source(source: str, settings: Dict[str, Any]) -> str:
    """Read SOURCE as a URL, '-' for stdin, or a file path."""
    if is_web_link(source, trim=True):
        with WebClient.from_config(settings.get("client", {})) as client:
            return client.get_text(source.strip())

    if source == "-":
        with click.open_file("-") as stream:
            return stream.read()

    path = Path(source)
    if not path.is_file():
        raise click.BadParameter(f"No such file: {source}", param_hint="SOURCE")
    return path.read_text(encoding="utf-8", errors="replace")


def _comparison(ignore_case: bool, settings: Dict[str, Any]) -> Comparison:
    if ignore_case:
        return Comparison.IGNORE_CASE
    return Comparison(settings.get("extraction", {}).get("comparison", Comparison.ORDINAL.value))


def _emit(report: ExtractionReport, as_json: bool) -> None:
    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    for fragment in report.fragments:
        click.echo(fragment)

    if not report.fragments:
        err_console.print("[dim]No matches[/dim]")


def _load_or_exit(source: str, settings: Dict[str, Any]) -> str:
    try:
        return _read_source(source, settings)
    except httpx.HTTPError as e:
        logger.error("source_fetch_failed", source=source, error=str(e))
        err_console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--log-format', type=click.Choice(['console', 'json']), default=None,
              help='Log output format (default: from config)')
@click.pass_context
def cli(ctx, config, verbose, log_format):
    """
    scrapekit - extract HTML fragments from raw markup without a parser.
    """
    settings = load_config(config)
    logging_settings = settings.get("logging", {})
    setup_logging(
        verbose=verbose,
        log_format=log_format or logging_settings.get("format", "console"),
        level=logging_settings.get("level", "INFO"),
    )
    ctx.obj = settings


@cli.command("inner-html")
@click.argument('source')
@click.option('--attribute', '-a', default='class', show_default=True, help='Attribute to match')
@click.option('--token', '-t', required=True, help='Token the attribute value must contain')
@click.option('--all', 'find_all', is_flag=True, help='Return every matching element')
@click.option('--ignore-case', '-i', is_flag=True, help='Case-insensitive attribute and token match')
@click.option('--trim', is_flag=True, help='Strip whitespace around each fragment')
@click.option('--start', type=int, default=0, show_default=True, help='Offset to start scanning from')
@click.option('--json', 'as_json', is_flag=True, help='Output results as JSON')
@click.option('--fail', is_flag=True, help='Exit with status 1 when nothing matches')
@click.pass_obj
def inner_html(settings, source, attribute, token, find_all, ignore_case, trim, start, as_json, fail):
    """
    Print the inner HTML of elements whose ATTRIBUTE holds TOKEN.

    Example:
        scrapekit inner-html page.html -t product-card --all
    """
    html = _load_or_exit(source, settings)
    comparison = _comparison(ignore_case, settings)
    trim = trim or settings.get("extraction", {}).get("trim", False)

    started = time.time()
    try:
        if find_all:
            extract = inner_html_by_attribute_all_or_fail if fail else inner_html_by_attribute_all
            fragments = extract(html, attribute, token, start, comparison, trim)
        elif fail:
            fragments = [inner_html_by_attribute_or_fail(html, attribute, token, start, comparison)]
        else:
            found = inner_html_by_attribute(html, attribute, token, start, comparison)
            fragments = [] if found is None else [found]
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e))
    except SubstringNotFoundError as e:
        logger.warning("no_fragments_found", source=source, attribute=attribute, token=token)
        err_console.print(f"[bold red]✗[/bold red] {e}")
        sys.exit(1)

    if trim and not find_all:
        fragments = [fragment.strip() for fragment in fragments]

    report = ExtractionReport(
        source=source,
        method="inner_html",
        keys={"attribute": attribute, "token": token},
        fragments=fragments,
        total=len(fragments),
        duration_ms=int((time.time() - started) * 1000),
    )
    logger.info("extraction_completed", source=source, total=report.total)
    _emit(report, as_json)


@cli.command()
@click.argument('source')
@click.argument('left')
@click.argument('right')
@click.option('--limit', type=int, default=0, show_default=True, help='Maximum matches (0 = all)')
@click.option('--last', is_flag=True, help='Only the last match, scanning from the end')
@click.option('--ignore-case', '-i', is_flag=True, help='Case-insensitive delimiters')
@click.option('--json', 'as_json', is_flag=True, help='Output results as JSON')
@click.option('--fail', is_flag=True, help='Exit with status 1 when nothing matches')
@click.pass_obj
def between(settings, source, left, right, limit, last, ignore_case, as_json, fail):
    """
    Print the text between LEFT and RIGHT delimiters.

    Example:
        scrapekit between page.html '<title>' '</title>'
    """
    text = _load_or_exit(source, settings)
    comparison = _comparison(ignore_case, settings)

    started = time.time()
    try:
        if last:
            if fail:
                results = [between_last_or_fail(text, left, right, comparison=comparison)]
            else:
                found = between_last(text, left, right, comparison=comparison)
                results = [] if found is None else [found]
        else:
            extract = betweens_or_fail if fail else betweens
            results = extract(text, left, right, comparison=comparison, limit=limit)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e))
    except SubstringNotFoundError as e:
        logger.warning("no_substrings_found", source=source, left=left, right=right)
        err_console.print(f"[bold red]✗[/bold red] {e}")
        sys.exit(1)

    report = ExtractionReport(
        source=source,
        method="between",
        keys={"left": left, "right": right},
        fragments=results,
        total=len(results),
        duration_ms=int((time.time() - started) * 1000),
    )
    _emit(report, as_json)


def _parse_params(values: Tuple[str, ...]) -> RequestParams:
    pairs: List[Tuple[str, str]] = []
    for value in values:
        name, sep, param_value = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected key=value, got {value!r}", param_hint="--param")
        pairs.append((name, param_value))
    return RequestParams(pairs)


@cli.command()
@click.argument('url')
@click.option('--param', '-p', 'params', multiple=True, help='Query parameter as key=value (repeatable)')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Save body to file')
@click.pass_obj
def fetch(settings, url, params, output):
    """
    Fetch URL and print the body, or save it with --output.

    Example:
        scrapekit fetch https://example.com -p q=shoes -o page.html
    """
    query = _parse_params(params)

    try:
        with WebClient.from_config(settings.get("client", {})) as client:
            result = client.get(url, query)
    except httpx.HTTPError as e:
        logger.error("fetch_failed", url=url, error=str(e))
        err_console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    if output:
        Path(output).write_text(result.text, encoding="utf-8")

        table = Table(title="Fetch Result", show_header=True)
        table.add_column("URL", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Content-Type", style="yellow")
        table.add_column("Duration", style="green")
        status_color = "green" if result.success else "red"
        table.add_row(
            result.url[:60],
            f"[{status_color}]{result.status_code}[/{status_color}]",
            result.content_type or "N/A",
            f"{result.duration_ms} ms",
        )
        err_console.print(table)
        err_console.print(f"✓ Saved to: {output}")
    else:
        click.echo(result.text)

    sys.exit(0 if result.success else 1)


def main():
    cli()


if __name__ == "__main__":
    main()
