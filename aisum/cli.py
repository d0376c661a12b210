"""
Aisum CLI.

Usage:
    aisum summarize "article text..."      # Summarize pasted text
    aisum summarize --file article.txt     # Summarize text from a file
    aisum summarize --url URL              # Fetch an article, then summarize it
    aisum fetch URL                        # Extract an article's main content
    aisum digest -i robotics -i "ethical ai"  # Daily digest for chosen interests
    aisum digest --count 3 --format json   # Digest for all catalog interests
    aisum interests                        # List the interest catalog
    aisum config                           # Verify configuration
"""

import json
import sys
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from aisum import __version__
from aisum.config import InterestConfig, Settings, get_settings
from aisum.errors import FlowError
from aisum.flows import (
    ArticleContentExtractor,
    ArticleSummarizer,
    DigestGenerator,
    default_client,
)
from aisum.llm import LLMClient, LLMError
from aisum.logging_config import setup_logging
from aisum.models import ArticleFetchResponse, DigestResponse, SummarizeResponse

# Format choices for flow output
FormatChoice = typer.Option(
    "rich",
    "--format",
    "-f",
    help="Output format: rich (terminal), text (plain), or json",
)

console = Console()
err_console = Console(stderr=True)

# Global state
state = {"verbose": False}


def _load_settings():
    """Load settings with a user-friendly error on failure."""
    try:
        settings = get_settings()
    except Exception as e:
        err_console.print(
            "[red]Configuration error.[/red] "
            "Check your config file or environment variables.\n"
        )
        errors = getattr(e, "errors", None)
        if callable(errors):
            for error in errors():
                loc = ".".join(str(part) for part in error["loc"])
                err_console.print(f"  [red]✗[/red] {loc}: {error['msg']}")
        else:
            err_console.print(f"  [red]✗[/red] {e}")
        raise typer.Exit(code=1) from None

    if not state["verbose"]:
        setup_logging(settings.log_level)
    return settings


def _load_client() -> LLMClient:
    """Create the configured LLM client or exit with a readable error."""
    _load_settings()
    try:
        return default_client()
    except LLMError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from None


def _extractor(client: LLMClient, settings: Settings) -> ArticleContentExtractor:
    """Build the extractor with the configured fetch limits."""
    return ArticleContentExtractor(
        client=client,
        timeout=settings.fetch_timeout_seconds,
        max_page_chars=settings.max_page_chars,
    )


def _fail(error: FlowError, action: str) -> NoReturn:
    """Report a flow failure the same way for every command."""
    err_console.print(f"[red]Error:[/red] Failed to {action}. {error}")
    raise typer.Exit(code=1)


def _print_json(model: BaseModel) -> None:
    print(json.dumps(model.model_dump(mode="json"), indent=2))


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        print(f"Aisum CLI v{__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="aisum",
    help="Aisum - AI news summaries and daily digests",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="markdown",
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging output."
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit."
    ),
):
    """
    Aisum - AI news summaries and daily digests
    """
    state["verbose"] = verbose
    if verbose:
        setup_logging("DEBUG")
    else:
        setup_logging("WARNING")


def _read_article_text(text: str | None, file: Path | None) -> str:
    """Resolve article text from the argument, a file, or stdin."""
    if text:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            err_console.print(f"[red]Error:[/red] Failed to read {file}: not UTF-8 text.")
            raise typer.Exit(code=1) from None
    if not sys.stdin.isatty():
        return sys.stdin.read()
    err_console.print("[red]Provide article text, --file, --url, or pipe text on stdin.[/red]")
    raise typer.Exit(code=1)


def _print_article_content(result: ArticleFetchResponse, url: str, output_format: str) -> None:
    if output_format == "json":
        _print_json(result)
    elif output_format == "text":
        print(result.article_content)
    else:
        console.print(Panel(
            result.article_content,
            title="Article Content",
            subtitle=url,
            border_style="blue",
        ))


def _print_summary(result: SummarizeResponse, url: str | None, output_format: str) -> None:
    if output_format == "json":
        _print_json(result)
    elif output_format == "text":
        print(result.summary)
    else:
        console.print(Panel(
            result.summary,
            title="[bold]AI-Generated Summary[/bold]",
            subtitle=f"View original: {url}" if url else None,
            border_style="green",
        ))


def _print_digest(result: DigestResponse, interests: list[str], output_format: str) -> None:
    if output_format == "json":
        _print_json(result)
        return

    if output_format == "text":
        print(result.summary)
        print()
        for title in result.articles:
            print(f"- {title}")
        return

    console.print(Panel(
        f"[bold]Your Daily Digest[/bold]\n"
        f"[dim]Top stories for: {', '.join(interests)}[/dim]",
        border_style="blue",
    ))
    console.print(f"\n{result.summary}\n")

    if result.articles:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
        table.add_column("#", style="dim", justify="right")
        table.add_column("Article", style="white", no_wrap=False)
        for i, title in enumerate(result.articles, start=1):
            table.add_row(str(i), title)
        console.print(table)

    console.print(
        "\n[dim]Titles are generated by the model for your interests; "
        "they are not retrieved from a news source.[/dim]"
    )


@app.command()
def summarize(
    text: str | None = typer.Argument(None, help="Article text to summarize"),
    file: Path | None = typer.Option(
        None, "--file", help="Read article text from a file", exists=True, dir_okay=False
    ),
    url: str | None = typer.Option(None, "--url", "-u", help="Fetch the article from a URL first"),
    output_format: str = FormatChoice,
) -> None:
    """Summarize an article from text, a file, stdin, or a URL."""
    settings = _load_settings()
    client = _load_client()

    if url:
        extractor = _extractor(client, settings)
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=err_console,
                transient=True,
            ) as progress:
                progress.add_task("Fetching article...", total=None)
                fetched = extractor.invoke({"url": url})
        except FlowError as e:
            _fail(e, "fetch the article content")
        article_text = fetched.article_content
    else:
        article_text = _read_article_text(text, file)

    summarizer = ArticleSummarizer(
        client=client, max_article_chars=settings.max_article_chars
    )
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            progress.add_task("Summarizing article...", total=None)
            result = summarizer.invoke({"article_content": article_text})
    except FlowError as e:
        _fail(e, "summarize the article")

    _print_summary(result, url, output_format)


@app.command()
def fetch(
    url: str = typer.Argument(..., help="Article URL"),
    output_format: str = FormatChoice,
) -> None:
    """Fetch an article and extract its main content."""
    settings = _load_settings()
    extractor = _extractor(_load_client(), settings)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            progress.add_task("Fetching article...", total=None)
            result = extractor.invoke({"url": url})
    except FlowError as e:
        _fail(e, "fetch the article content")

    _print_article_content(result, url, output_format)


@app.command()
def digest(
    interest: list[str] | None = typer.Option(
        None,
        "--interest",
        "-i",
        help="Interest id, label, or free-text topic (repeatable). Defaults to the catalog.",
    ),
    count: int | None = typer.Option(None, "--count", "-n", help="Number of articles"),
    output_format: str = FormatChoice,
) -> None:
    """
    Generate a daily digest for your interests.

    The model writes the overview and invents plausible article titles; no
    real news source is queried.
    """
    settings = _load_settings()
    client = _load_client()

    try:
        catalog = InterestConfig(settings.interests_path)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from None

    interests = catalog.resolve(interest) if interest else catalog.get_ids()
    article_count = count if count is not None else settings.digest_article_count

    generator = DigestGenerator(client=client)
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            progress.add_task("Generating digest...", total=None)
            result = generator.invoke(
                {"interests": interests, "article_count": article_count}
            )
    except FlowError as e:
        _fail(e, "generate the daily digest")

    _print_digest(result, interests, output_format)


@app.command()
def interests() -> None:
    """List the interest catalog used by `aisum digest`."""
    settings = _load_settings()
    try:
        catalog = InterestConfig(settings.interests_path)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from None

    source = settings.interests_path if settings.interests_path.exists() else "built-in"
    table = Table(title=f"Interests ({source})", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    for interest_id, label in catalog.interests.items():
        table.add_row(interest_id, label)
    console.print(table)


@app.command()
def config() -> None:
    """Verify configuration."""
    settings = _load_settings()

    table = Table(title="Configuration", show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("LLM provider", settings.llm_provider)
    table.add_row("LLM model", settings.llm_model or "")
    table.add_row("LLM timeout", f"{settings.llm_timeout_seconds:g}s")
    table.add_row("Fetch timeout", f"{settings.fetch_timeout_seconds:g}s")
    table.add_row("Max article chars", f"{settings.max_article_chars:,}")
    table.add_row("Digest articles", str(settings.digest_article_count))
    table.add_row("Config dir", str(settings.config_dir))
    console.print(table)

    try:
        default_client()
    except LLMError as e:
        console.print(f"\n[red]✗[/red] {e}")
        raise typer.Exit(code=1) from None

    console.print(f"\n[green]✓[/green] {settings.llm_provider} client ready")


if __name__ == "__main__":
    app()
