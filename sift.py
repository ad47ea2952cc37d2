"""Sift CLI — build a reverse index over a corpus file and query it.

Four commands: validate, index, query, shell.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from engine.corpus import read_corpus
from engine.indexer import Index, build_index, summarize
from engine.searcher import FIRST_TERM_MODES, evaluate
from engine.stopwords import read_stop_words
from engine.validator import ConfigError, load_config, validate_config

app = typer.Typer(help="Sift: boolean keyword search over a reverse index.")
console = Console()
err_console = Console(stderr=True)

PROMPT = "Enter query sentence (press enter to quit): "


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(errors: list[str]) -> None:
    for err in errors:
        console.print(f"  [red]✗[/red] {escape(err)}", highlight=False)
    raise typer.Exit(code=1)


def _resolve_session(
    corpus: str | None,
    config_path: str | None,
    stopwords: str | None,
    first_term: str | None = None,
) -> dict:
    """Merge the config file (if any) with command-line overrides."""
    session = {"corpus": None, "stopwords": None, "query": {"first_term": "literal"}}

    if config_path:
        try:
            config = load_config(config_path)
        except ConfigError as e:
            console.print(
                Panel("[bold red]✗ Invalid config[/bold red]", border_style="red")
            )
            _fail(e.errors)
        session["corpus"] = config["corpus"]
        session["stopwords"] = config.get("stopwords")
        session["query"].update(config.get("query") or {})

    if corpus:
        session["corpus"] = corpus
    if stopwords:
        session["stopwords"] = stopwords
    if first_term:
        if first_term not in FIRST_TERM_MODES:
            _fail([f"--first-term must be one of {sorted(FIRST_TERM_MODES)}, got '{first_term}'."])
        session["query"]["first_term"] = first_term

    if not session["corpus"]:
        _fail(["No corpus given: pass a CORPUS path or a --config naming one."])
    return session


def _load_index(session: dict) -> tuple[Index, int, frozenset[str]]:
    stop_words = read_stop_words(session["stopwords"])
    index, document_count = build_index(read_corpus(session["corpus"]), stop_words)
    return index, document_count, stop_words


def _print_results(results: set[str]) -> None:
    console.print(f"Found {len(results)} matching pages")
    for doc_id in sorted(results):
        console.print(doc_id, markup=False, highlight=False)


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to config JSON")):
    """Check a session config for structural and type errors."""
    passed, errors = validate_config(config_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        _fail(errors)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(
    corpus: str | None = typer.Argument(None, help="Path to corpus file"),
    stopwords: str | None = typer.Option(
        None, "--stopwords", help="Path to stop-word list"
    ),
    config: str | None = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Build the reverse index for a corpus and report its size."""
    session = _resolve_session(corpus, config, stopwords)
    with console.status("[bold blue]Stand by while building index..."):
        idx, document_count, stop_words = _load_index(session)
    summary = summarize(idx, document_count)

    table = Table(title="Indexing Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents", str(summary["documents"]))
    table.add_row("Pages", str(summary["pages"]))
    table.add_row("Unique Terms", str(summary["terms"]))
    table.add_row("Stop Words", str(len(stop_words)) if stop_words else "none")
    console.print(table)


# ── query ───────────────────────────────────────────────────────────


@app.command()
def query(
    corpus: str | None = typer.Argument(None, help="Path to corpus file"),
    q: str = typer.Option("", "--q", help="Query sentence"),
    stopwords: str | None = typer.Option(
        None, "--stopwords", help="Path to stop-word list"
    ),
    first_term: str | None = typer.Option(
        None, "--first-term", help="How the first query word is applied: seed or literal"
    ),
    config: str | None = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Run one query and list the matching pages."""
    if not q.strip():
        console.print("[red]Error: --q is required[/red]")
        raise typer.Exit(code=1)

    session = _resolve_session(corpus, config, stopwords, first_term)
    idx, _, _ = _load_index(session)
    _print_results(evaluate(idx, q, session["query"]["first_term"]))


# ── shell ───────────────────────────────────────────────────────────


@app.command()
def shell(
    corpus: str | None = typer.Argument(None, help="Path to corpus file"),
    stopwords: str | None = typer.Option(
        None, "--stopwords", help="Path to stop-word list"
    ),
    first_term: str | None = typer.Option(
        None, "--first-term", help="How the first query word is applied: seed or literal"
    ),
    config: str | None = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Index a corpus, then answer queries until an empty line."""
    session = _resolve_session(corpus, config, stopwords, first_term)
    console.print("Stand by while building index...")
    idx, document_count, _ = _load_index(session)
    summary = summarize(idx, document_count)
    console.print(
        f"Indexed {summary['pages']} pages containing {summary['terms']} unique terms\n"
    )

    while True:
        try:
            sentence = console.input(PROMPT)
        except EOFError:
            break
        if not sentence:
            break
        _print_results(evaluate(idx, sentence, session["query"]["first_term"]))
        console.print()

    console.print("Thank you for searching!")


if __name__ == "__main__":
    app()
