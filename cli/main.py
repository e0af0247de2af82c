"""SuprNews CLI: entry-point for the content core.

Usage:
    python cli/main.py --help

Commands:
    fetch       → fetch, extract and clean an article URL
    categorize  → assign a topic to title/description text
    check       → binary / garble report for a local file
    clean       → run the content cleaner over a local file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from suprnews.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import List, Optional

import typer

from suprnews.logs import configure_logging

app = typer.Typer(
    name="suprnews",
    help="SuprNews content core CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (default: LOG_LEVEL)."),
) -> None:
    """Configure logging for every sub-command."""
    configure_logging(log_level)


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    url: str = typer.Option(..., help="Article URL to fetch."),
) -> None:
    """Fetch a URL and print the cleaned article markup to stdout."""
    from suprnews.scraper import fetch_article

    typer.echo(f"[fetch] Fetching {url!r} …")
    outcome = fetch_article(url)
    method = outcome.method.value if outcome.method else "none"
    typer.echo(f"[fetch] Method    : {method}")
    typer.echo(f"[fetch] Fell back : {'yes' if outcome.fell_back else 'no'}")
    if not outcome.available:
        failure = outcome.failure.value if outcome.failure else "unknown"
        typer.echo(f"[fetch] No content available ({failure}).")
        raise typer.Exit(1)
    typer.echo(f"[fetch] Length    : {len(outcome.content)} chars")
    typer.echo("")
    typer.echo(outcome.content)


@app.command("check")
def check(
    path: Path = typer.Option(..., exists=True, dir_okay=False, help="Local file to inspect."),
) -> None:
    """Report encoding, binary and garble verdicts for a local file."""
    from suprnews.scraper.corruption import garble_ratio, is_binary_content, is_garbled
    from suprnews.scraper.encoding import decode_body, resolve_encoding, to_text

    data = path.read_bytes()
    encoding = resolve_encoding(data)
    text = to_text(decode_body(data, encoding))
    report = {
        "bytes": len(data),
        "encoding": encoding,
        "binary": is_binary_content(data),
        "garbled": is_garbled(text),
        "garble_ratio": round(garble_ratio(text), 4),
    }
    typer.echo(json.dumps(report, indent=2))


@app.command("clean")
def clean(
    path: Path = typer.Option(..., exists=True, dir_okay=False, help="Local HTML/text file."),
) -> None:
    """Run the content cleaner over a local file and print the result."""
    from suprnews.scraper.cleaner import clean_content
    from suprnews.scraper.encoding import decode_body, resolve_encoding, to_text

    data = path.read_bytes()
    typer.echo(clean_content(to_text(decode_body(data, resolve_encoding(data)))))


# ---------------------------------------------------------------------------
# Categorization
# ---------------------------------------------------------------------------
@app.command("categorize")
def categorize_cmd(
    text: str = typer.Option("", "--text", help="Title and description text."),
    tag: Optional[List[str]] = typer.Option(None, "--tag", help="Feed-supplied category tag (repeatable)."),
    feed_name: str = typer.Option("", "--feed-name", help="Display name of the feed."),
    as_json: bool = typer.Option(False, "--json", help="Print the full assignment as JSON."),
) -> None:
    """Assign a topic category to an article."""
    from suprnews.classify import FeedItem, assign_category

    item = FeedItem(title=text, categories=tuple(tag or ()), feed_name=feed_name)
    assignment = assign_category(item)
    if as_json:
        typer.echo(json.dumps({
            "category": assignment.category,
            "source": assignment.source,
            "scores": assignment.scores,
        }))
        return
    typer.echo(f"[categorize] {assignment.category}  (source={assignment.source})")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
