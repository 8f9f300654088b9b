"""
Typer-based command line for PhraseDensity.

    phrasedensity https://example.com/some/article

Fetches the page, scores its phrases and prints the Rank / Relevance /
Keywords table. Failures are reported on stdout with a short diagnostic;
no partial table is printed.
"""

from typing import Optional

import typer

from .exceptions import SourceUnavailableError
from .pipeline import KeywordDensityAnalyzer
from .progress import DotProgress
from .report import render_ranking


OOPS_MESSAGE = "Oops! Something seems to have gone wrong!"
MISSING_URL_MESSAGE = "No website URL entered. Try again!"
WAIT_MESSAGE = "Please be patient while the website is being parsed"

app = typer.Typer(
    add_completion=False,
    help="Rank the multi-word phrases that best describe a web page.",
)


@app.command()
def analyze(
    url: Optional[str] = typer.Argument(None, help="URL of the page to analyze."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each pipeline stage instead of printing dots."
    ),
) -> None:
    """Print the top keyword phrases of URL."""
    if not url:
        typer.echo(OOPS_MESSAGE)
        typer.echo(MISSING_URL_MESSAGE)
        return

    analyzer = KeywordDensityAnalyzer(logger=typer.echo if verbose else None)
    try:
        with DotProgress(WAIT_MESSAGE, enabled=not verbose):
            result = analyzer.analyze_url(url, verbose=verbose)
    except SourceUnavailableError as exc:
        typer.echo("")
        typer.echo(OOPS_MESSAGE)
        typer.echo(str(exc))
        return
    except Exception:
        typer.echo("")
        typer.echo(OOPS_MESSAGE)
        return

    typer.echo("\n")
    typer.echo(render_ranking(result))


def main() -> None:
    """Console-script entrypoint."""
    app()


if __name__ == "__main__":
    main()
