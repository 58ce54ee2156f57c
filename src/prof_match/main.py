"""CLI entry point for Prof Match."""

import json
import logging
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> prof_match/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError as SchemaError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markdown import Markdown  # noqa: E402
from rich.panel import Panel  # noqa: E402

from prof_match.config import get_settings  # noqa: E402
from prof_match.errors import MatchingError  # noqa: E402
from prof_match.llm.base import DEFAULT_MODELS, get_llm_provider  # noqa: E402
from prof_match.models.analysis import StudentAnalysis  # noqa: E402
from prof_match.output.report import format_match_result, save_json  # noqa: E402
from prof_match.processors.explainer import LLMNarrativeGenerator  # noqa: E402
from prof_match.processors.matcher import ProfessorMatcher  # noqa: E402
from prof_match.scoring.threshold import ThresholdPolicy  # noqa: E402
from prof_match.sources import JsonFileCandidateSource  # noqa: E402

app = typer.Typer(
    name="prof-match",
    help="Prof Match - find the right professor for a student's advising needs",
    add_completion=False,
)
console = Console()


def configure_logging(level: str) -> None:
    """Send log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_analysis(path: Path) -> StudentAnalysis:
    """Read and validate a student analysis JSON file."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(2)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Accept either the bare analysis or an {"analysis": {...}} envelope
        if isinstance(data, dict) and "analysis" in data:
            data = data["analysis"]
        return StudentAnalysis.model_validate(data)
    except (json.JSONDecodeError, SchemaError) as e:
        console.print(f"[red]Error:[/red] Invalid analysis file {path}: {e}")
        raise typer.Exit(2) from e


@app.command()
def match(
    analysis: Annotated[Path, typer.Argument(help="Path to the student analysis (JSON)")],
    professors: Annotated[
        Path, typer.Argument(help="Path to the professor directory (JSON array)")
    ],
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="LLM provider: openai, anthropic or google"),
    ] = None,
    no_narrative: Annotated[
        bool,
        typer.Option("--no-narrative", help="Skip the LLM and use the template explanation"),
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save the result as JSON")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show per-professor scoring details")
    ] = False,
) -> None:
    """Match a student to the best available professor."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    console.print(
        Panel.fit(
            "[bold blue]Prof Match[/bold blue] - Finding an advisor",
            border_style="blue",
        )
    )

    student = load_analysis(analysis)
    if not professors.exists():
        console.print(f"[red]Error:[/red] File not found: {professors}")
        raise typer.Exit(2)

    generator = None
    if settings.narrative_enabled and not no_narrative:
        chosen = provider or settings.provider
        if chosen not in DEFAULT_MODELS:
            console.print(f"[red]Error:[/red] Unknown provider: {chosen}")
            raise typer.Exit(2)
        llm_provider = get_llm_provider(
            chosen,
            model=settings.model if chosen == settings.provider else None,
            api_key=settings.api_key_for(chosen),
            timeout=settings.narrative_timeout_seconds,
            max_retries=settings.narrative_max_retries,
            max_tokens=settings.narrative_max_tokens,
            temperature=settings.narrative_temperature,
        )
        generator = LLMNarrativeGenerator(llm_provider)

    matcher = ProfessorMatcher(
        candidate_source=JsonFileCandidateSource(professors),
        narrative_generator=generator,
        threshold_policy=ThresholdPolicy(
            base=settings.minimum_match_score,
            floor=settings.threshold_floor,
        ),
    )

    try:
        result = matcher.match(student)
    except MatchingError as e:
        console.print(f"[red]{e.error_code}:[/red] {e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        # Malformed JSON, or not a JSON array
        console.print(f"[red]Error:[/red] Invalid professor file {professors}: {e}")
        raise typer.Exit(2) from e

    console.print(Panel(Markdown(format_match_result(result)), title="Match", border_style="blue"))

    if output is not None:
        save_json(result, output)
        console.print(f"\n[green]Result saved to:[/green] {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from prof_match import __version__

    console.print(f"Prof Match v{__version__}")


if __name__ == "__main__":
    app()
