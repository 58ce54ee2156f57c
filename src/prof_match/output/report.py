"""Markdown and JSON output for match results."""

from pathlib import Path

from prof_match.models.professor import ScoredCandidate
from prof_match.models.result import MatchResult


def save_json(result: MatchResult, output_path: str | Path) -> Path:
    """Save a match result as camelCase JSON.

    Args:
        result: Match result to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    return path


def _candidate_line(candidate: ScoredCandidate) -> str:
    areas = ", ".join(candidate.research_areas) or "no listed research areas"
    return (
        f"**{candidate.name}** ({candidate.department}) - {candidate.match_score} "
        f"[threshold {candidate.threshold:g}] - {areas}"
    )


def format_match_result(result: MatchResult) -> str:
    """Format a match result for display.

    Args:
        result: Match result.

    Returns:
        Markdown text.
    """
    best = result.professor
    output = [f"## Best Match: {best.name} (Score: {best.match_score})", ""]

    details = [
        ("Department", best.department),
        ("Position", best.position),
        ("Email", best.email),
        ("Location", best.location),
        ("Research Areas", ", ".join(best.research_areas)),
        ("Available Slots", str(best.available_slots)),
    ]
    for label, value in details:
        if value:
            output.append(f"- **{label}:** {value}")
    output.append("")

    if best.score_breakdown is not None:
        breakdown = best.score_breakdown
        output.append("### Score Breakdown")
        output.append(f"- **Research:** {breakdown.research:.1f} / 40")
        output.append(f"- **Career:** {breakdown.career:.1f} / 30")
        output.append(f"- **Department:** {breakdown.department:.0f} / 20")
        output.append(f"- **Availability:** {breakdown.availability:.0f} / 10")
        output.append(f"*Raw score: {breakdown.raw_total:.1f}*")
    else:
        output.append("*Neutral score used: this professor could not be scored.*")
    output.append("")

    output.append("### Why This Match")
    output.append(result.match_reason)
    if result.reason_source == "fallback":
        output.append("")
        output.append("*(template explanation)*")
    output.append("")

    if result.alternative_matches:
        output.append("### Alternatives")
        for candidate in result.alternative_matches:
            output.append(f"- {_candidate_line(candidate)}")
        output.append("")

    output.append("### Next Steps")
    for number, step in enumerate(result.next_steps, start=1):
        output.append(f"{number}. {step}")

    return "\n".join(output)
