"""Result rendering."""

from prof_match.output.report import format_match_result, save_json

__all__ = ["format_match_result", "save_json"]
