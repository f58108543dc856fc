"""Plain-text and JSON rendering of parsed results."""

from __future__ import annotations

from typing import Any

from openthesaurus.domain.models import Result, SuggestionCategory, Synset, Term

CATEGORY_LABELS: dict[SuggestionCategory, str] = {
    SuggestionCategory.SIMILAR: "Similar words",
    SuggestionCategory.SUBSTRING: "Containing",
    SuggestionCategory.STARTS_WITH: "Starting with",
}

NO_RESULT_TEXT = "No synonyms found."


def format_term(term: Term) -> str:
    if term.level is None:
        return term.text
    return f"{term.text} ({term.level})"


def format_synset(synset: Synset) -> str:
    return ", ".join(format_term(term) for term in synset.terms)


def format_result(result: Result) -> str:
    if result.is_empty:
        return NO_RESULT_TEXT

    lines = [f"{index}. {format_synset(synset)}" for index, synset in enumerate(result.matches, start=1)]
    if result.suggestions:
        if lines:
            lines.append("")
        for collection in result.suggestions:
            label = CATEGORY_LABELS.get(collection.category, collection.category.value)
            lines.append(f"{label}: {', '.join(format_term(term) for term in collection.terms)}")
    return "\n".join(lines)


def result_to_dict(result: Result) -> dict[str, Any]:
    return result.model_dump(mode="json")


__all__ = ["CATEGORY_LABELS", "format_term", "format_synset", "format_result", "result_to_dict"]
