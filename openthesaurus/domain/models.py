"""Immutable result objects produced by the response parser."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Term(_FrozenModel):
    """A word or phrase, optionally tagged with a usage level such as ``umgangssprachlich``."""

    text: str
    level: str | None = None

    @property
    def is_qualified(self) -> bool:
        return self.level is not None


class Synset(_FrozenModel):
    """One synonym group, terms kept in the order the service ranked them."""

    terms: tuple[Term, ...] = ()

    def __len__(self) -> int:
        return len(self.terms)


class SuggestionCategory(str, Enum):
    """Alternate-query classifications, each bound to the XPath selecting its terms.

    Member order is the order suggestions appear in a ``Result``.
    """

    def __new__(cls, value: str, path: str) -> "SuggestionCategory":
        member = str.__new__(cls, value)
        member._value_ = value
        member.path = path
        return member

    SIMILAR = ("similar", "//similarterms/term")
    SUBSTRING = ("substring", "//substringterms/term")
    STARTS_WITH = ("startswith", "//startswithterms/term")


class SuggestionCollection(_FrozenModel):
    category: SuggestionCategory
    terms: tuple[Term, ...] = ()

    def __len__(self) -> int:
        return len(self.terms)


class Result(_FrozenModel):
    """Parsed answer for one query.

    ``matches`` holds the synsets in document order. ``suggestions`` holds only
    non-empty collections, ordered like ``SuggestionCategory``.
    """

    matches: tuple[Synset, ...] = ()
    suggestions: tuple[SuggestionCollection, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.matches and not self.suggestions

    def suggestion(self, category: SuggestionCategory) -> SuggestionCollection | None:
        for collection in self.suggestions:
            if collection.category is category:
                return collection
        return None


__all__ = [
    "Term",
    "Synset",
    "SuggestionCategory",
    "SuggestionCollection",
    "Result",
]
