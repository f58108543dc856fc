"""Shared pytest fixtures for building thesaurus XML responses."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence
from xml.sax.saxutils import quoteattr

import pytest
import structlog

from openthesaurus.services.parser import SUPPORTED_API

ResponseFactory = Callable[..., str]


def _term(text: str | None, level: str | None = None) -> str:
    attrs = ""
    if text is not None:
        attrs += f" term={quoteattr(text)}"
    if level is not None:
        attrs += f" level={quoteattr(level)}"
    return f"<term{attrs}/>"


def _synset(index: int, terms: Iterable[tuple[str | None, str | None]]) -> str:
    body = "".join(_term(text, level) for text, level in terms)
    return (
        f'<synset id="{index}">'
        '<categories><category name="Allgemein"/></categories>'
        f"{body}</synset>"
    )


def _suggestion_block(tag: str, terms: Sequence[str]) -> str:
    body = "".join(_term(text) for text in terms)
    return f"<{tag}>{body}</{tag}>"


@pytest.fixture
def build_response() -> ResponseFactory:
    """Return a factory producing a response document shaped like the live API."""

    def _build(
        synsets: Sequence[Sequence[tuple[str | None, str | None]]] = (),
        *,
        version: str | None = SUPPORTED_API,
        similar: Sequence[str] = (),
        substring: Sequence[str] = (),
        startswith: Sequence[str] = (),
        suggestion_order: Sequence[str] = ("similarterms", "substringterms", "startswithterms"),
    ) -> str:
        meta = '<metaData><copyright content="Copyright (C) OpenThesaurus.de"/>'
        if version is not None:
            meta += f"<apiVersion content={quoteattr(version)}/>"
        meta += "</metaData>"
        blocks = {
            "similarterms": similar,
            "substringterms": substring,
            "startswithterms": startswith,
        }
        suggestions = "".join(
            _suggestion_block(tag, blocks[tag]) for tag in suggestion_order if blocks[tag]
        )
        body = "".join(_synset(index, terms) for index, terms in enumerate(synsets, start=1))
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<matches>{meta}{body}{suggestions}</matches>'

    return _build


@pytest.fixture
def sample_response(build_response) -> str:
    return build_response(
        [
            [("schnell", None), ("fix", "umgangssprachlich"), ("rasch", None)],
            [("flink", None), ("behände", "gehoben")],
        ],
        similar=["schnel", "schnall"],
        startswith=["schnellen", "Schnellzug"],
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
