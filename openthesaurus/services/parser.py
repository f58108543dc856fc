"""Map OpenThesaurus XML responses onto ``Result`` objects.

The parser fails closed: any irregularity in the document (bad XML, an
unsupported API version, an XPath that cannot be evaluated, a term without
text) turns the whole response into ``None`` instead of a partial result.
"""

from __future__ import annotations

from lxml import etree

from openthesaurus.domain.models import (
    Result,
    SuggestionCategory,
    SuggestionCollection,
    Synset,
    Term,
)
from openthesaurus.services.exceptions import ResponseParseError

SUPPORTED_API = "0.1.3"

VERSION_TAG = "apiVersion"
VERSION_ATTRIBUTE = "content"
MATCHES_PATH = "//matches/synset"
TERM_TAG = "term"
TERM_ATTRIBUTE = "term"
LEVEL_ATTRIBUTE = "level"


def _xml_parser(*, encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=False,
        huge_tree=False,
    )


def parse_document(response: str | bytes) -> etree._Element:
    """Parse raw response text into an element tree root.

    Text is already decoded, so it is handed to lxml as UTF-8 and any encoding
    named in the XML declaration is overridden.
    """

    if isinstance(response, str):
        return etree.fromstring(response.encode("utf-8"), _xml_parser(encoding="utf-8"))
    return etree.fromstring(response, _xml_parser())


def is_api_supported(document: etree._Element) -> bool:
    version_node = next(document.iter(VERSION_TAG), None)
    if version_node is None:
        return False
    return version_node.get(VERSION_ATTRIBUTE) == SUPPORTED_API


def _select(document: etree._Element, path: str) -> list[etree._Element]:
    try:
        nodes = etree.XPath(path)(document)
    except etree.XPathError as exc:
        raise ResponseParseError(f"Cannot evaluate {path!r}: {exc}") from exc
    if not isinstance(nodes, list):
        raise ResponseParseError(f"{path!r} did not select a node set")
    return nodes


def _is_term(node) -> bool:
    # comments and processing instructions carry a non-string tag
    return isinstance(node, etree._Element) and node.tag == TERM_TAG


def _term_text(node: etree._Element) -> str:
    text = node.get(TERM_ATTRIBUTE)
    if text is None:
        raise ResponseParseError(
            f"<{TERM_TAG}> on line {node.sourceline} has no {TERM_ATTRIBUTE!r} attribute"
        )
    return text


def parse_matches(document: etree._Element) -> list[Synset]:
    """Collect every synset under ``matches``, terms in document order.

    One term without text fails the whole list.
    """

    synsets: list[Synset] = []
    for node in _select(document, MATCHES_PATH):
        terms = [
            Term(text=_term_text(child), level=child.get(LEVEL_ATTRIBUTE))
            for child in node
            if _is_term(child)
        ]
        synsets.append(Synset(terms=terms))
    return synsets


def parse_suggestion_collection(
    document: etree._Element, category: SuggestionCategory
) -> SuggestionCollection:
    terms = [Term(text=_term_text(node)) for node in _select(document, category.path) if _is_term(node)]
    return SuggestionCollection(category=category, terms=terms)


def parse_suggestions(document: etree._Element) -> list[SuggestionCollection]:
    """Run every category query; keep non-empty collections in category order."""

    collections = [parse_suggestion_collection(document, category) for category in SuggestionCategory]
    return [collection for collection in collections if collection.terms]


def parse_root(document: etree._Element) -> Result | None:
    if not is_api_supported(document):
        return None
    try:
        matches = parse_matches(document)
        suggestions = parse_suggestions(document)
    except ResponseParseError:
        return None
    return Result(matches=matches, suggestions=suggestions)


def parse_response(response: str | bytes | None) -> Result | None:
    """Turn a raw response body into a ``Result``; ``None`` if it is unusable."""

    if not response or not isinstance(response, (str, bytes)):
        return None
    try:
        document = parse_document(response)
    except (etree.LxmlError, ValueError):
        return None
    return parse_root(document)


__all__ = [
    "SUPPORTED_API",
    "parse_document",
    "is_api_supported",
    "parse_matches",
    "parse_suggestion_collection",
    "parse_suggestions",
    "parse_root",
    "parse_response",
]
