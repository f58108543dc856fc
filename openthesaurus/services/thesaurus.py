"""Query the thesaurus service and parse its answer."""

from __future__ import annotations

import httpx

from openthesaurus.config import ThesaurusSettings
from openthesaurus.domain.models import Result
from openthesaurus.logging import logger
from openthesaurus.services.exceptions import TransportError
from openthesaurus.services.parser import parse_response
from openthesaurus.services.transport import ThesaurusTransport


class ThesaurusService:
    """One synchronous request/response exchange per query.

    Every failure is logged and reported to the caller as ``None``.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        settings: ThesaurusSettings | None = None,
    ) -> None:
        self._transport = ThesaurusTransport(http_client, settings=settings)

    def query(self, query: str) -> Result | None:
        query = (query or "").strip()
        if not query:
            return None

        try:
            body = self._transport.fetch(query)
        except TransportError as exc:
            logger.warning("thesaurus_request_failed", query=query, error=str(exc))
            return None

        result = parse_response(body)
        if result is None:
            logger.warning("thesaurus_response_unparseable", query=query, size=len(body))
            return None

        logger.debug(
            "thesaurus_query_done",
            query=query,
            matches=len(result.matches),
            suggestions=[collection.category.value for collection in result.suggestions],
        )
        return result


__all__ = ["ThesaurusService"]
