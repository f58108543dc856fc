"""HTTPS transport for the thesaurus search endpoint."""

from __future__ import annotations

import httpx

from openthesaurus.config import ThesaurusSettings
from openthesaurus.services.exceptions import TransportError


def build_timeout(settings: ThesaurusSettings) -> httpx.Timeout:
    return httpx.Timeout(settings.read_timeout_seconds, connect=settings.connect_timeout_seconds)


def build_client(settings: ThesaurusSettings | None = None) -> httpx.Client:
    """Create a client that never follows redirects."""

    settings = settings or ThesaurusSettings()
    return httpx.Client(
        timeout=build_timeout(settings),
        follow_redirects=False,
        headers={"User-Agent": settings.user_agent},
    )


class ThesaurusTransport:
    """Performs one GET against the search endpoint and returns the body text."""

    def __init__(
        self,
        http_client: httpx.Client,
        settings: ThesaurusSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ThesaurusSettings()

    @property
    def query_url(self) -> str:
        return str(self._settings.query_url)

    def build_params(self, query: str) -> dict[str, str]:
        return {
            "format": self._settings.response_format,
            "mode": self._settings.mode,
            "q": query,
        }

    def fetch(self, query: str) -> str:
        request_url = httpx.URL(self.query_url)
        try:
            response = self._client.get(
                request_url,
                params=self.build_params(query),
                timeout=build_timeout(self._settings),
            )
        except httpx.RequestError as exc:
            raise TransportError(f"Thesaurus request failed: {exc}") from exc

        if response.url.host != request_url.host:
            raise TransportError(
                f"Thesaurus request was redirected from {request_url.host} to {response.url.host}"
            )
        if response.status_code != httpx.codes.OK:
            detail = response.text[:500]
            raise TransportError(f"Thesaurus request failed ({response.status_code}): {detail}")

        return response.text


__all__ = ["ThesaurusTransport", "build_client", "build_timeout"]
