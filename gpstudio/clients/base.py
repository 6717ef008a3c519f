from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from gpstudio.config.settings import AppSettings

logger = logging.getLogger(__name__)


class RequestFailure(Exception):
    """Base class for every failure of a single outbound call."""


class TransportFailure(RequestFailure):
    """Network error or non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeFailure(RequestFailure):
    """Response arrived but its payload could not be decoded."""


class ApiClient:
    """Thin wrapper around a `requests.Session` shared by the concrete clients.

    Only converts transport problems into `TransportFailure`; decoding the
    payload is left to subclasses.
    """

    def __init__(self, settings: AppSettings, session: requests.Session | None = None):
        self._settings = settings
        self._session = session or requests.Session()
        self._timeout = settings.request_timeout_sec

    # ---------------------------------------------------------------------
    # Transport helpers
    # ---------------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        return {}

    def _get(self, url: str, **kwargs: Any) -> requests.Response:
        return self._request("GET", url, **kwargs)

    def _post(self, url: str, **kwargs: Any) -> requests.Response:
        return self._request("POST", url, **kwargs)

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        try:
            response = self._session.request(
                method, url, headers=headers, timeout=self._timeout, **kwargs
            )
        except requests.RequestException as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            raise TransportFailure(f"{method} {url} failed: {exc}") from exc

        if not response.ok:
            logger.warning(f"{method} {url} returned {response.status_code}")
            raise TransportFailure(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeFailure(f"Response is not valid JSON: {exc}") from exc

    def close(self) -> None:
        self._session.close()
