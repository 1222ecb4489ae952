"""Thin JSON client for the procurement REST backend.

Every backend response is wrapped in an envelope::

    {"success": true, "message": "...", "data": ..., "error": null}

``ApiClient`` unwraps ``data`` and turns every transport failure,
non-2xx status, undecodable body or ``success: false`` envelope into a
BackendError. Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from procurement.domain.exceptions import BackendError, ValidationError

logger = logging.getLogger(__name__)

# What mapping an unexpected payload into domain objects can raise.
# Adapters turn these into BackendError.
PAYLOAD_ERRORS = (AttributeError, KeyError, TypeError, ValueError, ValidationError)


class ApiClient:

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    # --- Verbs ----------------------------------------------------------------

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, payload=payload)

    def put(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("PUT", path, payload=payload)

    def patch(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("PATCH", path, params=params)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # --- Internal helpers -----------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s params=%s", method, url, params)

        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=payload,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise BackendError(f"Could not reach the backend: {exc}") from exc

        if not response.ok:
            message = self._error_message(response)
            logger.error("%s %s returned %s: %s", method, url, response.status_code, message)
            raise BackendError(
                f"Backend returned {response.status_code}: {message}",
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise BackendError("Backend returned a malformed response") from exc

        if not isinstance(body, dict):
            return body
        if body.get("success") is False:
            message = body.get("error") or body.get("message") or "request rejected"
            raise BackendError(f"Backend rejected the request: {message}")
        return body.get("data")

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or (response.reason or "no details")
        if isinstance(body, dict):
            return str(body.get("error") or body.get("message") or body)
        return str(body)
