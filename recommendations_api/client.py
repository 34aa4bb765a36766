"""Recommendations API client.

A thin wrapper around the REST API exposed by
``recommendations_api.app``.  It uses the ``requests`` library and
exposes one method per operation:

* :meth:`add` – submit a new recommendation.
* :meth:`list` – fetch the most recent recommendations.
* :meth:`get` – fetch a single recommendation by its identifier.
* :meth:`random` – fetch a random recommendation.
* :meth:`top` – fetch the best rated recommendations.
* :meth:`upvote` / :meth:`downvote` – vote on a recommendation.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.

An optional API key is sent as a bearer token, for deployments that
put the service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecommendationsAPI:
    """Client for interacting with the recommendations API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        prefix: str = "/api/v1/recommendations",
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            prefix: Path under which the recommendation routes are mounted.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.prefix = "/" + prefix.strip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the recommendation routes.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`prefix` (e.g. ``/random``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except ValueError as exc:
            # A success status whose body is not JSON.
            logger.error("API returned an unreadable body (%s): %s", response.status_code, exc)
            return None, {"status_code": response.status_code, "message": f"Invalid JSON in response: {exc}"}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(exc: requests.HTTPError) -> str:
        # The service answers ``{"detail": {"type": ..., "message": ...}}``
        # for business errors and ``{"detail": [...]}`` for validation.
        response = exc.response
        if response is None:
            return str(exc)
        try:
            body = response.json()
        except ValueError:
            return response.text or str(exc)
        detail = body.get("detail") if isinstance(body, dict) else None
        if isinstance(detail, dict):
            return detail.get("message") or detail.get("type") or str(exc)
        if detail:
            return str(detail)
        return str(exc)

    # ------------------------------------------------------------------
    # Recommendation operations
    # ------------------------------------------------------------------
    def add(self, name: str, media_link: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a recommendation.

        A duplicate name yields an error with ``status_code`` 409.
        """
        return self._request("POST", "/", json_body={"name": name, "media_link": media_link})

    def list(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/")
        if error:
            return [], error
        return data or [], None

    def get(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/{recommendation_id}")

    def random(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch a random recommendation; 404 when the drawn tier is empty."""
        return self._request("GET", "/random")

    def top(self, amount: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/top/{amount}")
        if error:
            return [], error
        return data or [], None

    def upvote(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/{recommendation_id}/upvote")

    def downvote(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Downvote a recommendation.

        The returned vote has ``removed`` set when the downvote deleted
        the recommendation.
        """
        return self._request("POST", f"/{recommendation_id}/downvote")
