"""
HTTP client for the upstream employee service.

The client issues exactly one request per call against the configured
base address and returns the response envelope.  It never retries:
HTTP error statuses and transport failures are raised as the matching
``DirectoryError`` subclass so that callers see upstream failures
unchanged.  The only state held is the immutable ``UpstreamConfig``
and the ``requests`` session.
"""

from __future__ import annotations

import http.cookiejar
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..core.config import UpstreamConfig
from ..core.errors import DecodeError, UpstreamUnavailable, error_for_status
from ..schemas.employee import EmployeeCreate
from ..schemas.envelope import Envelope
from .envelope_codec import parse_envelope


logger = logging.getLogger(__name__)


class EmployeeUpstreamClient:
    """Client for the upstream employee service.

    Paths are relative to ``config.base_url``, which already includes
    the employee path prefix:

    * ``GET {base}`` lists all employees.
    * ``GET {base}/{id}`` fetches one employee.
    * ``POST {base}`` creates an employee.
    * ``DELETE {base}/{id}`` deletes an employee.
    """

    def __init__(self, config: UpstreamConfig, *, session: Optional[requests.Session] = None) -> None:
        """Initialise the client.

        Args:
            config: Upstream address and optional timeout.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Either way its
                cookie jar is set to refuse every cookie.
        """
        self.config = config
        self.session = session or requests.Session()
        # The session is shared by all inbound requests; nothing upstream
        # sets on one call may be replayed on another.
        self.session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _url(self, employee_id: Optional[str] = None) -> str:
        if employee_id is None:
            return self.config.base_url
        return f"{self.config.base_url}/{quote(str(employee_id), safe='')}"

    @staticmethod
    def _error_message(response: requests.Response, fallback: str) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or fallback
        if isinstance(body, dict):
            for key in ("error", "message", "detail"):
                if body.get(key):
                    return str(body[key])
        return str(body) if body else fallback

    def _request(self, method: str, url: str, *, json_body: Any | None = None) -> requests.Response:
        """Perform an HTTP request and raise on any failure.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            url: Absolute URL to call.
            json_body: JSON body to send with the request.
        Returns:
            The successful response.
        Raises:
            UpstreamUnavailable: upstream could not be reached.
            DirectoryError: the subclass matching the HTTP error status.
        """
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            return response
        except requests.HTTPError as exc:
            if exc.response is None:
                logger.error("Upstream %s %s failed: %s", method, url, exc)
                raise UpstreamUnavailable(str(exc)) from exc
            status = exc.response.status_code
            message = self._error_message(exc.response, str(exc))
            logger.error("Upstream %s %s failed (%s): %s", method, url, status, message)
            raise error_for_status(status, message) from exc
        except requests.RequestException as exc:
            logger.error("Upstream %s %s unreachable: %s", method, url, exc)
            raise UpstreamUnavailable(str(exc)) from exc

    def _envelope(self, response: requests.Response) -> Optional[Envelope]:
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(f"Upstream returned a non-JSON body: {exc}", response.status_code) from exc
        return parse_envelope(body)

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_all(self) -> Optional[Envelope]:
        """Retrieve the envelope wrapping every employee."""
        return self._envelope(self._request("GET", self._url()))

    def get_by_id(self, employee_id: str) -> Optional[Envelope]:
        """Retrieve the envelope wrapping a single employee."""
        return self._envelope(self._request("GET", self._url(employee_id)))

    def create(self, request: EmployeeCreate) -> Optional[Envelope]:
        """Create an employee and return the envelope wrapping it.

        The request body is ``{name, salary, age, title, email}``.
        """
        payload: Dict[str, Any] = request.model_dump()
        return self._envelope(self._request("POST", self._url(), json_body=payload))

    def delete_by_id(self, employee_id: str) -> None:
        """Delete an employee.

        Succeeds whenever the call completes without a transport or HTTP
        error; the response body is not inspected.
        """
        self._request("DELETE", self._url(employee_id))
