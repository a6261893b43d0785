# workshop_sdk/api_client.py
"""
The single HTTP call wrapper every domain operation goes through.

ClientConfig is the only mutable state shared between calls. It is meant to
be written once during startup (see client.create_client) and only read
afterwards; nothing locks it, so writers must not race with in-flight calls.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote, urlencode

import httpx

from workshop_sdk.errors import HttpStatusError, ParseError, TransportError
from workshop_sdk.perf import async_perf_log
from workshop_sdk.settings import DEFAULT_API_BASE

logger = logging.getLogger(__name__)

DEBUG_USER_ID_HEADER = "X-Debug-User-ID"
DEBUG_USER_ROLES_HEADER = "X-Debug-User-Roles"

JSON_HEADERS = {"Content-Type": "application/json"}

# Characters encodeURIComponent leaves alone, on top of alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass
class ClientConfig:
    """
    Base URL plus an optional debug identity.

    The debug identity is not authentication: the server trusts the
    X-Debug-* headers only when it runs in debug mode, which lets a trusted
    caller act as any user/role combination while testing.
    """

    base_url: str = DEFAULT_API_BASE
    debug_user_id: str = ""
    debug_user_roles: list[str] = field(default_factory=list)

    def set_api_base(self, new_url: str) -> None:
        self.base_url = new_url

    def set_debug_auth(self, user_id: str, user_roles: list[str]) -> None:
        self.debug_user_id = user_id
        self.debug_user_roles = list(user_roles)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any]) -> str:
    """
    Serializes a mapping into a query string.

    Keys keep their mapping order and keys holding None are skipped. A list or
    tuple value becomes one key=value pair per element (tags=a&tags=b), never
    a single comma-joined value.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(v)) for v in value)
        else:
            pairs.append((key, _query_value(value)))
    return urlencode(pairs, safe=_URI_COMPONENT_SAFE, quote_via=quote)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _error_details(text: str) -> tuple[str | None, Any]:
    # The server answers errors with {"message": ..., "data": ...}
    try:
        payload = json.loads(text)
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    message = payload.get("message")
    return (message if isinstance(message, str) else None), payload.get("data")


class ApiClient:
    """Issues requests against the configured API base"""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config: ClientConfig = config or ClientConfig()
        # Injected transport is used for every call (tests mount a stub app here)
        self.transport = transport

    def _headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        result = dict(headers or {})
        if self.config.debug_user_id:
            result[DEBUG_USER_ID_HEADER] = self.config.debug_user_id
        if self.config.debug_user_roles:
            result[DEBUG_USER_ROLES_HEADER] = ",".join(self.config.debug_user_roles)
        return result

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Performs one API request.

        Args:
            endpoint: Path below the base URL, e.g. "/posts/5".
            method: HTTP method.
            headers: Extra request headers.
            body: JSON-serializable payload; sent only when not None.
            params: Query parameters, serialized with build_query.

        Returns:
            The decoded JSON value, or None when the response body is empty.

        Raises:
            TransportError: The request could not be sent or answered.
            HttpStatusError: Status outside 200-299.
            ParseError: Non-empty body that is not JSON.
        """
        url = f"{self.config.base_url}{endpoint}"
        if params is not None:
            url += "?" + build_query(params)

        content = json.dumps(body) if body is not None else None

        async with async_perf_log(f"API call: {method} {endpoint}", logger):
            async with httpx.AsyncClient(
                transport=self.transport, follow_redirects=True
            ) as client:
                try:
                    response = await client.request(
                        method, url, headers=self._headers(headers), content=content
                    )
                except httpx.RequestError as e:
                    raise TransportError(method, url, str(e)) from e

            text = response.text
            if not response.is_success:
                message, data = _error_details(text)
                raise HttpStatusError(response.status_code, message, data)

            if not text.strip():
                return None

            try:
                return json.loads(text, parse_constant=_reject_constant)
            except ValueError as e:
                raise ParseError(str(e)) from e
