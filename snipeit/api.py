from __future__ import annotations

import json
import logging
import re
from types import TracebackType
from typing import Any
from urllib.parse import urljoin, urlsplit, urlunsplit

import aiohttp
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .const import AUTH_SCHEME, CONTENT_TYPE_JSON, DEFAULT_TIMEOUT
from .errors import (
    ConfigurationError,
    DecodeError,
    RequestBuildError,
    TransportError,
)
from .request import (
    APIResponse,
    DecodeTarget,
    JSONTarget,
    PreparedRequest,
    RawTarget,
)
from .resources import CategoryResource, HardwareResource, LocationResource
from .sanitize import redact_text, redact_token_fragment

_LOGGER = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_SCHEMES = frozenset({"http", "https"})


def _check_absolute_url(url: str) -> bool:
    """Return True when ``url`` is an absolute http(s) URL with a host."""

    if _CONTROL_RE.search(url):
        return False
    parts = urlsplit(url)
    # Accessing ``port`` validates it and raises ValueError when out of range.
    parts.port  # noqa: B018
    return parts.scheme in _SCHEMES and bool(parts.hostname)


class SnipeITClient:
    """Thin async client for the Snipe-IT REST API.

    ``base_url`` is the API endpoint, e.g. ``https://assets.example.com/api/v1``.
    The configuration is fixed at construction; one client can serve any
    number of concurrent callers.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: aiohttp.ClientTimeout = DEFAULT_TIMEOUT,
    ) -> None:
        """Validate the configuration and wire the resource groups."""

        if not base_url:
            raise ConfigurationError("A base URL must be provided")
        if not token:
            raise ConfigurationError("A token must be provided")
        try:
            valid = _check_absolute_url(base_url)
        except ValueError as err:
            raise ConfigurationError(f"Invalid base URL: {base_url!r}") from err
        if not valid:
            raise ConfigurationError(f"Invalid base URL: {base_url!r}")

        parts = urlsplit(base_url)
        path = parts.path if parts.path.endswith("/") else f"{parts.path}/"
        self._base_url = urlunsplit((parts.scheme, parts.netloc, path, "", ""))
        self._token = token
        self._authorization = f"{AUTH_SCHEME} {token}"
        self._timeout = timeout
        self._session = session
        self._owns_session = session is None

        self.hardware = HardwareResource(self)
        self.locations = LocationResource(self)
        self.categories = CategoryResource(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"token={redact_token_fragment(self._token)!r})"
        )

    @property
    def base_url(self) -> str:
        """Return the API endpoint, always ending in ``/``."""

        return self._base_url

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return self._timeout

    async def __aenter__(self) -> SnipeITClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if the client created it."""

        if self._owns_session and self._session is not None:
            session, self._session = self._session, None
            await session.close()

    def _ensure_session(self) -> aiohttp.ClientSession:
        """Return the HTTP session, creating an owned one on first use."""

        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    def new_request(
        self, method: str, path: str, body: Any | None = None
    ) -> PreparedRequest:
        """Build a request for ``path`` relative to the API endpoint.

        A leading ``/`` on ``path`` is dropped so it never resolves against
        the host root. ``body`` is serialised as JSON without escaping HTML
        characters.
        """

        if not isinstance(path, str):
            raise RequestBuildError(f"Invalid request path: {path!r}")
        relative = path.removeprefix("/")
        try:
            url = urljoin(self._base_url, relative)
            valid = _check_absolute_url(url)
        except ValueError as err:
            raise RequestBuildError(f"Invalid request URL for path {path!r}") from err
        if not valid:
            raise RequestBuildError(f"Invalid request URL for path {path!r}")

        data: bytes | None = None
        if body is not None:
            try:
                if isinstance(body, BaseModel):
                    body = body.model_dump(
                        mode="json", by_alias=True, exclude_none=True
                    )
                data = json.dumps(body, ensure_ascii=False, allow_nan=False).encode(
                    "utf-8"
                )
            except (PydanticSerializationError, TypeError, ValueError) as err:
                raise RequestBuildError(
                    f"Could not serialise request body: {err}"
                ) from err

        headers = {
            "Accept": CONTENT_TYPE_JSON,
            "Content-Type": CONTENT_TYPE_JSON,
            "Authorization": self._authorization,
        }
        return PreparedRequest(method=method, url=url, headers=headers, body=data)

    async def do(
        self, request: PreparedRequest, target: DecodeTarget | None = None
    ) -> tuple[Any, APIResponse]:
        """Send ``request`` and decode the response into ``target``.

        Returns ``(value, response)``. Responses outside 2xx are returned
        without touching the body, with ``value`` left at the target's zero
        value; callers check ``response.status``. The body is always read in
        full and the connection released before returning. A body that fails
        to arrive is only an error when it was about to be decoded.
        """

        session = self._ensure_session()
        url = redact_text(request.url)
        _LOGGER.debug("HTTP %s %s", request.method, url)

        try:
            async with session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                timeout=self._timeout,
            ) as resp:
                try:
                    body = await resp.read()
                except (aiohttp.ClientError, TimeoutError) as err:
                    if target is None or not 200 <= resp.status < 300:
                        # Nothing will be decoded; hand the status back as is.
                        _LOGGER.debug(
                            "HTTP %s -> %s body unread: %s",
                            url,
                            resp.status,
                            redact_text(str(err)),
                        )
                        body = b""
                    elif isinstance(err, TimeoutError):
                        raise TransportError(
                            f"Request {request.method} {url} timed out reading body"
                        ) from err
                    else:
                        raise DecodeError(
                            f"Failed to read response body: {err}",
                            response=_snapshot(resp, b""),
                        ) from err
                response = _snapshot(resp, body)
        except (aiohttp.ClientError, TimeoutError) as err:
            raise TransportError(
                f"Request {request.method} {url} failed: {redact_text(str(err))}"
            ) from err

        _LOGGER.debug("HTTP %s -> %s", url, response.status)

        if target is None:
            return None, response
        if not response.ok:
            return target.zero(), response
        if isinstance(target, RawTarget):
            target.sink.write(body)
            return target.sink, response
        return _decode_json(body, target, response), response


def _snapshot(resp: aiohttp.ClientResponse, body: bytes) -> APIResponse:
    """Capture what callers may inspect once the connection is released."""

    return APIResponse(
        status=resp.status,
        reason=resp.reason,
        url=str(resp.url),
        headers=resp.headers,
        body=body,
    )


def _decode_json(body: bytes, target: JSONTarget[Any], resp: APIResponse) -> Any:
    """Decode ``body`` into the target model; an empty body yields its zero."""

    if not body.strip():
        return target.zero()
    try:
        return target.model.model_validate_json(body)
    except DecodeError as err:
        err.response = resp
        err.body = body
        raise
    except ValidationError as err:
        raise DecodeError(
            f"Response does not match {target.model.__name__}: "
            f"{err.error_count()} error(s)",
            response=resp,
            body=body,
        ) from err


__all__ = ["SnipeITClient"]
