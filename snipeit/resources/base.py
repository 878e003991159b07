"""Shared plumbing for resource accessor groups."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from ..codecs.query import add_options
from ..codecs.snipeit_models import ListEnvelope, QueryOptions, SnipeITModel
from ..request import APIResponse, DecodeTarget, JSONTarget, PreparedRequest

RecordT = TypeVar("RecordT", bound=SnipeITModel)


class HttpClientProto(Protocol):
    """Request building and dispatch as provided by ``SnipeITClient``."""

    def new_request(
        self, method: str, path: str, body: Any | None = None
    ) -> PreparedRequest:
        """Build a request for ``path``."""

    async def do(
        self, request: PreparedRequest, target: DecodeTarget | None = None
    ) -> tuple[Any, APIResponse]:
        """Send ``request`` and decode the response into ``target``."""


class Resource:
    """A group of read operations sharing the client's request machinery."""

    def __init__(self, client: HttpClientProto) -> None:
        self._client = client

    @property
    def client(self) -> HttpClientProto:
        """Return the client this group issues requests through."""

        return self._client

    async def _list(
        self,
        path: str,
        options: QueryOptions | None,
        model: type[RecordT],
    ) -> tuple[list[RecordT], APIResponse]:
        """GET a list endpoint and return the envelope rows."""

        url = add_options(path, options)
        request = self._client.new_request("GET", url)
        envelope, response = await self._client.do(
            request, JSONTarget(ListEnvelope[model])
        )
        return envelope.rows, response

    async def _get(
        self, path: str, model: type[RecordT]
    ) -> tuple[RecordT, APIResponse]:
        """GET a single object."""

        request = self._client.new_request("GET", path)
        return await self._client.do(request, JSONTarget(model))
