"""Hardware (asset) endpoints."""

from __future__ import annotations

from urllib.parse import quote

from ..codecs.snipeit_models import Hardware, HardwareOptions
from ..const import HARDWARE_BYTAG_PATH_FMT, HARDWARE_PATH, HARDWARE_PATH_FMT
from ..errors import EncodingError
from ..request import APIResponse
from .base import Resource


class HardwareResource(Resource):
    """Read access to ``/hardware``."""

    async def list(
        self, options: HardwareOptions | None = None
    ) -> tuple[list[Hardware], APIResponse]:
        """List assets matching ``options``.

        https://snipe-it.readme.io/reference#hardware-list
        """

        return await self._list(HARDWARE_PATH, options, Hardware)

    async def get(self, asset_id: int) -> tuple[Hardware, APIResponse]:
        """Return the asset with ``asset_id``."""

        return await self._get(HARDWARE_PATH_FMT.format(id=int(asset_id)), Hardware)

    async def get_by_tag(self, asset_tag: str) -> tuple[Hardware, APIResponse]:
        """Return the asset carrying ``asset_tag``."""

        if not asset_tag:
            raise EncodingError("An asset tag must be provided")
        path = HARDWARE_BYTAG_PATH_FMT.format(tag=quote(asset_tag, safe=""))
        return await self._get(path, Hardware)
