"""Location endpoints."""

from __future__ import annotations

from ..codecs.snipeit_models import Location, LocationOptions
from ..const import LOCATION_PATH_FMT, LOCATIONS_PATH
from ..request import APIResponse
from .base import Resource


class LocationResource(Resource):
    """Read access to ``/locations``."""

    async def list(
        self, options: LocationOptions | None = None
    ) -> tuple[list[Location], APIResponse]:
        """List locations.

        Snipe-IT API doc: https://snipe-it.readme.io/reference#locations
        """

        return await self._list(LOCATIONS_PATH, options, Location)

    async def get(self, location_id: int) -> tuple[Location, APIResponse]:
        """Return a location by ID.

        Snipe-IT API doc: https://snipe-it.readme.io/reference#locations-1
        """

        return await self._get(LOCATION_PATH_FMT.format(id=int(location_id)), Location)
