"""Category endpoints."""

from __future__ import annotations

from ..codecs.snipeit_models import Category, CategoryOptions
from ..const import CATEGORIES_PATH, CATEGORY_PATH_FMT
from ..request import APIResponse
from .base import Resource


class CategoryResource(Resource):
    """Read access to ``/categories``."""

    async def list(
        self, options: CategoryOptions | None = None
    ) -> tuple[list[Category], APIResponse]:
        """List categories.

        Snipe-IT API doc: https://snipe-it.readme.io/reference#categories-1
        """

        return await self._list(CATEGORIES_PATH, options, Category)

    async def get(self, category_id: int) -> tuple[Category, APIResponse]:
        """Return a category by ID.

        Snipe-IT API doc: https://snipe-it.readme.io/reference#category
        """

        return await self._get(
            CATEGORY_PATH_FMT.format(id=int(category_id)), Category
        )
