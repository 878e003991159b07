"""Pydantic models for Snipe-IT payloads and list options."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .common import Timestamp

RecordT = TypeVar("RecordT", bound=BaseModel)


class SnipeITModel(BaseModel):
    """Read-only projection of a Snipe-IT JSON object."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, protected_namespaces=()
    )


class NamedRef(SnipeITModel):
    """Embedded ``{id, name}`` reference to another object."""

    id: int | None = None
    name: str | None = None


class StatusLabel(SnipeITModel):
    """Status label attached to an asset."""

    id: int | None = None
    name: str | None = None
    status_meta: str | None = None


class AssignedTo(SnipeITModel):
    """User, location or asset an asset is checked out to."""

    id: int | None = None
    username: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    employee_number: str | None = None
    type: str | None = None


class Actions(SnipeITModel):
    """``available_actions`` flags for locations and categories."""

    update: bool = False
    delete: bool = False


class HardwareActions(Actions):
    """``available_actions`` flags for assets."""

    checkout: bool = False
    checkin: bool = False
    clone: bool = False
    restore: bool = False


class Category(SnipeITModel):
    """Snipe-IT category."""

    id: int | None = None
    name: str | None = None
    image: str | None = None
    category_type: str | None = None
    eula: bool = False
    checkin_email: bool = False
    require_acceptance: bool = False
    assets_count: int | None = None
    accessories_count: int | None = None
    consumables_count: int | None = None
    components_count: int | None = None
    licenses_count: int | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    actions: Actions = Field(default_factory=Actions, alias="available_actions")


class Location(SnipeITModel):
    """Snipe-IT location, possibly nested under a parent."""

    id: int | None = None
    name: str | None = None
    image: str | None = None
    address: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip: str | None = None
    assets_assigned: int | None = Field(default=None, alias="assigned_assets_count")
    assets: int | None = Field(default=None, alias="assets_count")
    users: int | None = Field(default=None, alias="users_count")
    currency: str | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    parent: NamedRef | None = None
    manager: str | None = None
    children: list[Location] = Field(default_factory=list)
    actions: Actions = Field(default_factory=Actions, alias="available_actions")


class Hardware(SnipeITModel):
    """Snipe-IT hardware asset.

    ``location`` and ``rtd_location`` embed a location object; only the
    members the API sends (usually ``id`` and ``name``) are populated.
    """

    id: int | None = None
    name: str | None = None
    asset_tag: str | None = None
    serial: str | None = None
    model: NamedRef | None = None
    model_number: str | None = None
    status_label: StatusLabel | None = None
    category: Category | None = None
    manufacturer: NamedRef | None = None
    supplier: NamedRef | None = None
    notes: str | None = None
    order_number: str | None = None
    company: str | None = None
    location: Location | None = None
    rtd_location: Location | None = None
    image: str | None = None
    assigned_to: AssignedTo | None = None
    warranty_months: Any = None
    warranty_expires: Any = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    deleted_at: Timestamp = None
    purchase_date: Timestamp = None
    last_checkout: Timestamp = None
    expected_checkin: Timestamp = None
    purchase_cost: str | None = None
    user_can_checkout: bool = False
    custom_fields: list[Any] | dict[str, Any] | None = None
    available_actions: HardwareActions = Field(default_factory=HardwareActions)


class ListEnvelope(BaseModel, Generic[RecordT]):
    """``{"total": n, "rows": [...]}`` wrapper returned by list endpoints."""

    model_config = ConfigDict(extra="ignore")

    total: int = 0
    rows: list[RecordT] = Field(default_factory=list)


class QueryOptions(BaseModel):
    """Base class for list options rendered as URL query parameters.

    The query key of a field is its alias (its name when no alias is set).
    Fields left at ``None``, ``0``, ``""`` or ``False`` are not sent.
    """

    model_config = ConfigDict(
        extra="forbid", populate_by_name=True, protected_namespaces=()
    )

    limit: int | None = None
    offset: int | None = None
    search: str | None = None
    sort: str | None = None
    order: str | None = None


class HardwareOptions(QueryOptions):
    """Optional query parameters for listing assets."""

    order_number: str | None = None
    model_id: int | None = None
    category_id: int | None = None
    manufacturer_id: int | None = None
    company_id: int | None = None
    location_id: int | None = None
    status: str | None = None
    status_id: str | None = None


class LocationOptions(QueryOptions):
    """Optional query parameters for listing locations."""


class CategoryOptions(QueryOptions):
    """Optional query parameters for listing categories."""


__all__ = [
    "Actions",
    "AssignedTo",
    "Category",
    "CategoryOptions",
    "Hardware",
    "HardwareActions",
    "HardwareOptions",
    "ListEnvelope",
    "Location",
    "LocationOptions",
    "NamedRef",
    "QueryOptions",
    "SnipeITModel",
    "StatusLabel",
]
