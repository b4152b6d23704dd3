"""Pydantic schemas for category keys and values."""

from __future__ import annotations

from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList


class CategoryKey(NutanixModel):
    """Category key definition sent with ``PUT /categories/{name}``."""

    name: str
    description: str | None = None
    capabilities: dict[str, str] | None = None
    api_version: str | None = None


class CategoryKeyStatus(NutanixModel):
    name: str | None = None
    description: str | None = None
    system_defined: bool | None = None
    api_version: str | None = None


class CategoryKeyList(PageableList[CategoryKeyStatus]):
    pass


class CategoryValueStatus(NutanixModel):
    name: str | None = None
    value: str | None = None
    description: str | None = None
    system_defined: bool | None = None
    api_version: str | None = None


class CategoryValueList(PageableList[CategoryValueStatus]):
    pass
