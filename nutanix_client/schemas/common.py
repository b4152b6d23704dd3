"""Pydantic schemas shared by every resource kind."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from typing import ClassVar
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

EntityT = TypeVar("EntityT")


class NutanixModel(BaseModel):
    """Base model: unknown keys ignored, keys matched to fields case-insensitively."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known: dict[str, str] = {}
        for name, info in cls.model_fields.items():
            key = info.alias or name
            known[key.lower()] = key

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            target = known.get(key.lower(), key) if isinstance(key, str) else key
            if target in normalized and target != key:
                continue
            normalized[target] = value
        return normalized


class Reference(NutanixModel):
    """Reference to another entity by kind and UUID."""

    kind: str | None = None
    uuid: str | None = None
    name: str | None = None


class Metadata(NutanixModel):
    """Entity metadata block; ``uuid`` is the identity the client routes on."""

    kind: str | None = None
    uuid: str | None = None
    name: str | None = None
    spec_version: int | None = None
    spec_hash: str | None = None
    categories: dict[str, str] | None = None
    project_reference: Reference | None = None
    owner_reference: Reference | None = None
    creation_time: str | None = None
    last_update_time: str | None = None


class ListMetadata(NutanixModel):
    """Paging metadata returned with every list response."""

    kind: str | None = None
    total_matches: int = 0
    offset: int = 0
    length: int | None = None
    filter: str | None = None
    sort_order: str | None = None
    sort_attribute: str | None = None


class DSMetadata(NutanixModel):
    """Query options posted to ``/<plural>/list`` endpoints."""

    kind: str | None = None
    filter: str | None = None
    length: int | None = None
    offset: int | None = None
    sort_order: str | None = None
    sort_attribute: str | None = None


class MessageResource(NutanixModel):
    message: str | None = None
    reason: str | None = None
    details: dict[str, Any] | None = None


class ErrorResponse(NutanixModel):
    """Error carrier found either top-level or under a ``status`` key."""

    api_version: str | None = None
    code: int | None = None
    kind: str | None = None
    message_list: list[MessageResource] | None = None
    state: str | None = None


class ExecutionContext(NutanixModel):
    task_uuid: str | None = None


class EntityStatus(NutanixModel):
    """Server-managed status sub-object; only the fields the client inspects."""

    state: str | None = None
    name: str | None = None
    message_list: list[MessageResource] | None = None
    execution_context: ExecutionContext | None = None


class PageableList(NutanixModel, Generic[EntityT]):
    """List response that the paginator can extend with further pages."""

    paginated: ClassVar[bool] = True

    api_version: str | None = None
    metadata: ListMetadata = Field(default_factory=ListMetadata)
    entities: list[EntityT] = Field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return self.metadata.total_matches

    @property
    def offset(self) -> int:
        return self.metadata.offset

    def append_entities(self, entities: Iterable[EntityT]) -> None:
        self.entities.extend(entities)
