"""Message template registry: message class -> frame template, and back by id."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ant_packet.constants import MAX_DATA_LENGTH
from ant_packet.errors import UnknownMessageClassError

logger = logging.getLogger(__name__)


class FrameTemplate(BaseModel):
    """Static description of one message class."""

    model_config = ConfigDict(frozen=True)

    message_class: str = Field(min_length=1)
    message_id: int = Field(ge=0, le=0xFF)
    name: str
    data_length: int = Field(ge=0, le=MAX_DATA_LENGTH)
    field_descriptions: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_descriptions(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("field_descriptions") is None:
            length = data.get("data_length")
            if isinstance(length, int) and length > 0:
                data = {**data, "field_descriptions": [f"Byte {i}" for i in range(length)]}
        return data

    @model_validator(mode="after")
    def _check_descriptions(self) -> FrameTemplate:
        if len(self.field_descriptions) != self.data_length:
            raise ValueError(
                f"{self.message_class}: {len(self.field_descriptions)} field descriptions "
                f"for {self.data_length} data bytes"
            )
        return self


class _RegistryDocument(BaseModel):
    templates: list[FrameTemplate]


class TemplateRegistry:
    """Read-only lookup of frame templates by message class and by message id.

    Built once, never mutated. Safe to share between threads.
    """

    def __init__(self, templates: Iterable[FrameTemplate]) -> None:
        by_class: dict[str, FrameTemplate] = {}
        by_id: dict[int, FrameTemplate] = {}
        for tpl in templates:
            if tpl.message_class in by_class:
                raise ValueError(f"Duplicate message class {tpl.message_class!r}")
            if tpl.message_id in by_id:
                other = by_id[tpl.message_id]
                raise ValueError(
                    f"Duplicate message id 0x{tpl.message_id:02X} "
                    f"({other.message_class!r} and {tpl.message_class!r})"
                )
            by_class[tpl.message_class] = tpl
            by_id[tpl.message_id] = tpl
        self._by_class: Mapping[str, FrameTemplate] = MappingProxyType(by_class)
        self._by_id: Mapping[int, FrameTemplate] = MappingProxyType(by_id)
        logger.debug("Template registry built with %d message classes", len(by_class))

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> TemplateRegistry:
        return cls(FrameTemplate.model_validate(e) for e in entries)

    @classmethod
    def from_json(cls, data: str | bytes) -> TemplateRegistry:
        """Build a registry from a JSON document ``{"templates": [...]}``."""
        doc = _RegistryDocument.model_validate_json(data)
        return cls(doc.templates)

    def by_class(self, message_class: str) -> FrameTemplate:
        try:
            return self._by_class[message_class]
        except KeyError:
            raise UnknownMessageClassError(f"Unknown message class {message_class!r}") from None

    def by_id(self, message_id: int) -> FrameTemplate:
        try:
            return self._by_id[message_id]
        except KeyError:
            raise UnknownMessageClassError(f"Unknown message id 0x{message_id:02X}") from None

    def get_by_id(self, message_id: int) -> FrameTemplate | None:
        return self._by_id.get(message_id)

    def __contains__(self, message_class: object) -> bool:
        return message_class in self._by_class

    def __iter__(self) -> Iterator[FrameTemplate]:
        return iter(self._by_class.values())

    def __len__(self) -> int:
        return len(self._by_class)

    def __repr__(self) -> str:
        return f"TemplateRegistry({len(self)} templates)"


def load_registry(path: str | Path) -> TemplateRegistry:
    """Load a registry from a JSON file."""
    return TemplateRegistry.from_json(Path(path).read_bytes())
