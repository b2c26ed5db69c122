"""Rename event models shared by event sources, the normalizer and handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .errors import RenameEventContractError
from .kinds import ObjectKind
from .utils import first_value


@dataclass(frozen=True)
class RawRenameEvent:
    """A rename statement as handed over by the event source.

    ``new_name`` is required by contract; ``None`` marks a producer defect and is
    rejected by the normalizer rather than turned into empty text.
    """

    kind: Union[ObjectKind, str]
    new_name: Optional[str]
    schema_name: Optional[str] = None
    relation_name: Optional[str] = None
    qualified_object_name: Optional[Tuple[str, ...]] = None
    sub_name: Optional[str] = None

    def __post_init__(self) -> None:
        parts = self.qualified_object_name
        if parts is None or isinstance(parts, tuple):
            return
        if isinstance(parts, str):
            parts = parts.split(".") if parts else ()
        try:
            normalized = tuple(str(part) for part in parts)
        except TypeError as exc:
            raise RenameEventContractError(
                "qualified object name must be a sequence of name parts",
                context={"parts_type": type(parts).__name__},
            ) from exc
        object.__setattr__(self, "qualified_object_name", normalized)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "RawRenameEvent":
        if not isinstance(payload, Mapping):
            raise RenameEventContractError(
                "rename event payload must be a mapping",
                context={"payload_type": type(payload).__name__},
            )
        raw_kind = first_value(payload, "kind", "renameType", "rename_type", "object_kind")
        parsed_kind = ObjectKind.parse(raw_kind)
        return cls(
            kind=parsed_kind if parsed_kind is not None else raw_kind,
            new_name=_optional_text(first_value(payload, "new_name", "newName", "newname")),
            schema_name=_optional_text(first_value(payload, "schema_name", "schemaName", "schemaname")),
            relation_name=_optional_text(first_value(payload, "relation_name", "relationName", "relname")),
            qualified_object_name=first_value(payload, "qualified_object_name", "qualifiedObjectName", "object"),
            sub_name=_optional_text(first_value(payload, "sub_name", "subName", "subname")),
        )


@dataclass(frozen=True)
class NormalizedRenameRecord:
    object_type: str
    schema_name: Optional[str]
    object_name: Optional[str]
    sub_name: Optional[str]
    new_name: str

    def as_arguments(self) -> Tuple[str, Optional[str], Optional[str], Optional[str], str]:
        """Positional handler arguments in their fixed order."""
        return (self.object_type, self.schema_name, self.object_name, self.sub_name, self.new_name)

    def to_payload(self) -> Dict[str, Optional[str]]:
        return {
            "object_type": self.object_type,
            "schema_name": self.schema_name,
            "object_name": self.object_name,
            "sub_name": self.sub_name,
            "new_name": self.new_name,
        }


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def name_list_to_string(parts: Sequence[str]) -> str:
    return ".".join(str(part) for part in parts)


__all__ = ["RawRenameEvent", "NormalizedRenameRecord", "name_list_to_string"]
