"""Object-kind taxonomy for rename events."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from .utils import describe_value, log_event

LOGGER = logging.getLogger(__name__)

UNKNOWN_KIND = "unknown"


class ObjectKind(Enum):
    AGGREGATE = "OBJECT_AGGREGATE"
    ATTRIBUTE = "OBJECT_ATTRIBUTE"
    CAST = "OBJECT_CAST"
    COLUMN = "OBJECT_COLUMN"
    CONSTRAINT = "OBJECT_CONSTRAINT"
    COLLATION = "OBJECT_COLLATION"
    CONVERSION = "OBJECT_CONVERSION"
    DATABASE = "OBJECT_DATABASE"
    DOMAIN = "OBJECT_DOMAIN"
    EVENT_TRIGGER = "OBJECT_EVENT_TRIGGER"
    EXTENSION = "OBJECT_EXTENSION"
    FDW = "OBJECT_FDW"
    FOREIGN_SERVER = "OBJECT_FOREIGN_SERVER"
    FOREIGN_TABLE = "OBJECT_FOREIGN_TABLE"
    FUNCTION = "OBJECT_FUNCTION"
    INDEX = "OBJECT_INDEX"
    LANGUAGE = "OBJECT_LANGUAGE"
    LARGEOBJECT = "OBJECT_LARGEOBJECT"
    MATVIEW = "OBJECT_MATVIEW"
    OPCLASS = "OBJECT_OPCLASS"
    OPERATOR = "OBJECT_OPERATOR"
    OPFAMILY = "OBJECT_OPFAMILY"
    ROLE = "OBJECT_ROLE"
    RULE = "OBJECT_RULE"
    SCHEMA = "OBJECT_SCHEMA"
    SEQUENCE = "OBJECT_SEQUENCE"
    TABLE = "OBJECT_TABLE"
    TABLESPACE = "OBJECT_TABLESPACE"
    TRIGGER = "OBJECT_TRIGGER"
    TSCONFIGURATION = "OBJECT_TSCONFIGURATION"
    TSDICTIONARY = "OBJECT_TSDICTIONARY"
    TSPARSER = "OBJECT_TSPARSER"
    TSTEMPLATE = "OBJECT_TSTEMPLATE"
    TYPE = "OBJECT_TYPE"
    VIEW = "OBJECT_VIEW"

    @classmethod
    def parse(cls, value: Any) -> Optional["ObjectKind"]:
        """Coerce a member, host tag (``OBJECT_TABLE``) or member name (``table``) into a kind.

        Returns ``None`` for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        candidate = value.strip().upper()
        if not candidate:
            return None
        try:
            return cls(candidate)
        except ValueError:
            pass
        return cls.__members__.get(candidate)


OBJECT_KIND_TOKENS: Dict[ObjectKind, str] = {
    ObjectKind.AGGREGATE: "aggregate",
    ObjectKind.ATTRIBUTE: "attribute",
    ObjectKind.CAST: "cast",
    ObjectKind.COLUMN: "column",
    ObjectKind.CONSTRAINT: "constraint",
    ObjectKind.COLLATION: "collation",
    ObjectKind.CONVERSION: "conversion",
    ObjectKind.DATABASE: "database",
    ObjectKind.DOMAIN: "domain",
    ObjectKind.EVENT_TRIGGER: "event_trigger",
    ObjectKind.EXTENSION: "extension",
    ObjectKind.FDW: "fdw",
    ObjectKind.FOREIGN_SERVER: "foreign_server",
    ObjectKind.FOREIGN_TABLE: "foreign_table",
    ObjectKind.FUNCTION: "function",
    ObjectKind.INDEX: "index",
    ObjectKind.LANGUAGE: "language",
    ObjectKind.LARGEOBJECT: "largeobject",
    ObjectKind.MATVIEW: "matview",
    ObjectKind.OPCLASS: "opclass",
    ObjectKind.OPERATOR: "operator",
    ObjectKind.OPFAMILY: "opfamily",
    ObjectKind.ROLE: "role",
    ObjectKind.RULE: "rule",
    ObjectKind.SCHEMA: "schema",
    ObjectKind.SEQUENCE: "sequence",
    ObjectKind.TABLE: "table",
    ObjectKind.TABLESPACE: "tablespace",
    ObjectKind.TRIGGER: "trigger",
    ObjectKind.TSCONFIGURATION: "tsconfiguration",
    ObjectKind.TSDICTIONARY: "tsdictionary",
    ObjectKind.TSPARSER: "tsparser",
    ObjectKind.TSTEMPLATE: "tstemplate",
    ObjectKind.TYPE: "type",
    ObjectKind.VIEW: "view",
}

# Kinds whose rename statements carry a dotted name list instead of a relation.
QUALIFIED_NAME_KINDS: FrozenSet[ObjectKind] = frozenset(
    {ObjectKind.TYPE, ObjectKind.FUNCTION, ObjectKind.EVENT_TRIGGER, ObjectKind.SEQUENCE}
)
QUALIFIED_NAME_TOKENS: FrozenSet[str] = frozenset(OBJECT_KIND_TOKENS[kind] for kind in QUALIFIED_NAME_KINDS)


def classify(kind: Any, logger: Any = None) -> str:
    """Map a raw object-kind tag to its canonical token, falling back to ``unknown``."""
    member = ObjectKind.parse(kind)
    token = OBJECT_KIND_TOKENS.get(member) if member is not None else None
    if token is None:
        log_event(logger or LOGGER, "WARN", "rename_kind_unrecognized", kind=describe_value(kind))
        return UNKNOWN_KIND
    return token


def describe_kinds() -> List[Dict[str, Any]]:
    return [
        {
            "kind": member.value,
            "token": token,
            "qualified_name": member in QUALIFIED_NAME_KINDS,
        }
        for member, token in OBJECT_KIND_TOKENS.items()
    ]


__all__ = [
    "ObjectKind",
    "OBJECT_KIND_TOKENS",
    "QUALIFIED_NAME_KINDS",
    "QUALIFIED_NAME_TOKENS",
    "UNKNOWN_KIND",
    "classify",
    "describe_kinds",
]
