from __future__ import annotations

from typing import Optional

from rename_core import (
    QUALIFIED_NAME_TOKENS,
    NormalizedRenameRecord,
    RawRenameEvent,
    RenameEventContractError,
    name_list_to_string,
)


def normalize_rename(event: RawRenameEvent, object_type: str) -> NormalizedRenameRecord:
    """Resolve which naming fields apply to ``object_type`` and build the handler record.

    Relation-scoped events keep schema, relation and sub-object names. Functions,
    types, sequences and event triggers without a relation report their dotted
    name list as the object name. Everything else carries only the new name.
    """
    if not object_type:
        raise RenameEventContractError(
            "rename event has no object type",
            context={"kind": str(event.kind)},
        )
    if event.new_name is None:
        raise RenameEventContractError(
            "rename event is missing the new name",
            context={"object_type": object_type},
        )

    schema_name: Optional[str] = None
    object_name: Optional[str] = None
    sub_name: Optional[str] = None
    if event.relation_name is not None:
        schema_name = event.schema_name
        object_name = event.relation_name
        sub_name = event.sub_name
    elif object_type in QUALIFIED_NAME_TOKENS and event.qualified_object_name:
        object_name = name_list_to_string(event.qualified_object_name)

    return NormalizedRenameRecord(
        object_type=object_type,
        schema_name=schema_name,
        object_name=object_name,
        sub_name=sub_name,
        new_name=event.new_name,
    )


__all__ = ["normalize_rename"]
