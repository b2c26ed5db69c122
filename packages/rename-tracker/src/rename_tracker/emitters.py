from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .handlers import DEFAULT_REGISTRY

LOGGER = logging.getLogger(__name__)

RENAME_DOMAIN = "catalog.object_rename"

UPSERT_MUTATION = """
mutation UpsertMetadataRecord($input: MetadataRecordInput!) {
  upsertMetadataRecord(input: $input) {
    id
  }
}
""".strip()


class GraphQLRenameEmitter:
    """Rename handler that records each rename in the metadata GraphQL API."""

    def __init__(
        self,
        endpoint: str,
        *,
        api_key: Optional[str] = None,
        default_project: str = "global",
        timeout: float = 10.0,
        headers: Optional[Mapping[str, str]] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._endpoint = endpoint
        self._default_project = default_project or "global"
        self._timeout = timeout
        self._session = session or requests.Session()
        self._clock = clock
        merged_headers: MutableMapping[str, str] = {"Content-Type": "application/json"}
        if api_key:
            merged_headers["Authorization"] = f"Bearer {api_key}"
        if headers:
            merged_headers.update(headers)
        self._headers = merged_headers

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs: Any) -> "GraphQLRenameEmitter":
        env = os.environ if environ is None else environ
        endpoint = env.get("METADATA_GRAPHQL_ENDPOINT")
        if not endpoint:
            raise RuntimeError("METADATA_GRAPHQL_ENDPOINT is not set")
        return cls(
            endpoint=endpoint,
            api_key=env.get("METADATA_GRAPHQL_API_KEY") or None,
            default_project=env.get("METADATA_DEFAULT_PROJECT") or "global",
            **kwargs,
        )

    def __call__(
        self,
        object_type: str,
        schema_name: Optional[str],
        object_name: Optional[str],
        sub_name: Optional[str],
        new_name: str,
    ) -> None:
        payload = self.build_payload(object_type, schema_name, object_name, sub_name, new_name)
        self._execute_mutation(payload)

    def build_payload(
        self,
        object_type: str,
        schema_name: Optional[str],
        object_name: Optional[str],
        sub_name: Optional[str],
        new_name: str,
    ) -> Mapping[str, object]:
        labels = {RENAME_DOMAIN, object_type}
        if schema_name:
            labels.add(schema_name)
        return {
            "projectId": self._default_project,
            "domain": RENAME_DOMAIN,
            "labels": sorted(label for label in labels if label),
            "payload": {
                "object_type": object_type,
                "schema_name": schema_name,
                "object_name": object_name,
                "sub_name": sub_name,
                "new_name": new_name,
                "renamed_at": self._clock().isoformat(),
            },
        }

    # ------------------------------------------------------------------ helpers --
    def _execute_mutation(self, input_payload: Mapping[str, object]) -> None:
        response = self._session.post(
            self._endpoint,
            json={"query": UPSERT_MUTATION, "variables": {"input": input_payload}},
            headers=self._headers,
            timeout=self._timeout,
        )
        response.raise_for_status()
        errors = response.json().get("errors")
        if errors:
            LOGGER.warning(
                "rename_emit_failed",
                extra={"endpoint": self._endpoint, "errors": errors},
            )


@DEFAULT_REGISTRY.register("graphql")
def emit_rename_to_graphql(
    object_type: str,
    schema_name: Optional[str],
    object_name: Optional[str],
    sub_name: Optional[str],
    new_name: str,
) -> None:
    """Registered ``graphql`` handler; reads the endpoint from the environment per call."""
    with requests.Session() as session:
        emitter = GraphQLRenameEmitter.from_env(session=session)
        emitter(object_type, schema_name, object_name, sub_name, new_name)


__all__ = ["GraphQLRenameEmitter", "RENAME_DOMAIN", "UPSERT_MUTATION", "emit_rename_to_graphql"]
