"""Replication controllers as shown in their table."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.utils import sanitize_obj, to_age


@dataclass
class KubeReplicationController:
    """A replication controller row."""

    name: str
    namespace: str
    desired: int
    current: int
    ready: int
    containers: str
    images: str
    selector: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(
        cls, obj: dict[str, Any], now: datetime | None = None
    ) -> KubeReplicationController:
        """Build a row from a ReplicationController API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}

        status = obj.get("status")
        if status is not None:
            current = status.get("replicas", 0)
            ready = status.get("readyReplicas") or 0
        else:
            current, ready = 0, 0

        spec = obj.get("spec")
        if spec is not None:
            desired = spec.get("replicas") or 0
            selector_map = spec.get("selector") or {}
            selector = ",".join(f"{key}={selector_map[key]}" for key in sorted(selector_map))
            pod_spec = (spec.get("template") or {}).get("spec")
            if pod_spec is not None:
                pod_containers = pod_spec.get("containers") or []
                containers = ",".join(c.get("name") or "" for c in pod_containers)
                images = ",".join(
                    c["image"] for c in pod_containers if c.get("image") is not None
                )
            else:
                containers, images = "", ""
        else:
            desired, selector, containers, images = 0, "", "", ""

        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            desired=desired,
            current=current,
            ready=ready,
            containers=containers,
            images=images,
            selector=selector,
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )