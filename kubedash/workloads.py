"""Replica sets and stateful sets as shown in their tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.utils import sanitize_obj, to_age


@dataclass
class KubeReplicaSet:
    """A replica set row."""

    name: str
    namespace: str
    desired: int
    current: int
    ready: int
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeReplicaSet:
        """Build a row from a ReplicaSet API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}
        status = obj.get("status")
        if status is not None:
            current = status.get("replicas", 0)
            ready = status.get("readyReplicas") or 0
        else:
            current, ready = 0, 0
        spec = obj.get("spec")
        desired = (spec.get("replicas") or 0) if spec is not None else 0
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            desired=desired,
            current=current,
            ready=ready,
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeStatefulSet:
    """A stateful set row."""

    name: str
    namespace: str
    ready: str
    service: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeStatefulSet:
        """Build a row from a StatefulSet API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}
        status = obj.get("status")
        if status is not None:
            ready = f"{status.get('readyReplicas') or 0}/{status.get('replicas', 0)}"
        else:
            ready = ""
        spec = obj.get("spec")
        service = spec.get("serviceName", "") if spec is not None else "n/a"
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            ready=ready,
            service=service,
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )