"""Persistent volume claims, persistent volumes and storage classes as shown in their tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.utils import sanitize_obj, to_age


def _storage_capacity(capacity: dict[str, Any] | None) -> str:
    return (capacity or {}).get("storage") or ""


@dataclass
class KubePVC:
    """A persistent volume claim row."""

    name: str
    namespace: str
    status: str
    volume: str
    capacity: str
    access_modes: str
    storage_class: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubePVC:
        """Build a row from a PersistentVolumeClaim API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}
        status = obj.get("status") or {}
        spec = obj.get("spec") or {}
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            status=status.get("phase") or "",
            volume=spec.get("volumeName") or "",
            capacity=_storage_capacity(status.get("capacity")),
            access_modes=",".join(spec.get("accessModes") or []),
            storage_class=spec.get("storageClassName") or "",
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubePV:
    """A persistent volume row."""

    name: str
    capacity: str
    access_modes: str
    reclaim_policy: str
    status: str
    claim: str
    storage_class: str
    reason: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubePV:
        """Build a row from a PersistentVolume API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}
        status = obj.get("status") or {}
        spec = obj.get("spec") or {}
        claim_ref = spec.get("claimRef") or {}
        claim = f"{claim_ref.get('namespace') or ''}/{claim_ref.get('name') or ''}"
        return cls(
            name=metadata.get("name") or "",
            capacity=_storage_capacity(spec.get("capacity")),
            access_modes=",".join(spec.get("accessModes") or []),
            reclaim_policy=spec.get("persistentVolumeReclaimPolicy") or "",
            status=status.get("phase") or "",
            claim=claim,
            storage_class=spec.get("storageClassName") or "",
            reason=status.get("reason") or "",
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeStorageClass:
    """A storage class row."""

    name: str
    provisioner: str
    reclaim_policy: str
    volume_binding_mode: str
    allow_volume_expansion: bool
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeStorageClass:
        """Build a row from a StorageClass API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = obj.get("metadata") or {}
        return cls(
            name=metadata.get("name") or "",
            provisioner=obj.get("provisioner") or "",
            reclaim_policy=obj.get("reclaimPolicy") or "",
            volume_binding_mode=obj.get("volumeBindingMode") or "",
            allow_volume_expansion=bool(obj.get("allowVolumeExpansion")),
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(obj),
        )