"""Roles, role bindings, cluster roles, cluster role bindings and service accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.utils import sanitize_obj, to_age


def _metadata(obj: dict[str, Any]) -> dict[str, Any]:
    return obj.get("metadata") or {}


def _now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


@dataclass
class KubeRole:
    """A role row."""

    namespace: str
    name: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeRole:
        """Build a row from a Role API object; ages are measured against ``now``."""
        metadata = _metadata(obj)
        return cls(
            namespace=metadata.get("namespace") or "",
            name=metadata.get("name") or "",
            age=to_age(metadata.get("creationTimestamp"), _now(now)),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeRoleBinding:
    """A role binding row."""

    namespace: str
    name: str
    role: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeRoleBinding:
        """Build a row from a RoleBinding API object; ages are measured against ``now``."""
        metadata = _metadata(obj)
        role_ref = obj.get("roleRef") or {}
        return cls(
            namespace=metadata.get("namespace") or "",
            name=metadata.get("name") or "",
            role=role_ref.get("name") or "",
            age=to_age(metadata.get("creationTimestamp"), _now(now)),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeClusterRole:
    """A cluster role row."""

    name: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeClusterRole:
        """Build a row from a ClusterRole API object; ages are measured against ``now``."""
        metadata = _metadata(obj)
        return cls(
            name=metadata.get("name") or "",
            age=to_age(metadata.get("creationTimestamp"), _now(now)),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeClusterRoleBinding:
    """A cluster role binding row; ``role`` reads ``Kind/name``."""

    name: str
    role: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(
        cls, obj: dict[str, Any], now: datetime | None = None
    ) -> KubeClusterRoleBinding:
        """Build a row from a ClusterRoleBinding API object; ages are measured against ``now``."""
        metadata = _metadata(obj)
        role_ref = obj.get("roleRef") or {}
        return cls(
            name=metadata.get("name") or "",
            role=f"{role_ref.get('kind') or ''}/{role_ref.get('name') or ''}",
            age=to_age(metadata.get("creationTimestamp"), _now(now)),
            k8s_obj=sanitize_obj(obj),
        )


@dataclass
class KubeSvcAcct:
    """A service account row; ``secrets`` counts the secrets it references."""

    namespace: str
    name: str
    secrets: int
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, obj: dict[str, Any], now: datetime | None = None) -> KubeSvcAcct:
        """Build a row from a ServiceAccount API object; ages are measured against ``now``."""
        metadata = _metadata(obj)
        return cls(
            namespace=metadata.get("namespace") or "",
            name=metadata.get("name") or "",
            secrets=len(obj.get("secrets") or []),
            age=to_age(metadata.get("creationTimestamp"), _now(now)),
            k8s_obj=sanitize_obj(obj),
        )