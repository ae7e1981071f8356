"""Pods and their containers as shown in the pods and containers tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.pod_status import get_container_ports, get_container_state, get_status
from kubedash.utils import UNKNOWN, sanitize_obj, to_age


@dataclass
class KubeContainer:
    """A container row, covering both regular and init containers."""

    name: str
    image: str
    ready: str
    status: str
    restarts: int
    liveliness_probe: bool
    readiness_probe: bool
    ports: str
    age: str
    pod_name: str
    init: bool
    k8s_obj: dict[str, Any] | None = field(default=None, repr=False)

    @classmethod
    def from_api(
        cls,
        container: dict[str, Any],
        pod_name: str,
        age: str,
        statuses: list[dict[str, Any]] | None,
        init: bool,
    ) -> KubeContainer:
        """Build a row from a container spec and the pod's container statuses."""
        name = container.get("name") or ""
        ready, status, restarts = "false", "<none>", 0
        match = next((s for s in statuses or [] if s.get("name") == name), None)
        if match is not None:
            ready = "true" if match.get("ready") else "false"
            status = get_container_state(match.get("state"))
            restarts = match.get("restartCount", 0)

        return cls(
            name=name,
            image=container.get("image") or "",
            ready=ready,
            status=status,
            restarts=restarts,
            liveliness_probe=container.get("livenessProbe") is not None,
            readiness_probe=container.get("readinessProbe") is not None,
            ports=get_container_ports(container.get("ports")) or "",
            age=age,
            pod_name=pod_name,
            init=init,
        )


@dataclass
class KubePod:
    """A pod row."""

    namespace: str
    name: str
    ready: tuple[int, int]
    status: str
    restarts: int
    cpu: str
    mem: str
    age: str
    containers: list[KubeContainer]
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, pod: dict[str, Any], now: datetime | None = None) -> KubePod:
        """Build a row from a Pod API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        metadata = pod.get("metadata") or {}
        age = to_age(metadata.get("creationTimestamp"), now)
        pod_name = metadata.get("name") or ""

        pod_status = pod.get("status")
        if pod_status is not None:
            container_statuses = pod_status.get("containerStatuses")
            stats = container_statuses or []
            ready_count = sum(1 for cs in stats if cs.get("ready"))
            restarts = sum(cs.get("restartCount", 0) for cs in stats)
            spec = pod.get("spec") or {}
            containers = [
                KubeContainer.from_api(c, pod_name, age, container_statuses, False)
                for c in spec.get("containers") or []
            ]
            containers.extend(
                KubeContainer.from_api(
                    c, pod_name, age, pod_status.get("initContainerStatuses"), True
                )
                for c in spec.get("initContainers") or []
            )
            status = get_status(pod_status, pod)
            total = len(stats)
        else:
            status, ready_count, restarts, total, containers = UNKNOWN, 0, 0, 0, []

        return cls(
            namespace=metadata.get("namespace") or "",
            name=pod_name,
            ready=(ready_count, total),
            status=status,
            restarts=restarts,
            cpu="",
            mem="",
            age=age,
            containers=containers,
            k8s_obj=sanitize_obj(pod),
        )