"""Status text, container state and row styling for pods and their containers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from kubedash.utils import UNKNOWN

_NONE = "<none>"
_PENDING_STATUSES = frozenset(
    {"ContainerCreating", "PodInitializing", "Pending", "Initialized"}
)


class RowStyle(Enum):
    """Style a table row is drawn with."""

    PRIMARY = "primary"
    SUCCESS = "success"
    SECONDARY = "secondary"
    FAILURE = "failure"


def get_resource_row_style(status: str, ready: tuple[int, int]) -> RowStyle:
    """Pick the row style for a pod or container from its status and readiness."""
    ready_count, total = ready
    if status == "Running" and ready_count == total:
        return RowStyle.PRIMARY
    if status == "Completed":
        return RowStyle.SUCCESS
    if status in _PENDING_STATUSES:
        return RowStyle.SECONDARY
    return RowStyle.FAILURE


def get_container_state(state: dict[str, Any] | None) -> str:
    """Describe a container state as shown in the containers table."""
    if state is None:
        return _NONE
    waiting = state.get("waiting")
    if waiting is not None:
        return waiting.get("reason") or "Waiting"
    terminated = state.get("terminated")
    if terminated is not None:
        return terminated.get("reason") or "Terminating"
    if state.get("running") is not None:
        return "Running"
    return _NONE


def is_pod_init(waiting: dict[str, Any] | None) -> bool:
    """True when a waiting init container waits for something other than pod start-up."""
    if waiting is None:
        return False
    return (waiting.get("reason") or "") != "PodInitializing"


def _init_container_status(
    index: int, state: dict[str, Any] | None, init_count: int
) -> str:
    if state is None:
        return ""
    terminated = state.get("terminated")
    if terminated is not None:
        exit_code = terminated.get("exitCode", 0)
        reason = terminated.get("reason") or ""
        signal = terminated.get("signal") or 0
        if exit_code == 0:
            return ""
        if not reason:
            return f"Init:{reason}"
        if signal != 0:
            return f"Init:Signal:{signal}"
        return f"Init:ExitCode:{exit_code}"
    waiting = state.get("waiting")
    if is_pod_init(waiting):
        return f"Init:{waiting.get('reason') or ''}"
    return f"Init:{index}/{init_count}"


def _container_status(state: dict[str, Any], fallback: str) -> str:
    waiting_reason = (state.get("waiting") or {}).get("reason")
    if waiting_reason:
        return waiting_reason
    terminated = state.get("terminated")
    terminated_reason = (terminated or {}).get("reason")
    if terminated_reason:
        return terminated_reason
    if terminated is not None:
        signal = terminated.get("signal") or 0
        if signal != 0:
            return f"Signal:{signal}"
        return f"ExitCode:{terminated.get('exitCode', 0)}"
    return fallback


def get_status(status: dict[str, Any], pod: dict[str, Any]) -> str:
    """Compute the status column of a pod from its status and the pod object."""
    metadata = pod.get("metadata") or {}
    deleting = metadata.get("deletionTimestamp") is not None

    result = status.get("phase") or UNKNOWN
    reason = status.get("reason")
    if reason is not None:
        result = UNKNOWN if reason == "NodeLost" and deleting else reason

    init_statuses = status.get("initContainerStatuses")
    if init_statuses is not None:
        init_count = len((pod.get("spec") or {}).get("initContainers") or [])
        for index, container_status in enumerate(init_statuses):
            init_status = _init_container_status(
                index, container_status.get("state"), init_count
            )
            if init_status:
                return init_status

    running = False
    container_statuses = status.get("containerStatuses")
    if container_statuses is not None:
        found = ""
        for container_status in reversed(container_statuses):
            state = container_status.get("state")
            if state is None:
                continue
            if container_status.get("ready") and state.get("running") is not None:
                running = True
            found = _container_status(state, result)
            break
        result = found

    if running and result == "Completed":
        result = "Running"

    return "Terminating" if deleting else result


def get_container_ports(ports: list[dict[str, Any]] | None) -> str | None:
    """Format container ports as ``name:port/proto`` entries joined by commas."""
    if ports is None:
        return None
    formatted = []
    for port in ports:
        name = port.get("name")
        text = f"{name}:" if name is not None else ""
        text += str(port.get("containerPort", 0))
        protocol = port.get("protocol")
        if protocol is not None and protocol != "TCP":
            text += f"/{protocol}"
        formatted.append(text)
    return ", ".join(formatted)