"""Service resources as shown in the services table."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubedash.utils import UNKNOWN, sanitize_obj, to_age

_PENDING = "<pending>"


def get_ports(ports: list[dict[str, Any]] | None) -> str | None:
    """Format service ports as ``name:port►nodePort/proto`` entries joined by spaces."""
    if ports is None:
        return None
    formatted = []
    for port in ports:
        name = port.get("name")
        text = f"{name}:" if name is not None else ""
        text += f"{port.get('port', 0)}►{port.get('nodePort') or 0}"
        protocol = port.get("protocol")
        if protocol is not None and protocol != "TCP":
            text += f"/{protocol}"
        formatted.append(text)
    return " ".join(formatted)


def get_lb_ext_ips(
    service: dict[str, Any], external_ips: list[str] | None
) -> list[str]:
    """External addresses of a load balancer service, or ``<pending>`` when none."""
    load_balancer = (service.get("status") or {}).get("loadBalancer")
    lb_ips = []
    if load_balancer is not None:
        for ingress in load_balancer.get("ingress") or []:
            if ingress.get("ip") is not None:
                lb_ips.append(ingress["ip"])
            elif ingress.get("hostname") is not None:
                lb_ips.append(ingress["hostname"])
            else:
                lb_ips.append("")
    if lb_ips:
        return lb_ips
    return [_PENDING]


@dataclass
class KubeSvc:
    """A service row."""

    namespace: str
    name: str
    type_: str
    cluster_ip: str
    external_ip: str
    ports: str
    age: str
    k8s_obj: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(
        cls, service: dict[str, Any], now: datetime | None = None
    ) -> KubeSvc:
        """Build a row from a Service API object; ages are measured against ``now``."""
        now = now or datetime.now(timezone.utc)
        spec = service.get("spec")
        if spec is not None:
            type_ = spec.get("type") or UNKNOWN
            if type_ in ("ClusterIP", "NodePort"):
                external_ips = spec.get("externalIPs")
            elif type_ == "LoadBalancer":
                external_ips = get_lb_ext_ips(service, spec.get("externalIPs"))
            elif type_ == "ExternalName":
                external_ips = [spec.get("externalName") or ""]
            else:
                external_ips = None
            cluster_ip = spec.get("clusterIP")
            cluster_ip = "None" if cluster_ip is None else cluster_ip
            external_ip = ",".join(external_ips or [])
            ports = get_ports(spec.get("ports")) or ""
        else:
            type_, cluster_ip, external_ip, ports = UNKNOWN, "", "", ""

        metadata = service.get("metadata") or {}
        return cls(
            namespace=metadata.get("namespace") or "",
            name=metadata.get("name") or "",
            type_=type_,
            cluster_ip=cluster_ip,
            external_ip=external_ip,
            ports=ports,
            age=to_age(metadata.get("creationTimestamp"), now),
            k8s_obj=sanitize_obj(service),
        )