from datetime import datetime, timezone

from kubedash.services import KubeSvc, get_lb_ext_ips, get_ports
from kubedash.utils import sanitize_obj, to_age

NOW = datetime(2023, 7, 1, 12, 0, 0, tzinfo=timezone.utc)


def _svc(name, namespace, created, spec, status=None):
    obj = {
        "metadata": {
            "name": name,
            "namespace": namespace,
            "creationTimestamp": created,
            "managedFields": [{"manager": "k3s"}],
        },
        "spec": spec,
    }
    if status is not None:
        obj["status"] = status
    return obj


SERVICES = [
    _svc("kubernetes", "default", "2021-05-10T21:48:03Z", {
        "type": "ClusterIP", "clusterIP": "10.43.0.1",
        "ports": [{"name": "https", "port": 443, "protocol": "TCP", "targetPort": 6443}],
    }),
    _svc("kube-dns", "kube-system", "2021-05-10T21:48:03Z", {
        "type": "ClusterIP", "clusterIP": "10.43.0.10",
        "ports": [
            {"name": "dns", "port": 53, "protocol": "UDP"},
            {"name": "dns-tcp", "port": 53, "protocol": "TCP"},
            {"name": "metrics", "port": 9153, "protocol": "TCP"},
        ],
    }),
    _svc("metrics-server", "kube-system", "2021-05-10T21:48:03Z", {
        "type": "ClusterIP", "clusterIP": "10.43.93.186",
        "ports": [{"port": 443, "protocol": "TCP"}],
    }),
    _svc("traefik-prometheus", "kube-system", "2021-05-10T21:48:35Z", {
        "type": "ClusterIP", "clusterIP": "10.43.9.106",
        "ports": [{"name": "metrics", "port": 9100, "protocol": "TCP"}],
    }),
    _svc("traefik", "kube-system", "2021-05-10T21:48:35Z", {
        "type": "LoadBalancer", "clusterIP": "10.43.235.227",
        "ports": [
            {"name": "http", "port": 80, "nodePort": 30723, "protocol": "TCP"},
            {"name": "https", "port": 443, "nodePort": 31954, "protocol": "TCP"},
        ],
    }, status={"loadBalancer": {"ingress": [{"ip": "172.20.0.2"}]}}),
]


def test_services_from_api():
    svcs = [KubeSvc.from_api(s, NOW) for s in SERVICES]
    assert len(svcs) == 5
    assert svcs[0] == KubeSvc(
        name="kubernetes", namespace="default",
        age=to_age("2021-05-10T21:48:03Z", NOW), k8s_obj=sanitize_obj(SERVICES[0]),
        type_="ClusterIP", cluster_ip="10.43.0.1", external_ip="", ports="https:443►0",
    )
    assert svcs[1] == KubeSvc(
        name="kube-dns", namespace="kube-system",
        age=to_age("2021-05-10T21:48:03Z", NOW), k8s_obj=sanitize_obj(SERVICES[1]),
        type_="ClusterIP", cluster_ip="10.43.0.10", external_ip="",
        ports="dns:53►0/UDP dns-tcp:53►0 metrics:9153►0",
    )
    assert svcs[2] == KubeSvc(
        name="metrics-server", namespace="kube-system",
        age=to_age("2021-05-10T21:48:03Z", NOW), k8s_obj=sanitize_obj(SERVICES[2]),
        type_="ClusterIP", cluster_ip="10.43.93.186", external_ip="", ports="443►0",
    )
    assert svcs[3] == KubeSvc(
        name="traefik-prometheus", namespace="kube-system",
        age=to_age("2021-05-10T21:48:35Z", NOW), k8s_obj=sanitize_obj(SERVICES[3]),
        type_="ClusterIP", cluster_ip="10.43.9.106", external_ip="",
        ports="metrics:9100►0",
    )
    assert svcs[4] == KubeSvc(
        name="traefik", namespace="kube-system",
        age=to_age("2021-05-10T21:48:35Z", NOW), k8s_obj=sanitize_obj(SERVICES[4]),
        type_="LoadBalancer", cluster_ip="10.43.235.227", external_ip="172.20.0.2",
        ports="http:80►30723 https:443►31954",
    )


def test_managed_fields_cleared_and_input_untouched():
    svc = KubeSvc.from_api(SERVICES[0], NOW)
    assert svc.k8s_obj["metadata"]["managedFields"] == []
    assert SERVICES[0]["metadata"]["managedFields"] == [{"manager": "k3s"}]


def test_no_spec():
    svc = KubeSvc.from_api({"metadata": {"name": "x"}}, NOW)
    assert (svc.type_, svc.cluster_ip, svc.external_ip, svc.ports) == ("Unknown", "", "", "")
    assert svc.age == ""


def test_missing_type_and_cluster_ip():
    svc = KubeSvc.from_api(_svc("x", "default", None, {}), NOW)
    assert svc.type_ == "Unknown"
    assert svc.cluster_ip == "None"
    assert svc.external_ip == ""


def test_node_port_external_ips():
    spec = {"type": "NodePort", "clusterIP": "10.0.0.5", "externalIPs": ["1.2.3.4", "5.6.7.8"]}
    svc = KubeSvc.from_api(_svc("x", "default", None, spec), NOW)
    assert svc.external_ip == "1.2.3.4,5.6.7.8"


def test_external_name():
    spec = {"type": "ExternalName", "externalName": "db.example.com"}
    svc = KubeSvc.from_api(_svc("x", "default", None, spec), NOW)
    assert svc.external_ip == "db.example.com"


def test_load_balancer_pending():
    spec = {"type": "LoadBalancer", "clusterIP": "10.0.0.5"}
    svc = KubeSvc.from_api(_svc("x", "default", None, spec), NOW)
    assert svc.external_ip == "<pending>"


def test_get_ports_none():
    assert get_ports(None) is None


def test_get_ports_empty():
    assert get_ports([]) == ""


def test_lb_ips_hostname_and_ip():
    service = {"status": {"loadBalancer": {"ingress": [
        {"hostname": "lb.example.com"}, {"ip": "172.20.0.2"}, {},
    ]}}}
    assert get_lb_ext_ips(service, None) == ["lb.example.com", "172.20.0.2", ""]


def test_lb_ips_ignore_spec_external_ips():
    service = {"status": {"loadBalancer": {"ingress": [{"ip": "172.20.0.2"}]}}}
    assert get_lb_ext_ips(service, ["1.2.3.4"]) == ["172.20.0.2"]


def test_lb_ips_pending_without_status():
    assert get_lb_ext_ips({}, ["1.2.3.4"]) == ["<pending>"]
    assert get_lb_ext_ips({"status": {"loadBalancer": {}}}, None) == ["<pending>"]