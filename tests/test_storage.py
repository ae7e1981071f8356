from datetime import datetime, timezone

from kubedash.storage import KubePV, KubePVC, KubeStorageClass

NOW = datetime(2023, 7, 1, 17, 27, 23, tzinfo=timezone.utc)


def _pvc():
    return {
        "apiVersion": "v1",
        "kind": "PersistentVolumeClaim",
        "metadata": {
            "name": "data-consul-0",
            "namespace": "jhipster",
            "creationTimestamp": "2023-06-30T17:27:23Z",
            "managedFields": [{"manager": "kube-controller-manager"}],
        },
        "spec": {
            "accessModes": ["ReadWriteOnce"],
            "resources": {"requests": {"storage": "8Gi"}},
            "storageClassName": "gp2",
            "volumeMode": "Filesystem",
            "volumeName": "pvc-149f1f3b-c0fd-471d-bc3e-d039369755ef",
        },
        "status": {
            "accessModes": ["ReadWriteOnce"],
            "capacity": {"storage": "8Gi"},
            "phase": "Bound",
        },
    }


def _pv():
    return {
        "apiVersion": "v1",
        "kind": "PersistentVolume",
        "metadata": {
            "name": "pvc-149f1f3b-c0fd-471d-bc3e-d039369755ef",
            "creationTimestamp": "2023-06-30T17:27:26Z",
            "managedFields": [{"manager": "kube-controller-manager"}],
        },
        "spec": {
            "accessModes": ["ReadWriteOnce"],
            "capacity": {"storage": "8Gi"},
            "claimRef": {
                "kind": "PersistentVolumeClaim",
                "name": "data-consul-0",
                "namespace": "jhipster",
            },
            "persistentVolumeReclaimPolicy": "Delete",
            "storageClassName": "gp2",
        },
        "status": {"phase": "Bound"},
    }


def _storage_class():
    return {
        "apiVersion": "storage.k8s.io/v1",
        "kind": "StorageClass",
        "metadata": {
            "name": "ebs-performance",
            "creationTimestamp": "2021-12-14T11:08:59Z",
            "managedFields": [{"manager": "kubectl"}],
        },
        "provisioner": "kubernetes.io/aws-ebs",
        "reclaimPolicy": "Delete",
        "volumeBindingMode": "Immediate",
    }


def test_persistent_volume_claims_from_api():
    obj = _pvc()
    pvc = KubePVC.from_api(obj, NOW)
    expected_obj = _pvc()
    expected_obj["metadata"]["managedFields"] = []
    assert pvc == KubePVC(
        name="data-consul-0",
        namespace="jhipster",
        status="Bound",
        volume="pvc-149f1f3b-c0fd-471d-bc3e-d039369755ef",
        capacity="8Gi",
        access_modes="ReadWriteOnce",
        storage_class="gp2",
        age="1d",
        k8s_obj=expected_obj,
    )
    assert obj["metadata"]["managedFields"] == [{"manager": "kube-controller-manager"}]


def test_pvc_multiple_access_modes_joined():
    obj = _pvc()
    obj["spec"]["accessModes"] = ["ReadWriteOnce", "ReadOnlyMany"]
    assert KubePVC.from_api(obj, NOW).access_modes == "ReadWriteOnce,ReadOnlyMany"


def test_pvc_missing_spec_and_status():
    pvc = KubePVC.from_api({"metadata": {"name": "bare"}}, NOW)
    assert (pvc.name, pvc.status, pvc.volume, pvc.capacity) == ("bare", "", "", "")
    assert (pvc.access_modes, pvc.storage_class, pvc.age) == ("", "", "")


def test_persistent_volumes_from_api():
    pv = KubePV.from_api(_pv(), NOW)
    expected_obj = _pv()
    expected_obj["metadata"]["managedFields"] = []
    assert pv == KubePV(
        name="pvc-149f1f3b-c0fd-471d-bc3e-d039369755ef",
        capacity="8Gi",
        access_modes="ReadWriteOnce",
        reclaim_policy="Delete",
        status="Bound",
        claim="jhipster/data-consul-0",
        storage_class="gp2",
        reason="",
        age="23h59m",
        k8s_obj=expected_obj,
    )


def test_pv_without_claim_ref():
    obj = _pv()
    del obj["spec"]["claimRef"]
    obj["status"]["reason"] = "Released"
    pv = KubePV.from_api(obj, NOW)
    assert pv.claim == "/"
    assert pv.reason == "Released"


def test_storageclass_allow_expansion():
    obj = _storage_class()
    obj["allowVolumeExpansion"] = True
    assert KubeStorageClass.from_api(obj, NOW).allow_volume_expansion is True