# kubedash

Building blocks for a terminal Kubernetes dashboard. The package takes API
objects as plain dictionaries decoded from JSON and turns them into flat
summaries for table rows. It also has helpers for ages and resource units, and
a small layer for keyboard and tick events.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Resource summaries

Each summary class is a dataclass with a `from_api(obj, now)` constructor. It
takes the object as the Kubernetes API returns it and the time to measure ages
against. `now` defaults to the current UTC time. Every summary keeps a copy of
the object in `k8s_obj`, with `metadata.managedFields` emptied.

```python
import json
from datetime import datetime, timezone

from kubedash.pods import KubePod

with open("pods.json") as fh:
    items = json.load(fh)["items"]

now = datetime.now(timezone.utc)
for pod in (KubePod.from_api(item, now) for item in items):
    ready, total = pod.ready
    print(pod.namespace, pod.name, f"{ready}/{total}", pod.status, pod.restarts, pod.age)
```

Modules and what they provide:

- `kubedash.pods`: `KubePod` and `KubeContainer`. `KubePod.containers` lists
  the regular containers first and the init containers after them, with `init`
  set to `True` for init containers.
- `kubedash.pod_status`: the pod status rules in the style of kubectl.
  `get_status` covers init containers, signals, exit codes and `Terminating`.
  The module also has `get_container_state`, `is_pod_init` and
  `get_container_ports`. `get_resource_row_style` returns a `RowStyle`
  (`PRIMARY`, `SUCCESS`, `SECONDARY`, `FAILURE`).
- `kubedash.services`: `KubeSvc`, plus `get_ports` (`name:port►nodePort/proto`)
  and `get_lb_ext_ips`, which returns `["<pending>"]` when a load balancer has
  no address yet.
- `kubedash.workloads`: `KubeReplicaSet`, `KubeStatefulSet`
- `kubedash.controllers`: `KubeReplicationController`
- `kubedash.storage`: `KubePVC`, `KubePV`, `KubeStorageClass`
- `kubedash.rbac`: `KubeRole`, `KubeRoleBinding`, `KubeClusterRole`,
  `KubeClusterRoleBinding` (its `role` reads `Kind/name`), `KubeSvcAcct`
  (its `secrets` is the number of secrets the account references)

## Utilities

`kubedash.utils` holds the formatting helpers:

```python
from kubedash.utils import cpu_to_milli, mem_to_mi, parse_timestamp, to_age, to_age_secs

mem_to_mi("2888180Ki")       # "2820Mi"
mem_to_mi("5Gi")             # "5120Mi"
cpu_to_milli("126632173n")   # "126m"
cpu_to_milli("8")            # "8000m"
to_age(parse_timestamp("2021-04-14T14:10:10Z"),
       parse_timestamp("2021-04-15T14:10:10Z"))  # "1d"
```

The same module also has:

- `to_age` and `to_age_secs`, which accept an ISO 8601 string or a datetime and
  return `""` when the timestamp is `None`.
- `duration_to_age`, which formats a `timedelta`.
- `to_cpu_percent`, `to_mem_percent`, `to_percent` and `to_float`. `to_float`
  returns `0.0` for text that is not a number.
- `sanitize_obj`.
- The constants `UNKNOWN` and `BANNER`.

## Keys and events

`kubedash.keys.Key` is the normalised form of a key press. Build one from a
`KeyEvent` (a `KeyCode`, `KeyModifiers`, and the character or function-key
number) with `Key.from_event`, or get a function key with `Key.from_f(n)` for
`n` from 0 to 12. The string form of a key is the label shown in help text:

```python
from kubedash.keys import Key, KeyCode, KeyEvent, KeyModifiers

str(Key.LEFT)                                                        # "<Left Arrow Key>"
str(Key.from_event(KeyEvent(KeyCode.CHAR, KeyModifiers.ALT, "c")))   # "<Alt+c>"
str(Key.from_f(10))                                                  # "<F10>"
```

`kubedash.events.Events` starts a background thread. The thread calls the
reader you supply, `reader(timeout)`, which returns an `Event` of kind `INPUT`
or `MOUSE_INPUT`, or `None`. Alongside those events the thread emits a `TICK`
event every `EventConfig.tick_rate` seconds (0.25 by default). `next(timeout)`
raises `TimeoutError` when no event arrives in time. It also re-raises any
error the reader raised. Use `Events` as a context manager so the thread is
stopped:

```python
from kubedash.events import EventConfig, Events

with Events(EventConfig(), reader) as events:
    event = events.next(1.0)
```

## What this package does not do

It does not connect to a cluster or fetch resources. You pass in the objects
yourself. It draws no screens or tables. It does not read the terminal itself,
so input comes only through the reader callable. It has no command-line
program.