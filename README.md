# k8up

A library for the resources of a Kubernetes backup operator built around
restic: backups, checks, prunes, restores, archives, snapshots, pre-backup
pods and effective schedules. It tracks job status through standard
conditions, parses the operator's command-line and environment settings,
and writes `tar.gz` streams. It depends on nothing outside the standard
library.

## What is inside

| Module | Purpose |
| --- | --- |
| `k8up.meta` | `ObjectMeta`, `Condition`, `ConditionStatus`, `NamespacedName`, `GroupVersion`; `find_status_condition`, `set_status_condition`, `map_to_namespaced_name` |
| `k8up.types` | `JobType`, `ConditionType`, `ConditionReason`, `ScheduleDefinition` |
| `k8up.status` | `Status` of a job: started, finished, failed, succeeded |
| `k8up.job_object` | `RunnableSpec`, `JobObject`, `HistoryLimits`, `job_object_sort_key`, `sort_job_objects` |
| `k8up.backup`, `k8up.check`, `k8up.prune`, `k8up.restore`, `k8up.archive` | The job resources, their specs and their lists |
| `k8up.snapshot`, `k8up.prebackuppod`, `k8up.effective_schedule` | Supporting resources |
| `k8up.operator_options` | `OperatorConfig`, `parse_operator_config`, `validate_quantity_flags`, `parse_quantity` |
| `k8up.targzip` | `TarGzipWriter`, which produces a `tar.gz` stream |
| `k8up.logger` | `new_logger`, `set_app_logger`, `app_logger` |

## Job resources

Every spec can create its resource, and every job resource knows the name of
its batch job and its history limits:

```python
from k8up.backup import BackupSpec

spec = BackupSpec(keep_jobs=3, failed_jobs_history_limit=1)
backup = spec.create_object("nightly", "default")

assert backup.job_name == "backup-nightly"
assert backup.failed_jobs_history_limit == 1
assert backup.successful_jobs_history_limit == 3  # falls back to keep_jobs
```

`keep_jobs` is deprecated; it is used only when the specific limit is not
set, and both limits are `None` when neither is. The list classes
(`BackupList`, `CheckList`, `PruneList`, `RestoreList`, `ArchiveList`) return
their items through `job_objects()`, in list order. `sort_job_objects` orders
job objects oldest first, by creation time and then by name.

`EffectiveScheduleSpec.add_schedule_ref` appends a `ScheduleRef` only if no
reference with the same name and namespace is already present.

## Tracking job status

```python
from k8up.status import Status

status = Status()
status.set_started("all preconditions met")
assert status.has_started()

status.set_finished("done")
assert not status.has_succeeded()
```

A job counts as succeeded only when its `Completed` condition is true with
the reason `Succeeded`. A `PreBackupPodReady` condition that is false with a
reason other than `Succeeded`, `Waiting`, `NoPreBackupPodsFound` or `Ready`
marks the job as failed. `set_status_condition` adds a condition or updates
the one of the same type, changing its transition time only when the status
changes.

## Schedule definitions

```python
from k8up.types import ScheduleDefinition

daily = ScheduleDefinition("@daily-random")
assert daily.is_non_standard()
assert daily.is_random()
```

Definitions starting with `@` are non-standard; those that also end in
`-random` are randomized.

## Writing a tar.gz stream

```python
import io
import tarfile

from k8up.targzip import TarGzipWriter

data = b"data\n"
info = tarfile.TarInfo("test.txt")
info.size = len(data)

buffer = io.BytesIO()
with TarGzipWriter(buffer) as archive:
    archive.write_header(info)
    archive.write(data)
```

Each entry must receive exactly `info.size` bytes; writing more raises
`tarfile.TarError`. Closing finishes the tar archive and then the gzip
stream; closing twice does nothing, and writing after close raises
`ValueError`. The underlying file object stays open and is yours to close.

## Operator settings

```python
from k8up.operator_options import parse_operator_config, validate_quantity_flags

config = parse_operator_config(
    ["--operator-namespace", "k8up-system", "--global-cpu-limit", "500m"],
    {},
)
validate_quantity_flags(config)
```

Every setting can also come from its `BACKUP_*` environment variable; flags
win over the environment. `parse_operator_config` raises `ValueError` for
unknown flags, malformed values and a missing operator namespace.
`validate_quantity_flags` raises `QuantityError` when a CPU or memory value
that was given is not a valid Kubernetes quantity; `parse_quantity` turns
values such as `100m`, `1Gi` or `5e3` into a `Decimal`.

## Logging

`new_logger(name, debug)` returns a standard-library logger at debug or info
level writing to stderr. `set_app_logger` stores it in a metadata mapping and
`app_logger` retrieves it, raising `KeyError` if none was stored.

## What this package does not do

There is no `Schedule` resource and no schedule types per job kind; only
`ScheduleDefinition` and the effective schedule resources are provided. The
package does not connect to a cluster, run controllers, start backup jobs or
call restic, and it installs no command: the operator settings are parsed and
validated, but nothing acts on them.

## Running the tests

Install the package with its `test` extra and run pytest from the project
directory.