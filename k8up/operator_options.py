"""Command line and environment options of the operator mode."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Sequence

DEFAULT_COMMAND_RESTIC = ("/usr/local/bin/k8up", "restic")

_QUANTITY_PATTERN = r"^([+-]?[0-9.]+)([eEinumkKMGTP]*[-+]?[0-9]*)$"
_NUMBER = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))(.*)$")
_EXPONENT = re.compile(r"^[eE]([+-]?\d+)$")

_BINARY_SUFFIXES = {
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}
_DECIMAL_SUFFIXES = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


class QuantityError(ValueError):
    """Raised when a value is not a valid Kubernetes quantity."""


def parse_quantity(value: str) -> Decimal:
    """Parse a Kubernetes quantity such as '100m', '1Gi' or '5e3' into a Decimal."""
    if not value:
        raise QuantityError("quantities must match the regular expression " f"'{_QUANTITY_PATTERN}'")
    match = _NUMBER.match(value)
    if match is None:
        raise QuantityError(f"quantities must match the regular expression '{_QUANTITY_PATTERN}'")
    number_text, suffix = match.groups()
    try:
        number = Decimal(number_text)
    except InvalidOperation as exc:
        raise QuantityError(
            f"quantities must match the regular expression '{_QUANTITY_PATTERN}'"
        ) from exc

    if suffix in _BINARY_SUFFIXES:
        return number * _BINARY_SUFFIXES[suffix]
    if suffix in _DECIMAL_SUFFIXES:
        return number * _DECIMAL_SUFFIXES[suffix]
    exponent = _EXPONENT.match(suffix)
    if exponent is not None:
        return number.scaleb(int(exponent.group(1)))
    raise QuantityError("unable to parse quantity's suffix")


@dataclass
class OperatorConfig:
    """Settings of the operator, taken from flags and environment variables.

    The resource quantity settings are None unless they were given.
    """

    backup_annotation: str = "k8up.io/backup"
    backup_command_annotation: str = "k8up.io/backupcommand"
    file_extension_annotation: str = "k8up.io/file-extension"

    global_keep_jobs: int = -1
    global_failed_jobs_history_limit: int = 3
    global_successful_jobs_history_limit: int = 3
    global_concurrent_archive_jobs_limit: int = 0
    global_concurrent_backup_jobs_limit: int = 0
    global_concurrent_check_jobs_limit: int = 0
    global_concurrent_prune_jobs_limit: int = 0
    global_concurrent_restore_jobs_limit: int = 0

    global_restore_s3_access_key: str = ""
    global_restore_s3_bucket: str = ""
    global_restore_s3_endpoint: str = ""
    global_restore_s3_secret_access_key: str = ""

    global_repo_password: str = ""
    global_access_key: str = ""
    global_secret_access_key: str = ""
    global_s3_bucket: str = ""
    global_s3_endpoint: str = ""

    global_cpu_resource_request: Optional[str] = None
    global_cpu_resource_limit: Optional[str] = None
    global_memory_resource_request: Optional[str] = None
    global_memory_resource_limit: Optional[str] = None

    backup_image: str = "ghcr.io/k8up-io/k8up:latest"
    backup_command_restic: list[str] = field(default_factory=lambda: list(DEFAULT_COMMAND_RESTIC))
    restic_options: str = ""
    mount_path: str = "/data"

    global_stats_url: str = ""
    metrics_bind_address: str = ":8080"
    prom_url: str = "http://127.0.0.1/"

    restart_policy: str = "OnFailure"
    pod_filter: str = "backupPod=true"
    service_account: str = "pod-executor"
    pod_exec_role_name: str = "pod-executor"

    enable_leader_election: bool = True
    backup_check_schedule: str = "0 0 * * 0"
    operator_namespace: str = ""

    args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _Flag:
    names: tuple[str, ...]
    attr: str
    kind: str
    env: str


_FLAGS = (
    _Flag(("annotation",), "backup_annotation", "str", "BACKUP_ANNOTATION"),
    _Flag(("backupcommandannotation",), "backup_command_annotation", "str", "BACKUP_BACKUPCOMMANDANNOTATION"),
    _Flag(("fileextensionannotation",), "file_extension_annotation", "str", "BACKUP_FILEEXTENSIONANNOTATION"),
    _Flag(("globalkeepjobs",), "global_keep_jobs", "int", "BACKUP_GLOBALKEEPJOBS"),
    _Flag(("global-failed-jobs-history-limit",), "global_failed_jobs_history_limit", "int",
          "BACKUP_GLOBAL_FAILED_JOBS_HISTORY_LIMIT"),
    _Flag(("global-successful-jobs-history-limit",), "global_successful_jobs_history_limit", "int",
          "BACKUP_GLOBAL_SUCCESSFUL_JOBS_HISTORY_LIMIT"),
    _Flag(("global-concurrent-archive-jobs-limit",), "global_concurrent_archive_jobs_limit", "int",
          "BACKUP_GLOBAL_CONCURRENT_ARCHIVE_JOBS_LIMIT"),
    _Flag(("global-concurrent-backup-jobs-limit",), "global_concurrent_backup_jobs_limit", "int",
          "BACKUP_GLOBAL_CONCURRENT_BACKUP_JOBS_LIMIT"),
    _Flag(("global-concurrent-check-jobs-limit",), "global_concurrent_check_jobs_limit", "int",
          "BACKUP_GLOBAL_CONCURRENT_CHECK_JOBS_LIMIT"),
    _Flag(("global-concurrent-prune-jobs-limit",), "global_concurrent_prune_jobs_limit", "int",
          "BACKUP_GLOBAL_CONCURRENT_PRUNE_JOBS_LIMIT"),
    _Flag(("global-concurrent-restore-jobs-limit",), "global_concurrent_restore_jobs_limit", "int",
          "BACKUP_GLOBAL_CONCURRENT_RESTORE_JOBS_LIMIT"),
    _Flag(("globalrestores3accesskeyid",), "global_restore_s3_access_key", "str",
          "BACKUP_GLOBALRESTORES3ACCESKEYID"),
    _Flag(("globalrestores3bucket",), "global_restore_s3_bucket", "str", "BACKUP_GLOBALRESTORES3BUCKET"),
    _Flag(("globalrestores3endpoint",), "global_restore_s3_endpoint", "str", "BACKUP_GLOBALRESTORES3ENDPOINT"),
    _Flag(("globalrestores3secretaccesskey",), "global_restore_s3_secret_access_key", "str",
          "BACKUP_GLOBALRESTORES3SECRETACCESSKEY"),
    _Flag(("globalrepopassword",), "global_repo_password", "str", "BACKUP_GLOBALREPOPASSWORD"),
    _Flag(("globalaccesskeyid",), "global_access_key", "str", "BACKUP_GLOBALACCESSKEYID"),
    _Flag(("globalsecretaccesskey",), "global_secret_access_key", "str", "BACKUP_GLOBALSECRETACCESSKEY"),
    _Flag(("globals3bucket",), "global_s3_bucket", "str", "BACKUP_GLOBALS3BUCKET"),
    _Flag(("globals3endpoint",), "global_s3_endpoint", "str", "BACKUP_GLOBALS3ENDPOINT"),
    _Flag(("global-cpu-request",), "global_cpu_resource_request", "str", "BACKUP_GLOBAL_CPU_REQUEST"),
    _Flag(("global-cpu-limit",), "global_cpu_resource_limit", "str", "BACKUP_GLOBAL_CPU_LIMIT"),
    _Flag(("global-memory-request",), "global_memory_resource_request", "str", "BACKUP_GLOBAL_MEMORY_REQUEST"),
    _Flag(("global-memory-limit",), "global_memory_resource_limit", "str", "BACKUP_GLOBAL_MEMORY_LIMIT"),
    _Flag(("image",), "backup_image", "str", "BACKUP_IMAGE"),
    _Flag(("command-restic",), "backup_command_restic", "list", "BACKUP_COMMAND_RESTIC"),
    _Flag(("restic-options",), "restic_options", "list", "BACKUP_RESTIC_OPTIONS"),
    _Flag(("datapath", "mountpath"), "mount_path", "str", "BACKUP_DATAPATH"),
    _Flag(("globalstatsurl",), "global_stats_url", "str", "BACKUP_GLOBALSTATSURL"),
    _Flag(("metrics-bindaddress",), "metrics_bind_address", "str", "BACKUP_METRICS_BINDADDRESS"),
    _Flag(("promurl",), "prom_url", "str", "BACKUP_PROMURL"),
    _Flag(("restartpolicy",), "restart_policy", "str", "BACKUP_RESTARTPOLICY"),
    _Flag(("podfilter",), "pod_filter", "str", "BACKUP_PODFILTER"),
    _Flag(("podexecaccountname", "serviceaccount"), "service_account", "str", "BACKUP_PODEXECACCOUNTNAME"),
    _Flag(("podexecrolename",), "pod_exec_role_name", "str", "BACKUP_PODEXECROLENAME"),
    _Flag(("enable-leader-election",), "enable_leader_election", "bool", "BACKUP_ENABLE_LEADER_ELECTION"),
    _Flag(("checkschedule",), "backup_check_schedule", "str", "BACKUP_CHECKSCHEDULE"),
    _Flag(("operator-namespace",), "operator_namespace", "str", "BACKUP_OPERATOR_NAMESPACE"),
)

_BY_NAME = {name: flag for flag in _FLAGS for name in flag.names}

_QUANTITY_FLAGS = (
    ("global-cpu-request", "global_cpu_resource_request"),
    ("global-cpu-limit", "global_cpu_resource_limit"),
    ("global-memory-request", "global_memory_resource_request"),
    ("global-memory-limit", "global_memory_resource_limit"),
)


def _parse_bool(raw: str, origin: str) -> bool:
    if raw in _TRUE_WORDS:
        return True
    if raw in _FALSE_WORDS:
        return False
    raise ValueError(f"could not parse {raw!r} as bool value from {origin}")


def _parse_int(raw: str, origin: str) -> int:
    try:
        return int(raw, 0)
    except ValueError as exc:
        raise ValueError(f"could not parse {raw!r} as int value from {origin}") from exc


def _split_values(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",")]


def _apply_env(flag: _Flag, raw: str, values: dict[str, Any]) -> None:
    origin = f"{flag.env} for flag {flag.names[0]}"
    if flag.kind == "str":
        values[flag.attr] = raw
    elif flag.kind == "bool":
        values[flag.attr] = _parse_bool(raw, origin) if raw else False
    elif flag.kind == "int":
        if raw:
            values[flag.attr] = _parse_int(raw, origin)
    elif raw:
        values[flag.attr] = _split_values(raw)


def _flag_name(token: str) -> str:
    name = token[2:] if token.startswith("--") else token[1:]
    if not name or name.startswith("-") or name.startswith("="):
        raise ValueError(f"bad flag syntax: {token}")
    return name


def parse_operator_config(
    argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> OperatorConfig:
    """Build the operator settings; flags win over environment variables.

    Raises ValueError for unknown flags, malformed values and a missing
    operator namespace.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    for flag in _FLAGS:
        if flag.env in env:
            _apply_env(flag, env[flag.env], values)

    cli_lists: dict[str, list[str]] = {}
    positional: list[str] = []
    tokens = iter(args)
    for token in tokens:
        if token == "--":
            positional.extend(tokens)
            break
        if not token.startswith("-") or token == "-":
            positional.append(token)
            positional.extend(tokens)
            break

        name, has_value, inline = _flag_name(token).partition("=")
        flag = _BY_NAME.get(name)
        if flag is None:
            raise ValueError(f"flag provided but not defined: -{name}")

        if flag.kind == "bool":
            values[flag.attr] = _parse_bool(inline, f"flag -{name}") if has_value else True
            continue

        if has_value:
            raw = inline
        else:
            next_token = next(tokens, None)
            if next_token is None:
                raise ValueError(f"flag needs an argument: -{name}")
            raw = next_token

        if flag.kind == "list":
            cli_lists.setdefault(flag.attr, []).extend(raw.split(","))
        elif flag.kind == "int":
            values[flag.attr] = _parse_int(raw, f"flag -{name}")
        else:
            values[flag.attr] = raw

    values.update(cli_lists)

    if "operator_namespace" not in values:
        raise ValueError('Required flag "operator-namespace" not set')

    values["restic_options"] = ",".join(values.get("restic_options", []))
    return OperatorConfig(args=positional, **values)


def validate_quantity_flags(config: OperatorConfig) -> None:
    """Check that every given resource request and limit is a valid quantity."""
    for flag_name, attr in _QUANTITY_FLAGS:
        value = getattr(config, attr)
        if value is None:
            continue
        try:
            parse_quantity(value)
        except QuantityError as exc:
            raise QuantityError(
                f"the value '{value}' of flag '{flag_name}' is not a valid Kubernetes quantity: {exc}"
            ) from exc