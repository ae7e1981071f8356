"""Formatting helpers for ages, CPU and memory quantities, and API objects."""

from __future__ import annotations

import copy
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any

BANNER = r"""
██╗  ██╗     
██║ ██╔╝     
█████╔╝█████╗
██╔═██╗╚════╝
██║  ██╗     
╚═╝  ╚═╝          
"""

UNKNOWN = "Unknown"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_SECS_PER_MINUTE = 60
_SECS_PER_HOUR = 60 * _SECS_PER_MINUTE
_SECS_PER_DAY = 24 * _SECS_PER_HOUR
_SECS_PER_WEEK = 7 * _SECS_PER_DAY


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Return an aware UTC datetime for an API timestamp, or None when absent."""
    if value is None:
        return None
    if isinstance(value, datetime):
        moment = value
    else:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"invalid timestamp: {value!r}") from exc
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def sanitize_obj(obj: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of an API object with its managed fields cleared."""
    cleaned = copy.deepcopy(obj)
    metadata = cleaned.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
        cleaned["metadata"] = metadata
    metadata["managedFields"] = []
    return cleaned


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _age(timestamp: str | datetime | None, against: datetime, with_secs: bool) -> str:
    moment = parse_timestamp(timestamp)
    if moment is None:
        return ""
    reference = parse_timestamp(against)
    return duration_to_age(reference - moment, with_secs)


def to_age(timestamp: str | datetime | None, against: datetime) -> str:
    """Age of a timestamp relative to ``against``, down to minutes."""
    return _age(timestamp, against, False)


def to_age_secs(timestamp: str | datetime | None, against: datetime) -> str:
    """Age of a timestamp relative to ``against``, down to seconds."""
    return _age(timestamp, against, True)


def duration_to_age(duration: timedelta, with_secs: bool) -> str:
    """Render a duration in the compact ``1w3d1h`` style."""
    micros = duration // timedelta(microseconds=1)
    total_secs = _trunc_div(micros, 1_000_000)
    weeks = _trunc_div(total_secs, _SECS_PER_WEEK)
    total_days = _trunc_div(total_secs, _SECS_PER_DAY)
    total_hours = _trunc_div(total_secs, _SECS_PER_HOUR)
    total_minutes = _trunc_div(total_secs, _SECS_PER_MINUTE)

    parts = []
    if weeks != 0:
        parts.append(f"{weeks}w")
    days = total_days - weeks * 7
    if days != 0:
        parts.append(f"{days}d")
    hours = total_hours - total_days * 24
    if hours != 0:
        parts.append(f"{hours}h")
    minutes = total_minutes - total_hours * 60
    if minutes != 0 and days == 0 and weeks == 0:
        parts.append(f"{minutes}m")
    if with_secs:
        secs = total_secs - total_minutes * 60
        if secs != 0 and hours == 0 and days == 0 and weeks == 0:
            parts.append(f"{secs}s")

    out = "".join(parts)
    if out:
        return out
    return "0s" if with_secs else "0m"


def _strip_suffix_all(text: str, suffix: str) -> str:
    while text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _to_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else 0


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def mem_to_mi(mem: str) -> str:
    """Convert a ``Ki`` or ``Gi`` memory quantity to ``Mi``; leave others as they are."""
    if mem.endswith("Ki"):
        return f"{_trunc_div(_to_int(_strip_suffix_all(mem, 'Ki')), 1024)}Mi"
    if mem.endswith("Gi"):
        return f"{_to_int(_strip_suffix_all(mem, 'Gi')) * 1024}Mi"
    return mem


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def cpu_to_milli(cpu: str) -> str:
    """Convert a CPU quantity (cores or nanocores) to millicores."""
    if cpu.endswith("m"):
        return cpu
    if cpu.endswith("n"):
        return f"{_format_float(_floor(to_float(cpu.rstrip('n')) / 1_000_000.0))}m"
    return f"{_format_float(_floor(to_float(cpu) * 1000.0))}m"


def to_cpu_percent(used: str, total: str) -> float:
    """Percentage of millicore usage ``used`` against ``total``."""
    return to_percent(to_float(used.rstrip("m")), to_float(total.rstrip("m")))


def to_mem_percent(used: str, total: str) -> float:
    """Percentage of ``Mi`` memory usage ``used`` against ``total``."""
    return to_percent(
        to_float(_strip_suffix_all(used, "Mi")), to_float(_strip_suffix_all(total, "Mi"))
    )


def to_percent(used: float, total: float) -> float:
    """Floored percentage of ``used`` against ``total``, IEEE semantics for zero totals."""
    if total == 0:
        if used == 0 or math.isnan(used):
            return math.nan
        sign = math.copysign(1.0, used) * math.copysign(1.0, total)
        return math.copysign(math.inf, sign)
    return _floor((used / total) * 100.0)


def to_float(s: str) -> float:
    """Parse a float, returning 0.0 when the text is not a number."""
    if not s or s != s.strip() or "_" in s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0