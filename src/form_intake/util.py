from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from .schema import INVALID_SHEET_NAME_CHARS, MAX_SHEET_NAME_LEN

_INVALID_RE = re.compile("[" + re.escape(INVALID_SHEET_NAME_CHARS) + "]")


def sanitize_name_part(value: Any) -> str:
    if value is None:
        return ""
    return _INVALID_RE.sub("", str(value)).strip()


def local_iso_ts(tz_name: str, now: Optional[datetime] = None) -> str:
    """Format an instant as yyyy-MM-ddTHH:mm:ss in the given IANA zone.

    Naive datetimes are taken to be UTC.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz_name)).strftime("%Y-%m-%dT%H:%M:%S")


def build_sheet_name(
    fields: Mapping[str, Any],
    tz_name: str,
    *,
    first_field: str,
    last_field: str,
    now: Optional[datetime] = None,
    max_len: int = MAX_SHEET_NAME_LEN,
) -> str:
    """Build the tab title for a new record: "<first> <last> <timestamp>".

    Empty name parts are dropped rather than leaving double spaces. The result
    is cut hard at max_len; whitespace exposed by the cut is trimmed.
    """
    parts = [
        sanitize_name_part(fields.get(first_field)),
        sanitize_name_part(fields.get(last_field)),
        local_iso_ts(tz_name, now),
    ]
    name = " ".join(p for p in parts if p)
    return name[:max_len].rstrip()
