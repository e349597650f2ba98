from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .schema import DEFAULT_TEMPLATE_SHEET, FIELD_MAP, FIRST_NAME_FIELD, LAST_NAME_FIELD


@dataclass(frozen=True)
class IntakeConfig:
    sheet_id: str
    template_name: str = DEFAULT_TEMPLATE_SHEET
    field_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(FIELD_MAP)))
    first_name_field: str = FIRST_NAME_FIELD
    last_name_field: str = LAST_NAME_FIELD
    sa_json: Optional[str] = None


def require(name: str, value: str | None) -> str:
    if not value:
        raise SystemExit(f"Missing required value: {name}")
    return value


def load_field_map(path: Path) -> Mapping[str, str]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not data:
        raise SystemExit(f"Field map {path} must be a non-empty JSON object.")
    bad = [k for k, v in data.items() if not isinstance(v, str) or not v.strip()]
    if bad:
        raise SystemExit(f"Field map {path} has no cell address for: {bad}")
    return MappingProxyType({str(k): v.strip() for k, v in data.items()})


def load_config(
    sheet_id: str | None = None,
    sa_json: str | None = None,
    template_name: str | None = None,
) -> IntakeConfig:
    """Read deployment settings once; explicit arguments win over env."""
    field_map_path = os.getenv("FIELD_MAP_PATH", "").strip()
    field_map = load_field_map(Path(field_map_path)) if field_map_path else MappingProxyType(dict(FIELD_MAP))

    return IntakeConfig(
        sheet_id=require("GSHEET_ID/--sheet-id", sheet_id or os.getenv("GSHEET_ID")),
        template_name=template_name or os.getenv("TEMPLATE_SHEET_NAME") or DEFAULT_TEMPLATE_SHEET,
        field_map=field_map,
        first_name_field=os.getenv("FIRST_NAME_FIELD") or FIRST_NAME_FIELD,
        last_name_field=os.getenv("LAST_NAME_FIELD") or LAST_NAME_FIELD,
        sa_json=sa_json or os.getenv("GOOGLE_APPLICATION_CREDENTIALS"),
    )
