from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping

log = logging.getLogger("form_intake.form_mapping")

JSON_CONTENT_TYPE = "application/json"


def normalize_request(request) -> Dict[str, Any]:
    """Flatten an inbound webhook request into field name -> value.

    JSON bodies are matched on the content-type prefix so charset suffixes
    still count. Anything else reads the query/form parameters, which never
    fails and yields {} when there are none.
    """
    content_type = request.content_type or ""
    if content_type.startswith(JSON_CONTENT_TYPE):
        # Raw bytes: json detects UTF-8/16/32 and fails on undecodable input.
        raw = request.get_data()
        if raw:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
            return data
    return request.values.to_dict()


def populate_fields(record, fields: Mapping[str, Any], field_map: Mapping[str, str]) -> List[str]:
    """Write each mapped field present in the submission into its cell.

    Absent fields leave their cell as the template had it. A failed write
    propagates and the remaining fields are not written.
    """
    written: List[str] = []
    for field, cell in field_map.items():
        if field not in fields:
            continue
        value = fields[field]
        record.update_acell(cell, "" if value is None else value)
        written.append(cell)
    log.debug("Wrote %s cell(s): %s", len(written), written)
    return written
