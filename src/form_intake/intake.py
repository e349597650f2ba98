from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from .config import IntakeConfig
from .form_mapping import populate_fields
from .sheets import duplicate_template, find_template
from .util import build_sheet_name

log = logging.getLogger("form_intake.intake")


class IntakeError(RuntimeError):
    pass


class TemplateNotFoundError(IntakeError):
    def __init__(self, name: str):
        super().__init__(f'Template sheet "{name}" not found')
        self.name = name


def process_submission(sh, fields: Mapping[str, Any], cfg: IntakeConfig, now: Optional[datetime] = None):
    """Duplicate the template tab for one submission and fill in its cells.

    Returns the new worksheet. Nothing is rolled back if a write fails part way.
    """
    template = find_template(sh, cfg.template_name)
    if template is None:
        raise TemplateNotFoundError(cfg.template_name)

    name = build_sheet_name(
        fields,
        sh.timezone,
        first_field=cfg.first_name_field,
        last_field=cfg.last_name_field,
        now=now,
    )
    record = duplicate_template(sh, template, name)
    written = populate_fields(record, fields, cfg.field_map)
    log.info("Created record %r (%s field(s) written)", name, len(written))
    return record
