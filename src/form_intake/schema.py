from __future__ import annotations

from typing import Dict

# Intake template layout: submission field name -> A1 cell on the template tab.
FIELD_MAP: Dict[str, str] = {
    "First Name": "E5",
    "Last Name": "L5",
    "Date of Birth": "E7",
    "Phone": "L7",
    "Address": "E9",
    "City": "L9",
    "Email": "E11",
    "Company": "L11",
    "Service Requested": "E13",
    "Notes": "E15",
}

FIRST_NAME_FIELD = "First Name"
LAST_NAME_FIELD = "Last Name"

DEFAULT_TEMPLATE_SHEET = "Template"

# Google Sheets rejects these in tab titles and caps titles at 99 characters.
INVALID_SHEET_NAME_CHARS = "[]*?:/\\"
MAX_SHEET_NAME_LEN = 99
