from __future__ import annotations

import logging
from typing import Callable, Optional

import gspread
from gspread.exceptions import WorksheetNotFound

log = logging.getLogger("form_intake.sheets")


def auth_sheets(service_account_json_path: str):
    from google.oauth2.service_account import Credentials

    scopes = ["https://www.googleapis.com/auth/spreadsheets"]
    creds = Credentials.from_service_account_file(service_account_json_path, scopes=scopes)
    return gspread.authorize(creds)


def open_spreadsheet(gc, sheet_id: str):
    return gc.open_by_key(sheet_id)


def store_opener(service_account_json_path: str) -> Callable[[str], gspread.Spreadsheet]:
    """Return sheet_id -> Spreadsheet.

    Authorizes up front so the shared client is never created from a request
    thread; every call opens a fresh spreadsheet handle.
    """
    gc = auth_sheets(service_account_json_path)

    def _open(sheet_id: str):
        return open_spreadsheet(gc, sheet_id)

    return _open


def find_template(sh, name: str) -> Optional[gspread.Worksheet]:
    try:
        return sh.worksheet(name)
    except WorksheetNotFound:
        return None


def duplicate_template(sh, template, new_name: str):
    # Appended as the last tab, titled in the same request.
    index = len(sh.worksheets())
    record = template.duplicate(insert_sheet_index=index, new_sheet_name=new_name)
    log.debug("Duplicated %r as %r at index %s", template.title, new_name, index)
    return record
