from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from gspread.exceptions import WorksheetNotFound


class FakeWorksheet:
    def __init__(self, sh: "FakeSpreadsheet", title: str, cells: Optional[Dict[str, object]] = None):
        self.spreadsheet = sh
        self.title = title
        self.cells: Dict[str, object] = dict(cells or {})
        self.writes: List[str] = []
        self.fail_on: set = set()

    def update_acell(self, label: str, value):
        if label in self.fail_on:
            raise ValueError(f"Invalid cell label: {label}")
        self.writes.append(label)
        self.cells[label] = value

    def duplicate(self, insert_sheet_index=None, new_sheet_id=None, new_sheet_name=None):
        if any(ws.title == new_sheet_name for ws in self.spreadsheet.tabs):
            raise ValueError(f'A sheet with the name "{new_sheet_name}" already exists.')
        ws = FakeWorksheet(self.spreadsheet, new_sheet_name, self.cells)
        index = len(self.spreadsheet.tabs) if insert_sheet_index is None else insert_sheet_index
        self.spreadsheet.tabs.insert(index, ws)
        return ws


class FakeSpreadsheet:
    """Just enough of gspread.Spreadsheet for the intake pipeline."""

    def __init__(self, timezone: str = "America/New_York"):
        self.timezone = timezone
        self.tabs: List[FakeWorksheet] = []

    def add_tab(self, title: str, cells: Optional[Dict[str, object]] = None) -> FakeWorksheet:
        ws = FakeWorksheet(self, title, cells)
        self.tabs.append(ws)
        return ws

    def worksheets(self):
        return list(self.tabs)

    def worksheet(self, title: str):
        for ws in self.tabs:
            if ws.title == title:
                return ws
        raise WorksheetNotFound(title)


@pytest.fixture
def spreadsheet():
    sh = FakeSpreadsheet()
    sh.add_tab("Template", {"A1": "Client Intake", "E5": "", "L5": "", "E11": ""})
    return sh
