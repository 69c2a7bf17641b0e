"""Checkable table of saved server entries and its select-all header."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, IntEnum
from typing import Any

from bwhdesk.vpsinfo import VpsInfo

ALIGN_CENTER = "center"


class CheckState(IntEnum):
    UNCHECKED = 0
    PARTIALLY_CHECKED = 1
    CHECKED = 2


class Role(Enum):
    DISPLAY = "display"
    CHECK_STATE = "check_state"
    TEXT_ALIGNMENT = "text_alignment"


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Selection(IntEnum):
    UNCHECKED = 0
    CHECKED = 1
    ALL = 2


_HEADERS = {1: "Title", 2: "Hostname", 3: "IP Addresses", 4: "VEID", 5: "API Key"}
_COLUMNS = 6


class VpsTableModel:
    """Rows of VpsInfo with a check box in column 0."""

    def __init__(self) -> None:
        self._rows: list[VpsInfo] = []
        self._checked: list[bool] = []
        self._watchers: list[Callable[[int], None]] = []

    def _watch(self, callback: Callable[[int], None]) -> None:
        self._watchers.append(callback)

    def _valid(self, row: int) -> bool:
        return 0 <= row < len(self._rows)

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return _COLUMNS

    def data(self, row: int, column: int, role: Role = Role.DISPLAY) -> Any:
        """Return the cell value for a role, or None where there is none."""
        if not self._valid(row) or not 0 <= column < _COLUMNS:
            return None
        if column == 0:
            if role is Role.CHECK_STATE:
                return CheckState.CHECKED if self._checked[row] else CheckState.UNCHECKED
            return None
        if role is Role.TEXT_ALIGNMENT:
            return ALIGN_CENTER
        if role is Role.DISPLAY:
            info = self._rows[row]
            return {
                1: info.title,
                2: info.hostname,
                3: ", ".join(info.ip_addresses),
                4: info.veid,
                5: info.api_key,
            }[column]
        return None

    def set_checked(self, row: int, state: CheckState) -> bool:
        """Set a row's check box; False if the row does not exist."""
        if not self._valid(row):
            return False
        self._checked[row] = state == CheckState.CHECKED
        for watcher in list(self._watchers):
            watcher(row)
        return True

    def header_data(
        self, section: int, orientation: Orientation, role: Role = Role.DISPLAY
    ) -> Any:
        if role is not Role.DISPLAY:
            return None
        if orientation is Orientation.HORIZONTAL:
            return _HEADERS.get(section)
        return section + 1

    def add(self, info: VpsInfo, checked: bool = False) -> None:
        self._rows.append(info)
        self._checked.append(bool(checked))

    def set_items(
        self, items: Iterable[VpsInfo], check_states: Iterable[bool] | None = None
    ) -> None:
        """Replace all rows; check states are kept only if they match in length."""
        self.clear()
        self._rows = list(items)
        states = list(check_states) if check_states is not None else []
        if states and len(states) == len(self._rows):
            self._checked = [bool(s) for s in states]
        else:
            self._checked = [False] * len(self._rows)

    def clear(self) -> None:
        self._rows = []
        self._checked = []

    def check_states(self) -> list[bool]:
        return list(self._checked)

    def items(self, selection: Selection = Selection.ALL) -> list[VpsInfo]:
        """Return all rows, or only the checked or unchecked ones."""
        if selection == Selection.ALL:
            return list(self._rows)
        want = selection == Selection.CHECKED
        return [info for info, checked in zip(self._rows, self._checked) if checked == want]

    def to_json(self, selection: Selection = Selection.ALL) -> list[dict[str, Any]]:
        return [info.to_json() for info in self.items(selection)]

    def checked_indexes(self) -> list[int]:
        return [row for row, checked in enumerate(self._checked) if checked]

    def header_state(self) -> CheckState:
        """Aggregate check state of all rows."""
        count = sum(self._checked)
        if count == len(self._checked):
            return CheckState.CHECKED
        if count > 0:
            return CheckState.PARTIALLY_CHECKED
        return CheckState.UNCHECKED


class CheckBoxHeader:
    """Select-all check box bound to a VpsTableModel."""

    def __init__(self, model: VpsTableModel) -> None:
        self.model = model
        self.state = CheckState.UNCHECKED
        model._watch(lambda _row: self.sync())

    def click(self) -> CheckState:
        """Toggle the header and apply the new state to every row."""
        self.state = (
            CheckState.CHECKED if self.state == CheckState.UNCHECKED else CheckState.UNCHECKED
        )
        target = self.state
        for row in range(self.model.row_count()):
            self.model.set_checked(row, target)
        return self.state

    def sync(self) -> CheckState:
        """Recompute the header from the rows' check boxes."""
        self.state = self.model.header_state()
        return self.state