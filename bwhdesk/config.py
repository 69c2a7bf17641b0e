"""The JSON file of saved servers: adding, removing, importing and exporting."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from bwhdesk.vpsinfo import VpsInfo

CONFIG_FILENAME = "config.json"


class DuplicateEntryError(ValueError):
    """An entry with the same VEID and API key is already saved."""


class InvalidCredentialsError(ValueError):
    """The API rejected the VEID or API key."""


class _InfoSource(Protocol):
    def get_live_service_info(self, veid: str, api_key: str) -> dict[str, Any]: ...


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def make_entry(veid: str, api_key: str, info: Mapping[str, Any]) -> dict[str, Any]:
    """Build the saved entry for a server from its live service information."""
    addresses = info.get("ip_addresses")
    return {
        "title": f"{_text(info.get('hostname'))} [{_text(info.get('plan'))}] "
        f"{_text(info.get('vm_type'))}",
        "hostname": _text(info.get("hostname")),
        "veid": veid,
        "api_key": api_key,
        "ip_addresses": list(addresses) if isinstance(addresses, list) else [],
    }


def _parse(raw: bytes) -> list[Any]:
    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return []
    return document if isinstance(document, list) else []


class ConfigStore:
    """A list of server entries kept as an indented JSON array on disk."""

    def __init__(self, path: str | Path = CONFIG_FILENAME) -> None:
        self.path = Path(path)

    def load(self) -> list[Any]:
        """Return the saved entries; a missing or unreadable file gives none."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            return []
        return _parse(raw)

    def save(self, entries: Iterable[Mapping[str, Any] | VpsInfo]) -> None:
        """Write the entries, replacing the file."""
        document = [
            entry.to_json() if isinstance(entry, VpsInfo) else dict(entry)
            for entry in entries
        ]
        text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False)
        self.path.write_text(text + "\n", encoding="utf-8")

    def contains(self, veid: str, api_key: str) -> bool:
        """True if an entry with this VEID and API key is saved."""
        return any(
            isinstance(entry, Mapping)
            and entry.get("veid") == veid
            and entry.get("api_key") == api_key
            for entry in self.load()
        )

    def add(self, veid: str, api_key: str, client: _InfoSource) -> dict[str, Any]:
        """Check the credentials against the API, then save and return a new entry."""
        entries = self.load()
        if self.contains(veid, api_key):
            raise DuplicateEntryError("veid and api_key already exists")
        info = client.get_live_service_info(veid, api_key)
        error = info.get("error")
        if isinstance(error, bool) or error != 0:
            raise InvalidCredentialsError("veid or api_key error, please check again")
        entry = make_entry(veid, api_key, info)
        entries.append(entry)
        self.save(entries)
        return entry

    def remove(self, indexes: Iterable[int]) -> list[Any]:
        """Drop the entries at the given positions, save, and return what is left."""
        entries = self.load()
        doomed = {i for i in indexes if 0 <= i < len(entries)}
        kept = [entry for i, entry in enumerate(entries) if i not in doomed]
        self.save(kept)
        return kept

    def export_to(self, path: str | Path) -> None:
        """Copy the saved file, byte for byte, to another path."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            raw = b""
        Path(path).write_bytes(raw)

    def import_from(self, path: str | Path) -> list[Any]:
        """Replace the saved file with another file's contents and return its entries."""
        raw = Path(path).read_bytes()
        self.path.write_bytes(raw)
        return _parse(raw)