"""A saved server entry: title, address details and credentials."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class VpsInfo:
    """One entry of the configuration list."""

    title: str = ""
    hostname: str = ""
    ip_addresses: list[str] = field(default_factory=list)
    veid: str = ""
    api_key: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the entry as a JSON-ready dict."""
        return {
            "title": self.title,
            "hostname": self.hostname,
            "ip_addresses": list(self.ip_addresses),
            "veid": self.veid,
            "api_key": self.api_key,
        }

    def __str__(self) -> str:
        return (
            f"Title: {self.title} Hostname: {self.hostname} "
            f"IP Addresses: {', '.join(self.ip_addresses)} "
            f"VEID: {self.veid} API Key: {self.api_key}"
        )


def vps_info_from_json(data: Mapping[str, Any]) -> VpsInfo:
    """Build an entry from a decoded JSON object; mistyped fields become empty."""
    addresses = data.get("ip_addresses")
    return VpsInfo(
        title=_text(data.get("title")),
        hostname=_text(data.get("hostname")),
        ip_addresses=[_text(a) for a in addresses] if isinstance(addresses, list) else [],
        veid=_text(data.get("veid")),
        api_key=_text(data.get("api_key")),
    )