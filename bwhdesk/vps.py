"""Live service information reported for one virtual server."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _flag(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _real(value: Any) -> float:
    return float(value) if _is_number(value) else 0.0


def _small_int(value: Any) -> int:
    """Integral numbers within 32-bit range; anything else is 0."""
    if not _is_number(value):
        return 0
    if float(value) != int(value):
        return 0
    number = int(value)
    return number if _INT_MIN <= number <= _INT_MAX else 0


def _long(value: Any) -> int:
    """Numbers, numeric strings and booleans as integers; anything else is 0."""
    if isinstance(value, bool):
        return int(value)
    if _is_number(value):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _unsigned(value: Any) -> int:
    return max(_long(value), 0)


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value]


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {key: _text(value[key]) for key in sorted(value)}


@dataclass
class Vps:
    """Fields of a getLiveServiceInfo reply."""

    vm_type: str = ""
    hostname: str = ""
    node_alias: str = ""
    node_location: str = ""
    node_location_id: str = ""
    location_ipv6_ready: bool = False
    plan: str = ""
    plan_disk: int = 0
    plan_ram: int = 0
    os: str = ""
    email: str = ""
    plan_monthly_data: int = 0
    data_counter: int = 0
    monthly_data_multiplier: float = 0.0
    data_next_reset: int = 0
    ip_addresses: list[str] = field(default_factory=list)
    private_ip_addresses: list[str] = field(default_factory=list)
    ip_nullroutes: list[str] = field(default_factory=list)
    iso1: str = ""
    iso2: str = ""
    available_isos: list[str] = field(default_factory=list)
    plan_max_ipv6s: int = 0
    rdns_api_available: bool = False
    plan_private_network_available: bool = False
    location_private_network_available: bool = False
    ptr: dict[str, str] = field(default_factory=dict)
    suspended: bool = False
    policy_violation: bool = False
    suspension_count: int = 0
    total_abuse_points: int = 0
    max_abuse_points: int = 0
    ve_status: str = ""
    ssh_port: float = 0.0
    veid: float = 0.0
    ve_used_disk_space_b: int = 0
    ve_disk_quota_gb: str = ""
    swap_total_kb: int = 0
    swap_available_kb: int = 0
    mem_available_kb: int = 0


def parse_vps(data: Mapping[str, Any]) -> Vps:
    """Build a Vps from a decoded JSON object, defaulting missing or mistyped fields."""
    get = data.get
    return Vps(
        vm_type=_text(get("vm_type")),
        hostname=_text(get("hostname")),
        node_alias=_text(get("node_alias")),
        node_location=_text(get("node_location")),
        node_location_id=_text(get("node_location_id")),
        location_ipv6_ready=_flag(get("location_ipv6_ready")),
        plan=_text(get("plan")),
        plan_disk=_unsigned(get("plan_disk")),
        plan_ram=_unsigned(get("plan_ram")),
        os=_text(get("os")),
        email=_text(get("email")),
        plan_monthly_data=_unsigned(get("plan_monthly_data")),
        data_counter=_unsigned(get("data_counter")),
        monthly_data_multiplier=_real(get("monthly_data_multiplier")),
        data_next_reset=_long(get("data_next_reset")),
        ip_addresses=_strings(get("ip_addresses")),
        private_ip_addresses=_strings(get("private_ip_addresses")),
        ip_nullroutes=_strings(get("ip_nullroutes")),
        available_isos=_strings(get("available_isos")),
        ptr=_string_map(get("ptr")),
        plan_max_ipv6s=_small_int(get("plan_max_ipv6s")),
        rdns_api_available=_flag(get("rdns_api_available")),
        plan_private_network_available=_flag(get("plan_private_network_available")),
        location_private_network_available=_flag(
            get("location_private_network_available")
        ),
        suspended=_flag(get("suspended")),
        policy_violation=_flag(get("policy_violation")),
        suspension_count=_small_int(get("suspension_count")),
        total_abuse_points=_small_int(get("total_abuse_points")),
        max_abuse_points=_small_int(get("max_abuse_points")),
        ve_status=_text(get("ve_status")),
        ssh_port=_real(get("ssh_port")),
        veid=_real(get("veid")),
        ve_used_disk_space_b=_unsigned(get("ve_used_disk_space_b")),
        ve_disk_quota_gb=_text(get("ve_disk_quota_gb")),
        swap_total_kb=_unsigned(get("swap_total_kb")),
        swap_available_kb=_unsigned(get("swap_available_kb")),
        mem_available_kb=_unsigned(get("mem_available_kb")),
    )