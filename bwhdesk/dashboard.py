"""Human-readable overview of a server's live service information."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from bwhdesk.vps import Vps

_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


def _percent(part: float, whole: float) -> int:
    """Whole-number percentage kept within a progress bar's 0..100 range."""
    if whole <= 0:
        return 0
    return max(0, min(100, int(part / whole * 100)))


def _reset_date(timestamp: int, tz: tzinfo | None) -> str:
    try:
        moment = datetime.fromtimestamp(timestamp, tz)
    except (OverflowError, OSError, ValueError):
        return ""
    return moment.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class Dashboard:
    """The values shown for one server, already formatted."""

    physical_location: str
    public_ip_address: str
    ssh_port: str
    status: str
    os: str
    hostname: str
    ram: str
    ram_percent: int
    swap: str
    swap_percent: int
    disk_usage: str
    disk_percent: int
    bandwidth_resets: str
    bandwidth_percent: int
    bandwidth_usage: str

    def render(self) -> str:
        """Return the overview as labelled lines of text."""
        rows = [
            ("Hostname", self.hostname),
            ("Status", self.status),
            ("Physical location", self.physical_location),
            ("Public IP address", self.public_ip_address),
            ("SSH port", self.ssh_port),
            ("Operating system", self.os),
            ("RAM", f"{self.ram} ({self.ram_percent}%)"),
            ("Swap", f"{self.swap} ({self.swap_percent}%)"),
            ("Disk usage", f"{self.disk_usage} ({self.disk_percent}%)"),
            ("Bandwidth usage", f"{self.bandwidth_usage} ({self.bandwidth_percent}%)"),
            ("Bandwidth resets", self.bandwidth_resets),
        ]
        width = max(len(label) for label, _ in rows)
        return "\n".join(f"{label + ':':<{width + 1}} {value}" for label, value in rows)


def build_dashboard(vps: Vps, tz: tzinfo | None = None) -> Dashboard:
    """Format a Vps for display; dates are shown in tz, or local time if None."""
    physical_location = (
        f"{vps.node_location} Node ID: {vps.node_alias}  VM ID: {vps.veid:g}"
    )

    ram_total = vps.plan_ram // _MIB
    ram_plan_kb = vps.plan_ram // 1024
    ram_usage = ram_plan_kb - vps.mem_available_kb
    ram = f"{ram_usage / 1024:.2f}/{ram_total:g} MB"

    swap_total = vps.swap_total_kb / 1024
    swap_usage = (vps.swap_total_kb - vps.swap_available_kb) / 1024
    swap_digits = 0 if swap_usage == 0 else 2
    swap = f"{swap_usage:.{swap_digits}f}/{swap_total:.0f} MB"

    used_disk = vps.ve_used_disk_space_b / _GIB
    disk_usage = f"{used_disk:.1f}/{vps.ve_disk_quota_gb} GB"

    multiplier = vps.monthly_data_multiplier
    counter = vps.data_counter * multiplier / _GIB
    monthly_data = vps.plan_monthly_data * multiplier / _GIB
    bandwidth_usage = (
        f"{counter:.2f}/{monthly_data:.0f} GB - {vps.node_location_id} "
        f"Premium Bandwidth Multiplier: {multiplier:g}"
    )

    return Dashboard(
        physical_location=physical_location,
        public_ip_address=vps.ip_addresses[0] if vps.ip_addresses else "",
        ssh_port=f"{vps.ssh_port:g}",
        status=vps.ve_status,
        os=vps.os,
        hostname=vps.hostname,
        ram=ram,
        ram_percent=_percent(ram_usage, ram_plan_kb),
        swap=swap,
        swap_percent=_percent(swap_usage, swap_total),
        disk_usage=disk_usage,
        disk_percent=_percent(vps.ve_used_disk_space_b, vps.plan_disk),
        bandwidth_resets=_reset_date(vps.data_next_reset, tz),
        bandwidth_percent=_percent(vps.data_counter, vps.plan_monthly_data),
        bandwidth_usage=bandwidth_usage,
    )