from datetime import timezone

import pytest

from bwhdesk.dashboard import build_dashboard
from bwhdesk.vps import parse_vps

GIB = 1024 * 1024 * 1024


@pytest.fixture
def sample():
    return parse_vps(
        {
            "hostname": "web.example.com",
            "node_location": "US, California",
            "node_location_id": "USCA_6",
            "node_alias": "v1234",
            "veid": 1234,
            "ssh_port": 22,
            "ve_status": "running",
            "os": "debian-12-x86_64",
            "ip_addresses": ["192.0.2.10", "192.0.2.11"],
            "plan_ram": 2 * GIB,
            "mem_available_kb": 1024 * 1024,
            "swap_total_kb": 512 * 1024,
            "swap_available_kb": 512 * 1024,
            "ve_used_disk_space_b": 5 * GIB,
            "plan_disk": 20 * GIB,
            "ve_disk_quota_gb": "20",
            "data_counter": 10 * GIB,
            "plan_monthly_data": 1000 * GIB,
            "monthly_data_multiplier": 1.0,
            "data_next_reset": 0,
        }
    )


def test_physical_location(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.physical_location == "US, California Node ID: v1234  VM ID: 1234"


def test_plain_fields(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.public_ip_address == "192.0.2.10"
    assert board.ssh_port == "22"
    assert board.status == "running"
    assert board.os == "debian-12-x86_64"
    assert board.hostname == "web.example.com"


def test_ram(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.ram == "1024.00/2048 MB"
    assert board.ram_percent == 50


def test_unused_swap_has_no_decimals(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.swap == "0/512 MB"
    assert board.swap_percent == 0


def test_disk_usage_ends_with_quota(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.disk_usage.endswith(f"/{sample.ve_disk_quota_gb} GB")
    assert 0 < board.disk_percent < 100


def test_bandwidth_mentions_location_and_multiplier(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.bandwidth_usage.endswith(
        "GB - USCA_6 Premium Bandwidth Multiplier: 1"
    )
    assert 0 < board.bandwidth_percent < 100


def test_reset_date_at_epoch(sample):
    board = build_dashboard(sample, timezone.utc)
    assert board.bandwidth_resets == "1970-01-01"


def test_more_usage_gives_higher_percent(sample):
    low = build_dashboard(sample, timezone.utc)
    sample.ve_used_disk_space_b = 15 * GIB
    high = build_dashboard(sample, timezone.utc)
    assert high.disk_percent > low.disk_percent


def test_percent_stays_in_range_when_over_plan(sample):
    sample.data_counter = sample.plan_monthly_data * 3
    board = build_dashboard(sample, timezone.utc)
    assert 0 <= board.bandwidth_percent <= 100


def test_empty_reply_does_not_fail():
    board = build_dashboard(parse_vps({}), timezone.utc)
    assert board.public_ip_address == ""
    assert board.ram_percent == board.disk_percent == board.bandwidth_percent == 0


def test_render_lists_values(sample):
    text = build_dashboard(sample, timezone.utc).render()
    assert "web.example.com" in text
    assert "running" in text
    assert len(text.splitlines()) == 11