from bwhdesk.vps import Vps, parse_vps

SAMPLE = {
    "vm_type": "kvm",
    "hostname": "box.example.com",
    "node_alias": "node-a",
    "node_location": "US, California",
    "node_location_id": "USCA_6",
    "location_ipv6_ready": True,
    "plan": "kvmv5-20g",
    "plan_disk": 21474836480,
    "plan_ram": 1073741824,
    "os": "debian-12-x86_64",
    "email": "someone@example.com",
    "plan_monthly_data": 1099511627776,
    "data_counter": 5368709120,
    "monthly_data_multiplier": 1.5,
    "data_next_reset": 1700000000,
    "ip_addresses": ["192.0.2.10", "192.0.2.11"],
    "private_ip_addresses": ["10.0.0.5"],
    "ip_nullroutes": [],
    "available_isos": ["iso-a", "iso-b"],
    "ptr": {"192.0.2.11": "b.example.com", "192.0.2.10": "a.example.com"},
    "plan_max_ipv6s": 16,
    "rdns_api_available": True,
    "plan_private_network_available": False,
    "location_private_network_available": True,
    "suspended": False,
    "policy_violation": False,
    "suspension_count": 2,
    "total_abuse_points": 7,
    "max_abuse_points": 100,
    "ve_status": "running",
    "ssh_port": 2222,
    "veid": 123456,
    "ve_used_disk_space_b": 3221225472,
    "ve_disk_quota_gb": "20",
    "swap_total_kb": 262144,
    "swap_available_kb": 131072,
    "mem_available_kb": 524288,
    "error": 0,
}


def test_parse_full_reply_keeps_values():
    vps = parse_vps(SAMPLE)
    assert vps.hostname == SAMPLE["hostname"]
    assert vps.vm_type == SAMPLE["vm_type"]
    assert vps.plan_ram == SAMPLE["plan_ram"]
    assert vps.plan_monthly_data == SAMPLE["plan_monthly_data"]
    assert vps.monthly_data_multiplier == SAMPLE["monthly_data_multiplier"]
    assert vps.ip_addresses == SAMPLE["ip_addresses"]
    assert vps.private_ip_addresses == SAMPLE["private_ip_addresses"]
    assert vps.available_isos == SAMPLE["available_isos"]
    assert vps.ve_status == SAMPLE["ve_status"]
    assert vps.ssh_port == float(SAMPLE["ssh_port"])
    assert vps.veid == float(SAMPLE["veid"])
    assert vps.suspension_count == SAMPLE["suspension_count"]
    assert vps.location_ipv6_ready is True
    assert vps.ve_disk_quota_gb == SAMPLE["ve_disk_quota_gb"]


def test_ptr_keys_are_sorted():
    vps = parse_vps(SAMPLE)
    assert list(vps.ptr) == sorted(SAMPLE["ptr"])
    assert vps.ptr == SAMPLE["ptr"]


def test_empty_object_gives_defaults():
    assert parse_vps({}) == Vps()


def test_mistyped_values_fall_back():
    vps = parse_vps({"hostname": 5, "suspended": "yes", "ssh_port": "22", "ip_addresses": "x"})
    assert vps.hostname == Vps().hostname
    assert vps.suspended is False
    assert vps.ssh_port == Vps().ssh_port
    assert vps.ip_addresses == []


def test_numeric_strings_convert_for_large_counters():
    vps = parse_vps({"data_counter": "4096", "plan_disk": 1024.0})
    assert vps.data_counter == 4096
    assert vps.plan_disk == 1024


def test_non_integral_int_field_is_zero():
    vps = parse_vps({"plan_max_ipv6s": 2.5, "max_abuse_points": 2**40})
    assert vps.plan_max_ipv6s == Vps().plan_max_ipv6s
    assert vps.max_abuse_points == Vps().max_abuse_points


def test_non_string_list_items_become_empty_strings():
    vps = parse_vps({"ip_addresses": ["192.0.2.1", 3]})
    assert vps.ip_addresses == ["192.0.2.1", ""]