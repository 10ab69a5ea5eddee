"""
Tests for switch and vNIC records.
"""

import pytest
from hvswitch_core.models.switch import SwitchConfig, VNicConfig
from pydantic import ValidationError


class TestVNicConfig:
    """Test vNIC record coercion and derived names."""

    def test_string_numbers_are_coerced(self):
        vnic = VNicConfig(name="LM", weight="25", vlan_id="30", ip_address="10.0.30.11", prefix_length="24")

        assert vnic.weight == 25
        assert vnic.vlan_id == 30
        assert vnic.prefix_length == 24

    @pytest.mark.parametrize("field", ["weight", "vlan_id", "prefix_length"])
    def test_non_numeric_fails(self, field):
        values = {"name": "LM", "weight": 25, "vlan_id": 30, "ip_address": "10.0.30.11", "prefix_length": 24}
        values[field] = "abc"

        with pytest.raises(ValidationError):
            VNicConfig(**values)

    def test_no_range_checks(self):
        vnic = VNicConfig(name="X", weight=250, vlan_id=9999, ip_address="not-an-ip", prefix_length=99)
        assert vnic.weight == 250
        assert vnic.ip_address == "not-an-ip"

    def test_os_interface_name(self):
        vnic = VNicConfig(name="CLS-HB", weight=10, vlan_id=40, ip_address="10.0.40.11", prefix_length=24)
        assert vnic.os_interface_name == "vEthernet (CLS-HB)"


class TestSwitchConfig:
    def test_adapters_default_empty(self):
        assert SwitchConfig(name="SETswitch").adapters == []
