"""Cmdlet invocations used to build a SET switch and its management-OS vNICs.

Each builder returns a HostCommand; nothing here touches the host. Rendering
follows PowerShell quoting rules so names with spaces or quotes survive.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from hvswitch_core.models.switch import SwitchConfig, VNicConfig


# PowerShell closes a single-quoted literal on any of these
SINGLE_QUOTES = re.compile("(['\u2018\u2019\u201a\u201b])")


def ps_quote(value: str) -> str:
    """Single-quote a PowerShell string literal (embedded quotes doubled)."""
    return "'" + SINGLE_QUOTES.sub(r"\1\1", value) + "'"


def ps_value(value: Any) -> str:
    if isinstance(value, bool):
        return "$true" if value else "$false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, list | tuple):
        return ",".join(ps_value(v) for v in value)
    return ps_quote(str(value))


@dataclass(frozen=True)
class HostCommand:
    cmdlet: str
    # (parameter, value); a None value renders as a bare switch parameter
    parameters: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    def render(self) -> str:
        parts = [self.cmdlet]
        for name, value in self.parameters:
            parts.append(f"-{name}")
            if value is not None:
                parts.append(ps_value(value))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()


# ----------------------------
# Switch
# ----------------------------


def new_vm_switch(switch: SwitchConfig) -> HostCommand:
    return HostCommand(
        "New-VMSwitch",
        (
            ("Name", switch.name),
            ("NetAdapterName", list(switch.adapters)),
            ("EnableEmbeddedTeaming", True),
            ("MinimumBandwidthMode", "Weight"),
            ("AllowManagementOS", False),
        ),
    )


# ----------------------------
# Management-OS vNIC
# ----------------------------


def add_management_adapter(switch_name: str, vnic: VNicConfig) -> HostCommand:
    return HostCommand(
        "Add-VMNetworkAdapter",
        (("ManagementOS", None), ("Name", vnic.name), ("SwitchName", switch_name)),
    )


def rename_interface(vnic: VNicConfig) -> HostCommand:
    return HostCommand(
        "Rename-NetAdapter",
        (("Name", vnic.os_interface_name), ("NewName", vnic.name)),
    )


def set_bandwidth_weight(vnic: VNicConfig) -> HostCommand:
    return HostCommand(
        "Set-VMNetworkAdapter",
        (("ManagementOS", None), ("Name", vnic.name), ("MinimumBandwidthWeight", vnic.weight)),
    )


def set_access_vlan(vnic: VNicConfig) -> HostCommand:
    return HostCommand(
        "Set-VMNetworkAdapterVlan",
        (
            ("ManagementOS", None),
            ("VMNetworkAdapterName", vnic.name),
            ("Access", None),
            ("VlanId", vnic.vlan_id),
        ),
    )


def new_static_ip(vnic: VNicConfig) -> HostCommand:
    # No DefaultGateway: cluster networks are non-routed
    return HostCommand(
        "New-NetIPAddress",
        (
            ("InterfaceAlias", vnic.name),
            ("IPAddress", vnic.ip_address),
            ("PrefixLength", vnic.prefix_length),
        ),
    )
