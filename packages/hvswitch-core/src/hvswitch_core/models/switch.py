# hvswitch_core/models/switch.py

from pydantic import BaseModel, ConfigDict, Field


class SwitchConfig(BaseModel):
    """SET switch built from one or more physical adapters."""

    model_config = ConfigDict(extra="ignore")
    name: str
    adapters: list[str] = Field(default_factory=list)


class VNicConfig(BaseModel):
    """Management-OS vNIC carrying one class of cluster traffic."""

    model_config = ConfigDict(extra="ignore")
    name: str
    weight: int  # advisory 0-100, all vNICs should sum to ~100
    vlan_id: int
    ip_address: str
    prefix_length: int

    @property
    def os_interface_name(self) -> str:
        # Hyper-V names the host-side interface before it is renamed
        return f"vEthernet ({self.name})"
