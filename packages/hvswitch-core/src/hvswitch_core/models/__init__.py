from .guidance import WeightGuidance, WeightRule
from .switch import SwitchConfig, VNicConfig

__all__ = ["SwitchConfig", "VNicConfig", "WeightGuidance", "WeightRule"]
