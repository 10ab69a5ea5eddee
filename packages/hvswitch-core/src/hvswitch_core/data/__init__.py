from .weight_guidance import load_weight_guidance

__all__ = ["load_weight_guidance"]
