from pathlib import Path

from hvswitch_core.data.loader import load_resource_typed, load_yaml_typed
from hvswitch_core.models.guidance import WeightGuidance

GUIDANCE_RESOURCE = "weight-guidance.yaml"


def load_weight_guidance(path: Path | str | None = None) -> WeightGuidance:
    """Packaged weight table, or an operator-supplied one when `path` is given."""
    if path is None:
        return load_resource_typed(GUIDANCE_RESOURCE, WeightGuidance)
    return load_yaml_typed(Path(path), model=WeightGuidance)
