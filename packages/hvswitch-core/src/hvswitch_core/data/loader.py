from importlib.resources import as_file, files
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

T = TypeVar("T")

RESOURCE_PACKAGE = "hvswitch_core.data"


# -------------------------------
# Internal raw YAML reader (single source of truth)
# -------------------------------


def _read_yaml_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty YAML file: {p}")

    return data


# -------------------------------
# Public typed YAML loader
# -------------------------------


@overload
def load_yaml_typed[T](path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_yaml_typed[T](path: Path | str, *, model: type[T]) -> T: ...


def load_yaml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read YAML and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_yaml_typed("weight-guidance.yaml", model=WeightGuidance)
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_yaml_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e


def load_resource_typed[U: BaseModel](name: str, model: type[U]) -> U:
    """Load a YAML file shipped under hvswitch_core/data/resources."""
    resource = files(RESOURCE_PACKAGE).joinpath("resources", name)
    with as_file(resource) as path:
        return load_yaml_typed(path, model=model)
