import dataclasses
from typing import Any, Dict


def convert_field_name(field_name: str) -> str:
    """
    Converts a model field name to its workflow key: drops the trailing
    underscore and turns underscores into hyphens.
    """
    return field_name.rstrip("_").replace("_", "-")


def key(name: str, keep_empty: bool = False) -> Dict[str, Any]:
    """Field metadata overriding the generated key and the empty-value rule."""
    return {"key": name, "keep_empty": keep_empty}


def keep() -> Dict[str, Any]:
    return {"keep_empty": True}


@dataclasses.dataclass
class Node:
    """
    Base for every element of a workflow document.

    Serialization follows GitHub's schema: keys come from field names (or the
    `key` metadata), and unset values (None, False, 0, empty strings and
    collections) are left out unless the field is marked `keep_empty`.
    """

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            converted = _convert(value)
            if not converted and not field.metadata.get("keep_empty", False):
                continue
            out[field.metadata.get("key") or convert_field_name(field.name)] = converted
        return out


def _convert(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    if isinstance(value, dict):
        return {k: _convert(v) for k, v in value.items()}
    return value
