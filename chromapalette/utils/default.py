from typing import Any, Mapping, Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def nested_or_default(data: Mapping[str, Any], path: str, default: T) -> T:
    """
    Look up a dotted ``path`` such as ``"alpha.isEnabled"`` in nested mappings.

    Missing keys, ``None`` values and non-mapping intermediates all yield ``default``.
    """
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
    return value_or_default(current, default)
