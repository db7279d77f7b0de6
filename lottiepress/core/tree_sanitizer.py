"""
Removal of default-valued and empty fields from a Lottie document tree.

Lottie players treat a missing field and a field holding its default value
the same way, so such fields can be dropped without changing the animation.
"""

from typing import Any, Callable, Dict, Tuple


FieldPredicate = Callable[[Any], bool]

# Keys whose numeric value can be dropped when it equals the default.
NUMERIC_DEFAULTS: Dict[str, float] = {
    "ddd": 0,
    "ind": 0,
    "ty": 0,
    "bm": 0,
    "d": 0,
    "st": 0,
    "p": 0,
    "a": 0,
    "sk": 0,
    "sa": 0,
    "r": 1,
    "s": 100,
}

# Keys whose string value can be dropped when empty.
EMPTY_STRING_KEYS = ("nm", "mn", "cl", "ln", "u", "g", "a", "k", "d", "tc")

# Keys whose boolean value can be dropped when false.
FALSE_FLAG_KEYS = ("hd",)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _equals_number(default: float) -> FieldPredicate:
    return lambda value: _is_number(value) and value == default


def _is_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value == ""


def _is_false(value: Any) -> bool:
    return value is False


def _build_field_rules() -> Dict[str, Tuple[FieldPredicate, ...]]:
    rules: Dict[str, Tuple[FieldPredicate, ...]] = {}
    for key, default in NUMERIC_DEFAULTS.items():
        rules[key] = rules.get(key, ()) + (_equals_number(default),)
    for key in EMPTY_STRING_KEYS:
        rules[key] = rules.get(key, ()) + (_is_empty_string,)
    for key in FALSE_FLAG_KEYS:
        rules[key] = rules.get(key, ()) + (_is_false,)
    return rules


# key -> predicates; the field is removed if any predicate matches its value
DEFAULT_FIELD_RULES: Dict[str, Tuple[FieldPredicate, ...]] = _build_field_rules()


def is_removable(key: str, value: Any) -> bool:
    """
    Check whether a mapping field can be dropped.

    Args:
        key: Field name
        value: Field value, before any recursive sanitizing

    Returns:
        True if the value is null, empty, or the default for this key
    """
    if value is None:
        return True
    if isinstance(value, list) and not value:
        return True
    if _is_empty_string(value):
        return True
    return any(predicate(value) for predicate in DEFAULT_FIELD_RULES.get(key, ()))


def sanitize(value: Any) -> Any:
    """
    Recursively remove default-valued and empty fields.

    Lists keep every element in order; only fields inside mappings are
    removed. The input is not modified.
    """
    if isinstance(value, list):
        return [sanitize(item) for item in value]
    if isinstance(value, dict):
        return {key: sanitize(item) for key, item in value.items() if not is_removable(key, item)}
    return value
