# src/common/utils/formatters.py

from typing import Any, Callable, List, Mapping, NamedTuple, Optional

NOT_PROVIDED = "N/A"
PROVIDED = "Provided"


def is_provided(value: Any) -> bool:
    """A form value counts as provided unless it is None, an empty string or False."""
    return value is not None and value != "" and value is not False


class DisplayRule(NamedTuple):
    """One step in the display-value lookup for structured form values."""
    name: str
    extract: Callable[[Mapping[str, Any]], Optional[Any]]


def _key(name: str) -> Callable[[Mapping[str, Any]], Optional[Any]]:
    def extract(obj: Mapping[str, Any]) -> Optional[Any]:
        value = obj.get(name)
        return value if is_provided(value) else None
    return extract


def _id_unless_other(obj: Mapping[str, Any]) -> Optional[Any]:
    value = obj.get("id")
    if is_provided(value) and value != "other":
        return value
    return None


def _first_string(obj: Mapping[str, Any]) -> Optional[str]:
    for value in obj.values():
        return value if isinstance(value, str) else None
    return None


# Checked in order; the first rule that yields a value wins.
DISPLAY_RULES: List[DisplayRule] = [
    DisplayRule("label", _key("label")),
    DisplayRule("value", _key("value")),
    DisplayRule("name", _key("name")),
    DisplayRule("id", _id_unless_other),
    DisplayRule("other", _key("other")),
    DisplayRule("first_string", _first_string),
]


def _format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(data: Any) -> str:
    """
    Turn a loosely-shaped form value into a display string.

    Strings and numbers pass through, sequences are joined with ", ",
    and mappings are resolved through DISPLAY_RULES.
    """
    if data is None or data == "":
        return NOT_PROVIDED
    if isinstance(data, str):
        return data
    if isinstance(data, (int, float)):
        return _format_number(data)
    if isinstance(data, (list, tuple)):
        if not data:
            return NOT_PROVIDED
        return ", ".join(format_value(item) for item in data)
    if isinstance(data, Mapping):
        for rule in DISPLAY_RULES:
            found = rule.extract(data)
            if found is not None:
                return format_value(found)
        return PROVIDED
    return str(data)


# --- Field-specific overrides ---

def format_best_days(value: Any) -> str:
    """Preferred days arrive either as a plain list or as {"bestDays": [...], "other": "..."}."""
    if not is_provided(value):
        return NOT_PROVIDED
    if isinstance(value, (list, tuple)):
        return format_value(value)
    if isinstance(value, Mapping) and is_provided(value.get("bestDays")):
        display = format_value(value["bestDays"])
        if is_provided(value.get("other")):
            display += f" (Other: {format_value(value['other'])})"
        return display
    return NOT_PROVIDED


def format_current_cleaner(value: Any) -> str:
    if not is_provided(value):
        return NOT_PROVIDED
    if isinstance(value, Mapping) and is_provided(value.get("currentCleaner")):
        display = format_value(value["currentCleaner"])
        if is_provided(value.get("other")):
            display += f" ({format_value(value['other'])})"
        return display
    return format_value(value)


def format_cleaning_type(value: Any, other: Any = None) -> str:
    display = format_value(value)
    if is_provided(other):
        display += f" ({format_value(other)})"
    return display
