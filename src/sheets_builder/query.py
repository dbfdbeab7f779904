"""Declarative query parameter tables for the convenience operations.

Each operation lists the keyword arguments it accepts and the query key each
one maps to. ``collect_query`` turns the supplied arguments into ordered
``(key, value)`` pairs, omitting anything the caller did not supply.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

QueryValue = Union[str, Enum, Sequence[Union[str, Enum]]]
Query = Union[Mapping[str, QueryValue], Iterable[tuple[str, QueryValue]]]


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class QueryOption:
    """Maps one keyword argument to a query key.

    Attributes:
        argument: Keyword argument name on the convenience operation.
        key: Query parameter key sent to the API.
        flag: Boolean option, sent as "true" only when the argument is true.
        multiple: Sequence option, sent as one pair per element.
    """

    argument: str
    key: str
    flag: bool = False
    multiple: bool = False

    def items(self, value: Any) -> list[tuple[str, str]]:
        """Return the query pairs for ``value``."""
        if self.flag:
            return [(self.key, "true")] if value else []
        if value is None:
            return []
        if self.multiple:
            if isinstance(value, (str, Enum)):
                value = [value]
            return [(self.key, _text(v)) for v in value]
        return [(self.key, _text(value))]


def query_items(query: Query | None) -> list[tuple[str, str]]:
    """Flatten a caller-supplied query into ordered pairs.

    List and tuple values expand into repeated keys. None values are
    skipped and booleans are sent as "true" / "false".
    """
    if query is None:
        return []
    pairs = query.items() if isinstance(query, Mapping) else query
    items: list[tuple[str, str]] = []
    for key, value in pairs:
        values = value if isinstance(value, (list, tuple)) else [value]
        items.extend((key, _text(v)) for v in values if v is not None)
    return items


def collect_query(options: Sequence[QueryOption], **arguments: Any) -> list[tuple[str, str]]:
    """Evaluate an option table against keyword arguments.

    Args:
        options: Option table for the operation.
        **arguments: Values supplied by the caller, keyed by argument name.

    Returns:
        Query pairs in table order.

    Raises:
        TypeError: If an argument is not in the table.
    """
    known = {option.argument for option in options}
    unknown = set(arguments) - known
    if unknown:
        raise TypeError(f"Unexpected query arguments: {sorted(unknown)}")

    items: list[tuple[str, str]] = []
    for option in options:
        items.extend(option.items(arguments.get(option.argument)))
    return items


# =============================================================================
# Option tables
# =============================================================================

_RANGES = QueryOption("ranges", "ranges", multiple=True)
_MAJOR_DIMENSION = QueryOption("major_dimension", "majorDimension")
_VALUE_RENDER = QueryOption("value_render_option", "valueRenderOption")
_DATE_TIME_RENDER = QueryOption("date_time_render_option", "dateTimeRenderOption")
_VALUE_INPUT = QueryOption("value_input_option", "valueInputOption")
_INCLUDE_VALUES = QueryOption("include_values_in_response", "includeValuesInResponse", flag=True)
_RESPONSE_VALUE_RENDER = QueryOption("response_value_render_option", "responseValueRenderOption")
_RESPONSE_DATE_TIME_RENDER = QueryOption(
    "response_date_time_render_option", "responseDateTimeRenderOption"
)

GET_SPREADSHEET = (
    _RANGES,
    QueryOption("include_grid_data", "includeGridData", flag=True),
    QueryOption("fields", "fields"),
)

GET_VALUES = (
    _MAJOR_DIMENSION,
    _VALUE_RENDER,
    _DATE_TIME_RENDER,
)

UPDATE_VALUES = (
    _VALUE_INPUT,
    _INCLUDE_VALUES,
    _RESPONSE_VALUE_RENDER,
    _RESPONSE_DATE_TIME_RENDER,
)

APPEND_VALUES = (
    _VALUE_INPUT,
    QueryOption("insert_data_option", "insertDataOption"),
    _INCLUDE_VALUES,
    _RESPONSE_VALUE_RENDER,
    _RESPONSE_DATE_TIME_RENDER,
)

BATCH_GET_VALUES = (_RANGES, *GET_VALUES)
