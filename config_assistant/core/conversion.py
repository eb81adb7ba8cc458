"""
Purpose:
    - Convert raw setting strings into typed values
    - Translate low-level conversion failures into ConfigurationError kinds

Conversion goes through pydantic's lax mode, which parses numbers, booleans,
dates and so on with fixed rules that never consult the process locale.
Types that know how to read themselves expose a ``parse(raw)`` classmethod and
bypass pydantic.

Text bound for ``bool``, integer and float targets is checked first against
the invariant spellings (``True``/``False``; optionally signed digits; plain
decimal or exponent notation), since pydantic's lax mode also takes ``yes``,
``1.0``, ``1_000`` and the like.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Callable,
    Optional,
    Protocol,
    TypeGuard,
    TypeVar,
    get_args,
    get_origin,
)

from pydantic import BeforeValidator, TypeAdapter, ValidationError
from pydantic.errors import PydanticUserError
from pydantic_core import PydanticCustomError

from config_assistant.errors.errors import ConfigurationError, ErrorKind
from config_assistant.types.aliases import ALIAS_NAMES

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# pydantic error types, see https://docs.pydantic.dev/latest/errors/validation_errors/
OVERFLOW_ERROR_TYPES: frozenset[str] = frozenset(
    {
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "int_parsing_size",
        "finite_number",
        "decimal_max_digits",
        "decimal_whole_digits",
        "decimal_max_places",
    }
)
BAD_FORMAT_ERROR_TYPES: frozenset[str] = frozenset(
    {
        "int_from_float",
        "enum",
        "literal_error",
        "string_pattern_mismatch",
        "string_too_short",
        "string_too_long",
        "json_invalid",
    }
)
# value-like types default to their zero value; everything else to None
VALUE_TYPES: tuple[type, ...] = (bool, int, float, complex, Decimal, str, bytes)

INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
FLOAT_TEXT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
FLOAT_SYMBOLS: dict[str, float] = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}


class SupportsParse(Protocol):
    @classmethod
    def parse(cls: type[T], raw: str) -> T: ...


def classify(error_type: str) -> ErrorKind:
    """Map a pydantic error type onto a ConfigurationError kind."""
    if error_type in OVERFLOW_ERROR_TYPES:
        return ErrorKind.OVERFLOW
    if error_type.endswith("_parsing") or error_type in BAD_FORMAT_ERROR_TYPES:
        return ErrorKind.BAD_FORMAT
    return ErrorKind.INVALID_CAST


def unwrap(target: Any) -> Any:
    """Strip ``Annotated`` metadata, returning the underlying type."""
    if get_origin(target) is Annotated:
        return get_args(target)[0]
    return target


def type_name(target: Any) -> str:
    try:
        alias_name = ALIAS_NAMES.get(target)
    except TypeError:  # unhashable annotation
        alias_name = None
    if alias_name is not None:
        return alias_name
    if get_origin(target) is None and isinstance(getattr(target, "__name__", None), str):
        return target.__name__
    return str(target).replace("typing.", "")


def default_for(target: Any) -> Any:
    """
    Value returned for a missing, non-required setting: the zero value for
    numbers, booleans, strings and bytes; ``None`` for any other type.
    """
    base = unwrap(target)
    if (
        get_origin(base) is None
        and isinstance(base, type)
        and issubclass(base, VALUE_TYPES)
        and not issubclass(base, Enum)
    ):
        return base()
    return None


def _has_parse(target: Any) -> TypeGuard[type[SupportsParse]]:
    return isinstance(target, type) and callable(getattr(target, "parse", None))


# --- invariant text rules ----------------------------------


def bool_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip().lower()
    if text not in ("true", "false"):
        raise PydanticCustomError("bool_parsing", "Input should be 'True' or 'False'")
    return text == "true"


def int_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    if INTEGER_TEXT.fullmatch(text) is None:
        raise PydanticCustomError("int_parsing", "Input should be an optionally signed integer")
    try:
        return int(text)
    except ValueError as exc:  # beyond the interpreter's int digit limit
        raise PydanticCustomError("int_parsing_size", "Integer text is too long") from exc


def float_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    symbol = FLOAT_SYMBOLS.get(text.lower())
    if symbol is not None:
        return symbol
    if FLOAT_TEXT.fullmatch(text) is None:
        raise PydanticCustomError("float_parsing", "Input should be a decimal number")
    number = float(text)
    if math.isinf(number):
        raise PydanticCustomError("finite_number", "Input is outside the range of a float")
    return number


def text_rule(target: Any) -> Optional[Callable[[Any], Any]]:
    """The invariant text check for ``target``, if its base type has one."""
    base = unwrap(target)
    if get_origin(base) is not None or not isinstance(base, type) or issubclass(base, Enum):
        return None
    if issubclass(base, bool):
        return bool_text
    if issubclass(base, int):
        return int_text
    if issubclass(base, float):
        return float_text
    return None


def _build_adapter(target: Any) -> TypeAdapter[Any]:
    rule = text_rule(target)
    if rule is None:
        return TypeAdapter(target)
    return TypeAdapter(Annotated[target, BeforeValidator(rule)])


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return _build_adapter(target)


def adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        hash(target)
    except TypeError:
        return _build_adapter(target)
    return _cached_adapter(target)


def _fail(
    kind: ErrorKind,
    key: str,
    target: Any,
    exc: Exception,
    details: Optional[dict[str, Any]] = None,
) -> ConfigurationError:
    name = type_name(target)
    _LOGGER.warning(
        "setting_conversion_failed",
        extra={
            "event": "setting_conversion_failed",
            "key": key,
            "target_type": name,
            "kind": kind.value,
            "cause": exc.__class__.__name__,
        },
    )
    return ConfigurationError.conversion(kind, key, name, details=details)


def change_type(value: object, target: Any, key: str) -> Any:
    """
    Convert ``value`` to ``target``.

    Raises ConfigurationError (INVALID_CAST, BAD_FORMAT or OVERFLOW) carrying
    ``key`` and the target type name; the original error is chained as the cause.
    """
    if target is str and isinstance(value, str):
        return value

    if _has_parse(target):
        try:
            return target.parse(value)
        except OverflowError as exc:
            raise _fail(ErrorKind.OVERFLOW, key, target, exc) from exc
        except ValueError as exc:
            raise _fail(ErrorKind.BAD_FORMAT, key, target, exc) from exc
        except TypeError as exc:
            raise _fail(ErrorKind.INVALID_CAST, key, target, exc) from exc

    try:
        adapter = adapter_for(target)
    except PydanticUserError as exc:
        # no schema can be generated, so no conversion path exists
        raise _fail(ErrorKind.INVALID_CAST, key, target, exc) from exc

    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        errors = exc.errors()
        error_type = errors[0]["type"] if errors else ""
        details = {"error_type": error_type, "message": errors[0]["msg"] if errors else str(exc)}
        raise _fail(classify(error_type), key, target, exc, details) from exc
