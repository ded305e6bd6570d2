"""Line classifier: integer, decimal or opaque string."""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

# Whole-line grammars. int() and Decimal() accept more than these (underscores,
# surrounding whitespace, NaN, Infinity), so the text is checked first.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)

# Largest accepted exponent magnitude; larger literals are kept as strings.
MAX_EXPONENT = 999_999_999

# int <-> str conversion is capped by sys.get_int_max_str_digits() (4300 by
# default). Values past these sizes go through Decimal, which has no cap.
_SAFE_INT_DIGITS = 4000
_SAFE_INT_BITS = 13000


class Category(str, Enum):
    """Category a line is sorted into."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    STRING = "string"

    @property
    def label(self) -> str:
        """Plural label used in statistics output."""
        return _LABELS[self]


_LABELS = {
    Category.INTEGER: "Integers",
    Category.DECIMAL: "Floats",
    Category.STRING: "Strings",
}


@dataclass(frozen=True)
class ClassifiedValue:
    """One classified input line."""

    category: Category
    value: int | Decimal | str

    def render(self) -> str:
        """Canonical text form written to output files."""
        return render_value(self.value)


def render_value(value: int | Decimal | str) -> str:
    """Render a classified value as text (strings verbatim)."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and value.bit_length() > _SAFE_INT_BITS:
        return str(Decimal(value))
    if isinstance(value, Decimal) and value.is_zero():
        # no negative zero: "-0.0" renders as "0.0", "-0e5" as "0E+5"
        value = value.copy_abs()
    # str(Decimal) follows to-scientific-string: Decimal("1e10") -> "1E+10"
    return str(value)


def parse_integer(line: str) -> int | None:
    """Return the integer value of ``line``, or None if it is not an integer literal."""
    if INTEGER_PATTERN.fullmatch(line) is None:
        return None
    if len(line) > _SAFE_INT_DIGITS:
        return int(Decimal(line))
    return int(line)


def parse_decimal(line: str) -> Decimal | None:
    """Return the exact decimal value of ``line``, or None if it is not a decimal literal."""
    match = DECIMAL_PATTERN.fullmatch(line)
    if match is None:
        return None

    exponent = match.group("exponent")
    if exponent is not None:
        digits = exponent.lstrip("+-").lstrip("0")
        if len(digits) > len(str(MAX_EXPONENT)) or (digits and int(digits) > MAX_EXPONENT):
            return None

    return Decimal(line)


def classify(line: str) -> ClassifiedValue:
    """
    Classify one input line.

    Integer is tried first, then decimal; anything else is kept verbatim as a
    string. Never raises.

    Args:
        line: Line text without its terminator

    Returns:
        ClassifiedValue tagged with its category
    """
    integer = parse_integer(line)
    if integer is not None:
        return ClassifiedValue(Category.INTEGER, integer)

    decimal = parse_decimal(line)
    if decimal is not None:
        return ClassifiedValue(Category.DECIMAL, decimal)

    return ClassifiedValue(Category.STRING, line)
