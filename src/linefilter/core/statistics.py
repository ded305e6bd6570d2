"""Summary statistics over the classified collections."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

from ..classifier import Category
from ..classifier.classifier import render_value


@dataclass(frozen=True)
class NumericSummary:
    """Full statistics for the integer or decimal collection."""

    count: int
    minimum: int | Decimal
    maximum: int | Decimal
    total: int | Decimal
    mean: float


@dataclass(frozen=True)
class StringSummary:
    """Full statistics for the string collection."""

    count: int
    shortest: int
    longest: int


@dataclass
class StatisticsReport:
    """Counts per category plus optional full summaries."""

    counts: dict[Category, int] = field(default_factory=dict)
    full: bool = False
    integers: NumericSummary | None = None
    decimals: NumericSummary | None = None
    strings: StringSummary | None = None

    def render_lines(self) -> list[str]:
        """Render the report as printable lines. Empty categories are left out."""
        lines = ["Statistics:"]
        for category in Category:
            count = self.counts.get(category, 0)
            if count:
                lines.append(f"{category.label}: {count}")

        if not self.full:
            return lines

        for category, summary in (
            (Category.INTEGER, self.integers),
            (Category.DECIMAL, self.decimals),
        ):
            if summary is not None:
                lines.append(
                    f"{category.label} - Min: {render_value(summary.minimum)}, "
                    f"Max: {render_value(summary.maximum)}, "
                    f"Sum: {render_value(summary.total)}, Avg: {summary.mean}"
                )

        if self.strings is not None:
            lines.append(
                f"{Category.STRING.label} - Shortest length: {self.strings.shortest}, "
                f"Longest length: {self.strings.longest}"
            )

        return lines


def _exact_decimal_sum(values: Sequence[Decimal]) -> Decimal:
    """Sum decimals in a context wide enough that nothing is rounded."""
    highest = max(v.adjusted() for v in values)
    lowest = min(v.as_tuple().exponent for v in values)
    # digits between the largest magnitude and the finest scale, plus carries
    precision = highest - lowest + len(str(len(values))) + 2

    with localcontext() as ctx:
        ctx.prec = max(precision, 28)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        total = Decimal(0)
        for value in values:
            total += value
        return total


def _mean(total: int | Decimal, count: int) -> float:
    """Floating-point approximation of total / count."""
    if isinstance(total, Decimal):
        with localcontext() as ctx:
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            # Decimal -> float saturates to +/-inf instead of raising
            return float(total / count)
    try:
        return total / count
    except OverflowError:
        return math.inf if total > 0 else -math.inf


def summarize_numbers(values: Sequence[int] | Sequence[Decimal]) -> NumericSummary:
    """
    Compute min, max, exact sum and mean of a non-empty numeric collection.

    Among numerically equal values (``2.0`` and ``2.00``) the first one wins
    for min and max.
    """
    if not values:
        raise ValueError("Cannot summarize an empty collection")

    if isinstance(values[0], Decimal):
        total = _exact_decimal_sum(values)
    else:
        total = sum(values)

    return NumericSummary(
        count=len(values),
        minimum=min(values),
        maximum=max(values),
        total=total,
        mean=_mean(total, len(values)),
    )


def summarize_strings(values: Sequence[str]) -> StringSummary:
    """Compute shortest and longest length of a non-empty string collection."""
    if not values:
        raise ValueError("Cannot summarize an empty collection")

    lengths = [len(value) for value in values]
    return StringSummary(count=len(values), shortest=min(lengths), longest=max(lengths))


def compute_statistics(
    integers: Sequence[int],
    decimals: Sequence[Decimal],
    strings: Sequence[str],
    full: bool = False,
) -> StatisticsReport:
    """
    Build the statistics report for one run.

    Args:
        integers: Integer collection in accumulation order
        decimals: Decimal collection in accumulation order
        strings: String collection in accumulation order
        full: Include min/max/sum/mean and string lengths

    Returns:
        StatisticsReport (summaries are None for empty categories)
    """
    report = StatisticsReport(
        counts={
            Category.INTEGER: len(integers),
            Category.DECIMAL: len(decimals),
            Category.STRING: len(strings),
        },
        full=full,
    )

    if full:
        if integers:
            report.integers = summarize_numbers(integers)
        if decimals:
            report.decimals = summarize_numbers(decimals)
        if strings:
            report.strings = summarize_strings(strings)

    return report
