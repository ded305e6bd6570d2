"""Writer component: one output file per non-empty category."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from ..classifier import Category
from ..classifier.classifier import render_value
from ..utils.logging import get_logger

logger = get_logger(__name__)

OUTPUT_BASENAMES = {
    Category.INTEGER: "integers.txt",
    Category.DECIMAL: "floats.txt",
    Category.STRING: "strings.txt",
}


@dataclass
class WriteResult:
    """Result of writing one category file."""

    category: Category
    path: Path
    lines_written: int = 0

    # Status
    success: bool = False
    error_message: str | None = None


class OutputWriter:
    """
    Writes classified values to ``<output_dir>/<prefix><basename>``.

    Empty categories are skipped entirely, so an existing file is neither
    truncated nor appended to.
    """

    def __init__(
        self,
        output_dir: Path,
        prefix: str = "",
        append: bool = False,
        encoding: str | None = None,
    ):
        """
        Initialize the writer.

        Args:
            output_dir: Directory for output files (created on demand)
            prefix: Prefix prepended to every output file name
            append: Append to existing files instead of truncating them
            encoding: Text encoding (None = platform default)
        """
        self.output_dir = Path(output_dir)
        self.prefix = prefix
        self.append = append
        self.encoding = encoding

    def output_path(self, category: Category) -> Path:
        """Get the output file path for a category."""
        return self.output_dir / f"{self.prefix}{OUTPUT_BASENAMES[category]}"

    def _ensure_directory(self) -> str | None:
        """Create the output directory. Returns an error message on failure."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory: {self.output_dir} ({e})")
            return f"Failed to create directory: {self.output_dir}: {e}"
        return None

    def write(
        self, category: Category, values: Sequence[int | Decimal | str]
    ) -> WriteResult | None:
        """
        Write one category's values, one per line, in the given order.

        Args:
            category: Category being written
            values: Values in accumulation order

        Returns:
            WriteResult, or None if there was nothing to write
        """
        if not values:
            return None

        path = self.output_path(category)
        result = WriteResult(category=category, path=path)

        error = self._ensure_directory()
        if error:
            result.error_message = error
            return result

        mode = "a" if self.append else "w"
        try:
            # text mode translates "\n" to the platform line terminator
            with open(path, mode, encoding=self.encoding) as f:
                for value in values:
                    f.write(render_value(value))
                    f.write("\n")
                    result.lines_written += 1
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Error writing to file: {path} - {e}")
            result.error_message = str(e)
            return result

        result.success = True
        logger.info(f"Wrote {result.lines_written} line(s) to {path}")
        return result

    def write_all(
        self,
        integers: Sequence[int],
        decimals: Sequence[Decimal],
        strings: Sequence[str],
    ) -> list[WriteResult]:
        """Write integers, decimals and strings, in that order."""
        results = []
        for category, values in (
            (Category.INTEGER, integers),
            (Category.DECIMAL, decimals),
            (Category.STRING, strings),
        ):
            result = self.write(category, values)
            if result is not None:
                results.append(result)
        return results
