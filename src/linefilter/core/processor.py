"""Processing orchestrator: read inputs round-robin, classify, write, report."""

from contextlib import ExitStack
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from rich.console import Console

from ..classifier import Category, classify
from ..config.models import FilterConfig
from ..utils.logging import get_console, get_logger
from ..writer import OutputWriter, WriteResult
from .statistics import StatisticsReport, compute_statistics

logger = get_logger(__name__)


@dataclass
class ProcessingResult:
    """Outcome of one processing run."""

    opened_inputs: list[Path] = field(default_factory=list)
    failed_inputs: list[Path] = field(default_factory=list)
    read_errors: list[Path] = field(default_factory=list)
    lines_read: int = 0

    write_results: list[WriteResult] = field(default_factory=list)
    statistics: StatisticsReport | None = None

    unexpected_error: str | None = None

    @property
    def success(self) -> bool:
        """True when every input was read and every output written."""
        return (
            not self.failed_inputs
            and not self.read_errors
            and self.unexpected_error is None
            and all(r.success for r in self.write_results)
        )


class InputSource:
    """An open input file that yields one line per call until drained."""

    def __init__(self, path: Path, handle: TextIO):
        self.path = path
        self.handle = handle
        self.drained = False

    def read_line(self) -> str | None:
        """
        Read the next line without its terminator.

        Returns None once the file is exhausted; read errors propagate to the
        caller and the source stays drained afterwards.
        """
        if self.drained:
            return None
        try:
            line = self.handle.readline()
        except Exception:
            self.drained = True
            raise
        if not line:
            self.drained = True
            return None
        # universal newlines: "\r\n" and "\r" already arrive as "\n"
        return line[:-1] if line.endswith("\n") else line


class LineProcessor:
    """
    Orchestrates one filtering run.

    Pipeline: open inputs -> read round-robin -> classify -> write -> statistics
    """

    def __init__(
        self,
        config: FilterConfig,
        writer: OutputWriter | None = None,
        console: Console | None = None,
    ):
        """
        Initialize the processor.

        Args:
            config: Immutable run configuration
            writer: Optional output writer (built from config if omitted)
            console: Console for statistics output (stdout console if omitted)
        """
        self.config = config
        self.writer = writer or OutputWriter(
            output_dir=config.output_dir,
            prefix=config.prefix,
            append=config.append,
            encoding=config.encoding,
        )
        self.console = console or get_console()

        self._integers: list[int] = []
        self._decimals: list[Decimal] = []
        self._strings: list[str] = []

    @property
    def integers(self) -> tuple[int, ...]:
        return tuple(self._integers)

    @property
    def decimals(self) -> tuple[Decimal, ...]:
        return tuple(self._decimals)

    @property
    def strings(self) -> tuple[str, ...]:
        return tuple(self._strings)

    def _accumulate(self, line: str):
        """Classify a line and append it to its collection."""
        classified = classify(line)
        if classified.category is Category.INTEGER:
            self._integers.append(classified.value)
        elif classified.category is Category.DECIMAL:
            self._decimals.append(classified.value)
        else:
            self._strings.append(classified.value)

    def _open_sources(
        self, paths: list[Path], stack: ExitStack, result: ProcessingResult
    ) -> list[InputSource]:
        """Open every input that can be opened. Failures are reported and skipped."""
        sources = []
        for path in paths:
            try:
                handle = stack.enter_context(open(path, encoding=self.config.encoding))
            except FileNotFoundError:
                logger.error(f"File not found: {path}")
                result.failed_inputs.append(path)
                continue
            except OSError as e:
                logger.error(f"Cannot open file: {path} ({e})")
                result.failed_inputs.append(path)
                continue

            sources.append(InputSource(path, handle))
            result.opened_inputs.append(path)
            logger.debug(f"Opened input {path}")

        return sources

    def _read_round_robin(self, sources: list[InputSource], result: ProcessingResult):
        """
        Take one line from each source in turn until a full pass yields nothing.

        Drained sources stay in the list and are skipped on later passes.
        """
        productive = True
        while productive:
            productive = False
            for source in sources:
                try:
                    line = source.read_line()
                except (OSError, UnicodeDecodeError) as e:
                    logger.error(f"Error reading file: {source.path}: {e}")
                    result.read_errors.append(source.path)
                    continue

                if line is None:
                    continue

                self._accumulate(line)
                result.lines_read += 1
                productive = True

    def read_sources(self, result: ProcessingResult | None = None) -> ProcessingResult:
        """
        Read and classify every configured input.

        All opened files are closed before this returns, including when an
        unexpected error ends the read loop early. Lines classified before
        such an error are kept.

        Args:
            result: Result to record into (a new one is created if omitted)

        Returns:
            ProcessingResult with the input side filled in
        """
        result = result or ProcessingResult()
        self._integers.clear()
        self._decimals.clear()
        self._strings.clear()

        try:
            with ExitStack() as stack:
                sources = self._open_sources(list(self.config.input_files), stack, result)
                self._read_round_robin(sources, result)
        except Exception as e:
            logger.error(f"Unexpected error during file processing: {e}")
            result.unexpected_error = str(e)

        logger.info(
            f"Classified {result.lines_read} line(s) from {len(result.opened_inputs)} file(s): "
            f"{len(self._integers)} integer(s), {len(self._decimals)} decimal(s), "
            f"{len(self._strings)} string(s)"
        )
        return result

    def write_output(self) -> list[WriteResult]:
        """Write every non-empty collection to its output file."""
        return self.writer.write_all(self._integers, self._decimals, self._strings)

    def build_statistics(self) -> StatisticsReport:
        """Compute statistics over the accumulated collections."""
        return compute_statistics(
            self._integers,
            self._decimals,
            self._strings,
            full=self.config.full_stats,
        )

    def print_statistics(self, report: StatisticsReport):
        """Print a statistics report to the output console."""
        for line in report.render_lines():
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def process(self) -> ProcessingResult:
        """
        Run the full pipeline once.

        Returns:
            ProcessingResult describing inputs, outputs and statistics
        """
        result = self.read_sources()
        result.write_results = self.write_output()

        if self.config.stats_enabled:
            result.statistics = self.build_statistics()
            self.print_statistics(result.statistics)

        return result
