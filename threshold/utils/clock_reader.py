"""
CSV reader for observer clock files.

Reads one vector clock per observer from a CSV file, together with the
optional directives that configure a threshold run.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Optional

from threshold.core.multiset import check_threshold
from threshold.core.vector_clock import VectorClock
from threshold.parser.grammar import ParseError
from threshold.parser.lexer import LexerError


@dataclass
class ClockMetadata:
    """
    Metadata extracted from a clock file.

    Attributes:
        observers: Observer names in file order.
        clock_count: Total number of clocks.
        actors: Declared actor set, if the file has an ``actors`` directive.
        threshold: Default threshold from the file, if any.
    """

    observers: List[str]
    clock_count: int
    actors: Optional[FrozenSet[str]] = None
    threshold: Optional[int] = None


@dataclass
class ClockData:
    """
    Complete clock data loaded from a file.

    Attributes:
        clocks: Vector clocks in file order.
        metadata: Clock file metadata.
    """

    clocks: List[VectorClock]
    metadata: ClockMetadata


_REQUIRED_HEADERS = {"observer", "vc"}


class ClockReader:
    """
    Parses CSV clock files into VectorClock objects.

    Expected CSV format::

        # Optional: default threshold
        # threshold: 2

        # Optional: declared actors
        # actors: A|B|C

        # Required headers
        observer,vc
        n1,A:10;B:5;C:5

    Attributes:
        filepath: Path to the clock CSV file.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath: Path = Path(filepath)

    def read_all(self) -> ClockData:
        """
        Read all clocks and the file metadata.

        Returns:
            ClockData with clocks in file order.
        """
        directives = self._parse_directives()
        observers, clocks = self._read_rows(directives.get("actors"))

        metadata = ClockMetadata(
            observers=observers,
            clock_count=len(clocks),
            actors=directives.get("actors"),
            threshold=directives.get("threshold"),
        )
        return ClockData(clocks=clocks, metadata=metadata)

    def read_clocks(self) -> List[VectorClock]:
        """
        Read all clocks from the file.

        Raises:
            FileNotFoundError: If the clock file does not exist.
            ValueError: If headers are missing or a row is invalid.
        """
        return self.read_all().clocks

    def read_metadata(self) -> ClockMetadata:
        """Read directives and observer names without parsing clocks."""
        directives = self._parse_directives()
        observers = [row["observer"].strip() for row in self._dict_rows()]
        return ClockMetadata(
            observers=observers,
            clock_count=len(observers),
            actors=directives.get("actors"),
            threshold=directives.get("threshold"),
        )

    def validate(self) -> List[str]:
        """
        Validate the clock file and return a list of error strings.

        Returns:
            List of error messages (empty if valid).
        """
        errors: List[str] = []

        if not self.filepath.exists():
            errors.append(f"File not found: {self.filepath}")
            return errors

        lines = self._read_data_lines()
        if not lines:
            # a file with no rows reads as zero clocks
            return errors

        reader = csv.DictReader(lines)
        headers = set(reader.fieldnames or [])
        missing = _REQUIRED_HEADERS - headers
        if missing:
            errors.append(f"Missing required headers: {sorted(missing)}")
            return errors

        try:
            directives = self._parse_directives()
        except ValueError as exc:
            errors.append(str(exc))
            return errors

        for row in reader:
            try:
                self._parse_row(row, directives.get("actors"))
            except ValueError as exc:
                errors.append(str(exc))

        return errors

    # ------------------------------------------------------------------ #
    # Static helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def parse_vector_clock(s: str) -> VectorClock:
        """
        Parse a vector clock field such as ``A:2;B:1``.

        Raises:
            ValueError: If the field is not a valid clock literal.
        """
        try:
            return VectorClock.from_string(s)
        except (LexerError, ParseError) as exc:
            raise ValueError(f"Malformed vector clock '{s.strip()}': {exc}") from exc

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _parse_directives(self) -> dict:
        """Extract directives from comment lines."""
        directives: dict = {}
        if not self.filepath.exists():
            return directives

        with open(self.filepath) as f:
            for line in f:
                line = line.strip()
                if not line.startswith("#"):
                    continue
                content = line.lstrip("#").strip()
                if content.startswith("actors:"):
                    val = content.split(":", 1)[1].strip()
                    directives["actors"] = frozenset(
                        a.strip() for a in val.split("|") if a.strip()
                    )
                elif content.startswith("threshold:"):
                    val = content.split(":", 1)[1].strip()
                    try:
                        directives["threshold"] = check_threshold(int(val))
                    except (TypeError, ValueError) as exc:
                        raise ValueError(f"Invalid threshold directive '{val}': {exc}") from exc

        return directives

    def _read_data_lines(self) -> List[str]:
        """Read non-comment, non-empty lines from the file."""
        if not self.filepath.exists():
            return []

        lines: List[str] = []
        with open(self.filepath) as f:
            for line in f:
                stripped = line.strip()
                if stripped and not stripped.startswith("#"):
                    lines.append(stripped)
        return lines

    def _dict_rows(self) -> List[dict]:
        """Return the data rows as dictionaries after checking headers."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"Clock file not found: {self.filepath}")

        lines = self._read_data_lines()
        if not lines:
            return []

        reader = csv.DictReader(lines)
        missing = _REQUIRED_HEADERS - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing required headers: {sorted(missing)}")
        return list(reader)

    def _read_rows(self, actors: Optional[FrozenSet[str]]) -> tuple:
        observers: List[str] = []
        clocks: List[VectorClock] = []
        for row in self._dict_rows():
            observer, clock = self._parse_row(row, actors)
            observers.append(observer)
            clocks.append(clock)
        return observers, clocks

    def _parse_row(self, row: dict, actors: Optional[FrozenSet[str]]) -> tuple:
        """Parse a single CSV row into an ``(observer, clock)`` pair."""
        observer = (row.get("observer") or "").strip()
        try:
            clock = self.parse_vector_clock(row.get("vc") or "")
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Observer '{observer}': {exc}") from exc

        if actors is not None:
            unknown = {str(a) for a in clock.actors()} - actors
            if unknown:
                raise ValueError(
                    f"Observer '{observer}': unknown actors {sorted(unknown)} "
                    f"(declared: {sorted(actors)})"
                )
        return observer, clock
