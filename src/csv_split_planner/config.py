"""Split planning configuration and its validation."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from csv_split_planner.errors import ConfigurationError

# Configuration keys understood by SplitConfig.from_mapping.
FORMAT_DELIMITER = "mapreduce.csvinput.delimiter"
FORMAT_SEPARATOR = "mapreduce.csvinput.separator"
LINES_PER_MAP = "mapreduce.input.lineinputformat.linespermap"

DEFAULT_DELIMITER = '"'
DEFAULT_SEPARATOR = ","
DEFAULT_LINES_PER_MAP = 1


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Immutable settings for one planning run."""

    delimiter: str = DEFAULT_DELIMITER
    separator: str = DEFAULT_SEPARATOR
    lines_per_split: int = DEFAULT_LINES_PER_MAP
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check delimiter, separator and line count.

        Raises ConfigurationError before any file is touched.
        """
        if self.delimiter is None or self.separator is None:
            raise ConfigurationError("missing parameter delimiter/separator")
        if len(self.delimiter) != 1 or len(self.separator) != 1:
            raise ConfigurationError("delimiter/separator can only be a single character")
        if self.delimiter == self.separator:
            raise ConfigurationError("delimiter and separator cannot be the same character")
        if "\n" in (self.delimiter, self.separator):
            raise ConfigurationError("delimiter/separator cannot be a newline")
        self._check_encoding()
        if isinstance(self.lines_per_split, bool) or not isinstance(self.lines_per_split, int):
            raise ConfigurationError(
                f"lines_per_split must be an integer, got {self.lines_per_split!r}"
            )
        if self.lines_per_split < 1:
            raise ConfigurationError(f"lines_per_split must be >= 1, got {self.lines_per_split}")

    def _check_encoding(self) -> None:
        """
        Each character must encode to one fixed byte sequence.

        Lines are scanned as raw bytes, so the codec has to write newline as
        0x0A and the characters without a byte-order mark.
        """
        chars = (self.delimiter, self.separator)
        try:
            newline_ok = "\n".encode(self.encoding) == b"\n"
            encoded = [char.encode(self.encoding) for char in chars]
            doubled = [(char * 2).encode(self.encoding) for char in chars]
        except (LookupError, UnicodeError, TypeError) as exc:
            raise ConfigurationError(
                f"delimiter/separator cannot be encoded with {self.encoding!r}: {exc}"
            ) from exc

        if not newline_ok:
            raise ConfigurationError(
                f"encoding {self.encoding!r} does not write newline as one byte"
            )
        for single, double in zip(encoded, doubled, strict=True):
            if double != single * 2 or b"\n" in single:
                raise ConfigurationError(
                    f"encoding {self.encoding!r} has no fixed byte form for delimiter/separator"
                )

    @property
    def delimiter_bytes(self) -> bytes:
        return self.delimiter.encode(self.encoding)

    @property
    def separator_bytes(self) -> bytes:
        return self.separator.encode(self.encoding)

    @classmethod
    def from_mapping(cls, conf: Mapping[str, Any]) -> "SplitConfig":
        """
        Build a config from key-value settings.

        Absent keys fall back to the defaults; lines-per-split may be given as
        an int or a decimal string. Floats and bools are rejected, not truncated.
        """
        lines_per_split = conf.get(LINES_PER_MAP, DEFAULT_LINES_PER_MAP)
        # Only text is converted; other values go to validate() unchanged.
        if isinstance(lines_per_split, str):
            try:
                lines_per_split = int(lines_per_split)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{LINES_PER_MAP} must be an integer, got {lines_per_split!r}"
                ) from exc

        return cls(
            delimiter=conf.get(FORMAT_DELIMITER, DEFAULT_DELIMITER),
            separator=conf.get(FORMAT_SEPARATOR, DEFAULT_SEPARATOR),
            lines_per_split=lines_per_split,
        )
