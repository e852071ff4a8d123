"""Load foods from the USDA SR abbreviated (ABBREV) flat file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import numpy as np
import pandas as pd

from maxprotein.optimizer.models import (
    DatasetNotFoundError,
    Food,
    FoodVector,
    MalformedDatasetError,
)

logger = logging.getLogger(__name__)


class AbbrevLoader:
    """Parses an ABBREV.txt file into Food records.

    Each line holds one food as 53 caret-separated fields. Text fields are
    wrapped in tildes, numeric fields are plain decimals.
    """

    FIELD_SEPARATOR = "^"
    FIELD_COUNT = 53

    # Column index -> Food attribute
    TEXT_FIELDS = {1: "description", 49: "amount"}
    NUMERIC_FIELDS = {3: "kcal", 4: "protein_g", 48: "amount_g"}

    def __init__(self, path: Path, encoding: str = "latin-1"):
        """Initialize the loader.

        Args:
            path: Path to ABBREV.txt
            encoding: Text encoding of the file
        """
        self.path = Path(path)
        self.encoding = encoding
        self._validate_path()

    def _validate_path(self) -> None:
        """Ensure the dataset file exists."""
        if not self.path.is_file():
            raise DatasetNotFoundError(
                f"Dataset file '{self.path}' not found. "
                f"Download the USDA SR28 abbreviated file (ABBREV.txt) from "
                f"https://www.ars.usda.gov/"
            )

    def load(
        self,
        progress_callback: Optional[Callable[[str], None]] = None,
    ) -> FoodVector:
        """Load all valid foods, in file order.

        Lines with a missing description or serving, or with unparseable or
        negative numbers, are skipped. A line with the wrong number of fields
        aborts the whole load.

        Args:
            progress_callback: Optional callback for progress updates

        Returns:
            List of Food records

        Raises:
            DatasetNotFoundError: If the file cannot be read
            MalformedDatasetError: If a line does not have 53 fields
        """
        df = self._read_fields()
        if progress_callback:
            progress_callback(f"Read {len(df)} lines")

        if df.empty:
            return []

        valid = pd.Series(True, index=df.index)
        for column in self.TEXT_FIELDS.values():
            df[column], ok = _remove_tildes(df[column])
            valid &= ok
        for column in self.NUMERIC_FIELDS.values():
            df[column], ok = _parse_rounded(df[column])
            valid &= ok

        foods = [
            Food(
                description=row.description,
                amount=row.amount,
                amount_g=int(row.amount_g),
                kcal=int(row.kcal),
                protein_g=int(row.protein_g),
            )
            for row in df[valid].itertuples(index=False)
        ]

        skipped = len(df) - len(foods)
        logger.info("Loaded %d foods from %s (%d skipped)", len(foods), self.path, skipped)
        if progress_callback:
            progress_callback(f"Loaded {len(foods)} foods, skipped {skipped}")

        return foods

    def _read_fields(self) -> pd.DataFrame:
        """Split the file into the raw fields we care about."""
        columns = {**self.TEXT_FIELDS, **self.NUMERIC_FIELDS}
        rows = []
        try:
            with open(self.path, encoding=self.encoding, newline="") as f:
                for line_number, line in enumerate(f, start=1):
                    fields = line.rstrip("\r\n").split(self.FIELD_SEPARATOR)
                    if len(fields) != self.FIELD_COUNT:
                        raise MalformedDatasetError(
                            f"Line {line_number} of {self.path} has {len(fields)} "
                            f"fields, expected {self.FIELD_COUNT}",
                            line_number=line_number,
                            field_count=len(fields),
                        )
                    rows.append([fields[i] for i in columns])
        except OSError as e:
            raise DatasetNotFoundError(f"Could not read '{self.path}': {e}") from e

        return pd.DataFrame(rows, columns=list(columns.values()), dtype=object)


def _remove_tildes(values: pd.Series) -> tuple[pd.Series, pd.Series]:
    """Strip the enclosing tildes from text fields.

    A field is valid only if it is "~x~" with at least one character inside.
    """
    ok = (
        (values.str.len() >= 3)
        & values.str.startswith("~")
        & values.str.endswith("~")
    )
    return values.str[1:-1], ok


# Leading decimal of a field; trailing characters are ignored ("12abc" reads as 12)
_NUMERIC_PREFIX = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"


def _parse_rounded(values: pd.Series) -> tuple[pd.Series, pd.Series]:
    """Parse the leading decimal of each field and round half away from zero.

    Fields with no leading number, or whose value overflows to infinity, are
    marked invalid.
    """
    numbers = pd.to_numeric(
        values.str.extract(_NUMERIC_PREFIX, expand=False), errors="coerce"
    )
    rounded = np.sign(numbers) * np.floor(np.abs(numbers) + 0.5)
    ok = rounded.notna() & np.isfinite(rounded) & (rounded >= 0)
    return rounded.where(ok, 0), ok


def load_usda_abbrev(
    path: Path,
    encoding: str = "latin-1",
    progress_callback: Optional[Callable[[str], None]] = None,
) -> FoodVector:
    """Convenience function to load an ABBREV.txt file.

    Args:
        path: Path to ABBREV.txt
        encoding: Text encoding of the file
        progress_callback: Optional progress callback

    Returns:
        List of valid Food records
    """
    loader = AbbrevLoader(path, encoding)
    return loader.load(progress_callback)
