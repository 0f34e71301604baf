"""
Game record ingestion from the video game sales CSV.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

import polars as pl

from vgsales_graph.settings import DEFAULT_COLUMNS

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "genre", "publisher")
SCORE_FIELDS = ("critic_score", "user_score")


class MalformedRowError(ValueError):
    """Raised when the source cannot be decoded into name, genre and publisher."""


@dataclass(frozen=True)
class GameRecord:
    """One row of the sales dataset."""
    name: str
    genre: str
    publisher: str
    critic_score: Optional[float] = None
    user_score: Optional[float] = None


def _check_field_counts(path: Path) -> None:
    """Raise MalformedRowError on the first row whose field count differs from the header."""
    # polars pads short rows with nulls, which would pass as empty strings
    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                return
            for row in reader:
                if row and len(row) != len(header):
                    raise MalformedRowError(
                        f"Line {reader.line_num} of {path} has {len(row)} fields, "
                        f"expected {len(header)}"
                    )
    except (UnicodeDecodeError, csv.Error) as e:
        raise MalformedRowError(f"Could not decode {path}: {e}") from e


def _read_game_frame(path: Path, columns: Dict[str, str]) -> pl.DataFrame:
    try:
        # Everything as strings; scores are cast below
        df = pl.read_csv(path, infer_schema_length=0)
    except pl.exceptions.NoDataError:
        logger.warning(f"No data found in {path}")
        return pl.DataFrame(schema={
            "name": pl.Utf8,
            "genre": pl.Utf8,
            "publisher": pl.Utf8,
            "critic_score": pl.Float64,
            "user_score": pl.Float64,
        })
    except pl.exceptions.ComputeError as e:
        raise MalformedRowError(f"Could not decode {path}: {e}") from e

    _check_field_counts(path)

    missing = [columns[field] for field in REQUIRED_FIELDS if columns[field] not in df.columns]
    if missing:
        raise MalformedRowError(f"Required columns missing from {path}: {', '.join(missing)}")

    selected = [
        pl.col(columns[field]).fill_null("").alias(field)
        for field in REQUIRED_FIELDS
    ]
    for field in SCORE_FIELDS:
        if columns[field] in df.columns:
            selected.append(
                pl.col(columns[field])
                .str.strip_chars()
                .cast(pl.Float64, strict=False)
                .alias(field)
            )
        else:
            logger.warning(f"Column {columns[field]} not found in {path}, {field} will be empty")
            selected.append(pl.lit(None, dtype=pl.Float64).alias(field))

    return df.select(selected)


def load_game_records(
    path: Union[str, Path],
    columns: Optional[Dict[str, str]] = None,
) -> Iterator[GameRecord]:
    """
    Read game records from a CSV file in file order.

    Empty name, genre or publisher cells become empty strings. Score cells
    that are blank or not numeric (e.g. "tbd") become None.

    Args:
        path: Path to the CSV file
        columns: Overrides for the record field -> CSV column mapping

    Returns:
        Iterator[GameRecord]: The decoded records

    Raises:
        FileNotFoundError: If ``path`` does not exist
        MalformedRowError: If the CSV lacks a required column or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Source file {path} does not exist")

    mapping = {**DEFAULT_COLUMNS, **(columns or {})}
    df = _read_game_frame(path, mapping)
    logger.info(f"Loaded {len(df):,} game records from {path}")

    return (GameRecord(**row) for row in df.iter_rows(named=True))
