"""Loaders turning provider records and files into aggregation entries."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd

from common.validation import EntryLoadError
from ..models import AggregationEntry
from ..normalizers import AmountParser, get_default_parser

logger = logging.getLogger(__name__)

DEFAULT_ID_FIELD = "id"
DEFAULT_NAME_FIELD = "name"
DEFAULT_RAW_FIELD = "prizepool"


class EntryLoader:
    """Builds AggregationEntry objects from provider records, DataFrames or files.

    The id, name and raw prize pool fields are configurable; every other
    field is passed through as metadata without interpretation.
    """

    def __init__(
        self,
        parser: Optional[AmountParser] = None,
        id_field: str = DEFAULT_ID_FIELD,
        name_field: str = DEFAULT_NAME_FIELD,
        raw_field: str = DEFAULT_RAW_FIELD,
    ):
        """Initialize loader.

        Args:
            parser: Amount parser. Uses the shared default parser if None.
            id_field: Record field holding the entry identity
            name_field: Record field holding the display name
            raw_field: Record field holding the raw prize pool text
        """
        self.parser = parser or get_default_parser()
        self.id_field = id_field
        self.name_field = name_field
        self.raw_field = raw_field

    def from_records(self, records: Iterable[Mapping[str, Any]]) -> List[AggregationEntry]:
        """Create entries from decoded provider records (e.g. tournament dicts).

        Args:
            records: Mappings in input order

        Returns:
            One entry per record; records without a prize pool get an
            unrecognized amount
        """
        entries = []
        for index, record in enumerate(records):
            entries.append(self._create_entry(record, index))
        logger.info(f"Created {len(entries)} entries from records")
        return entries

    def from_dataframe(self, df: pd.DataFrame) -> List[AggregationEntry]:
        """Create entries from a DataFrame with one record per row.

        Args:
            df: DataFrame containing at least the raw prize pool column

        Returns:
            List of entries in row order

        Raises:
            EntryLoadError: If the raw prize pool column is missing
        """
        if self.raw_field not in df.columns:
            raise EntryLoadError(
                "Prize pool column not found",
                missing_fields=[self.raw_field],
            )

        # Ensure deterministic 0-based integer indices for fallback IDs
        df = df.reset_index(drop=True)
        records = [
            {key: value for key, value in row.items() if not _is_missing(value)}
            for row in df.to_dict(orient="records")
        ]
        return self.from_records(records)

    def load(self, path: Path) -> List[AggregationEntry]:
        """Load entries from a CSV or JSON file.

        Args:
            path: Path to a .csv file or a .json file holding a list of records

        Returns:
            List of entries in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            EntryLoadError: If the file can't be read or lacks the prize pool field
        """
        suffix = path.suffix.lower()
        if suffix == ".csv":
            return self.load_csv(path)
        if suffix == ".json":
            return self.load_json(path)
        raise EntryLoadError(f"Unsupported file type '{suffix}'", file_path=str(path))

    def load_csv(self, csv_path: Path) -> List[AggregationEntry]:
        """Load entries from a CSV file."""
        try:
            logger.info(f"Loading entries CSV from: {csv_path}")
            # Keep every cell as text so "N/A" and "1.000.000" reach the parser untouched
            df = pd.read_csv(csv_path, encoding="utf-8-sig", dtype=str, keep_default_na=False)
            df.columns = df.columns.str.strip()
        except FileNotFoundError:
            logger.error(f"Entries CSV file not found: {csv_path}")
            raise
        except (ValueError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise EntryLoadError(f"Invalid entries CSV: {e}", file_path=str(csv_path)) from e

        logger.info(f"Successfully loaded {len(df)} rows from {csv_path}")
        try:
            return self.from_dataframe(df)
        except EntryLoadError as e:
            e.file_path = str(csv_path)
            raise

    def load_json(self, json_path: Path) -> List[AggregationEntry]:
        """Load entries from a JSON file holding a list of records."""
        try:
            logger.info(f"Loading entries JSON from: {json_path}")
            with open(json_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Entries JSON file not found: {json_path}")
            raise
        except json.JSONDecodeError as e:
            raise EntryLoadError(f"Invalid JSON: {e}", file_path=str(json_path)) from e

        if not isinstance(data, list):
            raise EntryLoadError("Entries JSON must be a list of records", file_path=str(json_path))

        for row_number, record in enumerate(data):
            if not isinstance(record, dict):
                raise EntryLoadError(
                    "Entry record must be an object",
                    file_path=str(json_path),
                    row_number=row_number,
                    value=record,
                )
        return self.from_records(data)

    def _create_entry(self, record: Mapping[str, Any], index: int) -> AggregationEntry:
        raw = record.get(self.raw_field)
        if raw is not None and not isinstance(raw, str):
            raw = str(raw)

        metadata = {
            key: value
            for key, value in record.items()
            if key not in (self.id_field, self.name_field, self.raw_field)
        }
        name = record.get(self.name_field)

        return AggregationEntry.from_raw(
            entry_id=record.get(self.id_field, index),
            name=str(name) if name is not None else "",
            raw=raw,
            metadata=metadata,
            parser=self.parser.parse,
        )


def _is_missing(value: Any) -> bool:
    # pd.isna is element-wise for containers; only scalars can be missing
    if isinstance(value, (list, dict, tuple)):
        return False
    return bool(pd.isna(value))


def entries_from_records(
    records: Iterable[Mapping[str, Any]],
    id_field: str = DEFAULT_ID_FIELD,
    name_field: str = DEFAULT_NAME_FIELD,
    raw_field: str = DEFAULT_RAW_FIELD,
) -> List[AggregationEntry]:
    """Create entries from provider records with the default parser."""
    loader = EntryLoader(id_field=id_field, name_field=name_field, raw_field=raw_field)
    return loader.from_records(records)
