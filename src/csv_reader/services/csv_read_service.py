from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from cestgen_shell.core.utils.string_utils import is_valid_file_name
from csv_reader.model import (
    CsvFileNotFoundError,
    CsvReadError,
    CsvReadSettings,
    InvalidCsvFileNameError,
)

logger = logging.getLogger(__name__)

CsvRecord = Union[Dict[str, str], List[str]]


class CsvReadService:
    """
    Reads small CSV files (e.g. test data) into plain Python records.
    All values are kept as strings.
    """

    def __init__(self, settings: Optional[CsvReadSettings] = None):
        self.settings = settings or CsvReadSettings()

    @staticmethod
    def confirm_file_path(path: Path) -> None:
        if not path.exists():
            raise CsvFileNotFoundError(f"The file path is invalid. {path}")
        if not path.is_file():
            raise CsvFileNotFoundError(f"It is not a file. {path}")

    @staticmethod
    def validate_file_name(file_name: str) -> None:
        """A security measure against NULL byte and directory traversal attacks."""
        if not is_valid_file_name(file_name, "csv"):
            raise InvalidCsvFileNameError(file_name)

    def read(self, file_path: Union[str, Path]) -> List[CsvRecord]:
        """
        Returns one dict per data row keyed by the header when use_header is set,
        otherwise one list of cells per row (the header row included).
        """
        path = Path(file_path)
        self.confirm_file_path(path)
        self.validate_file_name(path.name)

        try:
            df = pd.read_csv(
                path,
                header=0 if self.settings.use_header else None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=self.settings.skip_empty_rows,
                encoding="utf-8-sig",
            )
        except pd.errors.EmptyDataError:
            logger.warning("CSV file %s is empty.", path)
            return []
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise CsvReadError(f"Failed to read the csv file. {path}: {e}") from e

        df = df.fillna("")
        logger.debug("Read %d row(s) from %s", len(df), path.name)

        if self.settings.use_header:
            return [{str(k): v for k, v in record.items()} for record in df.to_dict("records")]
        return df.values.tolist()


def read_csv(file_path: Union[str, Path], skip_empty_rows: bool = True, use_header: bool = True) -> List[CsvRecord]:
    """Convenience wrapper around CsvReadService."""
    settings = CsvReadSettings(skip_empty_rows=skip_empty_rows, use_header=use_header)
    return CsvReadService(settings).read(file_path)
