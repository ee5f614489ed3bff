# ============================================
# file: src/csv_reader/model.py
# ============================================
from __future__ import annotations
from pydantic import BaseModel


class CsvReadSettings(BaseModel):
    skip_empty_rows: bool = True
    use_header: bool = True


class CsvError(Exception):
    """Base class for CSV reader errors."""


class CsvFileNotFoundError(CsvError):
    pass


class InvalidCsvFileNameError(CsvError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"The file name is invalid. {file_name}")


class CsvReadError(CsvError):
    pass
