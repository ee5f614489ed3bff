# ============================================
# file: src/cestgen_shell/core/handlers/csv_handler.py
# ============================================
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from cestgen_shell.core.managers.config_manager import config_manager
from csv_reader.model import CsvError, CsvReadSettings
from csv_reader.services.csv_read_service import CsvReadService

logger = logging.getLogger(__name__)

csv_help_text = """
  csv <path> [--no-header] [--keep-empty]
      Reads a CSV file and prints its rows as JSON.
      With a header (default) every row becomes an object keyed by column name.
""".strip()


def handle_csv(args: List[str], _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="csv", description="Read a CSV file into records.")
    parser.add_argument("path", help="Path to the .csv file.")
    parser.add_argument("--no-header", dest="use_header", action="store_false", default=None,
                        help="Treat the first line as data.")
    parser.add_argument("--keep-empty", dest="skip_empty_rows", action="store_false", default=None,
                        help="Keep blank lines as empty rows.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    values = config_manager.get_section("csv")
    if pargs.use_header is not None:
        values["use_header"] = pargs.use_header
    if pargs.skip_empty_rows is not None:
        values["skip_empty_rows"] = pargs.skip_empty_rows

    try:
        records = CsvReadService(CsvReadSettings(**values)).read(pargs.path)
    except CsvError as e:
        print(e)
        return 1

    print(json.dumps(records, indent=2, ensure_ascii=False))
    return 0
