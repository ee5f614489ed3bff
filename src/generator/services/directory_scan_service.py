from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from cestgen_shell.core.utils.string_utils import is_valid_file_name
from generator.errors import (
    InvalidFileNameError,
    MissingInputDirectoryError,
    NoInputFilesError,
    OutputDirectoryError,
)

logger = logging.getLogger(__name__)


class DirectoryScanService:
    """
    Locates the recorded test documents for a run and prepares the output directory.
    """

    def __init__(self, input_dir: Path, output_dir: Path, pattern: str = "*.html"):
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)
        self.pattern = pattern

    def confirm_input_dir(self) -> None:
        if not self.input_dir.is_dir():
            raise MissingInputDirectoryError(self.input_dir)

    def confirm_output_dir(self) -> None:
        """Creates the output directory if it does not exist yet."""
        if not self.output_dir.exists():
            logger.info("Creating output directory %s", self.output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create output directory %s: %s", self.output_dir, e)
            raise OutputDirectoryError(self.output_dir) from e

    def list_input_files(self) -> List[Path]:
        """
        Returns the input files matching the glob pattern, sorted by name
        so runs are reproducible across filesystems.
        """
        self.confirm_input_dir()
        self.confirm_output_dir()

        paths = sorted(p for p in self.input_dir.glob(self.pattern) if p.is_file())
        if not paths:
            raise NoInputFilesError(self.input_dir, self.pattern)

        logger.debug("Found %d input file(s) in %s", len(paths), self.input_dir)
        return paths


def validate_file_name(file_name: str, extension: str = "html") -> str:
    """
    Rejects names that do not fully match [A-Za-z][A-Za-z0-9_]+.<extension>.
    A security measure against NULL byte and directory traversal attacks.
    """
    if not is_valid_file_name(file_name, extension):
        raise InvalidFileNameError(file_name)
    return file_name
