# src/generator/errors.py
from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class GeneratorError(Exception):
    """Base class for every error raised while generating Cest files."""


# -------- Configuration / preconditions (abort the whole run) --------

class ConfigurationError(GeneratorError):
    pass


class MissingInputDirectoryError(ConfigurationError):
    def __init__(self, input_dir: PathLike):
        self.input_dir = Path(input_dir)
        super().__init__("There is not a directory of input files.")


class NoInputFilesError(ConfigurationError):
    def __init__(self, input_dir: PathLike, pattern: str):
        self.input_dir = Path(input_dir)
        self.pattern = pattern
        super().__init__("There are not any input files.")


class OutputDirectoryError(ConfigurationError):
    def __init__(self, output_dir: PathLike):
        self.output_dir = Path(output_dir)
        super().__init__(f"Failed to create the output directory. {output_dir}")


# -------- Per-file errors --------

class InvalidFileNameError(GeneratorError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"The file name is invalid. {file_name}")


class StructureError(GeneratorError):
    """A required path is missing from the parsed document."""


class MissingUrlError(StructureError):
    def __init__(self):
        super().__init__("There is not a url in the html file.")


class MissingRowsError(StructureError):
    def __init__(self):
        super().__init__("There is not a test case in the html file.")


class InputReadError(GeneratorError):
    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(f"Failed to get HTML's contents. {path}")


class OutputWriteError(GeneratorError):
    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(f"This program failed to output the following file. {path}")
