# ============================================
# file: src/generator/model.py
# ============================================
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class GeneratorSettings(BaseModel):
    input_dir: Path
    output_dir: Path
    input_extension: str = "html"
    class_suffix: str = "Cest"
    output_extension: str = "php"
    fail_fast: bool = False
    show_progress: bool = False

    @property
    def input_glob(self) -> str:
        return f"*.{self.input_extension}"


class Command(str, Enum):
    """The closed vocabulary of recorded commands the translator understands."""
    OPEN = "open"
    CLICK = "click"
    TYPE = "type"
    SELECT = "select"
    CLICK_AND_WAIT = "clickAndWait"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str) -> "Command":
        for member in cls:
            if member is not cls.UNKNOWN and member.value == raw:
                return member
        return cls.UNKNOWN


class ActionRow(BaseModel):
    """One recorded interaction, after target and value formatting."""
    command: Command
    raw_command: str
    target: str = ""
    value: str = ""


class FileResult(BaseModel):
    input_path: Path
    output_path: Optional[Path] = None
    class_name: Optional[str] = None
    statements: int = 0
    error_type: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GenerationReport(BaseModel):
    input_dir: Path
    output_dir: Path
    results: List[FileResult] = Field(default_factory=list)
    duration_s: float = 0.0

    @property
    def succeeded(self) -> List[FileResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
