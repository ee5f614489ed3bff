from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional

from tqdm.auto import tqdm

from cestgen_shell.core.utils.string_utils import camel_case
from generator.errors import GeneratorError, OutputWriteError
from generator.model import FileResult, GenerationReport, GeneratorSettings
from generator.services.cest_template_service import CestTemplate
from generator.services.command_translate_service import CommandTranslateService, count_statements
from generator.services.directory_scan_service import DirectoryScanService, validate_file_name
from generator.services.document_normalize_service import DocumentNormalizeService
from generator.services.row_extract_service import RowExtractService

logger = logging.getLogger(__name__)


class GenerateController:
    """
    Orchestrates the conversion of recorded HTML test cases into Cest files.

    Directory level problems (no input directory, no input files) abort the run.
    Per-file problems are recorded in the report and the batch continues,
    unless settings.fail_fast is set, in which case the first one is re-raised.
    """

    def __init__(
            self,
            settings: GeneratorSettings,
            *,
            normalizer: Optional[DocumentNormalizeService] = None,
            translator: Optional[CommandTranslateService] = None,
            template: Optional[CestTemplate] = None,
    ) -> None:
        self.settings = settings
        self.scanner = DirectoryScanService(settings.input_dir, settings.output_dir, settings.input_glob)
        self.normalizer = normalizer or DocumentNormalizeService()
        self.translator = translator or CommandTranslateService()
        self.template = template or CestTemplate()

    # -------- Naming --------

    def output_class_name(self, input_file_name: str) -> str:
        stem = input_file_name
        suffix = f".{self.settings.input_extension}"
        if stem.endswith(suffix):
            stem = stem[:-len(suffix)]
        return camel_case(stem) + self.settings.class_suffix

    def output_file_path(self, class_name: str) -> Path:
        return Path(self.settings.output_dir) / f"{class_name}.{self.settings.output_extension}"

    # -------- Pipeline --------

    def translate_document(self, html: str) -> List[str]:
        """Runs normalizer, extractor and translator on one document's markup."""
        extractor = RowExtractService(self.normalizer.normalize(html))
        # The base URL is not used in the generated code, but a document without one is rejected.
        url = extractor.extract_url()
        logger.debug("Recorded base URL: %s", url)
        return self.translator.translate(extractor.extract_rows())

    def generate_file(self, input_path: Path) -> FileResult:
        """Generates the Cest file for one input document. Raises GeneratorError on failure."""
        input_path = Path(input_path)
        file_name = validate_file_name(input_path.name, self.settings.input_extension)

        class_name = self.output_class_name(file_name)
        output_path = self.output_file_path(class_name)
        statements = self.translate_document(self.normalizer.read(input_path))

        self._write(output_path, self.template.render(class_name, statements))
        logger.info("Generated %s from %s", output_path.name, file_name)

        return FileResult(
            input_path=input_path,
            output_path=output_path,
            class_name=class_name,
            statements=count_statements(statements),
        )

    def run(self) -> GenerationReport:
        start = time.perf_counter()
        input_paths = self.scanner.list_input_files()

        report = GenerationReport(input_dir=self.settings.input_dir, output_dir=self.settings.output_dir)
        iterator = input_paths
        if self.settings.show_progress:
            iterator = tqdm(input_paths, desc="Generating", unit=" file", leave=False)

        for input_path in iterator:
            report.results.append(self._run_one(input_path))

        report.duration_s = round(time.perf_counter() - start, 3)
        logger.info(
            "Generation finished: %d succeeded, %d failed in %.3fs.",
            len(report.succeeded), len(report.failed), report.duration_s,
        )
        return report

    def _run_one(self, input_path: Path) -> FileResult:
        try:
            return self.generate_file(input_path)
        except GeneratorError as e:
            if self.settings.fail_fast:
                raise
            logger.error("Failed to generate from %s: %s", input_path.name, e)
            return FileResult(input_path=input_path, error_type=type(e).__name__, error=str(e))

    @staticmethod
    def _write(output_path: Path, code: str) -> None:
        try:
            with open(output_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(code)
        except OSError as e:
            logger.error("Could not write %s: %s", output_path, e)
            raise OutputWriteError(output_path) from e


def list_failures(report: GenerationReport) -> List[str]:
    """Human readable messages for the failed files of a report, prefixed with the file name."""
    return [f"{r.input_path.name}: {r.error}" for r in report.failed if r.error]
