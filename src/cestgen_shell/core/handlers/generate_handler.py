# ============================================
# file: src/cestgen_shell/core/handlers/generate_handler.py
# ============================================
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from cestgen_shell.core.managers.config_manager import config_manager
from cestgen_shell.core.utils.path_utils import PathUtils
from generator.controllers.generate_controller import GenerateController, list_failures
from generator.errors import ConfigurationError, GeneratorError
from generator.model import GeneratorSettings

logger = logging.getLogger(__name__)

generate_help_text = """
  generate [--input <dir>] [--output <dir>] [--suffix <Suffix>] [--fail-fast] [--no-progress]
      Converts every recorded *.html test case in the input directory into a
      Codeception <Name>Cest.php file in the output directory.
      Directories default to <project>/input and <project>/output.
""".strip()


def _default_dirs() -> tuple:
    """Install-location defaults; falls back to the working directory outside a checkout."""
    try:
        return PathUtils.get_default_input_dir(), PathUtils.get_default_output_dir()
    except FileNotFoundError:
        logger.debug("Project root not found; using the current directory for defaults.")
        return Path.cwd() / "input", Path.cwd() / "output"


def build_settings(
        input_dir: Optional[str] = None,
        output_dir: Optional[str] = None,
        class_suffix: Optional[str] = None,
        fail_fast: Optional[bool] = None,
        show_progress: Optional[bool] = None,
) -> GeneratorSettings:
    """
    Merges command line overrides over the 'generator' section of settings.json.
    Explicit arguments win, then configured values, then the install-location defaults.
    """
    cfg = config_manager.get_section("generator")
    default_input, default_output = _default_dirs()

    values = {k: v for k, v in cfg.items() if v is not None and k in GeneratorSettings.model_fields}
    values["input_dir"] = Path(input_dir or cfg.get("input_dir") or default_input)
    values["output_dir"] = Path(output_dir or cfg.get("output_dir") or default_output)
    if class_suffix is not None:
        values["class_suffix"] = class_suffix
    if fail_fast is not None:
        values["fail_fast"] = fail_fast
    if show_progress is not None:
        values["show_progress"] = show_progress
    return GeneratorSettings(**values)


def handle_generate(args: List[str], _stdin: Optional[str] = None) -> int:
    """
    Runs the generator. Messages for failed files are printed, one per line.

    Returns:
        0 when every file was generated, 1 otherwise.
    """
    parser = argparse.ArgumentParser(prog="generate", description="Generate Cest files from recorded HTML.")
    parser.add_argument("--input", "-i", help="Directory with the recorded *.html files.")
    parser.add_argument("--output", "-o", help="Directory for the generated Cest files.")
    parser.add_argument("--suffix", help="Class name suffix (default: Cest).")
    parser.add_argument("--fail-fast", action="store_true", default=None,
                        help="Stop at the first file that cannot be generated.")
    parser.add_argument("--no-progress", dest="show_progress", action="store_false", default=None,
                        help="Do not show a progress bar.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    settings = build_settings(
        input_dir=pargs.input,
        output_dir=pargs.output,
        class_suffix=pargs.suffix,
        fail_fast=pargs.fail_fast,
        show_progress=pargs.show_progress,
    )
    logger.debug("Generator settings: %s", settings)

    try:
        report = GenerateController(settings).run()
    except ConfigurationError as e:
        print(e)
        return 1
    except GeneratorError as e:
        # Only reached with --fail-fast.
        print(e)
        return 1

    for message in list_failures(report):
        print(message)
    for result in report.succeeded:
        print(f"{result.input_path.name} -> {result.output_path}")
    print(f"Generated {len(report.succeeded)} of {len(report.results)} file(s) in {report.duration_s}s.")
    return 0 if report.ok else 1
