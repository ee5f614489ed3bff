# src/cestgen_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important project paths.
    The generator core never calls these; they are only used by callers
    that want the install-location defaults.
    """

    # --- Project specific paths

    @staticmethod
    def get_project_root() -> Path:
        """
        Returns the absolute path of the project root.
        Searches upwards for a directory containing 'src' and 'pyproject.toml'.
        """
        current_path = Path(__file__).resolve().parent
        while current_path != current_path.parent:
            src_dir = current_path / "src"
            pyproject_toml = current_path / "pyproject.toml"
            if src_dir.exists() and src_dir.is_dir() and pyproject_toml.exists() and pyproject_toml.is_file():
                return current_path
            current_path = current_path.parent
        raise FileNotFoundError(
            "Could not find the project root. Search for a directory containing 'src' and 'pyproject.toml'.")

    @staticmethod
    def get_shell_package_root() -> Path:
        """
        Returns the directory of the cestgen_shell package, wherever it is installed.
        settings.json ships inside it as package data.
        """
        return Path(__file__).resolve().parents[2]

    # --- Generator default directories ---

    @staticmethod
    def get_default_input_dir() -> Path:
        """
        Returns the default directory holding recorded HTML test cases.
        (e.g., /path/to/project/input)
        """
        return PathUtils.get_project_root() / "input"

    @staticmethod
    def get_default_output_dir() -> Path:
        """
        Returns the default directory the generated Cest files are written to.
        (e.g., /path/to/project/output)
        """
        return PathUtils.get_project_root() / "output"
