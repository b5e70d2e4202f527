"""Top-level package for the Trivia Toolkit.

Provides subpackages:
- trivia_toolkit.parsing – format detection and dialect parsers for generated text
- trivia_toolkit.builder – candidate pools, sampling and recipe execution
- trivia_toolkit.recipes – recipe validation and form handling
- trivia_toolkit.engine – caller-facing facade
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("trivia_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The trivia_toolkit contributors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]
