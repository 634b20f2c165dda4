"""Check that the installed Python interpreter is recent enough."""

import logging
import subprocess

from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

MINIMUM_VERSION = Version("3.10")


class PythonCheckError(Exception):
    """Raised when the interpreter is missing, unparseable or too old."""


def parse_python_version(output: str) -> str:
    """Extract ``X.Y.Z`` from ``Python X.Y.Z`` output.

    Raises:
        PythonCheckError: If the output has no version.
    """
    if "Python " in output:
        parts = output.strip().split()
        if len(parts) >= 2:
            return parts[1]
    raise PythonCheckError("failed to detect Python version")


def is_version_at_least(version: str, minimum: Version = MINIMUM_VERSION) -> bool:
    try:
        return Version(version) >= minimum
    except InvalidVersion:
        logger.warning(f"Error parsing current version: {version!r}")
        return False


def read_python_version(executable: str = "python") -> str:
    """Run ``<executable> --version`` and return the combined output."""
    try:
        result = subprocess.run(
            [executable, "--version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=30,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise PythonCheckError(f"error executing Python: {e}") from e
    if result.returncode != 0:
        raise PythonCheckError(f"error executing Python: exit status {result.returncode}")
    return result.stdout

