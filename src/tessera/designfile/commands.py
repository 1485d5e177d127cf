"""
External command execution for design-file exporters.
"""

from __future__ import annotations

import logging
import subprocess

from ..core.errors import ExporterToolError

logger = logging.getLogger(__name__)


def run_command(args: list[str], timeout: int = 300) -> str:
    """
    Run an external command and return its stripped stdout.

    Raises:
        ExporterToolError: If the command is missing, times out or exits non-zero
    """
    logger.debug("Running %s", " ".join(args))
    try:
        completed = subprocess.run(
            args,
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ExporterToolError(f"Command not found: {args[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise ExporterToolError(f"Command timed out after {timeout}s: {' '.join(args)}") from e
    except subprocess.CalledProcessError as e:
        message = (e.stderr or e.stdout or "").strip() or str(e)
        raise ExporterToolError(message) from e

    return completed.stdout.strip()
