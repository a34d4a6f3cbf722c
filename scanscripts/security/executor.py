"""
Script execution without shell=True.
"""

import logging
import subprocess
from typing import List, Optional

from ..exceptions import ScriptExecutionError, ScriptSpawnError

logger = logging.getLogger(__name__)


def normalize_exit_status(returncode: Optional[int]) -> int:
    """Turn a Popen return code into a single integer status.

    A normal exit keeps its code, a signal-terminated process reports the
    signal number and an unknown state reports -1.
    """
    if returncode is None:
        return -1
    if returncode < 0:
        return -returncode
    return returncode


class ScriptExecutor:
    """Runs one argument vector and captures its output."""

    def execute(self, arguments: List[str]) -> str:
        """Run ``arguments`` and return stdout, or raise on failure.

        There is no timeout: a process that never exits blocks the caller.
        """
        logger.debug(f"Arguments vec: {arguments}")
        program, args = arguments[0], arguments[1:]

        try:
            process = subprocess.Popen(
                [program] + args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                shell=False,  # NEVER use shell=True
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments Popen refuses, such as embedded NUL bytes
            logger.debug(f"Command error {e}")
            raise ScriptSpawnError(str(e), program)

        with process:
            stdout, stderr = process.communicate()

        exit_status = normalize_exit_status(process.returncode)
        if stderr:
            logger.debug(f"{program} stderr:\n{stderr}")

        if exit_status != 0:
            raise ScriptExecutionError(exit_status, ' '.join(arguments))
        return stdout
