"""Exception classes for scanscripts

Two tiers: ConfigurationError aborts the whole script phase, ScriptError
only affects the script that raised it.
"""

from typing import Any, Dict, Optional


class ScanScriptsError(Exception):
    """Base exception for all scanscripts errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ScanScriptsError):
    """Exception for errors that abort the whole script phase"""


class ScriptsFolderNotFoundError(ConfigurationError):
    """The scripts directory does not exist"""

    def __init__(self, path):
        super().__init__("Can't find scripts folder", {'path': str(path)})
        self.path = path


class ScriptConfigError(ConfigurationError):
    """The selection config file is missing or malformed"""

    def __init__(self, message: str, path=None):
        super().__init__(message, {'path': str(path) if path is not None else None})
        self.path = path


class ScriptError(ScanScriptsError):
    """Base exception for failures isolated to a single script"""


class ScriptRenderError(ScriptError):
    """The call format could not be turned into a command line"""


class ScriptExecutionError(ScriptError):
    """The script ran and exited with a nonzero status"""

    def __init__(self, return_code: int, command: Optional[str] = None):
        super().__init__(f"Exit code = {return_code}",
                         {'return_code': return_code, 'command': command})
        self.return_code = return_code


class ScriptSpawnError(ScriptError):
    """The script process could not be started"""

    def __init__(self, message: str, program: Optional[str] = None):
        super().__init__(message, {'program': program})
        self.program = program
