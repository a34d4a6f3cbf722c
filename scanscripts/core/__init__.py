"""
Core modules for scanscripts functionality.
"""

from .config import ConfigManager
from ..exceptions import (
    ScanScriptsError,
    ConfigurationError,
    ScriptsFolderNotFoundError,
    ScriptConfigError,
    ScriptError,
    ScriptRenderError,
    ScriptExecutionError,
    ScriptSpawnError
)
from .parser import parse_script_file
from .repository import ScriptRepository, find_scripts, parse_scripts
from .selection import DEFAULT_SCRIPT, filter_by_tags, init_scripts, read_script_config
from .template import ScriptTemplate, render_command, split_command
from .runner import ScriptRunner
from .status import StatusDispatcher

__all__ = [
    'ConfigManager',
    'ScanScriptsError',
    'ConfigurationError',
    'ScriptsFolderNotFoundError',
    'ScriptConfigError',
    'ScriptError',
    'ScriptRenderError',
    'ScriptExecutionError',
    'ScriptSpawnError',
    'parse_script_file',
    'ScriptRepository',
    'find_scripts',
    'parse_scripts',
    'DEFAULT_SCRIPT',
    'filter_by_tags',
    'init_scripts',
    'read_script_config',
    'ScriptTemplate',
    'render_command',
    'split_command',
    'ScriptRunner',
    'StatusDispatcher'
]
