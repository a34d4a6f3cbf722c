"""
Safe process execution for rendered scripts.
"""

from .executor import ScriptExecutor, normalize_exit_status

__all__ = [
    'ScriptExecutor',
    'normalize_exit_status'
]
