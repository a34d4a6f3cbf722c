"""
Data models and schemas for scanscripts.
"""

from .script import ExecutionMode, ScriptDescriptor, SelectionConfig, BoundScript
from .config import AppConfig
from .result import ScriptResult, RunSummary

__all__ = [
    'ExecutionMode',
    'ScriptDescriptor',
    'SelectionConfig',
    'BoundScript',
    'AppConfig',
    'ScriptResult',
    'RunSummary'
]
