"""
Script descriptor and selection models.
"""

import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PORTS_SEPARATOR = ","


class ExecutionMode(str, Enum):
    """Which scripts run after a scan."""
    NONE = "none"
    DEFAULT = "default"
    CUSTOM = "custom"

    @classmethod
    def from_string(cls, value: str) -> "ExecutionMode":
        """Parse a mode name, ignoring case and surrounding whitespace."""
        normalized = (value or "").strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown scripts mode '{value}', expected one of: {choices}")


class ScriptDescriptor(BaseModel):
    """A script definition read from a file header, or the built-in default.

    Every field is optional. ``trigger_port`` is stored under the ``port``
    key in script headers.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    source_path: Optional[Path] = Field(None, exclude=True)
    tags: Optional[List[str]] = None
    developer: Optional[List[str]] = None
    trigger_port: Optional[str] = Field(None, alias='port')
    ports_separator: Optional[str] = None
    call_format: Optional[str] = None

    @property
    def name(self) -> str:
        """Display name for status output."""
        if self.source_path is None:
            return "default"
        return self.source_path.name

    @property
    def separator(self) -> str:
        return self.ports_separator if self.ports_separator is not None else DEFAULT_PORTS_SEPARATOR


class SelectionConfig(BaseModel):
    """The user's required tags record.

    Only ``tags`` takes part in selection; ``ports`` and ``developer`` are
    accepted so existing config files keep parsing.
    """
    model_config = ConfigDict(extra='ignore')

    tags: Optional[List[str]] = None
    ports: Optional[List[str]] = None
    developer: Optional[List[str]] = None


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass
class BoundScript:
    """A descriptor combined with one scan's address and open ports."""
    descriptor: ScriptDescriptor
    ip: IPAddress
    open_ports: List[int] = field(default_factory=list)

    @classmethod
    def build(cls, descriptor: ScriptDescriptor, ip: Union[str, IPAddress],
              open_ports: List[int]) -> "BoundScript":
        if isinstance(ip, str):
            ip = ipaddress.ip_address(ip)
        return cls(descriptor=descriptor, ip=ip, open_ports=list(open_ports))

    @property
    def ports_string(self) -> str:
        """Port argument for the call format; a trigger port wins over scan ports."""
        if self.descriptor.trigger_port is not None:
            return self.descriptor.trigger_port
        return self.descriptor.separator.join(str(port) for port in self.open_ports)
