"""
Result models.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ScriptResult(BaseModel):
    """Outcome of running one script."""
    name: str = Field(..., max_length=255)
    command: Optional[str] = None
    success: bool
    output: str = ''
    return_code: Optional[int] = None
    error_message: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class RunSummary(BaseModel):
    """Collection of script results for one address."""
    target: str
    results: List[ScriptResult] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return self.total - self.successful
