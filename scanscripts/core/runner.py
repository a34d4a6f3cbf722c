"""
Script Runner for scanscripts
Binds each selected script to the scan results, renders and runs it, one at a time.
"""

import logging
from typing import List, Optional, Union

from ..models.result import ScriptResult
from ..models.script import BoundScript, IPAddress, ScriptDescriptor
from ..security import ScriptExecutor
from ..exceptions import ScriptError, ScriptExecutionError
from .template import ScriptTemplate, split_command

logger = logging.getLogger(__name__)


class ScriptRunner:
    """Runs scripts sequentially, isolating per-script failures."""

    def __init__(self, executor: Optional[ScriptExecutor] = None,
                 template: Optional[ScriptTemplate] = None,
                 status_dispatcher=None):
        self.executor = executor or ScriptExecutor()
        self.template = template or ScriptTemplate()
        self.status_dispatcher = status_dispatcher

    def run_script(self, bound: BoundScript) -> str:
        """Render and execute one bound script, returning its stdout."""
        logger.debug(f"run self {bound!r}")
        to_run = self.template.render(bound)
        return self.executor.execute(split_command(to_run))

    def run_all(self, scripts: List[ScriptDescriptor], ip: Union[str, IPAddress],
                open_ports: List[int]) -> List[ScriptResult]:
        """Run every script against ``ip``; a failing script never stops the others."""
        results = []
        for descriptor in scripts:
            bound = BoundScript.build(descriptor, ip, open_ports)
            if self.status_dispatcher:
                self.status_dispatcher.script_starting(descriptor.name, str(bound.ip))

            result = self._run_isolated(bound)
            results.append(result)

            if self.status_dispatcher:
                self.status_dispatcher.script_completed(result)
        return results

    def _run_isolated(self, bound: BoundScript) -> ScriptResult:
        name = bound.descriptor.name
        command = None
        try:
            command = self.template.render(bound)
            output = self.executor.execute(split_command(command))
        except ScriptExecutionError as e:
            logger.debug(f"Script {name} failed: {e}")
            return ScriptResult(name=name, command=command, success=False,
                                return_code=e.return_code, error_message=str(e))
        except ScriptError as e:
            logger.debug(f"Script {name} did not run: {e}")
            return ScriptResult(name=name, command=command, success=False,
                                error_message=str(e))

        return ScriptResult(name=name, command=command, success=True,
                            output=output, return_code=0)
