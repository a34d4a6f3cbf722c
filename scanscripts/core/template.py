"""
Call format rendering.

A call format comes in two shapes. When it contains ``{{script}}`` the
values ``script``, ``ip`` and ``port`` are available, so a script can hand
its own path to an interpreter::

    call_format = "python3 {{script}} {{ip}} {{port}}"

Without ``{{script}}`` only ``ip`` and ``port`` are available, which suits
system tools::

    call_format = "nmap -vvv -p {{port}} {{ip}}"

Placeholders are written exactly as shown. Any other placeholder, spacing
inside the braces, filters or template tags make the format unusable and the
script is skipped.
"""

import logging
import shlex
from typing import Dict, List

from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from ..models.script import BoundScript
from ..exceptions import ScriptRenderError

logger = logging.getLogger(__name__)

SCRIPT_PLACEHOLDER = "{{script}}"


class ScriptTemplate:
    """Renders bound scripts into command lines."""

    def __init__(self):
        self.environment = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True
        )

    def build_context(self, bound: BoundScript) -> Dict[str, str]:
        """Values available to the call format of ``bound``."""
        call_format = bound.descriptor.call_format
        context = {
            'ip': str(bound.ip),
            'port': bound.ports_string,
        }
        if SCRIPT_PLACEHOLDER in call_format:
            if bound.descriptor.source_path is None:
                raise ScriptRenderError(
                    f"Call format of {bound.descriptor.name} uses {SCRIPT_PLACEHOLDER} but the script has no path"
                )
            context['script'] = str(bound.descriptor.source_path)
        return context

    def check_placeholders(self, call_format: str, context: Dict[str, str]) -> None:
        """Accept only text and bare placeholders such as ``{{ip}}``.

        Filters, expressions, blocks and spaced or whitespace-controlled
        markers all make the format unsupported.
        """
        expected = 'variable_begin'
        for lineno, token_type, value in self.environment.lex(call_format):
            if token_type == 'data' and expected == 'variable_begin':
                continue
            if token_type != expected:
                raise ScriptRenderError(f"Unsupported placeholder syntax near {value!r}", {'line': lineno})
            if token_type == 'variable_begin':
                if value != self.environment.variable_start_string:
                    raise ScriptRenderError(f"Unsupported placeholder syntax near {value!r}", {'line': lineno})
                expected = 'name'
            elif token_type == 'name':
                if value not in context:
                    raise ScriptRenderError(f"Unsupported placeholder {value!r}", {'line': lineno})
                expected = 'variable_end'
            else:
                if value != self.environment.variable_end_string:
                    raise ScriptRenderError(f"Unsupported placeholder syntax near {value!r}", {'line': lineno})
                expected = 'variable_begin'
        if expected != 'variable_begin':
            raise ScriptRenderError("Unterminated placeholder")

    def render(self, bound: BoundScript) -> str:
        """Render the call format of ``bound`` into a command line."""
        call_format = bound.descriptor.call_format
        if call_format is None:
            raise ScriptRenderError("Failed to parse execution format.")

        context = self.build_context(bound)
        try:
            self.check_placeholders(call_format, context)
            to_run = self.environment.from_string(call_format).render(**context)
        except TemplateError as e:
            raise ScriptRenderError(
                f"Unsupported call format for {bound.descriptor.name}: {e}",
                {'call_format': call_format}
            )

        logger.debug(f"To run {to_run}")
        return to_run


def split_command(command: str) -> List[str]:
    """Split a rendered command line into arguments, honouring quotes."""
    try:
        arguments = shlex.split(command)
    except ValueError as e:
        raise ScriptRenderError(f"Failed to parse script arguments: {e}", {'command': command})

    if not arguments:
        raise ScriptRenderError("Empty command", {'command': command})
    return arguments


_default_template = ScriptTemplate()


def render_command(bound: BoundScript) -> str:
    """Render ``bound`` with the shared template environment."""
    return _default_template.render(bound)
