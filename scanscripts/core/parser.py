"""
Script header parsing.

A script file describes itself in the comment block right after its first
line (usually the interpreter line)::

    #!/usr/bin/env python3
    #tags = ["core_approved", "example"]
    #developer = [ "example", "https://example.org" ]
    #ports_separator = ","
    #call_format = "python3 {{script}} {{ip}} {{port}}"

The comment markers are stripped and the block is parsed as TOML. Parsing is
best effort: a broken file is reported at debug level and skipped so the
other scripts still load.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import toml

from ..models.script import ScriptDescriptor

logger = logging.getLogger(__name__)

COMMENT_MARKER = '#'


def read_header(script_path: Path) -> str:
    """Collect the leading comment block, markers removed, one entry per line.

    Raises OSError when the file cannot be read.
    """
    lines_buf = []
    with open(script_path, 'r', encoding='utf-8', errors='replace') as f:
        # The first line is the interpreter marker and never part of the header.
        f.readline()
        for line in f:
            if not line.startswith(COMMENT_MARKER):
                break
            lines_buf.append(line.replace(COMMENT_MARKER, '').strip() + '\n')
    return ''.join(lines_buf)


def parse_script_file(script_path: Union[str, Path]) -> Optional[ScriptDescriptor]:
    """Parse a script file header into a descriptor, or None on any failure."""
    script_path = Path(script_path)

    try:
        header = read_header(script_path)
    except OSError as e:
        logger.debug(f"Failed to read file: {script_path} ({e})")
        return None

    logger.debug(f"ScriptFile {script_path} lines\n{header}")

    if not header.strip():
        logger.debug(f"No header found in {script_path}")
        return None

    try:
        header_data = toml.loads(header)
        parsed = ScriptDescriptor.model_validate(header_data)
    except toml.TomlDecodeError as e:
        logger.debug(f"Failed to parse ScriptFile headers {script_path}: {e}")
        return None
    except Exception as e:
        logger.debug(f"Error parsing ScriptFile {script_path}: {e}")
        return None

    parsed = parsed.model_copy(update={'source_path': script_path})
    logger.debug(f"Parsed ScriptFile {script_path}\n{parsed!r}")
    return parsed
