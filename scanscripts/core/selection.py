"""
Script selection.

``none`` runs nothing, ``default`` runs the built-in nmap call and ``custom``
loads the user's scripts and keeps those carrying every tag listed in the
selection config (``~/.scanscripts.toml``)::

    tags = ["core_approved", "example"]
    developer = ["example"]
    ports = ["80"]

A script may carry more tags than the config asks for, but never fewer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import toml
from pydantic import ValidationError

from ..models.script import ExecutionMode, ScriptDescriptor, SelectionConfig
from ..exceptions import ConfigurationError, ScriptConfigError
from .repository import DEFAULT_SCRIPTS_DIR, ScriptRepository

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".scanscripts.toml"

DEFAULT_SCRIPT_TOML = '''tags = ["core_approved", "scanscripts", "default"]
developer = [ "scanscripts", "https://github.com/scanscripts" ]
ports_separator = ","
call_format = "nmap -vvv -p {{port}} {{ip}}"
'''

DEFAULT_SCRIPT = ScriptDescriptor.model_validate(toml.loads(DEFAULT_SCRIPT_TOML))


def resolve_home(home_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return ``home_dir`` or the current user's home directory."""
    if home_dir:
        return Path(home_dir)
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigurationError("Could not infer scripts path.", {'error': str(e)})


def read_script_config(base_dir: Optional[Union[str, Path]] = None,
                       config_file: str = DEFAULT_CONFIG_FILE) -> SelectionConfig:
    """Load the selection config. Any failure is fatal for the script phase."""
    try:
        config_path = resolve_home(base_dir) / config_file
    except ConfigurationError:
        raise ScriptConfigError("Could not infer ScriptConfig path.")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptConfigError(f"Failed to read script config {config_path}: {e}", config_path)

    try:
        return SelectionConfig.model_validate(toml.loads(content))
    except toml.TomlDecodeError as e:
        raise ScriptConfigError(f"Failed to parse script config {config_path}: {e}", config_path)
    except ValidationError as e:
        raise ScriptConfigError(f"Invalid script config {config_path}: {e}", config_path)


def filter_by_tags(script_config: SelectionConfig,
                   scripts: List[ScriptDescriptor]) -> List[ScriptDescriptor]:
    """Keep the scripts whose tags include every tag of the config."""
    if script_config.tags is None:
        logger.debug("No tags in script config, no scripts selected")
        return []

    config_tags = set(script_config.tags)
    selected = []
    for script in scripts:
        if script.tags is None:
            logger.debug(f"Script has no tags {script.name}")
            continue
        script_tags = set(script.tags)
        if config_tags.issubset(script_tags):
            selected.append(script)
        else:
            logger.debug(f"Script tags does not match config tags {sorted(script_tags)} {script.source_path}")
    return selected


def init_scripts(mode: ExecutionMode,
                 home_dir: Optional[Union[str, Path]] = None,
                 scripts_dir: str = DEFAULT_SCRIPTS_DIR,
                 config_file: str = DEFAULT_CONFIG_FILE) -> List[ScriptDescriptor]:
    """Return the descriptors to run for ``mode``.

    Raises ConfigurationError in custom mode when the home directory, the
    scripts folder or the selection config cannot be used.
    """
    if mode == ExecutionMode.NONE:
        return []

    if mode == ExecutionMode.DEFAULT:
        return [DEFAULT_SCRIPT]

    base_dir = resolve_home(home_dir)
    repository = ScriptRepository(base_dir, scripts_dir)
    parsed_scripts = repository.load()
    logger.debug(f"Scripts parsed \n{parsed_scripts}")

    script_config = read_script_config(base_dir, config_file)
    logger.debug(f"Script config \n{script_config}")

    scripts_to_run = filter_by_tags(script_config, parsed_scripts)
    logger.debug(f"Script(s) to run {[script.name for script in scripts_to_run]}")
    return scripts_to_run
