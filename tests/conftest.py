#!/usr/bin/env python3
"""
Pytest configuration and fixtures for scanscripts tests
"""

import pytest
import tempfile
import os
import shlex
import shutil
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def python_call(*args: str) -> str:
    """Command line prefix running the current interpreter."""
    return " ".join([shlex.quote(sys.executable)] + list(args))


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests"""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def home_dir(temp_dir):
    """A fake home directory holding an empty scripts folder"""
    home = Path(temp_dir) / "home"
    (home / ".scanscripts").mkdir(parents=True)
    return home


@pytest.fixture
def write_script(home_dir):
    """Write a script into the fake home's scripts folder.

    ``header`` lines are written as ``#`` comments after the first line.
    """
    def _write(name, header, body="", first_line="#!/usr/bin/env python3"):
        lines = [first_line] + [f"#{line}" for line in header]
        script_path = home_dir / ".scanscripts" / name
        script_path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
        return script_path
    return _write


@pytest.fixture
def write_selection_config(home_dir):
    """Write the selection config into the fake home"""
    def _write(content):
        config_path = home_dir / ".scanscripts.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def sample_home(home_dir):
    """Fake home populated with the fixture scripts and selection config"""
    for script in (FIXTURES_DIR / "scripts").iterdir():
        shutil.copy(script, home_dir / ".scanscripts" / script.name)
    shutil.copy(FIXTURES_DIR / "sample_scanscripts.toml", home_dir / ".scanscripts.toml")
    return home_dir
