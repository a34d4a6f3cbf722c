#!/usr/bin/env python3
"""
Unit tests for scanscripts.core.parser module
"""

import unittest
import tempfile
import shutil
from pathlib import Path

from scanscripts.core.parser import parse_script_file, read_header

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scripts"


class TestFixtureScripts(unittest.TestCase):
    """Parse the shipped example scripts"""

    def test_python_script(self):
        script = parse_script_file(FIXTURES_DIR / "sample_script.py")

        self.assertIsNotNone(script)
        self.assertEqual(script.tags, ["core_approved", "example"])
        self.assertEqual(script.developer, ["example", "https://example.org"])
        self.assertEqual(script.trigger_port, "80")
        self.assertIsNone(script.ports_separator)
        self.assertEqual(script.call_format, "python3 {{script}} {{ip}} {{port}}")
        self.assertEqual(script.source_path, FIXTURES_DIR / "sample_script.py")
        self.assertEqual(script.name, "sample_script.py")

    def test_shell_script_with_spaced_markers(self):
        script = parse_script_file(FIXTURES_DIR / "sample_script.sh")

        self.assertIsNotNone(script)
        self.assertEqual(script.tags, ["core_approved", "example", "shell"])
        self.assertEqual(script.trigger_port, "443")
        self.assertEqual(script.ports_separator, " ")
        self.assertEqual(script.separator, " ")

    def test_text_descriptor(self):
        script = parse_script_file(FIXTURES_DIR / "sample_script.txt")

        self.assertIsNotNone(script)
        self.assertIsNone(script.trigger_port)
        self.assertEqual(script.call_format, "nmap -vvv -p {{port}} {{ip}}")

    def test_blank_second_line_is_rejected(self):
        self.assertIsNone(parse_script_file(FIXTURES_DIR / "broken_script.py"))


class TestHeaderParsing(unittest.TestCase):
    """Header extraction and failure handling"""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write(self, name, content):
        path = self.temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_first_line_is_always_skipped(self):
        path = self._write("first.sh", '#tags = ["skipped"]\n#call_format = "echo {{ip}}"\n')

        script = parse_script_file(path)

        self.assertIsNotNone(script)
        self.assertIsNone(script.tags)
        self.assertEqual(script.call_format, "echo {{ip}}")

    def test_header_stops_at_first_non_comment(self):
        path = self._write("gap.py", (
            "#!/usr/bin/env python3\n"
            '#tags = ["a"]\n'
            "import os\n"
            '#call_format = "echo {{ip}}"\n'
        ))

        self.assertEqual(read_header(path), 'tags = ["a"]\n')
        script = parse_script_file(path)
        self.assertEqual(script.tags, ["a"])
        self.assertIsNone(script.call_format)

    def test_all_markers_are_removed(self):
        path = self._write("hashes.sh", '#!/bin/sh\n## tags = ["a"] \n#call_format = "echo #1 {{ip}}"\n')

        self.assertEqual(read_header(path), 'tags = ["a"]\ncall_format = "echo 1 {{ip}}"\n')

    def test_windows_line_endings(self):
        path = self.temp_dir / "crlf.sh"
        path.write_bytes(b'#!/bin/sh\r\n#tags = ["a", "b"]\r\n#port = "22"\r\n')

        script = parse_script_file(path)

        self.assertEqual(script.tags, ["a", "b"])
        self.assertEqual(script.trigger_port, "22")

    def test_unknown_keys_are_ignored(self):
        path = self._write("extra.sh", '#!/bin/sh\n#tags = ["a"]\n#description = "extra"\n')

        script = parse_script_file(path)

        self.assertIsNotNone(script)
        self.assertEqual(script.tags, ["a"])

    def test_malformed_toml(self):
        path = self._write("bad.sh", '#!/bin/sh\n#tags = ["a"\n')
        self.assertIsNone(parse_script_file(path))

    def test_wrong_field_type(self):
        path = self._write("types.sh", '#!/bin/sh\n#tags = "a"\n')
        self.assertIsNone(parse_script_file(path))

    def test_numeric_port_is_rejected(self):
        path = self._write("port.sh", '#!/bin/sh\n#port = 80\n')
        self.assertIsNone(parse_script_file(path))

    def test_missing_file(self):
        self.assertIsNone(parse_script_file(self.temp_dir / "missing.sh"))

    def test_directory(self):
        subdir = self.temp_dir / "subdir"
        subdir.mkdir()
        self.assertIsNone(parse_script_file(subdir))

    def test_empty_file(self):
        self.assertIsNone(parse_script_file(self._write("empty.sh", "")))

    def test_binary_content_does_not_raise(self):
        path = self.temp_dir / "binary.bin"
        path.write_bytes(b"\x7fELF\x02\x01\x01\x00\xff\xfe\x00\n#\xff\xfe\n")

        self.assertIsNone(parse_script_file(path))


if __name__ == '__main__':
    unittest.main(verbosity=2)
