"""
CLI Argument Parser for scanscripts
Handles command-line argument parsing and argument validation.
"""

import argparse
import ipaddress
from typing import List, Optional

from ..models.script import ExecutionMode


def parse_ports(value: str) -> List[int]:
    """Parse a comma separated port list, keeping the given order."""
    ports = []
    for item in value.split(','):
        item = item.strip()
        if not item:
            continue
        try:
            port = int(item)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid port: {item}")
        if not 1 <= port <= 65535:
            raise argparse.ArgumentTypeError(f"Port out of range: {port}")
        ports.append(port)
    return ports


def parse_ip(value: str):
    """Validate an IPv4 or IPv6 address."""
    try:
        return ipaddress.ip_address(value.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid IP address: {value}")


def parse_mode(value: str) -> ExecutionMode:
    try:
        return ExecutionMode.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


class ArgumentParser:
    """Handles CLI argument parsing and command routing."""

    MODE_HELP = 'Scripts to run: none, default or custom (default: from config)'

    def _add_common_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument('--scripts', type=parse_mode, dest='scripts', help=self.MODE_HELP)
        parser.add_argument('--home', dest='home', help='Directory holding the scripts folder and selection config')
        parser.add_argument('--config', dest='config', default='config.toml', help='Application config file')
        parser.add_argument('-debug', '--debug', action='store_true', help='Enable debug logging')

    def create_parser(self) -> argparse.ArgumentParser:
        """Create command-line argument parser."""
        parser = argparse.ArgumentParser(
            prog='scanscripts',
            description="scanscripts - run tagged scripts against scan results",
            formatter_class=argparse.RawDescriptionHelpFormatter
        )
        parser.add_argument('--version', action='store_true', help='Show version information')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Run command
        run_parser = subparsers.add_parser('run', help='Run the selected scripts against an address')
        run_parser.add_argument('ip', type=parse_ip, help='Scanned IP address')
        run_parser.add_argument('--ports', type=parse_ports, default=[],
                                help='Open ports, comma separated (e.g. 22,80,443)')
        self._add_common_arguments(run_parser)

        # List command
        list_parser = subparsers.add_parser('list', help='List the scripts that would run')
        self._add_common_arguments(list_parser)

        return parser

    def parse_arguments(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        return self.create_parser().parse_args(argv)
