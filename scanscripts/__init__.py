"""
scanscripts - run tagged helper scripts against scan results.
"""

__version__ = "1.0.0"
