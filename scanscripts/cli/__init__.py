"""
Command line interface for scanscripts.
"""
