"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from sizeguard.cli import budget

__all__ = ['budget']
