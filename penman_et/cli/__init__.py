"""Command-line interface for penman_et."""

from .interface import cli

__all__ = ['cli']
