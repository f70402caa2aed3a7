"""
Wordle Terminal Game Package

This package contains a layered implementation of a terminal Wordle game:
configuration, data models, game services, an interactive controller and
supporting utilities.
"""

__version__ = '1.0.0'
