"""
GUI Controllers - actions kept out of the window classes.
"""

from .export_controller import ExportController

__all__ = [
    'ExportController',
]
