"""
Converted file writers.
"""

from .output_writer import OutputWriter

__all__ = [
    "OutputWriter",
]
