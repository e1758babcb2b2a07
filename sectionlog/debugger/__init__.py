"""
Debugger Package.

Named, nestable output sections over a logging backend.
"""

from .debugger import Debugger
from .section import Section
from .sinks import Sink, Sinks

__all__ = [
    "Debugger",
    "Section",
    "Sink",
    "Sinks",
]
