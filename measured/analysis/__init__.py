"""
Declaration analysis: turns a decorated function into a FunctionDescriptor.
"""

from measured.analysis.signature import FunctionDescriptor, analyze

__all__ = [
    "FunctionDescriptor",
    "analyze",
]
