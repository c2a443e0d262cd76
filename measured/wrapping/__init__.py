"""
Wrapper generators and the timing guard they share.
"""

from measured.wrapping.timing import TimingSpan, timing_span
from measured.wrapping.sync_wrapper import wrap_sync
from measured.wrapping.async_wrapper import wrap_async

__all__ = [
    "TimingSpan",
    "timing_span",
    "wrap_sync",
    "wrap_async",
]
