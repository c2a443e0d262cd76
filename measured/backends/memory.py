"""
In-process metrics backend.
Keeps every record in memory, mostly useful for tests and local inspection.
"""

import threading
from typing import Dict, List, Optional
from measured.core.logger import logger
from measured.emission.record import MetricRecord


class InMemoryRecorder:
    """
    Thread-safe list of MetricRecords.
    """

    def __init__(self):
        self._records: List[MetricRecord] = []
        self._lock = threading.Lock()

    def record(self, name: str, duration_nanoseconds: int):
        """Store one measurement."""
        entry = MetricRecord(name=name, duration_nanoseconds=duration_nanoseconds)
        with self._lock:
            self._records.append(entry)

    def records(self, name: Optional[str] = None) -> List[MetricRecord]:
        """
        Get stored records in arrival order.

        Args:
            name: Only return records with this name

        Returns:
            Copy of the matching records
        """
        with self._lock:
            if name is None:
                return list(self._records)
            return [r for r in self._records if r.name == name]

    def count(self, name: str) -> int:
        """Number of records stored under a name."""
        return len(self.records(name))

    def summary(self) -> Dict[str, Dict[str, float]]:
        """
        Aggregate stored records per name.

        Returns:
            Dict of name -> count, total_ns, min_ns, max_ns and mean_ns
        """
        stats: Dict[str, Dict[str, float]] = {}
        for entry in self.records():
            item = stats.get(entry.name)
            if item is None:
                stats[entry.name] = {
                    "count": 1,
                    "total_ns": entry.duration_nanoseconds,
                    "min_ns": entry.duration_nanoseconds,
                    "max_ns": entry.duration_nanoseconds,
                }
                continue
            item["count"] += 1
            item["total_ns"] += entry.duration_nanoseconds
            item["min_ns"] = min(item["min_ns"], entry.duration_nanoseconds)
            item["max_ns"] = max(item["max_ns"], entry.duration_nanoseconds)

        for item in stats.values():
            item["mean_ns"] = item["total_ns"] / item["count"]
        return stats

    def clear(self):
        """Drop all stored records."""
        with self._lock:
            self._records = []
        logger.debug("In-memory metrics cleared")
