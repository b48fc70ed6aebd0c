# ========================
# src/sales_report/utils/performance_monitor.py
# ========================

"""
Performance Monitoring Utilities

Tracks elapsed time, throughput and memory of a pipeline run.
"""

import time
import os
import logging
from contextlib import contextmanager
from typing import Dict, Any, Optional

import psutil

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Performance monitoring utility for the pipeline.
    Tracks memory usage, processing time and throughput.
    """

    def __init__(self, name: str = "Pipeline"):
        """
        Initialize performance monitor.

        Args:
            name (str): Name for this monitoring session
        """
        self.name = name
        self.start_time = None
        self.end_time = None
        self.peak_memory_mb = 0.0
        self.records_processed = 0
        self.files_processed = 0
        self.checkpoints = []
        self._process = psutil.Process(os.getpid())

        logger.debug(f"PerformanceMonitor initialized: {name}")

    def start_monitoring(self) -> None:
        """Start performance monitoring."""
        self.start_time = time.time()
        self.peak_memory_mb = self._get_memory_usage_mb()

        logger.info(f"{self.name} - Performance monitoring started")
        logger.debug(f"Initial memory usage: {self.peak_memory_mb:.2f} MB")

    def update_progress(self, records_in_file: int) -> None:
        """
        Update progress tracking after one input file.

        Args:
            records_in_file (int): Number of records applied from the file
        """
        self.records_processed += records_in_file
        self.files_processed += 1
        self.peak_memory_mb = max(self.peak_memory_mb, self._get_memory_usage_mb())

    def add_checkpoint(self, name: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Add a performance checkpoint.

        Args:
            name (str): Checkpoint name
            metadata (dict): Optional metadata to store
        """
        checkpoint = {
            'name': name,
            'timestamp': time.time(),
            'memory_mb': self._get_memory_usage_mb(),
            'records_processed': self.records_processed,
            'files_processed': self.files_processed,
            'metadata': metadata or {}
        }
        self.checkpoints.append(checkpoint)
        logger.debug(f"Checkpoint '{name}': {checkpoint}")

    def stop_monitoring(self) -> Dict[str, Any]:
        """
        Stop monitoring and return performance summary.

        Returns:
            dict: Performance statistics
        """
        self.end_time = time.time()
        total_time = self.end_time - self.start_time if self.start_time else 0
        throughput = self.records_processed / total_time if total_time > 0 else 0
        self.peak_memory_mb = max(self.peak_memory_mb, self._get_memory_usage_mb())

        summary = {
            'name': self.name,
            'total_processing_time_seconds': total_time,
            'records_processed': self.records_processed,
            'files_processed': self.files_processed,
            'average_throughput_records_per_second': throughput,
            'peak_memory_usage_mb': self.peak_memory_mb,
            'checkpoints': self.checkpoints
        }

        self._log_summary(summary)
        return summary

    def _log_summary(self, summary: Dict[str, Any]) -> None:
        """Log formatted performance summary."""
        logger.info(
            f"{summary['name']} - {summary['total_processing_time_seconds']:.2f}s, "
            f"{summary['files_processed']:,} files, "
            f"{summary['records_processed']:,} records, "
            f"{summary['average_throughput_records_per_second']:.0f} records/sec, "
            f"peak memory {summary['peak_memory_usage_mb']:.2f} MB"
        )

    def _get_memory_usage_mb(self) -> float:
        """Get current resident memory in MB."""
        return self._process.memory_info().rss / (1024 * 1024)

    def get_current_stats(self) -> Dict[str, Any]:
        """Get current performance statistics."""
        elapsed = time.time() - self.start_time if self.start_time else 0

        return {
            'elapsed_seconds': elapsed,
            'records_processed': self.records_processed,
            'files_processed': self.files_processed,
            'current_memory_mb': self._get_memory_usage_mb(),
            'peak_memory_mb': self.peak_memory_mb,
            'current_throughput': self.records_processed / elapsed if elapsed > 0 else 0
        }


@contextmanager
def monitor_performance(name: str = "Pipeline"):
    """
    Context manager for easy performance monitoring.

    Args:
        name (str): Name for this monitoring session

    Yields:
        PerformanceMonitor: Monitor instance
    """
    monitor = PerformanceMonitor(name)
    monitor.start_monitoring()
    try:
        yield monitor
    finally:
        monitor.stop_monitoring()
