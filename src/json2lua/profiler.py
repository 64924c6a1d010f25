"""Performance profiler for conversion operations."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for a single conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_peak_mb: float
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float
    expansion_ratio: float


class PerformanceProfiler:
    """
    Records duration, memory usage and throughput of conversions.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.peak_memory: float = 0
        self.input_size = 0
        self.output_size = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        The yielded profiler's ``output_size`` attribute may be set inside the
        block; it is recorded when the block exits.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        self.output_size = 0
        try:
            yield self
        finally:
            self.stop_profiling(output_size=self.output_size)

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size

        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self):
        """Sample current memory usage."""
        if not self.current_operation:
            return

        try:
            self.peak_memory = max(self.peak_memory, self._current_memory_mb())
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")

    def stop_profiling(self, output_size: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of output data in bytes

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.perf_counter()
        duration = end_time - self.start_time

        try:
            end_memory = self._current_memory_mb()
        except psutil.Error:
            end_memory = self.start_memory
        self.peak_memory = max(self.peak_memory, end_memory)

        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s
        expansion_ratio = output_size / self.input_size if self.input_size > 0 else 1.0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_peak_mb=self.peak_memory,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput,
            expansion_ratio=expansion_ratio
        )

        self.metrics_history.append(metrics)

        self.logger.info(f"Performance Summary - {self.current_operation}: "
                         f"{duration * 1000:.2f}ms, {throughput:.2f} MB/s, "
                         f"peak {self.peak_memory:.1f} MB, ratio {expansion_ratio:.2f}")

        # Reset state
        self.current_operation = None
        self.start_time = None
        self.start_memory = None

        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_input = sum(m.input_size for m in self.metrics_history)
        total_output = sum(m.output_size for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "total_input_bytes": total_input,
            "total_output_bytes": total_output,
            "average_memory_peak_mb": sum(m.memory_peak_mb for m in self.metrics_history)
                                      / len(self.metrics_history),
            "overall_expansion_ratio": total_output / total_input if total_input > 0 else 1.0,
        }

    @staticmethod
    def _current_memory_mb() -> float:
        return psutil.Process().memory_info().rss / 1024 / 1024
