"""Tests for performance profiler."""

import pytest
from json2lua.profiler import PerformanceProfiler, PerformanceMetrics


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()

    def test_profile_operation(self):
        """Test profiling an operation through the context manager."""
        with self.profiler.profile_operation("convert", input_size=100) as profiler:
            profiler.output_size = 250

        metrics = self.profiler.metrics_history[-1]
        assert isinstance(metrics, PerformanceMetrics)
        assert metrics.operation_name == "convert"
        assert metrics.input_size == 100
        assert metrics.output_size == 250
        assert metrics.expansion_ratio == 2.5
        assert metrics.duration >= 0
        assert metrics.memory_peak_mb >= metrics.memory_start_mb

    def test_stop_without_start(self):
        """Test that stopping without an active session fails."""
        with pytest.raises(ValueError, match="No active profiling session"):
            self.profiler.stop_profiling()

    def test_sample_without_start_is_noop(self):
        """Test that sampling outside a session does nothing."""
        self.profiler.sample_performance()

        assert self.profiler.peak_memory == 0

    def test_performance_summary(self):
        """Test summary across several operations."""
        for size in (10, 20):
            self.profiler.start_profiling("convert", size)
            self.profiler.sample_performance()
            self.profiler.stop_profiling(output_size=size * 2)

        summary = self.profiler.get_performance_summary()

        assert summary["total_operations"] == 2
        assert summary["total_input_bytes"] == 30
        assert summary["total_output_bytes"] == 60
        assert summary["overall_expansion_ratio"] == 2.0

    def test_empty_summary(self):
        """Test summary with no recorded operations."""
        assert self.profiler.get_performance_summary() == {"total_operations": 0}
