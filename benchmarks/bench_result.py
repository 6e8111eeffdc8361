"""Benchmarks for Result and Try.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

from svan_monads import Error, Success, Try, catching

# =============================================================================
# Result benchmarks
# =============================================================================


class TestResultMethods:
    """Benchmark Result method calls."""

    def test_success_creation(self, benchmark):
        """Benchmark Success creation."""
        benchmark(Success, 42)

    def test_success_bind(self, benchmark):
        """Benchmark Success.bind."""
        benchmark(Success(5).bind, lambda x: Success(x * 2))

    def test_error_bind(self, benchmark):
        """Benchmark Error.bind short-circuit."""
        benchmark(Error('e').bind, lambda x: Success(x * 2))

    def test_zip_first_error(self, benchmark):
        """Benchmark zip stopping at the first error."""
        operands = [Error('E1'), Success(3), Error('E2'), Success(1)]

        def run():
            return Success(5).zip(*operands, combine=lambda *xs: sum(xs))

        benchmark(run)

    def test_railway_chain(self, benchmark):
        """Benchmark a four-step bind/map chain."""

        def run():
            return (
                Success(1)
                .bind(lambda x: Success(x + 1))
                .bind(lambda x: Success(x * 2))
                .map(str)
                .default_with(lambda e: e)
            )

        benchmark(run)


# =============================================================================
# Try benchmarks
# =============================================================================


class TestTry:
    """Benchmark the fault boundary."""

    def test_catching_success(self, benchmark):
        """Benchmark catching on a block that returns."""
        benchmark(catching, lambda: 42)

    def test_catching_fault(self, benchmark):
        """Benchmark catching on a block that raises."""

        def boom():
            raise ValueError('boom')

        benchmark(catching, boom)

    def test_map_catching(self, benchmark):
        """Benchmark map_catching."""
        benchmark(Try.success('12').map_catching, int)
