"""Benchmarks for Option type.

Run with: pytest benchmarks/bench_option.py --benchmark-only -v
"""

from svan_monads import Nothing, Some, to_option

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_to_option(self, benchmark):
        """Benchmark to_option on a present value."""
        benchmark(to_option, 42)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        benchmark(Some(5).map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_bind(self, benchmark):
        """Benchmark Some.bind."""
        benchmark(Some(5).bind, lambda x: Some(x * 2))

    def test_some_filter(self, benchmark):
        """Benchmark Some.filter."""
        benchmark(Some(5).filter, lambda x: x > 0)

    def test_some_fold(self, benchmark):
        """Benchmark Some.fold."""
        benchmark(Some(5).fold, lambda: 0, lambda x: x)


# =============================================================================
# Zip / merge benchmarks
# =============================================================================


class TestOptionZip:
    """Benchmark zip and merge."""

    def test_zip_five(self, benchmark):
        """Benchmark a five-operand zip."""
        first = Some(1)
        others = [Some(2), Some(3), Some(4), Some(5)]

        def run():
            return first.zip(*others, combine=lambda *xs: sum(xs))

        benchmark(run)

    def test_merge_chain(self, benchmark):
        """Benchmark a five-step merge chain."""

        def run():
            return Some(10).merge(Some(20)).merge(Some(30)).merge(Some(40)).merge(Some(50))

        benchmark(run)
