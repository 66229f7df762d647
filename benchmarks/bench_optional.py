"""Benchmarks for Optional type.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from nullsafe import EMPTY, Present, empty, of


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionalCreation:
    """Benchmark Optional creation."""

    def test_of_value(self, benchmark):
        """Benchmark of() admitting a value."""
        benchmark(of, 42)

    def test_of_none(self, benchmark):
        """Benchmark of() mapping None to the Empty singleton."""
        benchmark(of, None)

    def test_empty_access(self, benchmark):
        """Benchmark empty() singleton access."""
        benchmark(empty)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionalMethods:
    """Benchmark Optional method calls."""

    def test_present_map(self, benchmark):
        """Benchmark Present.map."""
        opt = of(5)
        benchmark(opt.map, lambda x: x * 2)

    def test_empty_map(self, benchmark):
        """Benchmark Empty.map."""
        benchmark(EMPTY.map, lambda x: x * 2)

    def test_present_flat_map(self, benchmark):
        """Benchmark Present.flat_map."""
        opt = of(5)
        benchmark(opt.flat_map, lambda x: x * 2)

    def test_present_or_else_get(self, benchmark):
        """Benchmark Present.or_else_get."""
        opt = of(5)
        benchmark(opt.or_else_get, lambda: 0)

    def test_empty_or_else_get(self, benchmark):
        """Benchmark Empty.or_else_get."""
        benchmark(EMPTY.or_else_get, lambda: 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionalChaining:
    """Benchmark chained Optional operations."""

    def test_present_chain_3(self, benchmark):
        """Benchmark 3-step chain on Present."""

        def chain():
            return of(5).map(lambda x: x + 1).filter(lambda x: x > 0).or_else(0)

        benchmark(chain)

    def test_empty_chain_3(self, benchmark):
        """Benchmark 3-step chain on Empty (should short-circuit)."""

        def chain():
            return of(None).map(lambda x: x + 1).filter(lambda x: x > 0).or_else(0)

        benchmark(chain)


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestOptionalPatternMatching:
    """Benchmark pattern matching on Optional."""

    def test_match_present(self, benchmark):
        """Benchmark pattern matching on Present."""
        opt = of(42)

        def match_it():
            match opt:
                case Present(v):
                    return v
                case _:
                    return None

        benchmark(match_it)
