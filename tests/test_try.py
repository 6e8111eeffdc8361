"""Tests for Try and the catching fault boundary."""

import pytest
from hypothesis import given
from svan_monads import Error, InvalidStateError, Nothing, Some, Success, Try, catching

from tests.strategies import exceptions, integers, tries


def fail(exc: BaseException):
    """Return a block that raises ``exc``."""

    def block():
        raise exc

    return block


class TestCatching:
    """Tests for Try.catching and catching."""

    def test_catching_value(self):
        """A block that returns normally gives a success."""
        outcome = Try.catching(lambda: 42)
        assert outcome == Try.success(42)
        assert outcome.success_value() == 42

    def test_catching_fault(self):
        """A raised exception is captured and nothing escapes."""
        outcome = Try.catching(fail(Exception('x')))
        assert outcome.is_error()
        assert str(outcome.error_value()) == 'x'

    def test_catching_preserves_exception_instance(self):
        """The captured exception is the raised instance."""
        exc = ValueError('bad')
        assert Try.catching(fail(exc)).error_value() is exc

    def test_catching_runs_immediately(self, calls):
        """The block runs during the call, exactly once."""
        catching(lambda: calls.append('ran'))
        assert calls == ['ran']

    def test_wrap_caught_exceptions(self, calls):
        """The captured exception reaches do_if_error, not do."""
        (
            Try.catching(fail(Exception('Error that should be caught')))
            .do_if_error(lambda exc: calls.append(type(exc)))
            .do(lambda _: calls.append('success'))
        )
        (
            Try.catching(lambda: 'a string')
            .do_if_error(lambda _: calls.append('error'))
            .do(calls.append)
        )
        assert calls == [Exception, 'a string']

    @pytest.mark.parametrize('fatal', [MemoryError(), RecursionError('maximum recursion depth exceeded')])
    def test_fatal_faults_propagate(self, fatal):
        """MemoryError and RecursionError are never captured."""
        with pytest.raises(type(fatal)):
            catching(fail(fatal))

    @pytest.mark.parametrize('signal', [KeyboardInterrupt(), SystemExit(1)])
    def test_base_exceptions_propagate(self, signal):
        """Non-Exception BaseExceptions are never captured."""
        with pytest.raises(type(signal)):
            catching(fail(signal))

    def test_catching_with_narrow_exceptions(self):
        """exceptions narrows which faults are captured."""
        assert catching(fail(KeyError('k')), exceptions=(KeyError,)).is_error()
        with pytest.raises(TypeError):
            catching(fail(TypeError('t')), exceptions=(KeyError,))

    def test_classmethod_forwards_exceptions(self):
        """Try.catching narrows capture the same way as catching."""
        assert Try.catching(fail(KeyError('k')), exceptions=(KeyError,)).is_error()
        with pytest.raises(TypeError):
            Try.catching(fail(TypeError('t')), exceptions=(KeyError,))

    @given(exceptions)
    def test_any_exception_captured(self, exc):
        """Every ordinary exception becomes an error Try."""
        assert catching(fail(exc)) == Try.failure(exc)


class TestTryConstruction:
    """Tests for the explicit constructors and to_result."""

    def test_success_and_failure(self):
        """success/failure build the matching variant."""
        exc = RuntimeError('x')
        assert Try.success(1).to_result() == Success(1)
        assert Try.failure(exc).to_result() == Error(exc)

    def test_from_result_round_trip(self):
        """to_result hands back the wrapped Result."""
        result = Success('v')
        assert Try.from_result(result).to_result() is result

    def test_try_is_frozen(self):
        """Try instances are immutable."""
        outcome = Try.success(1)
        with pytest.raises(AttributeError):
            outcome.result = Success(2)  # type: ignore[misc]

    def test_wrong_variant_access(self):
        """Payload accessors raise InvalidStateError against the wrong variant."""
        with pytest.raises(InvalidStateError):
            Try.success(1).error_value()
        with pytest.raises(InvalidStateError):
            Try.failure(ValueError()).success_value()

    def test_match_on_result(self):
        """The wrapped Result supports pattern matching."""
        match Try.catching(lambda: 1 / 0).to_result():
            case Success(value):
                described = f'ok {value}'
            case Error(ZeroDivisionError()):
                described = 'division by zero'
            case Error(_):
                described = 'other'
        assert described == 'division by zero'


class TestTryBindMap:
    """Tests for bind, map and map_error."""

    def test_bind_success(self):
        """bind chains another Try."""
        assert Try.success(2).bind(lambda x: Try.success(x * 3)) == Try.success(6)

    def test_bind_accepts_result(self):
        """bind re-wraps an exception-typed Result."""
        assert Try.success(2).bind(lambda x: Success(x + 1)) == Try.success(3)

    def test_bind_rejects_other_values(self):
        """bind requires the binder to return a Try or Result."""
        with pytest.raises(TypeError, match='needs a Try or a Result'):
            Try.success(2).bind(lambda x: x)

    def test_bind_rejects_non_exception_error(self):
        """An Error returned by the binder must hold an exception."""
        with pytest.raises(TypeError, match='needs an exception in the error channel, got str'):
            Try.success(1).bind(lambda _: Error('text'))

    def test_bind_accepts_exception_error(self):
        """An exception-typed Error from the binder becomes an error Try."""
        exc = KeyError('k')
        assert Try.success(1).bind(lambda _: Error(exc)) == Try.failure(exc)

    def test_bind_error_short_circuits(self, calls):
        """bind on an error Try never calls the binder."""
        failed = Try.failure(ValueError('v'))
        assert failed.bind(lambda x: calls.append(x) or Try.success(x)) is failed
        assert calls == []

    def test_bind_does_not_catch(self):
        """A fault raised inside the binder propagates."""
        with pytest.raises(ZeroDivisionError):
            Try.success(0).bind(lambda x: Try.success(1 / x))

    def test_map_does_not_catch(self):
        """A fault raised inside map propagates."""
        with pytest.raises(ValueError, match='invalid literal'):
            Try.success('x').map(int)

    def test_map_success(self):
        """map transforms the value."""
        assert Try.success('12').map(int) == Try.success(12)

    def test_map_error(self):
        """map_error replaces the captured exception."""
        original = KeyError('id')
        wrapped = Try.failure(original).map_error(lambda exc: LookupError(f'missing {exc}'))
        assert isinstance(wrapped.error_value(), LookupError)
        assert str(wrapped.error_value()) == "missing 'id'"


class TestMapCatching:
    """Tests for map_catching."""

    def test_map_catching_success(self):
        """A mapper that returns normally gives a success."""
        assert Try.success('12').map_catching(int) == Try.success(12)

    def test_map_catching_captures_fault(self):
        """A fault raised by the mapper becomes an error Try."""
        outcome = Try.success('x').map_catching(int)
        assert outcome.is_error()
        assert isinstance(outcome.error_value(), ValueError)

    def test_map_catching_error_short_circuits(self, calls):
        """An error Try is returned unchanged without calling the mapper."""
        failed = Try.failure(ValueError('v'))
        assert failed.map_catching(lambda x: calls.append(x)) is failed
        assert calls == []

    def test_map_catching_fatal_propagates(self):
        """Fatal faults raised by the mapper still propagate."""
        with pytest.raises(MemoryError):
            Try.success(1).map_catching(lambda _: fail(MemoryError())())


class TestTryCombinators:
    """Tests for fold, default_with, zip, merge and to_option."""

    def test_fold(self):
        """fold eliminates either variant."""
        assert Try.success(2).fold(lambda _: -1, lambda v: v * 2) == 4
        assert Try.failure(ValueError('v')).fold(lambda exc: str(exc), lambda v: v) == 'v'

    def test_default_with(self):
        """default_with recovers from the exception."""
        assert Try.catching(lambda: int('x')).default_with(lambda _: -1) == -1

    def test_zip_all_success(self):
        """zip combines success payloads positionally."""
        outcome = Try.success(1).zip(Try.success(2), Try.success(3), Try.success(4), combine=lambda *xs: sum(xs))
        assert outcome == Try.success(10)

    def test_zip_first_error_wins(self, calls):
        """The leftmost error is kept and combine never runs."""
        first = ValueError('first')
        outcome = Try.success(1).zip(
            Try.failure(first),
            Try.failure(KeyError('second')),
            combine=lambda *xs: calls.append(xs),
        )
        assert outcome.error_value() is first
        assert calls == []

    def test_merge(self):
        """merge accumulates successes into one tuple."""
        outcome = Try.success(1).merge(Try.success(2)).merge(Try.success(3))
        assert outcome.success_value() == (1, 2, 3)

    def test_merge_error(self):
        """An error anywhere in a merge chain wins."""
        exc = ValueError('v')
        assert Try.success(1).merge(Try.failure(exc)).merge(Try.success(3)).error_value() is exc

    def test_zip_accepts_results(self):
        """zip takes exception-typed Results alongside tries."""
        exc = ValueError('v')
        assert Try.success(1).zip(Success(2), combine=lambda a, b: a + b) == Try.success(3)
        assert Try.success(1).zip(Success(2), Error(exc)).error_value() is exc

    def test_zip_rejects_other_operands(self):
        """zip raises TypeError for operands that are not a Try or a Result."""
        with pytest.raises(TypeError, match='Try.zip operand needs a Try or a Result, got int'):
            Try.success(1).zip(2)
        with pytest.raises(TypeError, match='needs an exception in the error channel'):
            Try.success(1).zip(Error('E1'))

    def test_merge_accepts_results(self):
        """merge takes an exception-typed Result as its operand."""
        assert Try.success(1).merge(Success(2)).success_value() == (1, 2)
        with pytest.raises(TypeError, match='Try.merge operand'):
            Try.success(1).merge(Error('E1'))

    def test_to_option(self):
        """to_option discards the exception."""
        assert Try.success(1).to_option() == Some(1)
        assert Try.failure(ValueError()).to_option() is Nothing

    @given(tries)
    def test_map_identity_law(self, outcome):
        """t.map(id) == t."""
        assert outcome.map(lambda x: x) == outcome

    @given(integers)
    def test_catching_value_law(self, x):
        """catching(lambda: v) == Try.success(v)."""
        assert catching(lambda: x) == Try.success(x)
