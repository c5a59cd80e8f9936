"""Tests for the Result type."""

import pytest
from hypothesis import given, strategies as st

from src.core.result import Failure, Success, UnwrapError, chain


class CallCounter:
    """Step stub that records how often it ran."""

    def __init__(self, result=None) -> None:
        self.calls = 0
        self._result = result

    def __call__(self, value):
        self.calls += 1
        return self._result if self._result is not None else Success(value)


def int_to_string(n: int):
    return Success(str(n))


def string_length(s: str):
    return Success(len(s))


class TestSuccess:
    def test_is_success(self) -> None:
        result = Success(42)
        assert result.is_success() is True
        assert result.is_failure() is False
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_value(self) -> None:
        assert Success("hello").value == "hello"
        assert Success("hello").unwrap() == "hello"

    def test_error_raises(self) -> None:
        with pytest.raises(UnwrapError, match="no error"):
            Success(1).error

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError):
            Success(1).unwrap_err()

    def test_unwrap_or(self) -> None:
        assert Success(42).unwrap_or(0) == 42

    def test_map(self) -> None:
        assert Success(5).map(lambda x: x * 2) == Success(10)

    def test_map_err_noop(self) -> None:
        mapped = Success(5).map_err(lambda e: f"error: {e}")
        assert mapped == Success(5)

    def test_is_immutable(self) -> None:
        result = Success(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    @given(st.integers())
    def test_bind_applies_step(self, value: int) -> None:
        step = lambda n: Success(n + 1)  # noqa: E731
        assert Success(value).bind(step) == step(Success(value).value)

    @given(st.integers())
    def test_bind_returns_step_failure(self, value: int) -> None:
        assert Success(value).bind(lambda n: Failure(f"bad {n}")) == Failure(f"bad {value}")


class TestFailure:
    def test_is_failure(self) -> None:
        result = Failure("something failed")
        assert result.is_failure() is True
        assert result.is_success() is False

    def test_error(self) -> None:
        assert Failure("fail").error == "fail"
        assert Failure("fail").unwrap_err() == "fail"

    def test_value_raises(self) -> None:
        with pytest.raises(UnwrapError, match="no value"):
            Failure("fail").value

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="fail"):
            Failure("fail").unwrap()

    def test_unwrap_or(self) -> None:
        assert Failure("fail").unwrap_or(42) == 42

    def test_map_noop(self) -> None:
        assert Failure("fail").map(lambda x: x * 2) == Failure("fail")

    def test_map_err(self) -> None:
        assert Failure("fail").map_err(lambda e: f"wrapped: {e}") == Failure("wrapped: fail")

    @given(st.text())
    def test_bind_skips_step_and_keeps_error(self, message: str) -> None:
        error = ValueError(message)
        step = CallCounter()
        bound = Failure(error).bind(step)
        assert bound.is_failure()
        assert bound.error is error
        assert step.calls == 0


class TestChaining:
    def test_short_circuit_on_first_failure(self) -> None:
        f1 = CallCounter(Failure("step one broke"))
        f2 = CallCounter()
        f3 = CallCounter()

        result = Success(1).bind(f1).bind(f2).bind(f3)

        assert result == Failure("step one broke")
        assert (f1.calls, f2.calls, f3.calls) == (1, 0, 0)

    def test_type_changing_chain(self) -> None:
        assert Success(5).bind(int_to_string).bind(string_length) == Success(1)

    def test_chain_helper_matches_bind(self) -> None:
        assert chain(Success(12345), int_to_string, string_length) == Success(5)

    def test_chain_helper_short_circuits(self) -> None:
        later = CallCounter()
        result = chain(Success(1), lambda _: Failure("nope"), later, later)
        assert result == Failure("nope")
        assert later.calls == 0

    def test_chain_without_steps(self) -> None:
        assert chain(Failure("e")) == Failure("e")

    @given(st.lists(st.integers(), max_size=10))
    def test_all_success_chain_runs_every_step(self, increments: list[int]) -> None:
        steps = [lambda v, i=i: Success(v + i) for i in increments]
        assert chain(Success(0), *steps) == Success(sum(increments))
