"""Tests for the synchronous invokers."""

import pytest

from might_fail import (
    Maybe,
    MaybeOptional,
    MaybeWithSuccess,
    is_not_an_error,
    might_fail,
    might_fail_all,
    might_fail_optional,
    might_fail_pair,
    not_an_error,
)
from tests.errors import InsufficientFundsError, MessageError, OutOfStockError, SimpleError


def raise_simple():
    raise SimpleError


class TestMightFail:
    """Tests for might_fail."""

    def test_success_returns_value(self):
        """A returning function yields (sentinel, value, True)."""
        error, value, success = might_fail(lambda: 'Success')

        assert success
        assert value == 'Success'
        assert is_not_an_error(error)

    def test_failure_returns_error(self, simple_error):
        """A raising function yields (error, None, False) with the same error object."""

        def fail():
            raise simple_error

        error, value, success = might_fail(fail)

        assert not success
        assert value is None
        assert error is simple_error

    def test_forwards_arguments(self):
        """Positional and keyword arguments reach the function."""

        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert might_fail(greet, 'World').value == 'Hello, World!'
        assert might_fail(greet, name='Python', greeting='Hi').value == 'Hi, Python!'

    def test_builtin_failure(self):
        """Errors from builtins are captured too."""
        error, value, success = might_fail(int, 'not a number')

        assert not success
        assert isinstance(error, ValueError)

    def test_calls_exactly_once(self):
        """The function runs once per invocation."""
        calls = []
        might_fail(lambda: calls.append(1))
        assert calls == [1]

    def test_none_return_is_success(self):
        """Returning None from a non-optional function is still a success."""
        outcome = might_fail(lambda: None)
        assert outcome == MaybeWithSuccess(not_an_error(), None, True)

    def test_keyboard_interrupt_propagates(self):
        """BaseException-only signals are not captured."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            might_fail(interrupt)

    def test_error_can_be_matched(self):
        """The captured error keeps its type and payload for branching."""
        stock = {'Chips': 0}
        coins = 8

        def vend(item: str) -> str:
            if item not in stock:
                raise MessageError(f'no such item: {item}')
            if stock[item] == 0 and coins < 10:
                raise InsufficientFundsError(10 - coins)
            if stock[item] == 0:
                raise OutOfStockError
            return item

        error, _, success = might_fail(vend, 'Chips')

        assert not success
        match error:
            case InsufficientFundsError(coins_needed=needed):
                assert needed == 2
            case _:
                pytest.fail(f'unexpected error {error!r}')


class TestMightFailPair:
    """Tests for might_fail_pair."""

    def test_success_pair(self):
        """The pair holds the value and the sentinel."""

        def return_int() -> int:
            return 42

        error, value = might_fail_pair(return_int)

        assert value == 42
        assert is_not_an_error(error)

    def test_failure_pair(self):
        """The pair holds the error and no value."""

        def fail():
            raise MessageError('Failed operation')

        outcome = might_fail_pair(fail)

        assert isinstance(outcome, Maybe)
        assert outcome.value is None
        assert isinstance(outcome.error, MessageError)
        assert outcome.error.message == 'Failed operation'


class TestMightFailOptional:
    """Tests for might_fail_optional."""

    def test_none_value(self):
        """A None result is a success with no error at all."""

        def return_string_optional() -> str | None:
            return None

        error, value, success = might_fail_optional(return_string_optional)

        assert success
        assert value is None
        assert error is None

    def test_present_value(self):
        """A present result is a success with no error."""

        def return_string_optional() -> str | None:
            return 'Hello'

        outcome = might_fail_optional(return_string_optional)

        assert outcome == MaybeOptional(None, 'Hello', True)

    def test_failure(self, simple_error):
        """A raised error is reported with success False."""

        def fail() -> str | None:
            raise simple_error

        error, value, success = might_fail_optional(fail)

        assert not success
        assert value is None
        assert error is simple_error

    def test_never_uses_sentinel(self):
        """The optional shape never carries the sentinel."""
        assert not is_not_an_error(might_fail_optional(dict().get, 'missing').error)


class TestMightFailAll:
    """Tests for might_fail_all."""

    def test_mixed_results(self):
        """Every function is reported, in order, past a failure."""
        outcomes = might_fail_all([lambda: 1, raise_simple, lambda: 3])

        assert len(outcomes) == 3

        assert outcomes[0].success
        assert outcomes[0].value == 1
        assert is_not_an_error(outcomes[0].error)

        assert not outcomes[1].success
        assert outcomes[1].value is None
        assert isinstance(outcomes[1].error, SimpleError)

        assert outcomes[2].success
        assert outcomes[2].value == 3
        assert is_not_an_error(outcomes[2].error)

    def test_end_to_end_shape(self):
        """The whole batch compares equal to the expected outcomes."""
        error = SimpleError()

        def fail():
            raise error

        assert might_fail_all([lambda: 1, fail, lambda: 3]) == [
            MaybeWithSuccess(not_an_error(), 1, True),
            MaybeWithSuccess(error, None, False),
            MaybeWithSuccess(not_an_error(), 3, True),
        ]

    def test_runs_in_order_after_failures(self):
        """Functions run one after another, failures included."""
        order = []

        def step(n: int, fail: bool = False):
            def run():
                order.append(n)
                if fail:
                    raise SimpleError
                return n

            return run

        outcomes = might_fail_all([step(1, fail=True), step(2), step(3, fail=True), step(4)])

        assert order == [1, 2, 3, 4]
        assert [o.success for o in outcomes] == [False, True, False, True]

    def test_empty_batch(self):
        """No functions, no outcomes."""
        assert might_fail_all([]) == []

    def test_accepts_generator(self):
        """Any iterable of functions is accepted."""
        outcomes = might_fail_all((lambda i=i: i * 2) for i in range(3))
        assert [o.value for o in outcomes] == [0, 2, 4]

    def test_returns_fresh_list(self):
        """Each call returns its own list."""
        funcs = [lambda: 1]
        assert might_fail_all(funcs) is not might_fail_all(funcs)


class TestMalformedEnvironment:
    """Bad MIGHT_FAIL_* values never escape the capture path."""

    @pytest.fixture(autouse=True)
    def _isolate(self, isolated_logging) -> None:
        """Start with no cached config."""

    @pytest.mark.parametrize(
        ('name', 'value'),
        [('MIGHT_FAIL_LOG_FAILURES', 'maybe'), ('MIGHT_FAIL_LOG_LEVEL', 'trace'), ('MIGHT_FAIL_LOG_JSON', '2')],
    )
    def test_failure_still_captured(self, monkeypatch, simple_error, name, value):
        """might_fail returns the failure outcome instead of a config error."""
        monkeypatch.setenv(name, value)

        def fail():
            raise simple_error

        assert might_fail(fail) == MaybeWithSuccess(simple_error, None, False)
        assert might_fail_optional(fail) == MaybeOptional(simple_error, None, False)

    def test_batch_still_settles(self, monkeypatch):
        """Every entry of a batch is reported under a malformed environment."""
        monkeypatch.setenv('MIGHT_FAIL_LOG_FAILURES', 'maybe')

        outcomes = might_fail_all([raise_simple, lambda: 3])

        assert len(outcomes) == 2
        assert isinstance(outcomes[0].error, SimpleError)
        assert not outcomes[0].success
        assert outcomes[1] == MaybeWithSuccess(not_an_error(), 3, True)
