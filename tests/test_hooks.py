"""
Tests for handler-decorators (logging, tracing) and the timeout promise-decorator.
"""

import asyncio
import inspect
import logging

import pytest
from kungfu import Error, Ok

from promised import PromisedList, TimeoutError, Trace, Visit, compose, logged, timeout, traced
from promised.time.timeout import background

from testutils import delayed, error_value, failing, ok_value, resolved


class TestTraced:
    """Tests for the tracing handler-decorator."""

    @pytest.mark.asyncio
    async def test_records_each_visit(self):
        trace: Trace[Visit] = Trace()
        plist = PromisedList([resolved("a"), resolved("b")], handler_decorator=traced(trace))

        assert ok_value(await plist.map(lambda x, i: x.upper())) == ["A", "B"]
        assert trace.indices() == [0, 1]
        assert [visit.item for visit in trace] == ["a", "b"]
        assert ok_value(trace[1].outcome) == "B"

    @pytest.mark.asyncio
    async def test_records_only_visited_items_after_stop(self):
        trace: Trace[Visit] = Trace()
        plist = PromisedList([resolved(n) for n in range(5)], handler_decorator=traced(trace))

        await plist.find(lambda x, i: x == 1)

        assert trace.indices() == [0, 1]

    @pytest.mark.asyncio
    async def test_failure_is_recorded_and_propagated(self):
        trace: Trace[Visit] = Trace()
        plist = PromisedList([resolved(1)], handler_decorator=traced(trace))

        def explode(x, i):
            raise RuntimeError("explode")

        err = error_value(await plist.map(explode))

        assert isinstance(err, RuntimeError)
        assert isinstance(error_value(trace[0].outcome), RuntimeError)

    def test_trace_combine(self):
        left = Trace.of(1, 2)
        right = Trace.of(3)

        assert left.combine(right) == [1, 2, 3]
        assert left == [1, 2]
        assert Trace().combine(left) == left


class TestLogged:
    """Tests for the logging handler-decorator."""

    @pytest.mark.asyncio
    async def test_logs_visits(self, caplog):
        logger = logging.getLogger("tests.visits")
        caplog.set_level(logging.DEBUG, logger="tests.visits")
        plist = PromisedList([resolved("a")], handler_decorator=logged(logger))

        await plist.to_list()

        messages = [record.getMessage() for record in caplog.records if record.name == "tests.visits"]
        assert messages == ["visit index=0 item='a'", "settled index=0 result='a'"]

    @pytest.mark.asyncio
    async def test_logs_failures_as_warning(self, caplog):
        logger = logging.getLogger("tests.visits")
        caplog.set_level(logging.DEBUG, logger="tests.visits")
        plist = PromisedList([resolved("a")], handler_decorator=logged(logger))

        await plist.map(lambda x, i: Error("nope"))

        warnings = [r for r in caplog.records if r.name == "tests.visits" and r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "failed index=0" in warnings[0].getMessage()

    @pytest.mark.asyncio
    async def test_compose_first_is_outermost(self):
        order: list[str] = []

        def tag(name):
            def decorate(handler):
                async def wrapper(env):
                    order.append(f"{name} in")
                    result = handler(env)
                    if inspect.isawaitable(result):
                        result = await result
                    order.append(f"{name} out")
                    return result

                return wrapper

            return decorate

        plist = PromisedList([resolved(1)], handler_decorator=compose(tag("outer"), tag("inner")))

        assert ok_value(await plist.map(lambda x, i: x)) == [1]
        assert order == ["outer in", "inner in", "inner out", "outer out"]


class TestTimeout:
    """Tests for the timeout promise-decorator."""

    @pytest.mark.asyncio
    async def test_fast_drive_passes_through(self):
        plist = PromisedList([resolved(1), resolved(2)], promise_decorator=timeout(seconds=1.0))

        assert ok_value(await plist.map(lambda x, i: x * 3)) == [3, 6]

    @pytest.mark.asyncio
    async def test_failure_passes_through(self):
        plist = PromisedList([failing(ValueError("bad"))], promise_decorator=timeout(seconds=1.0))

        assert isinstance(error_value(await plist.to_list()), ValueError)

    @pytest.mark.asyncio
    async def test_slow_drive_times_out_but_keeps_visiting(self):
        visited: list[int] = []
        before = set(background)
        plist = PromisedList(
            [delayed(n, 0.02) for n in range(3)],
            promise_decorator=timeout(seconds=0.005),
        )

        err = error_value(await plist.each(lambda x, i: visited.append(i)))

        assert isinstance(err, TimeoutError)
        assert err.seconds == 0.005

        assert background - before

        await asyncio.sleep(0.2)
        assert visited == [0, 1, 2]
        assert not background - before

    @pytest.mark.asyncio
    async def test_timeout_result_can_be_matched(self):
        plist = PromisedList([delayed("late", 0.05)], promise_decorator=timeout(seconds=0.001))

        match await plist.to_list():
            case Error(TimeoutError() as err):
                assert err.seconds == 0.001
            case Ok(value):
                pytest.fail(f"unexpected {value!r}")

        await asyncio.sleep(0.1)
