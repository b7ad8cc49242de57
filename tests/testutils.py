"""Shared helpers for building pending values and reading results."""

import asyncio
import typing

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result


def resolved(value):
    """Already-resolved pending value that can be awaited any number of times."""
    return LazyCoroResult.pure(value)


def delayed(value, seconds: float):
    """Pending value that resolves after `seconds`."""

    async def run():
        await asyncio.sleep(seconds)
        return Ok(value)

    return LazyCoroResult(run)


def failing(exc: Exception):
    """Pending value that raises `exc` when awaited."""

    async def run():
        raise exc

    return LazyCoroResult(run)


def ok_value(result: Result[typing.Any, typing.Any]):
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def error_value(result: Result[typing.Any, typing.Any]):
    match result:
        case Error(e):
            return e
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")
