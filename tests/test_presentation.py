"""
Tests for textual/structured summaries and async iteration.
"""

import pytest
from kungfu import Error, LazyCoroResult

from promised import ItemResolutionError, PromisedList

from testutils import failing, resolved


class TestSummaries:
    """Tests for display string, summary and count."""

    def test_display_string(self):
        plist = PromisedList([resolved(1), resolved(2)])

        assert plist.to_display_string() == "PromisedList{length=2}"
        assert str(plist) == "PromisedList{length=2}"

    def test_display_string_uses_subclass_name(self):
        class Orders(PromisedList):
            pass

        assert str(Orders()) == "Orders{length=0}"

    def test_summary(self):
        plist = PromisedList([resolved(1), resolved(2)])

        assert plist.to_summary() == {"length": 2}

    def test_count(self):
        plist = PromisedList([resolved(1), resolved(2)])

        assert plist.to_count() == 2
        assert len(plist) == 2

    def test_repr(self):
        assert repr(PromisedList()) == "<PromisedList length=0>"


class TestAsyncIteration:
    """Tests for `async for`."""

    @pytest.mark.asyncio
    async def test_resolves_in_order(self):
        plist = PromisedList([resolved("a"), resolved("b")])

        assert [item async for item in plist] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_raises_captured_exception(self):
        plist = PromisedList([resolved("a"), failing(ValueError("bad"))])
        seen: list[str] = []

        with pytest.raises(ValueError, match="bad"):
            async for item in plist:
                seen.append(item)

        assert seen == ["a"]

    @pytest.mark.asyncio
    async def test_non_exception_error_is_wrapped(self):
        async def rejected():
            return Error("not an exception")

        plist = PromisedList([LazyCoroResult(rejected)])

        with pytest.raises(ItemResolutionError) as info:
            async for _ in plist:
                pass

        assert info.value.index == 0
        assert info.value.error == "not an exception"

    @pytest.mark.asyncio
    async def test_raising_at_override_surfaces_its_exception(self):
        class Lookup(PromisedList[str]):
            def at(self, index):
                if index == 1:
                    raise KeyError(index)
                return super().at(index)

        seen: list[str] = []

        with pytest.raises(KeyError):
            async for item in Lookup(["a", "b"]):
                seen.append(item)

        assert seen == ["a"]
