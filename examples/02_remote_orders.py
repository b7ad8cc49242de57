from __future__ import annotations

import logging

from _infra import FakeOrderApi, Order, banner, run

from kungfu import Error, LazyCoroResult, Ok

from promised import PromisedList, Trace, Visit, compose, logged, timeout, traced


class RemoteOrders(PromisedList[Order]):
    """Orders fetched on demand: only ids are stored, `at` goes to the API."""

    __slots__ = ("_api",)

    def __init__(self, api: FakeOrderApi, ids: list[int], **kwargs) -> None:
        super().__init__(ids, **kwargs)
        self._api = api

    def at(self, index: int) -> LazyCoroResult[Order | None, Exception]:
        if not 0 <= index < len(self):
            return LazyCoroResult.pure(None)
        order_id = self._items[index]
        return LazyCoroResult(lambda: self._api.fetch_order(order_id))


async def main() -> None:
    banner("02_remote_orders: overridden at + decorators")
    logging.basicConfig(level=logging.DEBUG)

    api = FakeOrderApi(
        delay_seconds=0.01,
        orders={
            1: Order(1, "paid", 10.0),
            2: Order(2, "draft", 25.0),
            3: Order(3, "paid", 7.5),
        },
    )
    trace: Trace[Visit] = Trace()
    orders = RemoteOrders(
        api,
        [1, 2, 3],
        promise_decorator=timeout(seconds=1.0),
        handler_decorator=compose(logged(), traced(trace)),
    )

    match await orders.find(lambda order, _: order.status == "draft"):
        case Ok(draft):
            print(f"draft: {draft}, fetched {api.calls} order(s), visited {trace.indices()}")
        case Error(err):
            print(f"error: {err!r}")

    match await orders.reduce(lambda total, order, _: total + order.total, 0.0):
        case Ok(total):
            print(f"total: {total}")
        case Error(err):
            print(f"error: {err!r}")

    orders.push(99)
    match await orders.pluck("status"):
        case Ok(statuses):
            print(statuses)
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
