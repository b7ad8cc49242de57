from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    status: str
    total: float


def _empty_orders() -> dict[int, Order]:
    return {}


@dataclass(slots=True)
class FakeOrderApi:
    delay_seconds: float = 0.0
    orders: dict[int, Order] = field(default_factory=_empty_orders)
    calls: int = 0

    async def fetch_order(self, order_id: int) -> Result[Order, Failure]:
        self.calls += 1
        await asyncio.sleep(self.delay_seconds)
        order = self.orders.get(order_id)
        if order is None:
            return Error(Failure(f"order {order_id}: not found"))
        return Ok(order)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
