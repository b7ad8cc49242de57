from __future__ import annotations

import asyncio

from _infra import banner, run

from kungfu import Error, Ok

from promised import PromisedList


async def slow(value: str, delay: float) -> str:
    await asyncio.sleep(delay)
    return value


async def main() -> None:
    banner("01_quickstart: map + find over pending values")

    # Later items finish first, results still come back in index order.
    # Tasks can be awaited more than once, so the list can be driven repeatedly.
    words = PromisedList([
        asyncio.ensure_future(slow("alpha", 0.03)),
        asyncio.ensure_future(slow("beta", 0.02)),
        asyncio.ensure_future(slow("gamma", 0.01)),
    ])

    match await words.map(lambda word, i: f"{i}:{word.upper()}"):
        case Ok(tagged):
            print(tagged)
        case Error(err):
            print(f"error: {err!r}")

    match await words.find(lambda word, _: word.startswith("b")):
        case Ok(found):
            print(f"first b-word: {found}")
        case Error(err):
            print(f"error: {err!r}")

    print(words, words.to_summary())


if __name__ == "__main__":
    run(main)
