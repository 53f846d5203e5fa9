"""Threads: concurrent first lookups construct a singleton exactly once."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor

from solowire import Container

constructed: list[object] = []


class ConnectionPool:
    def __init__(self) -> None:
        time.sleep(0.05)
        constructed.append(self)


def main() -> None:
    container = Container()

    with ThreadPoolExecutor(max_workers=8) as executor:
        pools = list(executor.map(lambda _: container.get(ConnectionPool), range(8)))

    print(f"constructed={len(constructed)}")  # => constructed=1
    print(f"all_same={all(pool is pools[0] for pool in pools)}")  # => all_same=True


if __name__ == "__main__":
    main()
