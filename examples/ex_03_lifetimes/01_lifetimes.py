"""Lifetimes: singleton factories run once, transient factories run per lookup.

Once an identifier is cached, re-registering it has no effect.
"""

from __future__ import annotations

import itertools

from solowire import Container, Lifetime


def main() -> None:
    container = Container()
    counter = itertools.count(1)

    container.set("request_id", lambda c: next(counter), lifetime=Lifetime.TRANSIENT)
    container.set("app_id", lambda c: next(counter))

    print(f"request_ids={container.get('request_id')},{container.get('request_id')}")  # => request_ids=1,2
    print(f"app_ids={container.get('app_id')},{container.get('app_id')}")  # => app_ids=3,3

    container.set("app_id", lambda c: 100)
    print(f"app_id_after_set={container.get('app_id')}")  # => app_id_after_set=3


if __name__ == "__main__":
    main()
