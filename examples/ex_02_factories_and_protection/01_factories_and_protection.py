"""Factories run on every lookup, protected callables never run.

Both marks attach to the callable object, so the same callable stored under
several keys behaves the same everywhere.
"""

from __future__ import annotations

import itertools

from lazywire import Container


def main() -> None:
    container = Container()
    counter = itertools.count(1)

    container.set("ticket", container.factory(lambda: next(counter)))
    print(container.get("ticket"), container.get("ticket"))  # => 1 2

    @container.protect
    def shout(text: str) -> str:
        return text.upper()

    container.set("shout", shout)
    print(container.get("shout")("quiet"))  # => QUIET

    container.set("leet", lambda: 1337)
    print(container.raw("leet")())  # => 1337


if __name__ == "__main__":
    main()
