"""Quickstart: parameters, lazily evaluated services, and freezing.

Plain values are stored as parameters. Callables are services: they run on
the first ``get`` and their result is cached from then on.
"""

from __future__ import annotations

from lazywire import Container, LazyWireFrozenServiceError


class Greeter:
    def __init__(self, name: str) -> None:
        self.name = name

    def greet(self) -> str:
        return f"hello {self.name}"


def main() -> None:
    container = Container({"name": "world"})
    container.set("greeter", lambda c: Greeter(c.get("name")))

    print(container.get("name"))  # => world
    print(container.get("greeter").greet())  # => hello world

    same = container.get("greeter") is container.get("greeter")
    print(f"same_instance={same}")  # => same_instance=True

    try:
        container.set("greeter", lambda: Greeter("nobody"))
    except LazyWireFrozenServiceError:
        print("greeter is frozen")  # => greeter is frozen

    print(f"keys={container.keys()}")  # => keys=['name', 'greeter']


if __name__ == "__main__":
    main()
