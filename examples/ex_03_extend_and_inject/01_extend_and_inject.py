"""Compose services with ``extend`` and wire dependencies with ``inject``.

``extend`` hands the previous callable to the wrapper, which decides when to
call it. ``inject`` resolves an explicit list of keys and passes them
positionally.
"""

from __future__ import annotations

from lazywire import Container


class Mailer:
    def __init__(self, host: str, sender: str) -> None:
        self.host = host
        self.sender = sender

    def describe(self) -> str:
        return f"{self.sender}@{self.host}"


def main() -> None:
    container = Container({"smtp.host": "mail.local", "smtp.sender": "noreply"})
    container.inject("mailer", Mailer, ["smtp.host", "smtp.sender"])
    print(container.get("mailer").describe())  # => noreply@mail.local

    container.set("alice", lambda: "Hello Alice!")
    container.extend("alice", lambda inner, c: f"Hello Bob! {inner()}")
    print(container.get("alice"))  # => Hello Bob! Hello Alice!


if __name__ == "__main__":
    main()
