"""Discover services by tag.

Tags record a key and free-form config. The key does not need to exist when
it is tagged.
"""

from __future__ import annotations

from lazywire import Container


def main() -> None:
    container = Container()
    container.set("users.static", lambda: ["alice", "bob"])
    container.set("users.ldap", lambda: ["carol"])
    container.tag("users.static", "user_provider", {"source": "static"})
    container.tag("users.ldap", "user_provider", {"source": "ldap"})

    sources = [
        f"{association.config['source']}={'+'.join(container.get(association.key))}"
        for association in container.tagged("user_provider")
    ]
    print(", ".join(sources))  # => static=alice+bob, ldap=carol

    print(container.tagged("unknown"))  # => []


if __name__ == "__main__":
    main()
