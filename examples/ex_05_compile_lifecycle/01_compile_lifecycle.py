"""Coordinate modules with the two-phase compile.

The composer disables instantiation up front, so modules can only register
definitions. Pre listeners may still change definitions; post listeners run
with instantiation enabled. Locking afterwards makes the container read-only.
"""

from __future__ import annotations

from lazywire import Container, LazyWireLockedContainerError, LifecycleConfig


def register_core(container: Container) -> None:
    container.set("mailer", lambda: "smtp")


def register_logging(container: Container) -> None:
    @container.get_compiler().on_compile_pre
    def wrap_mailer(c: Container) -> None:
        c.extend("mailer", lambda inner: f"logging({inner()})")


def main() -> None:
    events: list[str] = []

    def configure(config: LifecycleConfig) -> None:
        config.instantiate = False
        config.compiler.on_compile_pre(lambda c: events.append(f"pre:{config.instantiate}"))
        config.compiler.on_compile_post(lambda c: events.append(f"post:{c.get('mailer')}"))

    container = Container(configure=configure)
    register_logging(container)
    register_core(container)

    container.get_compiler().emit_compile()
    print(" ".join(events))  # => pre:False post:logging(smtp)

    container.lifecycle.locked = True
    try:
        container.set("mailer", "other")
    except LazyWireLockedContainerError as error:
        print(error)  # => Cannot set service 'mailer': the container is locked.


if __name__ == "__main__":
    main()
