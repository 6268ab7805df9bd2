"""Errors carry the name of the offending service, target, or parameter."""

from __future__ import annotations

from iocwire import (
    Container,
    IOCWireCircularDependencyError,
    IOCWireInvalidBindingError,
    IOCWireMissingRequiredParameterError,
    IOCWireMissingScalarDependencyError,
    IOCWireTargetNotFoundError,
)


class Page:
    def show(self, page_id: int, title: str = "home") -> str:
        return f"{page_id}:{title}"


class Client:
    def __init__(self, host: str) -> None:
        self.host = host

    def ping(self) -> str:
        return self.host


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg

    def hatch(self) -> None:
        return None


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


def main() -> None:
    container = Container()

    try:
        container.run(Page, "show", {"title": "about"})
    except IOCWireMissingRequiredParameterError as error:
        print(f"missing={error.parameter_name}")  # => missing=page_id

    try:
        container.run(Client, "ping", {"host": "localhost"})
    except IOCWireMissingScalarDependencyError as error:
        print(f"constructor_scalar={error.parameter_name}")  # => constructor_scalar=host

    try:
        container.run(Page, "delete")
    except IOCWireTargetNotFoundError as error:
        print(f"not_found={error.method_name}")  # => not_found=delete

    try:
        container.bind(Page, "no_such_module.Page")
    except IOCWireInvalidBindingError as error:
        print(f"invalid_provider={error.provider}")  # => invalid_provider=no_such_module.Page

    try:
        container.run(Chicken, "hatch")
    except IOCWireCircularDependencyError as error:
        print(f"cycle={'>'.join(cls.__name__ for cls in error.chain)}")  # => cycle=Chicken>Egg>Chicken


if __name__ == "__main__":
    main()
