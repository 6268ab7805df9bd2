"""Contracts and singletons.

``bind`` points an abstract contract at a concrete class that is built fresh
for every consumer. ``singleton`` shares one pre-built instance with every
consumer, so changes made through one reference are visible everywhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import iocwire


class StorageEngine(ABC):
    @abstractmethod
    def info(self) -> str: ...


class FileStorageEngine(StorageEngine):
    def info(self) -> str:
        return "file storage engine"


class RedisStorageEngine(StorageEngine):
    def info(self) -> str:
        return "redis storage engine"


class Foo:
    def __init__(self) -> None:
        self.msg = "foo nothing to say!"

    def index(self) -> None:
        self.msg = "foo hello, modified by index method!"


class Bar:
    def __init__(self) -> None:
        self.msg = "bar nothing to say!"

    def index(self) -> None:
        self.msg = "bar hello, modified by index method!"


class Controller:
    def __init__(self, foo: Foo, bar: Bar) -> None:
        self.foo = foo
        self.bar = bar
        foo.index()
        bar.index()

    def index(self, foo: Foo, bar: Bar, se: StorageEngine) -> str:
        return f"{foo.msg} | {bar.msg} | {se.info()}"


def main() -> None:
    iocwire.singleton(Foo, Foo())
    iocwire.bind(StorageEngine, FileStorageEngine)

    print(iocwire.run(Controller, "index", {}))  # => foo hello, modified by index method! | bar nothing to say! | file storage engine

    iocwire.bind(StorageEngine, RedisStorageEngine)
    print(iocwire.run(Controller, "index", {}))  # => foo hello, modified by index method! | bar nothing to say! | redis storage engine


if __name__ == "__main__":
    main()
