"""Named arguments.

Scalar parameters bind by name, so callers may pass them in any order and skip
any parameter that declares a default, wherever it sits in the signature.
"""

from __future__ import annotations

from iocwire import Container


class Clock:
    def now(self) -> str:
        return "12:00"


class Profile:
    def show(
        self,
        *,
        name: str = "x",
        clock: Clock,
        sex: str = "male",
        age: int,
    ) -> str:
        return f"{name}/{sex}/{age} at {clock.now()}"


def main() -> None:
    container = Container()

    print(container.run(Profile, "show", {"name": "cat", "age": 5}))  # => cat/male/5 at 12:00
    print(container.run(Profile, "show", {"age": 5, "name": "cat"}))  # => cat/male/5 at 12:00
    print(container.run(Profile, "show", {"age": 3}))  # => x/male/3 at 12:00


if __name__ == "__main__":
    main()
