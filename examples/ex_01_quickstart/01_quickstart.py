"""Quickstart: run a method and let the container wire everything.

The container builds the target class from its constructor type hints, then
calls the method with object parameters resolved and scalar parameters taken
from named arguments.
"""

from __future__ import annotations

from iocwire import Container


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database

    def find(self, user_id: int) -> str:
        return f"user-{user_id}@{self.database.host}"


class UserController:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def show(self, user_id: int, fmt: str = "text") -> str:
        return f"{fmt}:{self.repository.find(user_id)}"


def main() -> None:
    container = Container()

    print(container.run(UserController, "show", {"user_id": 7}))  # => text:user-7@localhost
    print(container.run(UserController, "show", {"fmt": "json", "user_id": 8}))  # => json:user-8@localhost


if __name__ == "__main__":
    main()
