"""Quickstart: automatic dependency wiring from type hints.

Start with plain classes, resolve only the top-level service, and see how
solowire builds the full dependency chain and caches every piece of it.
"""

from __future__ import annotations

from solowire import Container


class Database:
    def __init__(self, host: str = "localhost") -> None:
        self.host = host


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository


def main() -> None:
    container = Container()
    service = container.get(UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost

    chain = (
        f"{type(service).__name__}"
        f">{type(service.repository).__name__}"
        f">{type(service.repository.database).__name__}"
    )
    print(f"chain={chain}")  # => chain=UserService>UserRepository>Database

    same_service = container.get(UserService) is service
    print(f"same_service={same_service}")  # => same_service=True

    shared_database = container.get(Database) is service.repository.database
    print(f"shared_database={shared_database}")  # => shared_database=True


if __name__ == "__main__":
    main()
