"""Errors: every failure names the identifier (and parameter) that broke."""

from __future__ import annotations

from solowire import (
    Container,
    SoloWireCircularDependencyError,
    SoloWireInvalidRegistrationError,
    SoloWireNotFoundError,
    SoloWireUnresolvableParameterError,
)


class ApiClient:
    def __init__(self, token: str) -> None:
        self.token = token


def main() -> None:
    container = Container()

    try:
        container.get("nonexistent-id")
    except SoloWireNotFoundError as error:
        print(f"not_found={error.identifier}")  # => not_found=nonexistent-id

    try:
        container.get(ApiClient)
    except SoloWireUnresolvableParameterError as error:
        print(f"unresolvable={error.parameter_name}")  # => unresolvable=token

    try:
        container.set_multiple({"a": lambda c: "a", "b": "not-a-function"})  # type: ignore[dict-item]
    except SoloWireInvalidRegistrationError as error:
        print(f"invalid={error.identifier} a_registered={container.has('a')}")  # => invalid=b a_registered=True

    container.bind("ping", "pong")
    container.bind("pong", "ping")
    try:
        container.get("ping")
    except SoloWireCircularDependencyError as error:
        print(" -> ".join(error.resolution_path))  # => ping -> pong -> ping


if __name__ == "__main__":
    main()
