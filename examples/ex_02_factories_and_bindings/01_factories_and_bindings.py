"""Factories and bindings.

Factories build services that need configuration; bindings point abstract
identifiers (interfaces or plain names) at concrete ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solowire import Container, IContainer


class Notifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> str: ...


class SmtpNotifier(Notifier):
    def __init__(self, host: str) -> None:
        self.host = host

    def notify(self, message: str) -> str:
        return f"smtp://{self.host}: {message}"


class SignupService:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier


def main() -> None:
    container = Container(
        {
            "smtp.host": lambda c: "mail.example.com",
        },
    )

    @container.factory(SmtpNotifier)
    def build_notifier(c: IContainer) -> SmtpNotifier:
        return SmtpNotifier(host=c.get("smtp.host"))

    container.bind(Notifier, SmtpNotifier)
    container.bind("notifier", Notifier)

    service = container.get(SignupService)
    print(service.notifier.notify("welcome"))  # => smtp://mail.example.com: welcome

    same_notifier = container.get("notifier") is service.notifier
    print(f"same_notifier={same_notifier}")  # => same_notifier=True

    print(f"has_notifier={container.has('notifier')}")  # => has_notifier=True
    print(f"has_unknown={container.has('unknown')}")  # => has_unknown=False


if __name__ == "__main__":
    main()
