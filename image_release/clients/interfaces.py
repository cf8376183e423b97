from typing import Protocol


class Builder(Protocol):
    def build(self, image_name: str, dockerfile: str, context: str) -> None:
        ...


class Authenticator(Protocol):
    def login(self, username: str, password: str, registry: str | None = None) -> None:
        ...


class Publisher(Protocol):
    def tag(self, source: str, target: str) -> None:
        ...

    def push(self, reference: str) -> None:
        ...
