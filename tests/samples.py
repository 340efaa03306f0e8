from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

THEME = {
    "styles": {
        "CodeSurfer": {
            "code": {
                "fontFamily": "monospaced",
            },
        },
    },
}

THEME_WITHOUT_FONT_FAMILY = {
    "styles": {
        "CodeSurfer": {
            "code": {
                "color": "red",
            },
        },
    },
}

FONT = '"Dank Mono", "Fira Code", Consolas, "Roboto Mono", monospace'


@dataclass(frozen=True)
class Address:
    city: str
    zip_code: str = ""


@dataclass(frozen=True)
class Person:
    name: str
    address: Address
    tags: tuple[str, ...] = field(default_factory=tuple)


class Account(BaseModel):
    owner: str
    balance: int = 0


class Plain:
    def __init__(self, value: int) -> None:
        self.value = value
