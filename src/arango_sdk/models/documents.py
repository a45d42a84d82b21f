"""Record type held by cursors."""

from __future__ import annotations

from typing import Any

from pydantic import RootModel

# Reserved attribute names on stored documents
ENTRY_ID = "_id"
ENTRY_KEY = "_key"
ENTRY_REV = "_rev"


class Document(RootModel[dict[str, Any]]):
    """A single result row.

    The row is kept as-is, so user attributes never collide with the
    system attributes exposed as :attr:`id`, :attr:`key` and :attr:`rev`.
    """

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        return cls.model_validate(data)

    @property
    def id(self) -> str | None:
        return self.root.get(ENTRY_ID)

    @property
    def key(self) -> str | None:
        return self.root.get(ENTRY_KEY)

    @property
    def rev(self) -> str | None:
        return self.root.get(ENTRY_REV)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.root)

    def get(self, name: str, default: Any = None) -> Any:
        return self.root.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root
