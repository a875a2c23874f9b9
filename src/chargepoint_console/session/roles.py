"""User roles and their French labels."""

from enum import StrEnum
from typing import Self

__all__ = ["UNKNOWN_ROLE_LABEL", "ApiRole", "role_label"]


UNKNOWN_ROLE_LABEL = "Inconnu"


class ApiRole(StrEnum):
    """Role of a console user, as named by the backend."""

    VISUALIZER = "VISUALIZER"
    EDITOR = "EDITOR"
    ADMINISTRATOR = "ADMINISTRATOR"

    @property
    def label(self) -> str:
        """French label shown in the console."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> Self | None:
        """Role matching a French label, ``None`` if there is none."""
        for role, role_label_text in _LABELS.items():
            if role_label_text == label:
                return cls(role)
        return None


_LABELS = {
    ApiRole.VISUALIZER: "Visualiseur",
    ApiRole.EDITOR: "Éditeur",
    ApiRole.ADMINISTRATOR: "Administrateur",
}


def role_label(role: str) -> str:
    """French label of a backend role name, ``Inconnu`` when unknown."""
    try:
        return ApiRole(role).label
    except ValueError:
        return UNKNOWN_ROLE_LABEL
