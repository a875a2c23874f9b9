"""Backend endpoints of the console resources."""

from dataclasses import dataclass

from pydantic import BaseModel

from .exceptions import UnknownResourceError
from .models import (
    BusinessLog,
    ChargePoint,
    Configuration,
    Firmware,
    TechnicalLog,
    TypeAllowed,
    User,
)

__all__ = ["RESOURCES", "ResourceDefinition", "get_resource"]


@dataclass(frozen=True, slots=True)
class ResourceDefinition:
    """Where a resource lives on the backend and how its items decode.

    Capabilities a resource lacks on the backend are left as ``None``.
    """

    name: str
    path: str
    model: type[BaseModel]
    searchable: bool = True
    listable: bool = True
    create_suffix: str | None = "/create"
    update_prefix: str | None = ""

    @property
    def search_path(self) -> str:
        return f"{self.path}/search"

    @property
    def all_path(self) -> str:
        return f"{self.path}/all"

    def element_path(self, element_id: int | str) -> str:
        return f"{self.path}/{element_id}"

    def create_path(self) -> str | None:
        if self.create_suffix is None:
            return None
        return f"{self.path}{self.create_suffix}"

    def update_path(self, element_id: int | str) -> str | None:
        if self.update_prefix is None:
            return None
        return f"{self.path}{self.update_prefix}/{element_id}"


RESOURCES: dict[str, ResourceDefinition] = {
    definition.name: definition
    for definition in (
        ResourceDefinition("users", "/api/user", User),
        ResourceDefinition("chargepoints", "/api/chargepoint", ChargePoint),
        ResourceDefinition(
            "firmwares", "/api/firmware", Firmware, update_prefix="/update"
        ),
        ResourceDefinition("configurations", "/api/configuration", Configuration),
        ResourceDefinition(
            "types", "/api/type", TypeAllowed, searchable=False, update_prefix=None
        ),
        ResourceDefinition(
            "business-logs",
            "/api/log/business",
            BusinessLog,
            listable=False,
            create_suffix=None,
            update_prefix=None,
        ),
        ResourceDefinition(
            "technical-logs",
            "/api/log/technical",
            TechnicalLog,
            listable=False,
            create_suffix=None,
            update_prefix=None,
        ),
    )
}


def get_resource(name: str) -> ResourceDefinition:
    """Definition of the resource ``name``.

    Raises:
        UnknownResourceError: If no resource has that name.
    """
    try:
        return RESOURCES[name]
    except KeyError:
        raise UnknownResourceError(name) from None
