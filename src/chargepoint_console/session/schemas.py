"""Session identity model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .roles import ApiRole

__all__ = ["SessionIdentity"]


class SessionIdentity(BaseModel):
    """Profile of the authenticated console user."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    email: str
    first_name: str
    last_name: str
    role: ApiRole = Field(description="Role granted to the user.")
