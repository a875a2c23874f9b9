"""Mutation module: create and update requests."""

from .schemas import MutationKind, UpdateMethod
from .service import create_element, mutate, update_element

__all__ = [
    "MutationKind",
    "UpdateMethod",
    "create_element",
    "mutate",
    "update_element",
]
