"""Named actors: clients and trainers."""

from __future__ import annotations

from pydantic import BaseModel

from clubctl.domain.membership import Membership


class Person(BaseModel):
    """A named actor. The name is fixed at construction."""

    model_config = {"frozen": True}

    name: str

    def get_name(self) -> str:
        return self.name


class Client(Person):
    """A person owning exactly one membership.

    The binding is immutable; the membership itself may still be expired.
    """

    membership: Membership

    def get_membership(self) -> Membership:
        return self.membership


class Trainer(Person):
    """A club trainer. Carries no behavior beyond its name."""
