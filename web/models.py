from typing import Optional

from attrs import define, field
from attrs.validators import instance_of, optional


@define(slots=True, kw_only=True, frozen=True)
class User:
    # Claims populated from the Google attribute mapping of the user pool
    sub: str = field(validator=instance_of(str))
    email: str = field(validator=instance_of(str))
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    picture: Optional[str] = None
    preferred_username: Optional[str] = None


@define(slots=True, kw_only=True, frozen=True)
class Locals:
    """Per-request values shared between the session hook and route handlers."""

    debug: bool = field(default=False, validator=instance_of(bool))
    user: Optional[User] = field(default=None, validator=optional(instance_of(User)))
