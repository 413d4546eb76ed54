"""User credential entity.

Represents a stored credential record, independent of the store that holds it.
Read-only inside this service: only the repository builds it, from a row.
"""

from dataclasses import dataclass, field, fields


@dataclass
class UserEntity:
    """Persisted credential record, including the password hash and salt.

    Never returned to callers directly; project it with UserDTO.from_entity.
    """

    id: int = 0
    username: str = ""
    email: str = ""
    active: bool = False
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = field(default="", repr=False)
    salt: str = field(default="", repr=False)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the entity's field names in declaration order."""
        return tuple(f.name for f in fields(cls))
