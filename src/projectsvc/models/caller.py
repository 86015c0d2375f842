"""Explicit identity of the caller of a lifecycle operation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CallerContext:
    """Who is calling, and with which roles.

    Built once per request from the validated bearer token and passed into
    every ``ProjectService`` operation.
    """

    username: str
    roles: frozenset[str] = field(default_factory=frozenset)
    token: str | None = field(default=None, repr=False, compare=False)

    def has_role(self, role: str) -> bool:
        return str(role) in self.roles
