import dataclasses as dt

from typing import Optional
from dataclasses_json import DataClassJsonMixin


@dt.dataclass
class Candidate(DataClassJsonMixin):
    """
    A token that may be a positional argument or the value of the option
    scanned right before it.
    """

    value: str
    """The token, verbatim."""
    owner: Optional[str] = None
    """The option that immediately preceded this token, if any."""
    source: int = -1
    """Index of the token in the raw-order record."""
    live: bool = True
    """False once the owner has been marked as a parameter."""

    @property
    def claimed(self) -> bool:
        return self.owner is not None and not self.live


@dt.dataclass
class Snapshot(DataClassJsonMixin):
    """
    A serializable view of a classification at a given point in time.
    """

    flags: dict[str, int] = dt.field(default_factory=dict)
    """Flag names mapped to their occurrence count."""
    parameters: dict[str, str] = dt.field(default_factory=dict)
    """Option names mapped to their (last) value."""
    positionals: list[str] = dt.field(default_factory=list)
    """Live positional arguments, in order."""
    marked: list[str] = dt.field(default_factory=list)
    """Names committed as parameters, in marking order."""
    raw: list[str] = dt.field(default_factory=list)
    """Every non-empty token, in input order."""
    candidates: list[Candidate] = dt.field(default_factory=list)
    """Every candidate scanned, claimed ones included."""
