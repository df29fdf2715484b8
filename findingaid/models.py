"""Data models for the finding-aid splitter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Archive:
    """Archive identity extracted once from the EAD header."""

    agency_code: str = ""
    id: str = ""
    title: str = ""
    subtitle: str = ""

    def qualify(self, unit_id: str) -> str:
        """Namespace a unit identifier with the archive id.

        Returns:
            Identifier like "coll1_s1"
        """
        return f"{self.id}_{unit_id}"


@dataclass(frozen=True)
class ParentLink:
    """Reference from a unit record to its nearest described ancestor."""

    id: str
    title: str


@dataclass
class Cursor:
    """Iteration state over the ordered unit list."""

    total: int
    position: int = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= self.total

    def advance(self) -> int:
        """Move to the next unit and return its 1-based position.

        Raises:
            StopIteration: If all units have already been consumed
        """
        if self.exhausted:
            raise StopIteration
        self.position += 1
        return self.position
