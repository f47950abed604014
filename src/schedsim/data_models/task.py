"""Task data model for schedsim."""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """
    Represents a single CPU or I/O burst.

    The task itself only carries its remaining duration; whether it is a CPU
    burst or an I/O burst is decided by the queue holding its process.
    """

    duration: int = Field(ge=0, description="Remaining ticks of work")

    @property
    def spent(self) -> bool:
        """True once the remaining duration has reached zero."""
        return self.duration == 0

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Task({self.duration})"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"Task(duration={self.duration})"
