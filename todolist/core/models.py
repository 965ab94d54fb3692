import datetime as dt
import uuid
from .utils import get_now_utc


class Todo:
    """A single task record.

    Attributes:
        id (uuid.UUID): Unique identifier, generated at creation.
        description (str): Free-form text describing the task.
        completed (bool): Whether the task is done.
        created_at (dt.datetime): Moment the task was created (UTC).
    """

    id: "uuid.UUID"
    description: "str"
    completed: "bool"
    created_at: "dt.datetime"

    def __init__(
        self,
        id: "uuid.UUID",
        description: "str",
        completed: "bool",
        created_at: "dt.datetime",
    ):
        self.id = id
        self.description = description
        self.completed = completed
        self.created_at = created_at

    def __repr__(self):  # pragma: no cover
        return f"Todo(id='{self.id}', description='{self.description}', completed={self.completed})"

    def __eq__(self, other: "object"):
        if not isinstance(other, Todo):
            return NotImplemented

        return (
            str(self.id) == str(other.id)
            and self.description == other.description
            and self.completed == other.completed
            and self.created_at == other.created_at
        )

    def __hash__(self):
        return hash(str(self.id))

    @classmethod
    def create(cls, description: "str") -> "Todo":
        """Builds a new, not yet completed, Todo with a fresh id.

        Args:
            description (str): The task's text.
        """
        return cls(
            id=uuid.uuid4(),
            description=description,
            completed=False,
            created_at=get_now_utc(),
        )
