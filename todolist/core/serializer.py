from typing import Any, Dict
from abc import ABC, abstractmethod
from .models import Todo
from .utils import parse_datetime
from .exceptions import TodoSerializationException
import uuid


class BaseTodoSerializer(ABC):

    """Abstract class that converts todos to dictionaries of primitive types and back."""

    @abstractmethod
    def serialize(self, todo: "Todo") -> "Dict":  # pragma: no cover
        """Converts a todo to a dictionary of primitive types.

        Args:
            todo (Todo): Todo to be serialized.
        """

    @abstractmethod
    def deserialize(self, data: "Dict") -> "Todo":  # pragma: no cover
        """Converts a dictionary of primitive types back to a todo.

        Args:
            data (Dict): The serialized todo.

        Raises:
            TodoSerializationException: If the data doesn't describe a valid todo.
        """


class TodoSerializer(BaseTodoSerializer):

    """Concrete implementation of a BaseTodoSerializer.
    """

    def serialize(self, todo: "Todo") -> "Dict":
        return {
            "id": str(todo.id),
            "description": todo.description,
            "completed": todo.completed,
            "created_at": todo.created_at.isoformat(),
        }

    def _get_field(self, data: "Dict", field_name: "str", field_type: "type") -> "Any":
        try:
            value = data[field_name]
        except KeyError:
            raise TodoSerializationException("Missing field '%s'." % field_name)

        if not isinstance(value, field_type):
            raise TodoSerializationException(
                "Field '%s' must be of type %s." % (field_name, field_type.__name__)
            )
        return value

    def deserialize(self, data: "Dict") -> "Todo":
        if not isinstance(data, dict):
            raise TodoSerializationException("Expected an object, got %r." % (data,))

        raw_id = self._get_field(data, "id", str)
        try:
            id = uuid.UUID(raw_id)
        except ValueError:
            raise TodoSerializationException("Invalid id '%s'." % raw_id)

        raw_created_at = self._get_field(data, "created_at", str)
        try:
            created_at = parse_datetime(raw_created_at)
        except ValueError:
            raise TodoSerializationException("Invalid date '%s'." % raw_created_at)

        return Todo(
            id=id,
            description=self._get_field(data, "description", str),
            completed=self._get_field(data, "completed", bool),
            created_at=created_at,
        )
