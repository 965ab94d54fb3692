from typing import Any, List, Iterable, Optional
from .models import Todo
from .store import BaseTodoStore, TodoId
from .serializer import BaseTodoSerializer, TodoSerializer
from .exceptions import TodoValidationException, TodoSerializationException
import json
import logging

logger = logging.getLogger(__name__)


class TodoService:
    """Business layer used by the web handlers. It validates the input and delegates to the store.

    Attributes:
        store (BaseTodoStore): Store that owns the todos. In a server it's usually a LockedTodoStore.
        serializer (BaseTodoSerializer): Used when loading todos from a seed file.
    """

    store: "BaseTodoStore"
    serializer: "BaseTodoSerializer"

    def __init__(
        self,
        store: "BaseTodoStore",
        serializer: "Optional[BaseTodoSerializer]" = None,
    ):
        self.store = store
        self.serializer = serializer if serializer is not None else TodoSerializer()

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(store={self.store!r})"

    def _clean_description(self, description: "Any") -> "str":
        if not isinstance(description, str) or not description.strip():
            raise TodoValidationException(
                field="description", message="This field may not be blank."
            )
        return description.strip()

    def create_todo(self, description: "Optional[str]") -> "Todo":
        """Validates the description and creates a todo at the end of the list.

        Raises:
            TodoValidationException: If the description is missing or blank.
        """
        description = self._clean_description(description)
        todo = self.store.create_todo(description=description)
        logger.info("Created todo %s", todo.id)
        return todo

    def update_todo(
        self, id: "TodoId", completed: "bool", description: "Optional[str]"
    ) -> "Todo":
        """Replaces the completed flag and the description of a todo.

        Raises:
            TodoValidationException: If the description is missing or blank.
            TodoNotFoundException: If there is no todo with the given id.
        """
        description = self._clean_description(description)
        todo = self.store.update_todo(
            id=id, completed=completed, description=description
        )
        logger.info("Updated todo %s (completed=%s)", todo.id, todo.completed)
        return todo

    def delete_todo(self, id: "TodoId"):
        self.store.delete_todo(id=id)
        logger.info("Deleted todo %s", id)

    def get_todo_by_id(self, id: "TodoId") -> "Todo":
        return self.store.get_todo_by_id(id=id)

    def get_todos(self) -> "List[Todo]":
        return self.store.get_todos()

    def search_todos(self, query: "Optional[str]") -> "List[Todo]":
        todos = self.store.search_todos(query=query or "")
        logger.debug("Search for %r matched %d todos", query, len(todos))
        return todos

    def reorder_todos(self, ids: "Iterable[TodoId]") -> "List[Todo]":
        todos = self.store.reorder_todos(ids=list(ids))
        logger.info("Reordered todos, %d remaining", len(todos))
        return todos

    def seed_todos(self, descriptions: "Iterable[str]") -> "List[Todo]":
        """Creates one todo for each description, in order."""
        return [self.create_todo(description) for description in descriptions]

    def load_from_file(self, path: "str") -> "List[Todo]":
        """Loads todos from a JSON file containing a list of serialized todos.

        Args:
            path (str): Path of the JSON file.

        Raises:
            TodoSerializationException: If the file doesn't hold a list of valid todos.
        """
        with open(path, "r", encoding="utf-8") as fobj:
            try:
                data = json.load(fobj)
            except json.JSONDecodeError as e:
                raise TodoSerializationException("Invalid JSON in '%s': %s" % (path, e))

        if not isinstance(data, list):
            raise TodoSerializationException("Expected a list of todos in '%s'." % path)

        todos = [self.serializer.deserialize(item) for item in data]
        self.store.load_todos(todos=todos)
        logger.info("Loaded %d todos from %s", len(todos), path)
        return todos
