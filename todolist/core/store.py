from typing import List, Iterable, Union
from abc import ABC, abstractmethod
from .models import Todo
from .utils import BaseStoreLock
import uuid

TodoId = Union[str, uuid.UUID]


def matches_query(todo: "Todo", query: "str") -> "bool":
    """Case-insensitive substring match against the todo's description. An empty query matches everything.

    Args:
        todo (Todo): The todo being tested.
        query (str): The text being looked for.
    """
    if not query:
        return True

    return query.casefold() in todo.description.casefold()


class BaseTodoStore(ABC):
    """Abstract class that encapsulates the access to the ordered collection of todos.

    The order of the collection is significant: it is the insertion order until
    a call to reorder_todos replaces it. Every read returns copies of the stored
    todos, so the only way of changing a todo is through update_todo.
    """

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}()"

    @abstractmethod
    def create_todo(self, description: "str") -> "Todo":  # pragma: no cover
        """Creates a new todo and appends it to the end of the collection.

        Args:
            description (str): The todo's text. No validation is performed.

        Returns:
            Todo: A copy of the created todo.
        """

    @abstractmethod
    def delete_todo(self, id: "TodoId"):  # pragma: no cover
        """Removes the todo with the given id, keeping the order of the others. Unknown ids are ignored.

        Args:
            id (TodoId): The todo's id.
        """

    @abstractmethod
    def update_todo(
        self, id: "TodoId", completed: "bool", description: "str"
    ) -> "Todo":  # pragma: no cover
        """Replaces both the completed flag and the description of a todo.

        Args:
            id (TodoId): The todo's id.
            completed (bool): New value for the completed flag.
            description (str): New description.

        Raises:
            TodoNotFoundException: If there is no todo with the given id.
        """

    @abstractmethod
    def get_todo_by_id(self, id: "TodoId") -> "Todo":  # pragma: no cover
        """Retrieves a copy of a todo.

        Args:
            id (TodoId): The todo's id.

        Raises:
            TodoNotFoundException: If there is no todo with the given id.
        """

    @abstractmethod
    def get_todos(self) -> "List[Todo]":  # pragma: no cover
        """Returns copies of all the todos in the current order."""

    @abstractmethod
    def reorder_todos(self, ids: "Iterable[TodoId]") -> "List[Todo]":  # pragma: no cover
        """Rebuilds the collection following the order of the given ids.

        Ids without a matching todo are skipped and todos whose ids are not in the
        list are dropped from the collection.

        Args:
            ids (Iterable[TodoId]): The ids in their new order.

        Returns:
            List[Todo]: The new contents of the collection.
        """

    @abstractmethod
    def load_todos(self, todos: "Iterable[Todo]"):  # pragma: no cover
        """Appends already built todos, e.g. when seeding the collection at startup.

        Raises:
            ValueError: If one of the ids is already in use.
        """

    def search_todos(self, query: "str") -> "List[Todo]":
        """Returns the todos whose description contains the query, ignoring case, in the current order.

        Args:
            query (str): Text to look for. An empty query returns every todo.
        """
        return [todo for todo in self.get_todos() if matches_query(todo, query)]


class LockedTodoStore(BaseTodoStore):
    """Wraps a store so that every operation runs while holding a lock.

    Attributes:
        store (BaseTodoStore): The wrapped store.
        store_lock (BaseStoreLock): Lock shared by all the operations.
    """

    store: "BaseTodoStore"
    store_lock: "BaseStoreLock"

    def __init__(self, store: "BaseTodoStore", store_lock: "BaseStoreLock"):
        self.store = store
        self.store_lock = store_lock

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(store={self.store!r})"

    def create_todo(self, description: "str") -> "Todo":
        with self.store_lock.lock():
            return self.store.create_todo(description=description)

    def delete_todo(self, id: "TodoId"):
        with self.store_lock.lock():
            self.store.delete_todo(id=id)

    def update_todo(self, id: "TodoId", completed: "bool", description: "str") -> "Todo":
        with self.store_lock.lock():
            return self.store.update_todo(
                id=id, completed=completed, description=description
            )

    def get_todo_by_id(self, id: "TodoId") -> "Todo":
        with self.store_lock.lock():
            return self.store.get_todo_by_id(id=id)

    def get_todos(self) -> "List[Todo]":
        with self.store_lock.lock():
            return self.store.get_todos()

    def search_todos(self, query: "str") -> "List[Todo]":
        with self.store_lock.lock():
            return self.store.search_todos(query=query)

    def reorder_todos(self, ids: "Iterable[TodoId]") -> "List[Todo]":
        with self.store_lock.lock():
            return self.store.reorder_todos(ids=ids)

    def load_todos(self, todos: "Iterable[Todo]"):
        with self.store_lock.lock():
            self.store.load_todos(todos=todos)
