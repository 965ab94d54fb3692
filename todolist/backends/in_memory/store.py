from todolist.core.store import BaseTodoStore, TodoId
from todolist.core.models import Todo
from todolist.core.exceptions import TodoNotFoundException
from typing import List, Iterable, Optional
import copy


class InMemoryTodoStore(BaseTodoStore):
    def __init__(self):
        self._todos: "List[Todo]" = []

    def _get_index(self, id: "TodoId") -> "Optional[int]":
        for idx, todo in enumerate(self._todos):
            if str(todo.id) == str(id):
                return idx

        return None

    def _get_by_id(self, id: "TodoId") -> "Todo":
        idx = self._get_index(id=id)
        if idx is None:
            raise TodoNotFoundException(id=str(id))

        return self._todos[idx]

    def create_todo(self, description: "str") -> "Todo":
        todo = Todo.create(description=description)
        self._todos.append(todo)
        return copy.deepcopy(todo)

    def delete_todo(self, id: "TodoId"):
        idx = self._get_index(id=id)
        if idx is not None:
            del self._todos[idx]

    def update_todo(self, id: "TodoId", completed: "bool", description: "str") -> "Todo":
        todo = self._get_by_id(id=id)
        todo.completed = completed
        todo.description = description
        return copy.deepcopy(todo)

    def get_todo_by_id(self, id: "TodoId") -> "Todo":
        return copy.deepcopy(self._get_by_id(id=id))

    def get_todos(self) -> "List[Todo]":
        return copy.deepcopy(self._todos)

    def reorder_todos(self, ids: "Iterable[TodoId]") -> "List[Todo]":
        todos_by_id = {str(todo.id): todo for todo in self._todos}
        reordered: "List[Todo]" = []
        for id in ids:
            todo = todos_by_id.pop(str(id), None)
            if todo is not None:
                reordered.append(todo)

        self._todos = reordered
        return copy.deepcopy(reordered)

    def load_todos(self, todos: "Iterable[Todo]"):
        new_todos = copy.deepcopy(list(todos))
        used_ids = {str(todo.id) for todo in self._todos}
        for todo in new_todos:
            if str(todo.id) in used_ids:
                raise ValueError(f"Duplicate todo id! {todo.id}")
            used_ids.add(str(todo.id))

        self._todos.extend(new_todos)
