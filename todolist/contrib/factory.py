from todolist.core.service import TodoService
from todolist.core.store import LockedTodoStore
from todolist.settings import TodoListSettings
from typing import Optional


def create_todo_service(settings: "Optional[TodoListSettings]" = None) -> "TodoService":
    """Builds the service used by the application from the given settings.

    The configured store is wrapped in a LockedTodoStore so it can be shared by
    concurrent requests, then seeded from SEED_FILE and SEED_TODOS.

    Args:
        settings (Optional[TodoListSettings]): Settings to use. Defaults to the environment's settings.
    """
    if settings is None:
        settings = TodoListSettings()

    store = LockedTodoStore(
        store=settings.STORE_CLASS(), store_lock=settings.LOCK_CLASS()
    )
    service = TodoService(store=store)

    if settings.SEED_FILE:
        service.load_from_file(settings.SEED_FILE)

    if settings.SEED_TODOS:
        service.seed_todos(settings.SEED_TODOS)

    return service
