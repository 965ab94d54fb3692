from .store import InMemoryTodoStore
from .utils import ThreadingStoreLock
