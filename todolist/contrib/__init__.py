from .factory import create_todo_service
