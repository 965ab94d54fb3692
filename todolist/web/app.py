from flask import Flask
from todolist.core.service import TodoService
from todolist.contrib.factory import create_todo_service
from todolist.settings import TodoListSettings
from typing import Optional
from .views import bp


def create_app(
    service: "Optional[TodoService]" = None,
    settings: "Optional[TodoListSettings]" = None,
) -> "Flask":
    """Application factory.

    Args:
        service (Optional[TodoService]): Service shared by every request. When omitted it's built from the settings.
        settings (Optional[TodoListSettings]): Application settings. Defaults to the environment's settings.
    """
    if settings is None:
        settings = TodoListSettings()
    if service is None:
        service = create_todo_service(settings=settings)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.extensions["todolist"] = service

    app.register_blueprint(bp)
    return app
