from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from todolist.core.exceptions import TodoNotFoundException, TodoValidationException
from todolist.core.service import TodoService
from todolist.core.serializer import TodoSerializer
from todolist.core.utils import parse_bool
from .htmx import is_htmx_request, wants_json
from typing import Dict, List, Any
import logging

logger = logging.getLogger(__name__)

bp = Blueprint("todos", __name__)
serializer = TodoSerializer()


def get_service() -> "TodoService":
    return current_app.extensions["todolist"]


def _get_payload() -> "Dict[str, Any]":
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form


def _get_ids() -> "List[str]":
    if request.is_json:
        return [str(id) for id in _get_payload().get("ids", [])]
    return request.form.getlist("id")


def _render_list(todos, status=200, sortable=True):
    if wants_json(request):
        return jsonify([serializer.serialize(todo) for todo in todos]), status
    return (
        render_template("_todo_list.html", todos=todos, sortable=sortable),
        status,
    )


def _render_item(todo, status=200):
    if wants_json(request):
        return jsonify(serializer.serialize(todo)), status
    return render_template("_todo_item.html", todo=todo), status


@bp.route("/", methods=["GET"])
def index():
    search = request.args.get("search", "")
    todos = get_service().search_todos(search)
    return render_template(
        "index.html", todos=todos, search=search, sortable=not search
    )


@bp.route("/todos", methods=["GET"])
def list_todos():
    search = request.args.get("search", "")
    todos = get_service().search_todos(search)
    if wants_json(request) or is_htmx_request(request):
        # reordering a filtered list would drop the hidden todos
        return _render_list(todos, sortable=not search)
    return render_template(
        "index.html", todos=todos, search=search, sortable=not search
    )


@bp.route("/todos", methods=["POST"])
def create_todo():
    todo = get_service().create_todo(_get_payload().get("description"))
    if wants_json(request) or is_htmx_request(request):
        return _render_item(todo, status=201)
    return redirect(url_for("todos.index"))


@bp.route("/todos/sort", methods=["POST"])
def sort_todos():
    todos = get_service().reorder_todos(_get_ids())
    return _render_list(todos)


@bp.route("/todos/<todo_id>", methods=["GET"])
def get_todo(todo_id):
    todo = get_service().get_todo_by_id(todo_id)
    return _render_item(todo)


@bp.route("/todos/<todo_id>/edit", methods=["GET"])
def edit_todo(todo_id):
    todo = get_service().get_todo_by_id(todo_id)
    return render_template("_todo_edit.html", todo=todo)


@bp.route("/todos/<todo_id>", methods=["PUT", "POST"])
def update_todo(todo_id):
    payload = _get_payload()
    todo = get_service().update_todo(
        todo_id,
        completed=parse_bool(payload.get("completed")),
        description=payload.get("description"),
    )
    if request.method == "POST" and not (
        wants_json(request) or is_htmx_request(request)
    ):
        return redirect(url_for("todos.index"))
    return _render_item(todo)


@bp.route("/todos/<todo_id>", methods=["DELETE"])
def delete_todo(todo_id):
    get_service().delete_todo(todo_id)
    if wants_json(request):
        return "", 204
    # htmx swaps the deleted row with the empty body
    return "", 200


@bp.app_errorhandler(TodoNotFoundException)
def handle_not_found(error: "TodoNotFoundException"):
    logger.warning("%s %s: %s", request.method, request.path, error)
    if wants_json(request):
        return jsonify({"error": str(error)}), 404
    return render_template("_error.html", message=str(error)), 404


@bp.app_errorhandler(TodoValidationException)
def handle_validation_error(error: "TodoValidationException"):
    logger.info("%s %s: %s", request.method, request.path, error)
    if wants_json(request):
        return jsonify({"error": error.message, "field": error.field}), 400
    return render_template("_error.html", message=error.message), 400
