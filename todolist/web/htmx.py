from flask import Request


def is_htmx_request(request: "Request") -> "bool":
    """Requests issued by htmx carry the HX-Request header."""
    return request.headers.get("HX-Request", "").lower() == "true"


def wants_json(request: "Request") -> "bool":
    """True when the client prefers JSON over HTML. Browsers and htmx get HTML."""
    best = request.accept_mimetypes.best_match(["text/html", "application/json"])
    return best == "application/json"
