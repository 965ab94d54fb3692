from typing import Dict, Any, Mapping, Optional
from todolist.core.utils import parse_bool
import importlib
import copy
import os

DEFAULTS: "Dict[str, Any]" = {
    "HOST": "127.0.0.1",
    "PORT": 8080,
    "DEBUG": False,
    "LOG_LEVEL": "INFO",
    "SEED_FILE": None,
    "SEED_TODOS": [],
    "STORE_CLASS": "todolist.backends.in_memory.InMemoryTodoStore",
    "LOCK_CLASS": "todolist.backends.in_memory.ThreadingStoreLock",
}

IMPORT_STRINGS = [
    "STORE_CLASS",
    "LOCK_CLASS",
]

ENVIRON_PREFIX = "TODOLIST_"


def perform_import(val, setting_name):
    """
    If the given setting is a string import notation,
    then perform the necessary import.
    """
    if val is None:
        return None
    elif isinstance(val, str):
        return import_from_string(val, setting_name)
    return val


def import_from_string(val, setting_name):
    """
    Attempt to import a class from a string representation.
    """
    try:
        module_path, class_name = val.rsplit(".", 1)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)
    except (ImportError, AttributeError, ValueError) as e:
        msg = "Could not import '%s' for setting '%s'. %s: %s." % (
            val,
            setting_name,
            e.__class__.__name__,
            e,
        )
        raise ImportError(msg)


def coerce_environ_value(raw: "str", default: "Any") -> "Any":
    """Converts a value read from the environment to the type of the setting's default."""
    if isinstance(default, bool):
        return parse_bool(raw)
    elif isinstance(default, int):
        return int(raw)
    elif isinstance(default, list):
        return [value.strip() for value in raw.split(",") if value.strip()]
    return raw


def read_environ(
    environ: "Mapping[str, str]", defaults: "Dict[str, Any]" = DEFAULTS
) -> "Dict[str, Any]":
    """Collects the TODOLIST_<NAME> variables that correspond to known settings."""
    values = {}
    for attr, default in defaults.items():
        key = ENVIRON_PREFIX + attr
        if key in environ:
            values[attr] = coerce_environ_value(environ[key], default)
    return values


class TodoListSettings:
    """
    A settings object that allows the application settings to be accessed as
    properties. For example:

        from todolist.settings import TodoListSettings
        settings = TodoListSettings(user_settings={"PORT": 9000})
        print(settings.PORT)

    Values given in user_settings take precedence over TODOLIST_<NAME>
    environment variables, which take precedence over the defaults.
    """

    def __init__(
        self,
        user_settings: "Optional[Dict[str, Any]]" = None,
        environ: "Optional[Mapping[str, str]]" = None,
        defaults=DEFAULTS,
        import_strings=IMPORT_STRINGS,
    ):
        self.defaults = defaults
        self.import_strings = import_strings
        self._user_settings = read_environ(
            os.environ if environ is None else environ, defaults=defaults
        )
        self._user_settings.update(user_settings or {})

        for attr in self._user_settings:
            if attr not in self.defaults:
                raise AttributeError("Invalid setting: '%s'" % attr)

    def __getattr__(self, attr):
        if attr.startswith("_") or attr not in self.defaults:
            raise AttributeError("Invalid setting: '%s'" % attr)

        try:
            val = self._user_settings[attr]
        except KeyError:
            val = copy.deepcopy(self.defaults[attr])

        # Coerce import strings into classes
        if attr in self.import_strings:
            val = perform_import(val, attr)

        # Cache the result
        setattr(self, attr, val)
        return val
