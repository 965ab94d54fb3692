import os


def pytest_configure(config):
    # Settings tests must not pick up values from the developer's shell
    for key in list(os.environ):
        if key.startswith("TODOLIST_"):
            del os.environ[key]
