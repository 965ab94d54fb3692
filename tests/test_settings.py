from todolist.settings import TodoListSettings
from todolist.backends.in_memory import InMemoryTodoStore, ThreadingStoreLock
from todolist.contrib.factory import create_todo_service
from todolist.core.store import LockedTodoStore
import unittest


class TodoListSettingsTest(unittest.TestCase):
    def test_defaults(self):
        settings = TodoListSettings(environ={})
        self.assertEqual(settings.HOST, "127.0.0.1")
        self.assertEqual(settings.PORT, 8080)
        self.assertFalse(settings.DEBUG)
        self.assertIsNone(settings.SEED_FILE)
        self.assertEqual(settings.SEED_TODOS, [])
        self.assertIs(settings.STORE_CLASS, InMemoryTodoStore)
        self.assertIs(settings.LOCK_CLASS, ThreadingStoreLock)

    def test_environ(self):
        settings = TodoListSettings(
            environ={
                "TODOLIST_PORT": "9000",
                "TODOLIST_DEBUG": "true",
                "TODOLIST_HOST": "0.0.0.0",
                "TODOLIST_SEED_TODOS": "Buy milk, Clean house,",
                "OTHER_PORT": "1",
            }
        )
        self.assertEqual(settings.PORT, 9000)
        self.assertTrue(settings.DEBUG)
        self.assertEqual(settings.HOST, "0.0.0.0")
        self.assertEqual(settings.SEED_TODOS, ["Buy milk", "Clean house"])

    def test_user_settings_override_environ(self):
        settings = TodoListSettings(
            user_settings={"PORT": 7000}, environ={"TODOLIST_PORT": "9000"}
        )
        self.assertEqual(settings.PORT, 7000)

    def test_invalid_setting(self):
        with self.assertRaises(AttributeError):
            TodoListSettings(user_settings={"UNKNOWN": 1}, environ={})

        settings = TodoListSettings(environ={})
        with self.assertRaises(AttributeError):
            settings.UNKNOWN

    def test_import_error(self):
        settings = TodoListSettings(
            user_settings={"STORE_CLASS": "todolist.backends.missing.Store"}, environ={}
        )
        with self.assertRaises(ImportError):
            settings.STORE_CLASS


class CreateTodoServiceTest(unittest.TestCase):
    def test_create_todo_service(self):
        settings = TodoListSettings(
            user_settings={"SEED_TODOS": ["Buy milk", "Clean house"]}, environ={}
        )
        service = create_todo_service(settings=settings)

        self.assertIsInstance(service.store, LockedTodoStore)
        self.assertIsInstance(service.store.store, InMemoryTodoStore)
        self.assertIsInstance(service.store.store_lock, ThreadingStoreLock)
        self.assertEqual(
            [todo.description for todo in service.get_todos()],
            ["Buy milk", "Clean house"],
        )
