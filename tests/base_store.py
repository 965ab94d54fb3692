import unittest
from todolist.core.exceptions import TodoNotFoundException
from todolist.core.models import Todo
import uuid
import datetime as dt
from .base import BackendTestMixin


class BaseStoreTest(BackendTestMixin, unittest.TestCase):
    maxDiff = None

    def setUp(self):
        self.store = self._create_store()

    def test_create_todo(self):
        """ Tests creating todos. """

        todo = self.store.create_todo(description="Buy milk")
        self.assertIsInstance(todo.id, uuid.UUID)
        self.assertEqual(todo.description, "Buy milk")
        self.assertFalse(todo.completed)
        self.assertIsNotNone(todo.created_at.tzinfo)
        self.assertEqual(self.store.get_todos(), [todo])

        # Empty descriptions are accepted by the store
        empty = self.store.create_todo(description="")
        self.assertEqual(empty.description, "")
        self.assertEqual(len(self.store.get_todos()), 2)

    def test_create_todo_unique_ids(self):
        todos = [self.store.create_todo(description="todo %d" % i) for i in range(50)]
        self.assertEqual(len(set(self._ids(todos))), 50)
        self.assertEqual(len(set(self._ids(self.store.get_todos()))), 50)

    def test_create_todo_preserves_order(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")
        self.assertEqual(self.store.get_todos(), [a, b])

    def test_get_todo_by_id(self):
        todo = self.store.create_todo(description="Buy milk")

        self.assertEqual(self.store.get_todo_by_id(id=todo.id), todo)
        self.assertEqual(self.store.get_todo_by_id(id=str(todo.id)), todo)

        with self.assertRaises(TodoNotFoundException):
            self.store.get_todo_by_id(id=uuid.uuid4())

        with self.assertRaises(TodoNotFoundException):
            self.store.get_todo_by_id(id="not-an-id")

    def test_reads_return_copies(self):
        """ Mutating a returned todo doesn't change the stored one. """

        todo = self.store.create_todo(description="Buy milk")
        todo.description = "changed"
        todo.completed = True

        stored = self.store.get_todo_by_id(id=todo.id)
        self.assertEqual(stored.description, "Buy milk")
        self.assertFalse(stored.completed)

        self.store.get_todos()[0].description = "changed"
        self.store.search_todos(query="milk")[0].completed = True
        stored = self.store.get_todo_by_id(id=todo.id)
        self.assertEqual(stored.description, "Buy milk")
        self.assertFalse(stored.completed)

    def test_update_todo(self):
        todo = self.store.create_todo(description="Buy milk")
        other = self.store.create_todo(description="Clean house")

        updated = self.store.update_todo(
            id=todo.id, completed=True, description="Buy milk and eggs"
        )
        self.assertEqual(updated.id, todo.id)
        self.assertEqual(updated.created_at, todo.created_at)
        self.assertTrue(updated.completed)
        self.assertEqual(updated.description, "Buy milk and eggs")
        self.assertEqual(self.store.get_todo_by_id(id=todo.id), updated)
        self.assertEqual(self.store.get_todo_by_id(id=other.id), other)

        # Both fields are always replaced
        updated = self.store.update_todo(id=str(todo.id), completed=False, description="")
        self.assertFalse(updated.completed)
        self.assertEqual(updated.description, "")

    def test_update_todo_not_found(self):
        todo = self.store.create_todo(description="Buy milk")
        before = self.store.get_todos()

        with self.assertRaises(TodoNotFoundException) as context:
            self.store.update_todo(id=uuid.uuid4(), completed=True, description="x")

        self.assertIn("not found", str(context.exception))
        self.assertEqual(self.store.get_todos(), before)
        self.assertEqual(self.store.get_todo_by_id(id=todo.id), todo)

    def test_delete_todo(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")
        c = self.store.create_todo(description="C")

        self.store.delete_todo(id=b.id)
        self.assertEqual(self.store.get_todos(), [a, c])

        self.store.delete_todo(id=str(a.id))
        self.assertEqual(self.store.get_todos(), [c])

    def test_delete_todo_missing(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")

        self.store.delete_todo(id=uuid.uuid4())
        self.store.delete_todo(id=a.id)
        self.store.delete_todo(id=a.id)
        self.assertEqual(self.store.get_todos(), [b])

    def test_search_todos(self):
        milk = self.store.create_todo(description="buy milk")
        house = self.store.create_todo(description="Clean house")
        oat_milk = self.store.create_todo(description="Oat Milk for Bob")

        self.assertEqual(self.store.search_todos(query=""), self.store.get_todos())
        self.assertEqual(self.store.search_todos(query="MILK"), [milk, oat_milk])
        self.assertEqual(self.store.search_todos(query="house"), [house])
        self.assertEqual(self.store.search_todos(query="an h"), [house])
        self.assertEqual(self.store.search_todos(query="bread"), [])

    def test_search_todos_follows_current_order(self):
        a = self.store.create_todo(description="milk A")
        b = self.store.create_todo(description="milk B")

        self.store.reorder_todos(ids=[b.id, a.id])
        self.assertEqual(self.store.search_todos(query="milk"), [b, a])

    def test_reorder_todos(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")
        c = self.store.create_todo(description="C")

        result = self.store.reorder_todos(ids=[c.id, a.id, b.id])
        self.assertEqual(result, [c, a, b])
        self.assertEqual(self.store.get_todos(), [c, a, b])

        # String ids are accepted too
        result = self.store.reorder_todos(ids=[str(b.id), str(c.id), str(a.id)])
        self.assertEqual(result, [b, c, a])

    def test_reorder_todos_drops_missing_ids(self):
        """ Todos not named in the list are removed from the collection. """

        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")
        c = self.store.create_todo(description="C")

        result = self.store.reorder_todos(ids=[c.id, a.id])
        self.assertEqual(result, [c, a])
        self.assertEqual(self.store.get_todos(), [c, a])

        with self.assertRaises(TodoNotFoundException):
            self.store.get_todo_by_id(id=b.id)

    def test_reorder_todos_skips_unknown_ids(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")

        result = self.store.reorder_todos(ids=[uuid.uuid4(), b.id, "unknown", a.id])
        self.assertEqual(result, [b, a])

    def test_reorder_todos_duplicated_ids(self):
        a = self.store.create_todo(description="A")
        b = self.store.create_todo(description="B")

        result = self.store.reorder_todos(ids=[b.id, a.id, b.id])
        self.assertEqual(result, [b, a])

    def test_reorder_todos_empty(self):
        self.store.create_todo(description="A")
        self.store.create_todo(description="B")

        self.assertEqual(self.store.reorder_todos(ids=[]), [])
        self.assertEqual(self.store.get_todos(), [])

    def test_load_todos(self):
        existing = self.store.create_todo(description="A")
        loaded = Todo(
            id=uuid.UUID("e104b1c0-9a15-4ac1-b5fb-b273b91250d1"),
            description="Loaded",
            completed=True,
            created_at=dt.datetime(2021, 6, 26, 7, 2, tzinfo=dt.timezone.utc),
        )

        self.store.load_todos(todos=[loaded])
        self.assertEqual(self.store.get_todos(), [existing, loaded])

        with self.assertRaises(ValueError):
            self.store.load_todos(todos=[loaded])

        duplicate = Todo(
            id=uuid.UUID("54423877-370a-4936-b362-419cc86abbb8"),
            description="Duplicate",
            completed=False,
            created_at=dt.datetime(2021, 6, 26, 7, 2, tzinfo=dt.timezone.utc),
        )
        with self.assertRaises(ValueError):
            self.store.load_todos(todos=[duplicate, duplicate])

        # Nothing is loaded when the batch is rejected
        self.assertEqual(self.store.get_todos(), [existing, loaded])

    def test_full_scenario(self):
        first = self.store.create_todo(description="Buy milk")
        second = self.store.create_todo(description="Clean house")

        self.store.update_todo(
            id=first.id, completed=True, description="Buy milk and eggs"
        )

        results = self.store.search_todos(query="milk")
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].description, "Buy milk and eggs")
        self.assertTrue(results[0].completed)

        self.store.delete_todo(id=second.id)
        todos = self.store.get_todos()
        self.assertEqual(len(todos), 1)
        self.assertEqual(todos[0].id, first.id)
