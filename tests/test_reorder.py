import unittest
from types import SimpleNamespace

from services.reorder import apply_display_order, move_item, to_display_order


class TestMoveItem(unittest.TestCase):
    def test_first_to_last(self):
        items = ["a", "b", "c", "d"]
        self.assertEqual(move_item(items, 0, len(items) - 1), items[1:] + items[:1])

    def test_last_to_first(self):
        self.assertEqual(move_item(["a", "b", "c"], 2, 0), ["c", "a", "b"])

    def test_same_position_is_a_copy(self):
        items = ["a", "b"]
        out = move_item(items, 1, 1)
        self.assertEqual(out, items)
        self.assertIsNot(out, items)

    def test_input_not_mutated(self):
        items = ["a", "b", "c"]
        move_item(items, 0, 2)
        self.assertEqual(items, ["a", "b", "c"])

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            move_item(["a", "b"], 2, 0)
        with self.assertRaises(IndexError):
            move_item(["a", "b"], 0, -1)
        with self.assertRaises(IndexError):
            move_item([], 0, 0)


class TestDisplayOrder(unittest.TestCase):
    def test_numbered_from_one(self):
        self.assertEqual(
            to_display_order([7, 3, 5]),
            [{"id": 7, "display_order": 1}, {"id": 3, "display_order": 2}, {"id": 5, "display_order": 3}],
        )

    def test_apply_ignores_unknown_ids(self):
        rows = [SimpleNamespace(id=1, display_order=1), SimpleNamespace(id=2, display_order=2)]
        updated = apply_display_order(rows, [{"id": 2, "display_order": 1}, {"id": 99, "display_order": 2}])
        self.assertEqual(updated, 1)
        self.assertEqual(rows[1].display_order, 1)
        self.assertEqual(rows[0].display_order, 1)

    def test_drag_then_persist(self):
        rows = [SimpleNamespace(id=i, display_order=i) for i in (1, 2, 3)]
        order = move_item([r.id for r in rows], 2, 0)
        apply_display_order(rows, to_display_order(order))
        self.assertEqual([r.id for r in sorted(rows, key=lambda r: r.display_order)], [3, 1, 2])


if __name__ == "__main__":
    unittest.main()
