from datetime import date
import unittest

from lunch.domain.CategoryMenu import CategoryMenu
from lunch.domain.DialogSession import DialogSession, Stage
from lunch.infra.Session_Store import SessionStore, clear_dialog, load_dialog, save_dialog
from lunch.logic.dialog.disclosure import reveal_next, start_disclosure
from lunch.utilities.constants import CATEGORY_ORDER, DIALOG_SESSION_KEY


class TestDisclosure(unittest.TestCase):

    def setUp(self):
        self.menu = CategoryMenu({
            "Fruit and Dessert": ["Brownies"],
            "Entrees": ["Mac and Cheese"],
            "Soups": ["Chili"],
            "Deli": ["Turkey Club"],
        })
        self.target = date(2025, 10, 7)

    def test_fresh_lookup_reveals_entrees(self):
        dialog, reveal = start_disclosure(self.menu, self.target)
        self.assertEqual(reveal.category, "Entrees")
        self.assertEqual(reveal.items, ("Mac and Cheese",))
        self.assertEqual(dialog.stage, Stage.ENTREES)
        self.assertEqual(dialog.target_month, "October")
        self.assertEqual(dialog.target_date_label, "Tuesday October 7")

    def test_categories_are_visited_in_order(self):
        dialog, first = start_disclosure(self.menu, self.target)
        seen = [first.category]
        for _ in range(4):
            seen.append(reveal_next(dialog).category)
        self.assertEqual(seen, list(CATEGORY_ORDER))
        self.assertTrue(dialog.is_done)
        self.assertIsNone(reveal_next(dialog))
        self.assertEqual(dialog.stage, Stage.DESSERT)

    def test_only_the_last_reveal_finishes(self):
        dialog, first = start_disclosure(self.menu, self.target)
        finished = [first.finished] + [reveal_next(dialog).finished for _ in range(4)]
        self.assertEqual(finished, [False, False, False, False, True])

    def test_missing_category_is_an_empty_reveal(self):
        dialog, _ = start_disclosure(self.menu, self.target)
        reveal_next(dialog)
        salads = reveal_next(dialog)
        self.assertEqual(salads.category, "Salads")
        self.assertEqual(salads.items, ())
        self.assertEqual(dialog.stage, Stage.SALADS)

    def test_empty_entrees_still_advance(self):
        dialog, reveal = start_disclosure(CategoryMenu({"Soups": ["Chili"]}), self.target)
        self.assertEqual(reveal.items, ())
        self.assertEqual(dialog.stage, Stage.ENTREES)
        self.assertEqual(reveal_next(dialog).category, "Soups")

    def test_no_dialog_means_nothing_to_continue(self):
        self.assertIsNone(reveal_next(None))
        self.assertIsNone(reveal_next(DialogSession()))

    def test_menu_is_not_rewritten_by_pagination(self):
        dialog, _ = start_disclosure(self.menu, self.target)
        before = dialog.category_menu.to_dict()
        while reveal_next(dialog) is not None:
            pass
        self.assertEqual(dialog.category_menu.to_dict(), before)

    def test_finished_dialog_cannot_advance(self):
        dialog = DialogSession(stage=Stage.DESSERT)
        with self.assertRaises(ValueError):
            dialog.advance()


class TestSessionStore(unittest.TestCase):

    def test_dialog_survives_a_round_trip_through_attributes(self):
        dialog, _ = start_disclosure(CategoryMenu({"Entrees": ["Tacos"]}), date(2025, 10, 7))
        store = SessionStore()
        save_dialog(store, dialog)
        # what the platform sends back on the next turn
        restored = load_dialog(SessionStore(store.to_dict()))
        self.assertEqual(restored.stage, Stage.ENTREES)
        self.assertEqual(restored.category_menu, dialog.category_menu)
        self.assertEqual(restored.target_date_label, "Tuesday October 7")

    def test_unreadable_state_is_ignored(self):
        store = SessionStore({DIALOG_SESSION_KEY: {"stage": "soon"}})
        self.assertIsNone(load_dialog(store))
        self.assertIsNone(load_dialog(SessionStore()))

    def test_clear_dialog_keeps_other_attributes(self):
        store = SessionStore({DIALOG_SESSION_KEY: {"stage": 2}, "other": 1})
        clear_dialog(store)
        self.assertEqual(store.to_dict(), {"other": 1})


if __name__ == '__main__':
    unittest.main()
