import unittest

from lunch.domain.LookupFailure import FailureKind, LookupFailure
from lunch.logic.speech.composer import failure_message, render, render_failure
from lunch.utilities.config import PROVIDER_NAME


class TestRender(unittest.TestCase):

    def test_category_with_items_asks_for_more(self):
        rendered = render("Entrees", ["Mac and Cheese", "Roast Chicken"], "Tuesday October 7")
        self.assertEqual(
            rendered.speech,
            "<p>Entrees for Tuesday October 7</p> <p>Mac and Cheese</p> <p>Roast Chicken</p>"
            " <p>Want more menu items?</p>",
        )
        self.assertEqual(
            rendered.card_text,
            "Entrees for Tuesday October 7\nMac and Cheese\nRoast Chicken\nWant more menu items?",
        )
        self.assertTrue(rendered.wants_more)

    def test_dessert_is_last(self):
        rendered = render("Fruit and Dessert", ["Brownies"], "Tuesday October 7")
        self.assertFalse(rendered.wants_more)
        self.assertNotIn("Want more", rendered.speech)
        self.assertNotIn("Want more", rendered.card_text)

    def test_empty_category(self):
        rendered = render("Salads", [], "Tuesday October 7")
        self.assertIn("No salads are listed for Tuesday October 7.", rendered.card_text)

    def test_empty_entrees_use_no_entrees_wording(self):
        rendered = render("Entrees", [], "Tuesday October 7")
        self.assertIn("I could not find any entrees for Tuesday October 7.", rendered.speech)
        self.assertTrue(rendered.wants_more)

    def test_empty_entrees_are_logged(self):
        with self.assertLogs("lunch.logic.speech.composer", level="INFO") as logs:
            render("Entrees", [], "Tuesday October 7")
        self.assertIn("No entrees found for Tuesday October 7", logs.output[0])

    def test_markup_characters_are_escaped_in_speech(self):
        rendered = render("Deli", ["Ham <hot>"], "Tuesday October 7")
        self.assertIn("<p>Ham &lt;hot&gt;</p>", rendered.speech)
        self.assertIn("Ham <hot>", rendered.card_text)


class TestRenderFailure(unittest.TestCase):

    def test_each_kind_has_its_own_wording(self):
        messages = {failure_message(LookupFailure(kind, "Saturday October 11 2025")) for kind in FailureKind
                    if not kind.transient}
        self.assertEqual(len(messages), 4)

    def test_feed_problems_end_the_session(self):
        for kind in (FailureKind.FEED_UNAVAILABLE, FailureKind.FEED_MALFORMED):
            reply = render_failure(LookupFailure(kind))
            self.assertTrue(reply.should_end_session)
            self.assertIn(f"There is a problem connecting to {PROVIDER_NAME}", reply.speech)
            self.assertIn("try again later", reply.speech)

    def test_date_problems_ask_again(self):
        reply = render_failure(LookupFailure(FailureKind.NON_SERVICE_DAY, "Saturday October 11 2025"))
        self.assertFalse(reply.should_end_session)
        self.assertTrue(reply.speech.startswith("Food is not served on Saturday October 11 2025."))
        self.assertEqual(reply.reprompt, "Which day do you want?")

        reply = render_failure(LookupFailure(FailureKind.DATE_OUT_OF_CYCLE_RANGE, "Thursday January 1 2026"))
        self.assertIn("no menu information for Thursday January 1 2026", reply.speech)

        reply = render_failure(LookupFailure(FailureKind.DATE_UNPARSABLE))
        self.assertIn("say it again", reply.speech)
        self.assertFalse(reply.should_end_session)


if __name__ == '__main__':
    unittest.main()
