import unittest

from wordcross.data.dictionary import WordDictionary
from wordcross.engine.generator import BuilderConfig
from wordcross.io.server import DEFAULT_TIME_BUDGET_SECONDS, create_app, serving_config


class ServerTests(unittest.TestCase):
    def setUp(self) -> None:
        dictionary = WordDictionary.from_words(["host", "shot", "ghost", "tosh", "mint"])
        self.app = create_app(dictionary, builder_config=BuilderConfig(seed=1, max_attempts=500))
        self.client = self.app.test_client()

    def test_build_cross_returns_board(self) -> None:
        response = self.client.post("/buildcross", data={"words": "host, ghost, shot"})
        self.assertEqual(response.status_code, 200)
        payload = response.get_json()
        self.assertEqual(sorted(entry["w"] for entry in payload["words"]), ["GHOST", "HOST", "SHOT"])
        self.assertLessEqual(payload["width"], 18)
        self.assertLessEqual(payload["height"], 16)

    def test_build_cross_accepts_query_string(self) -> None:
        response = self.client.get("/buildcross", query_string={"words": "host,ghost,shot"})
        self.assertEqual(response.status_code, 200)

    def test_build_cross_missing_words(self) -> None:
        response = self.client.post("/buildcross")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_data(as_text=True), "missing words")

    def test_build_cross_rejects_bad_word_list(self) -> None:
        response = self.client.post("/buildcross", data={"words": "host,ghost"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("need at least 3 words", response.get_data(as_text=True))

    def test_build_cross_reports_exhaustion(self) -> None:
        words = "ABCDEFGHIJKLMNOPQRST,BCDEFGHIJKLMNOPQRSTU,CDEFGHIJKLMNOPQRSTUV"
        response = self.client.post("/buildcross", data={"words": words})
        self.assertEqual(response.status_code, 500)

    def test_build_cross_reports_budget_separately(self) -> None:
        dictionary = WordDictionary.from_words(["host"])
        app = create_app(dictionary, builder_config=BuilderConfig(seed=1, max_attempts=5))
        words = "ABCDEFGHIJKLMNOPQRST,BCDEFGHIJKLMNOPQRSTU,CDEFGHIJKLMNOPQRSTUV"
        response = app.test_client().post("/buildcross", data={"words": words})
        self.assertEqual(response.status_code, 503)
        self.assertIn("Attempt budget of 5 exhausted", response.get_data(as_text=True))

    def test_requests_get_a_default_time_budget(self) -> None:
        app = create_app(WordDictionary.from_words(["host"]))
        config = app.config["BUILDER_CONFIG"]
        self.assertEqual(config.time_budget_seconds, DEFAULT_TIME_BUDGET_SECONDS)
        self.assertEqual(config.max_width, 18)

    def test_explicit_time_budget_is_kept(self) -> None:
        config = serving_config(BuilderConfig(seed=3, time_budget_seconds=2.5))
        self.assertEqual(config.time_budget_seconds, 2.5)
        self.assertEqual(config.seed, 3)

    def test_gen_words(self) -> None:
        response = self.client.get("/genwords", query_string={"letters": "GHOST"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), ["ghost", "host", "shot", "tosh"])

    def test_gen_words_missing_letters(self) -> None:
        response = self.client.post("/genwords", data={"letters": "  "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_data(as_text=True), "missing letters")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
