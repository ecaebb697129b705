"""HTTP handlers exposing word suggestion and layout building."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from flask import Flask, jsonify, request

from ..core.exceptions import BudgetExhaustedError, SearchExhaustedError, WordListError
from ..data.dictionary import WordDictionary
from ..data.suggest import suggest_words
from ..engine.generator import BuilderConfig, build_board_from_text
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# A 20-word build can take minutes; requests give up well before that.
DEFAULT_TIME_BUDGET_SECONDS = 20.0


def serving_config(builder_config: Optional[BuilderConfig] = None) -> BuilderConfig:
    """Return ``builder_config`` with a time budget filled in when it has none."""

    config = builder_config or BuilderConfig()
    if config.time_budget_seconds is None:
        config = replace(config, time_budget_seconds=DEFAULT_TIME_BUDGET_SECONDS)
    return config


def create_app(
    dictionary: WordDictionary, builder_config: Optional[BuilderConfig] = None
) -> Flask:
    """Create the Flask app; every build request gets its own builder."""

    app = Flask(__name__)
    config = serving_config(builder_config)
    app.config["BUILDER_CONFIG"] = config

    @app.route("/genwords", methods=["GET", "POST"])
    def gen_words():
        letters = (request.values.get("letters") or "").strip()
        if not letters:
            return "missing letters", 400
        return jsonify(suggest_words(letters, dictionary))

    @app.route("/buildcross", methods=["GET", "POST"])
    def build_cross():
        words = request.values.get("words") or ""
        if not words.strip():
            return "missing words", 400
        try:
            board = build_board_from_text(words, config=config)
        except WordListError as exc:
            return str(exc), 400
        except BudgetExhaustedError as exc:
            LOGGER.warning("Build request gave up: %s", exc)
            return str(exc), 503
        except SearchExhaustedError as exc:
            LOGGER.warning("Build request failed: %s", exc)
            return str(exc), 500
        return jsonify(board.to_jsonable())

    return app
