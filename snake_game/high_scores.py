"""
Top-10 high-score list and the small key-value file it is kept in.

The store mirrors a browser's localStorage: string keys mapped to string
values, all held in one JSON object on disk. The high-score list is saved
under a single key as a JSON array of integers.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from .constants import HIGH_SCORES_KEY, MAX_HIGH_SCORES, SCORES_FILE_ENV

logger = logging.getLogger(__name__)


def default_scores_path():
    """Return the scores file from the environment, else one under the home directory."""
    override = os.environ.get(SCORES_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".snake_game" / "high_scores.json"


class JsonFileStore:
    """String key-value store persisted as a JSON object in a single file."""

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self):
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No store file at %s yet", self.path)
            return {}
        except (UnicodeDecodeError, IsADirectoryError):
            logger.warning("Ignoring unreadable store file %s", self.path)
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable store file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key):
        """Return the string stored under key, or None."""
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            logger.warning("Ignoring non-string value for %r in %s", key, self.path)
            return None
        return value

    def set(self, key, value):
        """Replace the value stored under key."""
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Readers only ever see a complete file.
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise


def _is_score(value):
    return isinstance(value, int) and not isinstance(value, bool)


def load_high_scores(store):
    """Return the saved high scores, or an empty list if there are none or they are garbled."""
    raw = store.get(HIGH_SCORES_KEY)
    if raw is None:
        return []
    try:
        scores = json.loads(raw)
    except ValueError:
        logger.warning("Discarding malformed high scores: %r", raw)
        return []
    if not isinstance(scores, list) or not all(_is_score(s) for s in scores):
        logger.warning("Discarding malformed high scores: %r", raw)
        return []
    return sorted(scores, reverse=True)[:MAX_HIGH_SCORES]


def save_high_scores(store, scores):
    store.set(HIGH_SCORES_KEY, json.dumps(scores))


def add_score(store, score):
    """Record score, keeping only the best MAX_HIGH_SCORES, and return the new list."""
    scores = load_high_scores(store)
    scores.append(score)
    # highest first
    scores = sorted(scores, reverse=True)[:MAX_HIGH_SCORES]
    save_high_scores(store, scores)
    return scores
