"""
JSON dataset loader.

Loads the vocabulary list and the conjugation table once, before any round
starts. Every failure here is soft: the caller gets an empty collection and
the problem is logged. Sessions treat an empty collection as "not ready".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from core.config import Settings, settings as default_settings
from core.errors import MalformedEntryError
from core.schemas import ConjugationEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """
    Read-only data shared by reference with every session.
    """
    words: tuple[str, ...] = field(default_factory=tuple)
    conjugations: tuple[ConjugationEntry, ...] = field(default_factory=tuple)

    @property
    def is_ready(self) -> bool:
        return bool(self.words) and bool(self.conjugations)


def _read_json(path: Path) -> Optional[Any]:
    """
    Read and decode a JSON file.

    Returns:
        Decoded document, or None if the file could not be read or parsed
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        logger.error("Dataset file not found: %s", path)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to load %s: %s", path, exc)
    return None


def load_words(path: Path | str) -> tuple[str, ...]:
    """
    Load the vocabulary list (a flat JSON array of strings).

    Non-string or blank items are skipped with a warning.
    """
    document = _read_json(Path(path))
    if document is None:
        return ()
    if not isinstance(document, list):
        logger.error("Expected a JSON array in %s, got %s", path, type(document).__name__)
        return ()

    words: list[str] = []
    for idx, item in enumerate(document):
        if not isinstance(item, str) or not item.strip():
            logger.warning("Skipping word #%d in %s: %r", idx, path, item)
            continue
        words.append(item.strip())

    logger.info("Loaded %d words from %s", len(words), path)
    return tuple(words)


def parse_conjugation(raw: Any) -> ConjugationEntry:
    """
    Validate one raw conjugation record.

    Raises:
        MalformedEntryError: if the record has the wrong shape or its grid
            is not rectangular
    """
    try:
        entry = ConjugationEntry.model_validate(raw)
    except ValidationError as exc:
        verb = raw.get("verb", "?") if isinstance(raw, dict) else "?"
        raise MalformedEntryError(str(verb), f"{exc.error_count()} validation error(s)") from exc

    entry.validate_grid()
    return entry


def load_conjugations(path: Path | str) -> tuple[ConjugationEntry, ...]:
    """
    Load the conjugation table (a JSON array of {verb, answers} objects).

    Malformed entries are reported one by one and left out; the rest of the
    table still loads.
    """
    document = _read_json(Path(path))
    if document is None:
        return ()
    if not isinstance(document, list):
        logger.error("Expected a JSON array in %s, got %s", path, type(document).__name__)
        return ()

    entries: list[ConjugationEntry] = []
    for idx, raw in enumerate(document):
        try:
            entries.append(parse_conjugation(raw))
        except MalformedEntryError as exc:
            logger.error("Skipping conjugation #%d in %s: %s", idx, path, exc)

    logger.info("Loaded %d conjugation entries from %s", len(entries), path)
    return tuple(entries)


def load_dataset(config: Settings = default_settings) -> Dataset:
    """Load both datasets using the configured paths."""
    return Dataset(
        words=load_words(config.words_path),
        conjugations=load_conjugations(config.conjugations_path),
    )
