"""JSON dictionary file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Entry = List[str]


def load_dictionary(path: Path | str) -> List[Entry]:
    """Read a dictionary file: a JSON array of entries, each an array of strings.

    The first string of an entry is conventionally the headword and the rest
    its synonyms or descriptions.
    """

    source = Path(path)
    if not source.exists():
        raise DictionaryLoadError(f"Missing dictionary file: {source}")

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DictionaryLoadError(f"Unreadable dictionary {source}: {exc}") from exc

    if not isinstance(data, list):
        raise DictionaryLoadError(f"Dictionary {source} must be a JSON array of entries")

    entries: List[Entry] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, list) or not all(isinstance(item, str) for item in entry):
            raise DictionaryLoadError(
                f"Entry {position} of {source} must be an array of strings"
            )
        entries.append(list(entry))

    LOGGER.info("Loaded %s entries from %s", len(entries), source)
    return entries


def load_dictionaries(paths: Iterable[Path | str]) -> List[List[Entry]]:
    return [load_dictionary(path) for path in paths]
