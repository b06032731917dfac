"""Dictionary compilation into searchable word indices."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import (AbstractSet, Callable, Dict, FrozenSet, Iterable, Iterator, List,
                    Optional, Sequence, Set, Tuple)

from ..core.exceptions import ConwordsError
from ..utils.logger import get_logger
from .normalization import is_placeable, normalize_letter, normalize_word


LOGGER = get_logger(__name__)

ProgressCallback = Callable[[int], None]
Constraint = Tuple[int, str]

_NO_IDS: FrozenSet[int] = frozenset()


@dataclass(frozen=True)
class CrossReference:
    """Words and phrases that shared a dictionary entry with a word."""

    words: FrozenSet[int] = _NO_IDS
    phrases: FrozenSet[int] = _NO_IDS


@dataclass(frozen=True)
class CompiledDictionary:
    """Read-only lookup indices shared by every grid of a run."""

    words: Tuple[str, ...] = ()
    phrases: Tuple[str, ...] = ()
    length_buckets: Dict[int, Tuple[int, ...]] = field(default_factory=dict)
    letter_index: Dict[Constraint, FrozenSet[int]] = field(default_factory=dict)
    cross_refs: Dict[int, CrossReference] = field(default_factory=dict)

    @property
    def max_length(self) -> int:
        return max(self.length_buckets, default=0)

    @property
    def bucket_count(self) -> int:
        """Number of length slots, i.e. the longest word length plus one."""
        return self.max_length + 1 if self.length_buckets else 0

    def bucket(self, length: int) -> Tuple[int, ...]:
        return self.length_buckets.get(length, ())

    def candidates(
        self,
        length: int,
        constraints: Iterable[Constraint] = (),
        exclude: Sequence[AbstractSet[int]] = (),
    ) -> List[int]:
        """Return word ids of ``length`` matching every ``(position, letter)`` constraint.

        Ids contained in any of the ``exclude`` sets are skipped. The result
        keeps the ascending id order of the length bucket so random picks over
        it are reproducible.
        """

        bucket = self.bucket(length)
        if not bucket:
            return []

        matches: List[FrozenSet[int]] = []
        for position, letter in constraints:
            ids = self.letter_index.get((position, normalize_letter(letter)))
            if ids is None:
                return []
            matches.append(ids)

        allowed: Optional[Set[int]] = None
        if matches:
            # Intersect smallest sets first for speed
            matches.sort(key=len)
            allowed = set(matches[0])
            for ids in matches[1:]:
                allowed &= ids
                if not allowed:
                    return []

        return [
            word_id
            for word_id in bucket
            if (allowed is None or word_id in allowed)
            and not any(word_id in excluded for excluded in exclude)
        ]

    def clue_options(self, word_id: int) -> List[str]:
        """Related words first, then related phrases, each in id order."""

        reference = self.cross_refs.get(word_id)
        if reference is None:
            return []
        options = [self.words[idx] for idx in sorted(reference.words) if idx != word_id]
        options.extend(self.phrases[idx] for idx in sorted(reference.phrases))
        return options


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class DictionaryCompiler:
    """Groups entries into words and phrases and indexes words by length and letter.

    Each dictionary is a sequence of entries and each entry an ordered
    sequence of synonymous strings, conventionally the headword first. Strings
    that fit in a grid become ``words``; every other string is kept as a
    ``phrase`` usable only as a clue.

    :meth:`steps` performs the compilation incrementally and yields the
    processed percentage each time it changes, handing control back to the
    caller between steps. :meth:`compile` drives it to completion.
    """

    def __init__(self, dictionaries: Iterable[Iterable[Sequence[str]]]) -> None:
        self.entries: List[Sequence[str]] = [
            entry for dictionary in dictionaries for entry in dictionary
        ]
        self.result: Optional[CompiledDictionary] = None
        self._reset()

    def _reset(self) -> None:
        self._words: List[str] = []
        self._word_ids: Dict[str, int] = {}
        self._phrases: List[str] = []
        self._phrase_ids: Dict[str, int] = {}
        self._related: Dict[int, Tuple[Set[int], Set[int]]] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def steps(self) -> Iterator[int]:
        self._reset()
        self.result = None
        total = len(self.entries)
        reported = 0
        for index, entry in enumerate(self.entries):
            percent = _round_half_up(index / total * 100)
            if percent != reported:
                reported = percent
                yield percent
            self._group_entry(entry)

        self.result = self._build_indices()
        LOGGER.debug(
            "Compiled %s words and %s phrases from %s entries",
            len(self._words),
            len(self._phrases),
            total,
        )
        if total and reported != 100:
            yield 100

    def compile(self, on_progress: Optional[ProgressCallback] = None) -> CompiledDictionary:
        for percent in self.steps():
            if on_progress is not None:
                on_progress(percent)
        if self.result is None:
            raise ConwordsError("Dictionary compilation did not complete")
        return self.result

    # ------------------------------------------------------------------
    # Grouping & indexing
    # ------------------------------------------------------------------
    def _group_entry(self, entry: Sequence[str]) -> None:
        entry_words: List[Tuple[str, int]] = []
        entry_phrases: List[int] = []
        for item in entry:
            # Single characters are never useful, neither as word nor as clue
            if len(item) <= 1:
                continue
            if is_placeable(item):
                entry_words.append((item, self._intern(item, self._words, self._word_ids)))
            else:
                entry_phrases.append(self._intern(item, self._phrases, self._phrase_ids))

        if not entry_words or len(entry_words) + len(entry_phrases) <= 1:
            return

        for word, word_id in entry_words:
            related_words, related_phrases = self._related.setdefault(word_id, (set(), set()))
            related_words.update(other_id for other, other_id in entry_words if other != word)
            related_phrases.update(entry_phrases)

    @staticmethod
    def _intern(item: str, items: List[str], ids: Dict[str, int]) -> int:
        index = ids.get(item)
        if index is None:
            index = len(items)
            items.append(item)
            ids[item] = index
        return index

    def _build_indices(self) -> CompiledDictionary:
        buckets: Dict[int, List[int]] = defaultdict(list)
        letters: Dict[Constraint, Set[int]] = defaultdict(set)
        for word_id, word in enumerate(self._words):
            buckets[len(word)].append(word_id)
            # Grid cells hold unaccented letters, so index them the same way
            for position, char in enumerate(normalize_word(word)):
                letters[(position, char)].add(word_id)

        return CompiledDictionary(
            words=tuple(self._words),
            phrases=tuple(self._phrases),
            length_buckets={length: tuple(ids) for length, ids in buckets.items()},
            letter_index={key: frozenset(ids) for key, ids in letters.items()},
            cross_refs={
                word_id: CrossReference(frozenset(words), frozenset(phrases))
                for word_id, (words, phrases) in self._related.items()
            },
        )


def compile_dictionaries(
    dictionaries: Iterable[Iterable[Sequence[str]]],
    on_progress: Optional[ProgressCallback] = None,
) -> CompiledDictionary:
    """Compile ``dictionaries`` into a :class:`CompiledDictionary`.

    ``on_progress`` receives the processed percentage (0-100) whenever it
    changes. Empty input yields empty indices.
    """

    return DictionaryCompiler(dictionaries).compile(on_progress)
