"""NLP capability used by the GEO extractor.

The scoring rules only see the ``TextAnalyzer`` protocol, so tests can
swap in a deterministic fake. ``NltkTextAnalyzer`` is the production
implementation:
  - readability: textstat Flesch Reading Ease + Flesch-Kincaid grade
  - sentences:   untrained Punkt tokenizer (no corpus download needed)
  - terms:       regexp tokenizer, lower-cased
  - entities:    nltk pos_tag + ne_chunk

nltk data (cmudict for syllables, tagger/chunker for entities) is
fetched once at startup and lazily otherwise, see ``ensure_resources``.
"""

from __future__ import annotations

import contextlib
import logging
import threading
import time
from collections import Counter
from typing import Protocol

import nltk
import textstat
from nltk.tokenize import RegexpTokenizer, TreebankWordTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer

from seo_checker.analysis.patterns import TERM_PATTERN
from seo_checker.analysis.types import EntityCounts, Readability
from seo_checker.core.config import settings
from seo_checker.core.exceptions import ReadabilityError

logger = logging.getLogger(__name__)

# (resource path for nltk.data.find, package name for nltk.download) per capability
NLTK_RESOURCES: dict[str, list[tuple[str, str]]] = {
    "readability": [("corpora/cmudict", "cmudict")],
    "entities": [
        ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
        ("chunkers/maxent_ne_chunker_tab", "maxent_ne_chunker_tab"),
        ("corpora/words", "words"),
    ],
}

# ne_chunk labels → entity bucket
_PEOPLE_LABELS = {"PERSON"}
_PLACE_LABELS = {"GPE", "GSP", "LOCATION", "FACILITY"}
_ORGANIZATION_LABELS = {"ORGANIZATION"}

_QUESTION_TRAILERS = " \t\"'”’)]"

# capability -> (available, monotonic time of the last check)
_resource_state: dict[str, tuple[bool, float]] = {}
_resource_lock = threading.Lock()


class TextAnalyzer(Protocol):
    def readability(self, text: str) -> Readability: ...

    def entities(self, text: str) -> EntityCounts: ...

    def count_questions(self, text: str) -> int: ...

    def terms(self, text: str) -> list[str]: ...


def _missing_resources(capability: str) -> list[str]:
    missing = []
    for path, package in NLTK_RESOURCES[capability]:
        try:
            nltk.data.find(path)
        except LookupError:
            missing.append(package)
    return missing


def _prepare(capability: str) -> bool:
    if settings.nltk_data_dir and settings.nltk_data_dir not in nltk.data.path:
        nltk.data.path.append(settings.nltk_data_dir)

    missing = _missing_resources(capability)
    if missing and settings.nltk_auto_download:
        for package in missing:
            logger.info("Downloading nltk resource %s", package)
            try:
                nltk.download(package, quiet=True, download_dir=settings.nltk_data_dir or None)
            except (OSError, ValueError) as exc:
                logger.warning("nltk download of %s failed: %s", package, exc)
        missing = _missing_resources(capability)

    if missing:
        logger.warning(
            "nltk resources for %s unavailable (%s); retrying in %.0fs",
            capability,
            ", ".join(missing),
            settings.nltk_retry_interval,
        )
    return not missing


def ensure_resources(capability: str) -> None:
    """Make sure the nltk data behind ``capability`` is present.

    The check (and download, if allowed) runs at most once at a time per
    process. A failed attempt is remembered for ``nltk_retry_interval``
    seconds so that an offline host does not retry on every request.
    Raises LookupError while the data is unavailable.
    """
    with _resource_lock:
        state = _resource_state.get(capability)
        now = time.monotonic()
        if state is None or (not state[0] and now - state[1] >= settings.nltk_retry_interval):
            state = (_prepare(capability), now)
            _resource_state[capability] = state

    if not state[0]:
        raise LookupError(f"nltk resources for {capability} are unavailable")


def prepare_resources() -> dict[str, bool]:
    """Check (and download) every capability's data up front. Used at startup."""
    available = {}
    for capability in NLTK_RESOURCES:
        try:
            ensure_resources(capability)
        except LookupError:
            available[capability] = False
        else:
            available[capability] = True
    return available


def reset_resources() -> None:
    with _resource_lock:
        _resource_state.clear()


class NltkTextAnalyzer:
    """English text analysis backed by textstat and nltk."""

    def __init__(self) -> None:
        self._sentence_tokenizer = PunktSentenceTokenizer()
        self._word_tokenizer = TreebankWordTokenizer()
        self._term_tokenizer = RegexpTokenizer(TERM_PATTERN)

    def sentences(self, text: str) -> list[str]:
        return [s for s in self._sentence_tokenizer.tokenize(text) if s.strip()]

    def readability(self, text: str) -> Readability:
        if not text.strip():
            raise ReadabilityError("empty text")

        with contextlib.suppress(LookupError):
            # textstat releases without a cmudict dependency score without it
            ensure_resources("readability")

        try:
            if textstat.lexicon_count(text) == 0 or textstat.sentence_count(text) == 0:
                raise ReadabilityError("no words or sentence boundaries to score")
            score = textstat.flesch_reading_ease(text)
            grade = textstat.flesch_kincaid_grade(text)
        except (LookupError, ZeroDivisionError, ValueError, TypeError) as exc:
            # LookupError: syllable dictionary (cmudict) missing
            raise ReadabilityError(str(exc)) from exc
        return Readability(score=float(score), grade=float(grade))

    def entities(self, text: str) -> EntityCounts:
        ensure_resources("entities")
        labels: Counter[str] = Counter()
        for sentence in self.sentences(text):
            tokens = self._word_tokenizer.tokenize(sentence)
            if not tokens:
                continue
            tree = nltk.ne_chunk(nltk.pos_tag(tokens))
            for subtree in tree:
                if isinstance(subtree, nltk.Tree):
                    labels[subtree.label()] += 1

        return EntityCounts(
            people=sum(labels[label] for label in _PEOPLE_LABELS),
            places=sum(labels[label] for label in _PLACE_LABELS),
            organizations=sum(labels[label] for label in _ORGANIZATION_LABELS),
        )

    def count_questions(self, text: str) -> int:
        return sum(1 for s in self.sentences(text) if s.rstrip(_QUESTION_TRAILERS).endswith("?"))

    def terms(self, text: str) -> list[str]:
        return [t.lower() for t in self._term_tokenizer.tokenize(text)]
