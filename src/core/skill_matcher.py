import logging
import re
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from functools import lru_cache
from typing import Dict, List, Optional, Set, Tuple

from .data_models import SkillEntry, SkillMatch, Taxonomy
from config.settings import settings

logger = logging.getLogger(__name__)

# Contribution per signal type
EXACT_FREQUENCY_WEIGHT = 3
EXACT_CONFIDENCE = 30.0
ALL_WORDS_FREQUENCY = 2
ALL_WORDS_CONFIDENCE = 20.0
DERIVED_CONFIDENCE = 10.0
FUZZY_CONFIDENCE = 15.0
MAX_CONFIDENCE = 100.0

MIN_VARIANT_LENGTH = 2
MIN_SENTENCE_LENGTH = 10
FUZZY_LENGTH_WINDOW = 2

_TOKEN_PATTERN = re.compile(r"[a-z][a-z0-9+#]*")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


@lru_cache(maxsize=8192)
def _boundary_pattern(term: str) -> re.Pattern:
    return re.compile(r'(?<!\w)' + re.escape(term) + r'(?!\w)')


def count_whole_word(term: str, text_lower: str) -> int:
    """Count occurrences of ``term`` in lower-cased text as a whole word."""
    if len(term) < MIN_VARIANT_LENGTH:
        return 0
    return len(_boundary_pattern(term).findall(text_lower))


def contains_whole_word(term: str, text_lower: str) -> bool:
    return _boundary_pattern(term).search(text_lower) is not None


def split_sentences(text: str, max_sentences: int = None) -> List[str]:
    """Split text on sentence punctuation, dropping short fragments."""
    max_sentences = max_sentences or settings.MAX_SENTENCES
    sentences = []
    for fragment in _SENTENCE_SPLIT.split(text):
        fragment = fragment.strip()
        if len(fragment) > MIN_SENTENCE_LENGTH:
            sentences.append(fragment)
            if len(sentences) >= max_sentences:
                break
    return sentences


@dataclass
class _PreparedText:
    """Lower-cased views of the document shared by every skill lookup."""
    lower: str
    sentences: List[str]
    sentences_lower: List[str]
    token_counts: Counter
    tokens_by_length: Dict[int, List[str]]


@dataclass
class _SkillAccumulator:
    entry: SkillEntry
    frequency: int = 0
    confidence: float = 0.0
    # Each item is a group of terms that must all occur in a sentence
    evidence: List[Tuple[str, ...]] = field(default_factory=list)

    def add(self, frequency: int, confidence: float, *evidence: Tuple[str, ...]):
        self.frequency += frequency
        self.confidence += confidence
        for group in evidence:
            if group not in self.evidence:
                self.evidence.append(group)


class SkillMatcher:
    """Scores every taxonomy skill against a document's text.

    Evidence per skill is accumulated over all of its variants: exact
    whole-word hits of the canonical term or a mapped term are the strongest
    signal, a multi-word term whose words all occur somewhere in the text adds a
    corroborating signal, derived forms (plurals, abbreviations) and approximate
    token matches add weaker ones. Skills are kept when their capped confidence
    reaches ``min_confidence`` and are ranked by frequency times confidence.
    """

    def __init__(self,
                 min_confidence: float = None,
                 max_results: int = None,
                 max_contexts: int = None,
                 context_max_length: int = None,
                 fuzzy_matching: bool = None,
                 fuzzy_threshold: float = None,
                 fuzzy_min_length: int = None,
                 fuzzy_max_tokens: int = None,
                 max_sentences: int = None):
        self.min_confidence = min_confidence if min_confidence is not None else settings.MIN_CONFIDENCE
        self.max_results = max_results or settings.MAX_RESULTS
        self.max_contexts = max_contexts or settings.MAX_CONTEXTS
        self.context_max_length = context_max_length or settings.CONTEXT_MAX_LENGTH
        self.fuzzy_matching = fuzzy_matching if fuzzy_matching is not None else settings.FUZZY_MATCHING
        self.fuzzy_threshold = fuzzy_threshold or settings.FUZZY_THRESHOLD
        self.fuzzy_min_length = fuzzy_min_length or settings.FUZZY_MIN_LENGTH
        self.fuzzy_max_tokens = fuzzy_max_tokens or settings.FUZZY_MAX_TOKENS
        self.max_sentences = max_sentences or settings.MAX_SENTENCES

    def match(self, text: str, taxonomy: Taxonomy) -> List[SkillMatch]:
        if not text or not text.strip():
            return []

        prepared = self._prepare(text)
        # Tokens spelled like any taxonomy term are never approximate hits
        taxonomy_forms = {variant for entry in taxonomy.entries() for variant in entry.variants}
        matches: List[SkillMatch] = []
        seen = set()

        for entry in taxonomy.entries():
            if entry.key in seen:
                continue
            skill_match = self._score_entry(entry, prepared, taxonomy_forms)
            if skill_match is None or skill_match.confidence < self.min_confidence:
                continue
            seen.add(entry.key)
            matches.append(skill_match)

        # sorted() is stable, so ties keep taxonomy order
        matches = sorted(matches, key=lambda m: m.score, reverse=True)
        logger.info(
            f"Found {len(matches)} skill matches with confidence >= {self.min_confidence:g}"
            f" in {len(text)} characters"
        )
        return matches[:self.max_results]

    def _prepare(self, text: str) -> _PreparedText:
        lower = text.lower()
        sentences = split_sentences(text, self.max_sentences)
        token_counts = Counter(_TOKEN_PATTERN.findall(lower))

        tokens_by_length = defaultdict(list)
        for token in list(token_counts)[:self.fuzzy_max_tokens]:
            tokens_by_length[len(token)].append(token)

        return _PreparedText(
            lower=lower,
            sentences=sentences,
            sentences_lower=[s.lower() for s in sentences],
            token_counts=token_counts,
            tokens_by_length=tokens_by_length,
        )

    def _score_entry(self, entry: SkillEntry, prepared: _PreparedText,
                     taxonomy_forms: Optional[Set[str]] = None) -> Optional[SkillMatch]:
        acc = _SkillAccumulator(entry)
        known_forms = taxonomy_forms if taxonomy_forms is not None else set(entry.variants)

        for variant in entry.primary_variants:
            if len(variant) < MIN_VARIANT_LENGTH:
                continue
            hits = count_whole_word(variant, prepared.lower)
            if hits:
                acc.add(hits * EXACT_FREQUENCY_WEIGHT, EXACT_CONFIDENCE, (variant,))

            words = tuple(variant.split())
            if len(words) > 1 and all(contains_whole_word(w, prepared.lower) for w in words):
                acc.add(ALL_WORDS_FREQUENCY, ALL_WORDS_CONFIDENCE, words)

            if not hits and len(words) == 1 and self.fuzzy_matching:
                fuzzy_hits, tokens = self._fuzzy_hits(variant, prepared, known_forms)
                if fuzzy_hits:
                    acc.add(fuzzy_hits, FUZZY_CONFIDENCE, *((token,) for token in tokens))

        for variant in entry.derived_variants:
            if len(variant) < MIN_VARIANT_LENGTH:
                continue
            hits = count_whole_word(variant, prepared.lower)
            if hits:
                acc.add(hits, DERIVED_CONFIDENCE, (variant,))

        if acc.frequency <= 0:
            return None

        return SkillMatch(
            skill_name=entry.canonical_term,
            frequency=acc.frequency,
            category=entry.category,
            confidence=min(acc.confidence, MAX_CONFIDENCE),
            contexts=tuple(self._collect_contexts(acc.evidence, prepared)),
        )

    def _fuzzy_hits(self, variant: str, prepared: _PreparedText, known_forms) -> Tuple[int, List[str]]:
        """Count text tokens that look like misspellings of a single-word variant.

        A misspelling must keep the first letter of the variant and be at least
        ``fuzzy_threshold`` similar to it.
        """
        if len(variant) < self.fuzzy_min_length:
            return 0, []

        hits = 0
        tokens = []
        for length in range(len(variant) - FUZZY_LENGTH_WINDOW, len(variant) + FUZZY_LENGTH_WINDOW + 1):
            for token in prepared.tokens_by_length.get(length, ()):
                if token in known_forms or token[0] != variant[0]:
                    continue
                matcher = SequenceMatcher(None, variant, token)
                if matcher.quick_ratio() < self.fuzzy_threshold:
                    continue
                if matcher.ratio() >= self.fuzzy_threshold:
                    hits += prepared.token_counts[token]
                    tokens.append(token)
        return hits, tokens

    def _collect_contexts(self, evidence: List[Tuple[str, ...]], prepared: _PreparedText) -> List[str]:
        contexts = []
        for sentence, sentence_lower in zip(prepared.sentences, prepared.sentences_lower):
            if any(all(contains_whole_word(term, sentence_lower) for term in group) for group in evidence):
                context = sentence[:self.context_max_length]
                if context not in contexts:
                    contexts.append(context)
                    if len(contexts) >= self.max_contexts:
                        break
        return contexts
