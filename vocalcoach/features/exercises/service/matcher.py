# File: vocalcoach/features/exercises/service/matcher.py
import re
import logging
from typing import List, Optional, Sequence, Set

from vocalcoach.features.analysis.domain.models import AnalysisResult
from ..domain.models import Exercise, ExerciseCategory

logger = logging.getLogger(__name__)

WORD_OVERLAP_THRESHOLD = 0.4
_WORD_SPLIT = re.compile(r"[^0-9a-z]+")


def _words(text: str) -> Set[str]:
    return {w for w in _WORD_SPLIT.split(text.lower()) if len(w) > 2}


def _first(library: Sequence[Exercise], used: Set[int], predicate) -> Optional[int]:
    for idx, exercise in enumerate(library):
        if idx not in used and predicate(exercise):
            return idx
    return None


def _best_word_overlap(query: str, library: Sequence[Exercise], used: Set[int]) -> Optional[int]:
    query_words = _words(query)
    if not query_words:
        return None

    best_idx, best_score = None, 0.0
    for idx, exercise in enumerate(library):
        if idx in used:
            continue
        cand_words = _words(exercise.name)
        if not cand_words:
            continue
        score = len(query_words & cand_words) / max(len(query_words), len(cand_words))
        # Strictly greater keeps the earliest entry on ties
        if score >= WORD_OVERLAP_THRESHOLD and score > best_score:
            best_idx, best_score = idx, score
    return best_idx


def _resolve(name: str, library: Sequence[Exercise], used: Set[int]) -> Optional[int]:
    """
    Tiers, first hit wins:
      1. exact name
      2. case-insensitive name
      3. case-insensitive containment, either direction
      4. word overlap >= WORD_OVERLAP_THRESHOLD
    """
    wanted = name.strip()
    lower = wanted.lower()
    if not lower:
        return None

    idx = _first(library, used, lambda e: e.name == wanted)
    if idx is None:
        idx = _first(library, used, lambda e: e.name.strip() and e.name.lower() == lower)
    if idx is None:
        idx = _first(
            library, used,
            lambda e: e.name.strip() and (lower in e.name.lower() or e.name.lower() in lower)
        )
    if idx is None:
        idx = _best_word_overlap(lower, library, used)
    return idx


def match_exercises(names: Sequence[str], library: Sequence[Exercise]) -> List[Exercise]:
    """
    Resolves model-authored exercise names against the caller's library.

    Output follows the order of `names`. Names with no match are dropped.
    A library entry is returned at most once.
    """
    used: Set[int] = set()
    matches: List[Exercise] = []

    for name in names:
        idx = _resolve(name, library, used)
        if idx is None:
            logger.warning(f"No library exercise matches recommendation '{name}'")
            continue
        used.add(idx)
        matches.append(library[idx])

    return matches


def _dimension_categories(result: AnalysisResult):
    """Weakest dimension first. Warm-up and vowel work act as fixed-score fillers."""
    dims = [
        (result.breath, [ExerciseCategory.BREATH]),
        (result.pitch, [ExerciseCategory.PITCH]),
        (result.tone, [ExerciseCategory.RESONANCE, ExerciseCategory.REGISTER]),
        (result.timing, [ExerciseCategory.AGILITY]),
        (5.0, [ExerciseCategory.WARMUP]),
        (6.0, [ExerciseCategory.VOWEL]),
    ]
    return sorted(dims, key=lambda d: d[0])


def match_and_supplement(
    names: Sequence[str],
    result: AnalysisResult,
    library: Sequence[Exercise],
    minimum: int = 4,
    maximum: int = 6,
) -> List[Exercise]:
    """
    Matches recommended names, then tops the list up to `minimum` with
    exercises that train the weakest-scoring dimensions.
    """
    exercises = match_exercises(names, library)
    if len(exercises) >= minimum:
        return exercises[:maximum]

    used_ids = {e.template_id for e in exercises}

    for _, categories in _dimension_categories(result):
        if len(exercises) >= minimum:
            break
        for category in categories:
            if len(exercises) >= minimum:
                break
            extra = next(
                (e for e in library if e.category == category.value and e.template_id not in used_ids),
                None
            )
            if extra is not None:
                exercises.append(extra)
                used_ids.add(extra.template_id)

    logger.info(f"Supplemented recommendations to {len(exercises)} exercises")
    return exercises[:maximum]
