from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from . import config as cfg_defaults
from .knowledge import category_recommendations, question_recommendations
from .scoring import option_index
from .types import Answer, Question, Recommendation

log = logging.getLogger(__name__)


def score_band(score: Optional[int]) -> Optional[str]:
    """Map a category percentage onto the recommendation tier it triggers."""
    if score is None:
        return None
    if score < cfg_defaults.HIGH_PRIORITY_BELOW:
        return "high"
    if score < cfg_defaults.MEDIUM_PRIORITY_BELOW:
        return "medium"
    return None


def _scale_value(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_deficient(q: Question, answer: Answer) -> bool:
    if q.type == "yes-no":
        return answer.value == "no"
    if q.type == "scale":
        # fixed threshold on the raw value, regardless of the question's bounds
        v = _scale_value(answer.value)
        return v is not None and v < cfg_defaults.SCALE_DEFICIENT_BELOW
    if q.type == "multiple-choice":
        return option_index(q, answer.value) < cfg_defaults.CHOICE_DEFICIENT_BELOW
    return False


def dedupe_by_title(recs: Sequence[Recommendation]) -> List[Recommendation]:
    seen, out = set(), []
    for r in recs:
        if r.title not in seen:
            out.append(r); seen.add(r.title)
    return out


def recommend(
    catalog: Sequence[Question],
    answers: Sequence[Answer],
    category_scores: Mapping[str, Optional[int]],
    cap: Optional[int] = None,
) -> List[Recommendation]:
    """
    Category pass, then answer pass, then dedupe by title, stable sort by
    priority (high > medium > low) and truncate to ``cap`` entries.
    """
    limit = cfg_defaults.RECOMMENDATION_CAP if cap is None else int(cap)
    collected: List[Recommendation] = []

    for category, value in category_scores.items():
        tier = score_band(value)
        if tier is None:
            continue
        collected.extend(category_recommendations(category, tier))

    by_id: Dict[str, Question] = {q.id: q for q in catalog}
    for ans in answers:
        q = by_id.get(ans.question_id)
        if q is None:
            continue
        if is_deficient(q, ans):
            collected.extend(question_recommendations(q.id))

    unique = dedupe_by_title(collected)
    ranked = sorted(unique, key=lambda r: cfg_defaults.PRIORITY_RANK.get(r.priority, 0), reverse=True)
    log.debug("recommendations: %d collected, %d unique, cap=%d", len(collected), len(unique), limit)
    return ranked[:max(0, limit)]
