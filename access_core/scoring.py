from __future__ import annotations
import logging, math
from typing import Dict, Sequence, Tuple, Any, Optional
from .types import Question, Answer
from .validators import scale_bounds
from .config import CATEGORIES, DEBUG_TRACE, TRACE_FIELDS

log = logging.getLogger(__name__)


def _emit_trace(**values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = []
    for key in TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(str(val) for val in ordered))


def round_half_up(x: float) -> Optional[int]:
    """Percent rounding that sends .5 upward; non-finite input means 'unavailable'."""
    if not math.isfinite(x):
        return None
    return int(math.floor(x + 0.5))


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def option_index(q: Question, value: Any) -> int:
    # unmatched values fall back to the first option
    try:
        return (q.options or []).index(value)
    except ValueError:
        return 0


def _score_yes_no(q: Question, value: Any) -> Tuple[float, Dict[str, Any]]:
    norm = 1.0 if value == "yes" else 0.0
    return norm, {"type": "yes-no"}


def _score_scale(q: Question, value: Any) -> Tuple[float, Dict[str, Any]]:
    lo, hi = scale_bounds(q)
    v = _as_number(value)
    # not clamped: values outside [lo, hi] land outside [0, 1]
    norm = (v - lo) / (hi - lo)
    return norm, {"type": "scale", "min": lo, "max": hi}


def _score_choice(q: Question, value: Any) -> Tuple[float, Dict[str, Any]]:
    n = len(q.options or [])
    idx = option_index(q, value)
    norm = idx / (n - 1) if n > 1 else 0.0
    return norm, {"type": "multiple-choice", "index": idx, "options": n}


def score_answer(q: Question, answer: Answer) -> Tuple[float, Dict[str, Any]]:
    """
    Returns (points, meta) where points = normalized value * question weight.
    Normalization: yes-no -> {0, 1}, scale -> (v - min) / (max - min),
    multiple-choice -> index / (n - 1).
    """
    t = q.type
    val = answer.value
    if t == "yes-no":
        norm, meta = _score_yes_no(q, val)
    elif t == "scale":
        norm, meta = _score_scale(q, val)
    elif t == "multiple-choice":
        norm, meta = _score_choice(q, val)
    else:
        return 0.0, {"type": t or "UNKNOWN"}
    points = norm * float(q.weight)
    meta["normalized"] = norm
    _emit_trace(
        question_id=q.id,
        type=t,
        category=q.category,
        weight=q.weight,
        value=val,
        normalized=round(norm, 4),
        points=round(points, 4),
    )
    return points, meta


def max_scores(catalog: Sequence[Question]) -> Dict[str, float]:
    out: Dict[str, float] = {c: 0.0 for c in CATEGORIES}
    for q in catalog:
        out[q.category] = out.get(q.category, 0.0) + float(q.weight)
    return out


def score(catalog: Sequence[Question], answers: Sequence[Answer]) -> Tuple[Optional[int], Dict[str, Optional[int]]]:
    """
    Aggregate answers into (overall_score, category_scores), both as 0..100
    percentages for in-domain answers. Unknown question ids are skipped and a
    category with no catalog weight scores 0.
    """
    by_id = {q.id: q for q in catalog}
    max_score = max_scores(catalog)
    total_max = sum(float(q.weight) for q in catalog)
    actual: Dict[str, float] = {c: 0.0 for c in max_score}

    for ans in answers:
        q = by_id.get(ans.question_id)
        if q is None:
            continue
        points, _meta = score_answer(q, ans)
        actual[q.category] += points

    total_actual = sum(actual.values())
    overall = round_half_up(100.0 * total_actual / total_max) if total_max > 0 else 0

    category_scores: Dict[str, Optional[int]] = {}
    for cat, mx in max_score.items():
        if mx > 0:
            category_scores[cat] = round_half_up(100.0 * actual[cat] / mx)
        else:
            category_scores[cat] = 0

    log.debug("scored %d answers: overall=%s categories=%s", len(answers), overall, category_scores)
    return overall, category_scores
