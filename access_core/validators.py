from __future__ import annotations
import math
from typing import Iterable, List, Sequence
from .types import Question, Answer
from .config import CATEGORIES, SCALE_MIN_DEFAULT, SCALE_MAX_DEFAULT


class CatalogError(ValueError):
    """Raised when a question catalog breaks one of its structural invariants."""


class AnswerValidationError(ValueError):
    def __init__(self, question_id: str, reason: str):
        super().__init__(f"{question_id}: {reason}")
        self.question_id = question_id
        self.reason = reason


def scale_bounds(q: Question) -> tuple[float, float]:
    lo = q.scale_min if q.scale_min is not None else SCALE_MIN_DEFAULT
    hi = q.scale_max if q.scale_max is not None else SCALE_MAX_DEFAULT
    return float(lo), float(hi)


def validate_catalog(catalog: Sequence[Question]) -> None:
    seen: set[str] = set()
    for q in catalog:
        if q.id in seen:
            raise CatalogError(f"duplicate question id {q.id!r}")
        seen.add(q.id)
        if q.category not in CATEGORIES:
            raise CatalogError(f"{q.id}: unknown category {q.category!r}")
        if not q.weight > 0:
            raise CatalogError(f"{q.id}: weight must be positive, got {q.weight!r}")
        if q.type == "scale":
            lo, hi = scale_bounds(q)
            if not hi > lo:
                raise CatalogError(f"{q.id}: scale_max must exceed scale_min")
        elif q.type == "multiple-choice":
            if not q.options:
                raise CatalogError(f"{q.id}: multiple-choice question needs options")
        elif q.type != "yes-no":
            raise CatalogError(f"{q.id}: unknown question type {q.type!r}")


def _check_answer(q: Question, ans: Answer) -> None:
    if q.type == "yes-no":
        if ans.value not in ("yes", "no"):
            raise AnswerValidationError(q.id, f"expected 'yes' or 'no', got {ans.value!r}")
        return
    if q.type == "scale":
        try:
            v = float(ans.value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise AnswerValidationError(q.id, f"scale value is not numeric: {ans.value!r}") from None
        lo, hi = scale_bounds(q)
        if math.isnan(v) or v < lo or v > hi:
            raise AnswerValidationError(q.id, f"scale value {ans.value!r} outside [{lo:g}, {hi:g}]")
        return
    if q.type == "multiple-choice":
        if ans.value not in (q.options or []):
            raise AnswerValidationError(q.id, f"{ans.value!r} is not one of the listed options")


def validate_answers(catalog: Sequence[Question], answers: Iterable[Answer]) -> List[Answer]:
    """
    Strict-mode gate run before scoring. Raises AnswerValidationError on the
    first unknown question id or out-of-domain value; returns the answers as a
    list when everything checks out.
    """
    by_id = {q.id: q for q in catalog}
    out: List[Answer] = []
    for ans in answers:
        q = by_id.get(ans.question_id)
        if q is None:
            raise AnswerValidationError(ans.question_id, "unknown question id")
        _check_answer(q, ans)
        out.append(ans)
    return out
