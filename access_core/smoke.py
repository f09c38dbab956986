from __future__ import annotations

import logging
from typing import List

from .config import DEBUG_TRACE, TRACE_FIELDS
from .engine import assess
from .levels import classify
from .question_bank import load_bank
from .types import Answer, Question
from .validators import scale_bounds


def _maybe_enable_trace() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if DEBUG_TRACE:
        logging.getLogger("access_core.scoring").setLevel(logging.INFO)


def _auto_answer(idx: int, q: Question) -> Answer:
    # alternate good and weak answers so both recommendation passes fire
    good = idx % 2 == 0
    if q.type == "yes-no":
        return Answer(question_id=q.id, value="yes" if good else "no")
    if q.type == "scale":
        lo, hi = scale_bounds(q)
        return Answer(question_id=q.id, value=hi if good else lo)
    opts = q.options or [""]
    return Answer(question_id=q.id, value=opts[-1] if good else opts[0])


def _trace_fields() -> str:
    return ", ".join(TRACE_FIELDS)


def run_smoke_assessment() -> None:
    _maybe_enable_trace()
    catalog = load_bank()
    answers: List[Answer] = [_auto_answer(i, q) for i, q in enumerate(catalog)]

    logging.info("Answering %d questions (trace=%s)", len(answers), DEBUG_TRACE)
    logging.info("Trace fields: %s", _trace_fields())

    result = assess(answers, catalog)
    level = classify(result.overall_score)

    logging.info("Overall: %s (%s)", result.overall_score, level.level)
    for category, value in result.category_scores.items():
        logging.info("Category %s: %s", category, value)
    for rec in result.recommendations:
        logging.info("  [%s] %s (%s)", rec.priority, rec.title, rec.category)

    logging.info("Recommendations generated: %d", len(result.recommendations))


if __name__ == "__main__":  # pragma: no cover
    run_smoke_assessment()
