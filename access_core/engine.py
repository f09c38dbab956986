# access_core/engine.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from .types import Question, Answer, Assessment
from .question_bank import load_bank
from .scoring import score
from .recommend import recommend
from .validators import validate_answers, AnswerValidationError
from .config import load_config, strict_enabled


log = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def assess(
    answers: Iterable[Answer],
    catalog: Optional[Sequence[Question]] = None,
    *,
    strict: Optional[bool] = None,
    now: Optional[str] = None,
) -> Assessment:
    """
    Score ``answers`` against ``catalog`` (the packaged catalog by default) and
    package scores plus recommendations into a fresh Assessment.

    ``strict`` defaults to the STRICT_ANSWERS setting; when on, malformed
    answers raise AnswerValidationError instead of scoring leniently.
    ``now`` pins the timestamp, which is the only non-deterministic field.
    """
    questions = list(catalog) if catalog is not None else load_bank()
    batch = list(answers)
    if strict is None:
        strict = strict_enabled(load_config())
    if strict:
        try:
            validate_answers(questions, batch)
        except AnswerValidationError as exc:
            log.warning("rejected answer for %s: %s", exc.question_id, exc.reason)
            raise

    overall, category_scores = score(questions, batch)
    recs = recommend(questions, batch, category_scores)
    log.debug("assessment overall=%s recommendations=%d", overall, len(recs))
    return Assessment(
        answers=batch,
        overall_score=overall,
        category_scores=category_scores,
        recommendations=recs,
        timestamp=now or _utcnow_iso(),
    )


class AssessmentSession:
    """
    Walks the catalog one question at a time and collects answers.

    Answering a question again replaces the earlier answer and moves it to the
    end of the answer list. ``finalize()`` scores whatever has been collected.
    """

    def __init__(self, catalog: Optional[Sequence[Question]] = None, strict: Optional[bool] = None):
        self.questions: List[Question] = list(catalog) if catalog is not None else load_bank()
        self.strict = strict
        self._id_to_question: Dict[str, Question] = {q.id: q for q in self.questions}
        self._answers: List[Answer] = []
        self._pos = 0

    @property
    def answers(self) -> List[Answer]:
        return list(self._answers)

    def current(self) -> Optional[Question]:
        if 0 <= self._pos < len(self.questions):
            return self.questions[self._pos]
        return None

    def next_question(self) -> Optional[Question]:
        return self.current()

    def answer(self, question_id: str, value) -> Optional[Question]:
        """Record an answer and return the next question, or None when done."""
        if question_id not in self._id_to_question:
            # unknown ids are carried but never scored
            log.debug("answer for unknown question %s", question_id)
        new = Answer(question_id=question_id, value=value)
        self._answers = [a for a in self._answers if a.question_id != question_id] + [new]
        cur = self.current()
        if cur is not None and cur.id == question_id:
            self._pos += 1
        return self.current()

    def answer_current(self, value) -> Optional[Question]:
        cur = self.current()
        if cur is None:
            raise IndexError("no question left to answer")
        return self.answer(cur.id, value)

    def back(self) -> Optional[Question]:
        if self._pos > 0:
            self._pos -= 1
        return self.current()

    def previous_value(self, question_id: str):
        for a in self._answers:
            if a.question_id == question_id:
                return a.value
        return None

    def progress(self) -> Dict[str, int]:
        answered = sum(1 for a in self._answers if a.question_id in self._id_to_question)
        return {"position": self._pos, "answered": answered, "total": len(self.questions)}

    @property
    def done(self) -> bool:
        return self._pos >= len(self.questions)

    def finalize(self, now: Optional[str] = None) -> Assessment:
        return assess(self._answers, self.questions, strict=self.strict, now=now)
