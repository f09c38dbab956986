from __future__ import annotations

import dataclasses
import json

import pytest

from access_core import engine
from access_core.engine import AssessmentSession, assess
from access_core.levels import classify
from access_core.types import Answer, Question
from access_core.validators import AnswerValidationError

from tests.conftest import best_answers, build_synthetic_catalog


def test_assess_packages_scores_and_recommendations():
    catalog = [Question(id="color-contrast", text="t", type="yes-no", category="visual", weight=10)]
    result = assess([Answer("color-contrast", "yes")], catalog, now="2024-01-01T00:00:00+00:00")
    assert result.overall_score == 100
    assert result.category_scores["visual"] == 100
    assert classify(result.overall_score).level == "Excellent"
    assert result.timestamp == "2024-01-01T00:00:00+00:00"
    assert result.answers == [Answer("color-contrast", "yes")]


def test_assess_uses_packaged_catalog_by_default(packaged_catalog):
    result = assess(best_answers(packaged_catalog))
    assert result.overall_score == 100
    assert result.recommendations == []


def test_assessment_is_deterministic_apart_from_timestamp(packaged_catalog):
    answers = [Answer("color-contrast", "no"), Answer("clear-navigation", 2), Answer("assistive-tech-testing", "Planning to test")]
    a = assess(answers, packaged_catalog).to_dict()
    b = assess(answers, packaged_catalog).to_dict()
    a.pop("timestamp"); b.pop("timestamp")
    assert json.dumps(a, sort_keys=True) == json.dumps(b, sort_keys=True)


def test_assessment_serializes_to_plain_data(packaged_catalog):
    result = assess([Answer("video-captions", "no")], packaged_catalog)
    payload = json.loads(json.dumps(result.to_dict()))
    assert set(payload) == {"answers", "overall_score", "category_scores", "recommendations", "timestamp"}
    assert payload["answers"] == [{"question_id": "video-captions", "value": "no"}]
    rec = payload["recommendations"][0]
    assert set(rec) == {"category", "priority", "title", "description", "impact", "resources"}


def test_strict_mode_rejects_malformed_answers(packaged_catalog):
    with pytest.raises(AnswerValidationError) as err:
        assess([Answer("color-contrast", "maybe")], packaged_catalog, strict=True)
    assert err.value.question_id == "color-contrast"


def test_lenient_mode_accepts_malformed_answers(packaged_catalog):
    result = assess([Answer("color-contrast", "maybe"), Answer("ghost", "yes")], packaged_catalog, strict=False)
    assert result.overall_score == 0


def test_strict_default_follows_config(monkeypatch, packaged_catalog):
    monkeypatch.setenv("STRICT_ANSWERS", "1")
    with pytest.raises(AnswerValidationError):
        assess([Answer("ghost", "yes")], packaged_catalog)
    monkeypatch.setattr(engine, "load_config", lambda: {})
    assert assess([Answer("ghost", "yes")], packaged_catalog).overall_score == 0


def test_session_walks_catalog_in_order():
    catalog = build_synthetic_catalog(categories=["visual"])
    sess = AssessmentSession(catalog)
    seen = []
    q = sess.next_question()
    while q is not None:
        seen.append(q.id)
        q = sess.answer_current("yes" if q.type == "yes-no" else (5 if q.type == "scale" else q.options[-1]))
    assert seen == [q.id for q in catalog]
    assert sess.done
    assert sess.progress() == {"position": len(catalog), "answered": len(catalog), "total": len(catalog)}
    assert sess.finalize().overall_score == 100


def test_session_reanswer_supersedes_and_moves_to_end():
    catalog = build_synthetic_catalog(categories=["visual"], include_scale=False, include_choice=False)
    sess = AssessmentSession(catalog)
    sess.answer("visual_yn_0", "no")
    sess.answer("visual_yn_1", "yes")
    sess.back()
    sess.back()
    assert sess.previous_value("visual_yn_0") == "no"
    sess.answer("visual_yn_0", "yes")
    assert sess.answers == [Answer("visual_yn_1", "yes"), Answer("visual_yn_0", "yes")]
    assert sess.finalize().category_scores["visual"] == 100


def test_session_answer_current_past_end_raises():
    catalog = build_synthetic_catalog(categories=["motor"], yes_no_per_category=1, include_scale=False, include_choice=False)
    sess = AssessmentSession(catalog)
    assert sess.answer_current("no") is None
    with pytest.raises(IndexError):
        sess.answer_current("yes")


def test_returned_recommendations_cannot_rewrite_the_tables(packaged_catalog):
    first = assess([Answer("color-contrast", "no")], packaged_catalog)
    rec = first.recommendations[0]
    assert rec.title == "Improve Color Contrast"
    with pytest.raises(AttributeError):
        rec.resources.append("edited by caller")  # type: ignore[attr-defined]
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.resources = ("edited by caller",)  # type: ignore[misc]

    second = assess([Answer("color-contrast", "no")], packaged_catalog)
    assert second.recommendations[0].resources == ("WebAIM Contrast Checker", "WCAG Color Contrast Guidelines")
    assert second.to_dict()["recommendations"][0]["resources"] == first.to_dict()["recommendations"][0]["resources"]
