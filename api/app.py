from __future__ import annotations
from fastapi import FastAPI, HTTPException, Body
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from dataclasses import asdict
from datetime import datetime, timezone
import uuid, os, typing as t

# ---- Engine imports ----
from access_core.engine import AssessmentSession, assess
from access_core.types import Answer
from access_core.levels import classify
from access_core.question_bank import load_bank
from access_core.validators import AnswerValidationError
from access_core.config import load_config, strict_enabled

SESS: dict[str, AssessmentSession] = {}
SESSION_INFO: dict[str, dict[str, t.Any]] = {}

app = FastAPI(title="Course Accessibility Assessor API")

@app.get("/")
def root():
    return {"status": "ok", "service": "course-accessibility-assessor"}

ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class AnswerIn(BaseModel):
    question_id: str
    value: int | float | str | None = None

class AssessReq(BaseModel):
    answers: list[AnswerIn] = Field(default_factory=list)
    strict: bool | None = None

class StartReq(BaseModel):
    strict: bool | None = None

class SessionAnswer(BaseModel):
    question_id: str
    value: int | float | str | None = None

# ---- Helpers ----
def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _serialize_question(q):
    if q is None: return None
    return asdict(q)


def _report(assessment) -> dict[str, t.Any]:
    body = assessment.to_dict()
    body["level"] = asdict(classify(assessment.overall_score))
    return body


def _session(sid: str) -> AssessmentSession:
    sess = SESS.get(sid)
    if not sess: raise HTTPException(404, "session not found")
    return sess

# ---- Health ----
@app.get("/health")
def health():
    cfg = load_config()
    return {
        "status": "ok",
        "strict_answers": strict_enabled(cfg),
        "questions": len(load_bank()),
        "active_sessions": len(SESS),
    }

# ---- Catalog / one-shot scoring ----
@app.get("/questions")
def questions():
    return {"questions": [_serialize_question(q) for q in load_bank()]}

@app.post("/assessments")
def create_assessment(req: AssessReq = Body(...)):
    answers = [Answer(question_id=a.question_id, value=a.value) for a in req.answers]
    try:
        result = assess(answers, strict=req.strict)
    except AnswerValidationError as exc:
        raise HTTPException(422, {"question_id": exc.question_id, "reason": exc.reason})
    return _report(result)

@app.get("/levels/{score}")
def level(score: float):
    return asdict(classify(score))

# ---- Step-by-step questionnaire ----
@app.post("/session/start")
def start(req: StartReq | None = None):
    sid = str(uuid.uuid4())
    sess = AssessmentSession(strict=req.strict if req else None)
    SESS[sid] = sess
    SESSION_INFO[sid] = {"started_at": _now_iso()}
    return {"session_id": sid, "question": _serialize_question(sess.next_question()), "progress": sess.progress()}

@app.get("/session/{sid}/next")
def next_question(sid: str):
    sess = _session(sid)
    return {"question": _serialize_question(sess.next_question()), "progress": sess.progress()}

@app.post("/session/{sid}/answer")
def answer(sid: str, req: SessionAnswer):
    sess = _session(sid)
    nxt = sess.answer(req.question_id, req.value)
    SESSION_INFO[sid]["last_updated"] = _now_iso()
    return {"done": nxt is None, "question": _serialize_question(nxt), "progress": sess.progress()}

@app.post("/session/{sid}/back")
def back(sid: str):
    sess = _session(sid)
    q = sess.back()
    prev = sess.previous_value(q.id) if q else None
    return {"question": _serialize_question(q), "previous_value": prev, "progress": sess.progress()}

@app.post("/session/{sid}/finish")
def finish(sid: str):
    sess = _session(sid)
    try:
        result = sess.finalize()
    except AnswerValidationError as exc:
        raise HTTPException(422, {"question_id": exc.question_id, "reason": exc.reason})
    report = _report(result)
    report["session_id"] = sid
    SESS.pop(sid, None)
    SESSION_INFO.pop(sid, None)
    return report
