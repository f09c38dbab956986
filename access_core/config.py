from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


CATEGORIES: tuple[str, ...] = ("visual", "auditory", "motor", "cognitive", "general")

# category score bands for the recommendation pass
HIGH_PRIORITY_BELOW: int = 60
MEDIUM_PRIORITY_BELOW: int = 80

# answer-level deficiency signals
SCALE_DEFICIENT_BELOW: float = 3
CHOICE_DEFICIENT_BELOW: int = 2

RECOMMENDATION_CAP: int = 15
PRIORITY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}

SCALE_MIN_DEFAULT: float = 1
SCALE_MAX_DEFAULT: float = 5

STRICT_ANSWERS: bool = False

DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "question_id",
    "type",
    "category",
    "weight",
    "value",
    "normalized",
    "points",
)
# // env overrides for staging/ops; defaults remain lenient.
RECOMMENDATION_CAP = _env_int("RECOMMENDATION_CAP", RECOMMENDATION_CAP)
STRICT_ANSWERS = _env_bool("STRICT_ANSWERS", STRICT_ANSWERS)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)

def _env_true(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1","true","yes","on")
def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("STRICT_ANSWERS"): cfg["STRICT_ANSWERS"] = _env_true("STRICT_ANSWERS")
    return cfg
def strict_enabled(cfg: dict) -> bool:
    return bool(cfg.get("STRICT_ANSWERS", STRICT_ANSWERS))
