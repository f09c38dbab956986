from __future__ import annotations
import json, functools, importlib.resources as ir
from typing import Dict, List, Sequence, Tuple
from .types import Question
from .config import CATEGORIES
from .validators import validate_catalog
def _freeze(r: dict) -> dict:
    out = dict(r)
    for key in ("options", "scale_labels"):
        if out.get(key) is not None:
            out[key] = tuple(out[key])
    return out
@functools.lru_cache(maxsize=1)
def _packaged_bank() -> Tuple[Question, ...]:
    data = ir.files(__package__).joinpath("data/questions.json").read_text(encoding="utf-8")
    raw = json.loads(data)
    bank = tuple(Question(**_freeze(r)) for r in raw)
    validate_catalog(bank)
    return bank
def load_bank() -> List[Question]:
    # parsed and validated once; callers get their own list
    return list(_packaged_bank())
def index_bank(catalog: Sequence[Question]) -> Dict[str, Question]:
    return {q.id: q for q in catalog}
