from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Optional, Literal, Union, Tuple, Sequence
QuestionType = Literal["yes-no","scale","multiple-choice"]
Category = Literal["visual","auditory","motor","cognitive","general"]
Priority = Literal["high","medium","low"]
@dataclass(frozen=True)
class Question:
    id: str; text: str; type: QuestionType; category: Category
    weight: float = 1.0
    options: Optional[Sequence[str]] = None
    scale_min: Optional[float] = None
    scale_max: Optional[float] = None
    scale_labels: Optional[Sequence[str]] = None
@dataclass(frozen=True)
class Answer:
    question_id: str; value: Union[str, int, float, None]
@dataclass(frozen=True)
class Recommendation:
    category: str
    priority: Priority
    title: str
    description: str
    impact: str
    resources: Tuple[str, ...] = ()
@dataclass(frozen=True)
class AccessibilityLevel:
    level: str; description: str; color: str
@dataclass(frozen=True)
class Assessment:
    answers: List[Answer]
    overall_score: Optional[int]
    category_scores: Dict[str, Optional[int]]
    recommendations: List[Recommendation]
    timestamp: str

    def to_dict(self) -> Dict[str, object]:
        """Plain-data view (str/int/list/dict only), safe for json.dumps."""
        return asdict(self)
