from __future__ import annotations

import pytest

from access_core.question_bank import CATEGORIES, load_bank
from access_core.types import Answer, Question


def build_synthetic_catalog(
    *,
    categories: list[str] | None = None,
    yes_no_per_category: int = 2,
    include_scale: bool = True,
    include_choice: bool = True,
) -> list[Question]:
    """Create a deterministic synthetic catalog for tests."""

    questions: list[Question] = []
    target = categories or list(CATEGORIES)
    for category in target:
        for idx in range(yes_no_per_category):
            questions.append(
                Question(
                    id=f"{category}_yn_{idx}",
                    text=f"{category} yes/no #{idx}",
                    type="yes-no",
                    category=category,
                    weight=float(idx + 2),
                )
            )

        if include_scale:
            questions.append(
                Question(
                    id=f"{category}_scale",
                    text=f"Rate the {category} experience",
                    type="scale",
                    category=category,
                    weight=6.0,
                    scale_min=1,
                    scale_max=5,
                    scale_labels=["1", "2", "3", "4", "5"],
                )
            )

        if include_choice:
            questions.append(
                Question(
                    id=f"{category}_mc",
                    text=f"How far along is {category} testing?",
                    type="multiple-choice",
                    category=category,
                    weight=4.0,
                    options=["Not started", "Planned", "Partial", "Complete"],
                )
            )

    return questions


def best_answers(catalog: list[Question]) -> list[Answer]:
    out: list[Answer] = []
    for q in catalog:
        if q.type == "yes-no":
            out.append(Answer(q.id, "yes"))
        elif q.type == "scale":
            out.append(Answer(q.id, q.scale_max if q.scale_max is not None else 5))
        else:
            out.append(Answer(q.id, (q.options or [""])[-1]))
    return out


def worst_answers(catalog: list[Question]) -> list[Answer]:
    out: list[Answer] = []
    for q in catalog:
        if q.type == "yes-no":
            out.append(Answer(q.id, "no"))
        elif q.type == "scale":
            out.append(Answer(q.id, q.scale_min if q.scale_min is not None else 1))
        else:
            out.append(Answer(q.id, (q.options or [""])[0]))
    return out


@pytest.fixture
def synthetic_catalog() -> list[Question]:
    return build_synthetic_catalog()


@pytest.fixture
def packaged_catalog() -> list[Question]:
    return load_bank()
