from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .config import logger
from .errors import CatalogError
from .models import Question

# question ids travel inside callback data, where ":" separates fields
ID_SEPARATOR = ":"


class QuestionRepository:
    """Read-only catalog of quiz questions with lookup and random sampling."""

    def __init__(self, questions: Iterable[Question], rng: Optional[random.Random] = None):
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._rng = rng or random.Random()
        if not self._questions:
            raise CatalogError("Каталог вопросов пуст")

        self._by_id: Dict[str, Question] = {}
        for q in self._questions:
            if ID_SEPARATOR in q.id:
                raise CatalogError(f"Недопустимый символ {ID_SEPARATOR!r} в идентификаторе вопроса {q.id}")
            if q.id in self._by_id:
                raise CatalogError(f"Повторяющийся идентификатор вопроса: {q.id}")
            self._by_id[q.id] = q
        logger.debug("Каталог загружен: %s вопросов", len(self._questions))

    def __len__(self) -> int:
        return len(self._questions)

    def get_by_id(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def get_all(self) -> Tuple[Question, ...]:
        return self._questions

    def get_by_category(self, category: str) -> List[Question]:
        return [q for q in self._questions if q.category == category]

    def get_random(self) -> Question:
        return self._rng.choice(self._questions)

    def get_random_n(self, count: int) -> List[Question]:
        if count <= 0:
            return []
        return self._rng.sample(self._questions, min(count, len(self._questions)))

    def get_categories(self) -> Set[str]:
        return {q.category for q in self._questions}

    def check_answer(self, question_id: str, selected_index: int) -> bool:
        question = self.get_by_id(question_id)
        if question is None:
            return False
        return question.correct_answer_index == selected_index


def load_repository(rng: Optional[random.Random] = None) -> QuestionRepository:
    from .catalog import QUESTIONS

    return QuestionRepository(QUESTIONS, rng=rng)
