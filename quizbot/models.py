from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set, Tuple

from .errors import CatalogError

ANSWERS_PER_QUESTION = 4


@dataclass(frozen=True)
class Question:
    id: str
    category: str
    question: str
    answers: Tuple[str, str, str, str]
    correct_answer_index: int
    explanation: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise CatalogError("Вопрос без идентификатора")
        answers = tuple(self.answers)
        if len(answers) != ANSWERS_PER_QUESTION:
            raise CatalogError(
                f"Вопрос {self.id}: ожидается {ANSWERS_PER_QUESTION} варианта ответа, получено {len(answers)}"
            )
        # lists from the catalog are frozen into a tuple
        object.__setattr__(self, "answers", answers)
        if self.correct_answer_index not in range(ANSWERS_PER_QUESTION):
            raise CatalogError(
                f"Вопрос {self.id}: некорректный индекс правильного ответа {self.correct_answer_index}"
            )

    @property
    def correct_answer(self) -> str:
        return self.answers[self.correct_answer_index]

    def answer_text(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.answers):
            return self.answers[index]
        return None


@dataclass(frozen=True)
class AnswerRecord:
    question_id: str
    selected_answer_index: int
    is_correct: bool
    timestamp: datetime


@dataclass
class UserSession:
    user_id: int
    start_time: datetime
    answers: List[AnswerRecord] = field(default_factory=list)
    current_question_index: int = 0
    is_active: bool = True
    aggregated: bool = False  # already folded into UserStatistics

    @property
    def answered_ids(self) -> Set[str]:
        return {a.question_id for a in self.answers}

    @property
    def total(self) -> int:
        return len(self.answers)

    @property
    def correct_count(self) -> int:
        return sum(1 for a in self.answers if a.is_correct)

    @property
    def incorrect_count(self) -> int:
        return self.total - self.correct_count


@dataclass
class UserStatistics:
    user_id: int
    total_questions: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    sessions: int = 0
    last_session_time: Optional[datetime] = None

    @classmethod
    def empty(cls, user_id: int) -> "UserStatistics":
        return cls(user_id=user_id)

    @property
    def accuracy(self) -> float:
        return self.correct_answers / self.total_questions if self.total_questions else 0.0
