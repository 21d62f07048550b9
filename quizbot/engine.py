"""Session and statistics engine.

Tracks one quiz attempt per user, picks the next unseen question, scores
answers and folds finished sessions into lifetime statistics. Every
operation is total: unknown users, sessions or questions give ``None`` or
``False`` instead of raising.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional

from .config import logger
from .models import ANSWERS_PER_QUESTION, AnswerRecord, Question, UserSession, UserStatistics
from .repository import QuestionRepository
from .storage import QuizStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionEngine:
    def __init__(
        self,
        repository: QuestionRepository,
        store: QuizStore,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repository = repository
        self.store = store
        self._clock = clock or _utcnow
        self._rng = rng or random.Random()

    def start_session(self, user_id: int) -> UserSession:
        """Begin a new attempt, replacing whatever session the user had.

        Refusing to start over an active session is up to the caller,
        see :meth:`has_active_session`.
        """
        session = UserSession(user_id=user_id, start_time=self._clock())
        self.store.put_session(session)
        logger.info("Пользователь %s начал тест", user_id)
        return session

    def get_session(self, user_id: int) -> Optional[UserSession]:
        return self.store.get_session(user_id)

    def has_active_session(self, user_id: int) -> bool:
        session = self.store.get_session(user_id)
        return bool(session and session.is_active)

    def user_lock(self, user_id: int) -> asyncio.Lock:
        return self.store.lock_for(user_id)

    def get_next_question(self, user_id: int) -> Optional[Question]:
        """Uniform pick among questions not yet answered in the active session.

        Exhaustion stops the session and returns ``None``. Picking does not
        count as answering.
        """
        session = self.store.get_session(user_id)
        if not session or not session.is_active:
            return None

        answered = session.answered_ids
        available = [q for q in self.repository.get_all() if q.id not in answered]
        if not available:
            logger.info("Пользователь %s ответил на все вопросы каталога", user_id)
            self.stop_session(user_id)
            return None
        return self._rng.choice(available)

    def submit_answer(self, user_id: int, question_id: str, selected_index: int) -> Optional[AnswerRecord]:
        """Record an answer and return it, or ``None`` if nothing was recorded."""
        session = self.store.get_session(user_id)
        if not session or not session.is_active:
            return None
        if self.repository.get_by_id(question_id) is None:
            logger.debug("Пользователь %s: неизвестный вопрос %s", user_id, question_id)
            return None
        if question_id in session.answered_ids:
            logger.debug("Пользователь %s: повторный ответ на вопрос %s", user_id, question_id)
            return None
        if not 0 <= selected_index < ANSWERS_PER_QUESTION:
            return None

        record = AnswerRecord(
            question_id=question_id,
            selected_answer_index=selected_index,
            is_correct=self.repository.check_answer(question_id, selected_index),
            timestamp=self._clock(),
        )
        session.answers.append(record)
        session.current_question_index += 1
        return record

    def add_answer(self, user_id: int, question_id: str, selected_index: int) -> bool:
        record = self.submit_answer(user_id, question_id, selected_index)
        return bool(record and record.is_correct)

    def stop_session(self, user_id: int) -> Optional[UserSession]:
        session = self.store.get_session(user_id)
        if session is None:
            return None
        session.is_active = False
        if not session.aggregated:
            self._fold(session)
            session.aggregated = True
        return session

    def _fold(self, session: UserSession) -> None:
        stats = self.store.get_statistics(session.user_id) or UserStatistics.empty(session.user_id)
        correct = session.correct_count
        incorrect = session.incorrect_count
        stats.total_questions += correct + incorrect
        stats.correct_answers += correct
        stats.incorrect_answers += incorrect
        stats.sessions += 1
        stats.last_session_time = self._clock()
        self.store.put_statistics(stats)
        logger.info(
            "Пользователь %s завершил сессию: %s/%s верно, всего сессий %s",
            session.user_id,
            correct,
            correct + incorrect,
            stats.sessions,
        )

    def get_statistics(self, user_id: int) -> UserStatistics:
        stats = self.store.get_statistics(user_id)
        if stats is None:
            return UserStatistics.empty(user_id)
        return replace(stats)

    def reset_statistics(self, user_id: int) -> bool:
        removed = self.store.delete_statistics(user_id)
        if removed:
            logger.info("Статистика пользователя %s сброшена", user_id)
        return removed
