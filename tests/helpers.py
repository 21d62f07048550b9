from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from aiogram.types import CallbackQuery, Message

from quizbot.models import Question


def make_question(qid: str, category: str = "React", correct: int = 0) -> Question:
    return Question(
        id=qid,
        category=category,
        question=f"Вопрос {qid}?",
        answers=(f"{qid}-a", f"{qid}-b", f"{qid}-c", f"{qid}-d"),
        correct_answer_index=correct,
        explanation=f"Пояснение к {qid}",
    )


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def make_message(user_id: int = 42):
    message = MagicMock(spec=Message)
    message.answer = AsyncMock()
    message.from_user = MagicMock(id=user_id)
    return message


def make_callback(user_id: int = 42, data: str = ""):
    callback = MagicMock(spec=CallbackQuery)
    callback.answer = AsyncMock()
    callback.data = data
    callback.from_user = MagicMock(id=user_id)
    callback.message = make_message(user_id)
    return callback


def sent_texts(message) -> list:
    return [c.args[0] for c in message.answer.await_args_list]
