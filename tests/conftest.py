import random

import pytest

from quizbot.engine import SessionEngine
from quizbot.repository import QuestionRepository
from quizbot.storage import QuizStore

from tests.helpers import FakeClock, make_question


@pytest.fixture
def questions():
    return [
        make_question("q1", "React", correct=0),
        make_question("q2", "React", correct=1),
        make_question("q3", "JavaScript", correct=2),
        make_question("q4", "TypeScript", correct=3),
    ]


@pytest.fixture
def repository(questions):
    return QuestionRepository(questions, rng=random.Random(7))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(repository, clock):
    return SessionEngine(repository, QuizStore(), clock=clock, rng=random.Random(11))
