import asyncio

from quizbot import handlers
from quizbot.keyboards import AnswerCallback
from quizbot.texts import (
    ALL_ANSWERED_TEXT,
    ALREADY_ACTIVE_TEXT,
    ALREADY_ANSWERED_TEXT,
    MAIN_MENU_TEXT,
    NO_ACTIVE_TEXT,
    QUESTION_NOT_FOUND_TEXT,
    STATS_RESET_TEXT,
    STOPPED_TITLE,
)

from tests.helpers import make_callback, make_message, sent_texts

USER = 42


def press_answer(engine, question_id, index):
    callback = make_callback(USER)
    data = AnswerCallback(question_id=question_id, index=index)
    asyncio.run(handlers.on_answer(callback, data, engine, question_delay=0))
    return callback


def test_start_command_shows_menu():
    message = make_message()
    asyncio.run(handlers.start(message))
    assert sent_texts(message) == [MAIN_MENU_TEXT]


def test_start_test_sends_first_question(engine):
    callback = make_callback(USER)
    asyncio.run(handlers.on_start_test(callback, engine))
    callback.answer.assert_awaited_once()
    assert engine.has_active_session(USER)
    (text,) = sent_texts(callback.message)
    assert "(№1)" in text
    markup = callback.message.answer.await_args.kwargs["reply_markup"]
    # four options plus the stop button
    assert len(markup.inline_keyboard) == 5


def test_start_test_refuses_when_active(engine):
    engine.start_session(USER)
    session = engine.get_session(USER)
    callback = make_callback(USER)
    asyncio.run(handlers.on_start_test(callback, engine))
    assert sent_texts(callback.message) == [ALREADY_ACTIVE_TEXT]
    assert engine.get_session(USER) is session


def test_stop_without_active_test(engine):
    message = make_message(USER)
    asyncio.run(handlers.cmd_stop(message, engine))
    assert sent_texts(message) == [NO_ACTIVE_TEXT, MAIN_MENU_TEXT]
    assert engine.get_statistics(USER).sessions == 0


def test_stop_shows_summary_and_folds(engine):
    engine.start_session(USER)
    engine.add_answer(USER, "q1", 0)
    callback = make_callback(USER)
    asyncio.run(handlers.on_stop_test(callback, engine))
    (text,) = sent_texts(callback.message)
    assert text.startswith(STOPPED_TITLE)
    assert engine.get_statistics(USER).sessions == 1

    # a second stop press only reports there is nothing to stop
    again = make_callback(USER)
    asyncio.run(handlers.on_stop_test(again, engine))
    assert sent_texts(again.message)[0] == NO_ACTIVE_TEXT
    assert engine.get_statistics(USER).sessions == 1


def test_answer_gives_feedback_and_next_question(engine):
    engine.start_session(USER)
    callback = press_answer(engine, "q2", 1)
    feedback, next_question = sent_texts(callback.message)
    assert feedback.startswith("✅ *Правильно!*")
    assert "(№2)" in next_question
    assert engine.get_session(USER).total == 1


def test_answer_without_session(engine):
    callback = press_answer(engine, "q1", 0)
    assert sent_texts(callback.message) == [NO_ACTIVE_TEXT, MAIN_MENU_TEXT]
    assert engine.get_session(USER) is None


def test_answer_to_unknown_question(engine):
    engine.start_session(USER)
    callback = press_answer(engine, "zzz", 0)
    assert sent_texts(callback.message) == [QUESTION_NOT_FOUND_TEXT]


def test_answer_twice_to_same_question(engine):
    engine.start_session(USER)
    press_answer(engine, "q1", 0)
    callback = press_answer(engine, "q1", 1)
    assert sent_texts(callback.message) == [ALREADY_ANSWERED_TEXT]
    assert engine.get_session(USER).total == 1


def test_last_answer_finishes_test_once(engine, questions):
    engine.start_session(USER)
    for q in questions[:-1]:
        engine.add_answer(USER, q.id, q.correct_answer_index)

    last = questions[-1]
    callback = press_answer(engine, last.id, 0)
    texts = sent_texts(callback.message)
    assert texts[1] == ALL_ANSWERED_TEXT
    assert "Правильных ответов: 3" in texts[2]
    assert texts[-1] == MAIN_MENU_TEXT

    stats = engine.get_statistics(USER)
    assert stats.sessions == 1
    assert stats.total_questions == 4
    assert stats.correct_answers == 3
    assert not engine.has_active_session(USER)


def test_show_and_reset_statistics(engine):
    engine.start_session(USER)
    engine.add_answer(USER, "q1", 0)
    engine.stop_session(USER)

    message = make_message(USER)
    asyncio.run(handlers.cmd_stats(message, engine))
    assert "Сессий: 1" in sent_texts(message)[0]

    callback = make_callback(USER)
    asyncio.run(handlers.on_reset_stats(callback, engine))
    assert sent_texts(callback.message) == [STATS_RESET_TEXT]
    assert engine.get_statistics(USER).sessions == 0


def test_handler_errors_are_reported(engine, monkeypatch):
    def boom(user_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, "get_statistics", boom)
    message = make_message(USER)
    asyncio.run(handlers.cmd_stats(message, engine))
    assert sent_texts(message) == [handlers.ERROR_TEXT]


def test_callback_without_accessible_message_is_ignored(engine):
    callback = make_callback(USER)
    callback.message = None
    asyncio.run(handlers.on_start_test(callback, engine))
    callback.answer.assert_awaited_once()
    assert not engine.has_active_session(USER)
