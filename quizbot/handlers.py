from __future__ import annotations

import asyncio
from typing import Optional

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import CallbackQuery, InlineKeyboardMarkup, Message

from .config import NEXT_QUESTION_DELAY, logger
from .engine import SessionEngine
from .keyboards import (
    BACK_TO_MENU,
    RESET_STATS,
    SHOW_STATS,
    START_TEST,
    STOP_TEST,
    AnswerCallback,
    back_to_menu_keyboard,
    main_menu_keyboard,
    question_keyboard,
    statistics_keyboard,
)
from .models import Question, UserSession
from .recommendations import RecommendationContext, build_recommendation
from .texts import (
    ALL_ANSWERED_TEXT,
    ALREADY_ACTIVE_TEXT,
    ALREADY_ANSWERED_TEXT,
    ERROR_TEXT,
    FINISHED_TITLE,
    HELP_TEXT,
    MAIN_MENU_TEXT,
    NO_ACTIVE_TEXT,
    NO_QUESTION_TEXT,
    QUESTION_NOT_FOUND_TEXT,
    STATS_RESET_TEXT,
    STOPPED_TITLE,
    answer_feedback_text,
    question_text,
    session_summary_text,
    statistics_text,
)

router = Router()


async def _send(message: Message, text: str, reply_markup: Optional[InlineKeyboardMarkup] = None) -> None:
    await message.answer(text, parse_mode="Markdown", reply_markup=reply_markup)


def _callback_message(callback: CallbackQuery) -> Optional[Message]:
    message_obj = callback.message
    if not isinstance(message_obj, Message):
        return None
    return message_obj


async def show_main_menu(message: Message) -> None:
    await _send(message, MAIN_MENU_TEXT, main_menu_keyboard())


async def send_question(message: Message, question: Question, number: Optional[int] = None) -> None:
    await _send(message, question_text(question, number), question_keyboard(question))


def _summary(engine: SessionEngine, session: UserSession, title: str = STOPPED_TITLE) -> str:
    stats = engine.get_statistics(session.user_id)
    recommendation = build_recommendation(
        RecommendationContext(
            total=session.total,
            correct=session.correct_count,
            wrong=session.incorrect_count,
            remaining=max(0, len(engine.repository) - session.total),
        )
    )
    return session_summary_text(session, stats, recommendation, title=title)


async def start_test(message: Message, user_id: int, engine: SessionEngine) -> None:
    if engine.has_active_session(user_id):
        await message.answer(ALREADY_ACTIVE_TEXT)
        return

    engine.start_session(user_id)
    question = engine.get_next_question(user_id)
    if not question:
        await message.answer(NO_QUESTION_TEXT)
        return
    await send_question(message, question, number=1)


async def stop_test(message: Message, user_id: int, engine: SessionEngine) -> None:
    if not engine.has_active_session(user_id):
        await message.answer(NO_ACTIVE_TEXT)
        await show_main_menu(message)
        return

    session = engine.stop_session(user_id)
    if session is None:
        return
    await _send(message, _summary(engine, session), back_to_menu_keyboard())


async def show_statistics(message: Message, user_id: int, engine: SessionEngine) -> None:
    stats = engine.get_statistics(user_id)
    await _send(message, statistics_text(stats), statistics_keyboard())


async def reset_statistics(message: Message, user_id: int, engine: SessionEngine) -> None:
    engine.reset_statistics(user_id)
    await message.answer(STATS_RESET_TEXT, reply_markup=back_to_menu_keyboard())


async def handle_answer(
    message: Message,
    user_id: int,
    engine: SessionEngine,
    question_id: str,
    answer_index: int,
    delay: float = NEXT_QUESTION_DELAY,
) -> None:
    record = engine.submit_answer(user_id, question_id, answer_index)
    question = engine.repository.get_by_id(question_id)
    if record is None:
        if not engine.has_active_session(user_id):
            await message.answer(NO_ACTIVE_TEXT)
            await show_main_menu(message)
        elif question is None:
            await message.answer(QUESTION_NOT_FOUND_TEXT)
        else:
            await message.answer(ALREADY_ANSWERED_TEXT)
        return
    if question is None:
        return

    await _send(message, answer_feedback_text(question, answer_index, record.is_correct))

    next_question = engine.get_next_question(user_id)
    if next_question:
        await asyncio.sleep(delay)
        session = engine.get_session(user_id)
        number = session.total + 1 if session else None
        await send_question(message, next_question, number=number)
        return

    # exhaustion already stopped the session; stop_session only hands it back
    await message.answer(ALL_ANSWERED_TEXT)
    session = engine.stop_session(user_id)
    if session is not None:
        await _send(message, _summary(engine, session, title=FINISHED_TITLE))
    await show_main_menu(message)


@router.message(CommandStart())
async def start(message: Message) -> None:
    try:
        await show_main_menu(message)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при обработке команды /start")
        await message.answer(ERROR_TEXT)


@router.message(Command("stop"))
async def cmd_stop(message: Message, engine: SessionEngine) -> None:
    user = message.from_user
    if not user:
        return
    try:
        async with engine.user_lock(user.id):
            await stop_test(message, user.id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при обработке команды /stop")
        await message.answer(ERROR_TEXT)


@router.message(Command("stats"))
async def cmd_stats(message: Message, engine: SessionEngine) -> None:
    user = message.from_user
    if not user:
        return
    try:
        await show_statistics(message, user.id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при обработке команды /stats")
        await message.answer(ERROR_TEXT)


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await _send(message, HELP_TEXT)


@router.callback_query(F.data == START_TEST)
async def on_start_test(callback: CallbackQuery, engine: SessionEngine) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if not message_obj:
        return
    user_id = callback.from_user.id
    try:
        async with engine.user_lock(user_id):
            await start_test(message_obj, user_id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при запуске теста")
        await message_obj.answer(ERROR_TEXT)


@router.callback_query(F.data == STOP_TEST)
async def on_stop_test(callback: CallbackQuery, engine: SessionEngine) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if not message_obj:
        return
    user_id = callback.from_user.id
    try:
        async with engine.user_lock(user_id):
            await stop_test(message_obj, user_id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при остановке теста")
        await message_obj.answer(ERROR_TEXT)


@router.callback_query(F.data == SHOW_STATS)
async def on_show_stats(callback: CallbackQuery, engine: SessionEngine) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if not message_obj:
        return
    try:
        await show_statistics(message_obj, callback.from_user.id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при показе статистики")
        await message_obj.answer(ERROR_TEXT)


@router.callback_query(F.data == RESET_STATS)
async def on_reset_stats(callback: CallbackQuery, engine: SessionEngine) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if not message_obj:
        return
    user_id = callback.from_user.id
    try:
        async with engine.user_lock(user_id):
            await reset_statistics(message_obj, user_id, engine)
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при сбросе статистики")
        await message_obj.answer(ERROR_TEXT)


@router.callback_query(F.data == BACK_TO_MENU)
async def on_back_to_menu(callback: CallbackQuery) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if message_obj:
        await show_main_menu(message_obj)


@router.callback_query(AnswerCallback.filter())
async def on_answer(
    callback: CallbackQuery,
    callback_data: AnswerCallback,
    engine: SessionEngine,
    question_delay: float = NEXT_QUESTION_DELAY,
) -> None:
    await callback.answer()
    message_obj = _callback_message(callback)
    if not message_obj:
        return
    user_id = callback.from_user.id
    try:
        async with engine.user_lock(user_id):
            await handle_answer(
                message_obj,
                user_id,
                engine,
                callback_data.question_id,
                callback_data.index,
                delay=question_delay,
            )
    except Exception:  # noqa: BLE001
        logger.exception("Ошибка при обработке ответа")
        await message_obj.answer(ERROR_TEXT)
