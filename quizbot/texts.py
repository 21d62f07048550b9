from __future__ import annotations

from typing import List, Optional

from .models import Question, UserSession, UserStatistics

SEPARATOR = "━" * 32

MAIN_MENU_TEXT = (
    "🎯 *Бот для подготовки к собеседованиям*\n"
    "*Senior Frontend React Developer*\n\n"
    "Выберите действие:"
)

HELP_TEXT = (
    "📚 *Помощь*\n\n"
    "*Команды:*\n"
    "/start - Главное меню\n"
    "/stop - Остановить тест\n"
    "/stats - Показать статистику\n"
    "/help - Показать эту справку\n\n"
    "*Как использовать:*\n"
    "1. Нажмите \"Старт\" для начала тестирования\n"
    "2. Отвечайте на вопросы, выбирая один из 4 вариантов\n"
    "3. В любой момент можно остановить тест кнопкой \"Стоп\"\n"
    "4. Просматривайте статистику в разделе \"Статистика\"\n\n"
    "*Особенности:*\n"
    "• Каждый вопрос имеет 4 варианта ответа\n"
    "• Только один ответ правильный\n"
    "• Статистика сохраняется между сессиями\n"
    "• Вопросы выбираются случайно без повторений"
)

ERROR_TEXT = "Произошла ошибка. Попробуйте еще раз."
ALREADY_ACTIVE_TEXT = "⚠️ У вас уже есть активный тест. Завершите его или нажмите \"Стоп\" для остановки."
NO_ACTIVE_TEXT = "ℹ️ У вас нет активного теста."
NO_QUESTION_TEXT = "❌ Не удалось получить вопрос. Попробуйте еще раз."
QUESTION_NOT_FOUND_TEXT = "❌ Ошибка: вопрос не найден."
ALREADY_ANSWERED_TEXT = "ℹ️ На этот вопрос вы уже ответили."
ALL_ANSWERED_TEXT = "🎉 Вы ответили на все доступные вопросы!"
STATS_RESET_TEXT = "✅ Статистика сброшена."
STOPPED_TITLE = "⏹️ *Тест остановлен*"
FINISHED_TITLE = "🏁 *Тест завершён*"


def option_letter(index: int) -> str:
    return chr(ord("A") + index)


def format_percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def question_text(question: Question, number: Optional[int] = None) -> str:
    header = f"📝 *Вопрос {question.category}*"
    if number is not None:
        header += f" (№{number})"
    return f"{header}\n\n{question.question}\n\nВыберите правильный ответ:"


def answer_feedback_text(question: Question, selected_index: int, is_correct: bool) -> str:
    lines: List[str] = [
        "✅ *Правильно!*" if is_correct else "❌ *Неправильно*",
        SEPARATOR,
        "",
        "📋 *Все варианты ответов:*",
        "",
    ]
    for index, answer in enumerate(question.answers):
        letter = option_letter(index)
        if index == question.correct_answer_index:
            lines.append(f"✅ *{letter}.* {answer} ← *ПРАВИЛЬНЫЙ ОТВЕТ*")
        elif index == selected_index and not is_correct:
            lines.append(f"❌ *{letter}.* {answer} ← *Ваш ответ*")
        else:
            lines.append(f"⚪ *{letter}.* {answer}")
        lines.append("")

    lines.extend([SEPARATOR, ""])
    if not is_correct:
        lines.extend([f"❌ *Ваш ответ:* {question.answer_text(selected_index) or '-'}", ""])
    lines.append(f"✅ *Правильный ответ:* {question.correct_answer}")
    if question.explanation:
        lines.extend(["", f"💡 *Объяснение:*\n\n{question.explanation}"])
    return "\n".join(lines)


def _statistics_lines(stats: UserStatistics) -> List[str]:
    lines = [
        f"✅ Правильных ответов: {stats.correct_answers}",
        f"❌ Неправильных ответов: {stats.incorrect_answers}",
        f"📊 Всего вопросов: {stats.total_questions}",
        f"📈 Точность: {format_percent(stats.accuracy)}",
        f"🎯 Сессий: {stats.sessions}",
    ]
    if stats.last_session_time:
        lines.append(f"🕐 Последняя сессия: {stats.last_session_time.strftime('%d.%m.%Y, %H:%M:%S')} UTC")
    return lines


def statistics_text(stats: UserStatistics) -> str:
    return "\n".join(["📊 *Ваша статистика*", "", "*Общая статистика:*", *_statistics_lines(stats)])


def session_summary_text(
    session: UserSession,
    stats: UserStatistics,
    recommendation: Optional[str] = None,
    title: str = STOPPED_TITLE,
) -> str:
    lines = [
        title,
        "",
        "*Результаты текущей сессии:*",
        f"✅ Правильных ответов: {session.correct_count}",
        f"❌ Неправильных ответов: {session.incorrect_count}",
        f"📊 Всего вопросов: {session.total}",
        "",
        "*Общая статистика:*",
        *_statistics_lines(stats),
    ]
    if recommendation:
        lines.extend(["", f"💡 {recommendation}"])
    return "\n".join(lines)
