from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from .models import Question
from .texts import option_letter

START_TEST = "start_test"
STOP_TEST = "stop_test"
SHOW_STATS = "show_stats"
RESET_STATS = "reset_stats"
BACK_TO_MENU = "back_to_menu"


class AnswerCallback(CallbackData, prefix="answer"):
    question_id: str
    index: int


def main_menu_keyboard() -> InlineKeyboardMarkup:
    keyboard = InlineKeyboardBuilder()
    keyboard.button(text="▶️ Старт", callback_data=START_TEST)
    keyboard.button(text="⏹️ Стоп", callback_data=STOP_TEST)
    keyboard.button(text="📊 Статистика", callback_data=SHOW_STATS)
    keyboard.adjust(1)
    return keyboard.as_markup()


def question_keyboard(question: Question) -> InlineKeyboardMarkup:
    keyboard = InlineKeyboardBuilder()
    for index, answer in enumerate(question.answers):
        keyboard.button(
            text=f"{option_letter(index)}. {answer}",
            callback_data=AnswerCallback(question_id=question.id, index=index),
        )
    keyboard.button(text="⏹️ Остановить тест", callback_data=STOP_TEST)
    keyboard.adjust(1)
    return keyboard.as_markup()


def statistics_keyboard() -> InlineKeyboardMarkup:
    keyboard = InlineKeyboardBuilder()
    keyboard.button(text="🔄 Сбросить статистику", callback_data=RESET_STATS)
    keyboard.button(text="🏠 Главное меню", callback_data=BACK_TO_MENU)
    keyboard.adjust(1)
    return keyboard.as_markup()


def back_to_menu_keyboard() -> InlineKeyboardMarkup:
    keyboard = InlineKeyboardBuilder()
    keyboard.button(text="🏠 Главное меню", callback_data=BACK_TO_MENU)
    return keyboard.as_markup()
