from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RecommendationContext:
    total: int
    correct: int
    wrong: int
    remaining: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


def build_recommendation(context: RecommendationContext) -> str:
    if not context.total:
        return "Вы не ответили ни на один вопрос. Начните новый тест, когда будете готовы."

    accuracy = context.accuracy
    volume_hint = (
        f"В каталоге осталось ещё {context.remaining} непройденных вопросов"
        if context.remaining
        else "Вы прошли весь каталог вопросов"
    )

    if accuracy >= 0.85:
        return (
            "Отличный результат! Вы уверенно ориентируетесь в теме. "
            f"{volume_hint}, попробуйте пройти тест ещё раз без ошибок."
        )
    if accuracy >= 0.5:
        return (
            "Хороший прогресс. Перечитайте объяснения к вопросам, где возникли ошибки, и повторите тест. "
            f"{volume_hint}."
        )
    return (
        "Материал дался непросто. Разберите объяснения к каждому вопросу, повторите базовые темы "
        "и попробуйте ещё раз."
    )
