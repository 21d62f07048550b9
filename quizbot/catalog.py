from typing import List

from .models import Question

# Ids must stay free of ":" (callback data separator) and short enough for
# Telegram's 64-byte callback limit.
QUESTIONS: List[Question] = [
    Question(
        id="r1",
        category="React",
        question="Что произойдёт, если вызвать setState с тем же значением, что уже хранится в состоянии (useState)?",
        answers=(
            "Компонент всегда перерисуется",
            "Будет выброшено исключение",
            "Состояние сбросится к начальному",
            "React может пропустить перерисовку, сравнив значения через Object.is",
        ),
        correct_answer_index=3,
        explanation="React сравнивает новое и старое значение через Object.is и при совпадении может не перерисовывать компонент и его потомков.",
    ),
    Question(
        id="r2",
        category="React",
        question="Зачем нужен атрибут key у элементов списка?",
        answers=(
            "Чтобы React сопоставлял элементы между рендерами и сохранял их состояние",
            "Для стилизации элементов",
            "Для доступа к элементу из родителя",
            "Это обязательный атрибут любого JSX-элемента",
        ),
        correct_answer_index=0,
        explanation="key помогает алгоритму согласования понять, какой элемент добавлен, удалён или перемещён. Индекс массива в качестве key ломает это при перестановках.",
    ),
    Question(
        id="r3",
        category="React",
        question="Когда выполняется функция очистки, возвращённая из useEffect?",
        answers=(
            "Только при размонтировании компонента",
            "Сразу после рендера",
            "Перед каждым повторным запуском эффекта и при размонтировании",
            "Никогда, если массив зависимостей пуст",
        ),
        correct_answer_index=2,
        explanation="Очистка предыдущего эффекта выполняется перед запуском следующего и при размонтировании. С пустым массивом зависимостей это происходит только при размонтировании.",
    ),
    Question(
        id="r4",
        category="React",
        question="Чем useLayoutEffect отличается от useEffect?",
        answers=(
            "useLayoutEffect работает только на сервере",
            "useLayoutEffect не принимает массив зависимостей",
            "Разницы нет, это псевдонимы",
            "useLayoutEffect выполняется синхронно после изменений DOM, до отрисовки браузером",
        ),
        correct_answer_index=3,
        explanation="useLayoutEffect блокирует отрисовку, поэтому подходит для измерений DOM и синхронных правок разметки, но злоупотреблять им не стоит.",
    ),
    Question(
        id="r5",
        category="React",
        question="Что делает React.memo?",
        answers=(
            "Кэширует результат вычисления внутри компонента",
            "Пропускает повторный рендер компонента при поверхностно равных props",
            "Запоминает состояние между монтированиями",
            "Создаёт мемоизированный колбэк",
        ),
        correct_answer_index=1,
        explanation="React.memo оборачивает компонент и сравнивает props поверхностно. Для значений внутри компонента используют useMemo, для функций useCallback.",
    ),
    Question(
        id="r6",
        category="React",
        question="Какую проблему решает Context API?",
        answers=(
            "Избавляет от пробрасывания props через много уровней дерева",
            "Ускоряет рендеринг списков",
            "Заменяет серверное состояние",
            "Позволяет писать компоненты без JSX",
        ),
        correct_answer_index=0,
        explanation="Контекст передаёт значение всем потомкам провайдера. При изменении значения перерисовываются все потребители, поэтому часто меняющиеся данные лучше дробить по контекстам.",
    ),
    Question(
        id="r7",
        category="React",
        question="Что такое конкурентный рендеринг (Concurrent Rendering) в React 18?",
        answers=(
            "Рендеринг в нескольких Web Worker",
            "Параллельная загрузка бандлов",
            "Серверный рендеринг в потоках",
            "Возможность прерывать и приоритизировать рендеринг, например через startTransition",
        ),
        correct_answer_index=3,
        explanation="React 18 умеет откладывать несрочные обновления (startTransition, useDeferredValue), не блокируя ввод пользователя.",
    ),
    Question(
        id="js1",
        category="JavaScript",
        question="В каком порядке выполнятся setTimeout(cb, 0), Promise.resolve().then(cb) и синхронный console.log?",
        answers=(
            "setTimeout, then, console.log",
            "console.log, then, setTimeout",
            "then, console.log, setTimeout",
            "console.log, setTimeout, then",
        ),
        correct_answer_index=1,
        explanation="Сначала выполняется синхронный код, затем очередь микрозадач (промисы), и только потом макрозадачи вроде setTimeout.",
    ),
    Question(
        id="js2",
        category="JavaScript",
        question="Что такое замыкание?",
        answers=(
            "Функция вместе с лексическим окружением, в котором она была создана",
            "Способ закрыть доступ к объекту через Object.freeze",
            "Синоним стрелочной функции",
            "Функция, вызванная сразу после объявления",
        ),
        correct_answer_index=0,
        explanation="Функция сохраняет доступ к переменным внешней области видимости даже после того, как внешняя функция завершилась.",
    ),
    Question(
        id="js3",
        category="JavaScript",
        question="Чем let отличается от var?",
        answers=(
            "let нельзя переприсвоить",
            "var работает только в строгом режиме",
            "let имеет блочную область видимости и находится во временной мёртвой зоне до объявления",
            "Ничем, это синонимы",
        ),
        correct_answer_index=2,
        explanation="var имеет функциональную область видимости и поднимается со значением undefined. Обращение к let до объявления выбрасывает ReferenceError.",
    ),
    Question(
        id="js4",
        category="JavaScript",
        question="Что вернёт выражение typeof null?",
        answers=("\"null\"", "\"undefined\"", "\"object\"", "\"number\""),
        correct_answer_index=2,
        explanation="Это историческая ошибка языка, сохранённая ради обратной совместимости.",
    ),
    Question(
        id="ts1",
        category="TypeScript",
        question="Чем тип unknown отличается от any?",
        answers=(
            "Ничем",
            "unknown можно присвоить переменной любого типа",
            "any нельзя использовать в strict-режиме",
            "С unknown нельзя работать без сужения типа, any отключает проверки",
        ),
        correct_answer_index=3,
        explanation="unknown безопасен: прежде чем использовать значение, его нужно сузить проверкой typeof, instanceof или пользовательским type guard.",
    ),
    Question(
        id="ts2",
        category="TypeScript",
        question="Что делает утилитный тип Partial<T>?",
        answers=(
            "Делает все свойства T необязательными",
            "Делает все свойства T доступными только для чтения",
            "Удаляет из T свойства со значением undefined",
            "Выбирает из T часть свойств",
        ),
        correct_answer_index=0,
        explanation="Partial<T> добавляет модификатор ? ко всем свойствам. Для выбора части свойств служит Pick, для readonly служит Readonly.",
    ),
    Question(
        id="perf1",
        category="Производительность",
        question="Какая метрика Core Web Vitals отвечает за визуальную стабильность страницы?",
        answers=("LCP", "INP", "CLS", "TTFB"),
        correct_answer_index=2,
        explanation="CLS (Cumulative Layout Shift) измеряет неожиданные сдвиги макета. LCP отвечает за скорость загрузки, INP за отзывчивость.",
    ),
    Question(
        id="perf2",
        category="Производительность",
        question="Зачем нужен code splitting через React.lazy и динамический import()?",
        answers=(
            "Чтобы ускорить работу сборщика",
            "Чтобы уменьшить начальный бандл и грузить код по требованию",
            "Чтобы обойтись без Suspense",
            "Чтобы включить серверный рендеринг",
        ),
        correct_answer_index=1,
        explanation="Ленивая загрузка откладывает загрузку редко используемых частей приложения. Компонент, загружаемый лениво, оборачивают в Suspense с fallback.",
    ),
    Question(
        id="web1",
        category="Браузер",
        question="Какой механизм браузера ограничивает запросы к другому источнику (origin)?",
        answers=("CSP", "CORS и Same-Origin Policy", "HSTS", "SRI"),
        correct_answer_index=1,
        explanation="Same-Origin Policy запрещает чтение ответов другого источника, а CORS позволяет серверу явно разрешить такие запросы заголовками Access-Control-Allow.",
    ),
]
