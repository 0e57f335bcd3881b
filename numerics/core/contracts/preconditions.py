"""
Preconditions — Fail-fast проверки контрактов вызывающей стороны

Два класса ошибок в numerics:
1. Floating-point domain errors (sqrt(-1), log(0)) НЕ являются исключениями:
   функции возвращают NaN/inf (см. numerics.core.precision).
2. Нарушение precondition (программная ошибка вызывающей стороны, например
   индекс вне документированного диапазона) — немедленный отказ.

Ожидаемые отказы (точная конверсия int, polar-конструктор) возвращают None
и сюда НЕ относятся.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. PreconditionViolation никогда не перехватывается внутри библиотеки
2. Продолжение после нарушенного инварианта недопустимо (риск тихо неверных чисел)
"""

import logging

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(AssertionError):
    """
    Нарушение документированного precondition.

    Наследует AssertionError: это программная ошибка, а не ожидаемый
    результат вычисления. Библиотечный код не перехватывает это исключение.
    """

    pass


# =============================================================================
# CHECKS
# =============================================================================


def precondition(condition: bool, message: str) -> None:
    """
    Проверка precondition с немедленным отказом.

    Args:
        condition: Условие, которое обязано выполняться
        message: Описание нарушения (для лога и исключения)

    Raises:
        PreconditionViolation: если condition ложно

    Examples:
        >>> precondition(0 <= 1 < 4, "k must be in [0, n)")
        >>> precondition(False, "k must be in [0, n)")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        PreconditionViolation: k must be in [0, n)
    """
    if condition:
        return

    logger.error("precondition violated: %s", message)
    raise PreconditionViolation(message)


def precondition_in_range(value: int, name: str, lower: int, upper: int) -> None:
    """
    Проверка, что целое значение лежит в полуинтервале [lower, upper).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения)
        lower: Нижняя граница (включительно)
        upper: Верхняя граница (исключительно)

    Raises:
        PreconditionViolation: если value вне [lower, upper)
    """
    precondition(
        lower <= value < upper,
        f"{name} must be in [{lower}, {upper}), got {value}",
    )
