"""
Bounds — Маркер бесконечной величины

Порядок элемента, порядок группы и экспонента бесконечной группы не
являются числами. Вместо перегрузки 0 (0 — валидный ответ в других
контекстах) возвращается отдельный вариант результата Unbounded.INFINITE.
"""

from enum import Enum
from typing import Final, Union


class Unbounded(str, Enum):
    """Вариант результата: величина бесконечна"""

    INFINITE = "infinite"


INFINITE: Final[Unbounded] = Unbounded.INFINITE

# Результат вычисления порядка / кардинальности / экспоненты
Count = Union[int, Unbounded]


def is_infinite(value: Count) -> bool:
    """True если value — маркер бесконечности."""
    return value is Unbounded.INFINITE
