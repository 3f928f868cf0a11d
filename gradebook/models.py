# gradebook/models.py
"""Модуль, определяющий основную модель данных - Student."""
import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Tuple

from .config import SUBJECTS


def round2(value: float) -> float:
    """Округляет до двух знаков (половина - вверх, по точному значению числа)."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """8.0 -> '8', 0.5 -> '0.5'. Без потери точности: строка разбирается обратно в то же число."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def new_student_id() -> str:
    return uuid.uuid4().hex


class Student:
    """Представляет студента: имя, пять оценок по предметам и посещаемость.

    Конструктор не проверяет данные: нормализация выполняется в io_utils,
    а проверка имени - в хранилище (store) при сохранении формы.
    """
    def __init__(self, name: str, grades: Sequence[float], attendance: float,
                 student_id: Optional[str] = None):
        self.id = student_id or new_student_id()
        self.name = name
        self.grades: List[float] = list(grades)
        self.attendance = attendance

    @property
    def average(self) -> float:
        """Средний балл студента с округлением до сотых. 0.0, если оценок нет."""
        if not self.grades:
            return 0.0
        return round2(sum(self.grades) / len(self.grades))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "grades": list(self.grades),
            "attendance": self.attendance,
        }

    def to_form(self) -> Tuple[str, List[str], str]:
        """Значения для предзаполнения формы редактирования."""
        return (
            self.name,
            [format_number(g) for g in self.grades],
            format_number(self.attendance),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self.id, self.name, self.grades, self.attendance) == \
            (other.id, other.name, other.grades, other.attendance)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"Student(id='{self.id}', name='{self.name}', "
                f"average={self.average:.2f}, attendance={self.attendance})")

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        grades_str = " | ".join(
            f"{subject}: {format_number(g)}" for subject, g in zip(SUBJECTS, self.grades)
        )
        return (f"Имя: {self.name:<20} | Средний балл: {self.average:<5.2f} | "
                f"Посещаемость: {format_number(self.attendance)}% | Оценки: {grades_str}")
