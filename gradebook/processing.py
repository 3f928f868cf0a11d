# gradebook/processing.py
"""Модуль статистики по группе: средние баллы, отбор студентов по условиям."""
from typing import Any, Dict, List, Sequence

from .config import LOW_ATTENDANCE_THRESHOLD, SUBJECT_COUNT
from .models import Student, round2


def mean(values: Sequence[float]) -> float:
    """Среднее арифметическое. Для пустой последовательности - 0."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def student_average(student: Student) -> float:
    """Средний балл студента по всем предметам, округленный до сотых."""
    return round2(mean(student.grades))


def per_subject_class_average(students: Sequence[Student]) -> List[float]:
    """Средний балл группы по каждому предмету. Для пустой группы - нули."""
    if not students:
        return [0.0] * SUBJECT_COUNT
    return [
        round2(mean([s.grades[i] if i < len(s.grades) else 0 for s in students]))
        for i in range(SUBJECT_COUNT)
    ]


def overall_class_average(students: Sequence[Student]) -> float:
    """Среднее из средних баллов студентов."""
    if not students:
        return 0.0
    return round2(mean([student_average(s) for s in students]))


def above_average_students(students: Sequence[Student]) -> List[Student]:
    """Студенты, чей средний балл строго выше среднего по группе.

    Средний балл группы считается вместе с самим студентом.
    """
    class_avg = overall_class_average(students)
    return [s for s in students if student_average(s) > class_avg]


def low_attendance_students(students: Sequence[Student]) -> List[Student]:
    """Студенты с посещаемостью строго ниже порога (75%)."""
    return [s for s in students if s.attendance < LOW_ATTENDANCE_THRESHOLD]


def get_group_statistics(students: Sequence[Student]) -> Dict[str, Any]:
    """Собирает всю статистику по группе для одного экрана."""
    return {
        "total_students": len(students),
        "per_subject": per_subject_class_average(students),
        "overall_average": overall_class_average(students),
        "above_average": above_average_students(students),
        "low_attendance": low_attendance_students(students),
    }
