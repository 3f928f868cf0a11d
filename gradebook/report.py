# gradebook/report.py
"""Табличное представление журнала (pandas) для вывода в консоль."""
from typing import Sequence

import pandas as pd

from .config import LOW_ATTENDANCE_THRESHOLD, SUBJECTS
from .models import Student
from .processing import overall_class_average, per_subject_class_average, student_average


def roster_frame(students: Sequence[Student]) -> pd.DataFrame:
    """Таблица студентов: оценки по предметам, средний балл, посещаемость и отметки.

    Нумерация строк начинается с 1, как в меню.
    """
    columns = ["name", *SUBJECTS, "average", "attendance", "above_average", "low_attendance"]
    class_avg = overall_class_average(students)

    rows = []
    for s in students:
        avg = student_average(s)
        rows.append([
            s.name,
            *s.grades,
            avg,
            s.attendance,
            avg > class_avg,
            s.attendance < LOW_ATTENDANCE_THRESHOLD,
        ])

    df = pd.DataFrame(rows, columns=columns)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1)
    return df


def subject_frame(students: Sequence[Student]) -> pd.DataFrame:
    """Средний балл группы по каждому предмету."""
    df = pd.DataFrame({
        "subject": list(SUBJECTS),
        "class_average": per_subject_class_average(students),
    })
    return df.set_index("subject")
