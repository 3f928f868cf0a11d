# gradebook/io_utils.py
"""Разбор пользовательского ввода, нормализация записей и (де)сериализация списка студентов."""
import json
import logging
import math
from typing import Any, Iterable, List, Sequence

from .config import (
    ATTENDANCE_MAX, ATTENDANCE_MIN, GRADE_MAX, GRADE_MIN, SCHEMA_VERSION, SUBJECT_COUNT,
)
from .errors import PersistenceReadError
from .models import Student

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def parse_number(text: Any) -> float:
    """Превращает строку из формы в число.

    Разделителем дробной части может быть как '.', так и ','.
    Пустая строка, мусор, inf и nan дают 0.0.
    """
    if text is None:
        return 0.0
    cleaned = str(text).strip().replace(",", ".", 1)
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        number = float(cleaned)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_number(value: Any) -> float:
    """Число из сохраненных данных: только конечные int/float, иначе 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # Целое вне диапазона float (например, 10**400) - как бесконечность
        return 0
    return value if finite else 0


def parse_grade(text: Any) -> float:
    return float(clamp(parse_number(text), GRADE_MIN, GRADE_MAX))


def parse_attendance(text: Any) -> float:
    return float(clamp(parse_number(text), ATTENDANCE_MIN, ATTENDANCE_MAX))


def fit_grades(grades: Iterable[float]) -> List[float]:
    """Обрезает список до SUBJECT_COUNT элементов или дополняет нулями в конце."""
    fitted = list(grades)[:SUBJECT_COUNT]
    fitted.extend([0] * (SUBJECT_COUNT - len(fitted)))
    return fitted


def parse_grades(texts: Sequence[Any]) -> List[float]:
    """Оценки из полей формы: разбор, ограничение диапазоном, ровно пять штук."""
    return fit_grades(parse_grade(t) for t in texts)


def normalize_record(raw: dict) -> Student:
    """Приводит сохраненную запись произвольного вида к строгой форме Student."""
    name = raw.get("name")
    if not isinstance(name, str):
        name = ""

    raw_grades = raw.get("grades")
    if isinstance(raw_grades, list):
        grades = fit_grades(clamp(coerce_number(g), GRADE_MIN, GRADE_MAX) for g in raw_grades)
    else:
        grades = [0] * SUBJECT_COUNT

    attendance = clamp(coerce_number(raw.get("attendance")), ATTENDANCE_MIN, ATTENDANCE_MAX)

    student_id = raw.get("id")
    if not isinstance(student_id, str) or not student_id:
        student_id = None  # Старые записи (версия 1) получают новый ID

    return Student(name, grades, attendance, student_id=student_id)


def _normalize_records(records: list) -> List[Student]:
    students = []
    for position, raw in enumerate(records):
        if not isinstance(raw, dict):
            logger.warning(f"Запись #{position} не является объектом и пропущена: {raw!r}")
            continue
        students.append(normalize_record(raw))
    return students


def decode_roster(blob: str) -> List[Student]:
    """Разбирает сохраненный JSON-блоб в список студентов.

    Версия 1 - голый JSON-массив записей, версия 2 - объект
    {"version": 2, "students": [...]}. Все остальное - PersistenceReadError.
    """
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise PersistenceReadError(f"Не удалось разобрать сохраненные данные: {e}")

    if isinstance(data, list):
        return _normalize_records(data)

    if isinstance(data, dict):
        version = data.get("version")
        records = data.get("students")
        if version == SCHEMA_VERSION and isinstance(records, list):
            return _normalize_records(records)
        raise PersistenceReadError(f"Неизвестный формат данных (version={version!r}).")

    raise PersistenceReadError(f"Ожидался список студентов, получено: {type(data).__name__}")


def encode_roster(students: Iterable[Student]) -> str:
    """Сериализует список студентов в JSON текущей версии."""
    payload = {
        "version": SCHEMA_VERSION,
        "students": [s.to_dict() for s in students],
    }
    return json.dumps(payload, ensure_ascii=False)
