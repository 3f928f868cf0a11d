# gradebook/store.py
"""Хранилище списка студентов: загрузка, изменения и автосохранение после каждого изменения."""
import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from .config import STORAGE_KEY
from .errors import DataValidationError
from .io_utils import decode_roster, encode_roster, parse_attendance, parse_grades
from .models import Student
from .storage import StorageBackend

logger = logging.getLogger(__name__)


class RosterStore:
    """Единственный источник правды о списке студентов в текущей сессии.

    Позиция в списке используется как адрес для update/remove, кроме того
    у каждого студента есть постоянный ID (см. index_of).
    Ошибки хранилища не выходят за пределы этого класса: они логируются,
    а список в памяти остается рабочим.
    """

    def __init__(self, storage: StorageBackend, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._students: List[Student] = []
        # Не больше одной операции с хранилищем одновременно
        self._io_lock = asyncio.Lock()

    @property
    def roster(self) -> Tuple[Student, ...]:
        return tuple(self._students)

    def get_roster(self) -> Tuple[Student, ...]:
        """Текущий снимок списка для отображения и статистики."""
        return self.roster

    def __len__(self) -> int:
        return len(self._students)

    def get(self, index: int) -> Optional[Student]:
        if not self._in_range(index):
            return None
        return self._students[index]

    def index_of(self, student_id: str) -> Optional[int]:
        return next((i for i, s in enumerate(self._students) if s.id == student_id), None)

    async def load(self) -> None:
        """Загружает список из хранилища. Любая ошибка дает пустой список."""
        async with self._io_lock:
            try:
                blob = await self.storage.get_item(self.key)
                students = decode_roster(blob) if blob is not None else []
            except Exception as e:
                logger.warning(f"Ошибка загрузки данных, начинаем с пустого списка: {e}")
                students = []
        self._students = students
        logger.info(f"Загружено студентов: {len(students)}")

    async def persist(self) -> None:
        """Записывает весь список целиком. Ошибки только логируются."""
        async with self._io_lock:
            try:
                await self.storage.set_item(self.key, encode_roster(self._students))
            except Exception as e:
                logger.error(f"Ошибка сохранения данных: {e}")

    async def create(self, name: str, grades: Sequence[str], attendance: str) -> Student:
        """Добавляет студента в конец списка по данным формы."""
        student = self._from_form(name, grades, attendance)
        self._students.append(student)
        await self.persist()
        return student

    async def update(self, index: int, name: str, grades: Sequence[str],
                     attendance: str) -> Optional[Student]:
        """Заменяет студента на позиции index. ID студента сохраняется."""
        student = self._from_form(name, grades, attendance)
        if not self._in_range(index):
            logger.warning(f"Нет студента с номером {index}, изменение пропущено.")
            return None
        student.id = self._students[index].id
        self._students[index] = student
        await self.persist()
        return student

    async def remove(self, index: int) -> Optional[Student]:
        """Удаляет студента на позиции index. Подтверждение спрашивает интерфейс."""
        if not self._in_range(index):
            logger.warning(f"Нет студента с номером {index}, удаление пропущено.")
            return None
        removed = self._students.pop(index)
        await self.persist()
        return removed

    async def update_by_id(self, student_id: str, name: str, grades: Sequence[str],
                           attendance: str) -> Optional[Student]:
        index = self.index_of(student_id)
        if index is None:
            # Проверка имени все равно выполняется, как и для update()
            self._from_form(name, grades, attendance)
            logger.warning(f"Студент с ID {student_id} не найден, изменение пропущено.")
            return None
        return await self.update(index, name, grades, attendance)

    async def remove_by_id(self, student_id: str) -> Optional[Student]:
        index = self.index_of(student_id)
        if index is None:
            logger.warning(f"Студент с ID {student_id} не найден, удаление пропущено.")
            return None
        return await self.remove(index)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._students)

    @staticmethod
    def _from_form(name: str, grades: Sequence[str], attendance: str) -> Student:
        clean_name = (name or "").strip()
        if not clean_name:
            raise DataValidationError("Укажите имя студента.")
        return Student(clean_name, parse_grades(grades), parse_attendance(attendance))
