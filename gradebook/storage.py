# gradebook/storage.py
"""Хранилища "ключ-значение" для сохранения журнала между запусками."""
import asyncio
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Асинхронное хранилище строк по ключу."""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Возвращает значение по ключу или None, если его нет."""
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Сохраняет значение по ключу."""
        pass


class InMemoryStorage(StorageBackend):
    """Хранилище в памяти. Используется в тестах и для временных сессий."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage(StorageBackend):
    """Хранилище в JSON-файле вида {"ключ": "значение", ...}.

    Файловые операции блокирующие, поэтому выполняются в пуле потоков.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def get_item(self, key: str) -> Optional[str]:
        items = await asyncio.get_event_loop().run_in_executor(None, self._read_all)
        value = items.get(key)
        if value is not None and not isinstance(value, str):
            raise PersistenceReadError(f"Значение по ключу {key!r} в {self.path} не является строкой.")
        return value

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.get_event_loop().run_in_executor(None, self._write_item, key, value)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, mode='r', encoding='utf-8') as file:
                data = json.load(file)
        except (OSError, ValueError) as e:
            raise PersistenceReadError(f"Не удалось прочитать файл {self.path}: {e}")
        if not isinstance(data, dict):
            raise PersistenceReadError(f"Файл {self.path} не содержит JSON-объект.")
        return data

    def _write_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except PersistenceReadError as e:
            logger.warning(f"{e} Файл будет перезаписан.")
            items = {}
        items[key] = value

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, mode='w', encoding='utf-8') as file:
                json.dump(items, file, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceWriteError(f"Ошибка записи в файл {self.path}: {e}")
