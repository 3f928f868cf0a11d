# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError):
    """Некорректные данные формы (например, пустое имя студента)."""
    pass

class PersistenceError(StudentAppError):
    """Общая ошибка работы с хранилищем."""
    pass

class PersistenceReadError(PersistenceError):
    """Сохраненные данные не удалось прочитать или разобрать."""
    pass

class PersistenceWriteError(PersistenceError):
    """Не удалось записать данные в хранилище."""
    pass
