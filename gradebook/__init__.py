"""Журнал оценок и посещаемости студентов."""
__version__ = "1.0.0"
