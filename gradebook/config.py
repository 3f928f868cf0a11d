# gradebook/config.py
"""Постоянные настройки журнала: предметы, диапазоны оценок, ключ хранилища."""

# --- ХРАНИЛИЩЕ ---
STORAGE_KEY = "@students_v1"
SCHEMA_VERSION = 2
DEFAULT_DATA_FILE = "data/gradebook.json"

# --- ПРЕДМЕТЫ ---
# Порядок важен: оценка с индексом i относится к SUBJECTS[i]
SUBJECTS = (
    "Математика",
    "Родной язык",
    "Естествознание",
    "История",
    "Английский язык",
)
SUBJECT_COUNT = len(SUBJECTS)

# --- ДИАПАЗОНЫ ---
GRADE_MIN = 0
GRADE_MAX = 10
ATTENDANCE_MIN = 0
ATTENDANCE_MAX = 100
LOW_ATTENDANCE_THRESHOLD = 75

# --- ЛОГИРОВАНИЕ ---
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
