# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) журнала оценок и посещаемости."""
import asyncio
import logging
import sys
import traceback
from typing import List, Optional, Tuple

from . import processing, report
from .config import DEFAULT_DATA_FILE, LOG_FORMAT, LOW_ATTENDANCE_THRESHOLD, SUBJECTS
from .errors import DataValidationError, StudentAppError
from .models import Student, format_number
from .storage import JsonFileStorage
from .store import RosterStore

CONFIRM_ANSWERS = ("д", "да", "y", "yes")


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("   ЖУРНАЛ ОЦЕНОК И ПОСЕЩАЕМОСТИ")
    print("="*30)
    print("1. Показать всех студентов")
    print("2. Добавить нового студента")
    print("3. Редактировать студента")
    print("4. Удалить студента")
    print("5. Показать статистику по группе")
    print("6. Показать таблицу")
    print("0. Выход")
    print("="*30)


def ask(prompt: str, default: Optional[str] = None) -> str:
    """Запрашивает значение. При редактировании пустой ввод оставляет текущее."""
    if default is None:
        return input(f"{prompt}: ")
    value = input(f"{prompt} [{default}]: ")
    return value if value.strip() else default


def read_form(student: Optional[Student] = None) -> Tuple[str, List[str], str]:
    """Форма студента: имя, оценки по предметам (0-10), посещаемость (%)."""
    if student is not None:
        name, grades, attendance = student.to_form()
    else:
        name, grades, attendance = None, [None] * len(SUBJECTS), None

    name = ask("Введите ФИО студента", name)
    print("Оценки (0 - 10):")
    grades = [ask(f"  {subject}", default) for subject, default in zip(SUBJECTS, grades)]
    attendance = ask("Посещаемость (0 - 100 %)", attendance)
    return name, grades, attendance


def ask_position(store: RosterStore) -> Optional[int]:
    """Спрашивает номер студента из списка (с 1) и возвращает индекс или None."""
    try:
        number = int(input("Введите номер студента из списка: "))
    except ValueError:
        print("❌ Ошибка ввода: номер должен быть числом.")
        return None
    if store.get(number - 1) is None:
        print(f"❌ Студент с номером {number} не найден.")
        return None
    return number - 1


def show_students(students):
    if not students:
        print("ℹ️ Список студентов пуст - добавьте студента (пункт 2).")
        return
    class_avg = processing.overall_class_average(students)
    print(f"\n--- Студенты (всего: {len(students)}) ---")
    for number, s in enumerate(students, start=1):
        tags = []
        if processing.student_average(s) > class_avg:
            tags.append("[выше среднего по группе]")
        if s.attendance < LOW_ATTENDANCE_THRESHOLD:
            tags.append(f"[посещаемость < {LOW_ATTENDANCE_THRESHOLD}%]")
        print(f"{number}. {s} {' '.join(tags)}".rstrip())


def show_statistics(students):
    stats = processing.get_group_statistics(students)
    print("\n--- Средний балл группы по предметам ---")
    print(report.subject_frame(students).to_string(header=False, index_names=False))
    print(f"Общий средний балл группы: {stats['overall_average']:.2f}")

    print(f"\nСтуденты со средним баллом выше группы: {len(stats['above_average'])}")
    for s in stats['above_average']:
        print(f"— {s.name} (ср. балл {processing.student_average(s):.2f})")

    print(f"\nСтуденты с посещаемостью ниже {LOW_ATTENDANCE_THRESHOLD}%: {len(stats['low_attendance'])}")
    for s in stats['low_attendance']:
        print(f"— {s.name} ({format_number(s.attendance)}%)")


async def main_cli(store: RosterStore):
    """Основной цикл консольного приложения."""
    await store.load()

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ")

        try:
            if choice == '1':
                show_students(store.get_roster())

            elif choice == '2':
                try:
                    student = await store.create(*read_form())
                    print(f"✅ Студент {student.name} успешно добавлен.")
                except DataValidationError as e:
                    print(f"❌ Ошибка данных: {e}")

            elif choice == '3':
                index = ask_position(store)
                if index is None:
                    continue
                try:
                    student = await store.update(index, *read_form(store.get(index)))
                    print(f"✅ Данные студента {student.name} обновлены.")
                except DataValidationError as e:
                    print(f"❌ Ошибка данных: {e}")

            elif choice == '4':
                index = ask_position(store)
                if index is None:
                    continue
                name = store.get(index).name
                answer = input(f"Удалить студента {name}? (д/н): ").strip().lower()
                if answer in CONFIRM_ANSWERS:
                    await store.remove(index)
                    print(f"✅ Студент {name} удален.")
                else:
                    print("Удаление отменено.")

            elif choice == '5':
                show_statistics(store.get_roster())

            elif choice == '6':
                students = store.get_roster()
                if not students:
                    print("ℹ️ Список студентов пуст.")
                else:
                    print(report.roster_frame(students).to_string())

            elif choice == '0':
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 6.")

        except StudentAppError as e:
            print(f"❌ Ошибка логики: {e}")
        except Exception as e:
            print(f"❌ Произошла непредвиденная ошибка: {e}")


def run(argv: Optional[List[str]] = None):
    """Точка входа: необязательный аргумент - путь к файлу данных."""
    argv = sys.argv if argv is None else argv
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    data_file = argv[1] if len(argv) > 1 else DEFAULT_DATA_FILE
    store = RosterStore(JsonFileStorage(data_file))
    asyncio.run(main_cli(store))


if __name__ == '__main__':
    try:
        run()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
