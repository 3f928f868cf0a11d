# tests/test_main_cli.py
import asyncio
import json

from gradebook.config import STORAGE_KEY
from gradebook.main import main_cli, run


def run_cli(monkeypatch, store, inputs):
    """Запускает меню с заранее заданным пользовательским вводом."""
    input_sequence = iter(inputs)

    def mock_input(prompt=""):
        """Имитация пользовательского ввода."""
        try:
            return next(input_sequence)
        except StopIteration:
            # Если ввод закончился раньше, чем программа завершилась,
            # возвращаем '0' (выход), чтобы не зависнуть.
            return "0"

    monkeypatch.setattr('builtins.input', mock_input)
    asyncio.run(main_cli(store))


ANA = ['2', 'Ana', '8', '9', '7', '10', '6', '90']
BEA = ['2', 'Bea', '4', '5', '6', '5', '4', '60']


def test_cli_add_and_show_statistics(monkeypatch, capsys, store, memory_storage):
    run_cli(monkeypatch, store, ANA + BEA + ['1', '5', '0'])
    output = capsys.readouterr().out

    assert "Студент Ana успешно добавлен" in output
    assert "Студенты (всего: 2)" in output
    assert "[выше среднего по группе]" in output
    assert "[посещаемость < 75%]" in output
    assert "Общий средний балл группы: 6.40" in output
    assert "— Ana (ср. балл 8.00)" in output
    assert "— Bea (60%)" in output
    assert "До свидания!" in output

    saved = json.loads(memory_storage.items[STORAGE_KEY])
    assert [s["name"] for s in saved["students"]] == ["Ana", "Bea"]


def test_cli_rejects_empty_name(monkeypatch, capsys, store):
    run_cli(monkeypatch, store, ['2', '   ', '10', '10', '10', '10', '10', '100', '0'])
    output = capsys.readouterr().out

    assert "Укажите имя студента" in output
    assert store.get_roster() == ()


def test_cli_edit_keeps_values_on_empty_input(monkeypatch, capsys, store):
    run_cli(monkeypatch, store, ANA + ['3', '1', '', '10', '', '', '', '', '50', '0'])
    output = capsys.readouterr().out

    (ana,) = store.get_roster()
    assert "Данные студента Ana обновлены" in output
    assert ana.grades == [10, 9, 7, 10, 6]
    assert ana.attendance == 50


def test_cli_remove_requires_confirmation(monkeypatch, capsys, store):
    run_cli(monkeypatch, store, ANA + BEA + ['4', '1', 'н', '4', '1', 'д', '0'])
    output = capsys.readouterr().out

    assert "Удаление отменено" in output
    assert "Студент Ana удален" in output
    assert [s.name for s in store.get_roster()] == ["Bea"]


def test_cli_unknown_position(monkeypatch, capsys, store):
    run_cli(monkeypatch, store, ['4', '7', '3', 'abc', '0'])
    output = capsys.readouterr().out

    assert "Студент с номером 7 не найден" in output
    assert "номер должен быть числом" in output


def test_cli_table_and_empty_roster(monkeypatch, capsys, store):
    run_cli(monkeypatch, store, ['1', '6'] + ANA + ['6', '9', '0'])
    output = capsys.readouterr().out

    assert "Список студентов пуст - добавьте студента" in output
    assert "average" in output
    assert "Неверный выбор" in output


def test_run_uses_data_file_argument(monkeypatch, capsys, tmp_path):
    data_file = tmp_path / "journal.json"
    inputs = iter(ANA + ['0'])
    monkeypatch.setattr('builtins.input', lambda prompt="": next(inputs, "0"))

    run(["gradebook", str(data_file)])

    assert "Студент Ana успешно добавлен" in capsys.readouterr().out
    saved = json.loads(json.loads(data_file.read_text(encoding="utf-8"))[STORAGE_KEY])
    assert [s["name"] for s in saved["students"]] == ["Ana"]
