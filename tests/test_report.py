# tests/test_report.py
from gradebook.config import SUBJECTS
from gradebook.report import roster_frame, subject_frame


def test_roster_frame(sample_students):
    df = roster_frame(sample_students)

    assert list(df.index) == [1, 2]
    assert list(df["name"]) == ["Ana", "Bea"]
    assert list(df[SUBJECTS[0]]) == [8, 4]
    assert list(df["average"]) == [8.0, 4.8]
    assert list(df["above_average"]) == [True, False]
    assert list(df["low_attendance"]) == [False, True]


def test_roster_frame_empty():
    df = roster_frame([])
    assert df.empty
    assert "average" in df.columns


def test_subject_frame(sample_students):
    df = subject_frame(sample_students)
    assert list(df.index) == list(SUBJECTS)
    assert list(df["class_average"]) == [6.0, 7.0, 6.5, 7.5, 5.0]


def test_subject_frame_empty_roster_is_zeros():
    assert list(subject_frame([])["class_average"]) == [0.0] * 5
