"""Tests for the row parser and row formatting."""

from datetime import date

import pytest

from uni_roster.domain import BasicPerson, Position, Student, Teacher
from uni_roster.parsing import (
    FormatError,
    format_person_row,
    format_student_row,
    format_teacher_row,
    parse_person,
    parse_student,
    parse_teacher,
    split_row,
)
from uni_roster.repository import University


def test_split_row_trims_and_drops_empty_tokens():
    assert split_row(" a ;; b ;  ; c ") == ["a", "b", "c"]


def test_split_row_commas_when_no_semicolon():
    assert split_row("Ivanov, Petr,,Sergeevich, 15.05.2000") == [
        "Ivanov", "Petr", "Sergeevich", "15.05.2000"
    ]


def test_split_row_semicolon_keeps_decimal_comma():
    assert split_row("a; b; 4,5") == ["a", "b", "4,5"]


def test_parse_person_with_either_separator():
    for row in ("Ivanov; Petr; Sergeevich; 15.05.2000", "Ivanov,Petr,Sergeevich,15.05.2000"):
        p = parse_person(row)
        assert isinstance(p, BasicPerson)
        assert p.last_name == "Ivanov"
        assert p.birth_date == date(2000, 5, 15)


@pytest.mark.parametrize("row", [
    "Ivanov; Petr; 15.05.2000",
    "Ivanov; Petr; Sergeevich; 15.05.2000; extra",
    "",
])
def test_parse_person_wrong_column_count(row):
    with pytest.raises(FormatError, match="columns"):
        parse_person(row)


def test_parse_person_bad_date():
    with pytest.raises(FormatError) as exc_info:
        parse_person("Ivanov; Petr; Sergeevich; 2000-05-15")
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_parse_student_example_row():
    s = parse_student("Ivanov;Petr;Sergeevich;15.05.2000;2;IST-201;4.5")
    assert isinstance(s, Student)
    assert (s.last_name, s.first_name, s.patronymic) == ("Ivanov", "Petr", "Sergeevich")
    assert s.course == 2
    assert s.group == "IST-201"
    assert s.average_score == 4.5
    assert s.age(date(2025, 5, 14)) == 24
    assert s.age(date(2025, 5, 15)) == 25


def test_parse_student_decimal_comma():
    s = parse_student("Ivanov; Petr; Sergeevich; 15.05.2000; 2; IST-201; 4,5")
    assert s.average_score == 4.5


def test_parse_student_wrong_column_count():
    with pytest.raises(FormatError, match="student"):
        parse_student("Ivanov; Petr; Sergeevich; 15.05.2000; 2; IST-201")


def test_parse_student_bad_course_embeds_reason():
    with pytest.raises(FormatError) as exc_info:
        parse_student("Ivanov; Petr; Sergeevich; 15.05.2000; two; IST-201; 4.5")
    assert "two" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_parse_student_bad_score():
    with pytest.raises(FormatError, match="student"):
        parse_student("Ivanov; Petr; Sergeevich; 15.05.2000; 2; IST-201; good")


def test_parse_student_course_zero_is_rejected():
    with pytest.raises(FormatError):
        parse_student("Ivanov; Petr; Sergeevich; 15.05.2000; 0; IST-201; 4.5")


def test_parse_teacher():
    t = parse_teacher("Petrov; Ivan; Mikhailovich; 20.08.1975; Information Systems; 15; Professor")
    assert isinstance(t, Teacher)
    assert t.department == "Information Systems"
    assert t.experience == 15
    assert t.position is Position.Professor


def test_parse_teacher_unknown_position_adds_nothing():
    uni = University()
    with pytest.raises(FormatError, match="Manager"):
        uni.add(parse_teacher("Petrov; Ivan; Mikhailovich; 20.08.1975; IS; 15; Manager"))
    assert len(uni) == 0


def test_parse_teacher_position_is_case_sensitive():
    with pytest.raises(FormatError):
        parse_teacher("Petrov; Ivan; Mikhailovich; 20.08.1975; IS; 15; professor")


def test_parse_teacher_bad_experience():
    with pytest.raises(FormatError, match="teacher"):
        parse_teacher("Petrov; Ivan; Mikhailovich; 20.08.1975; IS; many; Docent")


def test_student_row_round_trip():
    original = parse_student("Ivanov;Petr;Sergeevich;15.05.2000;2;IST-201;4.567")
    again = parse_student(format_student_row(original))
    assert again.last_name == original.last_name
    assert again.birth_date == original.birth_date
    assert again.course == original.course
    assert again.group == original.group
    assert again.average_score == pytest.approx(4.57)


def test_teacher_row_round_trip():
    original = Teacher("Kozlov", "Dmitry", "Ivanovich", date(1980, 7, 18),
                       "Software Engineering", 10, Position.DepartmentHead)
    assert parse_teacher(format_teacher_row(original)) == original


def test_person_row_format():
    p = BasicPerson("Ivanov", "Petr", "Sergeevich", date(2000, 5, 1))
    assert format_person_row(p) == "Ivanov; Petr; Sergeevich; 01.05.2000"
    assert parse_person(format_person_row(p)) == p


def test_parse_person_mixed_separators():
    p = parse_person("Ivanov, Petr; Sergeevich; 15.05.2000")
    assert (p.last_name, p.first_name, p.patronymic) == ("Ivanov", "Petr", "Sergeevich")
    assert p.birth_date == date(2000, 5, 15)


def test_split_row_without_decimal_guard_uses_both_separators():
    assert split_row("a, b; c", decimal_safe=False) == ["a", "b", "c"]
