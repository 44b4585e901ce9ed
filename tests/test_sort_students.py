import pytest

from practicum.sort_students import SortType, Student, sort_students


@pytest.fixture
def students():
    return [
        Student("Ivan", "Ivanov", 31, 12, 2000),
        Student("Ray", "William", 12, 1, 2000),
        Student("Peter", "Harper", 30, 5, 2010),
        Student("Ethan", "Mosley", 31, 12, 2000),
    ]


def test_by_date(students):
    sort_students(students, SortType.BY_DATE)
    assert students == [
        Student("Ray", "William", 12, 1, 2000),
        Student("Ivan", "Ivanov", 31, 12, 2000),
        Student("Ethan", "Mosley", 31, 12, 2000),
        Student("Peter", "Harper", 30, 5, 2010),
    ]


def test_by_date_then_by_name(students):
    sort_students(students, SortType.BY_DATE)
    sort_students(students, SortType.BY_NAME)
    assert students == [
        Student("Peter", "Harper", 30, 5, 2010),
        Student("Ivan", "Ivanov", 31, 12, 2000),
        Student("Ethan", "Mosley", 31, 12, 2000),
        Student("Ray", "William", 12, 1, 2000),
    ]


def test_empty():
    students = []
    sort_students(students, SortType.BY_DATE)
    sort_students(students, SortType.BY_NAME)
    assert students == []


def test_same_surname_falls_back_to_name_then_date():
    students = [
        Student("Bob", "Smith", 1, 1, 2001),
        Student("Al", "Smith", 2, 2, 2002),
        Student("Al", "Smith", 1, 1, 2002),
    ]
    sort_students(students, SortType.BY_NAME)
    assert [(s.name, s.day) for s in students] == [("Al", 1), ("Al", 2), ("Bob", 1)]


def test_same_date_falls_back_to_surname():
    students = [
        Student("Zed", "Brown", 5, 5, 1999),
        Student("Amy", "Adams", 5, 5, 1999),
    ]
    sort_students(students, SortType.BY_DATE)
    assert [s.surname for s in students] == ["Adams", "Brown"]