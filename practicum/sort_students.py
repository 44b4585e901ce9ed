"""Sorting students by name or by date of birth."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple


@dataclass
class Student:
    name: str
    surname: str
    day: int
    month: int
    year: int


class SortType(enum.Enum):
    BY_NAME = "by_name"
    BY_DATE = "by_date"


def _by_name(student: Student) -> Tuple:
    return (student.surname, student.name, student.year, student.month, student.day)


def _by_date(student: Student) -> Tuple:
    return (student.year, student.month, student.day, student.surname, student.name)


_KEYS: Dict[SortType, Callable[[Student], Tuple]] = {
    SortType.BY_NAME: _by_name,
    SortType.BY_DATE: _by_date,
}


def sort_students(students: List[Student], sort_type: SortType) -> None:
    """Sort the list in place by surname and name, or by date of birth."""
    students.sort(key=_KEYS[sort_type])