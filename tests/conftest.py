# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student


@pytest.fixture
def sample_roster():
    return Roster()


@pytest.fixture
def populated_roster():
    roster = Roster()
    roster.add_student("s001", "Cameron", "Sean")
    roster.add_student("s002", "Atreides", "Paul")
    roster.add_student("s003", "Harkonnen", "Feyd")
    roster.update_student_points("s001", 1, 50)
    roster.update_student_points("s003", 2, 80)
    return roster


@pytest.fixture
def sample_student():
    return Student("s001", "Cameron", "Sean")


@pytest.fixture
def graded_student():
    return Student("a1", "Doe", "Jane", [10, 20, 30, 0, 0, 5])
