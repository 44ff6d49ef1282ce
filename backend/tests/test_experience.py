import pytest

from services.experience import experience_bonus


@pytest.mark.parametrize("level,bonus", [
    ("Senior", 30),
    ("Mid", 15),
    ("Junior", 0),
    ("Principal", 0),
    ("", 0),
    (None, 0),
])
def test_experience_bonus(level, bonus):
    assert experience_bonus(level) == bonus
