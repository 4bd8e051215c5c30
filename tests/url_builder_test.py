# tests/url_builder_test.py
import pytest
from infrastructure.url_builder import URLBuilder
from domain.models import PuzzleDayKey

@pytest.mark.parametrize(
    "year, day, expected",
    [
        (2015, 1, "https://adventofcode.com/2015/day/1"),
        (2023, 25, "https://adventofcode.com/2023/day/25"),
    ],
)
def test_puzzle_url(year, day, expected) -> None:
    assert URLBuilder().puzzle_url(PuzzleDayKey(year, day)) == expected

def test_input_and_answer_urls() -> None:
    key = PuzzleDayKey(year=2022, day=7)
    builder = URLBuilder()

    assert builder.input_url(key) == "https://adventofcode.com/2022/day/7/input"
    assert builder.answer_url(key) == "https://adventofcode.com/2022/day/7/answer"

def test_leaderboard_url() -> None:
    url = URLBuilder("https://aoc.test/").leaderboard_url(2021, "123456")
    assert url == "https://aoc.test/2021/leaderboard/private/view/123456.json"

@pytest.mark.parametrize("day", [0, 26])
def test_day_out_of_range(day) -> None:
    with pytest.raises(ValueError):
        PuzzleDayKey(2023, day)
