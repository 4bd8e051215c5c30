"""URL construction for the puzzle platform."""

from loguru import logger

from domain.models.identifiers import PuzzleDayKey

DEFAULT_BASE_URL = "https://adventofcode.com"


class URLBuilder:
    """Builds platform URLs for puzzle days and leaderboards."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def puzzle_url(self, key: PuzzleDayKey) -> str:
        url = f"{self.base_url}/{key.year}/day/{key.day}"
        logger.debug(f"Built puzzle URL: {url}")
        return url

    def input_url(self, key: PuzzleDayKey) -> str:
        return f"{self.puzzle_url(key)}/input"

    def answer_url(self, key: PuzzleDayKey) -> str:
        return f"{self.puzzle_url(key)}/answer"

    def leaderboard_url(self, year: int, leaderboard_id: str) -> str:
        url = f"{self.base_url}/{year}/leaderboard/private/view/{leaderboard_id}.json"
        logger.debug(f"Built leaderboard URL: {url}")
        return url
