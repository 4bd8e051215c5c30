"""Client for the Advent of Code puzzle platform."""

from typing import Optional

from loguru import logger

from domain.exceptions import ExtractionError, FetchError, LeaderboardError, SubmitError
from domain.models import (
    LeaderboardSnapshot,
    PuzzleDayKey,
    SubmissionRequest,
    SubmissionResult,
)

from .errors import HTTPClientError
from .http_client import AsyncHTTPClient
from .parsers.answer_parser import AnswerReplyParser
from .parsers.description_parser import DescriptionParser
from .parsers.interfaces import (
    DescriptionExtractorProtocol,
    HTTPClientProtocol,
    RemoteClientProtocol,
)
from .parsers.leaderboard_parser import LeaderboardParser
from .url_builder import URLBuilder


class AdventOfCodeClient(RemoteClientProtocol):
    """Authenticated operations against the puzzle platform.

    Every method takes the session token explicitly. Only ``submit_answer``
    has side effects on the platform and it is never retried.
    """

    def __init__(
        self,
        http_client: Optional[HTTPClientProtocol] = None,
        url_builder: Optional[URLBuilder] = None,
        description_extractor: Optional[DescriptionExtractorProtocol] = None,
        leaderboard_parser: Optional[LeaderboardParser] = None,
        answer_parser: Optional[AnswerReplyParser] = None,
    ):
        self.http_client = http_client or AsyncHTTPClient()
        self.urls = url_builder or URLBuilder()
        self.description_extractor = description_extractor or DescriptionParser()
        self.leaderboard_parser = leaderboard_parser or LeaderboardParser()
        self.answer_parser = answer_parser or AnswerReplyParser()

    @staticmethod
    def _cookies(token: str) -> dict[str, str]:
        return {"session": token}

    async def fetch_input(self, year: int, day: int, token: str) -> str:
        """
        Download the raw puzzle input.

        Returns:
            Input text with trailing whitespace removed

        Raises:
            FetchError: On transport failure or non-success status
        """
        key = PuzzleDayKey(year, day)
        url = self.urls.input_url(key)
        body = await self._get_success(url, key, "input", token)
        logger.info(f"Input for {key} downloaded")
        return body.rstrip()

    async def fetch_description(self, year: int, day: int, token: str) -> str:
        """
        Download the puzzle page and convert its description to Markdown.

        Raises:
            FetchError: On transport failure or non-success status
            ExtractionError: If the page has no description region
        """
        key = PuzzleDayKey(year, day)
        url = self.urls.puzzle_url(key)
        html = await self._get_success(url, key, "description", token)

        try:
            description = self.description_extractor.extract(html)
        except ExtractionError as e:
            logger.error(f"Failed to extract description for {key}: {e}")
            raise ExtractionError(f"Failed to extract description for {key}: {e}") from e

        logger.info(f"Description for {key} downloaded and converted to Markdown")
        return description

    async def submit_answer(self, request: SubmissionRequest, token: str) -> SubmissionResult:
        """
        Submit an answer. Exactly one HTTP attempt is made.

        Raises:
            SubmitError: On transport failure or non-success status
        """
        key = PuzzleDayKey(request.year, request.day)
        url = self.urls.answer_url(key)
        label = f"{key}, part {request.part}"

        try:
            response = await self.http_client.post_form(
                url, request.form_data(), self._cookies(token)
            )
        except HTTPClientError as e:
            logger.error(f"Failed to submit answer for {label}: {e}")
            raise SubmitError(f"Failed to submit answer for {label}: {e.reason}") from e

        if not response.ok:
            logger.error(f"Answer submission for {label} returned {response.status_code}")
            raise SubmitError(
                f"Failed to submit answer for {label}. Status code: {response.status_code}",
                status=response.status_code,
            )

        result = self.answer_parser.parse(response.text)
        logger.info(f"Answer submitted for {label}: accepted={result.accepted}")
        return result

    async def fetch_leaderboard(
        self, year: int, leaderboard_id: str, token: str
    ) -> LeaderboardSnapshot:
        """
        Download and parse a private leaderboard.

        Raises:
            FetchError: On transport failure
            LeaderboardError: On non-success status
            ParseError: If the body is not a valid leaderboard document
        """
        url = self.urls.leaderboard_url(year, leaderboard_id)
        try:
            response = await self.http_client.get(url, self._cookies(token))
        except HTTPClientError as e:
            logger.error(f"Failed to fetch leaderboard {leaderboard_id} for {year}: {e}")
            raise FetchError(
                f"Failed to fetch leaderboard {leaderboard_id} for {year}: {e.reason}"
            ) from e

        if not response.ok:
            raise LeaderboardError(
                f"Failed to fetch leaderboard {leaderboard_id} for {year}. "
                f"Status code: {response.status_code}",
                status=response.status_code,
            )

        return self.leaderboard_parser.parse(response.text, year)

    async def _get_success(self, url: str, key: PuzzleDayKey, asset: str, token: str) -> str:
        try:
            response = await self.http_client.get(url, self._cookies(token))
        except HTTPClientError as e:
            logger.error(f"Failed to download {asset} for {key}: {e}")
            raise FetchError(f"Failed to download {asset} for {key}: {e.reason}") from e

        if not response.ok:
            logger.error(f"Download of {asset} for {key} returned {response.status_code}")
            raise FetchError(
                f"Failed to download {asset} for {key}. Status code: {response.status_code}",
                status=response.status_code,
            )
        return response.text
