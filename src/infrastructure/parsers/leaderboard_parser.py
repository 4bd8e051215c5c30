"""Parser for private leaderboard JSON documents."""

from loguru import logger
from pydantic import ValidationError

from domain.exceptions import ParseError
from domain.models import LeaderboardSnapshot, MemberProgress
from domain.models.identifiers import FIRST_DAY, LAST_DAY
from domain.models.language import PARTS
from infrastructure.schemas import LeaderboardPayload, MemberPayload


class LeaderboardParser:
    """Turns leaderboard JSON into a normalized snapshot."""

    def parse(self, payload: str, year: int) -> LeaderboardSnapshot:
        """
        Parse a leaderboard document.

        Raises:
            ParseError: If the body is not valid JSON or lacks the expected shape
        """
        try:
            document = LeaderboardPayload.model_validate_json(payload)
        except ValidationError as e:
            logger.error(f"Malformed leaderboard for {year}: {e}")
            raise ParseError(f"Malformed leaderboard JSON for {year}: {e}") from e

        members = {}
        for member_key, member in document.members.items():
            progress = self._parse_member(member)
            members[progress.id] = progress
            if progress.id != member_key:
                logger.debug(f"Leaderboard key {member_key} differs from member id {progress.id}")

        logger.debug(f"Parsed leaderboard for {year} with {len(members)} member(s)")
        return LeaderboardSnapshot(year=year, members=members)

    def _parse_member(self, member: MemberPayload) -> MemberProgress:
        completion = {}
        for day_key, levels in member.completion_day_level.items():
            try:
                day = int(day_key)
            except ValueError as e:
                raise ParseError(f"Invalid day '{day_key}' for member {member.id}") from e
            if not FIRST_DAY <= day <= LAST_DAY:
                raise ParseError(f"Day {day} out of range for member {member.id}")

            parts = frozenset(int(level) for level in levels if level in {str(p) for p in PARTS})
            if parts:
                completion[day] = parts

        return MemberProgress(
            id=str(member.id),
            name=member.name,
            local_score=member.local_score,
            stars=member.stars,
            completion=completion,
        )
