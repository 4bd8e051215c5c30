"""Service for summarizing leaderboard progress."""

from loguru import logger

from domain.exceptions import LeaderboardError
from domain.models import (
    DayProgress,
    LeaderboardSnapshot,
    MemberProgress,
    ProgressTable,
)
from domain.models.identifiers import FIRST_DAY, LAST_DAY


class ProgressTracker:
    """Builds per-member completion tables from leaderboard snapshots."""

    def summarize(
        self, snapshot: LeaderboardSnapshot, member_id: str, days: int = LAST_DAY
    ) -> ProgressTable:
        """
        Completion of each part for days ``1..days``.

        Raises:
            LeaderboardError: If the member is not on the leaderboard
        """
        member = snapshot.members.get(str(member_id))
        if member is None:
            logger.error(f"Member {member_id} not found on {snapshot.year} leaderboard")
            raise LeaderboardError(
                f"No progress data found for member {member_id} in {snapshot.year}"
            )

        days = max(0, min(days, LAST_DAY))
        rows = [
            DayProgress(
                day=day,
                part1=member.has_completed(day, 1),
                part2=member.has_completed(day, 2),
            )
            for day in range(FIRST_DAY, days + 1)
        ]
        return ProgressTable(member_id=member.id, member_name=member.display_name, rows=rows)

    def standings(self, snapshot: LeaderboardSnapshot) -> list[MemberProgress]:
        """Members ordered by local score, highest first."""
        return sorted(
            snapshot.members.values(),
            key=lambda member: (-member.local_score, member.display_name),
        )
