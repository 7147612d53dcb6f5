"""Caffeine statistics over the coffee log."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from coffee_tracker.domain.models import DEFAULT_DAILY_CAFFEINE_GOAL, UserRecord
from coffee_tracker.domain.stats import HealthStats, WeeklyStats
from coffee_tracker.services.coffee_log import CoffeeLogRepository, day_bounds
from coffee_tracker.services.nutrition import round_half_up

WINDOW_DAYS = 7
MAX_ADHERENCE = 100


@dataclass
class HealthStatsService:
    """Computes daily and rolling weekly caffeine stats."""

    repository: CoffeeLogRepository
    timezone_name: str = "UTC"

    def todays_caffeine(self, user_id: int, now: datetime | None = None) -> int:
        """Return caffeine logged on the calendar day containing ``now``."""
        tz = ZoneInfo(self.timezone_name)
        local_now = self._resolve_now(now).astimezone(tz)
        start, end = day_bounds(local_now.date(), tz)
        entries = self.repository.list_entries(user_id, start, end)
        return sum(entry.caffeine_amount for entry in entries)

    def weekly_stats(
        self, user_id: int, now: datetime | None, daily_goal: int
    ) -> WeeklyStats:
        """Return the seven-day average, cup count and goal adherence.

        The window is rolling (``now - 7 days`` onwards) and the average is
        always divided by seven, so days without drinks pull it down.
        """
        current = self._resolve_now(now)
        entries = self.repository.list_entries(
            user_id, start=current - timedelta(days=WINDOW_DAYS)
        )
        total_caffeine = sum(entry.caffeine_amount for entry in entries)
        avg_caffeine = round_half_up(total_caffeine / WINDOW_DAYS)
        return WeeklyStats(
            avg_caffeine=avg_caffeine,
            total_cups=len(entries),
            goal_adherence=_goal_adherence(avg_caffeine, daily_goal),
        )

    def health_stats(
        self, user: UserRecord, now: datetime | None = None
    ) -> HealthStats:
        """Return today's intake together with the weekly summary."""
        current = self._resolve_now(now)
        weekly = self.weekly_stats(user.id, current, user.daily_caffeine_goal)
        return HealthStats(
            todays_caffeine=self.todays_caffeine(user.id, current),
            daily_goal=user.daily_caffeine_goal,
            avg_caffeine=weekly.avg_caffeine,
            total_cups=weekly.total_cups,
            goal_adherence=weekly.goal_adherence,
        )

    def _resolve_now(self, now: datetime | None) -> datetime:
        tz = ZoneInfo(self.timezone_name)
        if now is None:
            return datetime.now(tz=tz)
        # Naive times are wall-clock times in the service timezone.
        if now.tzinfo is None:
            return now.replace(tzinfo=tz)
        return now


def _goal_adherence(avg_caffeine: int, daily_goal: int) -> int:
    # An unset or zero goal is measured against the default.
    if daily_goal <= 0:
        daily_goal = DEFAULT_DAILY_CAFFEINE_GOAL
    return min(MAX_ADHERENCE, round_half_up(avg_caffeine / daily_goal * 100))
