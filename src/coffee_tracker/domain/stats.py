"""Domain models for caffeine statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeeklyStats:
    """Rolling seven-day caffeine summary."""

    avg_caffeine: int
    total_cups: int
    goal_adherence: int


@dataclass(frozen=True)
class HealthStats:
    """Today's intake combined with the weekly summary."""

    todays_caffeine: int
    daily_goal: int
    avg_caffeine: int
    total_cups: int
    goal_adherence: int
