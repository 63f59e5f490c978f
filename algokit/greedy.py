"""Greedy algorithms: fractional knapsack, activity selection and job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class KnapsackResult:
    """Items taken, as (value, weight) pairs, and the value they add up to."""

    selected: list[tuple[float, float]] = field(default_factory=list)
    total_value: float = 0.0

    @property
    def total_weight(self) -> float:
        return sum(weight for _, weight in self.selected)


@dataclass(frozen=True)
class Job:
    """A job that earns profit if done in a unit slot no later than deadline."""

    id: int
    deadline: int
    profit: int


@dataclass
class JobSchedule:
    """Ids of the jobs scheduled, in the order chosen, and their total profit."""

    job_ids: list[int] = field(default_factory=list)
    total_profit: int = 0


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> KnapsackResult:
    """Fill a knapsack by best value-per-weight first, splitting the last item."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    pairs = [(float(value), float(weight)) for value, weight in items]
    if any(weight <= 0 for _, weight in pairs):
        raise ValueError("item weights must be positive")

    ordered = sorted(pairs, key=lambda item: item[0] / item[1], reverse=True)
    result = KnapsackResult()
    remaining = float(capacity)
    for value, weight in ordered:
        if remaining <= 0:
            break
        if remaining >= weight:
            result.selected.append((value, weight))
            result.total_value += value
            remaining -= weight
        else:
            fraction = remaining / weight
            result.selected.append((value * fraction, weight * fraction))
            result.total_value += value * fraction
            remaining = 0.0
    return result


def select_activities(activities: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Largest set of non-overlapping (start, finish) activities, earliest finish first."""
    ordered = sorted(activities, key=lambda activity: activity[1])
    if not ordered:
        return []
    selected = [ordered[0]]
    last_finish = ordered[0][1]
    for start, finish in ordered[1:]:
        if start >= last_finish:
            selected.append((start, finish))
            last_finish = finish
    return selected


def job_sequencing(jobs: Iterable[Job]) -> JobSchedule:
    """Schedule the most profitable jobs, each in the latest free slot before its deadline."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    max_deadline = max((job.deadline for job in ordered), default=0)
    taken: set[int] = set()
    schedule = JobSchedule()
    for job in ordered:
        for slot in range(min(max_deadline, job.deadline), 0, -1):
            if slot not in taken:
                taken.add(slot)
                schedule.job_ids.append(job.id)
                schedule.total_profit += job.profit
                break
    return schedule