"""
Employee Name Statistics - Aggregation
======================================
Counts names per bucket and ranks them for charting.
"""

from typing import Dict, Iterable, List, Tuple

from models import Bucket, ChartPoint, Employee, EmployeeStatistics, Gender


def rank_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """
    Sort (name, count) pairs by count descending.
    sorted() is stable, so equal counts keep first-insertion order.
    """
    return sorted(counts.items(), key=lambda item: -item[1])


class NameStatisticsAggregator:
    """Builds the five name-count buckets from a sequence of employees"""

    def aggregate(self, employees: Iterable[Employee]) -> EmployeeStatistics:
        counts = self._count_names(employees)
        return self._build_statistics(counts)

    def _count_names(self, employees: Iterable[Employee]) -> Dict[Bucket, Dict[str, int]]:
        counts: Dict[Bucket, Dict[str, int]] = {bucket: {} for bucket in Bucket}

        def bump(bucket: Bucket, name: str):
            counts[bucket][name] = counts[bucket].get(name, 0) + 1

        for employee in employees:
            name = employee.name
            bump(Bucket.ALL, name)

            if employee.gender == Gender.MALE:
                bump(Bucket.MALE, name)
                if employee.is_full_time:
                    bump(Bucket.MALE_FULL_TIME, name)
            else:
                bump(Bucket.FEMALE, name)
                if not employee.is_full_time:
                    bump(Bucket.FEMALE_PART_TIME, name)

        return counts

    def _build_statistics(self, counts: Dict[Bucket, Dict[str, int]]) -> EmployeeStatistics:
        stats = EmployeeStatistics()
        for bucket in Bucket:
            ranked = rank_counts(counts[bucket])
            stats.names[bucket] = dict(ranked)
            stats.chart_data[bucket] = [
                ChartPoint(label=name, value=count) for name, count in ranked
            ]
        return stats


def aggregate(employees: Iterable[Employee]) -> EmployeeStatistics:
    return NameStatisticsAggregator().aggregate(employees)
