"""
Employee Name Statistics - Validation Module
============================================
Chain-of-Verification for generated employees and their statistics.
"""

import pandas as pd
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

from config import GeneratorConfig
from models import (
    Bucket, EmployeeStatistics, Gender, NAMES_BY_GENDER, WORKLOAD_LEVELS,
)


# Distribution checks only make sense on populations at least this large
MIN_DISTRIBUTION_SAMPLE = 100


class ValidationSeverity(Enum):
    PASS = "✅ PASS"
    WARNING = "⚠️ WARNING"
    FAIL = "❌ FAIL"
    INFO = "ℹ️ INFO"


@dataclass
class ValidationResult:
    name: str
    severity: ValidationSeverity
    message: str
    expected: Optional[str] = None
    actual: Optional[str] = None


def _status(ok: bool, otherwise: ValidationSeverity = ValidationSeverity.FAIL) -> ValidationSeverity:
    return ValidationSeverity.PASS if ok else otherwise


class EmployeeDataValidator:
    """Chain-of-Verification for synthetic employees"""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config
        self.results: List[ValidationResult] = []

    def validate_all(
        self,
        employee_df: pd.DataFrame,
        statistics: EmployeeStatistics,
        window: Optional[Tuple[int, int]] = None,
    ) -> List[ValidationResult]:
        self.results = []
        self._validate_employees(employee_df, window)
        self._validate_statistics(statistics, len(employee_df))
        return self.results

    def validate_employees(
        self, employee_df: pd.DataFrame, window: Optional[Tuple[int, int]] = None
    ) -> List[ValidationResult]:
        self.results = []
        self._validate_employees(employee_df, window)
        return self.results

    # ============================================================
    # EMPLOYEE CHECKS
    # ============================================================

    def _validate_employees(self, df: pd.DataFrame, window: Optional[Tuple[int, int]]):
        self._validate_count(df)
        self._validate_unique_birthdates(df)
        self._validate_names(df)
        self._validate_workloads(df)
        if window is not None:
            self._validate_window(df, window)
        self._validate_distributions(df)

    def _validate_count(self, df: pd.DataFrame):
        if self.config is None:
            return
        self.results.append(ValidationResult(
            name="Count",
            severity=_status(len(df) == self.config.count),
            message=f"{len(df):,} employees",
            expected=str(self.config.count),
            actual=str(len(df)),
        ))

    def _validate_unique_birthdates(self, df: pd.DataFrame):
        dupes = int(df['birthdate'].duplicated().sum())
        self.results.append(ValidationResult(
            name="Rule: Unique birthdates",
            severity=_status(dupes == 0),
            message=f"{dupes} duplicates",
        ))

    def _validate_names(self, df: pd.DataFrame):
        invalid = 0
        for gender, names in NAMES_BY_GENDER.items():
            rows = df['gender'].astype(str) == gender.value
            invalid += int((~df.loc[rows, 'name'].isin(names)).sum())
        self.results.append(ValidationResult(
            name="Rule: Name matches gender",
            severity=_status(invalid == 0),
            message=f"{invalid} violations",
        ))

    def _validate_workloads(self, df: pd.DataFrame):
        invalid = int((~df['workload'].isin(WORKLOAD_LEVELS)).sum())
        self.results.append(ValidationResult(
            name="Rule: Workload level",
            severity=_status(invalid == 0),
            message=f"{invalid} violations",
            expected=str(WORKLOAD_LEVELS),
        ))

    def _validate_window(self, df: pd.DataFrame, window: Tuple[int, int]):
        low, high = window
        if df.empty:
            instants = pd.Series([], dtype='int64')
        else:
            parsed = pd.to_datetime(df['birthdate'].astype(str), utc=True)
            instants = (parsed - pd.Timestamp(0, tz='UTC')) // pd.Timedelta(milliseconds=1)
        outside = int((~instants.between(low, high)).sum())
        self.results.append(ValidationResult(
            name="Rule: Birthdate in window",
            severity=_status(outside == 0),
            message=f"{outside} outside window",
        ))

    def _validate_distributions(self, df: pd.DataFrame):
        n = len(df)
        if n < MIN_DISTRIBUTION_SAMPLE:
            self.results.append(ValidationResult(
                name="Distribution",
                severity=ValidationSeverity.INFO,
                message=f"Skipped: {n} employees < {MIN_DISTRIBUTION_SAMPLE}",
            ))
            return

        male_rate = (df['gender'].astype(str) == Gender.MALE.value).mean()
        self.results.append(ValidationResult(
            name="Distribution: Gender",
            severity=_status(abs(male_rate - 0.5) < 0.1, ValidationSeverity.WARNING),
            message=f"Male: {male_rate:.1%}",
            expected="50.0%",
        ))

        shares = df['workload'].value_counts(normalize=True).to_dict()
        expected = 1 / len(WORKLOAD_LEVELS)
        ok = all(abs(shares.get(w, 0) - expected) < 0.1 for w in WORKLOAD_LEVELS)
        self.results.append(ValidationResult(
            name="Distribution: Workload",
            severity=_status(ok, ValidationSeverity.WARNING),
            message=f"Actual: {shares}",
            expected=f"{expected:.1%} each",
        ))

    # ============================================================
    # STATISTICS CHECKS
    # ============================================================

    def _validate_statistics(self, stats: EmployeeStatistics, n: int):
        totals = {b: sum(stats.names.get(b, {}).values()) for b in Bucket}

        self.results.append(ValidationResult(
            name="Statistics: All bucket total",
            severity=_status(totals[Bucket.ALL] == n),
            message=f"{totals[Bucket.ALL]} counted",
            expected=str(n),
        ))

        gender_total = totals[Bucket.MALE] + totals[Bucket.FEMALE]
        self.results.append(ValidationResult(
            name="Statistics: Gender bucket totals",
            severity=_status(gender_total == n),
            message=f"{gender_total} counted",
            expected=str(n),
        ))

        for child, parent in ((Bucket.MALE_FULL_TIME, Bucket.MALE),
                              (Bucket.FEMALE_PART_TIME, Bucket.FEMALE)):
            parent_counts = stats.names.get(parent, {})
            violations = [
                name for name, count in stats.names.get(child, {}).items()
                if parent_counts.get(name, 0) < count
            ]
            self.results.append(ValidationResult(
                name=f"Statistics: {child.value} within {parent.value}",
                severity=_status(not violations),
                message=f"{len(violations)} violations",
            ))

        unordered = []
        for bucket in Bucket:
            values = [p.value for p in stats.chart_data.get(bucket, [])]
            mapping = list(stats.names.get(bucket, {}).values())
            descending = all(a >= b for a, b in zip(values, values[1:]))
            if not descending or values != mapping:
                unordered.append(bucket.value)
        self.results.append(ValidationResult(
            name="Statistics: Rank order",
            severity=_status(not unordered),
            message="All buckets descending" if not unordered else f"Unordered: {unordered}",
        ))

    def get_summary(self) -> Dict:
        return {
            'total': len(self.results),
            'passed': sum(1 for r in self.results if r.severity == ValidationSeverity.PASS),
            'warnings': sum(1 for r in self.results if r.severity == ValidationSeverity.WARNING),
            'failed': sum(1 for r in self.results if r.severity == ValidationSeverity.FAIL)
        }


def print_report(title: str, results: List[ValidationResult]):
    """Print results as a Chain-of-Verification block"""
    print(f"\n=== Chain-of-Verification: {title} ===")
    for r in results:
        print(f"  {r.severity.value} {r.name}: {r.message}")
    print("=" * 50)
