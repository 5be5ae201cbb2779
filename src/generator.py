"""
Employee Name Statistics - Data Generation Engine
=================================================
Synthesizes employee records with unique birthdates inside an age window.
Every draw comes from one uniform [0, 1) source so runs are reproducible
via seed control or an injected callable.
"""

import logging
import numpy as np
import pandas as pd
from typing import Any, Callable, List, Optional, Sequence, Set, Tuple
from datetime import datetime, timedelta, timezone

from config import AgeRange, BirthdateSpaceExhausted, ConfigError, coerce_config
from models import (
    Employee, Gender, NAMES_BY_GENDER, SURNAMES, WORKLOAD_LEVELS,
    employees_to_dataframe,
)
from validation import (
    EmployeeDataValidator, ValidationResult, ValidationSeverity, print_report,
)

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# (low_ms, high_ms), both inclusive
Window = Tuple[int, int]


# ============================================================
# DATE UTILITIES
# ============================================================

def _utc_timestamp(now: Optional[Any] = None) -> pd.Timestamp:
    ts = pd.Timestamp.now(tz='UTC') if now is None else pd.Timestamp(now)
    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def _to_ms(ts: pd.Timestamp) -> int:
    return ts.value // 1_000_000


def birthdate_window(age: AgeRange, now: Optional[Any] = None) -> Window:
    """
    Sampling window in epoch milliseconds.
    age.min years ago is the most recent allowed birthdate, age.max years
    ago the oldest. A zero-width window is widened backwards by one day so
    time-of-day still varies without anyone falling below age.min.
    """
    ts = _utc_timestamp(now)
    try:
        max_date = ts - pd.DateOffset(years=age.min)
        min_date = ts - pd.DateOffset(years=age.max)
    except (OverflowError, pd.errors.OutOfBoundsDatetime) as e:
        raise ConfigError("age.max", f"birthdate window out of range: {e}") from e

    low, high = _to_ms(min_date), _to_ms(max_date)
    if low == high:
        # high stays the most recent allowed birthdate
        logger.debug(f"Zero-width age window at {format_birthdate(high)}, widening to the preceding day")
        low = high - DAY_MS + 1
    return low, high


def format_birthdate(instant_ms: int) -> str:
    """Epoch milliseconds -> YYYY-MM-DDTHH:MM:SS.sssZ"""
    dt = EPOCH + timedelta(milliseconds=instant_ms)
    return dt.strftime('%Y-%m-%dT%H:%M:%S') + f".{dt.microsecond // 1000:03d}Z"


# ============================================================
# GENERATOR
# ============================================================

class EmployeeGenerator:
    """
    Main engine for generating synthetic employees.

    Design Principles:
    1. Reproducibility via seed control or an injected uniform source
    2. Per-run uniqueness of formatted birthdates
    3. Guaranteed termination: bounded resampling, then a linear probe
    """

    def __init__(
        self,
        config: Any,
        rng: Optional[np.random.Generator] = None,
        random_source: Optional[Callable[[], float]] = None,
        now: Optional[Any] = None,
        verbose: bool = False,
    ):
        self.config = coerce_config(config)
        self.seed = self.config.seed
        self.rng = rng if rng is not None else np.random.default_rng(self.seed)
        self._random = random_source if random_source is not None else self.rng.random
        self.now = now
        self.verbose = verbose
        # Window of the most recent run
        self.window: Optional[Window] = None

        # Verification counters, reset per run
        self.verification_log = {
            'resamples': 0,
            'probed_birthdates': 0,
        }

    # ============================================================
    # RANDOM PRIMITIVES
    # ============================================================

    def _index(self, n: int) -> int:
        return min(int(self._random() * n), n - 1)

    def _pick(self, options: Sequence) -> Any:
        return options[self._index(len(options))]

    # ============================================================
    # EMPLOYEE GENERATION
    # ============================================================

    def birthdate_window(self) -> Window:
        return birthdate_window(self.config.age, self.now)

    def _check_capacity(self, window: Window):
        capacity = window[1] - window[0] + 1
        if self.config.count > capacity:
            raise BirthdateSpaceExhausted(
                "count",
                f"{self.config.count:,} employees requested but only "
                f"{capacity:,} distinct birthdates fit the age window",
            )

    def unique_birthdate(self, window: Window, used: Set[str]) -> str:
        """Sample until an unused birthdate is found; probe forward once the budget is spent"""
        low, high = window
        capacity = high - low + 1

        instant = low
        for _ in range(self.config.max_attempts):
            instant = low + self._index(capacity)
            candidate = format_birthdate(instant)
            if candidate not in used:
                used.add(candidate)
                return candidate
            self.verification_log['resamples'] += 1

        self.verification_log['probed_birthdates'] += 1
        logger.warning(
            f"No unused birthdate after {self.config.max_attempts} draws, probing from {format_birthdate(instant)}"
        )
        offset = instant - low
        for step in range(1, capacity + 1):
            candidate = format_birthdate(low + (offset + step) % capacity)
            if candidate not in used:
                used.add(candidate)
                return candidate

        raise BirthdateSpaceExhausted(
            "count", f"all {capacity:,} birthdates in the window are taken"
        )

    def generate_employee(self, window: Window, used: Set[str]) -> Employee:
        """Generate a single synthetic employee"""
        gender = Gender.MALE if self._random() < 0.5 else Gender.FEMALE
        workload = self._pick(WORKLOAD_LEVELS)
        name = self._pick(NAMES_BY_GENDER[gender])
        surname = self._pick(SURNAMES)
        birthdate = self.unique_birthdate(window, used)

        return Employee(
            gender=gender,
            birthdate=birthdate,
            name=name,
            surname=surname,
            workload=workload,
        )

    def generate(self) -> List[Employee]:
        """Generate the configured population in generation order"""
        n = self.config.count
        window = self.birthdate_window()
        self._check_capacity(window)
        self.window = window

        for key in self.verification_log:
            self.verification_log[key] = 0

        logger.info(
            f"Generating {n:,} employees, age {self.config.age.min}-{self.config.age.max}, seed={self.seed}"
        )
        if self.verbose:
            print(f"Generating {n:,} employees...")

        used: Set[str] = set()
        employees = []
        for i in range(n):
            employees.append(self.generate_employee(window, used))
            if self.verbose and (i + 1) % 10000 == 0:
                print(f"  Generated {i+1:,} / {n:,}")

        if self.verbose:
            self._verify_employees(employees, window)

        return employees

    def _verify_employees(self, employees: List[Employee], window: Window):
        """Print a verification report for the generated population"""
        validator = EmployeeDataValidator(self.config)
        results = validator.validate_employees(employees_to_dataframe(employees), window)
        results.append(ValidationResult(
            name="Birthdate resamples",
            severity=ValidationSeverity.INFO,
            message=f"{self.verification_log['resamples']:,}",
        ))
        results.append(ValidationResult(
            name="Probed birthdates",
            severity=ValidationSeverity.INFO,
            message=f"{self.verification_log['probed_birthdates']:,}",
        ))
        print_report("Employees", results)


def generate_employees(config: Any, **kwargs) -> List[Employee]:
    """Convenience wrapper: EmployeeGenerator(config, **kwargs).generate()"""
    return EmployeeGenerator(config, **kwargs).generate()


if __name__ == "__main__":
    from config import load_config

    logging.basicConfig(level=logging.INFO)
    generator = EmployeeGenerator(load_config(), verbose=True)
    employees = generator.generate()
    print(f"\nGenerated {len(employees):,} employees")
