"""
Employee Name Statistics - Data Models & Schemas
================================================
Defines the employee record, the name corpora and the statistics DTO.
Constraints are verified at construction time.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping
from enum import Enum
from types import MappingProxyType
import pandas as pd


# ============================================================
# ENUMERATIONS - Constrained categorical values
# ============================================================

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Bucket(str, Enum):
    """Named subsets of the name-count aggregation, in publication order"""
    ALL = "all"
    MALE = "male"
    FEMALE = "female"
    FEMALE_PART_TIME = "femalePartTime"
    MALE_FULL_TIME = "maleFullTime"


WORKLOAD_LEVELS = (10, 20, 30, 40)
FULL_TIME_WORKLOAD = 40

EMPLOYEE_FIELDS = ('gender', 'birthdate', 'name', 'surname', 'workload')


# ============================================================
# CORPORA - Read-only lookup tables
# ============================================================

MALE_NAMES = (
    "Jan", "Petr", "Pavel", "Jiří", "Josef", "Tomáš", "Martin", "Jaroslav",
    "Miroslav", "František", "Václav", "Karel", "Milan", "David", "Michal",
    "Vratislav", "Zdeněk", "Lukáš", "Marek", "Jakub", "Ondřej", "Stanislav",
)

FEMALE_NAMES = (
    "Jana", "Marie", "Eva", "Anna", "Hana", "Věra", "Alena", "Lenka",
    "Petra", "Jitka", "Martina", "Kateřina", "Lucie", "Monika", "Aneta",
    "Jiřina", "Ivana", "Veronika", "Tereza", "Barbora", "Zuzana", "Michaela",
)

SURNAMES = (
    "Novák", "Svoboda", "Novotný", "Dvořák", "Černý", "Procházka", "Kučera",
    "Veselý", "Horák", "Němec", "Marek", "Pospíšil", "Pokorný", "Hájek",
    "Král", "Jelínek", "Růžička", "Beneš", "Fiala", "Sedláček", "Doležal",
    "Zeman", "Kolář", "Navrátil", "Čermák", "Sýkora", "Ptáček", "Urban",
    "Krejčí", "Vaněk",
)

NAMES_BY_GENDER = MappingProxyType({
    Gender.MALE: MALE_NAMES,
    Gender.FEMALE: FEMALE_NAMES,
})


# ============================================================
# DATACLASS MODELS - With validation
# ============================================================

@dataclass(frozen=True)
class Employee:
    """
    One synthetic employee.
    birthdate is an ISO-8601 UTC string with millisecond precision.
    """
    gender: Gender
    birthdate: str
    name: str
    surname: str
    workload: int

    def __post_init__(self):
        # frozen, so coerce through object.__setattr__
        object.__setattr__(self, 'gender', Gender(self.gender))
        if self.workload not in WORKLOAD_LEVELS:
            raise ValueError(
                f"Workload {self.workload!r} not in {WORKLOAD_LEVELS}"
            )

    @property
    def is_full_time(self) -> bool:
        return self.workload == FULL_TIME_WORKLOAD

    def to_dict(self) -> dict:
        return {
            'gender': self.gender.value,
            'birthdate': self.birthdate,
            'name': self.name,
            'surname': self.surname,
            'workload': self.workload,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "Employee":
        missing = [f for f in EMPLOYEE_FIELDS if f not in data]
        if missing:
            raise ValueError(f"Employee missing required field(s): {', '.join(missing)}")
        return cls(
            gender=data['gender'],
            birthdate=data['birthdate'],
            name=data['name'],
            surname=data['surname'],
            workload=data['workload'],
        )


@dataclass(frozen=True)
class ChartPoint:
    label: str
    value: int

    def to_dict(self) -> dict:
        return {'label': self.label, 'value': self.value}


@dataclass
class EmployeeStatistics:
    """
    Statistics DTO.
    names[bucket] is a name->count dict ordered by count descending,
    chart_data[bucket] holds the same entries as ChartPoint pairs.
    """
    names: Dict[Bucket, Dict[str, int]] = field(default_factory=dict)
    chart_data: Dict[Bucket, List[ChartPoint]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'names': {
                bucket.value: dict(self.names.get(bucket, {}))
                for bucket in Bucket
            },
            'chartData': {
                bucket.value: [p.to_dict() for p in self.chart_data.get(bucket, [])]
                for bucket in Bucket
            },
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Long-format view: one row per (bucket, name), ranked within bucket"""
        rows = []
        for bucket in Bucket:
            for rank, point in enumerate(self.chart_data.get(bucket, []), start=1):
                rows.append({
                    'bucket': bucket.value,
                    'rank': rank,
                    'label': point.label,
                    'value': point.value,
                })
        return apply_schema(
            pd.DataFrame(rows, columns=list(STATISTICS_SCHEMA)),
            STATISTICS_SCHEMA,
        )


# ============================================================
# SCHEMA DEFINITIONS - For DataFrame inspection
# ============================================================

EMPLOYEE_SCHEMA = {
    'gender': 'category',
    'birthdate': 'string',
    'name': 'string',
    'surname': 'string',
    'workload': 'int8',
}

STATISTICS_SCHEMA = {
    'bucket': 'category',
    'rank': 'int32',
    'label': 'string',
    'value': 'int32',
}


def employees_to_dataframe(employees: Iterable[Employee]) -> pd.DataFrame:
    """Tabulate employees in generation order"""
    df = pd.DataFrame(
        [e.to_dict() for e in employees],
        columns=list(EMPLOYEE_SCHEMA),
    )
    return apply_schema(df, EMPLOYEE_SCHEMA)


def apply_schema(df: pd.DataFrame, schema: dict) -> pd.DataFrame:
    """Apply schema types to DataFrame for memory optimization"""
    for col, dtype in schema.items():
        if col in df.columns:
            df[col] = df[col].astype(dtype)
    return df
