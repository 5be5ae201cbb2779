"""
Employee Name Statistics - Entry Points
=======================================
Generates employee data and analyzes name statistics per category.

Usage:
    from pipeline import main

    dto_out = main({'count': 50, 'age': {'min': 19, 'max': 35}})
    dto_out['chartData']['femalePartTime']
"""

from typing import Any, Iterable, List, Mapping, Union

from aggregator import aggregate
from generator import EmployeeGenerator
from models import Employee, employees_to_dataframe
from validation import EmployeeDataValidator, print_report


def generate_employee_data(dto_in: Any, **kwargs) -> List[Employee]:
    """
    Generate random employees.

    Args:
        dto_in: GeneratorConfig or mapping {count, age: {min, max}}
        **kwargs: forwarded to EmployeeGenerator (rng, random_source, now, verbose)
    """
    return EmployeeGenerator(dto_in, **kwargs).generate()


def get_employee_chart_content(employees: Iterable[Union[Employee, Mapping]]) -> dict:
    """
    Name frequencies per bucket, as {'names': ..., 'chartData': ...}.
    Mappings must carry every Employee field; a missing one raises ValueError.
    """
    records = [
        e if isinstance(e, Employee) else Employee.from_dict(e)
        for e in employees
    ]
    return aggregate(records).to_dict()


def main(dto_in: Any, verbose: bool = False, **kwargs) -> dict:
    """
    Generate employees and return their name statistics.
    verbose=True prints a verification report over employees and statistics.
    """
    generator = EmployeeGenerator(dto_in, **kwargs)
    employees = generator.generate()
    statistics = aggregate(employees)

    if verbose:
        validator = EmployeeDataValidator(generator.config)
        results = validator.validate_all(
            employees_to_dataframe(employees), statistics, generator.window
        )
        print_report("Employee Statistics", results)
        summary = validator.get_summary()
        print(f"{summary['passed']}/{summary['total']} passed, "
              f"{summary['warnings']} warnings, {summary['failed']} failed")

    return statistics.to_dict()
