from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import structlog

from application.mappers.employee_mapper import map_dict_to_employee
from core_domain.entities.employee import comparison_trace
from core_domain.exceptions import ValidationError

log = structlog.get_logger(__name__)

DEMO_EMPLOYEES: List[Dict[str, Any]] = [
    {"id": 101, "first_name": "Sarah", "last_name": "Wilson"},
    {"id": 101, "first_name": "Michael", "last_name": "Brown"},
    {"id": 102, "first_name": "Emma", "last_name": "Davis"},
]
INVALID_EMPLOYEE: Dict[str, Any] = {"id": -1, "first_name": "Invalid", "last_name": "Employee"}


@dataclass
class DemoResult:
    equal_same_id: Optional[bool] = None
    not_equal_different_id: Optional[bool] = None
    validation_error: Optional[str] = None


def run_employee_demo(
    write: Callable[[str], None] = print,
    pause: Optional[Callable[[], None]] = None,
) -> DemoResult:
    """
    Use case that walks through construction, display, comparison and a failing
    validation, writing each line through `write`.

    Parameters:
        write: receives every output line, comparison traces included.
        pause: called after the closing prompt; None skips the wait.

    Returns:
        DemoResult: the comparison outcomes and the caught validation message.
    """
    demo_log = log.bind(use_case="employee_demo")
    result = DemoResult()

    with comparison_trace(write):
        try:
            write("Creating and Comparing Employees:\n")

            employee1, employee2, employee3 = (map_dict_to_employee(raw) for raw in DEMO_EMPLOYEES)
            demo_log.info("Employees created", count=len(DEMO_EMPLOYEES))

            write("Employee Details:")
            write(str(employee1))
            write(str(employee2))
            write(str(employee3))
            write("")

            write("Comparison Results:")
            write("Comparing employee1 and employee2:")
            result.equal_same_id = employee1 == employee2
            write(f"Result: {result.equal_same_id}\n")

            write("Comparing employee1 and employee3:")
            result.not_equal_different_id = employee1 != employee3
            write(f"Result: {result.not_equal_different_id}")

            write("\nTrying to create invalid employee:")
            map_dict_to_employee(INVALID_EMPLOYEE)
        except ValidationError as e:
            result.validation_error = e.message
            demo_log.warning("Employee validation failed", field=e.field, error=e.message)
            write(f"Validation Error: {e.message}")

    write("\nPress any key to exit...")
    if pause is not None:
        pause()
    return result
