from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterator, Optional, Union

import structlog

from infrastructure.logging_config import configure_default_logging
from core_domain.value_objects.identifiers import EmployeeId
from core_domain.value_objects.person_name import require_name

configure_default_logging()
log = structlog.get_logger(__name__)

TraceSink = Callable[[str], None]

_trace_sink: TraceSink = print


def set_comparison_trace(sink: TraceSink) -> TraceSink:
    """Replaces the sink receiving comparison trace lines. Returns the previous one."""
    global _trace_sink
    previous = _trace_sink
    _trace_sink = sink
    return previous


@contextmanager
def comparison_trace(sink: TraceSink) -> Iterator[TraceSink]:
    previous = set_comparison_trace(sink)
    try:
        yield sink
    finally:
        set_comparison_trace(previous)


def _trace(branch: str, line: str, **context: Any) -> None:
    log.debug("Employee comparison", branch=branch, **context)
    _trace_sink(line)


@dataclass(frozen=True, eq=False, repr=False)
class Employee:
    """
    An employee record, validated once on construction.
    Entity identity is defined by `id`: names take no part in equality or hashing.
    """
    id: Union[EmployeeId, int]
    first_name: str
    last_name: str

    def __post_init__(self):
        # Gate order matters: the first broken field is the one reported.
        if not isinstance(self.id, EmployeeId):
            object.__setattr__(self, 'id', EmployeeId(self.id))
        require_name(self.first_name, "First name", field="first_name")
        require_name(self.last_name, "Last name", field="last_name")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def with_changes(self, **changes: Any) -> "Employee":
        """Returns a copy with the given fields replaced, validated like a new employee."""
        return replace(self, **changes)

    def to_display_string(self) -> str:
        return f"Employee(ID: {self.id}, Full Name: {self.full_name})"

    # --- Equality and Representation ---
    def __eq__(self, other):
        if isinstance(other, Employee):
            return employees_equal(self, other)
        return False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        """Entities are hashable based on their ID."""
        return hash(self.id)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self):
        return (
            f"<Employee(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )


def employees_equal(first: Optional[Employee], second: Optional[Employee]) -> bool:
    """
    Compares two possibly absent employees by ID, tracing the branch taken.

    Two absent employees are equal; one absent employee never equals a present one.
    """
    if first is None and second is None:
        _trace("both_null", "Both employees are null")
        return True
    if first is None:
        _trace("first_null", "First employee is null")
        return False
    if second is None:
        _trace("second_null", "Second employee is null")
        return False

    are_equal = first.id == second.id
    if are_equal:
        _trace("ids_equal", f"Employees are equal (Same ID: {first.id})", employee_id=int(first.id))
    else:
        _trace(
            "ids_different",
            f"Employees are different (IDs: {first.id} vs {second.id})",
            first_id=int(first.id),
            second_id=int(second.id),
        )
    return are_equal


def employees_not_equal(first: Optional[Employee], second: Optional[Employee]) -> bool:
    return not employees_equal(first, second)
