from typing import Any, Dict

import structlog
from pydantic import ValidationError as SchemaValidationError

from application.schemas.employee_schema import EmployeeSchema
from core_domain.entities.employee import Employee
from core_domain.exceptions import ValidationError

log = structlog.get_logger(__name__)


def map_dict_to_schema(raw: Dict[str, Any]) -> EmployeeSchema:
    """
    Parses a raw record into an EmployeeSchema.
    Type errors surface as the domain ValidationError so callers handle one error kind.
    """
    try:
        return EmployeeSchema.model_validate(raw)
    except SchemaValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        log.warning("Employee record failed schema validation", record=raw, errors=e.error_count())
        raise ValidationError(f"{location}: {first.get('msg')}", field=location or None) from e


def map_schema_to_employee(schema: EmployeeSchema) -> Employee:
    return Employee(schema.id, schema.first_name, schema.last_name)


def map_dict_to_employee(raw: Dict[str, Any]) -> Employee:
    return map_schema_to_employee(map_dict_to_schema(raw))
