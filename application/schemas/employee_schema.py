# application/schemas/employee_schema.py
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmployeeSchema(BaseModel):
    """
    Raw employee record as it arrives from outside the domain.
    Only coerces types; the business rules live on the Employee entity.
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    id: int
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')

    @field_validator('id', mode='before')
    @classmethod
    def reject_bool_id(cls, v):
        # lax mode would otherwise turn True into 1
        if isinstance(v, bool):
            raise ValueError("Employee ID must be a positive number.")
        return v
