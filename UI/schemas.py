# UI/schemas.py
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# backends hand out either numeric or string ids; keep whichever we got
Identifier = Union[int, str]


class Record(BaseModel):
    # backends are not strict about phone numbers and the like; show what we get
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Identifier


class Department(Record):
    name: str
    description: Optional[str] = None


class Employee(Record):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    department_id: Optional[Identifier] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LeaveRequest(Record):
    employee_id: Identifier
    start_date: str
    end_date: str
    reason: Optional[str] = None
    status: Optional[str] = None


# -----------------------------
# Create payloads
# -----------------------------
class DepartmentCreate(BaseModel):
    name: str = Field(..., examples=["Engineering"])
    # sent as-is, empty string included
    description: str = ""


class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: Optional[Identifier] = None
    role: Optional[str] = None


class LeaveCreate(BaseModel):
    employee_id: Identifier
    start_date: date
    end_date: date
    reason: Optional[str] = None
