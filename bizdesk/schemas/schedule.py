from pydantic import ConfigDict, Field
from typing import List, Optional
from bizdesk.schemas.common import Resource

class AssignedEmployee(Resource):
    id: int
    name: str
    email: Optional[str] = None

class Schedule(Resource):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str
    branch: Optional[str] = None
    morning_shift: Optional[str] = Field(default=None, alias="morningShift")
    afternoon_shift: Optional[str] = Field(default=None, alias="afternoonShift")
    night_shift: Optional[str] = Field(default=None, alias="nightShift")
    grace_period: int = Field(default=0, alias="gracePeriod")
    overtime_threshold: int = Field(default=0, alias="overtimeThreshold")
    assigned_employees: List[AssignedEmployee] = Field(default_factory=list, alias="assignedEmployees")
