from typing import Any, Dict, List, Optional
from pydantic import field_validator
from bizdesk.forms.base import Form, FormErrorMap, is_blank, number_to_str
from bizdesk.schemas.context import BranchContext

SHIFTS = ("morning", "afternoon", "night")


def _is_whole_number(value: str, minimum: int = 0) -> bool:
    try:
        return int(value.strip()) >= minimum
    except ValueError:
        return False


class ScheduleForm(Form):
    schedule_name: str = ""
    branch_id: str = ""
    morning_start: str = ""
    morning_end: str = ""
    afternoon_start: str = ""
    afternoon_end: str = ""
    night_start: str = ""
    night_end: str = ""
    grace_period: str = ""
    overtime_threshold: str = ""
    selected_employees: List[str] = []

    @field_validator("branch_id", "grace_period", "overtime_threshold", "selected_employees", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        return number_to_str(v)

    def _shift(self, name: str):
        return getattr(self, f"{name}_start"), getattr(self, f"{name}_end")

    def has_complete_shift(self) -> bool:
        return any(not is_blank(start) and not is_blank(end) for start, end in map(self._shift, SHIFTS))

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if is_blank(self.schedule_name):
            errors["schedule_name"] = "Schedule name is required"
        if is_blank(self.branch_id):
            errors["branch_id"] = "Branch is required"

        if is_blank(self.grace_period):
            errors["grace_period"] = "Grace period is required"
        elif not _is_whole_number(self.grace_period):
            errors["grace_period"] = "Grace period must be a valid number (0 or greater)"

        if is_blank(self.overtime_threshold):
            errors["overtime_threshold"] = "Overtime threshold is required"
        elif not _is_whole_number(self.overtime_threshold):
            errors["overtime_threshold"] = "Overtime threshold must be a valid number (0 or greater)"

        for name in SHIFTS:
            start, end = self._shift(name)
            if is_blank(start) != is_blank(end):
                errors[f"{name}_shift"] = f"Both start and end times are required for {name} shift"

        if not self.has_complete_shift():
            errors["shifts"] = ("At least one shift (Morning, Afternoon, or Night) must be configured "
                                "with both start and end times")

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        return {
            "schedule_name": self.schedule_name,
            "branch_id": self.branch_id,
            "morning_shift_start": self.morning_start,
            "morning_shift_end": self.morning_end,
            "afternoon_shift_start": self.afternoon_start,
            "afternoon_shift_end": self.afternoon_end,
            "night_shift_start": self.night_start,
            "night_shift_end": self.night_end,
            "grace_period": self.grace_period,
            "overtime": self.overtime_threshold,
            "user_ids": list(self.selected_employees),
        }
