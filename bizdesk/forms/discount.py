from typing import Any, Dict, Literal, Optional
from pydantic import field_validator
from bizdesk.forms.base import Form, FormErrorMap, blank_to_none, is_blank, parse_date
from bizdesk.schemas.context import BranchContext
from bizdesk.schemas.discount import Discount

DiscountType = Literal["fixed", "percentage", ""]


class DiscountForm(Form):
    name: str = ""
    usages: Optional[int] = None
    start_date: str = ""
    end_date: str = ""
    value: Optional[float] = None
    value_in_percentage: Optional[float] = None
    classification: str = ""
    discount_type: DiscountType = ""

    @field_validator("usages", "value", "value_in_percentage", mode="before")
    @classmethod
    def empty_numbers(cls, v):
        return blank_to_none(v)

    @classmethod
    def from_discount(cls, discount: Discount) -> "DiscountForm":
        # Fixed wins when both values are set
        if discount.value and discount.value > 0:
            kind, value, percentage = "fixed", discount.value, None
        elif discount.value_in_percentage and discount.value_in_percentage > 0:
            kind, value, percentage = "percentage", None, discount.value_in_percentage
        else:
            kind, value, percentage = "", None, None
        return cls(
            name=discount.name,
            usages=discount.usages,
            start_date=discount.start_date.split(" ")[0],
            end_date=discount.end_date.split(" ")[0],
            value=value,
            value_in_percentage=percentage,
            classification=discount.classification,
            discount_type=kind,
        )

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.name.strip():
            errors["name"] = "Name is required"
        if not self.usages or self.usages < 1:
            errors["usages"] = "Usages must be 1 or greater"
        if not self.classification.strip():
            errors["classification"] = "Classification is required"
        if is_blank(self.start_date):
            errors["start_date"] = "Start date is required"
        if is_blank(self.end_date):
            errors["end_date"] = "End date is required"

        start, end = parse_date(self.start_date), parse_date(self.end_date)
        if start and end and start > end:
            errors["end_date"] = "End date must be on or after start date"

        if self.discount_type == "fixed":
            if not self.value or self.value <= 0:
                errors["value"] = "Fixed value must be greater than 0"
        elif self.discount_type == "percentage":
            if not self.value_in_percentage or not 0 < self.value_in_percentage <= 100:
                errors["value_in_percentage"] = "Percentage must be between 1 and 100"
        else:
            errors["value"] = "Please select a discount type"

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        return {
            "name": self.name,
            "branch_id": branch.id if branch else None,
            "usages": self.usages,
            "start_date": f"{self.start_date} 00:00:00",
            "end_date": f"{self.end_date} 23:59:59",
            "classification": self.classification,
            "value": self.value if self.discount_type == "fixed" else None,
            "value_in_percentage": self.value_in_percentage if self.discount_type == "percentage" else None,
        }
