from typing import Any, Dict, Optional
from pydantic import BaseModel, field_validator
from bizdesk.forms.base import Form, FormErrorMap, EMAIL_PATTERN, number_to_str
from bizdesk.schemas.context import BranchContext


class AddressInput(BaseModel):
    country: str = ""
    zipcode: str = ""
    region: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    barangay: Optional[str] = None
    block_lot: str = ""
    street: str = ""


class CustomerForm(Form):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    fb_name: str = ""
    phone_number: str = ""
    tin: str = ""
    branch_id: str = ""
    address: AddressInput = AddressInput()

    @field_validator("branch_id", mode="before")
    @classmethod
    def numeric_branch(cls, v):
        return number_to_str(v)

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.first_name.strip():
            errors["first_name"] = "First name is required"

        # email is optional, but must look like one when given
        if self.email.strip() and not EMAIL_PATTERN.match(self.email.strip()):
            errors["email"] = "Please enter a valid email address"

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        phone_number = self.phone_number.strip()
        if phone_number and not phone_number.startswith("+"):
            phone_number = "+" + phone_number

        branch_id = branch.id if branch else (int(self.branch_id) if self.branch_id.strip().isdigit() else None)

        data: Dict[str, Any] = {
            "first_name": self.first_name.strip(),
            "last_name": self.last_name.strip(),
            "email": self.email.strip(),
            "phone_number": phone_number,
            "branch_id": branch_id,
        }

        # The address block is only sent once a country is picked
        if self.address.country.strip():
            data["address"] = {
                "country": self.address.country.strip(),
                "postal_code": self.address.zipcode.strip() or None,
                "region": self.address.region or "",
                "province": self.address.province or "",
                "city": self.address.city or "",
                "barangay": self.address.barangay or "",
                "street": self.address.street.strip() or None,
                "block_lot": self.address.block_lot.strip() or None,
            }

        if self.fb_name.strip():
            data["fb_name"] = self.fb_name.strip()
        if self.tin.strip():
            data["tin"] = self.tin.strip()

        return data
