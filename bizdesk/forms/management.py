from typing import Any, Dict, Iterable, List, Optional
from pydantic import BaseModel
from bizdesk.forms.base import Form, FormErrorMap, LOOSE_EMAIL_PATTERN, is_blank
from bizdesk.schemas.context import BranchContext
from bizdesk.schemas.management import Role

USER_ADDRESS_FIELDS = ("region", "province", "city", "barangay")


def _clean_address(address: Dict[str, Optional[str]]) -> Dict[str, str]:
    return {k: v.strip() for k, v in (address or {}).items() if isinstance(v, str) and v.strip()}


def _check_email(email: str, errors: FormErrorMap):
    if not email.strip():
        errors["email"] = "Email is required"
    elif not LOOSE_EMAIL_PATTERN.search(email):
        errors["email"] = "Invalid email format"


class BranchForm(Form):
    name: str = ""
    email: str = ""
    contact_no: str = ""
    address: Dict[str, Optional[str]] = {}

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}
        if not self.name.strip():
            errors["name"] = "Branch name is required"
        _check_email(self.email, errors)
        if not self.contact_no.strip():
            errors["contact_no"] = "Contact number is required"
        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name.strip(),
            "email": self.email.strip(),
            "contact_no": self.contact_no.strip(),
        }
        address = _clean_address(self.address)
        if address:
            data["address"] = address
        return data


class TenantForm(Form):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: Dict[str, Optional[str]] = {}

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}
        if not self.name.strip():
            errors["name"] = "Tenant name is required"
        _check_email(self.email, errors)
        if not self.phone.strip():
            errors["phone"] = "Phone number is required"
        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name.strip(),
            "email": self.email.strip(),
            "phone": self.phone.strip(),
        }
        address = _clean_address(self.address)
        if address:
            data["address"] = address
        return data


class UserInfoInput(BaseModel):
    first_name: str = ""
    last_name: str = ""
    middle_name: str = ""
    address: Dict[str, Optional[str]] = {}


class UserForm(Form):
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: Optional[int] = None
    branch_ids: List[int] = []
    user_info: UserInfoInput = UserInfoInput()

    def validate_form(self, is_edit: bool = False, branch: Optional[BranchContext] = None,
                      **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.user_info.first_name.strip():
            errors["first_name"] = "First name is required"
        if not self.user_info.last_name.strip():
            errors["last_name"] = "Last name is required"
        _check_email(self.email, errors)
        if not self.role:
            errors["role"] = "Role is required"
        if not self.branch_ids and branch is None:
            errors["branch_ids"] = "Active branch is required"

        # editing only checks the password when a new one is typed
        if not is_edit or self.password:
            if not self.password:
                errors["password"] = "Password is required"
            elif len(self.password) < 8:
                errors["password"] = "Password must be at least 8 characters"
            if self.password != self.confirm_password:
                errors["confirm_password"] = "Passwords do not match"

        for field in USER_ADDRESS_FIELDS:
            if is_blank(self.user_info.address.get(field)):
                errors[f"address.{field}"] = f"{field.capitalize()} is required"

        return errors

    def user_info_payload(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {
            "first_name": self.user_info.first_name.strip(),
            "last_name": self.user_info.last_name.strip(),
        }
        if self.user_info.middle_name.strip():
            info["middle_name"] = self.user_info.middle_name.strip()
        address = _clean_address(self.user_info.address)
        if address:
            info["address"] = address
        return info

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "email": self.email.strip(),
            "role_id": self.role,
            "user_info": self.user_info_payload(),
        }
        if not is_edit:
            data["password"] = self.password
            data["password_confirmation"] = self.confirm_password
            data["branch_ids"] = [branch.id] if branch else list(self.branch_ids)
        elif self.password:
            data["password"] = self.password
            data["password_confirmation"] = self.password
        return data


class RoleForm(Form):
    name: str = ""
    description: str = ""

    def validate_form(self, existing: Iterable[Role] = (), exclude_id: Optional[int] = None,
                      **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.name.strip():
            errors["name"] = "Role name is required"
        if not self.description.strip():
            errors["description"] = "Description is required"

        wanted = self.name.strip().lower()
        if wanted and any(r.name.lower() == wanted and r.id != exclude_id for r in existing):
            errors["name"] = "Role name already exists"

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        return {"name": self.name.strip(), "description": self.description.strip()}
