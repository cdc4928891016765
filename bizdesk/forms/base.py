from datetime import date
from typing import Any, Dict, Optional, Type, TypeVar
import re
from pydantic import BaseModel, ConfigDict, ValidationError
from bizdesk.core.errors import FormErrors

F = TypeVar("F", bound="Form")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
LOOSE_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

FormErrorMap = Dict[str, str]


def blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def number_to_str(v: Any) -> Any:
    """JSON clients send ids and counts as numbers; text form fields keep them as strings."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    if isinstance(v, list):
        return [number_to_str(item) for item in v]
    return v


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def parse_date(value: Optional[str]) -> Optional[date]:
    """Accepts 'YYYY-MM-DD' or an ISO timestamp; returns None for blank or malformed input."""
    if is_blank(value):
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


class Form(BaseModel):
    """
    Raw form input for one module. Subclasses implement validate_form() and
    prepare_submit_data().
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def parse(cls: Type[F], data: Dict[str, Any]) -> F:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors: FormErrorMap = {}
            for err in e.errors():
                field = str(err["loc"][0]) if err["loc"] else "general"
                errors.setdefault(field, f"{field.replace('_', ' ').capitalize()} is invalid")
            raise FormErrors(errors)

    def apply_defaults(self, is_edit: bool = False):
        pass

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        raise NotImplementedError

    def check(self, **kwargs: Any):
        errors = self.validate_form(**kwargs)
        if errors:
            raise FormErrors(errors)
