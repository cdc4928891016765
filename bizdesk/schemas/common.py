from pydantic import BaseModel, ConfigDict, Field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Resource(BaseModel):
    # The backend adds fields freely; only the ones below are relied on.
    model_config = ConfigDict(extra="ignore")


class Address(Resource):
    id: Optional[int] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    region: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    barangay: Optional[str] = None
    street: Optional[str] = None
    block_lot: Optional[str] = None


class BranchRef(Resource):
    id: int
    name: str
    email: Optional[str] = None
    contact_no: Optional[str] = None
    branch_code: Optional[str] = None


class TenantRef(Resource):
    id: int
    name: str
    email: Optional[str] = None


class Pagination(BaseModel):
    current_page: int = 1
    last_page: int = 1
    per_page: int = 10
    total: int = 0
    from_: Optional[int] = Field(default=None, alias="from")
    to: Optional[int] = None
    has_more_pages: bool = False

    model_config = ConfigDict(populate_by_name=True)


class Page(BaseModel, Generic[T]):
    items: List[T] = []
    pagination: Pagination
