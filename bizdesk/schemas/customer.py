from typing import Optional
from bizdesk.schemas.common import Resource, Address, BranchRef, TenantRef

class Customer(Resource):
    id: int
    tenant: Optional[TenantRef] = None
    branch: Optional[BranchRef] = None
    branch_id: Optional[int] = None
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    fb_name: Optional[str] = None
    phone_number: Optional[str] = None
    tin: Optional[str] = None
    address: Optional[Address] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in [self.first_name, self.last_name] if p)
