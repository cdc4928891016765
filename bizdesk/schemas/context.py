from pydantic import BaseModel
from typing import Optional

class TenantContext(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

class BranchContext(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    contact_no: Optional[str] = None

class DefaultCurrency(BaseModel):
    id: int
    name: str
    symbol: str
