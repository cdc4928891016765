from typing import List, Optional, Union
from bizdesk.schemas.common import Resource, Address, TenantRef

class Branch(Resource):
    id: int
    tenant_id: Optional[int] = None
    name: str
    branch_code: Optional[str] = None
    email: Optional[str] = None
    contact_no: Optional[str] = None
    address: Optional[Address] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class Tenant(Resource):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class Role(Resource):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class RoleRef(Resource):
    id: int
    name: str

class UserInfo(Resource):
    id: Optional[int] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[Address] = None
    profile_pic: Optional[str] = None

class UserBranch(Resource):
    id: int
    name: str
    tenant: Optional[TenantRef] = None

class UserEntity(Resource):
    id: int
    name: Optional[str] = None
    email: str
    role: Union[RoleRef, int, str, None] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_info: Optional[UserInfo] = None
    branches: List[UserBranch] = []
