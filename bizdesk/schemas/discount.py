from typing import Optional
from bizdesk.schemas.common import Resource, BranchRef

class Discount(Resource):
    id: int
    branch: Optional[BranchRef] = None
    name: str
    usages: int
    start_date: str
    end_date: str
    value: Optional[float] = None
    value_in_percentage: Optional[float] = None
    classification: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
