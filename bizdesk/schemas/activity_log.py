from typing import Optional
from bizdesk.schemas.common import Resource

class ActivityLog(Resource):
    module: str
    activity: str
    item_name: Optional[str] = None
    branch: Optional[str] = None
    created_by: Optional[str] = None
    created_at: str
