from typing import List, Optional
from bizdesk.schemas.common import Resource

class ExpenseAttachment(Resource):
    id: int
    expense_id: Optional[int] = None
    attachment: str
    file_name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class Expense(Resource):
    id: int
    name: str
    branch_id: int
    branch_name: Optional[str] = None
    area_of_expense: str
    amount: float
    expense_date: str
    description: Optional[str] = None
    attachments: List[ExpenseAttachment] = []
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
