from bizdesk.core.endpoints import API_ENDPOINTS
from bizdesk.schemas.deduction import CashAdvance, Loan
from bizdesk.services.base import ResourceService

class CashAdvanceService(ResourceService[CashAdvance]):
    label = "cash advance"
    model = CashAdvance
    endpoints = API_ENDPOINTS["DEDUCTIONS"]["CASH_ADVANCE"]
    update_method = "PUT"

class LoanService(ResourceService[Loan]):
    label = "loan"
    model = Loan
    endpoints = API_ENDPOINTS["DEDUCTIONS"]["LOAN"]
    update_method = "PUT"
