from typing import List, Optional
from bizdesk.core.endpoints import API_ENDPOINTS
from bizdesk.schemas.customer import Customer
from bizdesk.services.base import ResourceService

class CustomerService(ResourceService[Customer]):
    label = "customer"
    model = Customer
    endpoints = API_ENDPOINTS["CUSTOMERS"]
    update_method = "PATCH"

    def list(self, search: Optional[str] = None, page: Optional[int] = None,
             per_page: Optional[int] = None, branch_id: Optional[int] = None) -> List[Customer]:
        return super().list(search=search, page=page, per_page=per_page, branch_id=branch_id)
