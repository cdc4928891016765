from bizdesk.core.endpoints import API_ENDPOINTS
from bizdesk.schemas.discount import Discount
from bizdesk.services.base import ResourceService

class DiscountService(ResourceService[Discount]):
    label = "discount"
    model = Discount
    endpoints = API_ENDPOINTS["DISCOUNTS"]
    update_method = "PATCH"
