from bizdesk.core.endpoints import API_ENDPOINTS
from bizdesk.schemas.management import Role
from bizdesk.services.base import ResourceService

class RoleService(ResourceService[Role]):
    # GET /management/roles answers either a bare list or a resource collection under "data"
    label = "role"
    model = Role
    endpoints = API_ENDPOINTS["ROLES"]
    update_method = "PATCH"
