from typing import Any, List
import logging
from bizdesk.core.endpoints import API_ENDPOINTS, endpoint
from bizdesk.schemas.schedule import Schedule
from bizdesk.services.base import ResourceService

logger = logging.getLogger(__name__)


class ScheduleService(ResourceService[Schedule]):
    label = "schedule"
    model = Schedule
    endpoints = dict(API_ENDPOINTS["SCHEDULES"], CREATE=API_ENDPOINTS["SCHEDULES"]["STORE"])
    list_key = "schedules"
    update_method = "PUT"

    def assign_employees(self, id: int, user_ids: List[str]) -> Any:
        logger.info(f"Assigning {len(user_ids)} employee(s) to schedule {id}")
        return self.client.put(endpoint(self.endpoints["EMPLOYEES"], id=id),
                               json_body={"user_ids": [str(u) for u in user_ids]})
