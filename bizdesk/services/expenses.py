from typing import Any, Dict, List, Tuple
import logging
from bizdesk.core.endpoints import API_ENDPOINTS, endpoint
from bizdesk.schemas.expense import Expense
from bizdesk.services.base import ResourceService

logger = logging.getLogger(__name__)

# (file_name, content, content_type)
FileTuple = Tuple[str, bytes, str]


def build_form_fields(payload: Dict[str, Any]) -> Tuple[List[Tuple[str, str]], List[Tuple[str, FileTuple]]]:
    """
    Flatten an expense payload into multipart parts the way the backend expects:
    scalars as-is, attachment_ids_to_keep[i] per kept id, attachments[i] per new file.
    """
    fields: List[Tuple[str, str]] = []
    files: List[Tuple[str, FileTuple]] = []
    for key, value in payload.items():
        if value is None:
            continue
        if key == "attachments":
            for index, file in enumerate(value):
                files.append((f"attachments[{index}]", file))
        elif key == "attachment_ids_to_keep":
            for index, kept_id in enumerate(value):
                fields.append((f"attachment_ids_to_keep[{index}]", str(kept_id)))
        else:
            fields.append((key, str(value)))
    return fields, files


class ExpenseService(ResourceService[Expense]):
    label = "expense"
    model = Expense
    endpoints = API_ENDPOINTS["EXPENSES"]

    def create(self, payload: Dict[str, Any]) -> Any:
        fields, files = build_form_fields(payload)
        response = self.client.post(self.endpoints["BASE"], data=fields, files=files or None)
        logger.info(f"Created expense with {len(files)} attachment(s)")
        return response

    def update(self, id: int, payload: Dict[str, Any]) -> Any:
        fields, files = build_form_fields(payload)
        # multipart bodies cannot ride on PATCH; Laravel reads the override field
        fields.append(("_method", "PATCH"))
        response = self.client.post(endpoint(self.endpoints["UPDATE"], id=id), data=fields, files=files or None)
        logger.info(f"Updated expense {id}")
        return response
