from abc import ABC, abstractmethod
from typing import List, Optional
from bizdesk.schemas.audit import AuditLogEntry
import logging

logger = logging.getLogger(__name__)

class AuditRepository(ABC):
    @abstractmethod
    def save(self, entry: AuditLogEntry):
        pass

    @abstractmethod
    def get_all(self, tenant_id: Optional[str] = None) -> List[AuditLogEntry]:
        pass

class InMemoryAuditRepository(AuditRepository):
    def __init__(self):
        self._storage: List[AuditLogEntry] = []

    def save(self, entry: AuditLogEntry):
        # append-only
        self._storage.append(entry)
        logger.info(f"Audit Logged: {entry.model_dump_json()}")

    def get_all(self, tenant_id: Optional[str] = None) -> List[AuditLogEntry]:
        if tenant_id is None:
            return list(self._storage)
        return [e for e in self._storage if e.tenant_id == tenant_id]

    def clear(self):
        self._storage.clear()

# Global Accessor
audit_repo = InMemoryAuditRepository()
