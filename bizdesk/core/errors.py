from typing import Any, Dict, Optional


class ApiError(Exception):
    """Non-2xx answer (or transport failure, status 0) from the upstream backend."""

    def __init__(self, status: int, data: Any = None):
        self.status = status
        self.data = data
        super().__init__(f"API error: {status}")

    @property
    def message(self) -> Optional[str]:
        if isinstance(self.data, dict):
            message = self.data.get("message")
            if message:
                return str(message)
        return None

    @property
    def field_errors(self) -> Optional[Dict[str, Any]]:
        if isinstance(self.data, dict) and isinstance(self.data.get("errors"), dict):
            return self.data["errors"]
        return None


class FormErrors(Exception):
    """Field -> message mapping shown inline next to form inputs. 'general' holds banner text."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class ResourceNotFound(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def extract_field_errors(error: Exception, default_message: str) -> Dict[str, str]:
    """
    Flatten a Laravel validation envelope {"errors": {"field": ["msg", ...]}}
    into {"field": "msg"}. Anything else becomes {"general": message}.
    """
    if isinstance(error, ApiError):
        raw = error.field_errors
        if raw:
            flat: Dict[str, str] = {}
            for field, messages in raw.items():
                if isinstance(messages, (list, tuple)):
                    flat[field] = str(messages[0]) if messages else ""
                else:
                    flat[field] = str(messages)
            return flat
        return {"general": error.message or default_message}

    if isinstance(error, FormErrors):
        return dict(error.errors)

    return {"general": default_message}


def error_message(error: Exception, default_message: str) -> str:
    if isinstance(error, ApiError):
        return error.message or str(error)
    return str(error) or default_message
