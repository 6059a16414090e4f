"""
Заголовки-уведомления для клиентского UI (toast-сообщения).

Чистые функции: на входе имя сущности и параметр, на выходе словарь заголовков.
"""
from typing import Dict

from app.core.config import settings


def _alert_header() -> str:
    return f"X-{settings.APP_NAME}-alert"


def _params_header() -> str:
    return f"X-{settings.APP_NAME}-params"


def _error_header() -> str:
    return f"X-{settings.APP_NAME}-error"


def create_alert(message: str, param: str) -> Dict[str, str]:
    return {
        _alert_header(): message,
        _params_header(): param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.APP_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.APP_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.APP_NAME}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        _error_header(): f"error.{error_key}",
        _params_header(): entity_name,
    }
