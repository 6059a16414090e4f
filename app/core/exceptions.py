from typing import Optional

from fastapi import HTTPException

from app.core.header_util import create_failure_alert


class AppBaseException(Exception):
    """Базовый класс для всех ошибок приложения"""
    pass

class ResourceNotFoundError(AppBaseException):
    """Ошибка: запись в БД не найдена"""
    pass


class BadRequestAlertException(HTTPException):
    """
    400 с ключом ошибки для клиента.
    Ключ уходит в тело (problem document) и в заголовки X-<app>-error / X-<app>-params.
    """

    def __init__(self, message: str, entity_name: str, error_key: str, headers: Optional[dict] = None):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        alert_headers = create_failure_alert(entity_name, error_key)
        if headers:
            alert_headers.update(headers)
        super().__init__(status_code=400, detail=message, headers=alert_headers)
