from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import (
    DomainError,
    NotConfiguredError,
    SuggestionError,
    SuggestionInProgressError,
    SuggestionNotConfiguredError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotConfiguredError, 404),
    (SuggestionInProgressError, 409),
    (SuggestionNotConfiguredError, 503),
    (SuggestionError, 502),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def api_error_handler(view):
    """Turn domain errors into JSON answers; anything else is logged as a 500."""

    if inspect.iscoroutinefunction(view):

        @wraps(view)
        async def async_wrapper(*args, **kwargs):
            try:
                return await view(*args, **kwargs)
            except DomainError as e:
                return jsonify({"error": str(e)}), status_for(e)
            except Exception:
                logger.exception("unexpected error in endpoint %r", view.__name__)
                return jsonify({"error": "Erro inesperado no servidor."}), 500

        return async_wrapper

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return jsonify({"error": str(e)}), status_for(e)
        except Exception:
            logger.exception("unexpected error in endpoint %r", view.__name__)
            return jsonify({"error": "Erro inesperado no servidor."}), 500

    return wrapper


def json_body(*, required: bool = True) -> dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None and not required:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON inválido")
    return data
