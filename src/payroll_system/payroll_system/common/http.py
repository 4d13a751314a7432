from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import NoDataError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(failure_message: str):
    """Map domain errors to JSON responses for a view.

    Input problems answer 400, empty results and unknown records 404; any
    other failure (storage included) is logged and answered with a generic 500.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return json_error(str(e), 400)
            except (NoDataError, NotFoundError) as e:
                return json_error(str(e), 404)
            except Exception:
                logger.exception("%s failed", view.__name__)
                return json_error(failure_message, 500)

        return wrapper

    return decorator
