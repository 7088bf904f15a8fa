from __future__ import annotations

import csv
import io
import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session

from ..core.enums import Permission
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from ..core.permissions import has_any_permission, has_permission
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def permission_required(*permissions: Permission):
    """Allow the view when the session role holds any of `permissions`."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Authentication required"}), 401
            if not has_any_permission(session.get("role"), permissions):
                return jsonify({"success": False, "message": "Insufficient permissions"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def scoped_teacher_id(requested: Optional[int], *, full: Permission, own: Permission) -> Optional[int]:
    """Teacher filter the current user may use.

    Holders of `full` may ask for any teacher (or all, with None); holders of
    only `own` are pinned to their linked teacher.
    """
    role = session.get("role")
    if has_permission(role, full):
        return requested
    if has_permission(role, own):
        own_id = session.get("teacher_id")
        if own_id is None or (requested is not None and int(requested) != int(own_id)):
            raise AuthorizationError("You may only view your own records")
        return int(own_id)
    raise AuthorizationError("Insufficient permissions")


def arg_int(name: str) -> Optional[int]:
    raw = request.args.get(name)
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer") from exc


def arg_date(name: str):
    raw = request.args.get(name)
    if not raw:
        raise ValidationError(f"{name} is required")
    return parse_iso_date(raw)


def arg_bool(name: str) -> Optional[bool]:
    raw = request.args.get(name)
    if raw is None:
        return None
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def csv_response(app: Flask, *, rows: list[dict], fieldnames: list[str], filename: str):
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    csv_bytes = out.getvalue().encode("utf-8-sig")
    return app.response_class(
        csv_bytes,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    def _error(exc: Exception, status: int):
        return jsonify({"success": False, "message": str(exc)}), status

    app.register_error_handler(ValidationError, lambda e: _error(e, 400))
    app.register_error_handler(AuthenticationError, lambda e: _error(e, 401))
    app.register_error_handler(AuthorizationError, lambda e: _error(e, 403))
    app.register_error_handler(NotFoundError, lambda e: _error(e, 404))
    app.register_error_handler(DomainError, lambda e: _error(e, 400))

    @app.errorhandler(500)
    def _internal(exc):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "message": "Internal server error"}), 500
