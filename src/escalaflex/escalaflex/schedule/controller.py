from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_error_handler
from ..container import Container
from ..core.enums import ShiftType

# Presentation data per shift type, consumed by the calendar UI.
SHIFT_STYLES: dict[ShiftType, dict[str, str]] = {
    ShiftType.WORK: {"icon": "briefcase", "className": "bg-sky-200 text-sky-800"},
    ShiftType.OFF: {"icon": "home", "className": "bg-gray-200 text-gray-700"},
    ShiftType.VACATION: {"icon": "plane", "className": "bg-green-200 text-green-800"},
    ShiftType.SWAP: {"icon": "repeat", "className": "bg-yellow-200 text-yellow-800"},
    ShiftType.OTHER: {"icon": "sparkles", "className": "bg-purple-200 text-purple-800"},
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar/<int:year>/<int:month>", methods=["GET"], endpoint="calendar_month")
    @api_error_handler
    def calendar_month(year: int, month: int):
        view = container.calendar_service.month_view(year, month)
        payload = view.to_dict()
        payload["legend"] = {t.value: style for t, style in SHIFT_STYLES.items()}
        return jsonify(payload)
