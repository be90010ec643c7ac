from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_error_handler, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/overrides", methods=["GET"], endpoint="overrides_list")
    @api_error_handler
    def overrides_list():
        overrides = container.override_service.snapshot()
        return jsonify({"overrides": {k: ov.to_dict() for k, ov in sorted(overrides.items())}})

    @app.route("/api/overrides/<day>", methods=["PUT"], endpoint="override_save")
    @api_error_handler
    def override_save(day: str):
        data = json_body()
        override = container.override_service.set_override(
            day,
            shift_type=data.get("type"),
            note=data.get("note"),
        )
        return jsonify({"date": day, "override": override.to_dict()})

    @app.route("/api/overrides/<day>", methods=["DELETE"], endpoint="override_reset")
    @api_error_handler
    def override_reset(day: str):
        container.override_service.clear_override(day)
        return jsonify({"ok": True})

    @app.route("/api/vacations", methods=["POST"], endpoint="vacation_add")
    @api_error_handler
    def vacation_add():
        data = json_body()
        keys = container.override_service.add_vacation(data.get("startDate"), data.get("endDate"))
        return jsonify({"dates": keys}), 201
