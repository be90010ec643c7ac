from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_error_handler, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/pattern", methods=["GET"], endpoint="pattern_get")
    @api_error_handler
    def pattern_get():
        pattern = container.pattern_service.get_pattern()
        # Not configured yet: the client shows the setup form.
        return jsonify({"pattern": pattern.to_dict() if pattern else None})

    @app.route("/api/pattern", methods=["PUT"], endpoint="pattern_save")
    @api_error_handler
    def pattern_save():
        data = json_body()
        pattern = container.pattern_service.save_pattern(
            work=data.get("work"),
            off=data.get("off"),
            cycle_start=data.get("startDate"),
        )
        return jsonify({"pattern": pattern.to_dict()})

    @app.route("/api/reset", methods=["POST"], endpoint="app_reset")
    @api_error_handler
    def app_reset():
        container.pattern_service.reset()
        return jsonify({"ok": True})
