from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_error_handler, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/suggestions", methods=["POST"], endpoint="suggestion_request")
    @api_error_handler
    async def suggestion_request():
        data = json_body(required=False)
        result = await container.suggestion_service.suggest(
            preferences=data.get("userPreferences"),
            conflict=data.get("conflictDescription"),
        )
        return jsonify(result.to_payload())

    @app.route("/api/suggestions/apply", methods=["POST"], endpoint="suggestion_apply")
    @api_error_handler
    def suggestion_apply():
        data = json_body()
        pattern = container.pattern_service.apply_suggestion(work=data.get("work"), off=data.get("off"))
        return jsonify({"pattern": pattern.to_dict()})
