from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/coaches", methods=["POST"], endpoint="register_coach")
    def register_coach():
        data = request.get_json(silent=True) or {}
        coach_id = container.coach_service.register(
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone"),
            specialization=data.get("specialization"),
            business_name=data.get("business_name"),
        )
        return jsonify({"id": coach_id}), 201

    @app.route("/api/coaches/<int:coach_id>", endpoint="get_coach")
    def get_coach(coach_id: int):
        return jsonify(to_json(container.coach_service.require(coach_id)))

    @app.route("/api/coach", endpoint="current_coach")
    def current_coach():
        return jsonify(to_json(container.state.coach))

    @app.route("/api/coach", methods=["PUT"], endpoint="select_coach")
    def select_coach():
        data = request.get_json(silent=True) or {}
        coach = container.coach_service.require(data.get("id"))
        container.state.set_coach(coach)
        return jsonify(to_json(coach))
