from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    def dashboard():
        stats = container.report_service.dashboard(container.current_coach_id(), today=request.args.get("date"))
        return jsonify(to_json(stats))
