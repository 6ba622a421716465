from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/reports", methods=["GET"], endpoint="reports")
    def reports():
        snapshot = container.state_service.current()
        rows = container.report_service.aggregate(snapshot)
        return jsonify({"rows": [r.to_dict() for r in rows]})

    @app.route("/reports/reset", methods=["POST"], endpoint="reports_reset")
    def reports_reset():
        snapshot = container.state_service.reset()
        rows = container.report_service.aggregate(snapshot)
        return jsonify({"rows": [r.to_dict() for r in rows]})
