from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.notes import compose_note, quick_notes_for
from ..container import Container
from ..core.enums import ActionType

_ACTIONS = {
    "check-in": ActionType.CHECK_IN,
    "check-out": ActionType.CHECK_OUT,
}


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        snapshot = container.state_service.current()
        svc = container.attendance_service
        return jsonify({"day": svc.today(), "rows": [r.to_dict() for r in svc.today_rows(snapshot)]})

    @app.route("/attendance/quick-notes/<action>", methods=["GET"], endpoint="attendance_quick_notes")
    def attendance_quick_notes(action: str):
        action_type = _ACTIONS.get(action)
        if action_type is None:
            return jsonify({"error": f"Unknown action: {action}"}), 400
        return jsonify({"action": action_type.value, "notes": list(quick_notes_for(action_type))})

    @app.route("/attendance/<child_id>/<action>", methods=["POST"], endpoint="attendance_action")
    def attendance_action(child_id: str, action: str):
        action_type = _ACTIONS.get(action)
        if action_type is None:
            return jsonify({"error": f"Unknown action: {action}"}), 400

        snapshot = container.state_service.current()
        child = snapshot.find_child(child_id)
        if child is None:
            return jsonify({"error": "Child not found"}), 404

        data = request.get_json(silent=True) or {}
        quick = data.get("quick") or []
        if isinstance(quick, str):
            quick = [quick]
        note = compose_note(str(data.get("note") or ""), *[str(q) for q in quick])

        svc = container.attendance_service
        updated = container.state_service.commit(svc.apply(snapshot, child_id, action_type, note))
        row = svc.to_row(child.id, child.display_name, svc.record_for(updated, child_id))
        return jsonify(row.to_dict())
