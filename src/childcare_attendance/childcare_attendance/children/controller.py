from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .model import ChildFields


def _flag(value, *, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def register(app: Flask, container: Container) -> None:
    def _fields_from_request(*, is_active: bool = True) -> ChildFields:
        data = request.get_json(silent=True) or {}
        return ChildFields(
            first_name=str(data.get("first_name") or ""),
            last_name=str(data.get("last_name") or ""),
            guardian=str(data.get("guardian") or ""),
            allergies=str(data.get("allergies") or ""),
            is_active=_flag(data.get("is_active"), default=is_active),
        )

    @app.route("/children", methods=["GET"], endpoint="children_list")
    def children_list():
        snapshot = container.state_service.current()
        children = container.roster_service.roster(snapshot)
        return jsonify(
            {
                "active_count": len(container.roster_service.active_children(snapshot)),
                "children": [c.to_dict() for c in children],
            }
        )

    @app.route("/children", methods=["POST"], endpoint="children_add")
    def children_add():
        snapshot = container.state_service.current()
        updated = container.roster_service.add_child(snapshot, _fields_from_request())
        if updated is snapshot:
            return jsonify({"error": "First name, last name and guardian are required"}), 400

        container.state_service.commit(updated)
        return jsonify(updated.children[-1].to_dict()), 201

    @app.route("/children/<child_id>", methods=["PUT"], endpoint="children_update")
    def children_update(child_id: str):
        snapshot = container.state_service.current()
        if snapshot.find_child(child_id) is None:
            return jsonify({"error": "Child not found"}), 404

        updated = container.roster_service.update_child(
            snapshot, child_id, _fields_from_request(is_active=snapshot.find_child(child_id).is_active)
        )
        if updated is snapshot:
            return jsonify({"error": "First name, last name and guardian are required"}), 400

        container.state_service.commit(updated)
        return jsonify(updated.find_child(child_id).to_dict())

    @app.route("/children/<child_id>/toggle-active", methods=["POST"], endpoint="children_toggle_active")
    def children_toggle_active(child_id: str):
        snapshot = container.state_service.current()
        if snapshot.find_child(child_id) is None:
            return jsonify({"error": "Child not found"}), 404

        updated = container.state_service.commit(container.roster_service.toggle_active(snapshot, child_id))
        return jsonify(updated.find_child(child_id).to_dict())
