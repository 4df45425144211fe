from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import current_actor_id, json_body, login_required
from ..common.datetime_utils import parse_date_field
from ..common.serializers import entry_to_dict
from ..common.validators import require_choice, require_int
from ..core.enums import PresenceStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import PresencePatch


def register(app: Flask, container: Container) -> None:
    @app.route("/api/presence", methods=["GET"], endpoint="list_presence")
    @login_required
    def list_presence():
        args = request.args
        if not args.get("start_date") or not args.get("end_date"):
            raise ValidationError("start_date and end_date are required")

        user_id = args.get("user_id")
        entries = container.presence_service.list_entries(
            actor_id=current_actor_id(),
            start_date=parse_date_field(args.get("start_date"), "start_date"),
            end_date=parse_date_field(args.get("end_date"), "end_date"),
            user_id=require_int(user_id, "user_id") if user_id not in (None, "") else None,
        )
        return jsonify([entry_to_dict(e) for e in entries])

    @app.route("/api/presence", methods=["POST"], endpoint="create_presence")
    @login_required
    def create_presence():
        data = json_body()
        entry = container.presence_service.create_entry(
            actor_id=current_actor_id(),
            user_id=require_int(data.get("user_id"), "user_id"),
            status=require_choice(PresenceStatus, data.get("status"), "status"),
            work_date=parse_date_field(data.get("date"), "date"),
        )
        return jsonify(entry_to_dict(entry)), 201

    @app.route("/api/presence/<int:entry_id>", methods=["PATCH"], endpoint="update_presence")
    @login_required
    def update_presence(entry_id: int):
        data = json_body()
        patch = PresencePatch(
            status=require_choice(PresenceStatus, data["status"], "status") if data.get("status") is not None else None,
            work_date=parse_date_field(data["date"], "date") if data.get("date") is not None else None,
        )
        entry = container.presence_service.update_entry(
            actor_id=current_actor_id(),
            entry_id=entry_id,
            patch=patch,
        )
        return jsonify(entry_to_dict(entry))

    @app.route("/api/presence/<int:entry_id>", methods=["DELETE"], endpoint="delete_presence")
    @login_required
    def delete_presence(entry_id: int):
        ok = container.presence_service.delete_entry(actor_id=current_actor_id(), entry_id=entry_id)
        return jsonify({"success": ok})
