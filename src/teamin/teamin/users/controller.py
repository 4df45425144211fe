from __future__ import annotations

from datetime import datetime, timedelta

from flask import Flask, jsonify, session

from ..common.api import current_actor_id, json_body, login_required
from ..common.serializers import user_to_dict
from ..common.validators import require_choice
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    def _start_session(user, *, remember: bool) -> None:
        session.clear()
        session.permanent = remember
        session["user_id"] = user.user_id
        session["role"] = user.role.value

    @app.route("/api/healthcheck", methods=["GET"], endpoint="healthcheck")
    def healthcheck():
        return jsonify({"status": "ok", "timestamp": datetime.now().isoformat()})

    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        data = json_body()
        role = require_choice(Role, data.get("role"), "role")
        user = container.auth_service.register(
            email=str(data.get("email") or ""),
            name=str(data.get("name") or ""),
            password=str(data.get("password") or ""),
            role=role,
        )
        _start_session(user, remember=False)
        return jsonify(user_to_dict(user)), 201

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        user = container.auth_service.authenticate(
            str(data.get("email") or ""),
            str(data.get("password") or ""),
        )
        _start_session(user, remember=bool(data.get("remember_me")))
        return jsonify(user_to_dict(user))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        user = container.user_service.get_current_user(actor_id=current_actor_id())
        return jsonify(user_to_dict(user))

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @login_required
    def list_users():
        users = container.user_service.list_users(actor_id=current_actor_id())
        return jsonify([user_to_dict(u) for u in users])
