from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.api import current_actor_id, login_required
from ..common.datetime_utils import parse_date_field, today_local
from ..common.serializers import dashboard_to_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        week_start_s = request.args.get("week_start")
        if week_start_s:
            week_start = parse_date_field(week_start_s, "week_start")
        else:
            # Default to Monday of the current week, like the calendar grid.
            today = today_local()
            week_start = today - timedelta(days=today.weekday())

        data = container.dashboard_service.get_dashboard(actor_id=current_actor_id(), week_start=week_start)
        return jsonify(dashboard_to_dict(data))
