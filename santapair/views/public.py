from __future__ import annotations

from flask import Blueprint, jsonify, render_template
from flask.views import MethodView

from ..services.participants import current_store


public_bp = Blueprint("public", __name__)


class LandingView(MethodView):
    def get(self):
        return render_template(
            "landing.html",
            num_participants=len(current_store().list_participants()),
        )


class HealthView(MethodView):
    def get(self):
        return jsonify(status="healthy")


public_bp.add_url_rule("/", view_func=LandingView.as_view("landing"))
public_bp.add_url_rule("/index", view_func=LandingView.as_view("index"))
public_bp.add_url_rule("/health", view_func=HealthView.as_view("health"))
