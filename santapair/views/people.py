from __future__ import annotations

import random

from flask import Blueprint, current_app, flash, render_template, request
from flask.views import MethodView

from ..exceptions import SantaPairError
from ..services.matching import NOBODY, draw_matches
from ..services.participants import current_store


people_bp = Blueprint("people", __name__)


def _render_people():
    return render_template("addpeople.html", people=current_store().list_participants())


def _rng() -> random.Random:
    # A fixed seed makes every draw identical; only useful for demos and tests.
    return random.Random(current_app.config.get("SANTAPAIR_RNG_SEED"))


class AddPeopleView(MethodView):
    def get(self):
        return _render_people()

    def post(self):
        try:
            p = current_store().add_participant(request.form.get("name"))
            flash(f"Added {p.name}.", "success")
        except SantaPairError as e:
            flash(str(e), "error")
        return _render_people()


class DeletePeopleView(MethodView):
    def post(self):
        participant_id = request.form.get("id", type=int)
        if participant_id is not None:
            try:
                p = current_store().delete_participant(participant_id)
                flash(f"Deleted {p.name}.", "success")
            except SantaPairError as e:
                flash(str(e), "error")
        return _render_people()


class GenerateView(MethodView):
    def get(self):
        matches = draw_matches(current_store().list_participants(), _rng())
        return render_template("generate.html", matches=matches, nobody=NOBODY)


people_bp.add_url_rule("/addpeople", view_func=AddPeopleView.as_view("addpeople"), methods=["GET", "POST"])
people_bp.add_url_rule("/deletepeople", view_func=DeletePeopleView.as_view("deletepeople"), methods=["POST"])
people_bp.add_url_rule("/generate", view_func=GenerateView.as_view("generate"))
