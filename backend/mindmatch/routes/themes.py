from __future__ import annotations

from flask import Blueprint, jsonify

from ..game.prompts import list_themes

bp = Blueprint("themes", __name__)


@bp.get("/themes")
def get_themes():
    return jsonify({"themes": list_themes()})
