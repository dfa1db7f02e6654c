from flask import Blueprint, render_template

from ..extensions import store

bp = Blueprint("pages", __name__)


@bp.get("/")
def index():
    return render_template("index.html", gifts=store.load_all())
