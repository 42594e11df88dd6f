from flask import Blueprint, Response, current_app, jsonify

from ..services.aggregation import build_dashboard
from ..services.report import build_report, report_filename
from ..services.store import load_state
from ..utils.serialize import dashboard_out
from ..utils.time import now_wib


bp = Blueprint("dashboard", __name__)


@bp.route("/dashboard", methods=["GET"])
def get_dashboard():
    config = current_app.config
    summary = build_dashboard(
        load_state(),
        now_wib().date(),
        total_rooms=config["TOTAL_ROOMS"],
        due_soon_days=config["DUE_SOON_DAYS"],
        recent_limit=config["RECENT_EXPENSES_LIMIT"],
    )
    return jsonify(dashboard_out(summary))


@bp.route("/report", methods=["GET"])
def download_report():
    now = now_wib()
    garage_name = current_app.config["GARAGE_NAME"]
    content = build_report(load_state(), now, garage_name)
    filename = report_filename(now, garage_name)
    return Response(
        content,
        mimetype="text/plain",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
