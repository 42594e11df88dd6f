import logging
from uuid import uuid4

from flask import Blueprint, jsonify, request

from ..models import expense_from_payload
from ..services.aggregation import recent_expenses
from ..services.state import add_expense, delete_expense
from ..services.store import load_state, save_expenses


bp = Blueprint("expenses", __name__)


@bp.route("/expenses", methods=["GET"])
def list_expenses():
    state = load_state()
    return jsonify([e.to_dict() for e in recent_expenses(state.expenses, limit=None)])


@bp.route("/expenses", methods=["POST"])
def create_expense():
    expense = expense_from_payload(request.get_json(silent=True), uuid4().hex)
    state = add_expense(load_state(), expense)
    save_expenses(state)

    logging.info(f"Pengeluaran {expense.deskripsi} ({expense.harga}) dicatat")
    return jsonify(expense.to_dict()), 201


@bp.route("/expenses/<expense_id>", methods=["DELETE"])
def remove_expense(expense_id: str):
    state = delete_expense(load_state(), expense_id)
    save_expenses(state)

    logging.info(f"Pengeluaran {expense_id} dihapus")
    return jsonify({"message": "Pengeluaran dihapus", "id": expense_id})
