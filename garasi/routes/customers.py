import logging
from uuid import uuid4

from flask import Blueprint, current_app, jsonify, request

from ..models import customer_from_payload
from ..services.aggregation import search_customers
from ..services.state import add_customer, delete_customer, find_customer, update_customer
from ..services.store import load_state, save_customers
from ..utils.serialize import customer_out
from ..utils.time import today_wib


bp = Blueprint("customers", __name__)


@bp.route("/customers", methods=["GET"])
def list_customers():
    today = today_wib()
    state = load_state()
    customers = search_customers(state.customers, request.args.get("q"))
    return jsonify([customer_out(c, today) for c in customers])


@bp.route("/customers/<customer_id>", methods=["GET"])
def get_customer(customer_id: str):
    state = load_state()
    return jsonify(customer_out(find_customer(state, customer_id), today_wib()))


@bp.route("/customers", methods=["POST"])
def create_customer():
    total_rooms = current_app.config["TOTAL_ROOMS"]
    payload = request.get_json(silent=True)

    state = load_state()
    customer = customer_from_payload(payload, uuid4().hex, total_rooms)
    state = add_customer(state, customer, total_rooms)
    save_customers(state)

    logging.info(f"Customer {customer.nama} ditambahkan ke room {customer.room_number}")
    return jsonify(customer_out(customer, today_wib())), 201


@bp.route("/customers/<customer_id>", methods=["PUT"])
def edit_customer(customer_id: str):
    total_rooms = current_app.config["TOTAL_ROOMS"]
    payload = request.get_json(silent=True)

    state = load_state()
    previous = find_customer(state, customer_id)
    customer = customer_from_payload(payload, customer_id, total_rooms, previous=previous)
    state = update_customer(state, customer, total_rooms)
    save_customers(state)

    logging.info(f"Customer {customer_id} diperbarui")
    return jsonify(customer_out(customer, today_wib()))


@bp.route("/customers/<customer_id>", methods=["DELETE"])
def remove_customer(customer_id: str):
    state = delete_customer(load_state(), customer_id)
    save_customers(state)

    logging.info(f"Customer {customer_id} dihapus")
    return jsonify({"message": "Customer dihapus", "id": customer_id})
