import logging

from flask import Blueprint, current_app, jsonify, request

from ..services.photo import photo_to_data_url


bp = Blueprint("photos", __name__)


@bp.route("/photos", methods=["POST"])
def upload_photo():
    if "file" not in request.files:
        return jsonify({"error": "File tidak ditemukan"}), 400

    file = request.files["file"]
    if file.filename == "":
        return jsonify({"error": "Nama file kosong"}), 400

    data_url = photo_to_data_url(file.read(), max_width=current_app.config["PHOTO_MAX_WIDTH"])
    logging.info(f"Foto kendaraan {file.filename} dikonversi ({len(data_url)} karakter)")
    return jsonify({"fotoKendaraan": data_url}), 200
