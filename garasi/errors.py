import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException


class GarasiError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GarasiError):
    status_code = 400


class NotFoundError(GarasiError):
    status_code = 404


class PhotoError(GarasiError):
    status_code = 400


class StorageError(GarasiError):
    status_code = 503


def register_error_handlers(app):
    @app.errorhandler(GarasiError)
    def handle_garasi_error(err: GarasiError):
        if isinstance(err, StorageError):
            logging.error(f"Gagal mengakses penyimpanan: {err.message}")
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        logging.error(f"Unexpected error: {err}")
        return jsonify({"error": "Terjadi kesalahan pada server"}), 500
