"""Error taxonomy shared by the stores and the HTTP layer.

Services raise these; ``register_error_handlers`` turns them into JSON
responses so route functions stay thin.
"""
from typing import Dict, Optional

from flask import jsonify
from werkzeug.exceptions import HTTPException


class WordGameError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationError(WordGameError):
    status_code = 400

    def __init__(self, message: str = 'Invalid request', fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = fields or {}

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.fields:
            payload['fields'] = self.fields
        return payload


class NotFoundError(WordGameError):
    status_code = 404


class ConflictError(WordGameError):
    status_code = 409


class StorageError(WordGameError):
    """Reading or writing a backing file failed."""
    status_code = 500


GENERIC_SERVER_ERROR = 'Internal server error, try again later'


def register_error_handlers(flask_app) -> None:
    @flask_app.errorhandler(StorageError)
    def handle_storage_error(exc):
        flask_app.logger.error(f"[storage-error] {exc.message}", exc_info=exc.__cause__ or exc)
        return jsonify({'error': GENERIC_SERVER_ERROR}), exc.status_code

    @flask_app.errorhandler(WordGameError)
    def handle_wordgame_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'error': exc.description}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        flask_app.logger.exception(f"[unhandled] {exc}")
        return jsonify({'error': GENERIC_SERVER_ERROR}), 500
