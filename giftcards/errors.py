from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


def _route_not_found(_e):
    return jsonify({"error": "Route not found"}), 404


def _http_error(e: HTTPException):
    return jsonify({"error": e.description}), e.code


def _unhandled(_e: Exception):
    current_app.logger.exception("Unhandled error while serving request")
    return jsonify({"error": "Internal server error"}), 500


def register_error_handlers(app):
    # An unknown method on a known path is still an unmatched route
    app.register_error_handler(404, _route_not_found)
    app.register_error_handler(405, _route_not_found)
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(Exception, _unhandled)
