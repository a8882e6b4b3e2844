from flask import jsonify


def error_response(status_code, message, details=None):
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status_code


def success_response(message, status_code=200, **extra):
    body = {"success": True, "message": message}
    body.update(extra)
    return jsonify(body), status_code
