from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import bearer_token
from ..core.exceptions import AuthenticationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/testDeleteFunction", methods=["POST"], endpoint="test_delete_function")
    def test_delete_function():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        # Callable clients wrap arguments in {"data": {...}}.
        data = body.get("data") if isinstance(body.get("data"), dict) else body

        caller_uid = None
        token = bearer_token(request.headers.get("Authorization"))
        if token:
            try:
                caller_uid = container.account_service.authenticate(token)
            except AuthenticationError:
                return jsonify({"error": "Unauthorized"}), 401

        result = container.diagnostic_service.echo(target_uid=data.get("uid"), caller_uid=caller_uid)
        return jsonify({"success": result.success, "message": result.message}), 200

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200
