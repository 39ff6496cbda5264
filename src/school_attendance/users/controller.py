from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import bearer_token
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/deleteStudentAccount", methods=["POST"], endpoint="delete_student_account")
    def delete_student_account():
        token = bearer_token(request.headers.get("Authorization"))
        body = request.get_json(silent=True)
        data = body if isinstance(body, dict) else {}

        try:
            result = container.account_service.purge_account(token=token, target_uid=data.get("uid"))
        except AuthenticationError as e:
            logger.warning("Rejected account deletion: %s", e)
            return jsonify({"error": "Unauthorized"}), 401
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except Exception as e:
            logger.exception("Failed to delete account")
            return jsonify({"error": str(e)}), 500

        return jsonify(
            {
                "success": True,
                "message": "Account deleted.",
                "attendanceDeleted": result.attendance_deleted,
            }
        ), 200
