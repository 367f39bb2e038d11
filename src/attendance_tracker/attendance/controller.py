from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..core.exceptions import DomainError
from ..container import Container
from ..sessions.middleware import current_identity, token_required


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.auth_service)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @auth_required
    def attendance_list():
        records = container.attendance_service.list_records(current_identity().user_id)
        return jsonify(
            {
                "message": "success",
                "data": [r.to_dict() for r in records],
                "count": len(records),
            }
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_submit")
    @auth_required
    def attendance_submit():
        data = json_body()
        try:
            record = container.attendance_service.submit(
                current_identity().user_id,
                work_date=data.get("date"),
                status=data.get("status"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Attendance recorded successfully!", "data": record.to_dict()})

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="attendance_delete")
    @auth_required
    def attendance_delete(record_id: str):
        try:
            deleted_id = container.attendance_service.delete(current_identity().user_id, record_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Attendance record deleted successfully", "deletedId": deleted_id})
