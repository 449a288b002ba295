from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..common.validators import optional_positive_int, require_iso_date, require_non_empty, require_status
from ..core.exceptions import ValidationError
from ..container import Container
from ..views.attendance_sheet import load_roster, mark_all, stats, to_bulk_records


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET"], endpoint="attendance_roster")
    def attendance_roster():
        if not request.args.get("date"):
            raise ValidationError("Date parameter is required")
        day = require_iso_date(request.args.get("date"), "date")
        standard = optional_positive_int(request.args.get("standard"), "standard")

        rows = container.attendance_service.get_daily_roster(day, standard=standard)
        return ok([r.to_dict() for r in rows], stats=stats(load_roster(day, rows)).to_dict())

    @app.route("/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        body = json_body()
        if not body.get("studentId") or not body.get("date") or not body.get("status"):
            raise ValidationError("Missing required fields: studentId, date, status")

        record = container.attendance_service.mark(
            student_id=require_non_empty(str(body["studentId"]), "studentId"),
            day=require_iso_date(body["date"], "date"),
            status=require_status(body["status"]),
        )
        return ok(record.to_dict(), message="Attendance marked successfully")

    @app.route("/attendance/bulk", methods=["POST"], endpoint="attendance_bulk_mark")
    def attendance_bulk_mark():
        body = json_body()
        records = body.get("records")
        if not isinstance(records, list):
            raise ValidationError("Records array is required")

        result = container.attendance_service.bulk_mark(records)
        message = f"{len(result.written)} attendance records marked successfully"
        if result.skipped:
            message += f", {len(result.skipped)} skipped"
        return ok(
            [r.to_dict() for r in result.written],
            message=message,
            count=len(result.written),
            skipped=[s.to_dict() for s in result.skipped],
        )

    @app.route("/attendance/mark-all", methods=["POST"], endpoint="attendance_mark_all")
    def attendance_mark_all():
        """Mark every student on the day's roster (optionally one standard) with the same status."""

        body = json_body()
        if not body.get("date") or not body.get("status"):
            raise ValidationError("Missing required fields: date, status")
        day = require_iso_date(body["date"], "date")
        status = require_status(body["status"])
        standard = optional_positive_int(body.get("standard"), "standard")

        rows = container.attendance_service.get_daily_roster(day, standard=standard)
        sheet = mark_all(load_roster(day, rows), status)
        result = container.attendance_service.bulk_mark(to_bulk_records(sheet))
        return ok(
            [r.to_dict() for r in result.written],
            message=f"{len(result.written)} students marked {status.value}",
            count=len(result.written),
            stats=stats(sheet).to_dict(),
        )
