from __future__ import annotations

from flask import Flask, request

from ..common.csv_export import csv_response
from ..common.http import ok
from ..common.validators import optional_positive_int, require_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from ..views.exports import class_report_export_rows, student_report_export_rows
from ..views.formatting import percentage_band


def register(app: Flask, container: Container) -> None:
    def _report_query() -> dict:
        if not request.args.get("startDate") or not request.args.get("endDate"):
            raise ValidationError("startDate and endDate parameters are required")
        return {
            "start": require_iso_date(request.args.get("startDate"), "startDate"),
            "end": require_iso_date(request.args.get("endDate"), "endDate"),
            "standard": optional_positive_int(request.args.get("standard"), "standard"),
            "school": request.args.get("school") or None,
        }

    @app.route("/reports/attendance", methods=["GET"], endpoint="report_attendance")
    def report_attendance():
        rows = container.report_service.build_student_report(**_report_query())
        return ok([{**r.to_dict(), "band": percentage_band(r.attendance_percentage)} for r in rows])

    @app.route("/reports/classes", methods=["GET"], endpoint="report_classes")
    def report_classes():
        rows = container.report_service.build_class_report(**_report_query())
        return ok([{**r.to_dict(), "band": percentage_band(r.avg_attendance)} for r in rows])

    @app.route("/reports/attendance.csv", methods=["GET"], endpoint="report_attendance_csv")
    def report_attendance_csv():
        query = _report_query()
        rows = container.report_service.build_student_report(**query)
        filename = f"student-attendance-report-{query['start'].isoformat()}-to-{query['end'].isoformat()}.csv"
        return csv_response(student_report_export_rows(rows), filename=filename)

    @app.route("/reports/classes.csv", methods=["GET"], endpoint="report_classes_csv")
    def report_classes_csv():
        query = _report_query()
        rows = container.report_service.build_class_report(**query)
        filename = f"class-attendance-report-{query['start'].isoformat()}-to-{query['end'].isoformat()}.csv"
        return csv_response(class_report_export_rows(rows), filename=filename)
