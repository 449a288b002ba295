from __future__ import annotations

from flask import Flask, request

from ..common.csv_export import csv_response
from ..common.http import json_body, ok
from ..container import Container
from ..views.exports import student_export_rows, student_list_filename
from ..views.student_filters import StudentFilters, filter_students


def register(app: Flask, container: Container) -> None:
    def _filters_from_query() -> StudentFilters:
        return StudentFilters.from_query(
            request.args.get("search"),
            request.args.get("school"),
            request.args.get("standard"),
        )

    @app.route("/schools", methods=["GET"], endpoint="schools_list")
    def schools_list():
        return ok(container.student_service.list_schools())

    @app.route("/students", methods=["GET"], endpoint="students_list")
    def students_list():
        filters = _filters_from_query()
        students = container.student_service.list_students()
        if filters.is_active:
            students = filter_students(students, filters)
        return ok([s.to_dict() for s in students])

    @app.route("/students.csv", methods=["GET"], endpoint="students_csv")
    def students_csv():
        filters = _filters_from_query()
        students = filter_students(container.student_service.list_students(), filters)
        return csv_response(student_export_rows(students), filename=student_list_filename(filters.school))

    @app.route("/students/<student_id>", methods=["GET"], endpoint="students_get")
    def students_get(student_id: str):
        return ok(container.student_service.get_student(student_id).to_dict())

    @app.route("/students", methods=["POST"], endpoint="students_create")
    def students_create():
        student = container.student_service.create_student(json_body())
        return ok(student.to_dict(), message="Student created successfully", status=201)

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="students_update")
    def students_update(student_id: str):
        student = container.student_service.update_student(student_id, json_body())
        return ok(student.to_dict(), message="Student updated successfully")

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        container.student_service.delete_student(student_id)
        return ok(message="Student and related attendance records deleted successfully")
