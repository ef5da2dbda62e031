from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import current_uid
from ..common.http import json_body
from ..common.validators import as_bool
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards

    # Common
    @app.route("/staff", methods=["PUT"], endpoint="upsert_staff")
    @app.route("/staffs", methods=["PUT"], endpoint="upsert_staffs")
    def upsert_staff():
        payload = json_body()
        caller_uid = None
        # registration happens before the client holds a token
        if as_bool(payload.get("isUpdate")) and request.headers.get("Authorization"):
            caller_uid = container.token_service.decode_header(request.headers["Authorization"])["uid"]

        result = container.staff_service.upsert(payload, caller_uid=caller_uid)
        return result.to_json(), (201 if result.created else 200)

    @app.route("/staff", methods=["GET"], endpoint="get_staff")
    @guards.token_required
    def get_staff():
        staff = container.staff_service.get_own(caller_uid=current_uid(), uid=request.args.get("uid"))
        return staff.to_json()

    # HR
    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @guards.hr_required
    def list_employees():
        return jsonify(container.staff_service.list_employees())

    @app.route("/employees/<uid>", methods=["GET"], endpoint="employee_details")
    @guards.hr_required
    def employee_details(uid: str):
        staff = container.staff_service.get_employee(uid)
        payments = container.salary_service.history_for(uid)
        return {"staff": staff.to_json(), "payments": [p.to_json() for p in payments]}

    @app.route("/employees/<uid>/verify", methods=["PATCH"], endpoint="verify_employee")
    @guards.hr_required
    def verify_employee(uid: str):
        verified = container.staff_service.toggle_verified(uid)
        return {"uid": uid, "isVerified": verified}

    # Admin
    @app.route("/staffs", methods=["GET"], endpoint="list_verified_staff")
    @guards.admin_required
    def list_verified_staff():
        return jsonify([s.to_json() for s in container.staff_service.list_verified_staff()])

    @app.route("/staffs/<uid>/role", methods=["PATCH"], endpoint="change_staff_role")
    @guards.admin_required
    def change_staff_role(uid: str):
        staff = container.staff_service.change_role(uid, json_body().get("role"))
        return staff.to_json()

    @app.route("/staffs/<uid>/fire", methods=["PATCH"], endpoint="fire_staff")
    @guards.admin_required
    def fire_staff(uid: str):
        return container.staff_service.fire(uid).to_json()

    @app.route("/staffs/<uid>/salary", methods=["PATCH"], endpoint="adjust_staff_salary")
    @guards.admin_required
    def adjust_staff_salary(uid: str):
        staff = container.staff_service.adjust_salary(uid, json_body().get("salary"))
        return staff.to_json()
