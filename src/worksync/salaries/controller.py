from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import current_uid
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards

    @app.route("/salaries", methods=["POST"], endpoint="create_salary")
    @guards.hr_required
    def create_salary():
        salary = container.salary_service.create(json_body())
        return {"acknowledged": True, "insertedId": salary.id}, 201

    @app.route("/salaries/isPayment", methods=["POST"], endpoint="is_payment")
    @guards.hr_required
    def is_payment():
        return {"isPaid": container.salary_service.is_paid(json_body())}

    @app.route("/paymentHistory", methods=["GET"], endpoint="payment_history")
    @guards.token_required
    def payment_history():
        payments = container.salary_service.history(caller_uid=current_uid(), uid=request.args.get("uid"))
        return jsonify([p.to_json() for p in payments])
