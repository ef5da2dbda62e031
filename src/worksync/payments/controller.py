from __future__ import annotations

from flask import Flask

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards

    @app.route("/create-payment-intent", methods=["POST"], endpoint="create_payment_intent")
    @guards.hr_required
    def create_payment_intent():
        client_secret = container.payment_service.create_intent(json_body())
        return {"clientSecret": client_secret}
