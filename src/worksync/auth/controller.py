from __future__ import annotations

from flask import Flask

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/jwt", methods=["POST"], endpoint="issue_jwt")
    def issue_jwt():
        token = container.auth_service.issue_token(json_body())
        return {"token": token}
