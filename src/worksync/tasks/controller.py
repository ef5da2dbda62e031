from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import current_uid
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards

    @app.route("/task", methods=["POST"], endpoint="submit_task")
    @guards.token_required
    def submit_task():
        task = container.task_service.submit(caller_uid=current_uid(), payload=json_body())
        return {"acknowledged": True, "insertedId": task.id}, 201

    @app.route("/tasks", methods=["GET"], endpoint="my_tasks")
    @guards.token_required
    def my_tasks():
        tasks = container.task_service.list_own(caller_uid=current_uid(), uid=request.args.get("uid"))
        return jsonify([t.to_json() for t in tasks])

    @app.route("/allTasks", methods=["GET"], endpoint="all_tasks")
    @guards.hr_required
    def all_tasks():
        overview = container.task_service.overview(
            uid=request.args.get("uid"),
            month=request.args.get("month"),
        )
        return overview.to_json()
