from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="api_notifications")
    def api_notifications():
        data = [
            {
                "type": n.kind,
                "title": n.title,
                "message": n.message,
                "key": n.key,
                "time": n.created_at.isoformat(timespec="seconds"),
            }
            for n in container.notifier.recent
        ]
        return jsonify({"success": True, "data": data})
