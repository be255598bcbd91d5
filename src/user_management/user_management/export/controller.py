from __future__ import annotations

from flask import Flask, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]

    @app.route(f"{base}/users/export", methods=["GET"], endpoint="export_users")
    def export_users():
        doc = container.export_service.export(request.args.get("format", "json"))
        return app.response_class(
            doc.content,
            mimetype=doc.media_type,
            headers={"Content-Disposition": f"attachment; filename={doc.filename}"},
        )
