from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NothingToExportError, ValidationError
from .service import ExportFile

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _write_csv(export: ExportFile):
        """Send an export as a CSV attachment.

        Shared helper used by biodata and attendance exports.
        """

        csv_bytes = export.to_bytes(include_header=bool(app.config.get("CSV_INCLUDE_HEADER", False)))
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    def _notice(e: Exception, status: int):
        logger.warning("export refused: %s", e)
        return jsonify({"success": False, "message": str(e)}), status

    def _export(build):
        try:
            export = build()
        except NothingToExportError as e:
            return _notice(e, 404)
        except ValidationError as e:
            return _notice(e, 400)
        return _write_csv(export)

    @app.route("/export/biodata.csv", methods=["GET"], endpoint="export_biodata")
    def export_biodata():
        return _export(container.export_service.biodata)

    @app.route("/export/attendance/today.csv", methods=["GET"], endpoint="export_attendance_today")
    def export_attendance_today():
        return _export(container.export_service.attendance_today)

    @app.route("/export/attendance/history.csv", methods=["GET"], endpoint="export_attendance_history")
    def export_attendance_history():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        return _export(lambda: container.export_service.attendance_range(start_s, end_s))
