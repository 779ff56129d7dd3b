from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import ReportUnavailableError, ValidationError
from ..submissions.service import submitter_from_json
from .model import DashboardSnapshot
from .service import STATUS_LABELS, filter_and_sort, initials


def snapshot_to_json(snapshot: DashboardSnapshot, *, query: str = "") -> dict:
    return {
        "refreshed_at": snapshot.refreshed_at.isoformat() if snapshot.refreshed_at else None,
        "stats": {
            "total": snapshot.stats.total,
            "present": snapshot.stats.present,
            "teaching": snapshot.stats.teaching,
            "avg_percentage": snapshot.stats.avg_percentage,
        },
        "attendance": [
            {
                "nip": d.nip,
                "name": d.name,
                "initials": initials(d.name),
                "status": d.status.value,
                "status_label": STATUS_LABELS[d.status],
                "time_in": d.time_in,
                "time_out": d.time_out,
                "photo_url": d.photo_url,
            }
            for d in filter_and_sort(snapshot.daily, query)
        ],
        "teaching": [
            {
                "id": t.activity_id,
                "name": t.name,
                "subject": t.subject,
                "class_name": t.class_name,
                "time_range": t.time_range,
                "end_time": t.end_time,
            }
            for t in snapshot.teaching
        ],
        "recap": [
            {
                "nip": r.nip,
                "name": r.name,
                "present_count": r.present_count,
                "percentage": r.percentage,
                "grade": r.grade.value,
            }
            for r in snapshot.recaps
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return jsonify(snapshot_to_json(container.loader.snapshot, query=request.args.get("q", "")))

    @app.route("/api/dashboard/refresh", methods=["POST"], endpoint="dashboard_refresh")
    def dashboard_refresh():
        snapshot = container.loader.refresh()
        return jsonify(snapshot_to_json(snapshot, query=request.args.get("q", "")))

    @app.route("/api/reports", methods=["GET"], endpoint="report_download")
    def report_download():
        start = request.args.get("start", "")
        end = request.args.get("end", "")
        fmt = request.args.get("format", "csv").lower()

        try:
            if fmt == "xlsx":
                report = container.report_service.build_xlsx(start, end)
            elif fmt == "csv":
                report = container.report_service.build_csv(start, end)
            else:
                raise ValidationError(f"Unsupported format: {fmt}")
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except ReportUnavailableError as e:
            return jsonify({"error": str(e)}), 502

        if report is None:
            return jsonify({"error": "Report not found"}), 404

        return send_file(
            io.BytesIO(report.content),
            download_name=report.filename,
            as_attachment=True,
            mimetype=report.mimetype,
        )

    @app.route("/api/submissions", methods=["POST"], endpoint="submission")
    def submission():
        body = request.get_json(silent=True) or {}
        try:
            ok = container.submission_service.submit(
                body.get("action", ""),
                submitter_from_json(body.get("user") or {}),
                body.get("data"),
            )
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        return jsonify({"ok": ok})
