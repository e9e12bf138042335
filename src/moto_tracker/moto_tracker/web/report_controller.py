from __future__ import annotations

from flask import Flask, render_template, request

from ..common.datetime_utils import month_key, now_local, parse_month
from ..container import Container
from ..report.service import format_kz


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    reports = container.report_service

    def _build(month_s: str | None):
        now = now_local()
        month = parse_month(month_s, default=now.date())
        stats = service.month_stats(month, today=now.date())
        return reports.build_month_report(service.store, month, stats, generated_at=now)

    @app.route("/report", endpoint="report")
    def report():
        data = _build(request.args.get("month"))
        return render_template("report.html", report=data, month_key=month_key(data.month), format_kz=format_kz)

    @app.route("/report.csv", endpoint="report_csv")
    def report_csv():
        data = _build(request.args.get("month"))
        filename = f"viagens_{data.month.strftime('%Y%m')}.csv"
        return app.response_class(
            reports.to_csv_bytes(data),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/report.xlsx", endpoint="report_xlsx")
    def report_xlsx():
        data = _build(request.args.get("month"))
        filename = f"viagens_{data.month.strftime('%Y%m')}.xlsx"
        return app.response_class(
            reports.to_excel_bytes(data),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
