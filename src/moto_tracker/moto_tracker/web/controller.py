from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import add_months, month_key, month_label, now_local, parse_month
from ..core.constants import APP_TITLE, WEEKDAY_LABELS
from ..core.enums import DayModel, DayStatus, Leg, Person
from ..core.exceptions import ValidationError
from ..container import Container
from ..holidays.calendar import holidays_in_month, variable_holidays, ANGOLA_HOLIDAYS
from ..attendance.gate import STATUS_LABELS
from .forms import parse_choice, parse_form_date


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _month_arg(value: str | None):
        return parse_month(value, default=now_local().date())

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("calendar_view"))

    @app.route("/calendar", endpoint="calendar_view")
    def calendar_view():
        today = now_local().date()
        month = _month_arg(request.args.get("month"))

        return render_template(
            "calendar.html",
            app_title=APP_TITLE,
            month=month,
            month_key=month_key(month),
            month_label=month_label(month),
            prev_month=month_key(add_months(month, -1)),
            next_month=month_key(add_months(month, 1)),
            weekdays=WEEKDAY_LABELS,
            days=service.calendar(month, today=today),
            stats=service.month_stats(month, today=today),
            holidays=holidays_in_month(month),
            persons=list(Person),
            legs=list(Leg),
            statuses=list(DayStatus),
            status_labels=STATUS_LABELS,
            use_day_status=container.profile.day_model == DayModel.DAY_STATUS,
            profile=container.profile,
            pending=service.pending,
        )

    @app.route("/toggle", methods=["POST"], endpoint="toggle")
    def toggle():
        month = request.form.get("month")
        try:
            d = parse_form_date(request.form.get("date", ""))
            person = parse_choice(Person, request.form.get("person", ""), "Pessoa")
            leg = parse_choice(Leg, request.form.get("leg", ""), "Viagem")
            service.request_toggle(d, person, leg)
            month = month_key(d)
        except ValidationError as e:
            flash(str(e), "warning")
        return redirect(url_for("calendar_view", month=month or ""))

    @app.route("/day-status", methods=["POST"], endpoint="day_status")
    def day_status():
        month = request.form.get("month")
        try:
            d = parse_form_date(request.form.get("date", ""))
            person = parse_choice(Person, request.form.get("person", ""), "Pessoa")
            status = parse_choice(DayStatus, request.form.get("status", ""), "Estado")
            service.request_day_status(d, person, status)
            month = month_key(d)
        except ValidationError as e:
            flash(str(e), "warning")
        return redirect(url_for("calendar_view", month=month or ""))

    @app.route("/confirm", methods=["POST"], endpoint="confirm")
    def confirm():
        pending = service.pending
        month = request.form.get("month")
        try:
            service.confirm()
            month = month_key(pending.day)
            flash("Alteração registada com sucesso!", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("Unexpected error while confirming change")
            flash("Erro do sistema ao registar a alteração", "danger")
        return redirect(url_for("calendar_view", month=month or ""))

    @app.route("/cancel", methods=["POST"], endpoint="cancel")
    def cancel():
        pending = service.pending
        service.cancel()
        month = month_key(pending.day) if pending else request.form.get("month")
        return redirect(url_for("calendar_view", month=month or ""))

    # ===== JSON API =====

    @app.route("/api/stats", endpoint="api_stats")
    def api_stats():
        month = _month_arg(request.args.get("month"))
        stats = service.month_stats(month, today=now_local().date())
        return jsonify({"success": True, "profile": container.profile.name, "stats": stats.to_dict()})

    @app.route("/api/records", endpoint="api_records")
    def api_records():
        month = _month_arg(request.args.get("month"))
        prefix = month_key(month)
        records = {
            key: record.to_dict()
            for key, record in sorted(service.store.items())
            if key.startswith(prefix)
        }
        return jsonify({"success": True, "month": prefix, "records": records})

    @app.route("/api/holidays", endpoint="api_holidays")
    def api_holidays():
        year_s = request.args.get("year") or str(now_local().year)
        if not year_s.isdigit():
            return jsonify({"success": False, "message": "Ano inválido"}), 400
        year = int(year_s)

        fixed = [{"month": h.month, "day": h.day, "name": h.name, "movable": False} for h in ANGOLA_HOLIDAYS]
        movable = [{"month": h.month, "day": h.day, "name": h.name, "movable": True} for h in variable_holidays(year)]
        return jsonify({"success": True, "year": year, "holidays": fixed + movable})
