from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, datetime

import pandas as pd

from ..attendance.model import AttendanceStore
from ..attendance.store import get_record
from ..common.datetime_utils import days_in_month, is_weekend, month_label
from ..core.constants import APP_TITLE, CURRENCY_SUFFIX, DISPLAY_DATE_FORMAT, DISPLAY_DATETIME_FORMAT
from ..core.enums import Leg, Person
from ..holidays.calendar import is_holiday
from ..stats.aggregator import MonthStats

CHECK = "✅"
BLANK = "-"

ROW_FIELDS = [
    "date",
    "jorge_ida",
    "jorge_regresso",
    "william_ida",
    "william_regresso",
    "holiday",
]

ROW_HEADERS = {
    "date": "Data",
    "jorge_ida": "Jorge (Ida)",
    "jorge_regresso": "Jorge (Reg)",
    "william_ida": "William (Ida)",
    "william_regresso": "William (Reg)",
    "holiday": "Feriado",
}

SUMMARY_HEADERS = {
    "name": "Nome",
    "total": f"Total Gasto ({CURRENCY_SUFFIX})",
    "completed_trips": "Viagens Realizadas",
    "active_days": "Dias com Viagem",
    "forecast": f"Previsão ({CURRENCY_SUFFIX})",
}


@dataclass(frozen=True)
class MonthReport:
    title: str
    month: date
    rows: list[dict]
    summary: list[dict]
    footer: str


def format_kz(value: float) -> str:
    """300000 -> '300.000 Kz' (pt-AO thousands separator)."""
    return f"{int(round(value)):,}".replace(",", ".") + f" {CURRENCY_SUFFIX}"


class ReportService:
    """Builds the printable monthly report and its CSV/Excel exports."""

    def build_month_report(
        self,
        store: AttendanceStore,
        month: date,
        stats: MonthStats,
        *,
        generated_at: datetime,
    ) -> MonthReport:
        rows = []
        for d in days_in_month(month):
            if is_weekend(d):
                continue
            record = get_record(store, d)
            row = {"date": d.strftime(DISPLAY_DATE_FORMAT)}
            for p in Person:
                state = record.for_person(p)
                for leg in Leg:
                    row[f"{p.value}_{leg.value}"] = CHECK if state.get(leg) else BLANK
            row["holiday"] = is_holiday(d) or ""
            rows.append(row)

        summary = []
        for p in Person:
            s = stats.for_person(p)
            summary.append(
                {
                    "name": p.display_name,
                    "total": s.confirmed_total,
                    "completed_trips": s.completed_trips,
                    "active_days": s.active_days,
                    "forecast": s.forecast,
                }
            )

        return MonthReport(
            title=f"Relatório de Viagens - {month_label(month)}",
            month=month.replace(day=1),
            rows=rows,
            summary=summary,
            footer=f"Gerado em {generated_at.strftime(DISPLAY_DATETIME_FORMAT)} - {APP_TITLE}",
        )

    def to_csv_bytes(self, report: MonthReport) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=ROW_FIELDS)
        writer.writerow(ROW_HEADERS)
        for row in report.rows:
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")

    def to_excel_bytes(self, report: MonthReport) -> bytes:
        rows_df = pd.DataFrame(report.rows, columns=ROW_FIELDS).rename(columns=ROW_HEADERS)
        summary_df = pd.DataFrame(report.summary, columns=list(SUMMARY_HEADERS)).rename(columns=SUMMARY_HEADERS)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            rows_df.to_excel(writer, index=False, sheet_name="Viagens")
            summary_df.to_excel(writer, index=False, sheet_name="Resumo")
        return output.getvalue()
