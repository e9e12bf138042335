from datetime import date, datetime

from src.moto_tracker.moto_tracker.attendance.model import DayRecord, TripState
from src.moto_tracker.moto_tracker.report.service import ReportService, format_kz
from src.moto_tracker.moto_tracker.stats.aggregator import compute_month_stats

FEB = date(2024, 2, 1)


def _build():
    store = {
        "2024-02-13": DayRecord(jorge=TripState(True, True)),
        "2024-02-14": DayRecord(william=TripState(True, False)),
        "2024-02-17": DayRecord(jorge=TripState(True, True)),  # Saturday, not listed
    }
    stats = compute_month_stats(store, FEB, today=date(2024, 2, 29), cost_per_leg=300)
    return ReportService().build_month_report(store, FEB, stats, generated_at=datetime(2024, 2, 29, 18, 5))


def test_report_lists_only_weekdays():
    report = _build()

    assert len(report.rows) == 21
    assert all(r["date"] != "17/02/2024" for r in report.rows)
    assert report.rows[0]["date"] == "01/02/2024"


def test_report_marks_legs_and_holidays():
    rows = {r["date"]: r for r in _build().rows}

    carnaval = rows["13/02/2024"]
    assert carnaval["jorge_ida"] == "✅"
    assert carnaval["jorge_regresso"] == "✅"
    assert carnaval["william_ida"] == "-"
    assert carnaval["holiday"] == "Carnaval"

    assert rows["14/02/2024"]["william_ida"] == "✅"
    assert rows["14/02/2024"]["william_regresso"] == "-"


def test_report_summary_and_labels():
    report = _build()

    assert report.title == "Relatório de Viagens - fevereiro 2024"
    assert report.footer == "Gerado em 29/02/2024 18:05 - MotoTracker Angola"

    jorge, william = report.summary
    # the Saturday record is still counted in the month's totals
    assert jorge["name"] == "Jorge" and jorge["total"] == 1200 and jorge["completed_trips"] == 2
    assert william["total"] == 300 and william["completed_trips"] == 0


def test_csv_export_has_bom_and_header():
    svc = ReportService()
    data = svc.to_csv_bytes(_build())

    assert data.startswith(b"\xef\xbb\xbf")
    text = data.decode("utf-8-sig")
    assert text.splitlines()[0] == "Data,Jorge (Ida),Jorge (Reg),William (Ida),William (Reg),Feriado"


def test_excel_export_is_xlsx():
    data = ReportService().to_excel_bytes(_build())
    assert data[:2] == b"PK"


def test_format_kz_uses_dot_thousands():
    assert format_kz(300) == "300 Kz"
    assert format_kz(13200) == "13.200 Kz"
