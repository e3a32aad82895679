from __future__ import annotations

import csv
import io

import pandas as pd

from .service import PayrollReport

# (row key, column header) in report order
REPORT_COLUMNS = [
    ("name", "الموظف"),
    ("position", "الوظيفة"),
    ("base_salary", "الراتب"),
    ("commission", "العمولة"),
    ("overtime_pay", "الإضافي"),
    ("total_deductions", "الخصومات"),
    ("net_salary", "الصافي"),
]


def report_filename(report: PayrollReport, extension: str) -> str:
    return f"payroll_{report.period.label()}.{extension}"


def report_to_csv(report: PayrollReport) -> bytes:
    """CSV bytes (UTF-8 with BOM so spreadsheet apps show Arabic correctly)."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow([header for _, header in REPORT_COLUMNS])
    for row in report.rows:
        writer.writerow([row[key] for key, _ in REPORT_COLUMNS])
    return out.getvalue().encode("utf-8-sig")


def report_to_xlsx(report: PayrollReport) -> bytes:
    df = pd.DataFrame(
        [[row[key] for key, _ in REPORT_COLUMNS] for row in report.rows],
        columns=[header for _, header in REPORT_COLUMNS],
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=report.period.label())
    out.seek(0)
    return out.getvalue()
