"""Ví dụ: tính bảng lương tháng 1/2026 từ mock data (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở services.
"""

import importlib

from config import get_settings_module

from src.salon_payroll.container import build_container
from src.salon_payroll.payroll.model import PayPeriod


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    report = container.payroll_report_service.build_payroll_report(PayPeriod(month=1, year=2026))
    for row in report.rows:
        print(row["name"], row["net_salary"])
    print("Tổng:", report.totals["net_salary"])

    payslip = container.payroll_report_service.get_employee_payslip("2", report.period)
    print(payslip.salary_note)


if __name__ == "__main__":
    main()
