"""Salon payroll package.

Feature modules (employees, attendance, sales, payroll, notifications) with a
thin Flask controller layer on top of pure calculation and service layers.
"""
