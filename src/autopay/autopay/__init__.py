"""AutoPay package.

Organized by feature modules (employees, attendance, payroll) with a thin
Flask JSON controller layer over service and repository layers.
"""
