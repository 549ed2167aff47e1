"""Hotel HRM package.

Organized by feature modules (auth, users, employees, payroll) with a thin
Flask controller layer over service and repository layers.
"""
