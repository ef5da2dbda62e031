"""WorkSync HR backend package.

Organized by feature modules (staff, tasks, salaries, payments, auth) with a thin
Flask controller layer over service/repository layers backed by MongoDB.
"""
