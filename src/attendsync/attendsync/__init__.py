"""AttendSync package.

Organized by feature modules (attendance analytics, AI insights) with a thin
Flask controller layer over service/repository layers. The aggregation core
under ``attendance`` is pure and has no I/O of its own.
"""
