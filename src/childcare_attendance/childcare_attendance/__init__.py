"""Child-care attendance package.

This package is organized by feature modules (children, attendance, reports, state)
with a thin Flask controller layer and service/store layers around an immutable snapshot.
"""
