# Middleware package init
"""
Employee App Backend: Middleware Package
==========================================

Middleware Chain:
    Request → [Request Context] → Route Handler

    request_context.py sets the correlation ID used in error bodies and
    writes one access line per request (route, employee id, status, duration).
"""
