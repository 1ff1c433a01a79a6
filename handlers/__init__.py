"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler receives an HTTP request, delegates to the
appropriate Repository through the injected ServerContext, and returns JSON.
No business logic lives here.
"""
