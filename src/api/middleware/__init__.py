"""
API Middleware - Request/response processing

Middleware in FastAPI runs before and after each request.
Exception handlers live here too: they turn raised errors into JSON bodies.
"""
