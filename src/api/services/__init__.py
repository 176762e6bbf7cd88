"""
API Service Layer

These services bridge between HTTP routes and the domain logic:
converting requests to domain objects, calling the bulb translator,
and choosing the HTTP status for the result.
"""
