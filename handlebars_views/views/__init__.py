"""View rendering module for HTML responses.

Turns ViewRenderer output into HTTP responses and translates rendering
failures into ViewException subclasses for the error handlers.
"""
