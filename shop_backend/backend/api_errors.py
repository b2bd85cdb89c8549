# backend/api_errors.py

"""
API ERROR NORMALIZATION

Every domain error leaves the API as:
    {"error": {"code": "...", "message": "..."}}
"""

from rest_framework.response import Response


def error_response(*, code: str, message: str, http_status: int):
    """
    Canonical API error response.
    """
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )
