"""
Utility functions for the application.
"""
from typing import Any, Dict, List


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"message": message}
    if details:
        response["errors"] = details
    return response


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "msg"}`` pairs."""
    formatted = []
    for error in errors:
        # loc is ("body", "email") for body fields
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        formatted.append({
            "field": ".".join(loc),
            "msg": error.get("msg", "Invalid value"),
        })
    return formatted
