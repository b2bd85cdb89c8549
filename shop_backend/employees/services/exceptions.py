# employees/services/exceptions.py

"""
EMPLOYEE ROSTER ERRORS
"""


class EmployeeError(Exception):
    """Base exception for roster failures."""


class DuplicateEmployeeError(EmployeeError):
    """Raised when the email is already on this shop's roster."""


class InvalidEmployeeRoleError(EmployeeError):
    """Raised when a role outside Admin/Mechanic/Staff is requested."""
