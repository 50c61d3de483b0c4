"""Input Rules — pure field checks shared by REST schemas and GraphQL inputs.

Invariants:
    - Every check_* returns None when valid, or a user-facing message when not
    - No check raises; callers decide whether to raise ValueError or ValidationFailedError
    - Upper length limits match the database column sizes
    - Credential year upper bound is the current year, passed in (no clock access here)
"""

import re
from datetime import date

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{8,}$")
COURSE_CODE_PATTERN = re.compile(r"^[A-Z]{4}\d{4}$")

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 150
MIN_COURSE_NAME_LENGTH = 3
MAX_COURSE_NAME_LENGTH = 200
MIN_COMMENT_LENGTH = 3
MAX_COMMENT_LENGTH = 500
MIN_CREDENTIAL_YEAR = 1950
MAX_GPA = 4.0


def check_name(name: str | None) -> str | None:
    if not name or not name.strip():
        return "Name is required"
    if len(name.strip()) < MIN_NAME_LENGTH:
        return f"Name must be at least {MIN_NAME_LENGTH} characters"
    if len(name.strip()) > MAX_NAME_LENGTH:
        return f"Name must not exceed {MAX_NAME_LENGTH} characters"
    return None


def check_email(email: str | None) -> str | None:
    if not email or not email.strip():
        return "Email is required"
    if len(email.strip()) > MAX_EMAIL_LENGTH:
        return f"Email must not exceed {MAX_EMAIL_LENGTH} characters"
    if not EMAIL_PATTERN.match(email.strip()):
        return "Invalid email format"
    return None


def check_password(password: str | None) -> str | None:
    if not password:
        return "Password is required"
    if not PASSWORD_PATTERN.match(password):
        return (
            "Password must be at least 8 characters long and contain "
            "uppercase, lowercase, and number"
        )
    return None


def check_course_code(code: str | None) -> str | None:
    if not code or not code.strip():
        return "Course code is required"
    if not COURSE_CODE_PATTERN.match(code.strip()):
        return "Course code must be four capital letters followed by four digits (e.g. COSC2758)"
    return None


def check_course_name(name: str | None) -> str | None:
    if not name or len(name.strip()) < MIN_COURSE_NAME_LENGTH:
        return f"Course name must be at least {MIN_COURSE_NAME_LENGTH} characters"
    if len(name.strip()) > MAX_COURSE_NAME_LENGTH:
        return f"Course name must not exceed {MAX_COURSE_NAME_LENGTH} characters"
    return None


def check_comment(comment: str | None) -> str | None:
    if not comment or not comment.strip():
        return "Comment cannot be empty"
    length = len(comment.strip())
    if length < MIN_COMMENT_LENGTH:
        return f"Comment must be at least {MIN_COMMENT_LENGTH} characters"
    if length > MAX_COMMENT_LENGTH:
        return f"Comment must not exceed {MAX_COMMENT_LENGTH} characters"
    return None


def check_credential_year(year: int, current_year: int) -> str | None:
    if year < MIN_CREDENTIAL_YEAR or year > current_year:
        return f"Valid year between {MIN_CREDENTIAL_YEAR} and {current_year} is required"
    return None


def check_gpa(gpa: float | None) -> str | None:
    if gpa is None:
        return None
    if gpa < 0 or gpa > MAX_GPA:
        return f"GPA must be between 0 and {MAX_GPA:g}"
    return None


def check_role_dates(start_date: date, end_date: date | None) -> str | None:
    if end_date is not None and end_date < start_date:
        return "End date cannot be before start date"
    return None


def normalize_skills(skills: list[str]) -> list[str]:
    """Strip blanks and duplicates (case-insensitive), keeping first spelling and order."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        cleaned = skill.strip()
        if cleaned and cleaned.lower() not in seen:
            seen.add(cleaned.lower())
            result.append(cleaned)
    return result
