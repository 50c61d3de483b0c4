"""Input Rules — field checks shared by REST and GraphQL.

Tests:
    - Valid inputs return None; invalid inputs return a message
    - Boundary values for names, emails, course names, comments, years and GPA
    - normalize_skills strips blanks and case-insensitive duplicates
"""

from datetime import date

import pytest

from teachteam.core.validation import (
    check_name, check_email, check_password, check_course_code,
    check_course_name, check_comment, check_credential_year, check_gpa,
    check_role_dates, normalize_skills,
)


@pytest.mark.parametrize("email", ["a.b@example.com", "user_1@uni.edu.au"])
def test_valid_emails_pass(email):
    assert check_email(email) is None


@pytest.mark.parametrize("email", ["", "no-at-sign", "x@y", "a b@example.com"])
def test_invalid_emails_fail(email):
    assert check_email(email) is not None


def test_password_requires_upper_lower_digit_and_length():
    assert check_password("Password1") is None
    assert check_password("password1") is not None
    assert check_password("PASSWORD1") is not None
    assert check_password("Password") is not None
    assert check_password("Pass1") is not None


def test_name_minimum_length_after_strip():
    assert check_name("Al") is None
    assert check_name("  A  ") is not None
    assert check_name("") == "Name is required"


def test_name_and_email_maximum_length():
    assert check_name("A" * 100) is None
    assert check_name("A" * 101) == "Name must not exceed 100 characters"
    local = "a" * 138
    assert check_email(f"{local}@example.com") is None
    assert check_email(f"{local}a@example.com") == "Email must not exceed 150 characters"


def test_course_code_is_four_letters_four_digits():
    assert check_course_code("COSC2758") is None
    assert check_course_code("cosc2758") is not None
    assert check_course_code("COSC275") is not None
    assert check_course_code("CS2758AB") is not None


def test_course_name_minimum_length():
    assert check_course_name("Web") is None
    assert check_course_name("AI") is not None
    assert check_course_name("C" * 200) is None
    assert check_course_name("C" * 201) is not None


def test_comment_bounds():
    assert check_comment("ok!") is None
    assert check_comment("no") is not None
    assert check_comment("x" * 500) is None
    assert check_comment("x" * 501) is not None
    assert check_comment("   ") == "Comment cannot be empty"


def test_credential_year_bounded_by_current_year():
    assert check_credential_year(1950, 2026) is None
    assert check_credential_year(2026, 2026) is None
    assert check_credential_year(1949, 2026) is not None
    assert check_credential_year(2027, 2026) is not None


def test_gpa_range_and_optional():
    assert check_gpa(None) is None
    assert check_gpa(0) is None
    assert check_gpa(4.0) is None
    assert check_gpa(4.1) is not None
    assert check_gpa(-0.1) is not None


def test_role_end_date_not_before_start():
    start = date(2022, 1, 1)
    assert check_role_dates(start, None) is None
    assert check_role_dates(start, date(2022, 1, 1)) is None
    assert check_role_dates(start, date(2021, 12, 31)) is not None


def test_normalize_skills_dedupes_case_insensitively():
    assert normalize_skills([" Python", "python", "", "SQL ", "  "]) == ["Python", "SQL"]
