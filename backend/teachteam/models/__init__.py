"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from teachteam.models.user import User  # noqa: F401
from teachteam.models.lecturer import Lecturer, lecturer_courses  # noqa: F401
from teachteam.models.course import Course  # noqa: F401
from teachteam.models.admin import Admin  # noqa: F401
from teachteam.models.candidate import Candidate  # noqa: F401
from teachteam.models.academic_credential import AcademicCredential  # noqa: F401
from teachteam.models.previous_role import PreviousRole  # noqa: F401
from teachteam.models.application import CandidateApplication  # noqa: F401
