"""TeachTeam Application Package — tutor and lab-assistant recruitment backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
