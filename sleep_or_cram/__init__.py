"""
Sleep-or-Cram decision service.

Responsibilities:
- Accept the student's clock times, study load, and readiness answers.
- Score two competing night plans (max sleep vs. strategic study + sleep).
- Return a structured decision record ready for API serialisation.
"""
