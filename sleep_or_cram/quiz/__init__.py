"""
Readiness quiz.

Three recall/application questions whose graded answers (0/33/67/100)
calibrate the student's self-reported confidence.
"""
