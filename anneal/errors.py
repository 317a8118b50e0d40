# coding: utf-8
# Created on 14/10/2026 10:12

"""
Defines custom errors and warnings.
"""


# ====================================================
# code
class DegenerateScheduleWarning(UserWarning):
    """
    Warning for schedules whose temperature ratios do not satisfy initial > final > 0. Runs with such schedules
    still proceed, with non-decaying or non-finite temperatures.
    """
