"""Constants and statutory rates.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_COMPANY_NAME = "SSS SOLUTIONS"

# Overtime
OT_RATE_PER_HOUR = 60
STANDARD_WORK_HOURS = 8

# Provident Fund
PF_EMPLOYEE_RATE = 0.12
PF_EMPLOYEE_CEILING = 1800
PF_EMPLOYER_EPF_RATE = 0.0833
PF_EMPLOYER_EPS_RATE = 0.0367

# Employee State Insurance
ESI_WAGE_CEILING = 21000
ESI_EMPLOYEE_RATE = 0.0075
ESI_EMPLOYER_RATE = 0.0325

PAYSLIPS_PER_PAGE = 3
