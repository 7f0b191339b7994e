"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Recognized capacity setting keys.
KEY_MAX_EMPLOYEES = "EmployeeSettings.MaxEmployees"
KEY_RETIREMENT_AGE = "EmployeeSettings.RetirementAge"
KEY_CONSTRAINED_DEPT = "EmployeeSettings.CapacityConstrainedDeptNo"
KEY_RESIDENCY_COUNTRIES = "EmployeeSettings.ResidencyCountries"
KEY_MAX_PROJECTS_PER_DEPT = "ProjectSettings.MaxProjectsPerDepartment"
KEY_MAX_HOURS_WORKED = "WorksonSettings.MaxHoursWorked"
KEY_MAX_PROJECTS_PER_EMPLOYEE = "WorksonSettings.MaxProject"

DEFAULT_CONSTRAINED_DEPT_NO = 1
DEFAULT_RESIDENCY_COUNTRIES = ("Brazil", "Russia", "India", "China", "South Africa")

MANAGER_KEYWORD = "Manager"
SUPERVISOR_KEYWORD = "Supervisor"

DEFAULT_BIRTH_RANGE_START = date(1980, 1, 1)
DEFAULT_BIRTH_RANGE_END = date(1990, 12, 31)
DEFAULT_BORN_AFTER = date(1990, 12, 31)
DEFAULT_HEADCOUNT_THRESHOLD = 10
DEFAULT_MANAGER_AGE_THRESHOLD = 40
DEFAULT_PROJECT_DEPT_NAMES = ("Planning",)

DEFAULT_REPORT_TIMEOUT_MS = 30000
