import os


def capacity_settings_from_env() -> dict:
    """Capacity thresholds keyed the way CapacityPolicy.from_settings expects."""
    return {
        "EmployeeSettings.MaxEmployees": os.getenv("MAX_EMPLOYEES", "10"),
        "EmployeeSettings.RetirementAge": os.getenv("RETIREMENT_AGE", "60"),
        "EmployeeSettings.CapacityConstrainedDeptNo": os.getenv("CAPACITY_CONSTRAINED_DEPT_NO", "1"),
        "EmployeeSettings.ResidencyCountries": os.getenv(
            "RESIDENCY_COUNTRIES", "Brazil,Russia,India,China,South Africa"
        ),
        "ProjectSettings.MaxProjectsPerDepartment": os.getenv("MAX_PROJECTS_PER_DEPARTMENT", "10"),
        "WorksonSettings.MaxHoursWorked": os.getenv("MAX_HOURS_WORKED", "40"),
        "WorksonSettings.MaxProject": os.getenv("MAX_PROJECTS_PER_EMPLOYEE", "3"),
    }
