import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "company_db_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

REPORT_TIMEOUT_MS = 5000

CAPACITY_SETTINGS = {
    "EmployeeSettings.MaxEmployees": 10,
    "EmployeeSettings.RetirementAge": 60,
    "EmployeeSettings.CapacityConstrainedDeptNo": 1,
    "EmployeeSettings.ResidencyCountries": "Brazil,Russia,India,China,South Africa",
    "ProjectSettings.MaxProjectsPerDepartment": 10,
    "WorksonSettings.MaxHoursWorked": 40,
    "WorksonSettings.MaxProject": 3,
}
