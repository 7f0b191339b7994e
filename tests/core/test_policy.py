from __future__ import annotations

import pytest

from src.company_system.company_system.core.exceptions import ConfigurationError
from src.company_system.company_system.core.policy import CapacityPolicy

SETTINGS = {
    "EmployeeSettings.MaxEmployees": "10",
    "EmployeeSettings.RetirementAge": 60,
    "ProjectSettings.MaxProjectsPerDepartment": "1",
    "WorksonSettings.MaxHoursWorked": "40",
    "WorksonSettings.MaxProject": 3,
}


def test_from_settings_parses_thresholds():
    policy = CapacityPolicy.from_settings(SETTINGS)
    assert policy.max_employees_in_constrained_department == 10
    assert policy.max_projects_per_department == 1
    assert policy.max_hours_per_assignment == 40
    assert policy.max_assignments_per_employee == 3
    assert policy.retirement_age == 60
    assert policy.capacity_constrained_dept_no == 1
    assert "Brazil" in policy.residency_countries


def test_residency_countries_from_comma_string():
    settings = dict(SETTINGS, **{"EmployeeSettings.ResidencyCountries": "Brazil, India,Brazil, "})
    policy = CapacityPolicy.from_settings(settings)
    assert policy.residency_countries == ("Brazil", "India")


def test_constrained_department_override():
    settings = dict(SETTINGS, **{"EmployeeSettings.CapacityConstrainedDeptNo": "7"})
    assert CapacityPolicy.from_settings(settings).capacity_constrained_dept_no == 7


@pytest.mark.parametrize(
    "key, value",
    [
        ("EmployeeSettings.MaxEmployees", None),
        ("WorksonSettings.MaxHoursWorked", "forty"),
        ("ProjectSettings.MaxProjectsPerDepartment", "-1"),
    ],
)
def test_bad_threshold_is_configuration_error(key, value):
    settings = dict(SETTINGS)
    settings[key] = value
    with pytest.raises(ConfigurationError):
        CapacityPolicy.from_settings(settings)


def test_missing_key_is_configuration_error():
    settings = {k: v for k, v in SETTINGS.items() if k != "EmployeeSettings.RetirementAge"}
    with pytest.raises(ConfigurationError):
        CapacityPolicy.from_settings(settings)


def test_empty_country_list_is_configuration_error():
    settings = dict(SETTINGS, **{"EmployeeSettings.ResidencyCountries": " , "})
    with pytest.raises(ConfigurationError):
        CapacityPolicy.from_settings(settings)
