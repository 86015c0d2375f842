"""Validation tests for the Project request model."""

import pytest
from pydantic import ValidationError

from projectsvc.models.project import ProjectInput


def _input(code: str) -> ProjectInput:
    return ProjectInput(project_code=code, project_name="Some project")


@pytest.mark.parametrize("code", ["ALPHA", "P1-42", "v2.0", "a_b", "9lives"])
def test_accepts_codes_starting_alphanumeric(code):
    assert _input(code).project_code == code


@pytest.mark.parametrize("code", [".", "..", ".hidden", "-P1", "_x", "a/b", "a b", ""])
def test_rejects_codes_that_are_not_single_path_segments(code):
    with pytest.raises(ValidationError):
        _input(code)


@pytest.mark.parametrize("code", ["admin", "manager", "check", "count", "Admin", "MANAGER"])
def test_rejects_route_names_as_codes(code):
    with pytest.raises(ValidationError) as exc_info:
        _input(code)
    assert "reserved" in str(exc_info.value)


def test_rejects_end_before_start():
    with pytest.raises(ValidationError):
        ProjectInput(
            project_code="ALPHA",
            project_name="Alpha",
            start_date="2026-06-30",
            end_date="2026-01-01",
        )
