"""Role-based access policy for caller-specific project operations.

The policy is evaluated before reading, updating, completing, deleting or
probing one project. Creating a project and the admin listing never consult it.

Rules, in order:

* a caller holding ``Employee`` is denied, whoever owns the project;
* a caller holding ``Manager`` is denied unless they are the assigned manager;
* anyone else (``Admin``, or a manager on their own project) is allowed.
"""

import logging
from dataclasses import dataclass

from projectsvc.db.models.project import ProjectRow
from projectsvc.errors.exceptions import ProjectAccessDeniedError
from projectsvc.models.caller import CallerContext
from projectsvc.models.enums import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    reason: str


def evaluate_project_access(caller: CallerContext, project: ProjectRow) -> AccessDecision:
    """Decide whether ``caller`` may act on ``project``."""
    if caller.has_role(Role.EMPLOYEE):
        return AccessDecision(False, "employees cannot access project records")
    if caller.has_role(Role.MANAGER) and caller.username != project.assigned_manager:
        return AccessDecision(False, "managers can only access their own projects")
    if caller.has_role(Role.MANAGER):
        return AccessDecision(True, "caller is the assigned manager")
    return AccessDecision(True, "caller holds no restricted role")


def check_project_access(caller: CallerContext, project: ProjectRow) -> None:
    """Raise ``ProjectAccessDeniedError`` unless the policy allows access."""
    decision = evaluate_project_access(caller, project)
    if not decision.allowed:
        logger.info(
            "Access to project %s denied for %s: %s",
            project.project_code,
            caller.username,
            decision.reason,
        )
        raise ProjectAccessDeniedError(project.project_code, decision.reason)
