# ihub/services/progress.py
"""Progress aggregation over an already loaded containment graph.

Nothing in here touches the database; the functions only read ``milestones``,
``deliverables`` and ``status`` off the view objects they are given.
"""
from typing import Iterable, List, Tuple

from ..models.deliverable import DeliverableStatus
from ..schemas.progress import Progress


def percentage(completed: int, total: int) -> int:
    """round(100 * completed / total), halves rounded up, 0 for an empty set"""
    if total <= 0:
        return 0
    # Integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


def count_deliverables(deliverables: Iterable) -> Tuple[int, int]:
    total = 0
    completed = 0
    for deliverable in deliverables or []:
        total += 1
        if deliverable.status == DeliverableStatus.COMPLETED:
            completed += 1
    return total, completed


def _progress(total: int, completed: int) -> Progress:
    return Progress(total=total, completed=completed, percentage=percentage(completed, total))


def milestone_progress(milestone) -> Progress:
    total, completed = count_deliverables(milestone.deliverables)
    return _progress(total, completed)


def project_progress(project) -> Progress:
    """Completion across every deliverable of every milestone in the project"""
    if not project.milestones:
        return Progress()

    total = 0
    completed = 0
    for milestone in project.milestones:
        milestone_total, milestone_completed = count_deliverables(milestone.deliverables)
        total += milestone_total
        completed += milestone_completed

    return _progress(total, completed)


def attach_progress(startup) -> List:
    """Annotate each of the startup's projects with its progress and return them"""
    for project in startup.projects:
        project.progress = project_progress(project)
    return startup.projects


def startup_rollup(startup) -> Progress:
    """Startup-wide progress.

    Sums deliverables across all projects rather than averaging the project
    percentages, so a large project weighs more than a small one.
    """
    total = 0
    completed = 0
    for project in startup.projects:
        for milestone in project.milestones:
            milestone_total, milestone_completed = count_deliverables(milestone.deliverables)
            total += milestone_total
            completed += milestone_completed
    return _progress(total, completed)


def is_milestone_complete(milestone) -> bool:
    total, completed = count_deliverables(milestone.deliverables)
    return total > 0 and completed == total
