# ihub/schemas/dashboard.py
from typing import List
from .base import BaseSchema
from .meeting import Meeting
from .resource import Resource

class DashboardStats(BaseSchema):
    total_meetings: int
    total_completed_deliverables: int
    total_completed_milestones: int

class DepartmentDetail(BaseSchema):
    department_name: str
    meetings: List[Meeting] = []
    resources: List[Resource] = []
