"""Repository for project data access."""

from app.models.project import Project
from app.repositories.base import CodedEntityRepository


class ProjectRepository(CodedEntityRepository[Project]):
    """Data access layer for customer projects."""

    model = Project
    entity = "project"
