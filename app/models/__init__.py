# Models module
from app.models.resource import Resource

__all__ = ["Resource"]
