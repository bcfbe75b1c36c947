"""Data access and business services for the clinic entities."""
from .business import EntityService
from .repository import Repository

__all__ = ['EntityService', 'Repository']
