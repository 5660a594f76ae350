"""Services for template repository synchronization."""

from .template_sync import TemplateRepositorySync

__all__ = [
    'TemplateRepositorySync'
]
