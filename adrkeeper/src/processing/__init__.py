"""Processing modules for index allocation, rendering, status and link rewriting."""

from .index_allocator import IndexAllocator
from .lifecycle import AdrLifecycle, init
from .link_manager import LinkManager
from .status_rewriter import StatusRewriter
from .template_renderer import TemplateRenderer

__all__ = [
    'AdrLifecycle',
    'IndexAllocator',
    'LinkManager',
    'StatusRewriter',
    'TemplateRenderer',
    'init'
]
