"""
Templates module.

Driver templates and passenger quick replies: closed code sets with fixed
content, broadcast to both thread participants.

Public API:
- ITemplateService: Interface for template sends and allow-lists
- DriverTemplate, QuickReply: Code sets
- Content helpers: render_driver_template, quick_reply_content, template_for_eta
- Template exceptions: InvalidTemplateError, ReplyNotEnabledError
"""

from .interfaces import ITemplateService
from .models import DriverTemplate, QuickReply
from .catalog import (
    DRIVER_TEMPLATE_CONTENT,
    QUICK_REPLY_CONTENT,
    render_driver_template,
    quick_reply_content,
    template_for_eta,
)
from .exceptions import InvalidTemplateError, ReplyNotEnabledError

__all__ = [
    # Interface
    "ITemplateService",
    # Models
    "DriverTemplate",
    "QuickReply",
    # Content
    "DRIVER_TEMPLATE_CONTENT",
    "QUICK_REPLY_CONTENT",
    "render_driver_template",
    "quick_reply_content",
    "template_for_eta",
    # Exceptions
    "InvalidTemplateError",
    "ReplyNotEnabledError",
]
