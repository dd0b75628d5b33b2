"""Application layer for format-mapper.

This layer contains the use cases that apply formats to whole files and the
ports (interfaces) they depend on.
"""

from .format_file_use_case import FormatFileUseCase
from .models import FormatFileRequest, FormatFileResponse

__all__ = [
    "FormatFileRequest",
    "FormatFileResponse",
    "FormatFileUseCase",
]
