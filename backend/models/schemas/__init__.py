"""Internal schemas passed between pipeline stages."""

from models.schemas.parsed_reply import ParsedReply

__all__ = [
    "ParsedReply",
]
