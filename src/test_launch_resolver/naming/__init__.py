"""Launch naming exports."""

from .unique_tokens import TokenGenerator, UniqueTokenGenerator, generate_unique_token

__all__ = ["TokenGenerator", "UniqueTokenGenerator", "generate_unique_token"]
