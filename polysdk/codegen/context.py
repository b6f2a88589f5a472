"""Explicit state for a single generation pass."""

from dataclasses import dataclass

from polysdk.codegen.resolver import TypeReferenceResolver
from polysdk.model import ApiModel


@dataclass
class GenerationContext:
    """The model and per-pass reference state handed to every formatter call.

    Attributes:
        api: The model being generated.
        resolver: Reference counts and derived types for this pass only.
    """

    api: ApiModel | None
    resolver: TypeReferenceResolver

    @classmethod
    def create(
        cls, api: ApiModel | None, needs_request_types: bool = False
    ) -> 'GenerationContext':
        """Create a context with fresh reference counts."""
        return cls(
            api=api,
            resolver=TypeReferenceResolver(api, needs_request_types=needs_request_types),
        )
