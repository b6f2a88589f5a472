"""Reference counting and lazy derived types for one generation pass.

This module provides the TypeReferenceResolver, which decides which types
end up declared in generated output. Types are counted as they are
referenced while methods and declarations are rendered; request types and
writeable types are synthesized from the model's rules on first use and
cached for the rest of the pass.
"""

import logging
from collections import Counter
from collections.abc import Iterator

from polysdk.exceptions import ModelNotBoundError, TypeNameConflictError
from polysdk.model import ApiModel, ArrayType, Method, Type

logger = logging.getLogger(__name__)


class TypeReferenceResolver:
    """Tracks type references and derived types during one generation pass.

    Counts only ever grow. A resolver must not be shared between passes:
    create a new one (via ``GenerationContext.create``) for every target.

    Example:
        >>> resolver = TypeReferenceResolver(api, needs_request_types=True)
        >>> resolver.request_type_for(api.methods['search_users'])
        'RequestSearchUsers'
        >>> _ = resolver.reference(api.types['User'])
        >>> resolver.referenced_type_names()
        ['RequestSearchUsers', 'User']
    """

    def __init__(self, api: ApiModel | None, needs_request_types: bool = False):
        """Initialize an empty resolver.

        Args:
            api: The model supplying types and derivation rules.
            needs_request_types: Whether the target language wraps method
                parameters in request types.
        """
        self.api = api
        self.needs_request_types = needs_request_types
        self._counts: Counter[Type] = Counter()
        self._request_types: dict[Method, Type | None] = {}
        self._writeable_types: dict[Type, Type | None] = {}

    def _require_api(self, operation: str) -> ApiModel:
        if self.api is None:
            raise ModelNotBoundError(operation)
        return self.api

    def _check_name(self, api: ApiModel, derived: Type, source: str) -> None:
        if derived.name in api.types or any(
            t.name == derived.name for t in self.derived_types()
        ):
            raise TypeNameConflictError(derived.name, source)

    def reference(self, type_obj: Type) -> Type:
        """Count one reference to ``type_obj``.

        Referencing an array counts its element type.

        Returns:
            The type that was passed in.
        """
        target = type_obj
        while isinstance(target, ArrayType):
            target = target.element_type
        self._counts[target] += 1
        return type_obj

    def ref_count(self, type_obj: Type) -> int:
        """Get how many times ``type_obj`` has been referenced in this pass."""
        return self._counts[type_obj]

    def request_type_for(self, method: Method) -> str | None:
        """Look up or create the request type for ``method``.

        Every call counts one reference to the request type, not just the
        one that creates it.

        Returns:
            The request type name, or None when request types are not used
            or the model declines to create one for this method.

        Raises:
            ModelNotBoundError: If no model is bound.
            TypeNameConflictError: If the derived name is already taken.
        """
        if not self.needs_request_types:
            return None
        api = self._require_api('request_type_for')
        if method not in self._request_types:
            request = api.make_request_type(method)
            if request is not None:
                self._check_name(api, request, method.name)
                logger.debug(f'Created request type {request.name} for {method.name}')
            self._request_types[method] = request
        request = self._request_types[method]
        if request is None:
            return None
        self._counts[request] += 1
        return request.name

    def writeable_type_for(self, type_obj: Type | None) -> Type | None:
        """Look up or create the writeable variant of ``type_obj``.

        Every call counts one reference to the writeable type.

        Returns:
            The writeable type, or None when ``type_obj`` is None or has no
            read-only properties to strip.

        Raises:
            ModelNotBoundError: If no model is bound.
            TypeNameConflictError: If the derived name is already taken.
        """
        if type_obj is None:
            return None
        api = self._require_api('writeable_type_for')
        if type_obj not in self._writeable_types:
            writer = api.make_writeable_type(type_obj)
            if writer is not None:
                self._check_name(api, writer, type_obj.name)
                logger.debug(f'Created writeable type {writer.name} for {type_obj.name}')
            self._writeable_types[type_obj] = writer
        writer = self._writeable_types[type_obj]
        if writer is None:
            return None
        self._counts[writer] += 1
        return writer

    def derived_types(self) -> list[Type]:
        """Get every request and writeable type synthesized so far."""
        derived = [t for t in self._request_types.values() if t is not None]
        derived.extend(t for t in self._writeable_types.values() if t is not None)
        return derived

    def referenced_types(self) -> list[Type]:
        """Get the types that need declarations, in canonical order.

        Only types with a positive count that are not intrinsic qualify.
        Query this after every method has been rendered.
        """
        if self.api is None:
            return []
        candidates = list(self.api.types.values()) + self.derived_types()
        return [
            t
            for t in self.api.sorted_types(candidates)
            if self._counts[t] > 0 and not t.intrinsic
        ]

    def referenced_type_names(self) -> list[str]:
        """Get the names of the types that need declarations, in canonical order."""
        return [t.name for t in self.referenced_types()]

    def lookup(self, name: str) -> Type | None:
        """Get a model or derived type by name.

        Derived types never share a name with another type, so at most one
        type matches.
        """
        if self.api is not None and name in self.api.types:
            return self.api.types[name]
        for derived in self.derived_types():
            if derived.name == name:
                return derived
        return None

    def __iter__(self) -> Iterator[Type]:
        """Iterate over the types that need declarations."""
        return iter(self.referenced_types())

    def __contains__(self, name: str) -> bool:
        """Check if a type name would be declared."""
        return name in self.referenced_type_names()
