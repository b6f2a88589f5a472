"""Language-independent base for source formatters.

A CodeFormatter renders methods and type declarations for one target
language. Subclasses supply the declaration hooks; the argument assembly,
transport call, and type reference bookkeeping stay here.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any

from polysdk.codegen.arguments import ArgumentAssembler
from polysdk.codegen.context import GenerationContext
from polysdk.codegen.conventions import Conventions
from polysdk.model import ApiModel, Method, Parameter, Property, Type
from polysdk.utils import comment_block

WARN_EDITING = 'NOTE: Do not edit this source code file. It is generated by polysdk.'


@dataclass(frozen=True)
class MappedType:
    """How a model type is written in the target language."""

    name: str
    default: str = ''


class CodeFormatter(ABC):
    """Abstract base class for language formatters.

    Attributes:
        language: Registry name of the target language.
        conventions: Delimiters and tokens of the target language.
        needs_request_types: Whether methods take request types.
        code_path: Root directory for generated files.
        package: Package directory under ``code_path``.
    """

    language = ''
    default_conventions = Conventions()
    needs_request_types = False

    def __init__(
        self,
        conventions: Conventions | None = None,
        code_path: str = './',
        package: str = 'sdk',
        needs_request_types: bool | None = None,
        **overrides,
    ):
        """Initialize the formatter.

        Args:
            conventions: Conventions to start from; defaults to the language's.
            code_path: Root directory for generated files.
            package: Package directory under ``code_path``.
            needs_request_types: Overrides the language default when given.
            **overrides: Individual Conventions fields to replace, e.g. indent_str.
        """
        self.conventions = replace(conventions or self.default_conventions, **overrides)
        self.code_path = code_path
        self.package = package
        if needs_request_types is not None:
            self.needs_request_types = needs_request_types
        self.assembler = ArgumentAssembler(self.conventions)

    def new_context(self, api: ApiModel | None) -> GenerationContext:
        """Create the context for one generation pass with this formatter."""
        return GenerationContext.create(api, needs_request_types=self.needs_request_types)

    # hooks every language formatter overrides

    @abstractmethod
    def methods_prologue(self, indent: str) -> str: ...

    @abstractmethod
    def methods_epilogue(self, indent: str) -> str: ...

    @abstractmethod
    def models_prologue(self, indent: str) -> str: ...

    @abstractmethod
    def models_epilogue(self, indent: str) -> str: ...

    @abstractmethod
    def declare_parameter(
        self, ctx: GenerationContext, indent: str, param: Parameter
    ) -> str: ...

    @abstractmethod
    def declare_property(
        self, ctx: GenerationContext, indent: str, prop: Property
    ) -> str: ...

    @abstractmethod
    def type_signature(self, indent: str, type_obj: Type) -> str: ...

    @abstractmethod
    def method_signature(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str: ...

    @abstractmethod
    def declare_method(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str: ...

    @abstractmethod
    def summary(self, indent: str, text: str | None) -> str: ...

    @abstractmethod
    def init_arg(self, indent: str, prop: Property) -> str: ...

    @abstractmethod
    def construct(self, indent: str, properties: dict[str, Property]) -> str: ...

    # shared rendering

    def empty_body(self, indent: str) -> str:
        """Body of an SDK class that has no methods."""
        return ''

    def dump(self, value: Any) -> str:
        return json.dumps(value, indent=2, default=str)

    def debug(self, tag: str, value: Any, indent: str = '') -> str:
        return f'{indent}{tag}:{self.dump(value)}'

    def bumper(self, indent: str) -> str:
        return self.conventions.bumper(indent)

    def it(self, value: str) -> str:
        return self.conventions.it(value)

    def file_name(self, base: str) -> str:
        return f'{self.code_path}{self.package}/{base}{self.conventions.file_extension}'

    def comment(self, indent: str, description: str | None) -> str:
        return comment_block(description, indent, self.conventions.comment_str)

    def comment_header(self, indent: str, text: str | None) -> str:
        return f'{self.comment(indent, text)}\n' if text else ''

    def declare_parameters(
        self, ctx: GenerationContext, indent: str, params: list[Parameter] | None
    ) -> str:
        items = [self.declare_parameter(ctx, indent, p) for p in params or []]
        return self.conventions.param_delimiter.join(items)

    def declare_constructor_arg(self, indent: str, prop: Property) -> str:
        default = f' = {self.conventions.null_str}' if prop.nullable else ''
        return f'{indent}{prop.name}{default}'

    def declare_type(self, ctx: GenerationContext, indent: str, type_obj: Type) -> str:
        bump = self.bumper(indent)
        props = [
            self.declare_property(ctx, bump, prop)
            for prop in type_obj.properties.values()
        ]
        end = self.conventions.end_type_str
        return (
            self.type_signature(indent, type_obj)
            + self.conventions.prop_delimiter.join(props)
            + (f'\n{indent}{end}' if end else '')
        )

    def http_path(self, path: str, prefix: str = '') -> str:
        """Render the endpoint path literal; path arguments go here."""
        return f'"{path}"'

    def http_args(self, method: Method, prefix: str = '') -> str:
        return self.assembler.http_args(method, prefix)

    def error_responses(self, ctx: GenerationContext, indent: str, method: Method) -> str:
        return ', '.join(self.type_map(ctx, error).name for error in method.errors)

    def http_call(
        self, ctx: GenerationContext, indent: str, method: Method, prefix: str = ''
    ) -> str:
        """Render the transport call returning the method's response."""
        args = self.http_args(method, prefix)
        errors = f'({self.error_responses(ctx, indent, method)})'
        path = self.http_path(method.endpoint, prefix)
        transport = self.it(self.conventions.transport)
        return (
            f'{indent}return {transport}.{method.http_method.lower()}'
            f'({errors}, {path}{", " + args if args else ""})'
        )

    def request_type_name(self, ctx: GenerationContext, method: Method) -> str | None:
        return ctx.resolver.request_type_for(method)

    def writeable_type(self, ctx: GenerationContext, type_obj: Type | None) -> Type | None:
        return ctx.resolver.writeable_type_for(type_obj)

    def type_names(self, ctx: GenerationContext) -> list[str]:
        return ctx.resolver.referenced_type_names()

    def type_map(self, ctx: GenerationContext, type_obj: Type) -> MappedType:
        """Map a model type to its target-language spelling.

        Counts a reference to the type, so mapped types get declared.
        """
        ctx.resolver.reference(type_obj)
        return MappedType(name=type_obj.name or '', default=self.conventions.null_str)
