"""Python target: attrs model classes and a synchronous SDK class."""

from polysdk.codegen.context import GenerationContext
from polysdk.codegen.conventions import Conventions
from polysdk.codegen.formatter import WARN_EDITING, CodeFormatter, MappedType
from polysdk.model import ArrayType, Method, Parameter, ParamLocation, Property, Type
from polysdk.utils import pascal_case

PYTHON_TYPES = {
    'any': 'Any',
    'boolean': 'bool',
    'date': 'datetime.date',
    'datetime': 'datetime.datetime',
    'double': 'float',
    'float': 'float',
    'int64': 'int',
    'integer': 'int',
    'string': 'str',
    'void': 'None',
}

MODELS_QUALIFIER = 'models.'


class PythonFormatter(CodeFormatter):
    language = 'python'
    default_conventions = Conventions(
        param_delimiter=',\n',
        prop_delimiter='\n',
        indent_str='    ',
        comment_str='# ',
        null_str='None',
        itself='self',
        file_extension='.py',
    )

    def methods_prologue(self, indent: str) -> str:
        return f"""{self.comment(indent, WARN_EDITING)}
import datetime
from typing import Any, Optional, Sequence

from {self.package} import models
from {self.package}.rtl.api_methods import APIMethods


{indent}class {pascal_case(self.package)}SDK(APIMethods):
"""

    def methods_epilogue(self, indent: str) -> str:
        return ''

    def empty_body(self, indent: str) -> str:
        return f'{indent}pass'

    def models_prologue(self, indent: str) -> str:
        return f"""{self.comment(indent, WARN_EDITING)}
from __future__ import annotations

import datetime
from typing import Any, Optional, Sequence

import attr

from {self.package}.rtl import model
"""

    def models_epilogue(self, indent: str) -> str:
        return ''

    def type_map(
        self, ctx: GenerationContext, type_obj: Type, qualifier: str = ''
    ) -> MappedType:
        null = self.conventions.null_str
        if isinstance(type_obj, ArrayType):
            element = self.type_map(ctx, type_obj.element_type, qualifier)
            return MappedType(name=f'Sequence[{element.name}]', default=null)
        mapped = super().type_map(ctx, type_obj)
        if type_obj.intrinsic:
            return MappedType(name=PYTHON_TYPES.get(type_obj.name, 'Any'), default=null)
        return MappedType(name=f'{qualifier}{mapped.name}', default=null)

    def _annotation(self, mapped: MappedType, nullable: bool) -> str:
        if nullable:
            return f'Optional[{mapped.name}] = {mapped.default}'
        return mapped.name

    def declare_parameter(
        self, ctx: GenerationContext, indent: str, param: Parameter
    ) -> str:
        type_obj = param.type
        if param.location == ParamLocation.BODY:
            type_obj = self.writeable_type(ctx, type_obj) or type_obj
        mapped = self.type_map(ctx, type_obj, MODELS_QUALIFIER)
        return f'{indent}{param.name}: {self._annotation(mapped, param.nullable)}'

    def declare_property(self, ctx: GenerationContext, indent: str, prop: Property) -> str:
        mapped = self.type_map(ctx, prop.type)
        return f'{indent}{prop.name}: {self._annotation(mapped, prop.nullable)}'

    def type_signature(self, indent: str, type_obj: Type) -> str:
        bump = self.bumper(indent)
        return (
            f'{indent}@attr.s(auto_attribs=True, kw_only=True)\n'
            f'{indent}class {type_obj.name}(model.Model):\n'
            f'{self.summary(bump, type_obj.description or type_obj.name)}'
        )

    def method_signature(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str:
        bump = self.bumper(indent)
        returns = 'None'
        if method.type is not None:
            returns = self.type_map(ctx, method.type, MODELS_QUALIFIER).name
        params = self.declare_parameters(ctx, bump, method.all_params)
        head = f'{indent}def {method.name}(\n{bump}self'
        if params:
            head += f',\n{params}'
        return f'{head}\n{indent}) -> {returns}:\n'

    def declare_method(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str:
        bump = self.bumper(indent)
        header = self.comment_header(
            indent, f'{method.http_method.upper()} {method.endpoint}'
        )
        return (
            header
            + self.method_signature(ctx, indent, method)
            + self.summary(bump, method.description)
            + self.http_call(ctx, bump, method)
        )

    def summary(self, indent: str, text: str | None) -> str:
        return f'{indent}"""{text}"""\n' if text else ''

    def init_arg(self, indent: str, prop: Property) -> str:
        return f'{indent}self.{prop.name} = {prop.name}'

    def construct(self, indent: str, properties: dict[str, Property]) -> str:
        bump = self.bumper(indent)
        args = [self.declare_constructor_arg('', p) for p in properties.values()]
        signature = ', '.join(['self', '*', *args]) if args else 'self'
        body = [self.init_arg(bump, p) for p in properties.values()] or [f'{bump}pass']
        return f'{indent}def __init__({signature}):\n' + '\n'.join(body)

    def error_responses(self, ctx: GenerationContext, indent: str, method: Method) -> str:
        return ', '.join(
            self.type_map(ctx, error, MODELS_QUALIFIER).name for error in method.errors
        )

    def http_path(self, path: str, prefix: str = '') -> str:
        return f'f"{path}"' if '{' in path else f'"{path}"'
