"""TypeScript target: interfaces and an async SDK class using request types."""

import re

from polysdk.codegen.context import GenerationContext
from polysdk.codegen.conventions import Conventions
from polysdk.codegen.formatter import WARN_EDITING, CodeFormatter, MappedType
from polysdk.model import ArrayType, Method, Parameter, ParamLocation, Property, Type
from polysdk.utils import comment_block, pascal_case

TYPESCRIPT_TYPES = {
    'any': 'any',
    'boolean': 'boolean',
    'date': 'Date',
    'datetime': 'Date',
    'double': 'number',
    'float': 'number',
    'int64': 'number',
    'integer': 'number',
    'string': 'string',
    'void': 'void',
}

MODELS_QUALIFIER = 'models.'
REQUEST_ARG = 'request'


class TypeScriptFormatter(CodeFormatter):
    language = 'typescript'
    default_conventions = Conventions(
        param_delimiter=',\n',
        prop_delimiter='\n',
        indent_str='  ',
        comment_str='// ',
        null_str='null',
        end_type_str='}',
        itself='this',
        file_extension='.ts',
    )
    needs_request_types = True

    def methods_prologue(self, indent: str) -> str:
        return f"""{self.comment(indent, WARN_EDITING)}
import {{ APIMethods }} from './rtl/apiMethods'
import * as models from './models'

{indent}export class {pascal_case(self.package)}SDK extends APIMethods {{
"""

    def methods_epilogue(self, indent: str) -> str:
        return f'{indent}}}\n'

    def models_prologue(self, indent: str) -> str:
        return f'{self.comment(indent, WARN_EDITING)}\n'

    def models_epilogue(self, indent: str) -> str:
        return ''

    @staticmethod
    def interface_name(name: str) -> str:
        return f'I{name}'

    def type_map(
        self, ctx: GenerationContext, type_obj: Type, qualifier: str = ''
    ) -> MappedType:
        null = self.conventions.null_str
        if isinstance(type_obj, ArrayType):
            element = self.type_map(ctx, type_obj.element_type, qualifier)
            return MappedType(name=f'{element.name}[]', default=null)
        mapped = super().type_map(ctx, type_obj)
        if type_obj.intrinsic:
            return MappedType(name=TYPESCRIPT_TYPES.get(type_obj.name, 'any'), default=null)
        return MappedType(
            name=f'{qualifier}{self.interface_name(mapped.name)}', default=null
        )

    def declare_parameter(
        self, ctx: GenerationContext, indent: str, param: Parameter
    ) -> str:
        type_obj = param.type
        if param.location == ParamLocation.BODY:
            type_obj = self.writeable_type(ctx, type_obj) or type_obj
        mapped = self.type_map(ctx, type_obj, MODELS_QUALIFIER)
        optional = '?' if param.nullable else ''
        return f'{indent}{param.name}{optional}: {mapped.name}'

    def declare_property(self, ctx: GenerationContext, indent: str, prop: Property) -> str:
        mapped = self.type_map(ctx, prop.type)
        optional = '?' if prop.nullable else ''
        read_only = 'readonly ' if prop.read_only else ''
        return (
            self.comment_header(indent, prop.description)
            + f'{indent}{read_only}{prop.name}{optional}: {mapped.name}'
        )

    def type_signature(self, indent: str, type_obj: Type) -> str:
        return (
            self.summary(indent, type_obj.description)
            + f'{indent}export interface {self.interface_name(type_obj.name)} {{\n'
        )

    def method_signature(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str:
        return self._signature(ctx, indent, method, self.request_type_name(ctx, method))

    def _signature(
        self, ctx: GenerationContext, indent: str, method: Method, request: str | None
    ) -> str:
        bump = self.bumper(indent)
        if request:
            params = (
                f'{bump}{REQUEST_ARG}: '
                f'{MODELS_QUALIFIER}{self.interface_name(request)}'
            )
        else:
            params = self.declare_parameters(ctx, bump, method.all_params)
        returns = 'void'
        if method.type is not None:
            returns = self.type_map(ctx, method.type, MODELS_QUALIFIER).name
        if not params:
            return f'{indent}async {method.name}(): Promise<{returns}> {{\n'
        return f'{indent}async {method.name}(\n{params}\n{indent}): Promise<{returns}> {{\n'

    def declare_method(
        self, ctx: GenerationContext, indent: str, method: Method
    ) -> str:
        bump = self.bumper(indent)
        route = f'{method.http_method.upper()} {method.endpoint}'
        doc = f'{method.description}\n\n{route}' if method.description else route
        request = self.request_type_name(ctx, method)
        # request types carry every argument, path arguments included
        prefix = f'{REQUEST_ARG}.' if request else ''
        return (
            self.summary(indent, doc)
            + self._signature(ctx, indent, method, request)
            + self.http_call(ctx, bump, method, prefix)
            + f'\n{indent}}}'
        )

    def summary(self, indent: str, text: str | None) -> str:
        body = comment_block(text, indent, ' * ')
        if not body:
            return ''
        return f'{indent}/**\n{body}\n{indent} */\n'

    def init_arg(self, indent: str, prop: Property) -> str:
        return f'{indent}this.{prop.name} = {prop.name}'

    def construct(self, indent: str, properties: dict[str, Property]) -> str:
        if not properties:
            return f'{indent}constructor() {{}}'
        bump = self.bumper(indent)
        args = ', '.join(
            f'{p.name}{"?" if p.nullable else ""}: any' for p in properties.values()
        )
        body = '\n'.join(self.init_arg(bump, p) for p in properties.values())
        return f'{indent}constructor({args}) {{\n{body}\n{indent}}}'

    def error_responses(self, ctx: GenerationContext, indent: str, method: Method) -> str:
        return ', '.join(
            self.type_map(ctx, error, MODELS_QUALIFIER).name for error in method.errors
        )

    def http_path(self, path: str, prefix: str = '') -> str:
        if '{' not in path:
            return f'"{path}"'
        template = re.sub(r'\{(\w+)\}', lambda m: f'${{{prefix}{m.group(1)}}}', path)
        return f'`{template}`'
