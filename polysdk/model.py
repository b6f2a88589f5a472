"""API model consumed by the code generator.

The model is built once, in Python, before generation begins and is treated
as read-only by the generator. Types and methods compare and hash by
identity so they can key the per-pass reference counters and caches.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from polysdk.utils import pascal_case

STANDARD_INTRINSICS = (
    'any',
    'boolean',
    'date',
    'datetime',
    'double',
    'float',
    'int64',
    'integer',
    'string',
    'void',
)


class ParamLocation(str, Enum):
    """Where a method parameter travels in the HTTP request."""

    PATH = 'path'
    QUERY = 'query'
    HEADER = 'header'
    COOKIE = 'cookie'
    BODY = 'body'


@dataclass(eq=False)
class Type:
    """A named structured record.

    Attributes:
        name: The type name as written in generated code.
        properties: Property name to Property, in declaration order.
        description: Optional documentation for the type.
    """

    name: str
    properties: dict[str, 'Property'] = field(default_factory=dict)
    description: str = ''

    @property
    def intrinsic(self) -> bool:
        return False

    def add_property(self, prop: 'Property') -> 'Property':
        self.properties[prop.name] = prop
        return prop

    @property
    def read_only_properties(self) -> list['Property']:
        return [p for p in self.properties.values() if p.read_only]


class IntrinsicType(Type):
    """A built-in type, never emitted as a standalone declaration."""

    @property
    def intrinsic(self) -> bool:
        return True


class ArrayType(Type):
    """A collection of ``element_type`` values."""

    def __init__(self, element_type: Type, description: str = ''):
        super().__init__(name=f'{element_type.name}[]', description=description)
        self.element_type = element_type


@dataclass(eq=False)
class Property:
    name: str
    type: Type
    description: str = ''
    nullable: bool = False
    read_only: bool = False


@dataclass(eq=False)
class Parameter:
    name: str
    type: Type
    location: ParamLocation = ParamLocation.QUERY
    description: str = ''
    nullable: bool = False

    @property
    def required(self) -> bool:
        return not self.nullable


@dataclass(eq=False)
class Method:
    """An API operation.

    Attributes:
        name: Method name used for the generated function.
        http_method: HTTP verb, e.g. 'GET'.
        endpoint: Endpoint path template, e.g. '/users/{user_id}'.
        params: Parameters in declaration order; each has one location.
        type: The success response type, if any.
        errors: Declared error response types.
        description: Summary text for the generated method.
    """

    name: str
    http_method: str
    endpoint: str
    params: list[Parameter] = field(default_factory=list)
    type: Type | None = None
    errors: list[Type] = field(default_factory=list)
    description: str = ''

    def _args(self, location: ParamLocation) -> list[str]:
        return [p.name for p in self.params if p.location == location]

    @property
    def path_args(self) -> list[str]:
        return self._args(ParamLocation.PATH)

    @property
    def query_args(self) -> list[str]:
        return self._args(ParamLocation.QUERY)

    @property
    def header_args(self) -> list[str]:
        return self._args(ParamLocation.HEADER)

    @property
    def cookie_args(self) -> list[str]:
        return self._args(ParamLocation.COOKIE)

    @property
    def body_param(self) -> Parameter | None:
        for param in self.params:
            if param.location == ParamLocation.BODY:
                return param
        return None

    @property
    def body_arg(self) -> str | None:
        body = self.body_param
        return body.name if body else None

    @property
    def required_params(self) -> list[Parameter]:
        return [p for p in self.params if p.required]

    @property
    def optional_params(self) -> list[Parameter]:
        return [p for p in self.params if not p.required]

    @property
    def all_params(self) -> list[Parameter]:
        return self.required_params + self.optional_params


class ApiModel:
    """The types and methods of one API surface.

    Besides lookup and canonical ordering, the model owns the rules deciding
    whether a method needs a request type and whether a type needs a
    writeable variant. Those rules are pure: caching and reference counting
    belong to ``TypeReferenceResolver``.

    Example:
        >>> api = ApiModel()
        >>> user = api.add_type(Type('User'))
        >>> user.add_property(Property('id', api.intrinsic('int64'), read_only=True))
        >>> api.make_writeable_type(user).name
        'WriteUser'
    """

    def __init__(self, intrinsics: Iterable[str] = STANDARD_INTRINSICS):
        self.types: dict[str, Type] = {}
        self.methods: dict[str, Method] = {}
        for name in intrinsics:
            self.types[name] = IntrinsicType(name)

    def add_type(self, type_obj: Type) -> Type:
        if type_obj.name in self.types:
            raise ValueError(f"Type '{type_obj.name}' is already defined")
        self.types[type_obj.name] = type_obj
        return type_obj

    def add_method(self, method: Method) -> Method:
        if method.name in self.methods:
            raise ValueError(f"Method '{method.name}' is already defined")
        self.methods[method.name] = method
        return method

    def intrinsic(self, name: str) -> Type:
        type_obj = self.types.get(name)
        if type_obj is None:
            type_obj = self.types[name] = IntrinsicType(name)
        return type_obj

    @staticmethod
    def array_of(element_type: Type) -> ArrayType:
        return ArrayType(element_type)

    def sorted_types(self, types: Iterable[Type] | None = None) -> list[Type]:
        """Return types in canonical emission order (by name).

        Args:
            types: Types to order; defaults to every type in the model.
        """
        if types is None:
            types = self.types.values()
        return sorted(types, key=lambda t: t.name)

    def sorted_methods(self) -> list[Method]:
        return [self.methods[name] for name in sorted(self.methods)]

    def make_request_type(self, method: Method) -> Type | None:
        """Build the request type bundling ``method``'s parameters.

        Methods with at most one optional parameter are called directly and
        get no request type.
        """
        if len(method.optional_params) <= 1:
            return None
        request = Type(
            name=f'Request{pascal_case(method.name)}',
            description=f'Dynamically generated request type for {method.name}',
        )
        for param in method.all_params:
            request.add_property(
                Property(
                    name=param.name,
                    type=param.type,
                    description=param.description,
                    nullable=param.nullable,
                )
            )
        return request

    def make_writeable_type(self, type_obj: Type) -> Type | None:
        """Build the variant of ``type_obj`` without read-only properties.

        Returns None when there is nothing to strip.
        """
        if type_obj.intrinsic or isinstance(type_obj, ArrayType):
            return None
        if not type_obj.read_only_properties:
            return None
        writer = Type(
            name=f'Write{type_obj.name}',
            description=(
                f'Dynamically generated writeable type for {type_obj.name} '
                'removes read-only properties'
            ),
        )
        for prop in type_obj.properties.values():
            if not prop.read_only:
                writer.add_property(prop)
        return writer
