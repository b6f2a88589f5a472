"""Test fixtures for polysdk tests.

This module builds small API models covering every argument location,
read-only properties, arrays, and methods with and without request types.
"""

from polysdk.model import ApiModel, Method, Parameter, ParamLocation, Property, Type


def build_sample_model() -> ApiModel:
    """Build a user/group API exercising every generation path.

    Types: Address, Error, Group (read-only id), Unused, User (read-only id).
    Methods:
        me              GET    /user                 no parameters
        user            GET    /users/{user_id}      path + optional query
        create_user     POST   /users                body + optional query
        search_users    GET    /users/search         three optional queries
                                                     + optional header
        delete_session  DELETE /session              cookie only
        update_group    PATCH  /groups/{group_id}    path + body
    """
    api = ApiModel()
    string = api.intrinsic('string')
    int64 = api.intrinsic('int64')

    address = api.add_type(Type('Address', description='Postal address'))
    address.add_property(Property('street', string))
    address.add_property(Property('city', string))

    error = api.add_type(Type('Error', description='Error details'))
    error.add_property(Property('message', string))

    user = api.add_type(Type('User', description='A user of the system'))
    user.add_property(Property('id', int64, 'Unique id', read_only=True))
    user.add_property(Property('name', string))
    user.add_property(Property('email', string, nullable=True))
    user.add_property(Property('address', address, nullable=True))

    group = api.add_type(Type('Group', description='A group of users'))
    group.add_property(Property('id', int64, read_only=True))
    group.add_property(Property('name', string))

    unused = api.add_type(Type('Unused'))
    unused.add_property(Property('value', string))

    api.add_method(
        Method('me', 'GET', '/user', type=user, errors=[error], description='Current user')
    )
    api.add_method(
        Method(
            'user',
            'GET',
            '/users/{user_id}',
            params=[
                Parameter('user_id', int64, ParamLocation.PATH),
                Parameter('fields', string, ParamLocation.QUERY, nullable=True),
            ],
            type=user,
            errors=[error],
            description='Get a user',
        )
    )
    api.add_method(
        Method(
            'create_user',
            'POST',
            '/users',
            params=[
                Parameter('fields', string, ParamLocation.QUERY, nullable=True),
                Parameter('body', user, ParamLocation.BODY),
            ],
            type=user,
            errors=[error],
            description='Create a user',
        )
    )
    api.add_method(
        Method(
            'search_users',
            'GET',
            '/users/search',
            params=[
                Parameter('name', string, ParamLocation.QUERY, nullable=True),
                Parameter('email', string, ParamLocation.QUERY, nullable=True),
                Parameter('limit', int64, ParamLocation.QUERY, nullable=True),
                Parameter('x_trace', string, ParamLocation.HEADER, nullable=True),
            ],
            type=api.array_of(user),
            errors=[error],
            description='Search users',
        )
    )
    api.add_method(
        Method(
            'delete_session',
            'DELETE',
            '/session',
            params=[Parameter('session', string, ParamLocation.COOKIE)],
            errors=[error],
        )
    )
    api.add_method(
        Method(
            'update_group',
            'PATCH',
            '/groups/{group_id}',
            params=[
                Parameter('group_id', int64, ParamLocation.PATH),
                Parameter('body', group, ParamLocation.BODY),
            ],
            type=group,
            errors=[error],
            description='Update a group',
        )
    )
    return api


def build_method(
    query: list[str] | None = None,
    body: str | None = None,
    header: list[str] | None = None,
    cookie: list[str] | None = None,
) -> Method:
    """Build a method with string parameters in the given locations."""
    api = ApiModel()
    string = api.intrinsic('string')
    params = [Parameter(name, string, ParamLocation.QUERY) for name in query or []]
    if body:
        params.append(Parameter(body, string, ParamLocation.BODY))
    params.extend(Parameter(name, string, ParamLocation.HEADER) for name in header or [])
    params.extend(Parameter(name, string, ParamLocation.COOKIE) for name in cookie or [])
    return Method('call', 'GET', '/call', params=params)


def build_failing_model() -> ApiModel:
    """Model factory that fails while building."""
    raise RuntimeError('model factory exploded')


def build_conflicting_model() -> ApiModel:
    """Sample model plus a declared type named like User's writeable variant."""
    api = build_sample_model()
    write_user = api.add_type(Type('WriteUser'))
    write_user.add_property(Property('note', api.intrinsic('string')))
    api.add_method(Method('write_user', 'GET', '/write_user', type=write_user))
    return api
