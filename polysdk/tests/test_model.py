"""Test the API model and its derivation rules."""

import pytest

from polysdk.model import (
    STANDARD_INTRINSICS,
    ApiModel,
    ArrayType,
    IntrinsicType,
    Method,
    Parameter,
    ParamLocation,
    Type,
)

from polysdk.tests.fixtures import build_sample_model


@pytest.fixture
def api():
    return build_sample_model()


class TestMethodViews:
    """Test the classified argument views of a method."""

    def test_argument_groups(self, api):
        method = api.methods['search_users']

        assert method.query_args == ['name', 'email', 'limit']
        assert method.header_args == ['x_trace']
        assert method.cookie_args == []
        assert method.path_args == []
        assert method.body_arg is None

    def test_body_and_path(self, api):
        method = api.methods['update_group']

        assert method.path_args == ['group_id']
        assert method.body_arg == 'body'
        assert method.body_param.type is api.types['Group']

    def test_required_before_optional(self, api):
        method = api.methods['create_user']

        assert [p.name for p in method.required_params] == ['body']
        assert [p.name for p in method.optional_params] == ['fields']
        assert [p.name for p in method.all_params] == ['body', 'fields']

    def test_identity_equality(self):
        string = IntrinsicType('string')
        first = Method('a', 'GET', '/a', params=[Parameter('x', string)])
        second = Method('a', 'GET', '/a', params=[Parameter('x', string)])

        assert first != second
        assert len({first, second}) == 2


class TestApiModel:
    """Test model bookkeeping."""

    def test_standard_intrinsics_seeded(self):
        api = ApiModel()
        for name in STANDARD_INTRINSICS:
            assert api.types[name].intrinsic

    def test_intrinsic_get_or_create(self):
        api = ApiModel(intrinsics=())
        uuid = api.intrinsic('uuid')

        assert api.intrinsic('uuid') is uuid
        assert isinstance(uuid, IntrinsicType)

    def test_duplicate_type_rejected(self, api):
        with pytest.raises(ValueError, match="Type 'User' is already defined"):
            api.add_type(Type('User'))

    def test_duplicate_method_rejected(self, api):
        with pytest.raises(ValueError, match="Method 'me' is already defined"):
            api.add_method(Method('me', 'GET', '/me'))

    def test_sorted_types(self, api):
        names = [t.name for t in api.sorted_types() if not t.intrinsic]
        assert names == ['Address', 'Error', 'Group', 'Unused', 'User']

    def test_sorted_types_of_given_types(self, api):
        extra = Type('Aardvark')
        ordered = api.sorted_types([api.types['User'], extra])
        assert ordered == [extra, api.types['User']]

    def test_sorted_methods(self, api):
        assert [m.name for m in api.sorted_methods()] == [
            'create_user',
            'delete_session',
            'me',
            'search_users',
            'update_group',
            'user',
        ]

    def test_array_of(self, api):
        users = api.array_of(api.types['User'])

        assert isinstance(users, ArrayType)
        assert users.name == 'User[]'
        assert users.element_type is api.types['User']
        assert not users.intrinsic


class TestRequestTypeRule:
    """Test make_request_type."""

    def test_method_with_several_optional_params(self, api):
        request = api.make_request_type(api.methods['search_users'])

        assert request.name == 'RequestSearchUsers'
        assert list(request.properties) == ['name', 'email', 'limit', 'x_trace']
        assert all(p.nullable for p in request.properties.values())

    def test_single_optional_param_declined(self, api):
        assert api.make_request_type(api.methods['user']) is None

    def test_no_params_declined(self, api):
        assert api.make_request_type(api.methods['me']) is None

    def test_required_params_come_first(self):
        api = ApiModel()
        string = api.intrinsic('string')
        method = Method(
            'find_things',
            'GET',
            '/things/{kind}',
            params=[
                Parameter('a', string, nullable=True),
                Parameter('kind', string, ParamLocation.PATH),
                Parameter('b', string, nullable=True),
            ],
        )
        request = api.make_request_type(method)

        assert request.name == 'RequestFindThings'
        assert list(request.properties) == ['kind', 'a', 'b']
        assert not request.properties['kind'].nullable

    def test_rule_is_pure(self, api):
        method = api.methods['search_users']
        assert api.make_request_type(method) is not api.make_request_type(method)
        assert 'RequestSearchUsers' not in api.types


class TestWriteableTypeRule:
    """Test make_writeable_type."""

    def test_read_only_properties_removed(self, api):
        writer = api.make_writeable_type(api.types['Group'])

        assert writer.name == 'WriteGroup'
        assert list(writer.properties) == ['name']

    def test_declared_order_kept(self, api):
        writer = api.make_writeable_type(api.types['User'])
        assert list(writer.properties) == ['name', 'email', 'address']

    def test_nothing_to_strip(self, api):
        assert api.make_writeable_type(api.types['Address']) is None

    def test_intrinsic_and_array_declined(self, api):
        assert api.make_writeable_type(api.types['int64']) is None
        assert api.make_writeable_type(api.array_of(api.types['User'])) is None
