"""Test full generation passes."""

import pytest

from polysdk.codegen.generator import GeneratedSources, SdkGenerator
from polysdk.codegen.languages import PythonFormatter, TypeScriptFormatter
from polysdk.exceptions import TypeNameConflictError
from polysdk.model import ApiModel, Method, Property, Type

from polysdk.tests.fixtures import build_conflicting_model, build_sample_model

PYTHON_TYPES = ['Address', 'Error', 'Group', 'User', 'WriteGroup', 'WriteUser']
TYPESCRIPT_TYPES = [
    'Address',
    'Error',
    'Group',
    'RequestSearchUsers',
    'User',
    'WriteGroup',
    'WriteUser',
]


@pytest.fixture
def python_sources():
    return SdkGenerator(PythonFormatter()).generate(build_sample_model())


@pytest.fixture
def typescript_sources():
    return SdkGenerator(TypeScriptFormatter()).generate(build_sample_model())


class TestPythonPass:
    """Test generating the Python SDK."""

    def test_result_type(self, python_sources):
        assert isinstance(python_sources, GeneratedSources)

    def test_declared_types(self, python_sources):
        assert python_sources.type_names == PYTHON_TYPES

    def test_unused_type_pruned(self, python_sources):
        assert 'class Unused' not in python_sources.models

    def test_models_in_canonical_order(self, python_sources):
        positions = [
            python_sources.models.index(f'class {name}(') for name in PYTHON_TYPES
        ]
        assert positions == sorted(positions)

    def test_methods_in_name_order(self, python_sources):
        methods = python_sources.methods
        assert methods.index('def create_user(') < methods.index('def delete_session(')
        assert methods.index('def update_group(') < methods.index('def user(')

    def test_sources_compile(self, python_sources):
        compile(python_sources.methods, 'methods.py', 'exec')
        compile(python_sources.models, 'models.py', 'exec')

    def test_call_sites(self, python_sources):
        methods = python_sources.methods
        assert 'return self.rtl.get((models.Error), "/user")\n' in methods
        assert (
            'return self.rtl.delete((models.Error), "/session", None, None, None, [session])'
            in methods
        )
        assert (
            'return self.rtl.patch((models.Error), f"/groups/{group_id}", None, body)'
            in methods
        )


class TestTypeScriptPass:
    """Test generating the TypeScript SDK."""

    def test_declared_types(self, typescript_sources):
        assert typescript_sources.type_names == TYPESCRIPT_TYPES

    def test_request_type_declared(self, typescript_sources):
        models = typescript_sources.models
        assert 'export interface IRequestSearchUsers {\n' in models
        assert '  x_trace?: string\n' in models

    def test_class_closed(self, typescript_sources):
        assert typescript_sources.methods.endswith('}\n')


class TestReferenceClosure:
    """Types reached only through other declarations are declared too."""

    def test_nested_property_types(self):
        api = ApiModel()
        leaf = api.add_type(Type('Leaf'))
        leaf.add_property(Property('value', api.intrinsic('string')))
        middle = api.add_type(Type('Middle'))
        middle.add_property(Property('leaf', api.array_of(leaf)))
        root = api.add_type(Type('Root'))
        root.add_property(Property('middle', middle))
        api.add_method(Method('root', 'GET', '/root', type=root))

        sources = SdkGenerator(PythonFormatter()).generate(api)

        assert sources.type_names == ['Leaf', 'Middle', 'Root']
        assert 'leaf: Sequence[Leaf]' in sources.models

    def test_self_reference(self):
        api = ApiModel()
        node = api.add_type(Type('Node'))
        node.add_property(Property('parent', node, nullable=True))
        api.add_method(Method('node', 'GET', '/node', type=node))

        sources = SdkGenerator(PythonFormatter()).generate(api)

        assert sources.type_names == ['Node']
        assert sources.models.count('class Node(') == 1


class TestDeterminism:
    """Repeated passes produce identical output."""

    def test_same_generator_twice(self):
        generator = SdkGenerator(TypeScriptFormatter())
        api = build_sample_model()

        assert generator.generate(api) == generator.generate(api)

    def test_fresh_models(self):
        first = SdkGenerator(PythonFormatter()).generate(build_sample_model())
        second = SdkGenerator(PythonFormatter()).generate(build_sample_model())

        assert first == second

    def test_languages_do_not_share_counts(self):
        api = build_sample_model()
        SdkGenerator(TypeScriptFormatter()).generate(api)
        python = SdkGenerator(PythonFormatter()).generate(api)

        assert 'RequestSearchUsers' not in python.type_names
        assert python.type_names == PYTHON_TYPES


class TestEdgeModels:
    """Models that generation must still handle."""

    def test_model_without_methods(self):
        api = ApiModel()
        api.add_type(Type('Lonely')).add_property(
            Property('value', api.intrinsic('string'))
        )

        sources = SdkGenerator(PythonFormatter()).generate(api)

        assert sources.methods.endswith('class SdkSDK(APIMethods):\n    pass\n')
        assert sources.type_names == []
        compile(sources.methods, 'methods.py', 'exec')
        compile(sources.models, 'models.py', 'exec')

    def test_typescript_model_without_methods(self):
        sources = SdkGenerator(TypeScriptFormatter()).generate(ApiModel())

        assert sources.methods.endswith('}\n')
        assert sources.type_names == []

    def test_derived_name_conflict(self):
        api = build_conflicting_model()

        with pytest.raises(TypeNameConflictError) as exc_info:
            SdkGenerator(PythonFormatter()).generate(api)

        assert exc_info.value.name == 'WriteUser'
