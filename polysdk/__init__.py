"""polysdk - Generate SDK source code for many languages from one API model.

polysdk renders transport-call methods and model declarations for each
target language through a per-language ``CodeFormatter``. Argument list
assembly and the decision of which types to declare are shared by every
language.

Quick Start:
    >>> from polysdk import SdkGenerator, get_formatter
    >>>
    >>> generator = SdkGenerator(get_formatter('python', package='looker'))
    >>> sources = generator.generate(api)
    >>> print(sources.models)

CLI Usage:
    $ polysdk generate --config ./polysdk.yaml
    $ polysdk languages
"""

from polysdk._version import version as __version__
from polysdk.codegen import (
    ArgumentAssembler,
    CodeFormatter,
    Conventions,
    FileEmitter,
    GeneratedSources,
    GenerationContext,
    SdkGenerator,
    StringEmitter,
    TypeReferenceResolver,
    get_formatter,
)
from polysdk.config import GeneratorConfig, TargetConfig, get_config, load_model
from polysdk.exceptions import (
    ConfigurationError,
    ModelLoadError,
    ModelNotBoundError,
    OutputError,
    PolySDKError,
    TypeNameConflictError,
    UnsupportedFeatureError,
)
from polysdk.model import (
    ApiModel,
    ArrayType,
    IntrinsicType,
    Method,
    Parameter,
    ParamLocation,
    Property,
    Type,
)

__all__ = [
    '__version__',
    # Model
    'ApiModel',
    'ArrayType',
    'IntrinsicType',
    'Method',
    'Parameter',
    'ParamLocation',
    'Property',
    'Type',
    # Generation
    'ArgumentAssembler',
    'CodeFormatter',
    'Conventions',
    'FileEmitter',
    'GeneratedSources',
    'GenerationContext',
    'SdkGenerator',
    'StringEmitter',
    'TypeReferenceResolver',
    'get_formatter',
    # Configuration
    'GeneratorConfig',
    'TargetConfig',
    'get_config',
    'load_model',
    # Exceptions
    'PolySDKError',
    'ModelNotBoundError',
    'TypeNameConflictError',
    'ModelLoadError',
    'ConfigurationError',
    'OutputError',
    'UnsupportedFeatureError',
]
