"""Source generation for polysdk.

The two algorithms every target language shares live here: argument list
assembly for transport calls and reference-counted type emission. Language
formatters plug into them through ``CodeFormatter``.
"""

from polysdk.codegen.arguments import ArgumentAssembler
from polysdk.codegen.context import GenerationContext
from polysdk.codegen.conventions import Conventions
from polysdk.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from polysdk.codegen.formatter import WARN_EDITING, CodeFormatter, MappedType
from polysdk.codegen.generator import GeneratedSources, SdkGenerator
from polysdk.codegen.languages import FORMATTERS, get_formatter
from polysdk.codegen.resolver import TypeReferenceResolver

__all__ = [
    'ArgumentAssembler',
    'CodeEmitter',
    'CodeFormatter',
    'Conventions',
    'FORMATTERS',
    'FileEmitter',
    'GeneratedSources',
    'GenerationContext',
    'MappedType',
    'SdkGenerator',
    'StringEmitter',
    'TypeReferenceResolver',
    'WARN_EDITING',
    'get_formatter',
]
