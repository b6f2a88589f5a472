"""Code emitter interfaces and implementations for generated sources.

This module provides the CodeEmitter interface and concrete implementations
for emitting the sources of a generation pass (files on disk, strings).
"""

import logging
from abc import ABC, abstractmethod

from upath import UPath

from polysdk.codegen.formatter import CodeFormatter
from polysdk.codegen.generator import GeneratedSources
from polysdk.exceptions import OutputError

logger = logging.getLogger(__name__)

METHODS_MODULE = 'methods'
MODELS_MODULE = 'models'


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter takes the sources of one generation pass and outputs them
    under the file names the formatter chooses.
    """

    def __init__(self, formatter: CodeFormatter):
        self.formatter = formatter

    def emit(self, sources: GeneratedSources) -> list[str]:
        """Emit the methods and models sources.

        Returns:
            The file names that were emitted.
        """
        return [
            self.emit_module(METHODS_MODULE, sources.methods),
            self.emit_module(MODELS_MODULE, sources.models),
        ]

    @abstractmethod
    def emit_module(self, name: str, source: str) -> str:
        """Emit one module.

        Args:
            name: The module base name, e.g. 'models'.
            source: The module source text.

        Returns:
            The file name of the emitted module.
        """
        pass


class FileEmitter(CodeEmitter):
    """Emits generated sources to files on disk.

    Python output is compiled before it is written so that a formatter bug
    surfaces as an OutputError instead of a broken package.
    """

    def __init__(self, formatter: CodeFormatter, validate_syntax: bool = True):
        super().__init__(formatter)
        self.validate_syntax = validate_syntax
        self._written_files: list[str] = []

    @property
    def written_files(self) -> list[str]:
        return list(self._written_files)

    def emit_module(self, name: str, source: str) -> str:
        file_name = self.formatter.file_name(name)
        if self.validate_syntax and self.formatter.language == 'python':
            self._validate_syntax(source, file_name)

        file_path = UPath(file_name)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(source, encoding='utf-8')
        except OSError as e:
            raise OutputError(file_name, cause=e)

        logger.info(f'Wrote {file_name}')
        self._written_files.append(file_name)
        return file_name

    def _validate_syntax(self, source: str, file_name: str) -> None:
        try:
            compile(source, file_name, 'exec')
        except SyntaxError as e:
            raise OutputError(file_name, cause=e)


class StringEmitter(CodeEmitter):
    """Collects generated sources in memory, keyed by file name."""

    def __init__(self, formatter: CodeFormatter):
        super().__init__(formatter)
        self.files: dict[str, str] = {}

    def emit_module(self, name: str, source: str) -> str:
        file_name = self.formatter.file_name(name)
        self.files[file_name] = source
        return file_name
