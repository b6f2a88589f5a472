"""Registry of target language formatters."""

from polysdk.codegen.formatter import CodeFormatter
from polysdk.codegen.languages.python import PythonFormatter
from polysdk.codegen.languages.typescript import TypeScriptFormatter
from polysdk.exceptions import UnsupportedFeatureError

FORMATTERS: dict[str, type[CodeFormatter]] = {
    PythonFormatter.language: PythonFormatter,
    TypeScriptFormatter.language: TypeScriptFormatter,
}

__all__ = ['FORMATTERS', 'PythonFormatter', 'TypeScriptFormatter', 'get_formatter']


def get_formatter(language: str, **options) -> CodeFormatter:
    """Create the formatter registered for ``language``.

    Args:
        language: Registry name, e.g. 'python'.
        **options: Passed to the formatter constructor.

    Raises:
        UnsupportedFeatureError: If no formatter is registered for the language.
    """
    formatter_class = FORMATTERS.get(language.lower())
    if formatter_class is None:
        raise UnsupportedFeatureError(
            f"language '{language}'",
            suggestion=f'Choose one of: {", ".join(sorted(FORMATTERS))}',
        )
    return formatter_class(**options)
