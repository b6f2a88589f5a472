import re
import unicodedata

__all__ = ('capitalize', 'comment_block', 'pascal_case')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def pascal_case(name: str) -> str:
    """Convert a method or type name into a PascalCase identifier fragment.

    - Split on anything that is not a letter or digit
    - Capitalize each part, keeping the rest of the part as written
    - Ensure it doesn't start with a digit
    """
    parts = re.sub(r'[^A-Za-z0-9]+', '_', remove_accents(name or '')).split('_')
    sanitized = ''.join(capitalize(part) for part in parts if part)

    if sanitized and sanitized[0].isdigit():
        sanitized = '_' + sanitized
    return sanitized


def comment_block(text: str | None, indent: str = '', comment_str: str = '// ') -> str:
    """Prefix every line of ``text`` with ``indent`` and ``comment_str``.

    Trailing whitespace is stripped from each line, so blank lines in the
    text become bare comment markers. Empty or blank text yields ''.
    """
    if not text:
        return ''
    text = text.strip()
    if not text:
        return ''
    indentation = indent + comment_str
    return '\n'.join(f'{indentation}{line}'.rstrip() for line in text.split('\n'))
