"""Delimiter and token conventions shared by the argument assembler and formatters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Conventions:
    """Per-language delimiters and literal tokens.

    Attributes:
        arg_delimiter: Separator between call arguments.
        param_delimiter: Separator between declared parameters.
        prop_delimiter: Separator between declared properties.
        indent_str: One level of indentation.
        comment_str: Line comment marker, including its trailing space.
        null_str: The literal for "no value"; also the omission placeholder.
        end_type_str: Closing token of a type declaration, if any.
        itself: Receiver prefix for member access (e.g. 'self').
        transport: Name of the runtime transport member.
        file_extension: Extension of generated source files.
    """

    arg_delimiter: str = ', '
    param_delimiter: str = ',\n'
    prop_delimiter: str = ',\n'
    indent_str: str = '  '
    comment_str: str = '// '
    null_str: str = 'null'
    end_type_str: str = ''
    itself: str = ''
    transport: str = 'rtl'
    file_extension: str = '.code'

    def bumper(self, indent: str) -> str:
        return indent + self.indent_str

    def it(self, value: str) -> str:
        return f'{self.itself}.{value}' if self.itself else value
