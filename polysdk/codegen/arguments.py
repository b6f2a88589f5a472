"""Assembly of positional argument lists for transport calls.

A transport call takes its argument groups in a fixed order: query, body,
headers, cookies. Any of them may be empty. Empty groups render as the null
placeholder so later arguments keep their position, except when nothing
non-empty follows them, in which case they are left out entirely:

    [fields, limit], body, [x_token], [session]
    [fields], null, null, [session]
    null, body
    [fields]
"""

from collections.abc import Sequence

from polysdk.codegen.conventions import Conventions
from polysdk.model import Method


class ArgumentAssembler:
    """Builds argument list text using one language's conventions."""

    def __init__(self, conventions: Conventions | None = None):
        self.conventions = conventions or Conventions()

    def arg_group(self, args: Sequence[str] | None, prefix: str = '') -> str:
        """Render ``args`` as a bracketed collection, or the null placeholder."""
        if not args:
            return self.conventions.null_str
        delimiter = self.conventions.arg_delimiter
        return f'[{prefix}{(delimiter + prefix).join(args)}]'

    def arg_list(self, args: Sequence[str] | None, prefix: str = '') -> str:
        """Render ``args`` as a plain delimited list, or the null placeholder."""
        if not args:
            return self.conventions.null_str
        delimiter = self.conventions.arg_delimiter
        return f'{prefix}{(delimiter + prefix).join(args)}'

    def arg_fill(self, current: str, args: str) -> str:
        """Prepend ``args`` to the arguments accumulated so far.

        A null placeholder is dropped while nothing has been accumulated,
        since it would be a trailing optional argument.
        """
        if not current and args.strip() == self.conventions.null_str:
            return ''
        return f'{args}{self.conventions.arg_delimiter if current else ""}{current}'

    def assemble(
        self,
        query: Sequence[str] | None = None,
        body: str | None = None,
        header: Sequence[str] | None = None,
        cookie: Sequence[str] | None = None,
        prefix: str = '',
    ) -> str:
        """Build the argument list from back to front.

        Args:
            query: Query argument names (most significant).
            body: The body argument, if any.
            header: Header argument names.
            cookie: Cookie argument names (least significant).
            prefix: Prepended to every argument, e.g. 'request.'.

        Returns:
            The argument list text; '' when every group is empty.
        """
        result = self.arg_fill('', self.arg_group(cookie, prefix))
        result = self.arg_fill(result, self.arg_group(header, prefix))
        result = self.arg_fill(
            result, f'{prefix}{body}' if body else self.conventions.null_str
        )
        result = self.arg_fill(result, self.arg_group(query, prefix))
        return result

    def http_args(self, method: Method, prefix: str = '') -> str:
        """Build the transport argument list for ``method``.

        Path arguments are not included; they are resolved into the path.
        """
        return self.assemble(
            query=method.query_args,
            body=method.body_arg,
            header=method.header_args,
            cookie=method.cookie_args,
            prefix=prefix,
        )
