"""Custom exceptions for polysdk.

This module defines the exception hierarchy used throughout polysdk. Absent
argument groups and declined derived types are never errors; the only
failures raised during a generation pass are precondition violations.
"""


class PolySDKError(Exception):
    """Base exception for all polysdk errors.

    Example:
        try:
            generator.generate(api)
        except PolySDKError as e:
            print(f"polysdk error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ModelNotBoundError(PolySDKError):
    """A derived type was requested without an API model bound to the pass.

    This is a programmer error: callers must bind an ``ApiModel`` before
    asking for request or writeable types.

    Attributes:
        operation: The resolver operation that needed the model.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"No API model is bound; cannot resolve '{operation}'")


class TypeNameConflictError(PolySDKError):
    """A derived type would be declared under a name that is already taken.

    Attributes:
        name: The conflicting type name.
        source: The type or method the derived type was made from.
    """

    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source
        super().__init__(
            f"Derived type '{name}' for '{source}' conflicts with an existing type"
        )


class ModelLoadError(PolySDKError):
    """Failed to import the API model factory named in the configuration.

    Attributes:
        import_path: The ``module:callable`` path that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, import_path: str, cause: Exception | None = None):
        self.import_path = import_path
        self.cause = cause
        message = f"Failed to load API model from '{import_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigurationError(PolySDKError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(PolySDKError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class UnsupportedFeatureError(PolySDKError):
    """Attempted to use an unsupported feature, such as an unknown language.

    Attributes:
        feature: Description of the unsupported feature.
        suggestion: Optional suggestion for a workaround.
    """

    def __init__(self, feature: str, suggestion: str | None = None):
        self.feature = feature
        self.suggestion = suggestion
        message = f'Unsupported feature: {feature}'
        if suggestion:
            message += f'. {suggestion}'
        super().__init__(message)
