import importlib
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from polysdk.codegen.formatter import CodeFormatter
from polysdk.codegen.languages import get_formatter
from polysdk.exceptions import ConfigurationError, ModelLoadError
from polysdk.model import ApiModel

DEFAULT_FILENAMES = ['polysdk.yaml', 'polysdk.yml']


class TargetConfig(BaseModel):
    """Represents a single target language to generate."""

    language: str = Field(..., description='Registered formatter name, e.g. python.')

    code_path: str = Field('./', description='Root directory for generated files.')

    package: str = Field('sdk', description='Package directory under code_path.')

    indent_str: str | None = Field(
        None, description='Optional override of the language indentation.'
    )

    transport: str | None = Field(
        None, description='Optional override of the runtime transport member name.'
    )

    needs_request_types: bool | None = Field(
        None, description='Optional override of whether methods take request types.'
    )

    def create_formatter(self) -> CodeFormatter:
        overrides = {
            key: value
            for key, value in (
                ('indent_str', self.indent_str),
                ('transport', self.transport),
            )
            if value is not None
        }
        return get_formatter(
            self.language,
            code_path=self.code_path,
            package=self.package,
            needs_request_types=self.needs_request_types,
            **overrides,
        )


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='POLYSDK_')

    model: str = Field(
        ..., description='Import path of the API model factory, as module:callable.'
    )

    targets: list[TargetConfig] = Field(
        ..., description='Target languages to generate.'
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def _validate(data: dict | None, config_path: str) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        message = error['msg']
        field = '.'.join(str(part) for part in error['loc']) or None
        raise ConfigurationError(
            f'Invalid configuration: {message}',
            config_path=config_path,
            field=field,
        )


def _load_yaml_config(path: str | Path) -> GeneratorConfig:
    try:
        data = load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Invalid YAML: {e}', config_path=str(path))
    return _validate(data, str(path))


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file or the project's pyproject.toml."""
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _load_yaml_config(path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _load_yaml_config(path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f'Invalid TOML: {e}', config_path=str(path))
        tools = pyproject.get('tool', {})

        if 'polysdk' in tools:
            return _validate(tools['polysdk'], str(path))

    raise ConfigurationError('Configuration not found', config_path=cwd)


def load_model(import_path: str) -> ApiModel:
    """Import ``module:callable`` and return the ApiModel it builds."""
    module_name, _, attr_name = import_path.partition(':')
    if not module_name or not attr_name:
        raise ModelLoadError(import_path, cause=ValueError('expected module:callable'))

    try:
        factory = getattr(importlib.import_module(module_name), attr_name)
    except (ImportError, AttributeError) as e:
        raise ModelLoadError(import_path, cause=e)

    try:
        api = factory() if callable(factory) else factory
    except Exception as e:
        raise ModelLoadError(import_path, cause=e)

    if not isinstance(api, ApiModel):
        raise ModelLoadError(
            import_path,
            cause=TypeError(f'expected ApiModel, got {type(api).__name__}'),
        )
    return api
