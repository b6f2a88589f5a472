import logging
from dataclasses import dataclass, field

from polysdk.codegen.context import GenerationContext
from polysdk.codegen.formatter import CodeFormatter
from polysdk.model import ApiModel

logger = logging.getLogger(__name__)


@dataclass
class GeneratedSources:
    """Source text produced by one generation pass.

    Attributes:
        methods: The SDK methods module.
        models: The type declarations module.
        type_names: Names of the declared types, in emission order.
    """

    methods: str
    models: str
    type_names: list[str] = field(default_factory=list)


class SdkGenerator:
    """Runs generation passes for one formatter.

    Every call to ``generate`` starts from a fresh ``GenerationContext``, so
    reference counts and derived types never carry over between passes.
    """

    def __init__(self, formatter: CodeFormatter):
        self.formatter = formatter

    def generate(self, api: ApiModel) -> GeneratedSources:
        ctx = self.formatter.new_context(api)
        logger.info(
            f'Generating {self.formatter.language} sources for {len(api.methods)} methods'
        )
        methods = self.render_methods(ctx)
        declarations = self.render_declarations(ctx)
        type_names = ctx.resolver.referenced_type_names()
        models = self.render_models(declarations, type_names)
        logger.info(f'Declared {len(type_names)} types')
        return GeneratedSources(methods=methods, models=models, type_names=type_names)

    def render_methods(self, ctx: GenerationContext) -> str:
        formatter = self.formatter
        indent = formatter.bumper('')
        parts = [
            formatter.declare_method(ctx, indent, method)
            for method in ctx.api.sorted_methods()
        ]
        if not parts:
            parts = [formatter.empty_body(indent)]
        return (
            formatter.methods_prologue('')
            + '\n\n'.join(parts)
            + '\n'
            + formatter.methods_epilogue('')
        )

    def render_declarations(self, ctx: GenerationContext) -> dict[str, str]:
        """Declare every referenced type.

        Declaring a type references its property types, which may bring new
        types into the referenced set, so this repeats until nothing new
        appears.
        """
        declarations: dict[str, str] = {}
        while True:
            pending = [
                t for t in ctx.resolver.referenced_types() if t.name not in declarations
            ]
            if not pending:
                return declarations
            for type_obj in pending:
                logger.debug(f'Declaring type {type_obj.name}')
                declarations[type_obj.name] = self.formatter.declare_type(
                    ctx, '', type_obj
                )

    def render_models(self, declarations: dict[str, str], type_names: list[str]) -> str:
        formatter = self.formatter
        body = '\n\n\n'.join(declarations[name] for name in type_names)
        return (
            formatter.models_prologue('')
            + '\n\n'
            + body
            + '\n'
            + formatter.models_epilogue('')
        )
