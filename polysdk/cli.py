import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from polysdk._version import version as __version__
from polysdk.codegen.emitter import FileEmitter
from polysdk.codegen.generator import SdkGenerator
from polysdk.codegen.languages import FORMATTERS
from polysdk.config import get_config, load_model
from polysdk.exceptions import PolySDKError

console = Console()
app = typer.Typer(
    name='polysdk',
    help='Generate SDK source code for several languages from one API model',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log generation details')
    ] = False,
) -> None:
    """Generate SDK sources for every configured target.

    If no config file is specified, will look for polysdk.yaml or
    polysdk.yml in the current directory, then [tool.polysdk] in
    pyproject.toml.

    Examples:
        polysdk generate
        polysdk generate --config my-config.yaml
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(message)s',
            handlers=[RichHandler(console=console, show_path=False)],
        )

    try:
        settings = get_config(config)
        api = load_model(settings.model)

        for target in settings.targets:
            formatter = target.create_formatter()
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating {formatter.language} code in {formatter.code_path}{formatter.package}...',
                    total=None,
                )

                sources = SdkGenerator(formatter).generate(api)
                written = FileEmitter(formatter).emit(sources)

                progress.update(
                    task, description=f'Code generation completed for {formatter.language}!'
                )
            console.print('[dim]Generated files:[/dim]')
            for file_name in written:
                console.print(f'  - {file_name}')

    except PolySDKError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def languages() -> None:
    """List the target languages polysdk can generate."""
    for name in sorted(FORMATTERS):
        console.print(name)


@app.command()
def version() -> None:
    """Show the version of polysdk."""
    console.print(f'polysdk version: {__version__}')


if __name__ == '__main__':
    app()
