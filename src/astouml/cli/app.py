import typer

from astouml.cli.generate import generate

app = typer.Typer(
    name="astouml",
    help="Turn a source file into a PlantUML class diagram.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command()(generate)


def main() -> None:
    app()
