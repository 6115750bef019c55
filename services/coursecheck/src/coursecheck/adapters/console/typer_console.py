import typer

LABEL_COLORS = {
    "error": typer.colors.RED,
    "path": typer.colors.MAGENTA,
    "help": typer.colors.BLUE,
}


class TyperConsole:
    def __init__(self, color: bool | None = None) -> None:
        self.color = color

    def echo(self, text: str) -> None:
        typer.echo(text, color=self.color)

    def labelled(self, label: str, text: str) -> None:
        styled = typer.style(label, fg=LABEL_COLORS.get(label))
        typer.echo(f"{styled}: {text}", color=self.color)

    def verdict(self, ok: bool) -> None:
        if ok:
            result_text = typer.style("success", fg=typer.colors.GREEN)
        else:
            result_text = typer.style("failure", fg=typer.colors.RED)
        typer.echo(f"\nchecker finished with result: {result_text}", color=self.color)
