import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import CSV_SNIPPET_COLUMN
from .core.converter import Converter

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """
    漢数字を算用数字に正規化する。
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def convert(
    text: Optional[str] = typer.Argument(None, help="Text to convert (reads stdin when omitted)"),
    isolated: bool = typer.Option(False, help="Also convert isolated numerals (experimental)"),
):
    """
    Convert a string, or stdin line by line.
    """
    converter = Converter(include_isolated=isolated)
    if text is not None:
        typer.echo(converter.convert(text))
        return
    for line in sys.stdin:
        typer.echo(converter.convert(line.rstrip("\n")))


@app.command()
def convert_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Input file"),
    output: Optional[Path] = typer.Option(None, help="Output path (stdout when omitted)"),
    markup: bool = typer.Option(False, "--markup/--plain", help="Treat input as HTML/XML and convert text nodes only"),
    isolated: bool = typer.Option(False, help="Also convert isolated numerals (experimental)"),
):
    """
    Convert a text file, or the text nodes of an HTML/XML file.
    """
    converter = Converter(include_isolated=isolated)
    content = path.read_text(encoding="utf-8")

    if markup:
        from .core.textwalk import convert_markup
        features = "xml" if path.suffix.lower() == ".xml" else "html.parser"
        result = convert_markup(content, features=features, converter=converter.convert)
    else:
        result = "".join(converter.convert(line) for line in content.splitlines(keepends=True))

    if output is None:
        typer.echo(result, nl=False)
    else:
        output.write_text(result, encoding="utf-8")
        typer.echo(f"Wrote {output}")


@app.command()
def convert_csv(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Snippet CSV"),
    output: Optional[Path] = typer.Option(None, help="Output CSV (default: <stem>_with_test.csv)"),
    column: int = typer.Option(CSV_SNIPPET_COLUMN, help="0-based index of the snippet column"),
):
    """
    Append a 変換結果 column to a snippet CSV for manual review.
    """
    from .core.batch import CsvBatchConverter

    if column < 0:
        raise typer.BadParameter(f"Invalid column: {column}. Must be >= 0.")
    written = CsvBatchConverter(column=column).run(input_path, output)
    typer.echo(f"Wrote {written}")


@app.command()
def convert_law(
    out: Path = typer.Option(..., help="Output directory"),
    law_id: Optional[str] = typer.Option(None, help="e-Gov law ID"),
    targets: Optional[Path] = typer.Option(None, help="Path to targets.yaml"),
    force: bool = typer.Option(False, help="Reconvert even if output exists"),
):
    """
    Fetch laws from e-Gov, convert them and write Markdown.
    """
    from .core.laws import LawConverter, load_targets

    if (law_id is None) == (targets is None):
        raise typer.BadParameter("Specify exactly one of --law-id or --targets.")

    law_ids = [law_id] if law_id else load_targets(targets)
    count = LawConverter(out, force=force).run(law_ids)
    typer.echo(f"Converted {count}/{len(law_ids)} laws.")


if __name__ == "__main__":
    app()
