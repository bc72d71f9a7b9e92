import time
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.traceback import install

import phuff

console = Console()
install(show_locals=True)

app = typer.Typer()


@app.command()
def run(
    file: Path | None = typer.Argument(
        None,
        help="UTF-8 text file to analyze",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    text: str | None = typer.Option(None, "--text", help="Analyze this text instead of a file"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
    strategy: str = typer.Option("scan", "-s", "--strategy", help="Minimum selection: scan or heap"),
    show_tree: bool = typer.Option(False, "-t", "--show-tree", help="Print the tree"),
) -> None:
    try:
        if file is not None and text is not None:
            raise ValueError("Give either a file or --text, not both")
        if text is None:
            if file is None:
                raise ValueError("Either a file or --text is required")
            text = file.read_text(encoding="utf-8")

        st = time.perf_counter()
        table = phuff.FrequencyTable.build(text)
        tree = phuff.HuffmanTree(phuff.TreeBuilder(is_logging=logging, strategy=strategy).build(table))

        if logging:
            dt = time.perf_counter() - st
            console.print(f"Build time: {dt:.3f} sec")

        depths = tree.leaf_depths()
        summary = Table(title="Character weights")
        summary.add_column("Char")
        summary.add_column("Weight", justify="right")
        summary.add_column("Depth", justify="right")
        for char, weight in table.most_common():
            summary.add_row(Text(repr(char)), str(weight), str(depths[char]))
        console.print(summary)

        console.print(
            f"Nodes: {tree.node_count} (internal: {tree.internal_count}), "
            f"root weight: {tree.root.weight}, weighted path length: {tree.weighted_path_length()}"
        )

        if show_tree:
            tree.print()
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(run)
