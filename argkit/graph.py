from typing import Any

from . import const
from .args import Args


def build(args: Args, name: str = const.ARGV0) -> Any:
    """
    Builds a graph of a classification.

    Raw tokens are laid out left to right. Options are grey ellipses,
    live positionals blue boxes and claimed candidates faded boxes. Each
    candidate scanned right after an option gets an edge from it, drawn in
    blue once the option is marked as a parameter.
    """
    from graphviz import Digraph  # type: ignore

    g = Digraph(name, filename=f"{name}.gv")

    g.attr("graph", rankdir="LR", label=name, labelloc="t")
    g.attr("node", shape="box")

    bySource = {c.source: c for c in args.candidates()}

    for i, tok in enumerate(args.raw()):
        node = f"t{i}"
        candidate = bySource.get(i)

        if candidate is None:
            g.node(node, tok, shape="ellipse", style="filled", fillcolor="lightgrey")
        elif candidate.live:
            g.node(node, tok, style="filled", fillcolor="lightblue")
        else:
            g.node(
                node,
                tok,
                style="filled",
                fontcolor="#999999",
                fillcolor="#eeeeee",
            )

        if i > 0:
            g.edge(f"t{i - 1}", node, style="invis")

        if candidate is not None and candidate.owner is not None:
            g.edge(
                f"t{i - 1}",
                node,
                label=candidate.owner,
                color=("blue" if args.isMarked(candidate.owner) else "black"),
            )

    return g


def render(args: Args, path: str, format: str = "svg") -> str:
    """Renders the graph of a classification, returns the output path."""
    g = build(args)
    return g.render(filename=path, format=format, cleanup=True)
