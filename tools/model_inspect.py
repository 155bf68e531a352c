import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.parser import load_model
from simulator.transition import find_transition

console = Console()


def consumed_columns(model):
    """Consumed symbols in first-seen order, wildcard last."""
    columns = []
    has_wildcard = False
    for state in model.states:
        for t in state.transitions:
            if t.consumed == model.wildcard:
                has_wildcard = True
            elif t.consumed not in columns:
                columns.append(t.consumed)
    if has_wildcard:
        columns.append(model.wildcard)
    return columns


def transition_table(model):
    """Rows of [state label, action per column]; first match wins like the lookup does."""
    columns = consumed_columns(model)
    rows = []
    for state in model.states:
        label = state.name
        if state.is_start:
            label = f"->{label}"
        if state.is_final:
            label = f"{label}*"
        row = [label]
        for symbol in columns:
            transition = find_transition(state, symbol, model.wildcard)
            if transition is None:
                row.append("HALT" if state.is_final else "-")
            else:
                row.append(f"{transition.produced}{transition.move.value}{transition.next_state}")
        rows.append(row)
    return columns, rows


def render_latex(columns, rows):
    lines = [r"\begin{array}{c|" + "c" * len(columns) + "}"]
    lines.append("State/Symbol & " + " & ".join([f"\\text{{{c}}}" for c in columns]) + r" \\ \hline")
    for row in rows:
        lines.append(" & ".join(row) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def pretty_print_model(model, latex=False):
    """Pretty print the model as a state x consumed-symbol table."""
    columns, rows = transition_table(model)

    # === Terminal Human-Readable Table ===
    table = Table(title=escape(f"Transition Table: {model.name or 'model'}"))
    table.add_column("State")
    for symbol in columns:
        table.add_column(escape(symbol), justify="center")
    for row in rows:
        table.add_row(*[escape(cell) for cell in row])
    console.print(table)
    console.print(escape(f"blank={model.blank!r} wildcard={model.wildcard!r} start={model.start_state} "
                         f"final={sorted(model.final_states)}"))

    # === LaTeX Table Output ===
    if latex:
        console.print("\n=== LaTeX Table ===")
        console.print(render_latex(columns, rows), markup=False, highlight=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Model Inspector")
    parser.add_argument("--file", "-f", required=True, help="Path to the model file")
    parser.add_argument("--ext", "-e", help="Model format, inferred from the file name if omitted")
    parser.add_argument("--latex", action="store_true", help="Also print the table as a LaTeX array")
    args = parser.parse_args(argv)

    model = load_model(args.file, args.ext)
    pretty_print_model(model, latex=args.latex)


if __name__ == "__main__":
    main()
