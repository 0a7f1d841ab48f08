"""
Command-line entry point: pick a pair of elements from a YAML model.
"""

import sys
from typing import List, Optional

from .config.picker_config import get_picker_config
from .errors import ModelFileError
from .schemas.pick_result import PairResult, PickOutcome
from .services.pair_picker import PairPicker
from .tools.host.console_host import ConsoleHost
from .tools.host.model_loader import load_document_model
from .utils.logging.logging_config import setup_logging
from .utils.ui import ICONS, THEME, console

EXIT_CODES = {
    PickOutcome.SUCCESS: 0,
    PickOutcome.INSUFFICIENT_ELEMENTS: 1,
    PickOutcome.CANCELLED: 2,
    PickOutcome.INTERNAL_INCONSISTENCY: 3,
}

EXIT_MODEL_ERROR = 4


def print_pick_result(result: PairResult, category: str) -> None:
    """Render a pick outcome to the console."""
    if result.succeeded:
        console.print(
            f"[{THEME['success']}]{ICONS['success']} Picked {category} pair "
            f"({result.source.value})[/]"
        )
        for element in result.elements:
            console.print(
                f"  [{THEME['muted']}]{ICONS['bullet']}[/] "
                f"[{THEME['element']}]{element.display_name()}[/]"
            )
        return

    if result.outcome == PickOutcome.INSUFFICIENT_ELEMENTS:
        console.print(
            f"[{THEME['warning']}]{ICONS['warning']} Fewer than two {category} "
            f"elements in the model[/]"
        )
    elif result.outcome == PickOutcome.CANCELLED:
        console.print(f"[{THEME['muted']}]{ICONS['cancelled']} Pick cancelled[/]")
    else:
        console.print(f"[{THEME['error']}]{ICONS['error']} {result.error}[/]")


def run(model_path: str, category: str) -> int:
    """
    Load a model, run one pick against the terminal host and report it.

    Returns:
        Process exit code
    """
    try:
        model = load_document_model(model_path)
    except ModelFileError as e:
        console.print(f"[{THEME['error']}]{ICONS['error']} {e}[/]")
        return EXIT_MODEL_ERROR

    host = ConsoleHost(console, elements=model.to_elements(), selection=model.selection)
    picker = PairPicker(host, category, config=get_picker_config())
    result = picker.pick()
    print_pick_result(result, category)
    return EXIT_CODES[result.outcome]


def cli(argv: Optional[List[str]] = None) -> int:
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Pick a pair of elements of one category from a document model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("model", help="YAML document model file")
    parser.add_argument(
        "-c",
        "--category",
        required=True,
        help="Element category to pick (Wall, Door, Pipe, ...)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logs about pre-selection handling",
    )

    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose or get_picker_config().verbose)

    try:
        return run(args.model, args.category)
    except KeyboardInterrupt:
        console.print(f"\n  [{THEME['muted']}]Goodbye[/]")
        return EXIT_CODES[PickOutcome.CANCELLED]


if __name__ == "__main__":
    sys.exit(cli())
