"""Command line entry-point: ``simple-interaction demo`` / ``simple-interaction ask FILE``."""

import argparse
import sys
from typing import Optional

import yaml

from simple_interaction.configuration.questionnaire import (
    QuestionnaireError,
    load_questionnaire,
    run_questionnaire,
)
from simple_interaction.configuration.settings import configure_logging, load_settings
from simple_interaction.demo import run_demo
from simple_interaction.interaction.errors import InteractionError
from simple_interaction.logging import get_logger


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="simple-interaction",
        description="Ask yes/no, numbered-choice and free-text questions on the terminal.",
    )
    parser.add_argument(
        "--config",
        help="Path to a settings YAML file (default: $SIMPLE_INTERACTION_CONFIG or data/config/settings.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Run the interactive dinner demo.")
    ask_parser = subparsers.add_parser("ask", help="Run a questionnaire and print the answers as YAML.")
    ask_parser.add_argument("questionnaire", help="Path to the questionnaire YAML file.")
    return parser.parse_args(argv)


def run_cli(argv: Optional[list[str]] = None, input_stream=None, output_stream=None) -> int:
    args = _parse_args(argv)
    input_stream = input_stream if input_stream is not None else sys.stdin
    output_stream = output_stream if output_stream is not None else sys.stdout

    try:
        settings = load_settings(args.config)
        configure_logging(settings)

        if args.command == "demo":
            summary = run_demo(input_stream, output_stream, max_attempts=settings.default_max_attempts)
            print(summary, file=output_stream)
        else:
            questions = load_questionnaire(args.questionnaire)
            get_logger().debug("Loaded questionnaire", path=args.questionnaire, questions=len(questions))
            answers = run_questionnaire(questions, settings, input_stream, output_stream)
            output_stream.write(yaml.safe_dump(answers, sort_keys=False, allow_unicode=True))
    except (InteractionError, QuestionnaireError, OSError, ValueError) as e:
        print(f"Error running {args.command}:\n{e}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - manual execution hook
    main()
