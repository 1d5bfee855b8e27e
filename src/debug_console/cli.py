import argparse
import curses

from debug_console import __version__
from debug_console.app import run_console
from debug_console.config import load_config, validate_prompt
from debug_console.evaluators import EVALUATORS


def main():
    p = argparse.ArgumentParser(description="Curses line-editing debug console")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.debug-console/configs/, ./configs/, or use full path)")
    p.add_argument("-p", "--prompt", default=None,
                   help="Prompt string - overrides config")
    p.add_argument("-e", "--evaluator", choices=sorted(EVALUATORS), default=None,
                   help="Evaluator answering each line - overrides config")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to console_*.log files in current directory")
    args = p.parse_args()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.prompt is not None:
        try:
            config.editor.prompt = validate_prompt(args.prompt)
        except ValueError as e:
            p.error(str(e))
    if args.evaluator is not None:
        config.evaluator.name = args.evaluator
    if config.evaluator.name not in EVALUATORS:
        p.error(f"unknown evaluator '{config.evaluator.name}' in config")

    curses.wrapper(run_console, config, debug=args.debug)


if __name__ == "__main__":
    main()
