"""Command-line entry point for git-prompt-status"""

import sys

from rich.console import Console
from rich.markup import escape

from git_prompt_status.cli.args import parse_args
from git_prompt_status.config import Config
from git_prompt_status.core import StatusAggregator
from git_prompt_status.exceptions import GitPromptStatusError
from git_prompt_status.exit_codes import ExitCode, exit_code_for
from git_prompt_status.logging_config import setup_logging
from git_prompt_status.status_source import load_status_lines

console = Console(stderr=True)


def _report_error(error: GitPromptStatusError, quiet: bool) -> int:
    if not quiet:
        console.print(f"[red]Error: {escape(str(error))}[/red]")
    return exit_code_for(error.kind)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            start_dir=parsed_args.directory,
            input_mode=parsed_args.input,
            git_timeout=parsed_args.timeout,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        if not parsed_args.quiet:
            console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        return ExitCode.INVALID_ARGS

    if parsed_args.debug:
        console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {escape(str(value))}")

    try:
        lines = load_status_lines(config)
        result = StatusAggregator(config.start_dir, config).try_status_line(lines)
        if not result.ok:
            return _report_error(result.error, parsed_args.quiet)
    except GitPromptStatusError as e:
        return _report_error(e, parsed_args.quiet)
    except KeyboardInterrupt:
        return ExitCode.ERROR
    except Exception as e:
        if not parsed_args.quiet:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return ExitCode.ERROR

    sys.stdout.write(result.line + "\n")
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
