"""Command-line interface for Rally Pairing.

Generates a schedule in one shot, or runs an interactive shell that keeps a
session open so more games can be added as the evening goes on.
"""

# Rally Pairing
# Copyright (C) 2026  Rally Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from rallypairing.analysis import analyze, format_round, format_schedule
from rallypairing.constants import DEFAULT_MODE, MODE_NAMES, PAIRING_MODES
from rallypairing.controllers.session import ScheduleSession, generate
from rallypairing.exceptions import RallyPairingException
from rallypairing.models.schedule import ScheduleConfig
from rallypairing.utils import setup_logger
from rallypairing.utils.validation import resolve_court_numbers

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Interactive command definitions with their options
COMMANDS = {
    "new": {
        "description": "Start a new session",
        "options": {
            "--mode": "Pairing mode (couples/round_robin)",
            "--participants": "Number of couples or players",
            "--courts": "Court list, e.g. '2,3,5-8'",
            "--court-count": "Use courts 1..N when no court list is given",
            "--seed": "Random seed for reproducibility",
        },
    },
    "generate": {
        "description": "Add games to the current session",
        "options": {"--games": "Number of games to add (default: 1)"},
    },
    "show": {
        "description": "Show one round, or the whole session",
        "options": {"<round>": "Round number"},
    },
    "stats": {"description": "Show bye spread and repeat pairings", "options": {}},
    "undo": {"description": "Remove the last generated round", "options": {}},
    "reset": {"description": "Clear all rounds but keep the setup", "options": {}},
    "export": {
        "description": "Write the session to a file",
        "options": {
            "--output": "Output file path",
            "--format": "Output format (text/json)",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}RALLY PAIRING{Colors.ENDC}"
        f"{Colors.OKBLUE}  fair court rotation{Colors.ENDC}\n\n"
        f"Type {Colors.BOLD}new --participants 14 --court-count 8{Colors.ENDC} to start\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:10}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:16}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        # Accept both "/command" and "command"
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/list"] = None
    return NestedCompleter.from_nested_dict(completions)


def _add_setup_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode", choices=list(PAIRING_MODES), default=DEFAULT_MODE, help="Pairing mode"
    )
    parser.add_argument(
        "--participants", type=int, default=14, help="Number of couples or players"
    )
    parser.add_argument("--courts", default="", help="Court list, e.g. '2,3,5-8'")
    parser.add_argument(
        "--court-count", type=int, default=8, help="Courts 1..N if no list is given"
    )
    parser.add_argument("--seed", type=int, help="Random seed")


def create_generate_parser() -> argparse.ArgumentParser:
    """Create parser for the one-shot generate command."""
    parser = argparse.ArgumentParser(
        prog="rally-pairing generate", description="Generate a full schedule"
    )
    _add_setup_arguments(parser)
    parser.add_argument("--games", type=int, default=1, help="Number of games")
    parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )
    parser.add_argument("--output", help="Output file path")
    return parser


def create_new_parser() -> argparse.ArgumentParser:
    """Create parser for the interactive new command."""
    parser = argparse.ArgumentParser(prog="new", description="Start a new session")
    _add_setup_arguments(parser)
    return parser


def create_add_games_parser() -> argparse.ArgumentParser:
    """Create parser for the interactive generate command."""
    parser = argparse.ArgumentParser(prog="generate", description="Add games")
    parser.add_argument("--games", type=int, default=1, help="Number of games")
    return parser


def create_export_parser() -> argparse.ArgumentParser:
    """Create parser for the interactive export command."""
    parser = argparse.ArgumentParser(prog="export", description="Export session")
    parser.add_argument("--output", required=True, help="Output file path")
    parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )
    return parser


def _write_output(content: str, output: Optional[str]) -> None:
    if output:
        output_path = Path(output)
        output_path.write_text(content + "\n", encoding="utf-8")
        print(f"{Colors.OKGREEN}Schedule saved to: {output_path}{Colors.ENDC}")
    else:
        print(content)


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the one-shot generate command."""
    court_numbers = resolve_court_numbers(args.courts, args.court_count)
    config = ScheduleConfig(seed=args.seed)
    result = generate(
        args.mode, args.participants, court_numbers, args.games, config=config
    )
    if not result.ok:
        print(f"{Colors.FAIL}Error: {result.error}{Colors.ENDC}", file=sys.stderr)
        return 1

    statistics = analyze(result.rounds, args.mode)
    if args.format == "json":
        payload = result.to_dict()
        payload["request"] = result.request.to_dict()
        payload["statistics"] = statistics.to_dict()
        content = json.dumps(payload, indent=2)
    else:
        content = format_schedule(
            result.rounds, args.participants, court_numbers, statistics
        )
    _write_output(content, args.output)
    return 0


class InteractiveShell:
    """State of one interactive session."""

    def __init__(self):
        self.session: Optional[ScheduleSession] = None

    def _require_session(self) -> ScheduleSession:
        if self.session is None:
            raise RallyPairingException(
                "No session yet. Start one with: new --participants N --court-count C"
            )
        return self.session

    def cmd_new(self, args_list: List[str]) -> None:
        args = create_new_parser().parse_args(args_list)
        court_numbers = resolve_court_numbers(args.courts, args.court_count)
        self.session = ScheduleSession(
            args.mode,
            args.participants,
            court_numbers,
            config=ScheduleConfig(seed=args.seed),
        )
        courts = ", ".join(str(c) for c in court_numbers)
        print(
            f"{Colors.OKGREEN}New {MODE_NAMES[args.mode]} session: "
            f"{args.participants} participants, courts {courts}{Colors.ENDC}"
        )

    def cmd_generate(self, args_list: List[str]) -> None:
        args = create_add_games_parser().parse_args(args_list)
        session = self._require_session()
        for round_data in session.generate_rounds(args.games):
            print("\n".join(format_round(round_data, session.court_numbers)))
            print()

    def cmd_show(self, args_list: List[str]) -> None:
        session = self._require_session()
        if args_list:
            round_data = session.get_round(int(args_list[0]))
            print("\n".join(format_round(round_data, session.court_numbers)))
        else:
            print(session.report())

    def cmd_stats(self, args_list: List[str]) -> None:
        stats = self._require_session().statistics()
        print(f"{Colors.BOLD}Rounds:{Colors.ENDC} {stats.rounds}")
        print(
            f"{Colors.BOLD}Byes per participant:{Colors.ENDC} "
            f"{stats.min_byes}-{stats.max_byes}"
        )
        print(f"{Colors.BOLD}Repeat pairings:{Colors.ENDC} {stats.repeat_pair_count}")

    def cmd_undo(self, args_list: List[str]) -> None:
        if self._require_session().undo_last_round():
            print(f"{Colors.OKGREEN}Last round removed{Colors.ENDC}")
        else:
            print(f"{Colors.WARNING}Nothing to undo{Colors.ENDC}")

    def cmd_reset(self, args_list: List[str]) -> None:
        self._require_session().reset()
        print(f"{Colors.OKGREEN}History cleared{Colors.ENDC}")

    def cmd_export(self, args_list: List[str]) -> None:
        args = create_export_parser().parse_args(args_list)
        session = self._require_session()
        if args.format == "json":
            content = json.dumps(session.to_dict(), indent=2)
        else:
            content = session.report()
        _write_output(content, args.output)

    def dispatch(self, user_input: str) -> bool:
        """Run one line of input. Returns False when the shell should exit."""
        parts = user_input.split()
        if not parts:
            return True

        # Strip leading "/" if present (support both "/command" and "command")
        command = parts[0].lstrip("/")
        args_list = parts[1:]

        if command in ("exit", "quit", "q"):
            return False
        if command in ("help", "?", "list"):
            if args_list:
                print_command_help(args_list[0].lstrip("/"))
            else:
                print_commands_list()
            return True

        handler = getattr(self, f"cmd_{command}", None)
        if command not in COMMANDS or handler is None:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
            print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
            return True

        try:
            handler(args_list)
        except SystemExit:
            # argparse calls sys.exit on error, catch it
            pass
        except (RallyPairingException, ValueError) as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            logger.debug("Command %s failed", command, exc_info=True)
        return True


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    prompt_session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    shell = InteractiveShell()

    while True:
        try:
            user_input = prompt_session.prompt("rally> ").strip()
            if not shell.dispatch(user_input):
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rally-pairing",
        description="Fair court rotation for couples and round-robin play",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  rally-pairing

  # Three games for 14 couples on courts 2, 3 and 5 to 8
  rally-pairing generate --participants 14 --courts 2,3,5-8 --games 3

  # Round robin, 10 players on 2 courts, as JSON
  rally-pairing generate --mode round_robin --participants 10 --court-count 2 --format json
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a full schedule",
        add_help=False,
        parents=[create_generate_parser()],
    )
    gen_parser.set_defaults(func=run_generate_command)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rally-pairing CLI."""
    argv = sys.argv[1:] if argv is None else argv

    # No arguments, or the interactive flag, start interactive mode
    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
