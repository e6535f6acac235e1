"""
module termdialog.entrypoint

Contains the definition of the main() method that is invoked when termdialog
is run directly as a module or through its console script. Each sub-command
runs a single dialog and prints the answer to stdout so that shell scripts
can capture it
"""

from argparse import ArgumentParser, BooleanOptionalAction, Namespace
import logging
import sys
from typing import Any, Callable, Dict, List

from . import constants
from .config import DialogConfig
from .paths import PathCompleter
from .prompts import Confirmation, Editor, FileBrowser, LineInput, PasswordInput
from .termdialogexception import TermDialogException
from .terminal.abstract import Terminal
from .terminal.exceptions import UserAbort
from .theme import Theme

logger = logging.getLogger(__name__)

EXIT_FAILURE: int = 1
EXIT_SUCCESS: int = 0
EXIT_USER_ABORT: int = 130

_value_types: Dict[str, Callable[[str], Any]] = {
    "float": float,
    "int": int,
    "str": str,
}

_arg_parser: ArgumentParser = ArgumentParser(
    prog=constants.APPLICATION_NAME,
    description="Interactive terminal dialogs for shell scripts",
)
_arg_parser.add_argument(
    "--config",
    type=str,
    default=None,
    help="Path of the configuration file to use instead of the default one",
)
_arg_parser.add_argument(
    "--verbose",
    action="store_true",
    help="Write debug logging to stderr",
)
_arg_parser.add_argument(
    "--version",
    action="version",
    version=f"%(prog)s {constants.APPLICATION_VERSION}",
)

_sub_parsers = _arg_parser.add_subparsers(dest="command")
_sub_parsers.required = True

_confirm_parser = _sub_parsers.add_parser(
    "confirm",
    help="Asks a yes/no question. Exits with 0 for yes and 1 for no",
)
_confirm_parser.add_argument("text", type=str)
_confirm_parser.add_argument(
    "--default", type=str, choices=["no", "yes"], default="yes"
)
_confirm_parser.add_argument(
    "--hide-default", action="store_true", help="Do not capitalize the default"
)

_input_parser = _sub_parsers.add_parser(
    "input",
    help="Reads a line of text and prints it",
)
_input_parser.add_argument("prompt", type=str)
_input_parser.add_argument("--default", type=str, default=None)
_input_parser.add_argument(
    "--type", type=str, choices=list(_value_types), default="str"
)
_input_parser.add_argument("--allow-empty", action="store_true")
_input_parser.add_argument(
    "--complete-paths",
    action="store_true",
    help="Offer filesystem path completions while typing",
)

_password_parser = _sub_parsers.add_parser(
    "password",
    help="Reads a secret without echoing it and prints it",
)
_password_parser.add_argument("prompt", type=str)
_password_parser.add_argument(
    "--confirm",
    type=str,
    default=None,
    metavar="PROMPT",
    help="Ask for the secret a second time using this prompt",
)
_password_parser.add_argument(
    "--mismatch-error", type=str, default="Passwords do not match"
)
_password_parser.add_argument("--allow-empty", action="store_true")

_file_parser = _sub_parsers.add_parser(
    "file",
    help="Lets the user browse for a file or directory and prints its path",
)
_file_parser.add_argument("prompt", type=str)
_file_parser.add_argument("--start", type=str, default=None)
_file_parser.add_argument("--dirs-only", action="store_true")
_file_parser.add_argument("--hidden", action=BooleanOptionalAction, default=None)

_edit_parser = _sub_parsers.add_parser(
    "edit",
    help="Opens the user's editor and prints the saved text",
)
_edit_parser.add_argument("--text", type=str, default="")
_edit_parser.add_argument("--extension", type=str, default=".txt")
_edit_parser.add_argument("--executable", type=str, default=None)
_edit_parser.add_argument(
    "--allow-unsaved",
    action="store_true",
    help="Print the text even if the editor exits without saving",
)


def _load_config(config_path: str | None) -> DialogConfig:
    config: DialogConfig | None = DialogConfig.from_file(
        config_path if config_path is not None else DialogConfig.default_path()
    )
    if config is None:
        logger.warning("Falling back to the default configuration")
        return DialogConfig.make_default()

    return config


def _run_command(args: Namespace, config: DialogConfig, terminal: Terminal) -> int:
    theme: Theme = config.make_theme()

    match args.command:
        case "confirm":
            confirmed: bool = (
                Confirmation(theme)
                .with_text(args.text)
                .default(args.default == "yes")
                .show_default(not args.hide_default)
                .interact_on(terminal)
            )
            return EXIT_SUCCESS if confirmed else EXIT_FAILURE
        case "input":
            line_input: LineInput = (
                LineInput(theme, value_type=_value_types[args.type])
                .with_prompt(args.prompt)
                .allow_empty(args.allow_empty)
            )
            if args.default is not None:
                line_input.default(args.default)
            if args.complete_paths:
                line_input.completer(PathCompleter())

            print(line_input.interact_on(terminal))
        case "password":
            password_input: PasswordInput = (
                PasswordInput(theme)
                .with_prompt(args.prompt)
                .allow_empty_password(args.allow_empty)
            )
            if args.confirm is not None:
                password_input.with_confirmation(args.confirm, args.mismatch_error)

            print(password_input.interact_on(terminal))
        case "file":
            file_browser: FileBrowser = (
                FileBrowser(theme)
                .with_prompt(args.prompt)
                .directories_only(args.dirs_only)
                .show_hidden(
                    args.hidden if args.hidden is not None else config.show_hidden
                )
            )
            if args.start is not None:
                file_browser.default(args.start)

            print(file_browser.interact_on(terminal))
        case "edit":
            editor: Editor = (
                Editor()
                .extension(args.extension)
                .require_save(not args.allow_unsaved)
            )
            if args.executable is not None:
                editor.with_executable(args.executable)

            edited_text: str | None = editor.edit(args.text)
            if edited_text is None:
                return EXIT_FAILURE

            print(edited_text)
        case _:
            raise NotImplementedError(f"Command '{args.command}' not implemented")

    return EXIT_SUCCESS


def main(argv: List[str] | None = None, terminal: Terminal | None = None) -> int:
    """
    Parses the command line and runs the requested dialog

    Args:
        argv (List[str] | None): The arguments to parse. Defaults to sys.argv
        terminal (Terminal | None): The terminal to run the dialog on. Defaults to
            the terminal described by the configuration

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    args: Namespace = _arg_parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    config: DialogConfig = _load_config(args.config)

    try:
        return _run_command(
            args, config, terminal if terminal is not None else config.make_terminal()
        )
    except UserAbort:
        return EXIT_USER_ABORT
    except TermDialogException as exc:
        print(f"{constants.APPLICATION_NAME}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
