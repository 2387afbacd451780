#!/usr/bin/env python3
# Repl.py - kvshell line loop: interactive prompt, piped stdin and script mode
import argparse
import logging
import os
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.completion import Completer, Completion

from dispatcher import process
from registry import Registry, build_registry
from store import Store

PROMPT = "> "
DEFAULT_HISTORY_FILE = ".kvshell_history"

# commands whose first argument is a key, offered from the store
_KEY_COMMANDS = {"get", "del", "set"}

log = logging.getLogger("kvshell")


def logging_setup(verbose: bool = False) -> logging.Logger:
    # stderr only: stdout carries the prompt and command output
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    log.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    log.addHandler(handler)
    return log


class KVCompleter(Completer):
    def __init__(self, registry: Registry, store: Store):
        self.registry = registry
        self.store = store

    def get_completions(self, document, complete_event):
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        word_len = len(word_before_cursor)
        words = document.text_before_cursor.split()

        # 1. first word: command names
        if not document.text_before_cursor.strip() or document.text_before_cursor.strip() == word_before_cursor:
            for name in self.registry.names():
                if name.startswith(word_before_cursor):
                    yield Completion(name, -word_len)
            return

        # 2. second word of get/del/set: keys already in the store
        in_second_word = len(words) == 1 or (len(words) == 2 and word_before_cursor)
        if words[0] in _KEY_COMMANDS and in_second_word:
            for key, _ in self.store.list():
                if key.startswith(word_before_cursor):
                    yield Completion(key, -word_len)


def build_parser():
    parser = argparse.ArgumentParser(prog="kvshell",
                                     description="Interactive in-memory key/value shell.")
    parser.add_argument("script", nargs="?", default=None,
                        help="Feed the lines of this file to the shell instead of prompting")
    parser.add_argument("--history", default=DEFAULT_HISTORY_FILE,
                        help=f"Prompt history file (default: {DEFAULT_HISTORY_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log dispatch decisions to stderr")
    return parser

# -----------------------
# Script mode runner
# -----------------------
def run_script(path: str, registry: Registry, store: Store) -> int:
    if not os.path.exists(path):
        print(f"Script not found: {path}", file=sys.stderr)
        return 1
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            process(registry, store, line.rstrip("\r\n"))
    return 0

# -----------------------
# Main loops
# -----------------------
def run_piped(registry: Registry, store: Store, stdin=None, stdout=None) -> int:
    """Plain stream loop for non-terminal stdin. Ends at end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        process(registry, store, line.rstrip("\r\n"))
    return 0


def run_interactive(registry: Registry, store: Store, history_path: str) -> int:
    session = PromptSession(history=FileHistory(history_path),
                            completer=KVCompleter(registry, store))
    while True:
        try:
            line = session.prompt(PROMPT)
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break
        process(registry, store, line)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging_setup(args.verbose)

    registry = build_registry()
    store = Store()
    log.debug("session start, commands: %s", ", ".join(registry.names()))

    try:
        if args.script:
            return run_script(args.script, registry, store)
        if sys.stdin.isatty():
            return run_interactive(registry, store, args.history)
        return run_piped(registry, store)
    except (OSError, UnicodeDecodeError) as e:
        # undecodable input is treated like any other read failure
        log.debug("fatal I/O failure", exc_info=True)
        print(f"I/O error: {e}", file=sys.stderr)
        return 1
    finally:
        log.debug("session end, %d keys discarded", len(store))


if __name__ == "__main__":
    raise SystemExit(main())
