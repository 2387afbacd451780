# dispatcher.py - route one input line to one command
import logging

from registry import Registry
from store import Store

log = logging.getLogger("kvshell.dispatch")


def process(registry: Registry, store: Store, line: str) -> bool:
    """
    Run a single input line against the store.
    - blank / whitespace-only lines are ignored (no output)
    - the raw line is echoed as `cmd <line>` before anything else
    - at most one handler runs; no match prints `unrecognized command <line>`
    Returns True when a command handler ran.
    """
    if not line or not line.strip():
        return False
    print(f"cmd {line}")

    found = registry.lookup(line)
    if found is None:
        log.debug("no command matched %r", line)
        print(f"unrecognized command {line}")
        return False

    log.debug("matched %s with args %r", found.spec.name, found.args)
    found.spec.handler(store, *found.args)
    return True
