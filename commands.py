#!/usr/bin/env python3
# commands.py - builtins for kvshell

from store import Store

# -----------------------
# Builtin commands
# Each function takes the session store plus the arguments captured by the
# registry pattern, and prints its result.
# -----------------------
def cmd_get(store: Store, key: str):
    value = store.get(key)
    if value is None:
        print(f"no value set for key {key}")
    else:
        print(f"{key} = {value}")

def cmd_set(store: Store, key: str, value: str):
    # silent overwrite, no confirmation line
    store.set(key, value)

def cmd_del(store: Store, key: str):
    if store.delete(key):
        print(f"removed {key}")
    else:
        print(f"{key} was not set so not removed")

def cmd_vars(store: Store):
    entries = store.list()
    if not entries:
        print("(none)")
        return
    for k, v in entries:
        print(f"{k} = {v}")
