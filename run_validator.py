#!/usr/bin/env python3
"""
run_validator.py

Drives the shell (Repl.py) in script mode and checks expected outputs.
Run from the repository root:

    python run_validator.py

Results go to shell_test_results.txt and are printed to the console.
Exit code is 1 when any scenario fails.
"""
import os
import subprocess
import sys
import tempfile

SHELL_CMD = [sys.executable, "Repl.py"]

RESULT_FILE = "shell_test_results.txt"

# (name, script lines, expected stdout lines)
SCENARIOS = [
    ("set/get",
     ["set k=v", "get k"],
     ["cmd set k=v", "cmd get k", "k = v"]),
    ("get unset key",
     ["get nope"],
     ["cmd get nope", "no value set for key nope"]),
    ("del after set",
     ["set a=1", "del a", "get a"],
     ["cmd set a=1", "cmd del a", "removed a", "cmd get a", "no value set for key a"]),
    ("del unset key",
     ["del ghost"],
     ["cmd del ghost", "ghost was not set so not removed"]),
    ("vars empty",
     ["vars"],
     ["cmd vars", "(none)"]),
    ("vars sorted",
     ["set b=2", "set a=1", "vars"],
     ["cmd set b=2", "cmd set a=1", "cmd vars", "a = 1", "b = 2"]),
    ("malformed get",
     ["get ABC"],
     ["cmd get ABC", "unrecognized command get ABC"]),
    ("blank and comment-like lines",
     ["", "   ", "# note", "vars"],
     ["cmd # note", "unrecognized command # note", "cmd vars", "(none)"]),
    ("end to end",
     ["set x = 5", "get x", "del x", "get x", "vars"],
     ["cmd set x = 5", "cmd get x", "x = 5", "cmd del x", "removed x",
      "cmd get x", "no value set for key x", "cmd vars", "(none)"]),
]


def run_script(lines, timeout=20):
    """Write a script (list of lines), run the shell, return (stdout, stderr)."""
    fd, path = tempfile.mkstemp(prefix="validator_", suffix=".kvsh", text=True)
    os.close(fd)
    with open(path, "w", encoding="utf-8") as f:
        for L in lines:
            f.write(L + "\n")
    try:
        proc = subprocess.run(SHELL_CMD + [path],
                              capture_output=True, text=True, timeout=timeout)
        return proc.stdout or "", proc.stderr or ""
    except subprocess.TimeoutExpired:
        return "<TIMEOUT>", ""
    finally:
        os.remove(path)


def write_result(fobj, name, ok, details):
    fobj.write(f"TEST: {name}\n")
    fobj.write(f"RESULT: {'PASS' if ok else 'FAIL'}\n")
    fobj.write("OUTPUT:\n")
    fobj.write(details + "\n")
    fobj.write("-" * 60 + "\n")
    fobj.flush()
    print(f"{name}: {'PASS' if ok else 'FAIL'}")


def main():
    failures = 0
    with open(RESULT_FILE, "w", encoding="utf-8") as f:
        f.write("Shell validator run\n")
        f.write("Command: " + " ".join(SHELL_CMD) + "\n")
        f.write("=" * 60 + "\n\n")

        for name, script, expected in SCENARIOS:
            out, err = run_script(script)
            ok = out.splitlines() == expected and not err
            if not ok:
                failures += 1
            write_result(f, name, ok, (out + ("\n" + err if err else "")).strip())

        # missing script file
        proc = subprocess.run(SHELL_CMD + ["__no_such_script__.kvsh"],
                              capture_output=True, text=True)
        ok = proc.returncode == 1 and "Script not found" in proc.stderr
        if not ok:
            failures += 1
        write_result(f, "missing script", ok, proc.stderr.strip())

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
