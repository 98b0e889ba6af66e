import os
import sys
import threading


lock: threading.Lock = threading.Lock()
verbose: bool = False


def set_verbose(enabled: bool) -> None:
    global verbose

    with lock:
        verbose = enabled


def log(msg: str, *, newline: bool = True) -> None:
    # Diagnostics always go to stderr so stdout only ever holds rendered output.
    with lock:
        print(msg, file=sys.stderr, end=os.linesep if newline else "")


def debug(msg: str, *, newline: bool = True) -> None:
    if not verbose:
        return
    log(msg, newline=newline)
