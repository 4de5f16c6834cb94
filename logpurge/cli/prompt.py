"""Interactive confirmation."""

import sys


def confirm(prompt: str) -> bool:
    """Ask a yes/no question on the terminal.

    Only 'y' or 'yes' (any case) means yes. End of input means no.
    """
    sys.stderr.write(f"\n{prompt}")
    sys.stderr.flush()
    try:
        answer = input()
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
