"""Interactive prompts that guard against accidentally overwriting files."""

import glob as globmod
import os
import sys

from termutil.exceptions import OverwriteError


def prompt_yes_no(color="1;33"):
    """Ask "[Y / N]" until the reply starts with y or n.

    Returns True for yes. *color* is the ANSI SGR parameter string used for
    the prompt, e.g. "34" for blue or "1;34" for bold blue. End of input
    counts as no.
    """
    while True:
        sys.stdout.write(f" \033[{color}m[Y / N]\033[0m ")
        sys.stdout.flush()

        reply = sys.stdin.readline()
        if not reply:
            return False

        answer = reply.strip().lower()[:1]
        if answer == "y":
            return True
        if answer == "n":
            return False


def prevent_overwrite(filename, prompt):
    """Raise OverwriteError if *filename* exists, unless the user agrees to overwrite it.

    Does nothing if the file does not exist. With *prompt* False an existing
    file is always refused.
    """
    if not os.path.exists(filename):
        return

    if prompt:
        sys.stdout.write(f"\033[1;33m{filename}\033[22m already exists.  Overwrite it?\033[0m")
        if prompt_yes_no():
            sys.stdout.write(f"\033[36mOverwriting \033[1m{filename}\033[22m.\033[0m\n")
            return

    sys.stdout.write(f"\033[31mNot overwriting existing file \033[1m{filename}.\033[0m\n")
    raise OverwriteError(filename)


def prevent_mass_overwrite(pattern, prompt, delete=True):
    """Guard every file matching the glob *pattern* against being overwritten.

    If the user agrees and *delete* is True, the matching files are removed
    before returning. Raises OverwriteError otherwise. Does nothing when
    nothing matches.
    """
    existing = sorted(globmod.glob(pattern))
    if not existing:
        return

    if prompt:
        sys.stdout.write(
            f"\033[1;33m{len(existing)}\033[22m file(s) (such as \033[1m{existing[0]}\033[22m) "
            "already exist.  Delete them and proceed?\033[0m"
        )
        if prompt_yes_no():
            if delete:
                sys.stdout.write(
                    f"\033[33mDeleting \033[1m{len(existing)}\033[22m files"
                    "\033[0;36m and continuing.\033[0m\n"
                )
                for path in existing:
                    os.remove(path)
            else:
                sys.stdout.write("\033[36mContinuing.\033[0m\n")
            return

    sys.stdout.write(f"\033[31mNot overwriting \033[1m{len(existing)}\033[22m existing files.\033[0m\n")
    raise OverwriteError(existing[0])
