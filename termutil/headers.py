"""Script header comments as help text.

A script's leading ``#`` comment block doubles as its ``--help`` text:

    #!/usr/bin/env python3
    # Resample audio files
    #
    # Usage: $0 [options] input...
"""

import argparse
import os
import re
import sys

DEFAULT_COMMENT_RE = re.compile(r"^#( |$)")


def _script_path():
    main = sys.modules.get("__main__")
    return getattr(main, "__file__", None) or sys.argv[0]


def read_header_comment(filename=None, comment_regexp=DEFAULT_COMMENT_RE):
    """Return the leading comment lines of *filename*, markers removed.

    A shebang line is skipped. Reading stops at the first line that doesn't
    match *comment_regexp*. Line endings are kept.
    """
    if isinstance(comment_regexp, str):
        comment_regexp = re.compile(comment_regexp)
    with open(filename or _script_path(), encoding="utf-8") as f:
        lines = f.readlines()
    if lines and lines[0].startswith("#!"):
        lines = lines[1:]
    header = []
    for line in lines:
        if not comment_regexp.search(line):
            break
        header.append(comment_regexp.sub("", line, count=1))
    return header


def highlight_header_comment(filename=None):
    """Header comment lines with the first line emphasized as a title.

    The title is bolded and underlined with "=" and ``$0`` is replaced with
    the script's file name.
    """
    filename = filename or _script_path()
    lines = [line.rstrip("\n") for line in read_header_comment(filename)]
    if not lines:
        return []
    name = os.path.basename(filename)
    lines = [line.replace("$0", name) for line in lines]
    title = lines[0].strip()
    return [f"\033[1m{title}\033[0m", "=" * len(title), *lines[1:]]


def opt_header_help(parser, filename=None):
    """Use the script's header comment as an argparse parser's help text."""
    lines = highlight_header_comment(filename)
    if not lines:
        return parser
    parser.description = "\n".join(lines)
    parser.formatter_class = argparse.RawDescriptionHelpFormatter
    return parser
