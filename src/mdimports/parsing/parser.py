# mdimports/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="mdimports",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "mdimports – expand @file, @url and !`command` directives in a markdown document\n"
            "Relative imports resolve against the directory of the file that contains them."
        ),
    )
    p.add_argument(
        "file",
        metavar="FILE",
        help="Document to expand. Use '-' to read stdin (imports then resolve from the CWD).",
    )

    g_out = p.add_argument_group("Output")
    g_budget = p.add_argument_group("Token budget")
    g_misc = p.add_argument_group("Miscellaneous")

    g_out.add_argument(
        "-o",
        "--output",
        metavar="OUT",
        dest="output",
        help="Write the expanded document to OUT instead of stdout.",
    )
    g_out.add_argument(
        "--list",
        action="store_true",
        dest="list_only",
        help=(
            "Print the directives found in FILE (kind, offset, payload) and exit. "
            "Nothing is read, fetched or executed."
        ),
    )
    g_out.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="After expanding, print a JSON report (files, URLs, commands, tokens) to stderr.",
    )

    g_budget.add_argument(
        "--force-context",
        action="store_true",
        dest="force_context",
        help=(
            "Do not fail when the expanded document exceeds the hard token limit. "
            "Same as MDIMPORTS_FORCE_CONTEXT=1."
        ),
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics as JSON lines (also MDIMPORTS_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        dest="quiet",
        help="Only report warnings and errors.",
    )
    return p
