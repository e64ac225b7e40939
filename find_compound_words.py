#!/usr/bin/env python3
"""
find_compound_words.py

Loads a word list, builds a trie from it and reports every word that can be
made by concatenating two or more other words from the same list, longest
first.  Found words are written one per line to the output file.

Usage:
    python find_compound_words.py [INPUT] \
        [--output output_wordsforproblem.txt] \
        [--source file|wordfreq|wordnet] \
        [--limit N] [--show-parts] [--debug]

Options:
  INPUT                 Word file (default: wordsforproblem.txt).  Ignored
                        unless --source is 'file'.
  --output, -o          Where to write found words.  Overwritten if it exists.
  --source, -s          Where the words come from (default: file).
  --limit, -n           Only use the first N words of the source.
  --show-parts          Write each found word as "word: part + part + ...".
  --debug               Print DEBUG: lines to stderr.
"""

import argparse
import os
import sys
import time

from compound_words import find_compound_words, load_dictionary
from word_sources import SOURCES, debug, load_words, set_debug

DEFAULT_INPUT = "wordsforproblem.txt"
DEFAULT_OUTPUT = "output_wordsforproblem.txt"


def format_result(found, show_parts=False):
    if show_parts:
        return f"{found.word}: {' + '.join(found.parts)}"
    return found.word


def write_results(results, output_path, show_parts=False):
    """
    Write results one per line and return them as a list (in stream order).
    Raises RuntimeError if the output file can't be written.
    """
    found = []
    try:
        with open(output_path, "w", encoding="utf-8") as outf:
            for r in results:
                if len(found) == 0:
                    print(f"The longest output: {r.word}")
                elif len(found) == 1:
                    print(f"The second longest output: {r.word}")
                found.append(r)
                outf.write(format_result(r, show_parts) + "\n")
    except OSError as e:
        raise RuntimeError(f"output error: could not write '{output_path}': {e}")
    return found


def build_parser():
    parser = argparse.ArgumentParser(
        prog="find-compound-words",
        description="Find the words in a word list that are made of two or more other words from the list."
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT,
        help=f"Word file, one word per line (default: {DEFAULT_INPUT})."
    )
    parser.add_argument(
        "--output", "-o", default=DEFAULT_OUTPUT,
        help=f"Path to output text file (default: {DEFAULT_OUTPUT}). Will be overwritten if it exists."
    )
    parser.add_argument(
        "--source", "-s", choices=SOURCES, default="file",
        help="Word source to read (default: file)."
    )
    parser.add_argument(
        "--limit", "-n", type=int, default=None,
        help="(Optional) Only use the first N words of the source."
    )
    parser.add_argument(
        "--show-parts", action="store_true",
        help="Write the parts of each found word next to it."
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Print debug output to stderr."
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_debug(args.debug)

    if args.source == "file" and args.input == DEFAULT_INPUT:
        print(f"default name: {DEFAULT_INPUT}")
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative")

    input_path = os.path.abspath(os.path.expanduser(args.input))
    output_path = os.path.abspath(os.path.expanduser(args.output))
    debug(f"main: source='{args.source}' input='{input_path}' output='{output_path}'")

    try:
        word_list = load_words(args.source, input_path, args.limit)
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    root, dictionary, rejected = load_dictionary(word_list.words)
    for w in rejected:
        debug(f"main: trie rejected {w!r}")
    print(f"Input words: {len(word_list.words)}")
    if word_list.skipped:
        print(f"Skipped invalid words: {len(word_list.skipped)}")
    debug(f"main: {len(dictionary)} distinct words in {len(dictionary.lengths())} length groups")

    start = time.perf_counter()
    try:
        found = write_results(
            find_compound_words(root, dictionary), output_path, args.show_parts
        )
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start

    print(f"Total Found words: {len(found)}")
    print(f"Seconds to execute: {elapsed:.6f}")
    debug(f"main: wrote {len(found)} words to '{output_path}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
