#!/usr/bin/env python3
"""
PhraseKit CLI
=============
Command-line interface for passphrase generation.

Usage:
    phrasekit generate -n 3 -w 6 --separator - --entropy
    phrasekit sample -n 8
    phrasekit entropy -w 5 --capitalize-words 0.5
    phrasekit wordlists
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from phrasekit import __version__
from phrasekit.config import get_config
from phrasekit.errors import PhraseKitError
from phrasekit.settings import get_setting
from phrasekit.words import WordSource, builtin_wordlists

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def result(self, text: str):
        """Print a generated value. Shown even in quiet mode."""
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, emoji=False, soft_wrap=True)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(Text(str(c)) for c in row))
        self.console.print(table)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def parse_probability(value: str) -> float:
    """Accept a ratio (0.25) or a percentage (25%)."""
    text = value.strip()
    try:
        if text.endswith('%'):
            number = float(text[:-1]) / 100.0
        else:
            number = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid probability: {value!r}")
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"probability must be in [0, 1], got {value!r}")
    return number


def config_from_args(args):
    """Build a BasicConfig from settings plus command-line overrides."""
    return get_config(
        words=getattr(args, 'words', None),
        separator=getattr(args, 'separator', None),
        capitalize_first=getattr(args, 'capitalize_first', None),
        capitalize_words=getattr(args, 'capitalize_words', None),
        wordlist=getattr(args, 'wordlist', None),
        diced=True if getattr(args, 'diced', False) else None,
        builtin=getattr(args, 'builtin', None),
    )


def add_scheme_options(p):
    p.add_argument('-w', '--words', type=int, help='Words per passphrase')
    p.add_argument('-s', '--separator', help='Separator between words')
    p.add_argument('--capitalize-first', type=parse_probability, metavar='P',
                   help='Chance to capitalize the first letter of each word (0-1 or %%)')
    p.add_argument('--capitalize-words', type=parse_probability, metavar='P',
                   help='Chance to uppercase each whole word (0-1 or %%)')
    add_wordlist_options(p)


def add_wordlist_options(p):
    p.add_argument('--wordlist', help='Wordlist file, one word per line')
    p.add_argument('--diced', action='store_true', help='Wordlist lines are prefixed with dice numbers')
    p.add_argument('--builtin', '-b', choices=builtin_wordlists(), help='Built-in wordlist to use')


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate passphrases."""
    config = config_from_args(args)
    scheme = config.to_scheme()
    count = args.count if args.count is not None else get_setting('cli.count', 1)

    if count < 1:
        out.error("count must be at least 1")
        return 1

    phrases = [scheme.generate() for _ in range(count)]
    entropy = scheme.entropy()

    if args.json:
        data = {
            'passphrases': phrases,
            'words': scheme.word_count,
            'entropy_bits': entropy.bits,
        }
        out.result(json.dumps(data, indent=2))
        return 0

    for phrase in phrases:
        out.result(phrase)

    if args.entropy:
        out.print(f"\nEntropy: {entropy}")

    return 0


def cmd_sample(args, out: Output):
    """Print randomly sampled words."""
    config = config_from_args(args)
    source = config.load_word_source()
    count = args.count if args.count is not None else get_setting('cli.sample', 8)

    if count < 1:
        out.error("count must be at least 1")
        return 1

    sampler = source.sampler()
    for i in range(1, count + 1):
        word = next(sampler)
        if args.numbered:
            out.result(f"{i}. {word}")
        else:
            out.result(word)

    return 0


def cmd_entropy(args, out: Output):
    """Show the entropy of a configuration without generating."""
    config = config_from_args(args)
    source = config.load_word_source()
    scheme = config.to_scheme(source=source)
    entropy = scheme.entropy()

    if args.json:
        data = {
            'words': scheme.word_count,
            'wordlist_size': len(source),
            'word_entropy_bits': source.entropy().bits,
            'entropy_bits': entropy.bits,
        }
        out.result(json.dumps(data, indent=2))
        return 0

    rows = [
        ['Wordlist', str(config.wordlist) if config.wordlist else config.builtin],
        ['Wordlist size', len(source)],
        ['Bits per word', f"{source.entropy().bits:.3f}"],
        ['Words', scheme.word_count],
        ['Separator', repr(config.separator)],
        ['Capitalize first', str(config.capitalize_first)],
        ['Capitalize words', str(config.capitalize_words)],
        ['Total entropy', str(entropy)],
    ]
    out.table(['Setting', 'Value'], rows, title='Passphrase Entropy')
    if out.quiet:
        out.result(f"{entropy.bits:.3f}")

    return 0


def cmd_wordlists(args, out: Output):
    """List built-in wordlists."""
    rows = []
    for name in builtin_wordlists():
        source = WordSource.builtin(name)
        rows.append([name, len(source), f"{source.entropy().bits:.3f}"])

    out.table(['Name', 'Words', 'Bits/word'], rows, title='Built-in Wordlists')
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='phrasekit',
        description='PhraseKit - Secure Passphrase Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate -n 5 -w 6 --separator - --entropy
  %(prog)s generate --capitalize-words 25%% --wordlist words.txt
  %(prog)s sample -n 8 --numbered
  %(prog)s entropy -w 5 --capitalize-first 0.5
  %(prog)s wordlists
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate passphrases')
    p.add_argument('-n', '--count', type=int, help='Number of passphrases (default: from settings)')
    add_scheme_options(p)
    p.add_argument('--entropy', '-e', action='store_true', help='Show passphrase entropy')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- sample ---
    p = subparsers.add_parser('sample', aliases=['s'], help='Sample random words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default: from settings)')
    p.add_argument('--numbered', action='store_true', help='Number the sampled words')
    add_wordlist_options(p)

    # --- entropy ---
    p = subparsers.add_parser('entropy', aliases=['e'], help='Show entropy of a configuration')
    add_scheme_options(p)
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- wordlists ---
    subparsers.add_parser('wordlists', help='List built-in wordlists')

    # Parse
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        's': 'sample',
        'e': 'entropy',
    }
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=args.quiet)

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'sample': cmd_sample,
        'entropy': cmd_entropy,
        'wordlists': cmd_wordlists,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (PhraseKitError, OSError, ValueError) as e:
            out.error(str(e))
            logger.debug("Command failed", exc_info=True)
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
