"""
Sanskrit Script & Phonology Engine
Command-line interface
"""

import argparse
import logging
import os
import sys

from .config import CONFIG, EngineConfig
from .errors import SanskritPhonologyError
from .sandhi.transducer import apply_sandhi
from .text_frontend.classifier import grade_rank, guna_of, vrddhi_of
from .text_frontend.cross_script import transliterate
from .text_frontend.script_detector import ScriptKind, detect_script
from .text_frontend.syllables import syllabify
from .text_frontend.text_normalizer import clean_text, from_scheme
from .text_frontend.tokenizer import tokenize

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanskrit-phonology",
        description="Sanskrit script detection, tokenization, transliteration and sandhi",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Detect the script of a word
  python -m sanskrit_phonology detect "नमस्ते"

  # Show phoneme tokens
  python -m sanskrit_phonology tokenize "kṛṣṇa"

  # Transliterate (Harvard-Kyoto input)
  python -m sanskrit_phonology render "kRSNa" --to Devanagari --scheme hk

  # Join two words
  python -m sanskrit_phonology sandhi mahā indraḥ

  # Interactive mode
  python -m sanskrit_phonology --interactive
        """
    )
    parser.add_argument('--log-level', type=str, default=CONFIG.log_level,
                        help='Logging level (default from SANSKRIT_LOG_LEVEL)')
    parser.add_argument('--interactive', action='store_true',
                        help='Interactive mode')

    commands = parser.add_subparsers(dest='command')

    detect = commands.add_parser('detect', help='Detect the script of text')
    detect.add_argument('text', type=str)

    tok = commands.add_parser('tokenize', help='Split a word into phoneme tokens')
    tok.add_argument('text', type=str)
    tok.add_argument('--script', type=str, default=None,
                     help='Input script (detected when omitted)')

    render = commands.add_parser('render', help='Transliterate between IAST and Devanagari')
    render.add_argument('text', type=str, nargs='?')
    render.add_argument('--to', dest='target', type=str, default=CONFIG.default_script,
                        choices=['IAST', 'Devanagari', 'iast', 'devanagari'],
                        help='Output script')
    render.add_argument('--scheme', type=str, default=None,
                        help='Input romanization (hk, itrans, slp1, velthuis, wx)')
    render.add_argument('--input_file', type=str,
                        help='File containing Sanskrit text (one word or line per line)')

    sandhi = commands.add_parser('sandhi', help='Join two words with sandhi')
    sandhi.add_argument('left', type=str)
    sandhi.add_argument('right', type=str)

    return parser


def _print_tokens(text: str, script: str = None):
    sequence = tokenize(clean_text(text), script)
    print(f"Script: {sequence.script.value}")
    for token in sequence:
        if token.is_unrecognized:
            print(f"  {token.start:3d}  {token.surface!r:8}  (unrecognized)")
            continue
        phoneme = token.phoneme
        extra = []
        if phoneme.is_ik:
            extra.append(f"guna={guna_of(phoneme)} vrddhi={vrddhi_of(phoneme)}")
        elif grade_rank(phoneme) is not None:
            extra.append(f"grade={grade_rank(phoneme)}")
        surface = token.surface or '(inherent)'
        print(f"  {token.start:3d}  {surface!r:8}  {phoneme.canonical_id:14} "
              f"{phoneme.category:9} {' '.join(extra)}".rstrip())
    weights = [syllable.weight for syllable in syllabify(sequence)]
    if weights:
        print(f"Syllables: {' '.join(weights)}")


def _render(text: str, target: str, scheme: str = None) -> str:
    text = from_scheme(text, scheme) if scheme else clean_text(text)
    return transliterate(text, ScriptKind.coerce(target))


def _print_sandhi(left: str, right: str):
    result = apply_sandhi(left, right)
    print(f"{left} + {right} -> {result.combined}")
    print(f"Rule: {result.rule or 'none'}")


def _interactive() -> int:
    print("\nSanskrit Phonology Interactive Mode")
    print("Enter a word to analyse, 'left + right' to join, or 'quit' to exit:")
    print("-" * 40)

    while True:
        try:
            text = input("\n> ").strip()

            if text.lower() in ['quit', 'exit', 'q']:
                break

            if not text:
                continue

            if '+' in text:
                left, _, right = text.partition('+')
                _print_sandhi(left.strip(), right.strip())
            else:
                _print_tokens(text)
                script = detect_script(text)
                if script is ScriptKind.IAST:
                    print(f"Devanagari: {transliterate(text, ScriptKind.DEVANAGARI)}")
                elif script is ScriptKind.DEVANAGARI:
                    print(f"IAST: {transliterate(text, ScriptKind.IAST)}")

        except (KeyboardInterrupt, EOFError):
            print("\nExiting...")
            break
        except SanskritPhonologyError as e:
            print(f"Error: {e}")

    return 0


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=EngineConfig(log_level=args.log_level).numeric_log_level,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    if args.interactive:
        return _interactive()

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == 'detect':
            print(detect_script(args.text).value)

        elif args.command == 'tokenize':
            _print_tokens(args.text, args.script)

        elif args.command == 'render':
            if args.input_file:
                if not os.path.exists(args.input_file):
                    print(f"Input file not found: {args.input_file}")
                    return 1
                with open(args.input_file, 'r', encoding='utf-8') as f:
                    lines = [line.strip() for line in f if line.strip()]
                logger.info("Rendering %d lines from %s", len(lines), args.input_file)
                for line in lines:
                    print(' '.join(_render(word, args.target, args.scheme) for word in line.split()))
            elif args.text:
                print(_render(args.text, args.target, args.scheme))
            else:
                print("Nothing to render: give text or --input_file")
                return 1

        elif args.command == 'sandhi':
            _print_sandhi(args.left, args.right)

    except SanskritPhonologyError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
