"""Core parsing, alignment, and caption compilation modules.

WHY: The core package holds the stable heart of the tool — the document
dataclasses and the three pure transforms that every output format
relies on.

HOW: ir.py defines the data structures, lines.py classifies SRT lines,
timing.py parses and renders timestamps, parser.py builds documents,
script.py loads reference scripts, aligner.py swaps in script
sentences, compiler.py re-chunks captions into styled dialogue events.

RULES:
- IR dataclasses are the contract — change with care
- Nothing here keeps module-level mutable state
- Only script.py touches the filesystem (loader helpers for callers)
"""
