"""numf: number formatter for the terminal.

WHY: Developers constantly juggle the same value in several notations:
a register dump in hex, a bit mask in binary, a file mode in octal, a
key fragment in base64. numf takes any number of values and prints each
one in a single requested notation.

HOW: Two-stage pipeline: parse (detect the base from a prefix or an
explicit flag, decode into a NumericValue), format (pluggable formatter
per output base). The CLI wires both stages to argv/stdin and stdout.

RULES:
- Values are non-negative integers of unbounded size
- Adding a new output base = one formatter class, one registry line
- Parse errors are per token; one bad token never stops the others
"""

__version__ = "0.1.0"
