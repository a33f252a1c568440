"""Core value, format, and parsing modules.

WHY: The core package holds the stable heart of numf: the value type,
the format table, the error hierarchy, and the parser. Formatters and
the CLI both build on these.

HOW: value.py defines NumericValue, formats.py the Format enum with
prefixes and alphabets, errors.py the exception hierarchy, parser.py the
base detection and decoding logic.

RULES:
- Nothing in core writes to stdout or stderr
- Core never imports from formatters or cli
"""
