"""tallyup — four-function calculator with chained operations.

Operators resolve left to right as they are pressed (a running total, no
precedence). The engine is a pure function over an immutable state; the CLI
drives it with symbolic tokens or keyboard keys and renders with Rich.

Usage:
    python -m tallyup run 5 + 3 + 2 =     # Symbolic tokens
    python -m tallyup keys 12*3 Enter     # Key presses
    python -m tallyup repl                # Interactive session
    python -m tallyup keypad              # Button layout
"""
