"""berust - best-effort translator from the `be` toy notation to Rust-style code.

Main namespace package:
- berust.core: settings, logging and boundary errors
- berust.translator: line rules, block tracking and the file/CLI driver
"""

__version__ = "0.1.0"

__all__ = []
