"""
PassLens Meter -- Password Strength Meter & Generator
======================================================

Estimates password strength locally (score, level, entropy, crack time
and advisories) and generates strong random replacements.  Nothing is
sent over the network and nothing is persisted.

Modules:
    - meter.analyzers: Strength evaluator, entropy and pattern checks
    - meter.generators: Random password generator
    - meter.core.engine: Facade used by the presentation layers
    - meter.core.models: Pydantic data models
    - meter.output: Console and JSON output
    - meter.session: Interactive terminal session
    - meter.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

__version__ = "1.0.0"
__tool_name__ = "meter"
