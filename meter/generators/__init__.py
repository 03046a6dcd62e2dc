"""
Meter Generators
=================

Random password generation.
"""

from meter.generators.password import PasswordGenerator, generate_password

__all__ = [
    "PasswordGenerator",
    "generate_password",
]
