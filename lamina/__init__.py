"""Built-in functions of the Lamina language: irrationals, CAS, structs, strings, math, I/O and sockets."""

__version__ = "1.0.0"

__all__ = [
    "irrational",
    "cas",
    "cas_functions",
    "lstruct",
    "arrays",
    "strings",
    "randomness",
    "dates",
    "mathfuncs",
    "stdio",
    "netsockets",
]