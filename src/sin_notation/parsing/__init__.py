from .sin_parser import parse, parse_components, valid

__all__ = [
    "parse",
    "parse_components",
    "valid",
]
