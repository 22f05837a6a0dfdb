"""Syntax tree nodes, operators and visitors for the CoVibe language."""

__version__ = "0.1.0"
__all__ = ["core", "op", "literal", "pat", "ty", "stmt", "expr", "decl", "visitor", "visitor_mut"]