from __future__ import annotations
from typing import Any, Optional


class InputError(Exception):
    """
    An inconsistency in the source document or in a translation.
    Carries the offending message and the raw translation once the
    substitution driver (or the extractor) has seen it.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description
        self.message_ast: Optional[Any] = None
        self.translation_string: Optional[str] = None

    def annotate(self, message_ast, translation_string: Optional[str] = None) -> "InputError":
        # Only the innermost handler gets to attach context
        if self.message_ast is None:
            self.message_ast = message_ast
            self.translation_string = translation_string
        return self

    @property
    def line(self) -> Optional[int]:
        if self.message_ast is None:
            return None
        loc = self.message_ast.get("loc")
        return loc["start"]["line"] if loc else None


class InternalError(RuntimeError):
    pass


class UnhandledNodeType(InternalError):
    def __init__(self, where: str, node_type: Any):
        super().__init__(f"Internal error: {where} has no rule for node type {node_type!r}")
        self.where = where
        self.node_type = node_type
