"""Evaluate-or-warn policy for descriptor keys and values.

A key or value that cannot be evaluated at build time is not an error: the
unit's warning sink records it and the property is dropped. Extraction
degrades per property, never per file.
"""

from intlextract.diagnostics import ErrorTemplate
from intlextract.syntax import Confident, EvaluationResult, NodePath, NotConfident

__all__ = ["evaluate_key", "evaluate_value"]

# A valueless JSX attribute (`<Msg enabled />`) means true.
_IMPLICIT_ATTRIBUTE_VALUE = Confident(True)


def evaluate_key(path: NodePath) -> EvaluationResult:
    """Property name of a key node.

    Identifiers and namespaced JSX names (``xml:lang``) name themselves;
    anything else (string keys, computed keys) goes through the evaluator.
    """
    if path.is_identifier() or path.type == "jsx_namespace_name":
        return Confident(path.text)
    if path.type == "computed_property_name":
        inner = path.named_children
        if len(inner) == 1:
            path = inner[0]
    result = path.evaluate()
    if isinstance(result, NotConfident):
        path.unit.warn(path.locate(ErrorTemplate.key_not_evaluable(path.unit.filename)))
    return result


def evaluate_value(path: NodePath | None) -> EvaluationResult:
    """Value of a property or attribute, unwrapping one JSX ``{...}`` container."""
    if path is None:
        return _IMPLICIT_ATTRIBUTE_VALUE
    if path.is_expression_container():
        inner = path.named_children
        if len(inner) != 1:
            path.unit.warn(path.locate(ErrorTemplate.value_not_evaluable(path.unit.filename)))
            return NotConfident("empty expression container")
        path = inner[0]
    result = path.evaluate()
    if isinstance(result, NotConfident):
        path.unit.warn(path.locate(ErrorTemplate.value_not_evaluable(path.unit.filename)))
    return result
