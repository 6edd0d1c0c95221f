"""Host tree layer: tree-sitter parsing, scopes, evaluation and traversal.

Python 3.13+.
"""

from .evaluate import Confident, ConstantEvaluator, EvaluationResult, NotConfident, evaluate, js_to_string
from .node import NodePath
from .scope import Binding, BindingKind, find_binding, references_import
from .source import SourceFile, javascript_language
from .traverse import ExtractionHooks, traverse

__all__ = [
    "Binding",
    "BindingKind",
    "Confident",
    "ConstantEvaluator",
    "EvaluationResult",
    "ExtractionHooks",
    "NodePath",
    "NotConfident",
    "SourceFile",
    "evaluate",
    "find_binding",
    "javascript_language",
    "js_to_string",
    "references_import",
    "traverse",
]
