"""Compile-time constant evaluation of JavaScript expressions.

Evaluation follows JavaScript semantics for the supported constructs and
gives up (NotConfident) on anything that would need the program to run.
Giving up is the common case and is therefore a result, not an exception.

Supported:
    - string, number, boolean, null and undefined literals
    - template literals with constant substitutions
    - parentheses, conditional expressions
    - unary ``! - + ~ typeof void``
    - binary ``+ - * / % ** == != === !== < <= > >=``
    - logical ``&& || ??`` (short-circuiting)
    - array and object literals with constant members
    - identifiers bound by a preceding ``const``, or a ``let``/``var`` that is
      never written again, with a constant initializer

JavaScript values map to Python as str, float, bool, None (null), list and
dict; ``undefined`` is tracked internally and surfaces as None. Integral
numbers surface as int so catalogs serialize ``1`` rather than ``1.0``.

Python 3.13+.
"""

import math
import re
from dataclasses import dataclass
from html.entities import html5
from typing import TYPE_CHECKING, Final

from tree_sitter import Node

from intlextract.constants import MAX_DEPTH
from intlextract.core.depth_guard import DepthGuard, DepthLimitExceededError

from .scope import constant_initializer, find_binding

if TYPE_CHECKING:
    from .node import NodePath
    from .source import SourceFile

__all__ = [
    "Confident",
    "ConstantEvaluator",
    "EvaluationResult",
    "NotConfident",
    "evaluate",
    "js_to_string",
]


@dataclass(frozen=True, slots=True)
class Confident:
    """Expression has a known value at build time."""

    value: object


@dataclass(frozen=True, slots=True)
class NotConfident:
    """Expression cannot be evaluated without running the program.

    Attributes:
        reason: What stopped evaluation
    """

    reason: str


type EvaluationResult = Confident | NotConfident


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED: Final = _Undefined()


class _Deopt(Exception):
    """Internal: abandon evaluation of the current expression."""


_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_LINE_CONTINUATIONS: frozenset[str] = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})

_LEGACY_OCTAL = re.compile(r"[0-7]+")

_RADIX_PREFIXES: dict[str, int] = {"0x": 16, "0o": 8, "0b": 2}

# Terminated character references; an `&` not matching stays literal.
_JSX_ENTITY = re.compile(r"&(?:#[xX]([0-9a-fA-F]{1,8})|#([0-9]{1,8})|([A-Za-z][A-Za-z0-9]{0,31}));")

_MAX_SAFE_INTEGER: float = 2.0**53


class ConstantEvaluator:
    """Evaluates expression nodes of one compilation unit.

    Nesting depth and const chains are bounded by a DepthGuard; a const
    that (indirectly) refers to itself is not confident.

    Example:
        >>> unit = SourceFile("const a = 'x'; f(a + 1);", "a.js")
        >>> call = next(p for p in unit.root.walk() if p.is_call())
        >>> ConstantEvaluator(unit).evaluate(call.get("arguments").named_children[0])
        Confident(value='x1')
    """

    __slots__ = ("_guard", "_resolving", "unit")

    def __init__(self, unit: "SourceFile", *, max_depth: int = MAX_DEPTH) -> None:
        self.unit = unit
        self._guard = DepthGuard(max_depth=max_depth)
        self._resolving: set[int] = set()

    def evaluate(self, path: "NodePath") -> EvaluationResult:
        try:
            value = self._eval(path.node)
        except _Deopt as exc:
            return NotConfident(str(exc))
        except DepthLimitExceededError as exc:
            return NotConfident(str(exc))
        return Confident(_to_python(value))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _eval(self, node: Node) -> object:
        with self._guard:
            match node.type:
                case "string":
                    return self._string(node)
                case "template_string":
                    return self._template(node)
                case "number":
                    return _parse_number(self.unit.node_text(node))
                case "true":
                    return True
                case "false":
                    return False
                case "null":
                    return None
                case "undefined":
                    return UNDEFINED
                case "identifier" | "shorthand_property_identifier":
                    return self._identifier(node)
                case "parenthesized_expression":
                    return self._eval(_only_child(node))
                case "unary_expression":
                    return self._unary(node)
                case "binary_expression":
                    return self._binary(node)
                case "ternary_expression":
                    condition = self._eval(_field(node, "condition"))
                    branch = "consequence" if is_truthy(condition) else "alternative"
                    return self._eval(_field(node, branch))
                case "array":
                    return self._array(node)
                case "object":
                    return self._object(node)
                case other:
                    raise _Deopt(f"unsupported expression {other!r}")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self, node: Node) -> str:
        parent = node.parent
        if parent is not None and parent.type == "jsx_attribute":
            # No backslash escapes in JSX attribute strings, only entities.
            return decode_jsx_entities(self.unit.jsx_string_text(node))
        return self._cooked(node, template=False)

    def _template(self, node: Node) -> str:
        return self._cooked(node, template=True)

    def _cooked(self, node: Node, *, template: bool) -> str:
        """Decode a quoted string or template literal.

        Raw runs between children are taken as-is so the result does not
        depend on whether the grammar exposes them as string_fragment nodes.
        """
        unit = self.unit
        parts: list[str] = []
        position = node.start_byte + 1
        for child in node.named_children:
            if child.start_byte > position:
                parts.append(_raw_run(unit, position, child.start_byte, template=template))
            match child.type:
                case "escape_sequence":
                    parts.append(decode_escape(unit.node_text(child)))
                case "template_substitution":
                    parts.append(js_to_string(self._eval(_only_child(child))))
                case "comment":
                    pass
                case _:
                    parts.append(_raw_run(unit, child.start_byte, child.end_byte, template=template))
            position = child.end_byte
        end = node.end_byte - 1
        if end > position:
            parts.append(_raw_run(unit, position, end, template=template))
        return _join_surrogates("".join(parts))

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def _identifier(self, node: Node) -> object:
        from .node import NodePath  # noqa: PLC0415 - circular

        path = NodePath(node, self.unit)
        name = path.text
        initializer = constant_initializer(path)
        if initializer is None:
            if find_binding(path) is None:
                match name:
                    case "undefined":
                        return UNDEFINED
                    case "NaN":
                        return math.nan
                    case "Infinity":
                        return math.inf
            raise _Deopt(f"{name!r} is not a preceding, never reassigned variable")
        if initializer.id in self._resolving:
            raise _Deopt(f"{name!r} refers to itself")
        self._resolving.add(initializer.id)
        try:
            return self._eval(initializer)
        finally:
            self._resolving.discard(initializer.id)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _unary(self, node: Node) -> object:
        operator = _field(node, "operator").type
        if operator == "delete":
            raise _Deopt("delete has side effects")
        argument = self._eval(_field(node, "argument"))
        match operator:
            case "!":
                return not is_truthy(argument)
            case "-":
                return -to_number(argument)
            case "+":
                return to_number(argument)
            case "~":
                return float(~_to_int32(to_number(argument)))
            case "typeof":
                return _typeof(argument)
            case "void":
                return UNDEFINED
            case _:
                raise _Deopt(f"unsupported unary operator {operator!r}")

    def _binary(self, node: Node) -> object:
        operator = _field(node, "operator").type
        left = self._eval(_field(node, "left"))
        match operator:
            case "&&":
                return self._eval(_field(node, "right")) if is_truthy(left) else left
            case "||":
                return left if is_truthy(left) else self._eval(_field(node, "right"))
            case "??":
                return self._eval(_field(node, "right")) if left is None or left is UNDEFINED else left
            case _:
                right = self._eval(_field(node, "right"))
                return _apply_binary(operator, left, right)

    # ------------------------------------------------------------------
    # Compound literals
    # ------------------------------------------------------------------

    def _array(self, node: Node) -> list[object]:
        items: list[object] = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type == "spread_element":
                raise _Deopt("spread in array literal")
            items.append(self._eval(child))
        return items

    def _object(self, node: Node) -> dict[str, object]:
        result: dict[str, object] = {}
        for member in node.named_children:
            match member.type:
                case "pair":
                    key = self._property_key(_field(member, "key"))
                    result[key] = self._eval(_field(member, "value"))
                case "shorthand_property_identifier":
                    result[self.unit.node_text(member)] = self._eval(member)
                case "comment":
                    pass
                case other:
                    raise _Deopt(f"unsupported object member {other!r}")
        return result

    def _property_key(self, key: Node) -> str:
        match key.type:
            case "property_identifier":
                return self.unit.node_text(key)
            case "computed_property_name":
                return js_to_string(self._eval(_only_child(key)))
            case _:
                return js_to_string(self._eval(key))


def evaluate(path: "NodePath") -> EvaluationResult:
    """Evaluate the expression at path."""
    return ConstantEvaluator(path.unit).evaluate(path)


# ----------------------------------------------------------------------
# Tree helpers
# ----------------------------------------------------------------------


def _field(node: Node, name: str) -> Node:
    child = node.child_by_field_name(name)
    if child is None:
        raise _Deopt(f"{node.type} without {name}")
    return child


def _only_child(node: Node) -> Node:
    children = [child for child in node.named_children if child.type != "comment"]
    if len(children) != 1:
        raise _Deopt(f"unsupported {node.type} contents")
    return children[0]


def _raw_run(unit: "SourceFile", start: int, end: int, *, template: bool) -> str:
    raw = unit.byte_range_text(start, end)
    return raw.replace("\r\n", "\n") if template else raw


# ----------------------------------------------------------------------
# JavaScript value semantics
# ----------------------------------------------------------------------


def decode_escape(sequence: str) -> str:
    """Decode one backslash escape sequence (including the backslash)."""
    body = sequence[1:]
    if body in _LINE_CONTINUATIONS:
        return ""
    head = body[:1]
    if head in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[head]
    if head == "x" and len(body) == 3:
        return chr(int(body[1:], 16))
    if head == "u":
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        try:
            return chr(int(digits, 16))
        except ValueError:
            raise _Deopt(f"invalid escape {sequence!r}") from None
    if _LEGACY_OCTAL.fullmatch(body):
        return chr(int(body, 8))
    return body


def decode_jsx_entities(text: str) -> str:
    """Decode ``&name;``, ``&#N;`` and ``&#xH;`` references in JSX text.

    Example:
        >>> decode_jsx_entities("R&D &amp; Q&#65;A &lt b")
        'R&D & QAA &lt b'
    """
    return _JSX_ENTITY.sub(_decode_entity, text)


def _decode_entity(match: re.Match[str]) -> str:
    hexadecimal, decimal, name = match.groups()
    if name is not None:
        return html5.get(f"{name};", match.group())
    code_point = int(hexadecimal, 16) if hexadecimal is not None else int(decimal)
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        return match.group()
    return chr(code_point)


def _join_surrogates(text: str) -> str:
    """Combine UTF-16 surrogate pairs produced by ``\\uD83D\\uDE00`` escapes."""
    if not any("\ud800" <= char <= "\udfff" for char in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _parse_number(text: str) -> float:
    text = text.replace("_", "")
    if text.endswith("n"):
        raise _Deopt("BigInt literals are not supported")
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        return float(int(text[2:], radix))
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        return float(int(text, 8)) if _LEGACY_OCTAL.fullmatch(text) else float(text)
    return float(text)


def is_truthy(value: object) -> bool:
    """JavaScript ToBoolean."""
    match value:
        case None | _Undefined():
            return False
        case bool():
            return value
        case float():
            return not (value == 0 or math.isnan(value))
        case str():
            return value != ""
        case _:
            return True


def to_number(value: object) -> float:
    """JavaScript ToNumber."""
    match value:
        case bool():
            return 1.0 if value else 0.0
        case float():
            return value
        case None:
            return 0.0
        case _Undefined() | dict():
            return math.nan
        case str():
            return _string_to_number(value)
        case list():
            return _string_to_number(js_to_string(value))
        case _:
            raise _Deopt(f"cannot convert {type(value).__name__} to a number")


def _string_to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    try:
        if radix is not None:
            return float(int(text[2:], radix))
        if text.lower() in ("inf", "+inf", "-inf", "infinity", "nan") or "_" in text:
            return math.nan
        return float(text)
    except ValueError:
        return math.nan


def js_to_string(value: object) -> str:
    """JavaScript ToString for evaluated values."""
    match value:
        case str():
            return value
        case None:
            return "null"
        case _Undefined():
            return "undefined"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return _number_to_string(value)
        case list():
            return ",".join("" if item is None or item is UNDEFINED else js_to_string(item) for item in value)
        case dict():
            return "[object Object]"
        case _:
            raise _Deopt(f"cannot convert {type(value).__name__} to a string")


def _number_to_string(value: float) -> str:
    """JavaScript Number::toString for a double.

    Python's repr already yields the shortest round-trip digits; only the
    layout differs: JS stays in positional notation for decimal exponents
    from -7 up to 21.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _number_to_string(-value)
    mantissa, _, exponent = repr(value).partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    # value == 0.<digits> * 10**point
    point = len(whole) + int(exponent or 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    count = len(digits)
    if count <= point <= 21:
        return digits + "0" * (point - count)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"0.{'0' * -point}{digits}"
    power = point - 1
    sign = "+" if power >= 0 else "-"
    head = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{head}e{sign}{abs(power)}"


def _to_int32(number: float) -> int:
    if math.isnan(number) or math.isinf(number):
        return 0
    value = int(number) & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _typeof(value: object) -> str:
    match value:
        case str():
            return "string"
        case bool():
            return "boolean"
        case float():
            return "number"
        case _Undefined():
            return "undefined"
        case _:
            return "object"


def _primitive(value: object) -> object:
    return js_to_string(value) if isinstance(value, (list, dict)) else value


def _strict_equals(left: object, right: object) -> bool:
    if isinstance(left, (list, dict)) or isinstance(right, (list, dict)):
        return left is right
    if type(left) is not type(right):
        return False
    return left == right


def _loose_equals(left: object, right: object) -> bool:
    nullish = (None, UNDEFINED)
    if left in nullish or right in nullish:
        return left in nullish and right in nullish
    if type(left) is type(right):
        return _strict_equals(left, right)
    left, right = _primitive(left), _primitive(right)
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return to_number(left) == to_number(right)


def _compare(operator: str, left: object, right: object) -> bool:
    left, right = _primitive(left), _primitive(right)
    if isinstance(left, str) and isinstance(right, str):
        a: str | float = left
        b: str | float = right
    else:
        a, b = to_number(left), to_number(right)
        if math.isnan(a) or math.isnan(b):
            return False
    match operator:
        case "<":
            return a < b
        case "<=":
            return a <= b
        case ">":
            return a > b
        case _:
            return a >= b


def _apply_binary(operator: str, left: object, right: object) -> object:
    match operator:
        case "+":
            left, right = _primitive(left), _primitive(right)
            if isinstance(left, str) or isinstance(right, str):
                return js_to_string(left) + js_to_string(right)
            return to_number(left) + to_number(right)
        case "-":
            return to_number(left) - to_number(right)
        case "*":
            return to_number(left) * to_number(right)
        case "/" | "%":
            divisor = to_number(right)
            if divisor == 0:
                raise _Deopt("division by zero")
            dividend = to_number(left)
            return dividend / divisor if operator == "/" else math.fmod(dividend, divisor)
        case "**":
            try:
                return math.pow(to_number(left), to_number(right))
            except (OverflowError, ValueError):
                raise _Deopt("exponentiation out of range") from None
        case "===":
            return _strict_equals(left, right)
        case "!==":
            return not _strict_equals(left, right)
        case "==":
            return _loose_equals(left, right)
        case "!=":
            return not _loose_equals(left, right)
        case "<" | "<=" | ">" | ">=":
            return _compare(operator, left, right)
        case _:
            raise _Deopt(f"unsupported binary operator {operator!r}")


def _to_python(value: object) -> object:
    """Convert an evaluated JavaScript value to its public Python form."""
    match value:
        case _Undefined():
            return None
        case bool():
            return value
        case float() if value.is_integer() and abs(value) <= _MAX_SAFE_INTEGER:
            return int(value)
        case list():
            return [_to_python(item) for item in value]
        case dict():
            return {key: _to_python(item) for key, item in value.items()}
        case _:
            return value
