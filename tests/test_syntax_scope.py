"""Tests for import resolution and lexical shadowing."""

import pytest

from intlextract.syntax import BindingKind, NodePath, SourceFile, find_binding, references_import


def _reference(source: str, name: str) -> NodePath:
    """Last identifier with the given name (the use, not the declaration)."""
    unit = SourceFile(source, "a.js")
    uses = [path for path in unit.root.walk() if path.type == "identifier" and path.text == name]
    return uses[-1]


class TestImportForms:
    """Each ES import form binds the expected imported name."""

    def test_named_import(self) -> None:
        """import {x} binds x."""
        path = _reference("import {defineMessages} from 'react-intl';\ndefineMessages({});", "defineMessages")
        assert references_import(path, "react-intl", "defineMessages")

    def test_aliased_import(self) -> None:
        """import {x as y} binds y to x."""
        path = _reference("import {FormattedMessage as FM} from 'react-intl';\n<FM />;", "FM")
        assert references_import(path, "react-intl", "FormattedMessage")
        assert not references_import(path, "react-intl", "FM")

    def test_default_import(self) -> None:
        """A default import binds 'default'."""
        path = _reference("import Intl from 'react-intl';\nIntl;", "Intl")
        assert references_import(path, "react-intl", "default")

    def test_namespace_import(self) -> None:
        """A namespace import binds '*'."""
        path = _reference("import * as intl from 'react-intl';\nintl;", "intl")
        assert references_import(path, "react-intl", "*")

    def test_double_quoted_source(self) -> None:
        """Module sources are compared without their quotes."""
        path = _reference('import {msgs} from "react-intl";\nmsgs;', "msgs")
        assert references_import(path, "react-intl", "msgs")

    def test_other_module(self) -> None:
        """Same name from another module does not match."""
        path = _reference("import {defineMessages} from './intl';\ndefineMessages;", "defineMessages")
        assert not references_import(path, "react-intl", "defineMessages")

    def test_global_is_not_import(self) -> None:
        """An unbound name references nothing."""
        path = _reference("defineMessages({});", "defineMessages")
        assert find_binding(path) is None
        assert not references_import(path, "react-intl", "defineMessages")

    def test_binding_records_module(self) -> None:
        """Module bindings carry source and imported name."""
        path = _reference("import {msgs as m} from 'react-intl';\nm;", "m")
        binding = find_binding(path)
        assert binding is not None
        assert binding.kind is BindingKind.MODULE
        assert (binding.module_source, binding.imported_name) == ("react-intl", "msgs")


class TestShadowing:
    """Local declarations shadow imports."""

    @pytest.mark.parametrize(
        ("body", "kind"),
        [
            ("function f(defineMessages) { defineMessages({}); }", BindingKind.PARAM),
            ("const f = (defineMessages) => defineMessages({});", BindingKind.PARAM),
            ("const f = defineMessages => defineMessages({});", BindingKind.PARAM),
            ("function f({defineMessages}) { defineMessages({}); }", BindingKind.PARAM),
            ("{ const defineMessages = g; defineMessages({}); }", BindingKind.CONST),
            ("{ let defineMessages = g; defineMessages({}); }", BindingKind.LET),
            ("function f() { if (x) { var defineMessages = g; } defineMessages({}); }", BindingKind.VAR),
            ("try { x(); } catch (defineMessages) { defineMessages({}); }", BindingKind.CATCH),
            ("for (const defineMessages of list) { defineMessages({}); }", BindingKind.CONST),
            ("function f() { function defineMessages() {} defineMessages({}); }", BindingKind.FUNCTION),
            ("switch (k) { case 1: const defineMessages = g; defineMessages({}); }", BindingKind.CONST),
            ("switch (k) { default: let defineMessages = g; defineMessages({}); }", BindingKind.LET),
        ],
    )
    def test_local_binding_shadows_import(
        self, body: str, kind: BindingKind
    ) -> None:
        """The nearest declaration wins over the module import."""
        source = f"import {{defineMessages}} from 'react-intl';\n{body}"
        path = _reference(source, "defineMessages")
        binding = find_binding(path)
        assert binding is not None
        assert binding.kind is kind
        assert not references_import(path, "react-intl", "defineMessages")

    def test_shadowing_is_scoped(self) -> None:
        """Outside the shadowing scope the import is visible again."""
        source = (
            "import {defineMessages} from 'react-intl';\n"
            "function f(defineMessages) {}\n"
            "defineMessages({});"
        )
        path = _reference(source, "defineMessages")
        assert references_import(path, "react-intl", "defineMessages")

    def test_exported_declaration_binds(self) -> None:
        """export const declares in the module scope."""
        source = "export const defineMessages = x;\ndefineMessages({});"
        path = _reference(source, "defineMessages")
        binding = find_binding(path)
        assert binding is not None
        assert binding.kind is BindingKind.CONST
