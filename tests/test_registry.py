"""Tests for FormatterRegistry and its builder."""

import logging

import pytest

from lilac import (
    Formatter,
    FormatterRegistry,
    FormatterRegistryBuilder,
    JavascriptFormatter,
    LavendeuxFormatter,
    RenderConfig,
    Rule,
    Sample,
    create_default_registry,
    get_default_registry,
    highlight,
    render_config_context,
    render_samples,
)
from lilac.errors import UnknownFormatterError
from lilac.formatters import registry as registry_module


def _formatter(name: str, aliases: tuple[str, ...] = ()) -> Formatter:
    return Formatter(name, [Rule.compile(r"x", "x")], aliases=aliases)


class TestDefaultRegistry:
    """create_default_registry() contents and fallback."""

    def test_builtin_formatters(self) -> None:
        registry = create_default_registry()
        assert len(registry) == 2
        assert registry.names == frozenset({"lavendeux", "lav", "javascript", "js"})
        assert isinstance(registry.get("lavendeux"), LavendeuxFormatter)
        assert isinstance(registry.get("js"), JavascriptFormatter)

    def test_alias_resolves_to_same_instance(self) -> None:
        registry = create_default_registry()
        assert registry.get("js") is registry.get("javascript")

    def test_unknown_id_falls_back_to_default(self) -> None:
        registry = create_default_registry()
        assert registry.resolve("unknown-lang") is registry.get("lavendeux")

    def test_missing_id_falls_back_to_default(self) -> None:
        registry = create_default_registry()
        assert registry.resolve(None) is registry.default
        assert registry.resolve("") is registry.default

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = create_default_registry()
        with caplog.at_level(logging.DEBUG, logger="lilac"):
            registry.resolve("cobol")
        assert any("cobol" in record.getMessage() for record in caplog.records)

    def test_get_unknown_returns_none(self) -> None:
        assert create_default_registry().get("cobol") is None

    def test_require_unknown_raises(self) -> None:
        registry = create_default_registry()
        with pytest.raises(UnknownFormatterError, match="cobol") as exc_info:
            registry.require("cobol")
        assert "lavendeux" in exc_info.value.available

    def test_require_known(self) -> None:
        registry = create_default_registry()
        assert registry.require("lav").name == "lavendeux"

    def test_explicit_default(self) -> None:
        registry = create_default_registry(default="javascript")
        assert registry.resolve("unknown-lang").name == "javascript"

    def test_default_from_config(self) -> None:
        with render_config_context(RenderConfig(default_formatter="js")):
            registry = create_default_registry()
        assert registry.default.name == "javascript"

    def test_contains(self) -> None:
        registry = create_default_registry()
        assert "lav" in registry
        assert "cobol" not in registry


class TestCachedDefaultRegistry:
    """get_default_registry() reuse across calls."""

    def test_same_instance_across_calls(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_keyed_by_fallback_id(self) -> None:
        lav = get_default_registry("lavendeux")
        js = get_default_registry("javascript")
        assert lav is not js
        assert js.default.name == "javascript"
        assert get_default_registry("javascript") is js

    def test_fallback_from_config(self) -> None:
        with render_config_context(RenderConfig(default_formatter="javascript")):
            registry = get_default_registry()
        assert registry is get_default_registry("javascript")

    def test_highlight_does_not_rebuild(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_default_registry()
        builds: list[str | None] = []

        def counting_create(default: str | None = None) -> FormatterRegistry:
            builds.append(default)
            return create_default_registry(default)

        monkeypatch.setattr(registry_module, "create_default_registry", counting_create)
        assert highlight("255 @hex") == highlight("255 @hex")
        render_samples([Sample(name="a", text="5", formatter="lavendeux")])
        assert builds == []

    def test_unknown_fallback_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="'cobol' is not registered"):
            get_default_registry("cobol")


class TestRegistryBuilder:
    """FormatterRegistryBuilder validation."""

    def test_first_registered_is_default(self) -> None:
        registry = FormatterRegistryBuilder().register(_formatter("a")).register(
            _formatter("b")
        ).build()
        assert registry.default.name == "a"
        assert [f.name for f in registry.formatters] == ["a", "b"]

    def test_set_default(self) -> None:
        registry = (
            FormatterRegistryBuilder()
            .register(_formatter("a"))
            .register(_formatter("b", aliases=("bee",)))
            .set_default("bee")
            .build()
        )
        assert registry.default.name == "b"

    def test_duplicate_name_rejected(self) -> None:
        builder = FormatterRegistryBuilder().register(_formatter("a"))
        with pytest.raises(ValueError, match="already registered"):
            builder.register(_formatter("a"))

    def test_alias_clash_rejected_without_partial_registration(self) -> None:
        builder = FormatterRegistryBuilder().register(_formatter("a"))
        with pytest.raises(ValueError, match="'a' already registered"):
            builder.register(_formatter("b", aliases=("a",)))
        registry = builder.build()
        assert "b" not in registry
        assert len(registry) == 1

    def test_empty_builder_rejected(self) -> None:
        with pytest.raises(ValueError, match="without formatters"):
            FormatterRegistryBuilder().build()

    def test_unknown_default_rejected(self) -> None:
        builder = FormatterRegistryBuilder().register(_formatter("a")).set_default("z")
        with pytest.raises(ValueError, match="'z' is not registered"):
            builder.build()

    def test_registry_is_independent_of_builder(self) -> None:
        builder = FormatterRegistryBuilder().register(_formatter("a"))
        registry = builder.build()
        builder.register(_formatter("b"))
        assert "b" not in registry
