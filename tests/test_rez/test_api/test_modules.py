"""Tests for the host registration factory."""

from rez.api.modules import MODULE_NAMES, load_modules
from rez.shared.config import RezConfig


class TestLoadModules:
    """Tests for load_modules."""

    def test_table_shape(self):
        """Test the exposed entry points."""
        modules = load_modules()

        assert set(modules) == set(MODULE_NAMES) == {"concat", "escape"}
        assert callable(modules["concat"])
        assert set(modules["escape"]) == {"html"}
        assert callable(modules["escape"]["html"])

    def test_entry_points_work(self):
        """Test that both entry points are reachable and functional."""
        modules = load_modules()

        assert modules["concat"](["a", 1, None]) == "a1nil"
        assert modules["escape"]["html"]("<") == "&lt;"
        assert modules["escape"]["html"]() is None

    def test_fresh_table_per_call(self):
        """Test that no shared mapping is mutated or returned twice."""
        first = load_modules()
        second = load_modules()

        assert first is not second
        first["escape"]["html"] = None
        assert callable(second["escape"]["html"])

    def test_config_applied(self):
        """Test that the configuration reaches every entry point."""
        config = RezConfig.default().override(
            stringify__nil_text="null",
            concat__length_policy="stop_at_nil",
            escape__none_is_absent=False,
        )
        modules = load_modules(config)

        assert modules["concat"](["a", None, "b"]) == "a"
        assert modules["escape"]["html"](None) == "null"

    def test_strict_config(self):
        """Test the strict preset through the factory."""
        class Point:
            def __str__(self):
                return "<p>"

        default_html = load_modules()["escape"]["html"]
        strict_html = load_modules(RezConfig.strict())["escape"]["html"]

        assert default_html(Point()) == "&lt;p&gt;"
        assert strict_html(Point()).startswith("Point: 0x")
