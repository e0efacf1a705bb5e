"""Unit and property-based tests for the visualization module."""
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from floatchat.visualization import (
    SALINITY_DATA,
    TEMPERATURE_DATA,
    CurrentPoint,
    KeywordVisualizationSelector,
    VisualizationKind,
    VisualizationPayload,
    VisualizationSelector,
    create_visualization_selector,
    select,
)

KEYWORDS = ("temp", "salt", "current", "flow", "salinity", "temperature")


class TestVisualizationSelector:
    """Tests for the abstract selector interface."""

    def test_selector_is_abstract(self):
        """Test that VisualizationSelector cannot be instantiated directly."""
        with pytest.raises(TypeError):
            VisualizationSelector()  # type: ignore


class TestSelect:
    """Tests for keyword selection."""

    def test_temperature_query(self):
        payload = select("Show me temperature trends")
        assert payload is not None
        assert payload.kind == VisualizationKind.TEMPERATURE
        assert payload.series == TEMPERATURE_DATA

    def test_salinity_query(self):
        payload = select("salinity please")
        assert payload is not None
        assert payload.kind == VisualizationKind.SALINITY
        assert payload.series == SALINITY_DATA

    def test_currents_query(self):
        payload = select("ocean current near equator")
        assert payload is not None
        assert payload.kind == VisualizationKind.CURRENTS

    def test_no_match(self):
        assert select("hello") is None

    def test_short_forms(self):
        """Test the abbreviated keywords."""
        assert select("TEMP at 10m").kind == VisualizationKind.TEMPERATURE
        assert select("how salty is the salt water").kind == VisualizationKind.SALINITY
        assert select("water flow rates").kind == VisualizationKind.CURRENTS

    def test_case_insensitive(self):
        assert select("SALINITY").kind == VisualizationKind.SALINITY

    def test_temperature_wins_over_salinity(self):
        """Test that temperature is checked first."""
        payload = select("temperature and salinity")
        assert payload.kind == VisualizationKind.TEMPERATURE

    def test_salinity_wins_over_currents(self):
        payload = select("salt carried by the current")
        assert payload.kind == VisualizationKind.SALINITY

    def test_empty_text(self):
        assert select("") is None

    @given(st.text(alphabet=st.characters(exclude_characters="tTsScCfF", max_codepoint=127)))
    def test_text_without_keyword_letters_never_matches(self, text: str):
        """Property test: text that cannot spell a keyword selects nothing."""
        assert select(text) is None

    @given(st.text(), st.sampled_from(KEYWORDS), st.text())
    def test_keyword_anywhere_matches(self, prefix: str, keyword: str, suffix: str):
        """Property test: a keyword embedded in any text yields a payload."""
        assert select(prefix + keyword + suffix) is not None


class TestPayloads:
    """Tests for payload contents."""

    def test_temperature_payload_texts(self):
        payload = select("temperature")
        assert payload.title == "Ocean Temperature Trends"
        assert "seasonal variations" in payload.description
        assert (payload.x_field, payload.y_field) == ("month", "temperature")

    def test_salinity_payload_texts(self):
        payload = select("salinity")
        assert payload.title == "Salinity Profile by Depth"
        assert (payload.x_field, payload.y_field) == ("depth", "salinity")

    def test_currents_derived_from_temperature(self):
        payload = select("currents")
        assert payload.title == "Ocean Current Analysis"
        assert len(payload.series) == len(TEMPERATURE_DATA)
        for point, base in zip(payload.series, TEMPERATURE_DATA):
            assert isinstance(point, CurrentPoint)
            assert point.month == base.month
            assert point.temperature == base.temperature
            assert point.depth == base.depth

    def test_payload_is_frozen(self):
        payload = select("temperature")
        with pytest.raises(ValueError):
            payload.title = "changed"  # type: ignore

    def test_columns_and_rows(self):
        payload = select("salinity")
        assert payload.columns() == ["depth", "salinity"]
        assert payload.rows()[0] == (0, 35.2)

    def test_axis_values(self):
        payload = select("temperature")
        xs, ys = payload.axis_values()
        assert xs[0] == "Jan"
        assert ys[5] == 30.1

    def test_sample_data_shape(self):
        assert len(TEMPERATURE_DATA) == 12
        assert len(SALINITY_DATA) == 8
        assert all(point.depth == 10 for point in TEMPERATURE_DATA)


class TestKeywordVisualizationSelector:
    """Tests for the seedable selector."""

    def test_classify(self):
        selector = KeywordVisualizationSelector(seed=1)
        assert selector.classify("Temperature") == VisualizationKind.TEMPERATURE
        assert selector.classify("nothing here") is None

    @given(st.integers())
    def test_seeded_currents_reproducible(self, seed: int):
        """Property test: equal seeds give equal currents series."""
        first = KeywordVisualizationSelector(seed=seed).select("current")
        second = KeywordVisualizationSelector(seed=seed).select("current")
        assert first == second

    @given(st.integers())
    def test_velocity_bounds(self, seed: int):
        """Property test: velocities lie in [0.5, 2.5)."""
        payload = KeywordVisualizationSelector(seed=seed).select("flow")
        for point in payload.series:
            assert 0.5 <= point.velocity < 2.5

    def test_injected_rng_is_used(self):
        reference = random.Random(7)
        expected = [reference.random() * 2 + 0.5 for _ in range(12)]
        rng = random.Random(7)
        payload = KeywordVisualizationSelector(rng=rng).select("current")
        assert [point.velocity for point in payload.series] == pytest.approx(expected)

    def test_rng_and_seed_together_fails(self):
        with pytest.raises(ValueError):
            KeywordVisualizationSelector(rng=random.Random(), seed=3)

    def test_selector_type(self):
        assert KeywordVisualizationSelector().selector_type == "keyword"


class TestVisualizationFactory:
    """Tests for the selector factory."""

    def test_create_keyword_selector(self):
        selector = create_visualization_selector("keyword", seed=5)
        assert isinstance(selector, KeywordVisualizationSelector)

    def test_unknown_selector_raises(self):
        with pytest.raises(ValueError, match="Unsupported visualization selector"):
            create_visualization_selector("llm")

    def test_payload_model(self):
        payload = create_visualization_selector().select("salinity")
        assert isinstance(payload, VisualizationPayload)
