"""
Integration tests for the end-to-end color analysis pipeline.

Covers image -> palette -> names -> confidence -> backdrops, plus the
ambient helpers the pipeline relies on (IDs, logging, timing).
"""

import io
import json
import sys

import pytest
from loguru import logger

from huematch import analyze_image, configure_logging
from huematch.exceptions import DecodeError
from huematch.schemas import ConfidenceTier, HarmonyType
from huematch.services.observability import performance_monitor
from huematch.utils.ids import generate_analysis_id


class TestAnalyzeImage:
    """Test the full analysis of an encoded image"""

    def test_two_color_product(self, red_blue_halves_png):
        result = analyze_image(red_blue_halves_png, k=2)

        assert result.analysis_id.startswith("clr-")
        assert len(result.palette) == 2
        assert all(s.name and s.simple_name for s in result.palette)
        assert {s.simple_name for s in result.palette} == {"Red", "Blue"}
        assert result.confidence.tier == ConfidenceTier.MEDIUM
        assert result.auto_backdrop is not None
        assert result.auto_backdrop.type == HarmonyType.COMPLEMENTARY

    def test_solid_product(self, solid_red_png):
        result = analyze_image(solid_red_png)

        assert [(s.hex, s.percentage) for s in result.palette] == [("#FF0000", 100.0)]
        assert result.confidence.tier == ConfidenceTier.HIGH
        assert {s.type for s in result.suggestions} == set(HarmonyType)
        assert result.auto_backdrop == result.suggestions[0]

    def test_localized_confidence(self, solid_red_png):
        english = analyze_image(solid_red_png, locale="en")
        tounsi = analyze_image(solid_red_png, locale="tn")
        assert english.confidence.message != tounsi.confidence.message
        assert english.palette == tounsi.palette

    def test_bad_image(self):
        with pytest.raises(DecodeError):
            analyze_image(b"definitely not an image")

    def test_logs_carry_analysis_id(self, solid_red_png, captured_logs):
        result = analyze_image(solid_red_png)
        tagged = [r for r in captured_logs if r["extra"].get("analysis_id") == result.analysis_id]
        assert tagged
        assert any("complete" in r["message"] for r in tagged)


class TestAnalysisIds:
    """Test analysis ID generation"""

    def test_format(self):
        analysis_id = generate_analysis_id()
        prefix, timestamp, suffix = analysis_id.split("-")
        assert prefix == "clr"
        assert len(timestamp) == 14 and timestamp.isdigit()
        assert len(suffix) == 8

    def test_unique(self):
        assert len({generate_analysis_id() for _ in range(50)}) == 50


class TestPerformanceMonitor:
    """Test timing helpers"""

    def test_logs_duration(self, captured_logs):
        with performance_monitor("unit_stage", pixels=10):
            pass
        record = [r for r in captured_logs if r["extra"].get("operation") == "unit_stage"][0]
        assert record["extra"]["pixels"] == 10
        assert record["extra"]["duration_ms"] >= 0

    def test_reraises(self, captured_logs):
        with pytest.raises(RuntimeError):
            with performance_monitor("failing_stage"):
                raise RuntimeError("boom")
        assert any(
            r["level"].name == "WARNING" and r["extra"].get("operation") == "failing_stage"
            for r in captured_logs
        )


class TestConfigureLogging:
    """Test logging setup"""

    @pytest.fixture
    def log_buffer(self):
        buffer = io.StringIO()
        yield buffer
        logger.remove()
        logger.add(sys.stderr)

    def test_text_format(self, log_buffer):
        configure_logging(level="INFO", sink=log_buffer)
        logger.bind(stage="unit").info("hello from huematch")
        line = log_buffer.getvalue().strip().splitlines()[-1]
        assert "| INFO |" in line
        assert "hello from huematch" in line
        assert "'stage': 'unit'" in line

    def test_level_filters(self, log_buffer):
        configure_logging(level="WARNING", sink=log_buffer)
        logger.info("quiet")
        logger.warning("loud")
        output = log_buffer.getvalue()
        assert "quiet" not in output
        assert "loud" in output

    def test_serialized(self, log_buffer):
        configure_logging(level="INFO", serialize=True, sink=log_buffer)
        logger.info("structured")
        record = json.loads(log_buffer.getvalue().strip().splitlines()[-1])
        assert record["record"]["message"] == "structured"

    def test_replaces_existing_handlers(self, log_buffer):
        first = io.StringIO()
        configure_logging(level="INFO", sink=first)
        configure_logging(level="INFO", sink=log_buffer)
        logger.info("only once")
        assert "only once" not in first.getvalue()
        assert "only once" in log_buffer.getvalue()
