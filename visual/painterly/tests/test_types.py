import logging
import math

import pytest

from visual.painterly.errors import InvalidParameterError
from visual.painterly.types import (
    MAX_BASE_SIZE,
    MAX_DENSITY,
    BristleParams,
    DabParams,
    FlatRectParams,
    RenderParams,
    StyleType,
    all_style_names,
    default_style_params,
    get_style_name,
    parse_style_name,
)


# Test 1: Style names round trip
def test_style_names():
    assert all_style_names() == ["bristle", "dab", "flat-rect"]
    for style_type in StyleType:
        assert parse_style_name(get_style_name(style_type)) == style_type


# Test 2: Unknown names list the valid ones
def test_parse_style_name_invalid():
    with pytest.raises(ValueError, match="bristle, dab, flat-rect"):
        parse_style_name("oil")


# Test 3: Defaults per style
def test_default_style_params():
    assert isinstance(default_style_params(StyleType.BRISTLE), BristleParams)
    assert isinstance(default_style_params(StyleType.DAB), DabParams)
    assert isinstance(default_style_params(StyleType.FLAT_RECT), FlatRectParams)
    assert default_style_params(StyleType.BRISTLE).coverage == 0.16
    assert default_style_params(StyleType.DAB).coverage == 0.12
    assert default_style_params(StyleType.FLAT_RECT).coverage == 0.25


# Test 4: Style params validated on construction
@pytest.mark.parametrize(
    "factory",
    [
        lambda: BristleParams(coverage=-0.1),
        lambda: BristleParams(size_range=(1.5, 0.8)),
        lambda: BristleParams(bristle_range=(0, 3)),
        lambda: DabParams(aspect_range=(1.0, 0.5)),
        lambda: DabParams(dab_range=(0, 0)),
        lambda: FlatRectParams(alpha_range=(0.9, 0.1)),
    ],
)
def test_style_params_invalid(factory):
    with pytest.raises(InvalidParameterError):
        factory()


# Test 5: Valid params pass through
def test_render_params_validated_passthrough():
    params = RenderParams(density=2.5, base_size=6.0, seed=9)
    assert params.validated() == params


# Test 6: Zero density allowed
def test_render_params_zero_density():
    assert RenderParams(density=0).validated().density == 0


# Test 7: Non-positive or non-finite values rejected
@pytest.mark.parametrize(
    "changes",
    [
        {"density": -0.5},
        {"density": math.nan},
        {"density": math.inf},
        {"base_size": 0},
        {"base_size": -1},
        {"base_size": math.nan},
        {"levels": 1},
        {"max_side": 0},
    ],
)
def test_render_params_invalid(changes):
    with pytest.raises(InvalidParameterError):
        RenderParams(**changes).validated()


# Test 8: Oversized values clamped with a warning
def test_render_params_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        params = RenderParams(density=1e6, base_size=1e6).validated()

    assert params.density == MAX_DENSITY
    assert params.base_size == MAX_BASE_SIZE
    assert "clamped" in caplog.text


# Test 9: Invalid params are still ValueErrors
def test_invalid_parameter_is_value_error():
    assert issubclass(InvalidParameterError, ValueError)
