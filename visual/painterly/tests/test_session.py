import threading
import time

import numpy as np
import pytest

from visual.painterly import FlatRectParams, InvalidParameterError, PainterlyError, RenderParams, StyleType
from visual.painterly.session import PaintSession


@pytest.fixture
def session():
    return PaintSession(StyleType.FLAT_RECT, params=RenderParams(seed=11))


# Test 1: Nothing happens without an image
def test_refresh_without_image(session):
    assert session.refresh() is None
    assert session.update(density=2.0) is None
    assert session.result is None


# Test 2: Setting an image renders it
def test_set_image_renders(session, small_image):
    result = session.set_image(small_image)

    assert result is not None
    assert result.size == small_image.size
    assert session.result is result


# Test 3: Parameter change re-renders
def test_update_rerenders(session, small_image):
    session.set_image(small_image)
    result = session.update(density=0)

    assert session.params.density == 0
    assert session.result is result
    assert not np.asarray(result).any()


# Test 4: Same state, same pixels
def test_refresh_is_idempotent_with_seed(session, small_image):
    first = session.set_image(small_image)
    second = session.refresh()
    np.testing.assert_array_equal(np.asarray(first), np.asarray(second))


# Test 5: Switching style
def test_set_style(session, small_image):
    session.set_image(small_image)
    session.set_style(StyleType.DAB)
    assert session.style_type == StyleType.DAB
    assert session.style_params is None

    result = session.set_style(StyleType.FLAT_RECT, FlatRectParams(coverage=0.0))
    assert not np.asarray(result).any()


# Test 6: Export needs a rendering
def test_export_png(session, small_image):
    with pytest.raises(PainterlyError):
        session.export_png()

    session.set_image(small_image)
    assert session.export_png()[:4] == b"\x89PNG"


# Test 7: A pass superseded while queued is dropped
def test_superseded_pass_is_dropped(session, small_image):
    session.set_image(small_image)
    outcomes = {}

    def run(name, density):
        outcomes[name] = session.update(density=density)

    def wait_for(predicate):
        deadline = time.monotonic() + 5
        while not predicate():
            assert time.monotonic() < deadline
            time.sleep(0.001)

    # Hold the render lock so both passes queue behind it
    session._render_lock.acquire()
    first = threading.Thread(target=run, args=("first", 0))
    first.start()
    wait_for(lambda: session._inflight is not None)
    stale = session._inflight

    second = threading.Thread(target=run, args=("second", 0.5))
    second.start()
    wait_for(lambda: session._inflight is not stale)

    session._render_lock.release()
    first.join()
    second.join()

    assert stale.is_set()
    assert outcomes["first"] is None
    assert outcomes["second"] is not None
    assert session.result is outcomes["second"]
    assert session.params.density == 0.5


# Test 8: Rejected update keeps the previous parameters
def test_rejected_update_keeps_params(session, small_image, noise_image):
    session.set_image(small_image)
    before = session.params

    with pytest.raises(InvalidParameterError):
        session.update(density=-1)

    assert session.params is before
    result = session.set_image(noise_image)
    assert result is not None
    assert result.size == noise_image.size


# Test 9: Clearing the image drops the old rendering
def test_clear_image_drops_result(session, small_image):
    session.set_image(small_image)
    assert session.result is not None

    assert session.set_image(None) is None
    assert session.result is None
    with pytest.raises(PainterlyError):
        session.export_png()
