"""Interactive render session.

Holds the state a front end edits (source image, style, parameters) and
re-renders whenever it changes. Render passes never interleave: a new pass
cancels the one in flight and waits for it to stop.
"""

import logging
import threading
from dataclasses import replace
from typing import Any, Optional

from PIL import Image

from . import render
from .errors import PainterlyError, RenderCancelledError
from .image_io import encode_png
from .types import RenderParams, StyleParams, StyleType


class PaintSession:
    """
    Render state owned by one front end.

    Args:
        style_type: Initial stroke style
        style_params: Initial style parameters (None for the style's defaults)
        params: Initial render parameters (None for defaults)
    """

    def __init__(
        self,
        style_type: StyleType = StyleType.BRISTLE,
        style_params: Optional[StyleParams] = None,
        params: Optional[RenderParams] = None,
    ):
        self.style_type = style_type
        self.style_params = style_params
        self.params = params if params is not None else RenderParams()
        self.image: Optional[Image.Image] = None
        self.result: Optional[Image.Image] = None

        self._state_lock = threading.Lock()
        self._render_lock = threading.Lock()
        self._inflight: Optional[threading.Event] = None

    def set_image(self, image: Optional[Image.Image]) -> Optional[Image.Image]:
        """
        Replace the source image and re-render.

        Args:
            image: New source image, or None to clear the session

        Returns:
            The new rendering, or None if image is None
        """
        with self._state_lock:
            self.image = image
        return self.refresh()

    def set_style(self, style_type: StyleType, style_params: Optional[StyleParams] = None) -> Optional[Image.Image]:
        """
        Switch stroke style and re-render.

        Args:
            style_type: Stroke style to use from now on
            style_params: Parameters for that style (None for defaults)

        Returns:
            The new rendering, or None if there is no image
        """
        with self._state_lock:
            self.style_type = style_type
            self.style_params = style_params
        return self.refresh()

    def update(self, **changes: Any) -> Optional[Image.Image]:
        """
        Replace render parameters (density, base_size, seed, ...) and re-render.
        Rejected changes leave the current parameters in place.

        Raises:
            InvalidParameterError: If the changed parameters are out of range
        """
        with self._state_lock:
            params = replace(self.params, **changes)
            params.validated()
            self.params = params
        return self.refresh()

    def refresh(self) -> Optional[Image.Image]:
        """
        Render the current state.

        Returns:
            The new rendering, or None if there is no image or this pass
            was superseded by a newer one
        """
        with self._state_lock:
            if self._inflight is not None:
                self._inflight.set()
            image, style_type, style_params, params = self.image, self.style_type, self.style_params, self.params
            if image is None:
                self._inflight = None
                self.result = None
                return None
            cancel = threading.Event()
            self._inflight = cancel

        with self._render_lock:
            if cancel.is_set():
                return None
            try:
                result = render(image, style_type, style_params, params, cancel=cancel)
            except RenderCancelledError as e:
                logging.info("Render superseded: %s", e)
                return None

        with self._state_lock:
            if self._inflight is not cancel:
                return None
            self._inflight = None
            self.result = result
        return result

    def export_png(self) -> bytes:
        """PNG bytes of the latest rendering."""
        if self.result is None:
            raise PainterlyError("Nothing has been rendered yet")
        return encode_png(self.result)
