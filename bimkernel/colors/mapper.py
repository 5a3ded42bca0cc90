"""ColorMapper — colour each distinct group key.

Two modes:

* discrete: the i-th key takes the i-th palette colour; keys past the end
  of the palette get no colour and are listed in ``missing``.
* gradient: keys are spread linearly from a start colour to an end colour;
  the first key gets exactly *start*, the last exactly *end*.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from bimkernel.config import GRADIENT_END, GRADIENT_START
from bimkernel.models.entity import RGB, ColorAssignment

logger = logging.getLogger(__name__)


def assign_discrete(keys: Iterable[str], palette: Sequence[Any]) -> ColorAssignment:
    """Pair keys with palette colours by position."""
    colors = [RGB.coerce(c) for c in palette]
    result = ColorAssignment()
    for i, key in enumerate(keys):
        if i < len(colors):
            result.colors[key] = colors[i]
        else:
            result.missing.append(key)

    if result.missing:
        logger.warning(
            "Palette has %d colours for %d keys; %d keys left uncoloured",
            len(colors), len(colors) + len(result.missing), len(result.missing),
        )
    return result


def interpolate(start: RGB, end: RGB, ratio: float) -> RGB:
    """Linear blend of *start* and *end*, each channel truncated toward zero."""
    return RGB.of(
        int(start.red + (end.red - start.red) * ratio),
        int(start.green + (end.green - start.green) * ratio),
        int(start.blue + (end.blue - start.blue) * ratio),
    )


def assign_gradient(
    keys: Iterable[str],
    start: Any = GRADIENT_START,
    end: Any = GRADIENT_END,
) -> ColorAssignment:
    """Spread keys evenly along the gradient *start* -> *end*."""
    start = RGB.coerce(start)
    end = RGB.coerce(end)
    ordered = list(keys)
    n = len(ordered)

    result = ColorAssignment()
    for i, key in enumerate(ordered):
        ratio = i / (n - 1) if n > 1 else 0.0
        result.colors[key] = interpolate(start, end, ratio)
    return result


class ColorMapper:
    """Caller-level switch between discrete and gradient colouring.

    Parameters
    ----------
    palette:
        Discrete colours.  When given, discrete mode is used.
    start, end:
        Gradient endpoints, used when no palette is given.
    """

    def __init__(
        self,
        palette: Sequence[Any] | None = None,
        start: Any = GRADIENT_START,
        end: Any = GRADIENT_END,
    ) -> None:
        self.palette = [RGB.coerce(c) for c in palette] if palette is not None else None
        self.start = RGB.coerce(start)
        self.end = RGB.coerce(end)

    @property
    def mode(self) -> str:
        return "discrete" if self.palette is not None else "gradient"

    def assign(self, keys: Iterable[str]) -> ColorAssignment:
        if self.palette is not None:
            return assign_discrete(keys, self.palette)
        return assign_gradient(keys, self.start, self.end)
