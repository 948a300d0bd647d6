"""glide-tween - Easing curves and multi-dimensional tween animators."""
from __future__ import annotations

from glide_tween.animator import Animator, Animator2D, AnimatorConfig
from glide_tween.easing import DEFAULT_EASING, EASINGS, easing_names, get_easing

__all__ = [
    "Animator",
    "Animator2D",
    "AnimatorConfig",
    "DEFAULT_EASING",
    "EASINGS",
    "easing_names",
    "get_easing",
]
