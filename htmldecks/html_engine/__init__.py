"""HTML engine: slide composers, navigation controller and the document shell."""

from .document import render, render_slides
from .navigation import (
    NavigationController,
    NavigationState,
    Intersection,
    KeyPress,
    DotClick,
    Swipe,
    ScrollTo,
    SetProgress,
    SetCounter,
    ActivateDot,
    RestartAnimation,
    transition,
    format_counter,
    navigation_script,
)

__all__ = [
    "render",
    "render_slides",
    "NavigationController",
    "NavigationState",
    "Intersection",
    "KeyPress",
    "DotClick",
    "Swipe",
    "ScrollTo",
    "SetProgress",
    "SetCounter",
    "ActivateDot",
    "RestartAnimation",
    "transition",
    "format_counter",
    "navigation_script",
]
