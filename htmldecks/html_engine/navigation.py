"""Navigation controller for emitted decks.

The controller is a pure state machine: ``transition(state, event)``
returns the next NavigationState plus the UI effects to apply. The
Python implementation is the reference used by tests; ``navigation_script``
emits the same machine as the inline <script> that runs in the browser.

Explicit navigation (keys, swipes, dot clicks) only requests a scroll.
``current`` changes when the scrolled-to slide reports itself visible
through an Intersection event, so the two paths never disagree.
"""

import json
import logging
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from htmldecks.schemas.theme_schema import NavigationConfig

logger = logging.getLogger(__name__)

NEXT_KEYS = ("ArrowDown", "ArrowRight", "PageDown", " ")
PREVIOUS_KEYS = ("ArrowUp", "ArrowLeft", "PageUp")
FIRST_KEYS = ("Home",)
LAST_KEYS = ("End",)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

class NavigationState(BaseModel):
    """Which slide is presented. Immutable; transitions build a new one."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(default=0, ge=0)
    total: int = Field(ge=1)

    @model_validator(mode="after")
    def _current_in_range(self) -> "NavigationState":
        if self.current >= self.total:
            raise ValueError(f"current ({self.current}) must be below total ({self.total})")
        return self

    def contains(self, index: int) -> bool:
        return 0 <= index < self.total


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class Intersection(BaseModel):
    """A slide's visibility changed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["intersection"] = "intersection"
    index: int
    is_intersecting: bool = True
    ratio: float = 1.0


class KeyPress(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["key"] = "key"
    key: str


class DotClick(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["dot"] = "dot"
    index: int


class Swipe(BaseModel):
    """A completed vertical touch gesture, in logical pixels."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["swipe"] = "swipe"
    start_y: float
    end_y: float

    @property
    def delta(self) -> float:
        """Positive when the finger moved up (towards the next slide)."""
        return self.start_y - self.end_y


NavigationEvent = Union[Intersection, KeyPress, DotClick, Swipe]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

class ScrollTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["scroll"] = "scroll"
    index: int


class SetProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["progress"] = "progress"
    percent: float


class SetCounter(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["counter"] = "counter"
    text: str


class ActivateDot(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["dot"] = "dot"
    index: int


class RestartAnimation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["animation"] = "animation"
    index: int


NavigationEffect = Union[ScrollTo, SetProgress, SetCounter, ActivateDot, RestartAnimation]


# ---------------------------------------------------------------------------
# Derived UI values
# ---------------------------------------------------------------------------

def progress_percent(current: int, total: int) -> float:
    """Progress bar width: (current + 1) / total, as a percentage."""
    return (current + 1) / total * 100


def format_counter(current: int, total: int, config: Optional[NavigationConfig] = None) -> str:
    """Counter text for zero-based ``current`` of ``total`` slides."""
    config = config or NavigationConfig()

    def _fmt(n: int) -> str:
        return f"{n:02d}" if config.counter_padded else str(n)

    return (
        config.counter_format
        .replace("{current}", _fmt(current + 1))
        .replace("{total}", _fmt(total))
    )


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _request_scroll(state: NavigationState, target: int) -> list[NavigationEffect]:
    if not state.contains(target):
        return []
    return [ScrollTo(index=target)]


def _present(state: NavigationState, index: int, config: NavigationConfig) -> list[NavigationEffect]:
    return [
        SetProgress(percent=progress_percent(index, state.total)),
        SetCounter(text=format_counter(index, state.total, config)),
        ActivateDot(index=index),
        RestartAnimation(index=index),
    ]


def transition(
    state: NavigationState,
    event: NavigationEvent,
    config: Optional[NavigationConfig] = None,
) -> tuple[NavigationState, list[NavigationEffect]]:
    """Apply one event. Returns the new state and the effects to perform.

    Events that do not apply (a key nobody binds, a swipe that is too short,
    an index outside the deck, a slide below the visibility threshold)
    return the same state and no effects.
    """
    config = config or NavigationConfig()

    if isinstance(event, Intersection):
        if not event.is_intersecting or event.ratio < config.threshold:
            return state, []
        if not state.contains(event.index):
            logger.debug(f"Ignoring intersection for slide {event.index} of {state.total}")
            return state, []
        new_state = state.model_copy(update={"current": event.index})
        return new_state, _present(new_state, event.index, config)

    if isinstance(event, KeyPress):
        if event.key in NEXT_KEYS:
            return state, _request_scroll(state, state.current + 1)
        if event.key in PREVIOUS_KEYS:
            return state, _request_scroll(state, state.current - 1)
        if event.key in FIRST_KEYS:
            return state, _request_scroll(state, 0)
        if event.key in LAST_KEYS:
            return state, _request_scroll(state, state.total - 1)
        return state, []

    if isinstance(event, Swipe):
        if abs(event.delta) <= config.swipe_distance:
            return state, []
        step = 1 if event.delta > 0 else -1
        return state, _request_scroll(state, state.current + step)

    if isinstance(event, DotClick):
        return state, _request_scroll(state, event.index)

    raise TypeError(f"Unsupported navigation event: {type(event).__name__}")


class NavigationController:
    """Owns the navigation state for one document instance."""

    def __init__(self, total: int, config: Optional[NavigationConfig] = None):
        self.config = config or NavigationConfig()
        self.state = NavigationState(current=0, total=total)

    @property
    def current(self) -> int:
        return self.state.current

    def initial_effects(self) -> list[NavigationEffect]:
        """Effects that describe the document as first emitted."""
        return _present(self.state, self.state.current, self.config)

    def dispatch(self, event: NavigationEvent) -> list[NavigationEffect]:
        self.state, effects = transition(self.state, event, self.config)
        return effects


# ---------------------------------------------------------------------------
# Browser script
# ---------------------------------------------------------------------------

_SCRIPT_TEMPLATE = """(function() {
  const config = __CONFIG__;
  const slides = document.querySelectorAll('.slide');
  const dots = document.querySelectorAll('.nav-dot');
  const progress = document.getElementById('progress');
  const counter = document.getElementById('slideCounter');
  let state = { current: 0, total: slides.length };

  function fmt(n) {
    return config.counterPadded ? String(n).padStart(2, '0') : String(n);
  }

  function counterText(index, total) {
    return config.counterFormat
      .split('{current}').join(fmt(index + 1))
      .split('{total}').join(fmt(total));
  }

  function contains(s, index) {
    return Number.isInteger(index) && index >= 0 && index < s.total;
  }

  function request(s, target) {
    return contains(s, target) ? [{ kind: 'scroll', index: target }] : [];
  }

  function present(s, index) {
    return [
      { kind: 'progress', percent: (index + 1) / s.total * 100 },
      { kind: 'counter', text: counterText(index, s.total) },
      { kind: 'dot', index: index },
      { kind: 'animation', index: index }
    ];
  }

  function transition(s, event) {
    switch (event.kind) {
      case 'intersection':
        if (!event.isIntersecting || event.ratio < config.threshold) return [s, []];
        if (!contains(s, event.index)) return [s, []];
        const next = { current: event.index, total: s.total };
        return [next, present(next, event.index)];
      case 'key':
        if (config.nextKeys.includes(event.key)) return [s, request(s, s.current + 1)];
        if (config.previousKeys.includes(event.key)) return [s, request(s, s.current - 1)];
        if (config.firstKeys.includes(event.key)) return [s, request(s, 0)];
        if (config.lastKeys.includes(event.key)) return [s, request(s, s.total - 1)];
        return [s, []];
      case 'swipe':
        const delta = event.startY - event.endY;
        if (Math.abs(delta) <= config.swipeDistance) return [s, []];
        return [s, request(s, s.current + (delta > 0 ? 1 : -1))];
      case 'dot':
        return [s, request(s, event.index)];
    }
    return [s, []];
  }

  function perform(effect) {
    switch (effect.kind) {
      case 'scroll':
        slides[effect.index].scrollIntoView({ behavior: 'smooth' });
        break;
      case 'progress':
        if (progress) progress.style.width = effect.percent + '%';
        break;
      case 'counter':
        if (counter) counter.textContent = effect.text;
        break;
      case 'dot':
        dots.forEach((d, i) => d.classList.toggle('nav-dot--active', i === effect.index));
        break;
      case 'animation':
        const content = slides[effect.index].querySelector('.slide__content');
        if (content) {
          content.style.animation = 'none';
          content.offsetHeight;
          content.style.animation = '';
        }
        break;
    }
  }

  function dispatch(event) {
    const result = transition(state, event);
    state = result[0];
    result[1].forEach(perform);
  }

  if (!slides.length) return;

  const observer = new IntersectionObserver(entries => {
    entries.forEach(e => dispatch({
      kind: 'intersection',
      index: parseInt(e.target.dataset.index, 10),
      isIntersecting: e.isIntersecting,
      ratio: e.intersectionRatio
    }));
  }, { threshold: config.threshold });
  slides.forEach(s => observer.observe(s));

  dots.forEach(dot => {
    dot.addEventListener('click', () => {
      dispatch({ kind: 'dot', index: parseInt(dot.dataset.index, 10) });
    });
  });

  const handledKeys = config.nextKeys.concat(config.previousKeys, config.firstKeys, config.lastKeys);
  document.addEventListener('keydown', e => {
    if (!handledKeys.includes(e.key)) return;
    e.preventDefault();
    dispatch({ kind: 'key', key: e.key });
  });

  let startY = 0;
  document.addEventListener('touchstart', e => { startY = e.touches[0].clientY; }, { passive: true });
  document.addEventListener('touchend', e => {
    dispatch({ kind: 'swipe', startY: startY, endY: e.changedTouches[0].clientY });
  });
})();"""


def script_config(config: Optional[NavigationConfig] = None) -> dict:
    """The configuration object embedded in the browser script."""
    config = config or NavigationConfig()
    return {
        "threshold": config.threshold,
        "swipeDistance": config.swipe_distance,
        "counterFormat": config.counter_format,
        "counterPadded": config.counter_padded,
        "nextKeys": list(NEXT_KEYS),
        "previousKeys": list(PREVIOUS_KEYS),
        "firstKeys": list(FIRST_KEYS),
        "lastKeys": list(LAST_KEYS),
    }


def navigation_script(config: Optional[NavigationConfig] = None) -> str:
    """Return the inline JavaScript implementing the controller."""
    payload = json.dumps(script_config(config), sort_keys=True).replace("</", "<\\/")
    return _SCRIPT_TEMPLATE.replace("__CONFIG__", payload)
