"""Tests for the navigation state machine and its browser script."""

import json

import pytest
from pydantic import ValidationError

from htmldecks.html_engine.navigation import (
    ActivateDot,
    DotClick,
    Intersection,
    KeyPress,
    NavigationController,
    NavigationState,
    RestartAnimation,
    ScrollTo,
    SetCounter,
    SetProgress,
    Swipe,
    format_counter,
    navigation_script,
    progress_percent,
    script_config,
    transition,
)
from htmldecks.schemas.theme_schema import NavigationConfig


def _state(current=0, total=6):
    return NavigationState(current=current, total=total)


class TestNavigationState:
    def test_bounds(self):
        with pytest.raises(ValidationError):
            NavigationState(current=3, total=3)
        with pytest.raises(ValidationError):
            NavigationState(current=0, total=0)
        with pytest.raises(ValidationError):
            NavigationState(current=-1, total=2)

    def test_immutable(self):
        state = _state()
        with pytest.raises(ValidationError):
            state.current = 2


class TestKeys:
    @pytest.mark.parametrize("key", ["ArrowDown", "ArrowRight", "PageDown", " "])
    def test_next_keys(self, key):
        state, effects = transition(_state(2), KeyPress(key=key))
        assert effects == [ScrollTo(index=3)]
        assert state.current == 2

    @pytest.mark.parametrize("key", ["ArrowUp", "ArrowLeft", "PageUp"])
    def test_previous_keys(self, key):
        _, effects = transition(_state(2), KeyPress(key=key))
        assert effects == [ScrollTo(index=1)]

    def test_next_clamped_at_end(self):
        state, effects = transition(_state(5), KeyPress(key="ArrowDown"))
        assert state.current == 5
        assert effects == []

    def test_previous_clamped_at_start(self):
        _, effects = transition(_state(0), KeyPress(key="ArrowUp"))
        assert effects == []

    def test_home_and_end(self):
        assert transition(_state(3), KeyPress(key="Home"))[1] == [ScrollTo(index=0)]
        assert transition(_state(3), KeyPress(key="End"))[1] == [ScrollTo(index=5)]

    def test_unbound_key(self):
        state = _state(1)
        assert transition(state, KeyPress(key="q")) == (state, [])


class TestSwipe:
    def test_below_threshold(self):
        _, effects = transition(_state(1), Swipe(start_y=300, end_y=251))
        assert effects == []

    def test_exactly_threshold(self):
        _, effects = transition(_state(1), Swipe(start_y=300, end_y=250))
        assert effects == []

    def test_above_threshold_next(self):
        _, effects = transition(_state(1), Swipe(start_y=300, end_y=249))
        assert effects == [ScrollTo(index=2)]

    def test_above_threshold_previous(self):
        _, effects = transition(_state(1), Swipe(start_y=200, end_y=251))
        assert effects == [ScrollTo(index=0)]

    def test_swipe_clamped(self):
        _, effects = transition(_state(5), Swipe(start_y=400, end_y=100))
        assert effects == []

    def test_custom_distance(self):
        config = NavigationConfig(swipe_distance=100)
        _, effects = transition(_state(1), Swipe(start_y=300, end_y=249), config)
        assert effects == []


class TestIntersection:
    def test_becomes_current(self):
        state, effects = transition(_state(0, 3), Intersection(index=2, ratio=0.6))
        assert state.current == 2
        assert effects == [
            SetProgress(percent=100.0),
            SetCounter(text="3 / 3"),
            ActivateDot(index=2),
            RestartAnimation(index=2),
        ]

    def test_below_threshold_ignored(self):
        state = _state(0, 3)
        assert transition(state, Intersection(index=1, ratio=0.4)) == (state, [])

    def test_threshold_is_inclusive(self):
        state, _ = transition(_state(0, 3), Intersection(index=1, ratio=0.5))
        assert state.current == 1

    def test_not_intersecting_ignored(self):
        state = _state(0, 3)
        assert transition(state, Intersection(index=1, is_intersecting=False, ratio=1.0)) == (state, [])

    def test_out_of_range_ignored(self):
        state = _state(0, 3)
        assert transition(state, Intersection(index=7)) == (state, [])
        assert transition(state, Intersection(index=-1)) == (state, [])

    def test_duplicate_is_idempotent(self):
        first_state, first_effects = transition(_state(0, 4), Intersection(index=2))
        second_state, second_effects = transition(first_state, Intersection(index=2))
        assert second_state == first_state
        assert second_effects == first_effects


class TestDotClick:
    def test_valid(self):
        assert transition(_state(0), DotClick(index=4))[1] == [ScrollTo(index=4)]

    def test_invalid(self):
        assert transition(_state(0), DotClick(index=6))[1] == []


class TestCounterAndProgress:
    def test_default_format(self):
        assert format_counter(0, 6) == "1 / 6"

    def test_padded(self):
        config = NavigationConfig(counter_padded=True)
        assert format_counter(2, 12, config) == "03 / 12"

    def test_custom_formats(self):
        assert format_counter(0, 6, NavigationConfig(counter_format="page {current} of {total}")) == "page 1 of 6"
        bracket = NavigationConfig(counter_format="[{current}/{total}]", counter_padded=True)
        assert format_counter(0, 6, bracket) == "[01/06]"

    def test_progress(self):
        assert progress_percent(0, 4) == 25.0
        assert progress_percent(3, 4) == 100.0
        assert progress_percent(0, 3) == pytest.approx(33.333, rel=1e-3)


class TestController:
    def test_dispatch_sequence(self):
        controller = NavigationController(total=3)
        assert controller.dispatch(KeyPress(key="ArrowDown")) == [ScrollTo(index=1)]
        # Scrolling only changes current once the slide reports itself visible
        assert controller.current == 0
        controller.dispatch(Intersection(index=1))
        assert controller.current == 1
        controller.dispatch(Intersection(index=2))
        assert controller.dispatch(KeyPress(key="ArrowRight")) == []
        assert controller.current == 2

    def test_initial_effects(self):
        controller = NavigationController(total=4, config=NavigationConfig(counter_padded=True))
        effects = controller.initial_effects()
        assert SetCounter(text="01 / 04") in effects
        assert ActivateDot(index=0) in effects


class TestScript:
    def test_config_embedded(self):
        config = NavigationConfig(threshold=0.6, swipe_distance=80, counter_format="page {current} of {total}")
        script = navigation_script(config)
        assert "__CONFIG__" not in script
        start = script.index("const config = ") + len("const config = ")
        end = script.index(";\n", start)
        embedded = json.loads(script[start:end])
        assert embedded == script_config(config)
        assert embedded["threshold"] == 0.6
        assert embedded["swipeDistance"] == 80
        assert " " in embedded["nextKeys"]

    def test_script_wires_inputs(self):
        script = navigation_script()
        for needle in ("IntersectionObserver", "keydown", "touchstart", "touchend", "scrollIntoView", "nav-dot--active"):
            assert needle in script

    def test_no_closing_tag_injection(self):
        config = NavigationConfig(counter_format="</script>{current}")
        assert "</script>" not in navigation_script(config)
