"""Tests for the Animator state machine."""
import pytest

from glide import ConfigError, DimensionMismatchError, ManualClock
from glide_tween import Animator, Animator2D, AnimatorConfig, easing_names


def make_linear(values=None, end_values=None, duration=1000, clock=None):
    config = AnimatorConfig(
        values=values if values is not None else {"x": 0},
        end_values=end_values if end_values is not None else {"x": 100},
        duration=duration,
        easing="easeLinear",
    )
    return Animator(config, clock=clock)


class TestConstruction:
    """Defaults, overrides and construction errors."""

    def test_defaults(self):
        """No config gives one x dimension at 0, 1000 ms, easeInOutSine."""
        anim = Animator()
        assert anim.get_current_values() == {"x": 0.0}
        assert anim.get_start_values() == {"x": 0.0}
        assert anim.get_end_values() == {"x": 0.0}
        assert anim.duration == 1000
        assert anim.easing_name == "easeInOutSine"
        assert anim.is_running is False

    def test_end_values_default_to_values(self):
        """Omitting end_values targets the start values."""
        anim = Animator(values={"w": 5, "h": 7})
        assert anim.get_end_values() == {"w": 5, "h": 7}

    def test_keyword_overrides(self):
        """Keyword overrides replace config fields."""
        anim = Animator(
            AnimatorConfig(values={"a": 1}),
            end_values={"a": 2},
            duration=10,
            easing="easeLinear",
        )
        assert anim.get_end_values() == {"a": 2}
        assert anim.duration == 10
        assert anim.easing_name == "easeLinear"

    def test_dimension_and_keys(self):
        """dimension counts keys; dimension_keys keeps insertion order."""
        anim = Animator(values={"y": 1, "x": 2, "z": 3})
        assert anim.dimension == 3
        assert anim.dimension_keys == ("y", "x", "z")

    def test_end_values_follow_start_key_order(self):
        """End values are stored in the start values' key order."""
        anim = Animator(values={"x": 0, "y": 0}, end_values={"y": 1, "x": 2})
        assert list(anim.get_end_values()) == ["x", "y"]

    def test_non_mapping_values_raise(self):
        """values must be a mapping."""
        with pytest.raises(ConfigError, match="values must be a mapping"):
            Animator(values=[0, 1])

    def test_non_mapping_end_values_raise(self):
        """end_values must be a mapping."""
        with pytest.raises(ConfigError, match="end_values must be a mapping"):
            Animator(values={"x": 0}, end_values=(1,))

    def test_mismatched_end_keys_raise(self):
        """end_values must cover exactly the same keys as values."""
        with pytest.raises(DimensionMismatchError):
            Animator(values={"x": 0, "y": 0}, end_values={"x": 1})
        with pytest.raises(DimensionMismatchError):
            Animator(values={"x": 0}, end_values={"y": 1})

    def test_non_numeric_duration_raises(self):
        """duration must be a number."""
        with pytest.raises(ConfigError, match="duration must be a number"):
            Animator(duration="fast")

    def test_negative_duration_raises(self):
        """duration must be non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            Animator(duration=-1)

    def test_unknown_easing_falls_back(self):
        """An unknown curve name is not an error; the default is used."""
        seen = []
        anim = Animator(easing="easeSideways", on_unknown_easing=seen.append)
        assert anim.easing_name == "easeInOutSine"
        assert seen == ["easeSideways"]

    def test_config_values_are_copied(self):
        """Later mutation of the caller's dicts does not leak in."""
        values = {"x": 0}
        anim = Animator(values=values, end_values={"x": 10})
        values["x"] = 99
        assert anim.get_start_values() == {"x": 0}

    def test_repr(self):
        """repr names keys, curve and running state."""
        anim = Animator(values={"x": 0}, easing="easeLinear")
        assert repr(anim) == "Animator(keys=['x'], easing='easeLinear', running=False)"


class TestLinearScenario:
    """Single-dimension linear animation from 0 to 100 over 1000 ms."""

    def test_halfway(self):
        """update(t0 + 500) lands at 50."""
        anim = make_linear()
        anim.start(now=2000)
        anim.update(now=2500)
        assert anim.get_current_values() == {"x": 50.0}
        assert anim.is_running is True

    def test_completion(self):
        """update(t0 + 1000) lands at 100 and stops."""
        anim = make_linear()
        anim.start(now=2000)
        anim.update(now=2500)
        anim.update(now=3000)
        assert anim.get_current_values() == {"x": 100}
        assert anim.is_running is False

    def test_overshooting_time_clamps(self):
        """Sampling after the end still gives the end value."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=5000)
        assert anim.get_current_values() == {"x": 100}

    def test_sampling_before_start_clamps(self):
        """A sample earlier than start() clamps progress to 0."""
        anim = make_linear()
        anim.start(now=1000)
        anim.update(now=500)
        assert anim.get_current_values() == {"x": 0}
        assert anim.is_running is True

    def test_update_returns_copy_of_current(self):
        """update() returns the current values as a fresh dict."""
        anim = make_linear()
        anim.start(now=0)
        result = anim.update(now=250)
        assert result == {"x": 25.0}
        result["x"] = -1
        assert anim.get_current_values() == {"x": 25.0}

    def test_uses_clock_when_now_omitted(self):
        """start()/update() read the injected clock by default."""
        clock = ManualClock(10_000)
        anim = make_linear(clock=clock)
        anim.start()
        clock.advance(250)
        anim.update()
        assert anim.get_current_values() == {"x": 25.0}
        clock.advance(750)
        anim.update()
        assert anim.get_current_values() == {"x": 100}
        assert not anim.is_running


class TestCompletion:
    """Commit-on-complete and idempotence after completion."""

    @pytest.mark.parametrize("easing", easing_names())
    def test_every_curve_lands_exactly_on_end_values(self, easing):
        """At percent 1 every dimension equals its end value."""
        anim = Animator(
            values={"x": 0.1, "y": -3.3, "z": 1e6},
            end_values={"x": 0.3, "y": 7.7, "z": -2.5},
            duration=400,
            easing=easing,
        )
        anim.start(now=0)
        anim.update(now=200)
        anim.update(now=400)
        assert anim.get_current_values() == {"x": 0.3, "y": 7.7, "z": -2.5}
        assert anim.is_running is False

    def test_completion_commits_start_values(self):
        """After completion start values equal the resting position."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=1000)
        assert anim.get_start_values() == {"x": 100}

    def test_restart_after_completion_does_not_move(self):
        """start() without retargeting produces no motion."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=1000)
        anim.start(now=2000)
        anim.update(now=2500)
        assert anim.get_current_values() == {"x": 100}

    def test_updates_after_completion_are_noops(self):
        """Further update() calls leave state untouched."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=1000)
        anim.set_end_values({"x": 500})
        anim.update(now=1500)
        anim.update(now=9999)
        assert anim.get_current_values() == {"x": 100}
        assert anim.is_running is False

    def test_commit_then_retarget_chain(self):
        """Two dimensions: complete, retarget, restart, complete again."""
        anim = Animator(
            values={"x": 0, "y": 10},
            end_values={"x": 10, "y": 20},
            duration=1000,
            easing="easeInOutCubic",
        )
        anim.start(now=0)
        anim.update(now=1000)
        assert anim.get_current_values() == {"x": 10, "y": 20}

        anim.set_end_values({"x": 30, "y": 40})
        anim.start(now=5000)
        anim.update(now=5500)
        assert anim.get_current_values() == pytest.approx({"x": 20, "y": 30})
        anim.update(now=6000)
        assert anim.get_current_values() == {"x": 30, "y": 40}
        assert anim.get_start_values() == {"x": 30, "y": 40}

    def test_zero_duration_completes_immediately(self):
        """A 0 ms animation finishes on the first update."""
        anim = make_linear(duration=0)
        anim.start(now=100)
        anim.update(now=100)
        assert anim.get_current_values() == {"x": 100}
        assert not anim.is_running

    def test_zero_duration_before_start_time_waits(self):
        """A 0 ms animation sampled before its start does not complete."""
        anim = make_linear(duration=0)
        anim.start(now=100)
        anim.update(now=50)
        assert anim.get_current_values() == {"x": 0}
        assert anim.is_running


class TestControl:
    """start/stop semantics."""

    def test_update_without_start_is_noop(self):
        """An idle animator ignores update()."""
        anim = make_linear()
        anim.update(now=500)
        assert anim.get_current_values() == {"x": 0}

    def test_stop_freezes_values(self):
        """stop() keeps the current values where they were."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=300)
        anim.stop()
        anim.update(now=900)
        assert anim.get_current_values() == {"x": 30.0}
        assert anim.is_running is False

    def test_stop_does_not_commit(self):
        """Stopping mid-flight leaves start values unchanged."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=300)
        anim.stop()
        assert anim.get_start_values() == {"x": 0}

    def test_restart_while_running_resets_progress(self):
        """start() during flight restarts from progress 0 with the same values."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=500)
        anim.start(now=500)
        anim.update(now=500)
        assert anim.get_current_values() == {"x": 0}
        anim.update(now=1000)
        assert anim.get_current_values() == {"x": 50.0}

    def test_force_running_bypasses_timestamp(self):
        """Setting is_running uses the previous start timestamp."""
        anim = make_linear()
        anim.is_running = True
        anim.update(now=400)
        assert anim.get_current_values() == {"x": 40.0}

    def test_force_not_running(self):
        """Clearing is_running behaves like stop()."""
        anim = make_linear()
        anim.start(now=0)
        anim.is_running = False
        anim.update(now=500)
        assert anim.get_current_values() == {"x": 0}


class TestValues:
    """Getters return copies; setters enforce dimensions."""

    def test_getters_return_independent_copies(self):
        """Mutating returned dicts does not affect the animator."""
        anim = make_linear()
        anim.get_current_values()["x"] = 7
        anim.get_start_values()["x"] = 7
        anim.get_end_values()["x"] = 7
        assert anim.get_current_values() == {"x": 0}
        assert anim.get_start_values() == {"x": 0}
        assert anim.get_end_values() == {"x": 100}

    def test_get_values_alias(self):
        """get_values() is the start values."""
        anim = make_linear()
        assert anim.get_values() == anim.get_start_values()

    def test_set_start_values_resets_current(self):
        """set_start_values jumps current values to the new start."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=500)
        anim.set_start_values({"x": 80})
        assert anim.get_current_values() == {"x": 80}
        assert anim.get_start_values() == {"x": 80}
        assert anim.dimension == 1

    def test_set_start_values_affects_running_animation(self):
        """Interpolation continues from the new start."""
        anim = make_linear()
        anim.start(now=0)
        anim.set_start_values({"x": 50})
        anim.update(now=500)
        assert anim.get_current_values() == {"x": 75.0}

    def test_set_start_values_copies_input(self):
        """Caller mutation after set does not leak in."""
        anim = make_linear()
        new = {"x": 10}
        anim.set_start_values(new)
        new["x"] = 999
        assert anim.get_start_values() == {"x": 10}

    @pytest.mark.parametrize("bad", [{}, {"x": 1, "y": 2}, {"y": 1}])
    def test_set_start_values_mismatch(self, bad):
        """Wrong key count or keys raise and leave state unchanged."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=500)
        with pytest.raises(DimensionMismatchError):
            anim.set_start_values(bad)
        assert anim.get_start_values() == {"x": 0}
        assert anim.get_current_values() == {"x": 50.0}
        assert anim.dimension == 1

    @pytest.mark.parametrize("bad", [{}, {"x": 1, "y": 2}, {"y": 1}])
    def test_set_end_values_mismatch(self, bad):
        """Wrong key count or keys raise and leave end values unchanged."""
        anim = make_linear()
        with pytest.raises(DimensionMismatchError):
            anim.set_end_values(bad)
        assert anim.get_end_values() == {"x": 100}

    def test_mismatch_reports_counts(self):
        """The error carries expected and actual keys."""
        anim = Animator(values={"x": 0, "y": 0})
        with pytest.raises(DimensionMismatchError) as info:
            anim.set_end_values({"x": 1})
        assert info.value.expected == ("x", "y")
        assert info.value.actual == ("x",)
        assert "expected 2 dimensions, got 1" in str(info.value)

    def test_setters_reject_non_mapping(self):
        """Setters require a mapping."""
        anim = make_linear()
        with pytest.raises(ConfigError):
            anim.set_end_values([100])
        with pytest.raises(ConfigError):
            anim.set_start_values(5)


class TestDuration:
    """Duration changes apply prospectively."""

    def test_duration_setter(self):
        """duration is readable and writable."""
        anim = make_linear()
        anim.duration = 250
        assert anim.duration == 250

    def test_change_applies_to_next_update(self):
        """The next update uses the new duration from the same start time."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=500)
        anim.duration = 2000
        anim.update(now=1000)
        assert anim.get_current_values() == {"x": 50.0}
        assert anim.is_running

    def test_negative_duration_rejected(self):
        """A negative duration raises and keeps the old value."""
        anim = make_linear()
        with pytest.raises(ValueError):
            anim.duration = -5
        assert anim.duration == 1000


class TestTiming:
    """Elapsed and remaining time."""

    def test_idle_reports_zero(self):
        """Not running: elapsed and remaining are 0."""
        anim = make_linear()
        assert anim.get_elapsed(now=123) == 0
        assert anim.get_remaining(now=123) == 0

    def test_running_reports_elapsed_and_remaining(self):
        """Running: elapsed counts up, remaining counts down."""
        anim = make_linear()
        anim.start(now=1000)
        assert anim.get_elapsed(now=1300) == 300
        assert anim.get_remaining(now=1300) == 700

    def test_remaining_never_negative(self):
        """Past the duration, remaining is 0 until update() stops it."""
        anim = make_linear()
        anim.start(now=0)
        assert anim.get_remaining(now=1500) == 0
        assert anim.get_elapsed(now=1500) == 1500

    def test_after_completion_reports_zero(self):
        """Completed animators report 0 elapsed and remaining."""
        anim = make_linear()
        anim.start(now=0)
        anim.update(now=1000)
        assert anim.get_elapsed(now=1200) == 0
        assert anim.get_remaining(now=1200) == 0

    def test_timing_reads_clock(self):
        """Without now, timing reads the injected clock."""
        clock = ManualClock()
        anim = make_linear(clock=clock)
        anim.start()
        clock.advance(400)
        assert anim.get_elapsed() == 400
        assert anim.get_remaining() == 600


class TestAnimator2D:
    """Position API for two-axis animation."""

    def test_initial_position(self):
        """Starts and targets the construction point."""
        anim = Animator2D(10, 20)
        assert anim.get_current_position() == (10, 20)
        assert anim.get_end_values() == {"x": 10, "y": 20}
        assert anim.dimension_keys == ("x", "y")

    def test_move_to_target(self):
        """set_target_position then start/update moves both axes."""
        anim = Animator2D(0, 0, duration=100, easing="easeLinear")
        anim.set_target_position(50, -50)
        anim.start(now=0)
        anim.update(now=50)
        assert anim.get_current_position() == (25.0, -25.0)
        anim.update(now=100)
        assert anim.get_current_position() == (50, -50)
        assert not anim.is_running

    def test_set_start_position(self):
        """set_start_position moves the current position too."""
        anim = Animator2D(0, 0)
        anim.set_start_position(3, 4)
        assert anim.get_current_position() == (3, 4)
        assert anim.get_start_values() == {"x": 3, "y": 4}

    def test_unknown_easing(self):
        """Animator2D shares the fallback behaviour."""
        seen = []
        anim = Animator2D(easing="bogus", on_unknown_easing=seen.append)
        assert anim.easing_name == "easeInOutSine"
        assert seen == ["bogus"]
