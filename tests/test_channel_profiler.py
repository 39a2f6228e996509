from pulseai.core import constants
from pulseai.core.models import ChannelProfile
from pulseai.heuristics import count_transitions, profile_channels


def test_policy_constants():
    assert constants.PROFILE_WINDOW_ROWS == 20
    assert constants.DIGITAL_MAX_DISTINCT == 4
    assert constants.CLOCK_MIN_TRANSITIONS == 5
    assert constants.DATA_MAX_TRANSITIONS == 10
    assert constants.MISSING_VALUE == "0"


def test_count_transitions():
    assert count_transitions([]) == 0
    assert count_transitions(["1"]) == 0
    assert count_transitions(["0", "1", "1", "0"]) == 2


def test_time_column_skipped():
    channels = profile_channels(["Time", "A"], [("0.0", "1"), ("0.1", "0")])
    assert [ch.name for ch in channels] == ["A"]
    assert channels[0].index == 1


def test_sample_column_skipped_case_insensitive():
    channels = profile_channels(["SampleNum", "A"], [("0", "1")])
    assert [ch.name for ch in channels] == ["A"]


def test_first_column_profiled_without_time_marker():
    channels = profile_channels(["Index", "A"], [("0", "1"), ("1", "1")])
    assert [ch.name for ch in channels] == ["Index", "A"]
    assert channels[0].index == 0


def test_time_marker_only_applies_to_first_column():
    channels = profile_channels(["A", "Time"], [("1", "0.0")])
    assert [ch.name for ch in channels] == ["A", "Time"]


def test_names_strip_quotes_and_whitespace():
    channels = profile_channels(["Time", ' "SDA" ', "'SCL'"], [("0", "1", "0")])
    assert [ch.name for ch in channels] == ["SDA", "SCL"]


def test_distinct_and_transition_counts():
    rows = [("0", v) for v in ["0", "1", "1", "0", "2"]]
    (channel,) = profile_channels(["Time", "A"], rows)
    assert channel == ChannelProfile(name="A", index=1, distinct_value_count=3, transition_count=3)


def test_ragged_rows_default_to_zero():
    rows = [("0.0", "1", "1"), ("0.1", "1"), ("0.2",), ("0.3", "", "1")]
    a, b = profile_channels(["Time", "A", "B"], rows)
    # A: 1, 1, 0, 0
    assert a.transition_count == 1
    assert a.distinct_value_count == 2
    # B: 1, 0, 0, 1
    assert b.transition_count == 2
    assert b.distinct_value_count == 2


def test_window_limited_to_first_twenty_rows():
    rows = [("t", "0")] * 20 + [("t", str(i)) for i in range(200)]
    (channel,) = profile_channels(["Time", "A"], rows)
    assert channel.distinct_value_count == 1
    assert channel.transition_count == 0


class _Untouchable(tuple):
    def __len__(self):
        raise AssertionError("row outside the sample window was read")

    def __getitem__(self, item):
        raise AssertionError("row outside the sample window was read")


def test_large_capture_reads_only_window():
    rows = [("t", "1" if i % 2 else "0") for i in range(20)]
    rows += [_Untouchable(("t", "1")) for _ in range(10_000)]
    (channel,) = profile_channels(["Time", "A"], rows)
    assert channel.transition_count == 19


def test_short_capture_uses_all_rows():
    rows = [("t", "0"), ("t", "1"), ("t", "0")]
    (channel,) = profile_channels(["Time", "A"], rows)
    assert channel.transition_count == 2


def test_empty_capture():
    assert profile_channels([], []) == ()
    channels = profile_channels(["Time", "A"], [])
    assert channels[0].distinct_value_count == 0
    assert channels[0].transition_count == 0


def test_derived_flags():
    quiet = ChannelProfile("q", 1, distinct_value_count=1, transition_count=0)
    assert quiet.is_digital and not quiet.is_clock_like and not quiet.is_data_like

    busy = ChannelProfile("b", 1, distinct_value_count=2, transition_count=6)
    assert busy.is_clock_like and busy.is_data_like

    fast = ChannelProfile("f", 1, distinct_value_count=2, transition_count=11)
    assert fast.is_clock_like and not fast.is_data_like

    analog = ChannelProfile("a", 1, distinct_value_count=5, transition_count=4)
    assert not analog.is_digital and analog.is_data_like

    edge = ChannelProfile("e", 1, distinct_value_count=4, transition_count=5)
    assert edge.is_digital and not edge.is_clock_like and edge.is_data_like
