"""Unit tests for RandomStream."""

import pytest

from tandemsim.core.random_stream import RandomStream, RandomStreamExhausted


class TestRandomStream:
    def test_returns_values_in_order(self):
        stream = RandomStream([0.1, 0.2, 0.3])

        assert [stream.next(), stream.next(), stream.next()] == [0.1, 0.2, 0.3]

    def test_tracks_cursor(self):
        stream = RandomStream([0.1, 0.2, 0.3])
        stream.next()

        assert stream.index == 1
        assert stream.remaining == 2
        assert len(stream) == 3
        assert not stream.exhausted

    def test_raises_when_exhausted(self):
        stream = RandomStream([0.4])
        stream.next()

        assert stream.exhausted
        with pytest.raises(RandomStreamExhausted) as excinfo:
            stream.next()
        assert excinfo.value.consumed == 1

    def test_failed_draw_does_not_move_cursor(self):
        stream = RandomStream([])

        with pytest.raises(RandomStreamExhausted):
            stream.next()
        assert stream.index == 0

    def test_copies_input(self):
        values = [0.5]
        stream = RandomStream(values)
        values.append(0.9)

        assert len(stream) == 1

    def test_accepts_generators(self):
        stream = RandomStream(x / 10 for x in range(3))

        assert len(stream) == 3
        assert stream.next() == 0.0


class TestUniform:
    def test_maps_sample_onto_range(self):
        stream = RandomStream([0.5, 0.25])

        assert stream.uniform(0.0, 5.0) == 2.5
        assert stream.uniform(2.0, 6.0) == 3.0

    def test_degenerate_range_still_consumes_sample(self):
        stream = RandomStream([0.7, 0.1])

        assert stream.uniform(3.0, 3.0) == 3.0
        assert stream.index == 1
