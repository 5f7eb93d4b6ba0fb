"""Tests for sample data and request sequencing."""

from __future__ import annotations

import threading

from snowday.models import Country
from snowday.sample import sample_snapshot
from snowday.scoring import score
from snowday.sequencing import RequestSequencer


class TestSampleSnapshot:
    def test_us_values(self) -> None:
        snapshot = sample_snapshot(Country.US)
        assert snapshot.current_temperature_c == -2
        assert snapshot.daily_min_temp_c == -5
        assert snapshot.daily_max_temp_c == 2
        assert snapshot.daily_snowfall_cm == 7.6
        assert snapshot.daily_precipitation_mm == 8.2
        assert snapshot.current_weather_code == 71

    def test_ca_values(self) -> None:
        snapshot = sample_snapshot("CA")
        assert snapshot.current_temperature_c == -8
        assert snapshot.daily_min_temp_c == -12
        assert snapshot.daily_max_temp_c == -3
        assert snapshot.daily_snowfall_cm == 12.4
        assert snapshot.daily_precipitation_mm == 15.1

    def test_complete(self) -> None:
        for country in Country:
            assert sample_snapshot(country).is_complete

    def test_fixed(self) -> None:
        assert sample_snapshot(Country.US) == sample_snapshot(Country.US)

    def test_scores(self) -> None:
        assert score(sample_snapshot(Country.US), Country.US) == 55
        assert score(sample_snapshot(Country.CA), Country.CA) == 55


class TestRequestSequencer:
    def test_starts_at_zero(self) -> None:
        assert RequestSequencer().latest == 0

    def test_increments(self) -> None:
        sequencer = RequestSequencer()
        assert sequencer.next() == 1
        assert sequencer.next() == 2
        assert sequencer.latest == 2

    def test_is_current(self) -> None:
        sequencer = RequestSequencer()
        first = sequencer.next()
        assert sequencer.is_current(first)
        second = sequencer.next()
        assert not sequencer.is_current(first)
        assert sequencer.is_current(second)

    def test_unique_across_threads(self) -> None:
        sequencer = RequestSequencer()
        seen: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                value = sequencer.next()
                with lock:
                    seen.append(value)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(seen) == list(range(1, 1601))
