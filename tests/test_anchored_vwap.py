# -*- coding: utf-8 -*-
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from pandas_ta_avwap import AnchoredVWAP, IndicatorStatus, hlc3

from conftest import ANCHOR, TradeBar, bar

TOL = Decimal("1e-20")


class TestUpdate:
    def test_scenario(self, anchor):
        ind = AnchoredVWAP(anchor)
        a = ind.update(bar(1, "10", "11", "9", "10.5", 100))
        assert a.status is IndicatorStatus.SUCCESS
        assert a.value == Decimal("10.125")
        assert a.time == anchor + timedelta(minutes=1)

        b = ind.update(bar(2, "11", "12", "10", "11.5", 150))
        assert ind.sum_price_volume == Decimal("2681.25")
        assert ind.sum_volume == Decimal(250)
        assert b.value == Decimal("10.725")
        assert ind.current == b

    def test_three_bars(self, anchor, series_bars):
        ind = AnchoredVWAP(anchor)
        for b in series_bars:
            result = ind.update(b)
        assert result.value == Decimal("5106.25") / Decimal(450)

    def test_float_fields(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind.update(bar(1, 10.0, 11.0, 9.0, 10.5, 100))
        assert result.value == Decimal("10.125")

    def test_bar_at_anchor_is_included(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind.update(bar(0, "5", "5", "5", "5", 10))
        assert result.ok
        assert result.value == Decimal(5)

    def test_pre_anchor_bar_is_rejected(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind.update(bar(-1, "1", "1", "1", "1", 100))
        assert result.status is IndicatorStatus.INVALID_INPUT
        assert result.value == 0
        assert ind.sum_volume == 0
        assert ind.sum_price_volume == 0
        assert ind.samples == 1
        assert not ind.is_ready
        assert ind.current.value == 0

    def test_pre_anchor_bars_do_not_contribute(self, anchor):
        ind = AnchoredVWAP(anchor)
        ind.update(bar(-2, "50", "50", "50", "50", 1000))
        ind.update(bar(-1, "60", "60", "60", "60", 1000))
        result = ind.update(bar(1, "11", "12", "10", "11.5", 150))
        assert result.value == Decimal("11.125")
        assert ind.samples == 3

    def test_missing_bar(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind.update(None)
        assert result.status is IndicatorStatus.INVALID_INPUT
        assert result.time is None
        assert ind.samples == 1

    def test_zero_volume_is_math_error(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind.update(bar(1, "10", "11", "9", "10.5", 0))
        assert result.status is IndicatorStatus.MATH_ERROR
        assert result.value == Decimal("10.5")
        assert not ind.is_ready
        assert ind.current.value == 0

        result = ind.update(bar(2, "11", "12", "10", "11.5", 150))
        assert result.ok
        assert result.value == Decimal("11.125")

    def test_zero_volume_returns_close_for_any_selector(self, anchor):
        ind = AnchoredVWAP(anchor, price="hl2")
        result = ind.update(bar(1, "10", "12", "8", "11", 0))
        assert result.status is IndicatorStatus.MATH_ERROR
        assert result.value == Decimal(11)

    def test_mapping_bar(self, anchor):
        ind = AnchoredVWAP(anchor)
        result = ind({
            "timestamp": anchor, "open": 10, "high": 11, "low": 9,
            "close": 10.5, "volume": 100,
        })
        assert result.value == Decimal("10.125")

    def test_bar_without_time_raises(self, anchor):
        ind = AnchoredVWAP(anchor)
        with pytest.raises(KeyError):
            ind.update({"open": 1, "high": 1, "low": 1, "close": 1, "volume": 1})


class TestProperties:
    def test_price_scaling(self, anchor, series_bars):
        k = Decimal(2)
        base, scaled = AnchoredVWAP(anchor), AnchoredVWAP(anchor)
        for b in series_bars:
            r1 = base.update(b)
            r2 = scaled.update(b._replace(
                open=Decimal(b.open) * k, high=Decimal(b.high) * k,
                low=Decimal(b.low) * k, close=Decimal(b.close) * k,
            ))
            assert abs(r2.value - r1.value * k) < TOL

    def test_volume_scaling(self, anchor, series_bars):
        base, scaled = AnchoredVWAP(anchor), AnchoredVWAP(anchor)
        for b in series_bars:
            r1 = base.update(b)
            r2 = scaled.update(b._replace(volume=b.volume * 10))
            assert abs(r2.value - r1.value) < TOL

    def test_time_shift(self, anchor, series_bars):
        delta = timedelta(days=5)
        base, shifted = AnchoredVWAP(anchor), AnchoredVWAP(anchor + delta)
        for b in series_bars:
            r1 = base.update(b)
            r2 = shifted.update(b._replace(end_time=b.end_time + delta))
            assert r2.value == r1.value
            assert r2.time == r1.time + delta

    def test_zero_volume_bar_is_noop(self, anchor, series_bars):
        ind = AnchoredVWAP(anchor)
        before = ind.update(series_bars[0]).value
        after = ind.update(TradeBar(anchor + timedelta(seconds=90), "99", "99", "99", "99", 0))
        assert after.ok
        assert after.value == before

        ref = AnchoredVWAP(anchor)
        for b in series_bars[:2]:
            expected = ref.update(b)
        assert ind.update(series_bars[1]).value == expected.value


class TestReadiness:
    def test_not_ready_initially(self, anchor):
        ind = AnchoredVWAP(anchor)
        assert not ind.is_ready
        assert ind.samples == 0
        assert ind.current.value == 0
        assert ind.warm_up_period == 1

    def test_ready_after_first_anchored_bar(self, anchor):
        ind = AnchoredVWAP(anchor)
        ind.update(bar(1, "1", "1", "1", "1", 1))
        assert ind.is_ready


class TestReset:
    def test_reset_matches_fresh_instance(self, anchor):
        ind = AnchoredVWAP(anchor)
        ind.update(bar(-1, "1", "1", "1", "1", 100))
        ind.update(bar(1, "2", "2", "2", "2", 100))
        ind.update(bar(2, "3", "3", "3", "3", 100))
        assert ind.is_ready
        assert ind.current.value != 0

        ind.reset()
        fresh = AnchoredVWAP(anchor)
        assert ind.anchor == fresh.anchor
        assert ind.samples == fresh.samples == 0
        assert ind.sum_volume == fresh.sum_volume == 0
        assert ind.sum_price_volume == fresh.sum_price_volume == 0
        assert ind.is_ready is fresh.is_ready is False
        assert ind.current == fresh.current

        result = ind.update(bar(5, "5", "5", "5", "5", 100))
        assert ind.is_ready
        assert result.value == Decimal(5)


class TestConstruction:
    def test_default_name(self, anchor):
        assert AnchoredVWAP(anchor).name == "AVWAP_20240510093000"

    def test_custom_name(self, anchor):
        assert AnchoredVWAP(anchor, name="open_avwap").name == "open_avwap"

    def test_naive_anchor(self):
        anchor = datetime(2024, 1, 15)
        ind = AnchoredVWAP(anchor)
        assert ind.update(TradeBar(anchor - timedelta(days=1), 1, 1, 1, 1, 1)).status \
            is IndicatorStatus.INVALID_INPUT
        assert ind.update(TradeBar(anchor, "11", "12", "10", "11.5", 150)).value == Decimal("11.125")

    def test_named_price(self, anchor):
        ind = AnchoredVWAP(anchor, price="close")
        assert ind.update(bar(1, "10", "11", "9", "10.5", 100)).value == Decimal("10.5")

    def test_callable_price(self, anchor):
        ind = AnchoredVWAP(anchor, price=hlc3)
        assert ind.update(bar(1, "10", "11", "8", "11", 100)).value == Decimal(10)

    def test_unknown_price(self, anchor):
        with pytest.raises(ValueError):
            AnchoredVWAP(anchor, price="median")

    def test_anchor_is_read_only(self, anchor):
        ind = AnchoredVWAP(anchor)
        with pytest.raises(AttributeError):
            ind.anchor = anchor + timedelta(days=1)
