# -*- coding: utf-8 -*-
from warnings import warn

from numpy import nan
from pandas import DatetimeIndex, Series
from pandas_ta_avwap.utils import v_offset, v_series, v_timestamp


def _price(open_, high, low, close, price):
    if price == "ohlc4":
        return 0.25 * (open_ + high + low + close)
    if price == "hlc3":
        return (high + low + close) / 3.0
    if price == "hl2":
        return 0.5 * (high + low)
    if price == "close":
        return close
    raise ValueError(f"Unknown price selector '{price}'")


def avwap(
    open_, high, low, close, volume, anchor=None, price=None,
    offset=None, **kwargs
):
    """Anchored Volume Weighted Average Price (AVWAP)

    Cumulative volume weighted price over the bars ending at or after a
    fixed anchor timestamp. Matches the streaming ``AnchoredVWAP``: bars
    before the anchor, and anchored bars while cumulative volume is still
    zero, are NaN.

    Args:
        open_ (pd.Series): Series of 'open's
        high (pd.Series): Series of 'high's
        low (pd.Series): Series of 'low's
        close (pd.Series): Series of 'close's
        volume (pd.Series): Series of 'volume's. Its DatetimeIndex holds the
            bar end times.
        anchor (str | datetime | pd.Timestamp): First bar time included.
            Naive values are UTC.
        price (str): Representative price. One of 'ohlc4', 'hlc3', 'hl2',
            'close'. Default: 'ohlc4'
        offset (int): How many periods to offset the result. Default: 0

    Kwargs:
        fillna (value, optional): pd.DataFrame.fillna(value)

    Returns:
        pd.Series: New feature generated.
    """
    # Validate
    open_ = v_series(open_)
    high = v_series(high)
    low = v_series(low)
    close = v_series(close)
    volume = v_series(volume)
    if any(s is None for s in (open_, high, low, close, volume)):
        return None
    if len({open_.size, high.size, low.size, close.size, volume.size}) > 1:
        return None
    if anchor is None or not isinstance(volume.index, DatetimeIndex):
        return None

    price = str(price).lower() if price is not None else "ohlc4"
    offset = v_offset(offset)
    anchor = v_timestamp(anchor, volume.index.tz)

    # Calculate
    tp = _price(open_, high, low, close, price)
    anchored = Series(volume.index >= anchor, index=volume.index)
    if not anchored.any():
        warn(
            f"avwap: no bars at or after anchor {anchor}; result is all NaN.",
            UserWarning,
            stacklevel=2,
        )

    cum_pv = (tp * volume).where(anchored, 0.0).cumsum()
    cum_vol = volume.where(anchored, 0.0).cumsum()
    valid = anchored & (cum_vol != 0)
    result = (cum_pv / cum_vol.where(valid, nan)).where(valid, nan)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"AVWAP_{price.upper()}"
    result.category = "volume"

    return result
