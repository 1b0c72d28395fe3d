"""KNX Datapoint Type helpers for the ETS export."""

from .ets_id import to_ets_id

__all__ = ["to_ets_id"]
