"""DPT code conversion to the ETS datapoint subtype identifier.

ETS names datapoint subtypes "DPST-<main>-<sub>" with no zero padding,
while the generator and most documentation write "DPT<main>.<sub>":

    to_ets_id("DPT1.001")   # → "DPST-1-1"
    to_ets_id("DPT14.027")  # → "DPST-14-27"
    to_ets_id("custom")     # → "custom"
"""

import logging
import re

logger = logging.getLogger("etscsv.dpt")

_DPT_RE = re.compile(r"DPT(\d+)\.(\d+)")


def to_ets_id(dpt: str | None) -> str:
    """Convert "DPT<main>.<sub>" to "DPST-<main>-<sub>".

    Anything that does not contain the pattern is returned unchanged, so
    custom or unknown codes never break an export.
    """
    if not dpt:
        return ""
    match = _DPT_RE.search(dpt)
    if not match:
        logger.debug("DPT %r not in DPT<main>.<sub> form, passing through", dpt)
        return dpt
    main, sub = match.group(1), int(match.group(2))
    return f"DPST-{main}-{sub}"
