# plugins/counters/hp_e52645dn.py
from __future__ import annotations
from core.extract import ColumnCountFilter, XPathIdentity
from core.registry import ModelDefinition
from plugins.counters.hp_e57540dn import IMPRESSION_ROWS, SERIAL_XPATH, USAGE_URL

MODEL = ModelDefinition(
    name="HP E52645DN",
    url=USAGE_URL,
    ignore_https_errors=True,
    identity=XPathIdentity(SERIAL_XPATH),
    counters=ColumnCountFilter(IMPRESSION_ROWS, columns=2, labels=("Type", "Total")),
)
