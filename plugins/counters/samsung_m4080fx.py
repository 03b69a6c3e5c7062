# plugins/counters/samsung_m4080fx.py
from __future__ import annotations
from core.extract import CssIdentity, LabelFilter
from core.registry import ModelDefinition

# labels as the device's counters page prints them
COUNTER_LABELS = (
    "Simplex Mono",
    "Frente e verso",
    "Total de impressões",
)

MODEL = ModelDefinition(
    name="Samsung M4080FX",
    url="http://{ip}/sws.application/information/countersView.sws",
    identity=CssIdentity("#snValue"),
    counters=LabelFilter("#counterTotalList tr", COUNTER_LABELS),
    # the counters table is filled in by script after load
    wait_until="networkidle",
)
