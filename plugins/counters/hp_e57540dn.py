# plugins/counters/hp_e57540dn.py
from __future__ import annotations
from core.extract import ColumnCountFilter, XPathIdentity
from core.registry import ModelDefinition

USAGE_URL = "http://{ip}/hp/device/InternalPages/Index?id=UsagePage"
SERIAL_XPATH = '//*[@id="UsagePage.DeviceInformation.DeviceSerialNumber"]'
IMPRESSION_ROWS = (
    '[id="UsagePage.EquivalentImpressionsTable"] tbody tr, '
    '[id="UsagePage.EquivalentImpressionsTable"] tfoot tr'
)

# label + three numeric columns
MODEL = ModelDefinition(
    name="HP E57540DN",
    url=USAGE_URL,
    ignore_https_errors=True,
    identity=XPathIdentity(SERIAL_XPATH),
    counters=ColumnCountFilter(IMPRESSION_ROWS, columns=4),
    wait_until="networkidle",
)
