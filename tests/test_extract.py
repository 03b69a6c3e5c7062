"""Identity and counter extraction against saved device pages."""

import pytest

from adapters.browser import render_source
from core.errors import ExtractionError
from core.extract import (
    ColumnCountFilter,
    CssIdentity,
    Document,
    LabelFilter,
    PathGrid,
    QuotedValueIdentity,
    XPathIdentity,
    parse_counter_text,
)
from tests.utils import read_fixture


@pytest.fixture
def samsung_doc():
    return Document(read_fixture("samsung_m4080fx_counters.html"))


@pytest.fixture
def laser_doc():
    return Document(render_source(read_fixture("hp_laser_408_counters.json")))


class TestIdentity:
    def test_css_identity_is_trimmed(self, samsung_doc):
        assert CssIdentity("#snValue").extract(samsung_doc) == "ZDDSBJKF300012"

    def test_css_identity_missing_element(self, samsung_doc):
        assert CssIdentity("#nothing").extract(samsung_doc) == ""

    def test_xpath_identity_by_dotted_id(self):
        doc = Document(read_fixture("hp_e52645dn_usage.html"))
        xp = '//*[@id="UsagePage.DeviceInformation.DeviceSerialNumber"]'
        assert XPathIdentity(xp).extract(doc) == "SN123"

    def test_xpath_identity_keeps_whitespace(self):
        doc = Document('<html><body><span id="sn"> SN123 </span></body></html>')
        assert XPathIdentity('//*[@id="sn"]').extract(doc) == " SN123 "

    def test_quoted_value_from_source_line(self, laser_doc):
        ident = QuotedValueIdentity("/html/body/table/tbody/tr[2]/td[2]")
        assert ident.extract(laser_doc) == "CNB1R4X0QK"

    def test_quoted_value_without_quotes(self):
        doc = Document(render_source("{\n  serialNumber: 42,\n}"))
        assert QuotedValueIdentity("/html/body/table/tbody/tr[2]/td[2]").extract(doc) == ""


class TestLabelFilter:
    def test_keeps_only_named_rows_in_page_order(self, samsung_doc):
        strategy = LabelFilter("#counterTotalList tr", ("Total de impressões", "Simplex Mono", "Frente e verso"))

        assert strategy.extract(samsung_doc) == [
            ["Simplex Mono", "10,482"],
            ["Frente e verso", "3,117"],
            ["Total de impressões", "13,599"],
        ]
        assert strategy.label_row() is None

    def test_no_matching_rows(self, samsung_doc):
        assert LabelFilter("#counterTotalList tr", ("Color Total",)).extract(samsung_doc) == []


class TestColumnCountFilter:
    ROWS = (
        '[id="UsagePage.EquivalentImpressionsTable"] tbody tr, '
        '[id="UsagePage.EquivalentImpressionsTable"] tfoot tr'
    )

    def test_four_columns_body_then_footer(self):
        doc = Document(read_fixture("hp_e57540dn_usage.html"))

        rows = ColumnCountFilter(self.ROWS, columns=4).extract(doc)

        assert rows == [
            ["Print", "8,140.0", "2,010.0", "10,150.0"],
            ["Copy", "300.0", "45.0", "345.0"],
            ["Total", "8,452.0", "2,055.0", "10,507.0"],
        ]

    def test_two_columns_with_label_row(self):
        doc = Document(read_fixture("hp_e52645dn_usage.html"))
        strategy = ColumnCountFilter(self.ROWS, columns=2, labels=("Type", "Total"))

        assert strategy.extract(doc) == [["Mono", "42"], ["Color", "7"]]
        assert strategy.label_row() == ["Type", "Total"]


class TestPathGrid:
    def _line(self, n):
        return f"/html/body/table/tbody/tr[{n}]/td[2]"

    def test_three_by_three_grid(self, laser_doc):
        grid = PathGrid(
            ("Print", "Report", "Total"),
            (
                ("Simplex Mono", (self._line(13), self._line(16), self._line(17))),
                ("Duplex", (self._line(23), self._line(26), self._line(27))),
                ("Total Prints", (self._line(33), self._line(36), self._line(37))),
            ),
        )

        assert grid.label_row() == ["", "Print", "Report", "Total"]
        assert grid.extract(laser_doc) == [
            ["Simplex Mono", "1234", "56", "1290"],
            ["Duplex", "2500", "4", "2504"],
            ["Total Prints", "3734", "60", "3794"],
        ]

    def test_missing_line_raises(self, laser_doc):
        grid = PathGrid(("Total",), (("Duplex", (self._line(400),)),))
        with pytest.raises(ExtractionError):
            grid.extract(laser_doc)

    def test_path_count_must_match_metrics(self, laser_doc):
        grid = PathGrid(("Print", "Total"), (("Duplex", (self._line(23),)),))
        with pytest.raises(ExtractionError, match="expected 2 paths"):
            grid.extract(laser_doc)


class TestParseCounterText:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Total: 1,234", "1234"),
            ("    GXI_DUPLEX_TOTAL: 2,504,", "2504"),
            ("Report: 56", "56"),
            ("Total: 1,234,567", "1234567"),
            ("Total: 12:34", "12"),
        ],
    )
    def test_strips_label_and_separators(self, text, expected):
        assert parse_counter_text(text) == expected

    @pytest.mark.parametrize("text", [None, "no delimiter here"])
    def test_rejects_text_without_delimiter(self, text):
        with pytest.raises(ExtractionError):
            parse_counter_text(text)


def test_empty_document_has_no_tree():
    with pytest.raises(ExtractionError, match="empty document"):
        Document("").xpath_text("//td")


def test_render_source_one_row_per_line():
    doc = Document(render_source('{\n  a: "<b>",\n}'))
    assert doc.xpath_text("/html/body/table/tbody/tr[2]/td[2]") == '  a: "<b>",'
    assert len(doc.tree.xpath("//tr")) == 3
