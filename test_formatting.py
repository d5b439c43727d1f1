import unittest

from cryptoprice.formatting import (
    asset_label,
    format_currency,
    format_date_label,
    price_line,
    unavailable_line,
)


class TestFormatCurrency(unittest.TestCase):

    def test_usd_in_default_locale(self):
        text = format_currency(1234.5, "usd")
        self.assertIn("1.234,50", text)
        self.assertIn("US$", text)

    def test_usd_in_en_us(self):
        self.assertEqual(format_currency(1234.5, "usd", "en-US"), "$1,234.50")

    def test_code_is_upper_cased_for_unknown_symbols(self):
        self.assertEqual(format_currency(10, "chf"), "CHF\xa010,00")

    def test_large_values_grouped(self):
        self.assertEqual(format_currency(65000, "brl"), "R$\xa065.000,00")

    def test_zero_decimal_currency(self):
        self.assertEqual(format_currency(1234567.8, "jpy", "en-US"), "¥1,234,568")

    def test_negative_value(self):
        self.assertEqual(format_currency(-2.5, "usd", "en-US"), "-$2.50")

    def test_unknown_locale_falls_back_to_default(self):
        self.assertEqual(format_currency(1234.5, "usd", "xx-YY"), format_currency(1234.5, "usd"))


class TestLabels(unittest.TestCase):

    def test_date_label_pt_br(self):
        self.assertEqual(format_date_label(1700000000000), "14/11/2023")

    def test_date_label_en_us(self):
        self.assertEqual(format_date_label(1700000000000, "en-US"), "11/14/2023")

    def test_asset_label(self):
        self.assertEqual(asset_label("bitcoin"), "Bitcoin (BTC)")
        self.assertEqual(asset_label("shiba-inu"), "Shiba Inu")

    def test_price_line(self):
        line = price_line("bitcoin", "usd", 65000)
        self.assertEqual(line, "Current Bitcoin (BTC) price in USD: US$\xa065.000,00")

    def test_price_line_without_price(self):
        line = price_line("ethereum", "usd", None)
        self.assertEqual(line, unavailable_line("ethereum", "usd"))
        self.assertIn("unavailable", line)
        self.assertIn("Ethereum", line)


if __name__ == '__main__':
    unittest.main()
