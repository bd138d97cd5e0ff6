from __future__ import annotations

import time

from utils import ids
from utils.translations import TRANSLATIONS, translate, translation_table


def test_new_id_is_millisecond_timestamp():
    before = time.time_ns() // 1_000_000
    value = ids.new_id()

    assert value.isdigit()
    assert int(value) >= before


def test_new_id_strictly_increasing_within_same_millisecond(monkeypatch):
    frozen = 1_700_000_000_000 * 1_000_000
    monkeypatch.setattr(ids.time, "time_ns", lambda: frozen)
    monkeypatch.setattr(ids, "_last_issued", 0)

    issued = [ids.new_id() for _ in range(5)]

    assert issued == [str(1_700_000_000_000 + n) for n in range(5)]


def test_translate_falls_back_to_key():
    assert translate("status.paid", "en") == "Paid"
    assert translate("status.paid", "ar") == "مدفوع"
    assert translate("no.such.key", "en") == "no.such.key"


def test_translate_defaults_to_arabic():
    assert translate("app.close") == "إغلاق"


def test_both_languages_share_keys():
    assert TRANSLATIONS["ar"].keys() == TRANSLATIONS["en"].keys()


def test_translation_table_is_a_copy():
    table = translation_table("en")
    table["strings"]["app.title"] = "changed"

    assert translate("app.title", "en") == "Expense Tracker"
