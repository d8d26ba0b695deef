import pytest

from firewatch.code import AlarmIndicators, Code, CodeEntry, CodeOrigin


def _setup():
    indicators = AlarmIndicators()
    keypad = CodeEntry()
    serial = CodeEntry()
    sent = []
    code = Code(
        indicators,
        {CodeOrigin.KEYPAD: keypad, CodeOrigin.PC_SERIAL: serial},
        sent.append,
    )
    return code, indicators, keypad, serial, sent


def _enter(entry, keys):
    entry.keys = list(keys)
    entry.complete = True


def test_default_code_matches():
    code, *_ = _setup()
    assert code.match("1805") is True
    assert code.match("1806") is False


def test_short_candidate_does_not_match():
    code, *_ = _setup()
    assert code.match("18") is False


def test_keypad_correct_code_clears_indicators():
    code, indicators, keypad, _, sent = _setup()
    indicators.incorrect_code = True
    _enter(keypad, "1805")
    assert code.match_from(CodeOrigin.KEYPAD) is True
    assert indicators == AlarmIndicators()
    assert keypad.complete is False
    assert sent == []


def test_keypad_wrong_code_sets_incorrect():
    code, indicators, keypad, _, _ = _setup()
    _enter(keypad, "0000")
    assert code.match_from(CodeOrigin.KEYPAD) is False
    assert indicators.incorrect_code is True
    assert indicators.system_blocked is False
    assert code.incorrect_attempts == 1


def test_incomplete_entry_is_not_checked():
    code, indicators, keypad, _, _ = _setup()
    keypad.keys = list("0000")
    assert code.match_from(CodeOrigin.KEYPAD) is False
    assert indicators.incorrect_code is False
    assert code.incorrect_attempts == 0


def test_five_wrong_codes_block_system():
    code, indicators, keypad, _, _ = _setup()
    for attempt in range(5):
        assert indicators.system_blocked is False
        _enter(keypad, "9999")
        code.match_from(CodeOrigin.KEYPAD)
    assert indicators.system_blocked is True


def test_correct_code_unblocks_and_resets_count():
    code, indicators, keypad, _, _ = _setup()
    for _ in range(5):
        _enter(keypad, "9999")
        code.match_from(CodeOrigin.KEYPAD)
    _enter(keypad, "1805")
    assert code.match_from(CodeOrigin.KEYPAD) is True
    assert indicators.system_blocked is False
    assert code.incorrect_attempts == 0


def test_serial_correct_reports_message():
    code, _, _, serial, sent = _setup()
    _enter(serial, "1805")
    assert code.match_from(CodeOrigin.PC_SERIAL) is True
    assert sent == ["\r\nThe code is correct\r\n\r\n"]


def test_serial_incorrect_reports_message():
    code, indicators, _, serial, sent = _setup()
    _enter(serial, "1111")
    assert code.match_from(CodeOrigin.PC_SERIAL) is False
    assert sent == ["\r\nThe code is incorrect\r\n\r\n"]
    assert indicators.incorrect_code is True
    assert serial.complete is False


def test_write_replaces_code():
    code, _, keypad, _, _ = _setup()
    code.write("4321")
    assert code.match("4321") is True
    assert code.match("1805") is False
    _enter(keypad, "4321")
    assert code.match_from(CodeOrigin.KEYPAD) is True


def test_write_rejects_wrong_length():
    code, *_ = _setup()
    with pytest.raises(ValueError):
        code.write("123")


def test_unknown_origin_source_matches_nothing():
    indicators = AlarmIndicators()
    code = Code(indicators, {})
    assert code.match_from(CodeOrigin.KEYPAD) is False
    assert indicators == AlarmIndicators()