from pointbus.fn_conf_options import FnConfOptions


def test_default_is_empty():
    options = FnConfOptions()
    assert options.default is None
    assert options.status is None


def test_from_str_default():
    options = FnConfOptions.from_str("default 0.753")
    assert options.default == "0.753"
    assert options.status is None


def test_from_str_status_and_default():
    options = FnConfOptions.from_str("default 175 status Invalid")
    assert options.default == "175"
    assert options.status == "Invalid"


def test_from_str_status_before_default():
    options = FnConfOptions.from_str("status ok default 3.345")
    assert options == FnConfOptions(default="3.345", status="ok")


def test_from_str_without_options():
    assert FnConfOptions.from_str("nothing here") == FnConfOptions()


def test_hash_equal_for_equal_options():
    first = FnConfOptions.from_str("default 0.753 status ok")
    second = FnConfOptions(default="0.753", status="ok")
    assert first.hash() == second.hash()


def test_hash_differs_for_different_options():
    assert FnConfOptions(default="1").hash() != FnConfOptions(default="2").hash()
    assert FnConfOptions(status="ok").hash() != FnConfOptions().hash()


def test_hash_format():
    key = FnConfOptions(default="1", status="ok").hash()
    assert key.startswith("default:")
    assert "-status:" in key
    default_part, status_part = key[len("default:"):].split("-status:")
    assert default_part.isdigit()
    assert status_part.isdigit()