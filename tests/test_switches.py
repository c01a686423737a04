from optspec.switches import (
    expand_switches,
    flag_value_for,
    is_end_of_args,
    is_negatable,
    is_switch,
    name_for,
)


def test_name_for_strips_prefixes():
    assert name_for("-p") == "p"
    assert name_for("--port") == "port"
    assert name_for("--no-verbose") == "verbose"
    assert name_for("--[no-]verbose") == "verbose"


def test_name_for_strips_only_one_prefix():
    assert name_for("--dry-run") == "dry-run"
    assert name_for("---x") == "-x"


def test_is_switch():
    assert is_switch("-p")
    assert is_switch("--")
    assert not is_switch("port")
    assert not is_switch(3000)


def test_is_negatable():
    assert is_negatable("--[no-]verbose")
    assert not is_negatable("--verbose")
    assert not is_negatable("-v")


def test_expand_negatable_flag():
    assert expand_switches(["--[no-]verbose"], True) == ["--no-verbose", "--verbose"]


def test_expand_plain_long_flag_adds_negative_form():
    assert expand_switches(["-d", "--debug"], True) == ["-d", "--no-debug", "--debug"]


def test_expand_value_switches_pass_through():
    assert expand_switches(["-p", "--port"], False) == ["-p", "--port"]


def test_generated_negatives_read_false():
    for switch in expand_switches(["-v", "--[no-]verbose", "--loud"], True):
        assert flag_value_for(switch) == (not switch.startswith("--no-"))
    assert flag_value_for("--no-loud") is False
    assert flag_value_for("-v") is True


def test_end_of_args():
    assert is_end_of_args("--")
    assert not is_end_of_args("---")
    assert not is_end_of_args("-")
